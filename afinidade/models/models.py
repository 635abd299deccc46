import sqlalchemy as sa
from sqlalchemy.orm import relationship
from afinidade.db.database import Base


class Politico(Base):
    __tablename__ = "politicos"
    id = sa.Column(sa.String(50), primary_key=True)  # id da Câmara
    nome = sa.Column(sa.String(255), nullable=False)
    partido = sa.Column(sa.String(50), nullable=False)
    uf = sa.Column(sa.String(2))
    foto_url = sa.Column(sa.Text)
    ativo = sa.Column(sa.Boolean, default=True, nullable=False)

    tags = relationship("PoliticoTag", back_populates="politico", cascade="all, delete-orphan")


class Tag(Base):
    __tablename__ = "tags"
    id = sa.Column(sa.Integer, primary_key=True, autoincrement=True)
    slug = sa.Column(sa.String(100), unique=True, nullable=False, index=True)
    nome = sa.Column(sa.String(255), nullable=False)
    categoria = sa.Column(sa.String(100))


class PoliticoTag(Base):
    __tablename__ = "politicos_tags"
    politico_id = sa.Column(sa.String(50), sa.ForeignKey("politicos.id", ondelete="CASCADE"), primary_key=True)
    tag_id = sa.Column(sa.Integer, sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)

    politico = relationship("Politico", back_populates="tags")
    tag = relationship("Tag", lazy="joined")
