import logging
from typing import Callable, List
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import SQLAlchemyError

from afinidade.db.database import SessionLocal
from afinidade.models.models import Politico, PoliticoTag
from afinidade.schemas.politico import Candidato, TagCandidato
from afinidade.services.exceptions import ProvedorIndisponivelError

logger = logging.getLogger(__name__)


class PoliticoService:
    """Leitura dos políticos elegíveis para o match usando SQLAlchemy."""

    @staticmethod
    def _to_candidato(p: Politico) -> Candidato:
        """Converte ORM -> Pydantic"""
        return Candidato(
            id=p.id,
            nome=p.nome,
            partido=p.partido,
            uf=p.uf,
            foto_url=p.foto_url,
            tags=[TagCandidato.model_validate(pt.tag) for pt in p.tags],
        )

    @staticmethod
    def listar_politicos_para_match(db: Session) -> List[Candidato]:
        try:
            stmt = (
                select(Politico)
                .where(Politico.ativo.is_(True))
                .options(selectinload(Politico.tags).joinedload(PoliticoTag.tag))
                .order_by(Politico.nome)
            )
            politicos = db.execute(stmt).scalars().all()
            return [PoliticoService._to_candidato(p) for p in politicos]
        except SQLAlchemyError as e:
            logger.error("Erro ao listar políticos para o match: %s", str(e))
            raise ProvedorIndisponivelError("Erro ao buscar políticos para o match") from e


class ProvedorPoliticosSQL:
    """Provedor de candidatos que abre uma sessão por consulta."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self.session_factory = session_factory

    def listar_candidatos_com_tags(self) -> List[Candidato]:
        db = self.session_factory()
        try:
            return PoliticoService.listar_politicos_para_match(db)
        finally:
            db.close()
