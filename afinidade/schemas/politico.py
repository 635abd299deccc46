"""Modelos Pydantic para os candidatos usados no cálculo de afinidade."""

from typing import Optional, List
from pydantic import BaseModel, Field


class TagCandidato(BaseModel):
    """Tag atribuída a um político (associação simples, sem peso)."""
    slug: str = Field(min_length=1)
    nome: str
    categoria: Optional[str] = None
    model_config = {
        "from_attributes": True
    }


class PoliticoBase(BaseModel):
    """Modelo base para a classe Politico."""
    nome: str = Field(
        max_length=255,
        min_length=1,
        )
    partido: str = Field(
        max_length=50,
        min_length=1,)
    model_config = {
        "from_attributes": True
    }


class PoliticoResumo(PoliticoBase):
    """Dados de exibição de um político no resultado do match."""
    id: str
    foto_url: Optional[str] = None


class Candidato(PoliticoResumo):
    """Político elegível para o match, com o conjunto de tags atribuídas."""
    uf: Optional[str] = Field(default=None, max_length=2)
    tags: List[TagCandidato] = Field(default_factory=list)

    def resumo(self) -> PoliticoResumo:
        return PoliticoResumo(
            id=self.id,
            nome=self.nome,
            partido=self.partido,
            foto_url=self.foto_url,
        )
