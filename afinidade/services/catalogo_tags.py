"""Catálogo imutável de tags: slug -> categoria e justificativa."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from afinidade.data.tag_definitions import TAG_DEFINITIONS
from afinidade.schemas.catalogo import DefinicaoTag

CATEGORIA_PADRAO = "Geral"


def motivo_generico(nome_tag: str) -> str:
    return f"Vocês convergem em {nome_tag}"


class CatalogoTags(Mapping):
    """Tabela de consulta de tags montada uma vez na inicialização.

    Tags ausentes não são erro: caem na categoria "Geral" e num texto
    de justificativa genérico.
    """

    def __init__(self, definicoes: Iterable[DefinicaoTag]) -> None:
        self._definicoes = MappingProxyType({d.slug: d for d in definicoes})

    def __getitem__(self, slug: str) -> DefinicaoTag:
        return self._definicoes[slug]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definicoes)

    def __len__(self) -> int:
        return len(self._definicoes)

    def categoria(self, slug: str, padrao: str = CATEGORIA_PADRAO) -> str:
        definicao = self._definicoes.get(slug)
        return definicao.categoria if definicao else padrao

    def texto_motivo(self, slug: str, nome_tag: Optional[str] = None) -> str:
        definicao = self._definicoes.get(slug)
        if definicao:
            return definicao.justificativa.texto_motivo
        return motivo_generico(nome_tag or slug)


CATALOGO_TAGS = CatalogoTags(TAG_DEFINITIONS.values())
