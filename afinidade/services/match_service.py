'''Serviço de match: junta cache, cálculo de afinidade e arquétipo'''

import logging
import os
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from afinidade.schemas.match import MetadadosMatch, ResultadoMatch
from afinidade.schemas.politico import Candidato
from afinidade.services.afinidade_service import calcular_afinidades
from afinidade.services.arquetipo_service import (
    calcular_forca_match,
    categorias_dominantes,
    classificar_arquetipo,
)
from afinidade.services.cache_candidatos import CacheCandidatos
from afinidade.services.catalogo_tags import CATALOGO_TAGS, CatalogoTags
from afinidade.services.politico_service import ProvedorPoliticosSQL

load_dotenv()

logger = logging.getLogger(__name__)

CACHE_TTL_SEGUNDOS = float(os.getenv("MATCH_CACHE_TTL_SEGUNDOS", "300"))
TOP_POLITICOS = int(os.getenv("MATCH_TOP_POLITICOS", "6"))
TOP_PARTIDOS = int(os.getenv("MATCH_TOP_PARTIDOS", "5"))


class MatchService:
    """Calcula o resultado do quiz contra os políticos cadastrados."""

    def __init__(self, cache: CacheCandidatos,
                 catalogo: CatalogoTags = CATALOGO_TAGS,
                 top_politicos: int = TOP_POLITICOS,
                 top_partidos: int = TOP_PARTIDOS) -> None:
        self.cache = cache
        self.catalogo = catalogo
        self.top_politicos = top_politicos
        self.top_partidos = top_partidos

    def calcular(self, pontuacoes: Mapping[str, float],
                 candidatos: Optional[Sequence[Candidato]] = None) -> ResultadoMatch:
        if candidatos is None:
            candidatos = self.cache.obter_candidatos()

        resultado = calcular_afinidades(pontuacoes, candidatos, self.catalogo)
        top_politicos = resultado.ranking[:self.top_politicos]
        top_partidos = resultado.partidos[:self.top_partidos]

        melhor = top_politicos[0] if top_politicos else None
        metadados = MetadadosMatch(
            arquetipo=classificar_arquetipo(pontuacoes),
            forca_match=calcular_forca_match(melhor.percentual) if melhor else "weak",
            categorias_dominantes=categorias_dominantes(melhor.pontuacoes_categoria) if melhor else [],
        )
        logger.info(
            "Match calculado: %d tags do usuário, arquétipo %s, melhor afinidade %s%%",
            len(pontuacoes), metadados.arquetipo.id, melhor.percentual if melhor else 0,
        )

        return ResultadoMatch(
            top_politicos=top_politicos,
            top_partidos=top_partidos,
            pontuacoes_usuario=dict(pontuacoes),
            metadados=metadados,
        )


def criar_match_service() -> MatchService:
    """Monta o serviço com o provedor SQL; chamar uma vez por processo."""
    cache = CacheCandidatos(ProvedorPoliticosSQL(), ttl_segundos=CACHE_TTL_SEGUNDOS)
    return MatchService(cache)
