'''Cálculo de afinidade entre o usuário e os políticos'''

import logging
import math
from typing import Dict, List, Mapping, Sequence

from afinidade.schemas.match import (
    PontuacaoCategoria,
    ResultadoAfinidade,
    ResultadoCandidato,
    ResultadoPartido,
    TagCoincidente,
)
from afinidade.schemas.politico import Candidato
from afinidade.services.catalogo_tags import CATALOGO_TAGS, CatalogoTags

logger = logging.getLogger(__name__)


def arredondar(valor: float) -> int:
    """Arredonda meio para cima (0.5 -> 1), como o resultado exibido no site."""
    return math.floor(valor + 0.5)


def _limitar(valor: float, minimo: float = 0.0, maximo: float = 100.0) -> float:
    return max(minimo, min(maximo, valor))


def mapa_categorias(candidatos: Sequence[Candidato], catalogo: CatalogoTags) -> Dict[str, str]:
    """slug -> categoria: a categoria vinda do banco prevalece sobre a do catálogo."""
    categorias = {slug: definicao.categoria for slug, definicao in catalogo.items()}
    for candidato in candidatos:
        for tag in candidato.tags:
            if tag.categoria:
                categorias[tag.slug] = tag.categoria
    return categorias


def totais_usuario_por_categoria(pontuacoes: Mapping[str, float],
                                 categorias: Mapping[str, str],
                                 catalogo: CatalogoTags) -> Dict[str, float]:
    totais: Dict[str, float] = {}
    for slug, peso in pontuacoes.items():
        cat = categorias.get(slug) or catalogo.categoria(slug)
        totais[cat] = totais.get(cat, 0) + abs(peso)
    return totais


def calcular_afinidade_candidato(pontuacoes: Mapping[str, float],
                                 candidato: Candidato,
                                 categorias: Mapping[str, str],
                                 totais_categoria: Mapping[str, float],
                                 catalogo: CatalogoTags = CATALOGO_TAGS) -> ResultadoCandidato:
    """Compara o vetor do usuário com as tags de um político.

    O total possível usa o valor absoluto dos pesos do usuário, mas o obtido
    soma o peso com sinal: ter uma tag que o usuário pontuou negativamente
    reduz a afinidade.
    """
    tags_candidato = {t.slug: t for t in candidato.tags}

    total_possivel = 0.0
    obtido = 0.0
    coincidentes: List[TagCoincidente] = []
    obtido_categoria: Dict[str, float] = {cat: 0.0 for cat in totais_categoria}

    for slug, peso in pontuacoes.items():
        total_possivel += abs(peso)
        tag = tags_candidato.get(slug)
        if tag is None:
            continue

        obtido += peso
        cat = categorias.get(slug) or catalogo.categoria(slug)
        obtido_categoria[cat] = obtido_categoria.get(cat, 0) + peso
        coincidentes.append(TagCoincidente(
            slug=slug,
            nome=tag.nome,
            pontuacao=peso,
            texto_motivo=catalogo.texto_motivo(slug, tag.nome),
        ))

    coincidentes.sort(key=lambda t: t.pontuacao, reverse=True)

    percentual = _limitar(obtido / total_possivel * 100) if total_possivel > 0 else 0.0

    pontuacoes_categoria = [
        PontuacaoCategoria(
            categoria=cat,
            candidato=_limitar(obtido_categoria[cat] / total * 100) if total > 0 else 0.0,
        )
        for cat, total in totais_categoria.items()
    ]

    return ResultadoCandidato(
        politico=candidato.resumo(),
        pontuacao=obtido,
        percentual=arredondar(percentual),
        tags_coincidentes=coincidentes,
        pontuacoes_categoria=pontuacoes_categoria,
    )


def agrupar_por_partido(resultados: Sequence[ResultadoCandidato]) -> List[ResultadoPartido]:
    """Média dos percentuais por partido, ordenada de forma estável."""
    acumulado: Dict[str, List[int]] = {}
    for r in resultados:
        acumulado.setdefault(r.politico.partido, []).append(r.percentual)

    partidos = [
        ResultadoPartido(
            partido=partido,
            percentual=arredondar(sum(percentuais) / len(percentuais)),
            quantidade=len(percentuais),
        )
        for partido, percentuais in acumulado.items()
    ]
    partidos.sort(key=lambda p: p.percentual, reverse=True)
    return partidos


def calcular_afinidades(pontuacoes: Mapping[str, float],
                        candidatos: Sequence[Candidato],
                        catalogo: CatalogoTags = CATALOGO_TAGS) -> ResultadoAfinidade:
    """Calcula o ranking completo de políticos e partidos para um vetor do usuário."""
    categorias = mapa_categorias(candidatos, catalogo)
    totais_categoria = totais_usuario_por_categoria(pontuacoes, categorias, catalogo)

    ranking = [
        calcular_afinidade_candidato(pontuacoes, c, categorias, totais_categoria, catalogo)
        for c in candidatos
    ]
    ranking.sort(key=lambda r: r.percentual, reverse=True)

    partidos = agrupar_por_partido(ranking)
    logger.debug("Afinidade calculada para %d políticos e %d partidos", len(ranking), len(partidos))

    return ResultadoAfinidade(ranking=ranking, partidos=partidos)
