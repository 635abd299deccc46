'''Classificação do usuário em um arquétipo e métricas do resultado'''

from typing import List, Mapping, Optional, Sequence

from afinidade.data.arquetipos import ARQUETIPOS
from afinidade.schemas.match import Arquetipo, ForcaMatch, PontuacaoCategoria


def pontuar_arquetipo(pontuacoes: Mapping[str, float], arquetipo: Arquetipo) -> float:
    return sum(pontuacoes.get(tag, 0) for tag in arquetipo.padroes_tags)


def classificar_arquetipo(pontuacoes: Mapping[str, float],
                          arquetipos: Sequence[Arquetipo] = ARQUETIPOS) -> Arquetipo:
    """Retorna o arquétipo com a maior soma de pesos do seu padrão de tags.

    Só uma pontuação estritamente maior troca o vencedor, então empates
    (inclusive o vetor vazio) ficam com o primeiro arquétipo da lista.
    """
    melhor: Optional[Arquetipo] = None
    melhor_pontuacao = 0.0
    for arquetipo in arquetipos:
        pontuacao = pontuar_arquetipo(pontuacoes, arquetipo)
        if melhor is None or pontuacao > melhor_pontuacao:
            melhor = arquetipo
            melhor_pontuacao = pontuacao
    if melhor is None:
        raise ValueError("Lista de arquétipos vazia")
    return melhor


def calcular_forca_match(percentual: float) -> ForcaMatch:
    if percentual >= 75:
        return "strong"
    if percentual >= 50:
        return "moderate"
    return "weak"


def categorias_dominantes(pontuacoes_categoria: Sequence[PontuacaoCategoria], n: int = 3) -> List[str]:
    """Categorias em que o político mais pontuou, ignorando as zeradas."""
    com_pontuacao = [c for c in pontuacoes_categoria if c.candidato > 0]
    com_pontuacao.sort(key=lambda c: c.candidato, reverse=True)
    return [c.categoria for c in com_pontuacao[:n]]
