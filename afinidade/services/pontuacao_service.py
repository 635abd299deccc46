'''Acumulação das respostas do quiz no vetor de pontuação do usuário'''

from typing import Dict, List, Mapping, Sequence

from afinidade.schemas.catalogo import OpcaoQuiz, PerguntaQuiz
from afinidade.services.exceptions import RespostaInvalidaError


def acumular_pontuacao(opcoes: Sequence[OpcaoQuiz]) -> Dict[str, float]:
    """Soma os pesos de cada tag afetada pelas opções escolhidas.

    A soma não depende da ordem das opções; sequências parciais (quiz
    abandonado no meio) geram um vetor parcial.
    """
    pontuacoes: Dict[str, float] = {}
    for opcao in opcoes:
        for efeito in opcao.efeitos:
            pontuacoes[efeito.tag_slug] = pontuacoes.get(efeito.tag_slug, 0) + efeito.peso
    return pontuacoes


def opcoes_escolhidas(perguntas: Sequence[PerguntaQuiz], respostas: Mapping[int, str]) -> List[OpcaoQuiz]:
    """Converte {id da pergunta: valor da opção} nas opções escolhidas, na ordem do quiz."""
    por_id = {p.id: p for p in perguntas}
    desconhecidas = set(respostas) - set(por_id)
    if desconhecidas:
        raise RespostaInvalidaError(f"Perguntas inexistentes: {sorted(desconhecidas)}")

    escolhidas: List[OpcaoQuiz] = []
    for pergunta in perguntas:
        if pergunta.id not in respostas:
            continue
        opcao = pergunta.opcao(respostas[pergunta.id])
        if opcao is None:
            raise RespostaInvalidaError(
                f"Opção inválida para a pergunta {pergunta.id}: {respostas[pergunta.id]!r}"
            )
        escolhidas.append(opcao)
    return escolhidas


def tags_principais(pontuacoes: Mapping[str, float], n: int = 2) -> List[str]:
    ordenadas = sorted(pontuacoes.items(), key=lambda item: item[1], reverse=True)
    return [slug for slug, _ in ordenadas[:n]]
