'''Perguntas do quiz político'''

from typing import List

from afinidade.schemas.catalogo import PerguntaQuiz


def _sim_nao(id_pergunta: int, texto: str, sim: list, nao: list,
             rotulo_sim: str = "Sim", rotulo_nao: str = "Não") -> PerguntaQuiz:
    return PerguntaQuiz.model_validate({
        "id": id_pergunta,
        "texto": texto,
        "opcoes": [
            {"rotulo": rotulo_sim, "valor": "sim", "efeitos": sim, "cor": "green", "icone": "check"},
            {"rotulo": rotulo_nao, "valor": "nao", "efeitos": nao, "cor": "red", "icone": "x"},
        ],
    })


QUIZ_QUESTIONS: List[PerguntaQuiz] = [
    _sim_nao(
        1,
        "Você prefere políticos que votaram a favor da Reforma Tributária (simplificação de impostos)?",
        sim=[{"tag_slug": "reformista-economico", "peso": 2}, {"tag_slug": "governista-flexivel", "peso": 1}],
        nao=[{"tag_slug": "conservador-economico", "peso": 2}, {"tag_slug": "oposicao-rigoroso", "peso": 1}],
    ),
    _sim_nao(
        2,
        "Você prioriza candidatos que gastam pouco (Baixo Custo) em vez de trazerem muitos recursos (Alto Custo)?",
        sim=[{"tag_slug": "baixo-custo", "peso": 3}],
        nao=[{"tag_slug": "gastao", "peso": 2}],
    ),
    _sim_nao(
        3,
        "Você é contra a 'Saidinha' de presos (saídas temporárias em datas comemorativas)?",
        sim=[{"tag_slug": "rigoroso", "peso": 3}, {"tag_slug": "conservador-costumes", "peso": 1}],
        nao=[{"tag_slug": "garantista", "peso": 3}, {"tag_slug": "progressista-costumes", "peso": 1}],
    ),
    _sim_nao(
        4,
        "Você apoia a tese do Marco Temporal (limitar demarcação de terras indígenas à data de 1988)?",
        sim=[{"tag_slug": "ruralista", "peso": 3}],
        nao=[{"tag_slug": "ambientalista", "peso": 3}],
    ),
    _sim_nao(
        5,
        "Você prefere um político Novato (renovação) ou Veterano (experiência)?",
        sim=[{"tag_slug": "novato", "peso": 3}],
        nao=[{"tag_slug": "veterano", "peso": 3}],
        rotulo_sim="Novato",
        rotulo_nao="Veterano",
    ),
    _sim_nao(
        6,
        "Você é favorável à criminalização do porte de qualquer quantidade de drogas (PEC das Drogas)?",
        sim=[{"tag_slug": "conservador-costumes", "peso": 3}, {"tag_slug": "rigoroso", "peso": 1}],
        nao=[{"tag_slug": "progressista-costumes", "peso": 3}],
    ),
]
