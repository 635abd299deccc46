'''Arquétipos do resultado do quiz.

A ordem da lista é parte do contrato: em caso de empate vence o primeiro.
'''

from typing import List

from afinidade.schemas.match import Arquetipo

ARQUETIPOS: List[Arquetipo] = [
    Arquetipo(
        id="fiscal",
        nome="O Fiscal",
        emoji="🎯",
        descricao="Você prioriza transparência, economia de recursos públicos e responsabilidade fiscal. "
                  "Busca políticos que gastem menos e entreguem mais.",
        padroes_tags=["baixo-custo", "oposicao-governo", "oposicao-rigoroso", "assiduo"],
        gradiente=("#0f766e", "#14b8a6"),
    ),
    Arquetipo(
        id="progressista",
        nome="O Progressista",
        emoji="🌱",
        descricao="Você valoriza avanços sociais, proteção ambiental e direitos individuais. "
                  "Busca mudanças que ampliem liberdades e protejam minorias.",
        padroes_tags=["progressista-costumes", "ambientalista", "garantista", "estatista"],
        gradiente=("#059669", "#34d399"),
    ),
    Arquetipo(
        id="pragmatico",
        nome="O Pragmático",
        emoji="⚖️",
        descricao="Você busca equilíbrio e soluções práticas. Não se prende a ideologias rígidas, "
                  "preferindo avaliar cada pauta pelo seu mérito individual.",
        padroes_tags=["governista-flexivel", "reformista-economico", "assiduo"],
        gradiente=("#4f46e5", "#818cf8"),
    ),
    Arquetipo(
        id="conservador",
        nome="O Conservador",
        emoji="🛡️",
        descricao="Você valoriza tradições, segurança pública rigorosa e valores familiares. "
                  "Busca estabilidade e cautela nas mudanças sociais.",
        padroes_tags=["conservador-costumes", "rigoroso", "ruralista", "oposicao-governo"],
        gradiente=("#be185d", "#f472b6"),
    ),
    Arquetipo(
        id="liberal",
        nome="O Liberal",
        emoji="🚀",
        descricao="Você defende menos intervenção do Estado na economia e mais liberdade individual. "
                  "Acredita no livre mercado e na iniciativa privada.",
        padroes_tags=["liberal", "liberdade-digital", "reformista-economico", "baixo-custo"],
        gradiente=("#7c3aed", "#a78bfa"),
    ),
    Arquetipo(
        id="estatista",
        nome="O Estatista",
        emoji="🏛️",
        descricao="Você acredita no papel do Estado como promotor do bem-estar social. "
                  "Defende serviços públicos fortes e regulação de setores estratégicos.",
        padroes_tags=["estatista", "regulacao-digital", "base-governo", "progressista-costumes"],
        gradiente=("#dc2626", "#f87171"),
    ),
]
