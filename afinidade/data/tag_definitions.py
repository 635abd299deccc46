'''Definições das tags e da votação que justifica cada uma'''

from typing import Dict

from afinidade.schemas.catalogo import DefinicaoTag, EscolhaGatilho, Justificativa

SIM = EscolhaGatilho.SIM
NAO = EscolhaGatilho.NAO


def _tag(slug: str, nome: str, categoria: str, gatilho: EscolhaGatilho,
         id_proposicao: str, titulo: str, motivo: str) -> DefinicaoTag:
    return DefinicaoTag(
        slug=slug,
        nome=nome,
        categoria=categoria,
        justificativa=Justificativa(
            escolha_gatilho=gatilho,
            titulo_assunto=titulo,
            texto_motivo=motivo,
            id_proposicao=id_proposicao,
        ),
    )


_DEFINICOES = [
    # Reforma Tributária
    _tag("reformista-economico", "Reformista Econômico", "Economia", SIM,
         "2196833-326", "Reforma Tributária",
         "Votou A FAVOR da Reforma Tributária (PEC 45/2019), apoiando a simplificação de impostos."),
    _tag("conservador-economico", "Conservador Econômico", "Economia", NAO,
         "2196833-326", "Reforma Tributária",
         "Votou CONTRA a Reforma Tributária (PEC 45/2019), opondo-se à mudança no sistema fiscal proposta."),

    # Marco Temporal
    _tag("ruralista", "Ruralista", "Agro & Meio Ambiente", SIM,
         "345311-270", "Marco Temporal",
         "Votou A FAVOR do Marco Temporal (PL 490/2007), defendendo critérios mais rígidos para demarcação de terras indígenas."),
    _tag("ambientalista", "Ambientalista", "Agro & Meio Ambiente", NAO,
         "345311-270", "Marco Temporal",
         "Votou CONTRA o Marco Temporal (PL 490/2007), defendendo a proteção ampla das terras indígenas."),

    # Arcabouço Fiscal
    _tag("governista-flexivel", "Governista/Flexível", "Economia", SIM,
         "2357053-47", "Arcabouço Fiscal",
         "Votou A FAVOR do Arcabouço Fiscal (PLP 93/2023), alinhando-se à pauta econômica do governo."),
    _tag("oposicao-rigoroso", "Oposição/Rigoroso", "Economia", NAO,
         "2357053-47", "Arcabouço Fiscal",
         "Votou CONTRA o Arcabouço Fiscal (PLP 93/2023), opondo-se às novas regras de gastos públicos."),

    # Segurança Pública
    _tag("linha-dura", "Linha Dura", "Segurança Pública", SIM,
         "pl-2253-2022", "Fim da 'Saidinha'",
         "Votou para DERRUBAR o veto e manter o fim das saídas temporárias de presos."),
    _tag("garantista", "Garantista", "Segurança Pública", NAO,
         "pl-2253-2022", "Fim da 'Saidinha'",
         "Votou para MANTER o veto, defendendo a ressocialização através das saídas temporárias."),

    # Costumes
    _tag("conservador-costumes", "Conservador (Costumes)", "Costumes", SIM,
         "pec-45-2023", "PEC das Drogas",
         "Votou A FAVOR da criminalização do porte de qualquer quantidade de drogas."),
    _tag("progressista-costumes", "Progressista (Costumes)", "Costumes", NAO,
         "pec-45-2023", "PEC das Drogas",
         "Votou CONTRA a criminalização indiscriminada, diferenciando usuário de traficante."),

    # Tags virtuais, calculadas a partir de dados de desempenho
    _tag("baixo-custo", "Baixo Custo", "Uso de Verba", SIM,
         "metrics", "Análise de Gastos (CEAP)",
         "Gastou menos de 80% da média de gastos parlamentares nos últimos 12 meses."),
    _tag("gastao", "Alto Custo", "Uso de Verba", SIM,
         "metrics", "Análise de Gastos (CEAP)",
         "Gastou acima de 120% da média de gastos parlamentares nos últimos 12 meses."),
    _tag("gazeteiro", "Gazeteiro", "Assiduidade", SIM,
         "metrics", "Assiduidade em Plenário",
         "Esteve presente em menos de 80% das sessões deliberativas."),
    _tag("assiduo", "Assíduo", "Assiduidade", SIM,
         "metrics", "Assiduidade em Plenário",
         "Esteve presente em mais de 95% das sessões deliberativas."),

    # Perfil
    _tag("jovem", "Jovem", "Perfil", SIM,
         "demographics", "Perfil Demográfico",
         "Parlamentar com menos de 35 anos."),
    _tag("novato", "Novato", "Perfil", SIM,
         "demographics", "Histórico Eleitoral",
         "Exercendo seu primeiro mandato na Câmara Federal."),
    _tag("veterano", "Veterano", "Perfil", SIM,
         "demographics", "Histórico Eleitoral",
         "Parlamentar reeleito, com experiência prévia na casa."),
]

TAG_DEFINITIONS: Dict[str, DefinicaoTag] = {d.slug: d for d in _DEFINICOES}
