import pytest

from afinidade.schemas.politico import Candidato, TagCandidato


def _politico(id_, nome, partido, uf, tags):
    return Candidato(
        id=id_,
        nome=nome,
        partido=partido,
        uf=uf,
        foto_url=f"https://example.com/photo{id_}.jpg",
        tags=[TagCandidato(slug=s, nome=n, categoria=c) for s, n, c in tags],
    )


@pytest.fixture
def politicos():
    return [
        _politico("1", "João Silva", "PT", "SP", [
            ("progressista-costumes", "Progressista em Costumes", "Costumes"),
            ("estatista", "Estatista", "Economia"),
            ("ambientalista", "Ambientalista", "Meio Ambiente"),
        ]),
        _politico("2", "Maria Santos", "PSDB", "RJ", [
            ("liberal", "Liberal", "Economia"),
            ("conservador-costumes", "Conservador em Costumes", "Costumes"),
            ("baixo-custo", "Baixo Custo", "Performance"),
        ]),
        _politico("3", "Pedro Oliveira", "NOVO", "MG", [
            ("liberal", "Liberal", "Economia"),
            ("liberdade-digital", "Liberdade Digital", "Tecnologia"),
            ("baixo-custo", "Baixo Custo", "Performance"),
            ("assiduo", "Assíduo", "Performance"),
        ]),
        _politico("4", "Ana Costa", "PT", "BA", [
            ("base-governo", "Base do Governo", "Posicionamento"),
            ("progressista-costumes", "Progressista em Costumes", "Costumes"),
            ("regulacao-digital", "Regulação Digital", "Tecnologia"),
        ]),
        _politico("5", "Carlos Souza", "PL", "RS", [
            ("conservador-costumes", "Conservador em Costumes", "Costumes"),
            ("ruralista", "Ruralista", "Meio Ambiente"),
            ("rigoroso", "Rigoroso", "Segurança"),
            ("oposicao-governo", "Oposição ao Governo", "Posicionamento"),
        ]),
        _politico("6", "Beatriz Lima", "PSOL", "RJ", [
            ("progressista-costumes", "Progressista em Costumes", "Costumes"),
            ("ambientalista", "Ambientalista", "Meio Ambiente"),
            ("garantista", "Garantista", "Segurança"),
            ("estatista", "Estatista", "Economia"),
        ]),
        _politico("7", "Roberto Almeida", "MDB", "SP", [
            ("reformista-economico", "Reformista Econômico", "Economia"),
            ("governista-flexivel", "Governista Flexível", "Posicionamento"),
            ("assiduo", "Assíduo", "Performance"),
        ]),
    ]


class RelogioFalso:
    def __init__(self, agora: float = 1000.0):
        self.agora = agora

    def __call__(self) -> float:
        return self.agora

    def avancar(self, segundos: float) -> None:
        self.agora += segundos


@pytest.fixture
def relogio():
    return RelogioFalso()
