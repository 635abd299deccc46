"""Testes do serviço de match (composição completa)."""
from unittest.mock import MagicMock

import pytest

from afinidade.schemas.politico import Candidato
from afinidade.services.cache_candidatos import CacheCandidatos
from afinidade.services.exceptions import ProvedorIndisponivelError
from afinidade.services.match_service import MatchService


@pytest.fixture
def provedor(politicos):
    p = MagicMock()
    p.listar_candidatos_com_tags.return_value = politicos
    return p


@pytest.fixture
def service(provedor, relogio):
    return MatchService(CacheCandidatos(provedor, relogio=relogio))


def _muitos_politicos(n):
    return [
        Candidato(id=str(i), nome=f"Político {i}", partido=f"P{i}",
                  tags=[{"slug": "liberal", "nome": "Liberal", "categoria": "Economia"}] if i % 2 else [])
        for i in range(n)
    ]


def test_limita_top_politicos_e_partidos(service):
    resultado = service.calcular({"liberal": 2, "baixo-custo": 1}, _muitos_politicos(12))
    assert len(resultado.top_politicos) == 6
    assert len(resultado.top_partidos) == 5
    percentuais = [r.percentual for r in resultado.top_politicos]
    assert percentuais == sorted(percentuais, reverse=True)
    partidos = [p.percentual for p in resultado.top_partidos]
    assert partidos == sorted(partidos, reverse=True)


def test_limites_configuraveis(provedor, relogio):
    service = MatchService(CacheCandidatos(provedor, relogio=relogio), top_politicos=2, top_partidos=1)
    resultado = service.calcular({"liberal": 3})
    assert len(resultado.top_politicos) == 2
    assert len(resultado.top_partidos) == 1


def test_usa_cache_quando_candidatos_nao_informados(service, provedor):
    service.calcular({"liberal": 3})
    service.calcular({"estatista": 1})
    provedor.listar_candidatos_com_tags.assert_called_once()


def test_candidatos_explicitos_nao_consultam_provedor(service, provedor, politicos):
    service.calcular({"liberal": 3}, politicos)
    provedor.listar_candidatos_com_tags.assert_not_called()


def test_perfil_liberal(service):
    resultado = service.calcular({"liberal": 3, "liberdade-digital": 2, "baixo-custo": 2, "assiduo": 1})
    melhor = resultado.top_politicos[0]
    assert melhor.politico.id == "3"
    assert melhor.percentual == 100
    assert resultado.top_partidos[0].partido == "NOVO"
    assert resultado.metadados.forca_match == "strong"
    assert resultado.metadados.arquetipo.id == "liberal"
    assert resultado.metadados.categorias_dominantes == ["Economia", "Tecnologia", "Performance"]


def test_devolve_pontuacoes_do_usuario(service):
    pontuacoes = {"liberal": 3, "baixo-custo": 2}
    assert service.calcular(pontuacoes).pontuacoes_usuario == pontuacoes


def test_pontuacoes_vazias(service):
    resultado = service.calcular({})
    assert all(r.percentual == 0 for r in resultado.top_politicos)
    assert resultado.metadados.arquetipo.id == "fiscal"
    assert resultado.metadados.forca_match == "weak"
    assert resultado.metadados.categorias_dominantes == []


def test_sem_candidatos(service):
    resultado = service.calcular({"liberal": 3}, [])
    assert resultado.top_politicos == []
    assert resultado.top_partidos == []
    assert resultado.metadados.forca_match == "weak"
    assert resultado.metadados.categorias_dominantes == []


def test_falha_do_provedor_propaga(relogio):
    provedor = MagicMock()
    provedor.listar_candidatos_com_tags.side_effect = ProvedorIndisponivelError("fora do ar")
    service = MatchService(CacheCandidatos(provedor, relogio=relogio))
    with pytest.raises(ProvedorIndisponivelError):
        service.calcular({"liberal": 3})
