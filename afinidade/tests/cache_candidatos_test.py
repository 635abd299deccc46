"""Testes do cache de candidatos com relógio falso."""
from unittest.mock import MagicMock

import pytest

from afinidade.services.cache_candidatos import CACHE_TTL_PADRAO, CacheCandidatos
from afinidade.services.exceptions import ProvedorIndisponivelError


@pytest.fixture
def provedor(politicos):
    p = MagicMock()
    p.listar_candidatos_com_tags.return_value = politicos
    return p


def test_ttl_padrao_5_minutos():
    assert CACHE_TTL_PADRAO == 300


def test_primeira_chamada_busca_no_provedor(provedor, relogio, politicos):
    cache = CacheCandidatos(provedor, relogio=relogio)
    assert cache.obter_candidatos() == politicos
    provedor.listar_candidatos_com_tags.assert_called_once()


def test_dentro_do_ttl_usa_cache(provedor, relogio):
    cache = CacheCandidatos(provedor, ttl_segundos=300, relogio=relogio)
    primeiro = cache.obter_candidatos()
    relogio.avancar(299)
    assert cache.obter_candidatos() is primeiro
    provedor.listar_candidatos_com_tags.assert_called_once()


def test_ttl_vencido_busca_de_novo(provedor, relogio, politicos):
    cache = CacheCandidatos(provedor, ttl_segundos=300, relogio=relogio)
    cache.obter_candidatos()
    novos = politicos[:2]
    provedor.listar_candidatos_com_tags.return_value = novos
    relogio.avancar(300)
    assert cache.obter_candidatos() == novos
    assert provedor.listar_candidatos_com_tags.call_count == 2
    relogio.avancar(10)
    assert cache.obter_candidatos() == novos
    assert provedor.listar_candidatos_com_tags.call_count == 2


def test_falha_propaga_sem_usar_cache_antigo(provedor, relogio):
    cache = CacheCandidatos(provedor, ttl_segundos=300, relogio=relogio)
    cache.obter_candidatos()
    provedor.listar_candidatos_com_tags.side_effect = ProvedorIndisponivelError("fora do ar")
    relogio.avancar(301)
    with pytest.raises(ProvedorIndisponivelError):
        cache.obter_candidatos()
    with pytest.raises(ProvedorIndisponivelError):
        cache.obter_candidatos()
    assert provedor.listar_candidatos_com_tags.call_count == 3


def test_falha_na_primeira_busca_nao_preenche_cache(provedor, relogio, politicos):
    provedor.listar_candidatos_com_tags.side_effect = [RuntimeError("timeout"), politicos]
    cache = CacheCandidatos(provedor, relogio=relogio)
    with pytest.raises(RuntimeError):
        cache.obter_candidatos()
    assert cache.obter_candidatos() == politicos


def test_invalidar(provedor, relogio):
    cache = CacheCandidatos(provedor, relogio=relogio)
    cache.obter_candidatos()
    cache.invalidar()
    cache.obter_candidatos()
    assert provedor.listar_candidatos_com_tags.call_count == 2


def test_busca_antiga_nao_sobrescreve_snapshot_mais_novo(relogio, politicos):
    """Uma busca lenta que começou antes não publica por cima de uma mais recente."""
    antigos, recentes = politicos[:1], politicos[1:]
    provedor = MagicMock()
    cache = CacheCandidatos(provedor, ttl_segundos=300, relogio=relogio)

    def busca_lenta():
        # enquanto esta busca está em andamento, outra chamada posterior termina antes
        relogio.avancar(5)
        provedor.listar_candidatos_com_tags.side_effect = None
        provedor.listar_candidatos_com_tags.return_value = recentes
        assert cache.obter_candidatos() == recentes
        return antigos

    provedor.listar_candidatos_com_tags.side_effect = busca_lenta
    assert cache.obter_candidatos() == antigos

    # o snapshot publicado é o mais recente
    assert cache.obter_candidatos() == recentes
    assert provedor.listar_candidatos_com_tags.call_count == 2
