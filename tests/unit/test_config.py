"""Tests for configuration helpers."""

from config.config import API_ENDPOINTS, build_endpoints


def test_build_endpoints_strips_trailing_slash():
    endpoints = build_endpoints("http://stats.local:9000/")

    assert endpoints["energia"]["rendimento"] == "http://stats.local:9000/api/energia/rendimento/"
    assert endpoints["energia"]["dados"] == "http://stats.local:9000/api/energia/dados/"
    assert endpoints["saude"]["mapa_calor"] == "http://stats.local:9000/api/saude/mapa-calor-correlacao/"
    assert endpoints["saude"]["dispersao"] == "http://stats.local:9000/api/saude/dispersao-colesterol-pressao/"


def test_default_table_has_every_view():
    assert set(API_ENDPOINTS) == {"energia", "saude"}
    assert set(API_ENDPOINTS["energia"]) == {"rendimento", "dados"}
    assert set(API_ENDPOINTS["saude"]) == {"mapa_calor", "dispersao"}
