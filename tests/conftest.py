"""Test configuration and shared fixtures."""

import json
from typing import Any
from unittest.mock import MagicMock

import matplotlib
matplotlib.use("Agg")

import pytest
import requests

from charts.theme import DARK_THEME, LIGHT_THEME


def make_response(payload: Any = None, status: int = 200, body: bytes | None = None) -> requests.Response:
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""
    response = requests.Response()
    response.status_code = status
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


def make_session(*responses: Any) -> MagicMock:
    """A session whose ``get`` returns (or raises) ``responses`` in order."""
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return session


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def light_theme():
    return LIGHT_THEME


@pytest.fixture
def dark_theme():
    return DARK_THEME


@pytest.fixture
def efficiency_payload():
    return {
        "dados_brutos": [
            {"hora": "00", "percentual_rendimento": 80.0},
            {"hora": "01", "percentual_rendimento": 90.0},
        ]
    }


@pytest.fixture
def energy_payload():
    return {
        "dados_completos": [
            {"hora": "06", "percentual_rendimento": 72.5, "potencia_kw": 10.2},
            {"hora": "12", "percentual_rendimento": 91.25, "potencia_kw": 25.44},
            {"hora": "18", "percentual_rendimento": 64.0, "potencia_kw": 25.44},
        ]
    }


@pytest.fixture
def correlation_payload():
    return {
        "matriz_correlacao": {
            "A": {"A": 1.0, "B": 0.9},
            "B": {"A": 0.9, "B": 1.0},
        }
    }


@pytest.fixture
def scatter_payload():
    return [
        {"colesterol": 180, "pressao": 120},
        {"colesterol": 220, "pressao": 135},
        {"colesterol": 250, "pressao": 150},
    ]


@pytest.fixture
def st_mock(monkeypatch):
    """Replace the Streamlit module used by the panels with a recording mock."""
    st = MagicMock()
    st.session_state = {}
    st.get_option.return_value = None

    def columns(spec):
        n = spec if isinstance(spec, int) else len(spec)
        return [MagicMock() for _ in range(n)]

    st.columns.side_effect = columns
    for module in (
        "dashboard.components.layout",
        "dashboard.components.energy",
        "dashboard.components.health",
    ):
        monkeypatch.setattr(f"{module}.st", st)
    return st
