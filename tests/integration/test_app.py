"""Tests for session view mounting and page-level panel isolation."""

from unittest.mock import MagicMock

import pytest

from charts.theme import DARK_THEME, LIGHT_THEME
from dashboard.components.layout import current_theme, mount_view, render_fetch_state
from dashboard.components.views import PanelView


@pytest.fixture
def app_module(st_mock, monkeypatch):
    from dashboard import app

    monkeypatch.setattr(app, "st", st_mock)
    return app


def test_mount_view_mounts_once(st_mock):
    view = MagicMock()
    factory = MagicMock(return_value=view)

    assert mount_view("energia.rendimento", factory) is view
    assert mount_view("energia.rendimento", factory) is view

    factory.assert_called_once_with()
    view.mount.assert_called_once_with()
    assert st_mock.session_state["energia.rendimento"] is view


def test_current_theme_follows_streamlit(st_mock):
    st_mock.get_option.return_value = "dark"
    assert current_theme() is DARK_THEME

    st_mock.get_option.side_effect = RuntimeError("no runtime")
    assert current_theme() is LIGHT_THEME


def test_render_fetch_state(st_mock):
    assert render_fetch_state({"status": "ready"}) is True
    assert render_fetch_state({"status": "failed", "message": "x"}) is False
    st_mock.error.assert_called_once_with("Erro: x")


def test_remount_views_unmounts_every_panel(app_module, st_mock):
    first = MagicMock(spec=PanelView)
    second = MagicMock(spec=PanelView)
    st_mock.session_state.update({"a": first, "b": second, "other": 1})

    assert app_module.remount_views() == 2

    first.unmount.assert_called_once_with()
    second.unmount.assert_called_once_with()
    assert st_mock.session_state == {"other": 1}


def test_failing_panel_is_isolated(app_module, st_mock):
    def broken():
        raise RuntimeError("boom")

    ran = []
    app_module._render_isolated("Quebrado", broken)
    app_module._render_isolated("Ok", lambda: ran.append(True))

    assert ran == [True]
    st_mock.error.assert_called_once()
    assert "boom" in st_mock.error.call_args.args[0]
