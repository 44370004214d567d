"""End-to-end tests for the health page panels with a mocked API and Streamlit."""

from config.config import EMPTY_DATA_MESSAGE
from dashboard.components.health import (
    CorrelationHeatMapView,
    ScatterView,
    render_heatmap_panel,
    render_scatter_panel,
)


def _mounted(view_cls, session):
    view = view_cls(url="http://api.test/api/saude/", session=session)
    view.mount()
    return view


def test_heatmap_panel_two_variables(st_mock, light_theme, session_factory, response_factory, correlation_payload):
    """A 2x2 matrix yields a single lower-triangle cell labelled with its value."""
    view = _mounted(CorrelationHeatMapView, session_factory(response_factory(correlation_payload)))

    result = render_heatmap_panel(view=view, theme=light_theme)

    assert result["status"] == "ready"
    assert result["variables"] == ["A", "B"]
    assert result["cells"] == [{"row": "B", "col": "A", "value": 0.9}]
    (cell,) = result["scene"].marks_of("cell")
    (label,) = result["scene"].marks_of("cell-value")
    assert cell.key == "cell-B-A"
    assert label.text == "0.90"
    st_mock.pyplot.assert_called_once_with(view.chart.container.figure)


def test_heatmap_panel_incomplete_matrix(st_mock, light_theme, session_factory, response_factory):
    payload = {"matriz_correlacao": {"A": {"A": 1.0}, "B": {"B": 1.0}}}
    view = _mounted(CorrelationHeatMapView, session_factory(response_factory(payload)))

    result = render_heatmap_panel(view=view, theme=light_theme)

    assert result["status"] == "failed"
    st_mock.error.assert_called_once_with("Erro: Erro ao carregar dados")
    st_mock.pyplot.assert_not_called()


def test_scatter_panel_ready(st_mock, light_theme, session_factory, response_factory, scatter_payload):
    view = _mounted(ScatterView, session_factory(response_factory(scatter_payload)))

    result = render_scatter_panel(view=view, theme=light_theme)

    assert result["status"] == "ready"
    assert result["points_count"] == 3
    assert len(result["scene"].marks_of("point")) == 3
    assert result["chart_shown"] is True
    st_mock.subheader.assert_called_once_with("Colesterol x Pressão Arterial")


def test_scatter_panel_empty_list(st_mock, light_theme, session_factory, response_factory):
    """An empty dataset is ready but draws nothing."""
    view = _mounted(ScatterView, session_factory(response_factory([])))

    result = render_scatter_panel(view=view, theme=light_theme)

    assert result["status"] == "ready"
    assert result["scene"] is None
    assert result["chart_shown"] is False
    st_mock.info.assert_called_once_with(EMPTY_DATA_MESSAGE)
    st_mock.pyplot.assert_not_called()


def test_scatter_panel_dark_theme(st_mock, dark_theme, session_factory, response_factory, scatter_payload):
    view = _mounted(ScatterView, session_factory(response_factory(scatter_payload)))

    result = render_scatter_panel(view=view, theme=dark_theme)

    assert result["scene"].background == dark_theme.bg_tertiary
    titles = result["scene"].marks_of("axis-title")
    assert all(t.fill == dark_theme.text_muted for t in titles)
