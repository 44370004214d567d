"""Tests for chart redraw triggers, rendering and hover."""

import threading
import time
from types import SimpleNamespace

import pytest
from matplotlib.patches import Rectangle

from charts.bar import efficiency_bar_scene
from charts.render import ChartContainer
from charts.scene import Text
from charts.view import ChartView, Debouncer
from data_pipeline.collectors.api_resource import ApiResource
from data_pipeline.processors.payloads import efficiency_records

RECORDS = (
    {"hora": "00", "percentual_rendimento": 80.0},
    {"hora": "01", "percentual_rendimento": 90.0},
)


def _view(light_theme, **kwargs):
    kwargs.setdefault("debounce_s", 0.05)
    return ChartView(efficiency_bar_scene, container=ChartContainer(800), theme=light_theme, **kwargs)


def test_debouncer_coalesces_calls():
    calls = []
    fired = threading.Event()

    def fn():
        calls.append(1)
        fired.set()

    debounce = Debouncer(0.05, fn)
    for _ in range(5):
        debounce()
    assert debounce.pending
    assert fired.wait(1.0)
    time.sleep(0.1)
    assert calls == [1]
    assert not debounce.pending


def test_no_data_draws_nothing(light_theme):
    view = _view(light_theme)
    assert view.draw() is None
    assert view.draw_count == 0
    assert view.container.figure.axes == []


def test_redraw_is_idempotent(light_theme):
    """Drawing twice leaves exactly one set of marks in the container."""
    view = _view(light_theme)
    view.set_data(RECORDS)
    ax = view.rendered.axes
    patches, texts = len(ax.patches), len(ax.texts)

    view.draw()
    view.draw()

    fig = view.container.figure
    assert len(fig.axes) == 1
    assert len(fig.axes[0].patches) == patches == 2
    assert len(fig.axes[0].texts) == texts
    assert texts == sum(isinstance(m, Text) for m in view.scene.marks)
    assert view.draw_count == 3


def test_rendered_geometry_matches_scene(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)
    fig = view.container.figure
    vp = view.scene.viewport

    assert fig.get_figwidth() * fig.dpi == pytest.approx(vp.width)
    assert fig.get_figheight() * fig.dpi == pytest.approx(vp.height)
    ax = view.rendered.axes
    assert ax.get_xlim() == (-vp.margin.left, vp.width - vp.margin.left)
    assert ax.get_ylim() == (vp.height - vp.margin.top, -vp.margin.top)
    assert set(view.rendered.artists) == {m.key for m in view.scene.marks}


def test_resize_is_debounced(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)

    for width in (500, 550, 600):
        view.resize(width)
    assert view.resize_pending
    assert view.draw_count == 1

    time.sleep(0.3)
    assert view.draw_count == 2
    assert view.scene.viewport.width == 600


def test_zero_width_leaves_previous_drawing(light_theme):
    view = _view(light_theme)
    first = view.set_data(RECORDS)

    view.resize(0)
    time.sleep(0.3)

    assert view.draw_count == 1
    assert view.scene is first
    assert len(view.container.figure.axes) == 1


def test_theme_change_redraws(light_theme, dark_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)

    view.set_theme(light_theme)
    assert view.draw_count == 1

    scene = view.set_theme(dark_theme)
    assert view.draw_count == 2
    assert scene.background == dark_theme.bg_tertiary
    assert view.theme is dark_theme


def test_bound_resource_draws_on_arrival(light_theme, session_factory, response_factory, efficiency_payload):
    session = session_factory(response_factory(efficiency_payload))
    resource = ApiResource("http://api.test/r/", session=session, transform=efficiency_records)
    view = _view(light_theme)
    view.bind(resource)
    assert view.scene is None

    resource.start()

    assert view.draw_count == 1
    assert len(view.scene.marks_of("bar")) == 2


def test_failed_resource_keeps_chart_empty(light_theme, session_factory, response_factory):
    session = session_factory(response_factory({}, status=500))
    resource = ApiResource("http://api.test/r/", session=session)
    view = _view(light_theme)
    view.bind(resource)

    resource.start()

    assert view.scene is None
    assert view.draw_count == 0


def test_disposed_view_ignores_triggers(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)
    view.dispose()

    view.resize(400)
    view.set_data(RECORDS[:1])

    assert not view.resize_pending
    assert view.draw_count == 1
    assert view.hover is None


def test_hover_highlights_and_restores(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)
    hover = view.hover
    bar = view.scene.marks_of("bar")[1]
    artist = view.rendered.artists[bar.key]

    hover.enter(bar)
    assert artist.get_alpha() == 0.7
    assert hover.tooltip.get_text() == "01h: 90.00%"

    hover.leave()
    assert artist.get_alpha() == 1.0
    assert hover.tooltip is None
    assert all(t.get_gid() != "tooltip" for t in view.rendered.axes.texts)


def test_pointer_motion_selects_mark_under_cursor(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)
    ax = view.rendered.axes
    bar = view.scene.marks_of("bar")[0]

    view.hover.on_motion(SimpleNamespace(inaxes=ax, xdata=bar.x + 2, ydata=bar.y + 2))
    assert view.hover.active is bar

    view.hover.on_motion(SimpleNamespace(inaxes=None, xdata=None, ydata=None))
    assert view.hover.active is None


def test_redraw_replaces_hover_controller(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)
    first = view.hover
    view.draw()
    assert view.hover is not first
    assert view.hover.rendered is view.rendered


def test_empty_data_clears_previous_drawing(light_theme):
    view = _view(light_theme)
    view.set_data(RECORDS)

    assert view.set_data(()) is None

    assert view.scene is None
    assert view.rendered is None
    assert view.hover is None
    assert view.container.figure.axes == []
    assert view.draw_count == 1


def test_zero_height_bars_render_as_plain_rectangles(light_theme):
    view = _view(light_theme)
    zeros = tuple(dict(r, percentual_rendimento=0.0) for r in RECORDS)
    view.set_data(zeros)

    bars = [view.rendered.artists[b.key] for b in view.scene.marks_of("bar")]
    assert all(isinstance(a, Rectangle) for a in bars)
    assert all(a.get_height() == 0 for a in bars)
