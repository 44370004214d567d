"""Tests for the efficiency-per-hour bar chart scene."""

import pytest

from charts.bar import BAR_MARGIN, efficiency_bar_scene
from config.config import BAR_CHART_HEIGHT_PX


def _records(*values):
    return [{"hora": f"{i:02d}", "percentual_rendimento": v} for i, v in enumerate(values)]


def test_one_bar_per_record(light_theme):
    scene = efficiency_bar_scene(_records(80.0, 90.0, 75.5), 800, light_theme)
    bars = scene.marks_of("bar")

    assert [b.key for b in bars] == ["bar-0", "bar-1", "bar-2"]
    assert [b.datum["hora"] for b in bars] == ["00", "01", "02"]
    assert len({b.fill for b in bars}) == 3


def test_bar_heights_are_proportional(light_theme):
    scene = efficiency_bar_scene(_records(80.0, 90.0), 800, light_theme)
    first, second = scene.marks_of("bar")

    assert second.height > first.height
    assert second.height / first.height == pytest.approx(90.0 / 80.0)
    # bars rest on the x axis
    assert first.y + first.height == pytest.approx(BAR_CHART_HEIGHT_PX)
    # tallest bar leaves headroom of 10% of the maximum
    assert second.height == pytest.approx(BAR_CHART_HEIGHT_PX / 1.1)


def test_bars_fit_inside_plot_area(light_theme):
    scene = efficiency_bar_scene(_records(*range(1, 25)), 640, light_theme)
    inner = scene.viewport.inner_width
    for bar in scene.marks_of("bar"):
        assert 0 <= bar.x
        assert bar.x + bar.width <= inner + 1e-9


def test_viewport_and_labels(light_theme):
    scene = efficiency_bar_scene(_records(80.0, 90.0), 800, light_theme)

    assert scene.viewport.width == 800
    assert scene.viewport.height == BAR_CHART_HEIGHT_PX + BAR_MARGIN.top + BAR_MARGIN.bottom
    assert [t.text for t in scene.marks_of("value-label")] == ["80.0%", "90.0%"]
    tick_labels = [t.text for t in scene.marks_of("tick-label")]
    assert "00" in tick_labels and "01" in tick_labels
    assert "0.0%" in tick_labels
    assert scene.background == light_theme.bg_tertiary


def test_tooltip_and_hover(light_theme):
    scene = efficiency_bar_scene(_records(80.0, 90.0), 800, light_theme)
    bar = scene.marks_of("bar")[1]

    assert bar.tooltip.lines == ("01h: 90.00%",)
    assert bar.hover.opacity == 0.7
    assert scene.mark_at(bar.x + 1, bar.y + 1) is bar


def test_theme_colours_flow_into_text(dark_theme):
    scene = efficiency_bar_scene(_records(80.0), 800, dark_theme)
    assert scene.marks_of("value-label")[0].fill == dark_theme.text_primary
    assert scene.marks_of("axis")[0].stroke == dark_theme.text_muted


@pytest.mark.parametrize("records, width", [([], 800), (None, 800), (_records(80.0), 0), (_records(80.0), 60)])
def test_nothing_to_draw(light_theme, records, width):
    assert efficiency_bar_scene(records, width, light_theme) is None


def test_all_zero_readings_draw_flat_bars(light_theme):
    """Zero efficiency means zero height, not a bar floating at mid-range."""
    scene = efficiency_bar_scene(_records(0.0, 0.0), 800, light_theme)
    bars = scene.marks_of("bar")

    assert [b.height for b in bars] == [0.0, 0.0]
    assert all(b.y == BAR_CHART_HEIGHT_PX for b in bars)
    assert [t.text for t in scene.marks_of("value-label")] == ["0.0%", "0.0%"]
