"""Efficiency-per-hour bar chart."""

from typing import Optional, Sequence

from charts.scales import BandScale, LinearScale, index_colors
from charts.scene import HoverStyle, Margin, Rect, Scene, SceneBuilder, Text, Tooltip, Viewport, axis_bottom, axis_left
from charts.theme import Theme
from config.config import BAR_BAND_PADDING, BAR_CHART_HEIGHT_PX, BAR_HEADROOM, BAR_Y_TICKS
from config.schemas import EfficiencyRecord

BAR_MARGIN = Margin(top=20, right=20, bottom=40, left=50)


def efficiency_bar_scene(
    records: Optional[Sequence[EfficiencyRecord]],
    width_px: float,
    theme: Theme,
) -> Optional[Scene]:
    """One bar per hour, height proportional to ``percentual_rendimento``.

    Returns ``None`` when there is nothing to draw (no records, or no room).
    """
    if not records or width_px <= 0:
        return None

    margin = BAR_MARGIN
    height = BAR_CHART_HEIGHT_PX
    viewport = Viewport(width_px, height + margin.top + margin.bottom, margin)
    width = viewport.inner_width
    if width <= 0:
        return None

    hours = [str(r["hora"]) for r in records]
    values = [float(r["percentual_rendimento"]) for r in records]

    x = BandScale(tuple(hours), (0, width), BAR_BAND_PADDING)
    y_max = max(values) * BAR_HEADROOM
    y = LinearScale((0.0, y_max if y_max > 0 else 1.0), (height, 0))  # all-zero data keeps y(0) on the axis
    colors = index_colors(len(values))

    scene = SceneBuilder(viewport)
    scene.extend(axis_bottom(x, height, theme.text_muted))
    scene.extend(
        axis_left(y, 0, theme.text_muted, count=BAR_Y_TICKS, fmt=lambda d: f"{d:.1f}%")
    )

    for i, (hora, value, record) in enumerate(zip(hours, values, records)):
        top = y(value)
        scene.add(
            Rect(
                key=f"bar-{i}",
                x=x(hora),
                y=top,
                width=x.bandwidth,
                height=height - top,
                fill=colors[i],
                rx=4,
                kind="bar",
                hover=HoverStyle(opacity=0.7),
                tooltip=Tooltip(x.center(hora), top - 20, (f"{hora}h: {value:.2f}%",), theme.text_primary),
                datum=record,
            )
        )

    for i, (hora, value) in enumerate(zip(hours, values)):
        scene.add(
            Text(
                f"bar-label-{i}", x.center(hora), y(value) - 5, f"{value:.1f}%",
                theme.text_primary, font_size=11, kind="value-label",
            )
        )

    return scene.build(background=theme.bg_tertiary)
