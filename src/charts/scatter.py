"""Cholesterol x blood-pressure scatter plot."""

from typing import Optional, Sequence

from charts.scales import LinearScale, padded_extent
from charts.scene import (
    Circle,
    HoverStyle,
    Margin,
    Scene,
    SceneBuilder,
    Text,
    Tooltip,
    Viewport,
    axis_bottom,
    axis_left,
    grid_lines,
)
from charts.theme import Theme
from config.config import SCATTER_DOMAIN_PADDING, SCATTER_FALLBACK_PADDING, SCATTER_HEIGHT_PX, SCATTER_TICKS
from config.schemas import ScatterRecord

SCATTER_MARGIN = Margin(top=40, right=40, bottom=60, left=60)

POINT_RADIUS = 6
POINT_HOVER_RADIUS = 8
POINT_FILL = "#3b82f6"
POINT_HOVER_FILL = "#60a5fa"
POINT_STROKE = "#1d4ed8"


def _number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def scatter_scene(
    points: Optional[Sequence[ScatterRecord]],
    width_px: float,
    theme: Theme,
) -> Optional[Scene]:
    if not points or width_px <= 0:
        return None

    margin = SCATTER_MARGIN
    viewport = Viewport(width_px, SCATTER_HEIGHT_PX, margin)
    width, height = viewport.inner_width, viewport.inner_height
    if width <= 0:
        return None

    x = LinearScale(
        padded_extent((p["colesterol"] for p in points), SCATTER_DOMAIN_PADDING, SCATTER_FALLBACK_PADDING),
        (0, width),
    )
    y = LinearScale(
        padded_extent((p["pressao"] for p in points), SCATTER_DOMAIN_PADDING, SCATTER_FALLBACK_PADDING),
        (height, 0),
    )

    scene = SceneBuilder(viewport)
    scene.extend(grid_lines(x, height, theme.text_muted, vertical=True, count=SCATTER_TICKS))
    scene.extend(grid_lines(y, width, theme.text_muted, vertical=False, count=SCATTER_TICKS))
    scene.extend(axis_bottom(x, height, theme.text_muted, fmt=_number))
    scene.extend(axis_left(y, 0, theme.text_muted, fmt=_number))
    scene.add(
        Text("x-title", width / 2, height + 40, "Colesterol (mg/dL)", theme.text_muted,
             font_size=14, kind="axis-title")
    )
    scene.add(
        Text("y-title", -45, height / 2, "Pressão Arterial (mmHg)", theme.text_muted,
             font_size=14, rotation=90, kind="axis-title")
    )

    for i, point in enumerate(points):
        cx, cy = x(point["colesterol"]), y(point["pressao"])
        scene.add(
            Circle(
                key=f"point-{i}",
                cx=cx,
                cy=cy,
                r=POINT_RADIUS,
                fill=POINT_FILL,
                stroke=POINT_STROKE,
                stroke_width=2,
                hover=HoverStyle(fill=POINT_HOVER_FILL, radius=POINT_HOVER_RADIUS),
                tooltip=Tooltip(
                    cx, cy - 15,
                    (f"{_number(point['colesterol'])} mg/dL, {_number(point['pressao'])} mmHg",),
                    theme.text_primary,
                ),
                datum=point,
            )
        )

    return scene.build(background=theme.bg_tertiary)
