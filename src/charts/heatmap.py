"""Correlation heat map over the strict lower triangle of the matrix."""

from typing import List, Optional

from charts.scales import BandScale, SequentialColorScale, gradient_stops
from charts.scene import Gradient, HoverStyle, Margin, Rect, Scene, SceneBuilder, Text, Tooltip, Viewport
from charts.theme import Theme
from config.config import (
    HEATMAP_BAND_PADDING,
    HEATMAP_COLOR_DOMAIN,
    HEATMAP_LEGEND_STOPS,
    HEATMAP_LIGHT_TEXT_ABOVE,
    HEATMAP_MAX_CELL_PX,
)
from config.schemas import CorrelationMatrix, HeatCell

HEATMAP_MARGIN = Margin(top=40, right=80, bottom=40, left=40)


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def lower_triangle_cells(matrix: CorrelationMatrix) -> List[HeatCell]:
    """Entries whose row index exceeds the column index, in matrix key order."""
    variables = list(matrix)
    return [
        {"row": row, "col": col, "value": float(matrix[row][col])}
        for row_index, row in enumerate(variables)
        for col_index, col in enumerate(variables)
        if row_index > col_index
    ]


def correlation_heatmap_scene(
    matrix: Optional[CorrelationMatrix],
    width_px: float,
    theme: Theme,
) -> Optional[Scene]:
    if not matrix or width_px <= 0:
        return None

    margin = HEATMAP_MARGIN
    variables = list(matrix)
    n = len(variables)
    cell_size = min((width_px - margin.left - margin.right) / n, HEATMAP_MAX_CELL_PX)
    size = cell_size * n
    if size <= 0:
        return None

    viewport = Viewport(size + margin.left + margin.right, size + margin.top + margin.bottom, margin)
    color = SequentialColorScale(HEATMAP_COLOR_DOMAIN, "Reds")
    x = BandScale(tuple(variables), (0, size), HEATMAP_BAND_PADDING)
    y = BandScale(tuple(variables), (0, size), HEATMAP_BAND_PADDING)

    scene = SceneBuilder(viewport)
    cells = lower_triangle_cells(matrix)

    for cell in cells:
        row, col, value = cell["row"], cell["col"], cell["value"]
        scene.add(
            Rect(
                key=f"cell-{row}-{col}",
                x=x(col),
                y=y(row),
                width=x.bandwidth,
                height=y.bandwidth,
                fill=color(value),
                stroke=theme.text_muted,
                stroke_width=0.5,
                kind="cell",
                hover=HoverStyle(stroke=theme.text_primary, stroke_width=2),
                tooltip=Tooltip(
                    x.center(col),
                    y(row) - 10,
                    (f"{row} × {col}", f"Correlação: {value:.3f}"),
                    theme.text_primary,
                    background=theme.bg_secondary,
                    border=theme.text_muted,
                ),
                datum=cell,
            )
        )

    for cell in cells:
        row, col, value = cell["row"], cell["col"], cell["value"]
        scene.add(
            Text(
                f"cell-value-{row}-{col}",
                x.center(col),
                y.center(row),
                f"{value:.2f}",
                "#fff" if value > HEATMAP_LIGHT_TEXT_ABOVE else theme.text_primary,
                font_size=min(cell_size / 4, 12),
                baseline="middle",
                weight="bold",
                kind="cell-value",
            )
        )

    for i, name in enumerate(variables):
        scene.add(
            Text(
                f"x-label-{i}", x.center(name), size + 30, _capitalize(name),
                theme.text_primary, font_size=14, weight="semibold", kind="axis-label",
            )
        )
        scene.add(
            Text(
                f"y-label-{i}", -20, y.center(name), _capitalize(name),
                theme.text_primary, font_size=14, baseline="middle", weight="semibold",
                rotation=90, kind="axis-label",
            )
        )

    # Legend on the right, 80% of the chart height
    legend_height = size * 0.8
    legend_width = 20
    legend_x = size + 20
    legend_y = (size - legend_height) / 2
    d0, d1 = HEATMAP_COLOR_DOMAIN
    scene.add(
        Gradient(
            "legend-gradient", legend_x, legend_y, legend_width, legend_height,
            tuple(gradient_stops(HEATMAP_COLOR_DOMAIN, color, HEATMAP_LEGEND_STOPS)),
            stroke=theme.text_muted,
        )
    )
    scene.add(
        Text(
            "legend-min", legend_x + legend_width + 5, legend_y + legend_height, f"{d0:.2f}",
            theme.text_muted, font_size=11, anchor="start", baseline="middle", kind="legend-label",
        )
    )
    scene.add(
        Text(
            "legend-max", legend_x + legend_width + 5, legend_y, f"{d1:.2f}",
            theme.text_muted, font_size=11, anchor="start", baseline="middle", kind="legend-label",
        )
    )
    scene.add(
        Text(
            "legend-title", legend_x + legend_width + 35, legend_y + legend_height / 2,
            "Coeficiente de Correlação", theme.text_primary, font_size=11,
            baseline="middle", weight="semibold", rotation=90, kind="legend-label",
        )
    )

    return scene.build(background=theme.bg_tertiary)
