"""
Health page panels: correlation heat map and cholesterol x pressure scatter.
"""

from typing import Any, Dict, Optional

import streamlit as st

from charts.heatmap import correlation_heatmap_scene, lower_triangle_cells
from charts.scatter import scatter_scene
from charts.theme import Theme
from config.config import API_ENDPOINTS
from data_pipeline.processors.payloads import correlation_matrix, scatter_points

from dashboard.components.layout import current_theme, mount_view, render_chart, render_fetch_state
from dashboard.components.views import PanelView

HEATMAP_KEY = "saude.mapa_calor"
SCATTER_KEY = "saude.dispersao"


class CorrelationHeatMapView(PanelView):
    def __init__(self, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(
            HEATMAP_KEY,
            url or API_ENDPOINTS["saude"]["mapa_calor"],
            correlation_matrix,
            build_scene=correlation_heatmap_scene,
            **kwargs,
        )

    def derive(self, data: Any) -> Dict[str, Any]:
        return {"variables": list(data), "cells": lower_triangle_cells(data)}


class ScatterView(PanelView):
    def __init__(self, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(
            SCATTER_KEY,
            url or API_ENDPOINTS["saude"]["dispersao"],
            scatter_points,
            build_scene=scatter_scene,
            **kwargs,
        )

    def derive(self, data: Any) -> Dict[str, Any]:
        return {"points_count": len(data)}


def _render_chart_panel(title: str, view: PanelView, theme: Optional[Theme]) -> Dict[str, Any]:
    view.chart.set_theme(theme or current_theme())

    st.subheader(title)
    result = view.snapshot()
    if not render_fetch_state(result):
        return result

    result["chart_shown"] = render_chart(view.chart)
    return result


def render_heatmap_panel(
    view: Optional[CorrelationHeatMapView] = None,
    theme: Optional[Theme] = None,
) -> Dict[str, Any]:
    """
    Render the correlation heat map panel.

    Returns:
        Panel snapshot with ``status`` and, when ready, ``cells`` and ``scene``
    """
    view = view or mount_view(HEATMAP_KEY, CorrelationHeatMapView)
    return _render_chart_panel("Mapa de Calor de Correlação", view, theme)


def render_scatter_panel(
    view: Optional[ScatterView] = None,
    theme: Optional[Theme] = None,
) -> Dict[str, Any]:
    """Render the cholesterol x blood-pressure scatter panel."""
    view = view or mount_view(SCATTER_KEY, ScatterView)
    return _render_chart_panel("Colesterol x Pressão Arterial", view, theme)
