"""
Energy page panels.

- "Rendimento Médio por Horário": bar chart of efficiency per hour plus
  mean/max/min cards, from the efficiency-detail endpoint.
- "Outras Métricas": the four summary cards from the full energy dataset.
"""

from functools import partial
from typing import Any, Dict, Optional

import streamlit as st

from charts.bar import efficiency_bar_scene
from charts.theme import Theme
from config.config import API_ENDPOINTS
from data_pipeline.processors.payloads import efficiency_records, energy_records
from metrics.cards import efficiency_cards, energy_cards
from metrics.statistics import StatisticsMemo, energy_metrics, summarize

from dashboard.components.layout import (
    current_theme,
    mount_view,
    render_chart,
    render_fetch_state,
    render_metric_cards,
)
from dashboard.components.views import PanelView

AVERAGE_PER_HOUR_KEY = "energia.rendimento"
ENERGY_METRICS_KEY = "energia.dados"


class AverageEfficiencyView(PanelView):
    def __init__(self, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(
            AVERAGE_PER_HOUR_KEY,
            url or API_ENDPOINTS["energia"]["rendimento"],
            efficiency_records,
            build_scene=efficiency_bar_scene,
            **kwargs,
        )
        self._stats = StatisticsMemo(partial(summarize, field="percentual_rendimento"))

    def derive(self, data: Any) -> Dict[str, Any]:
        summary = self._stats.get(data)
        return {"summary": summary, "cards": efficiency_cards(summary)}


class EnergyMetricsView(PanelView):
    def __init__(self, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(
            ENERGY_METRICS_KEY,
            url or API_ENDPOINTS["energia"]["dados"],
            energy_records,
            **kwargs,
        )
        self._metrics = StatisticsMemo(energy_metrics)

    def derive(self, data: Any) -> Dict[str, Any]:
        metrics = self._metrics.get(data)
        return {"metrics": metrics, "cards": energy_cards(metrics)}


def render_average_per_hour_panel(
    view: Optional[AverageEfficiencyView] = None,
    theme: Optional[Theme] = None,
) -> Dict[str, Any]:
    """
    Render the efficiency-per-hour panel.

    Args:
        view: Mounted view to render; the session's view is used when None
        theme: Theme override; defaults to the Streamlit theme

    Returns:
        Panel snapshot with ``status`` and, when ready, ``cards`` and ``scene``
    """
    view = view or mount_view(AVERAGE_PER_HOUR_KEY, AverageEfficiencyView)
    view.chart.set_theme(theme or current_theme())

    st.subheader("Rendimento Médio por Horário")
    result = view.snapshot()
    if not render_fetch_state(result):
        return result

    render_metric_cards(result["cards"])
    result["chart_shown"] = render_chart(view.chart)
    return result


def render_energy_metrics_panel(view: Optional[EnergyMetricsView] = None) -> Dict[str, Any]:
    """Render the "Outras Métricas" cards."""
    view = view or mount_view(ENERGY_METRICS_KEY, EnergyMetricsView)

    st.subheader("Outras Métricas")
    st.caption("Estatísticas relevantes acerca dos dados")
    result = view.snapshot()
    if not render_fetch_state(result):
        return result

    render_metric_cards(result["cards"])
    return result
