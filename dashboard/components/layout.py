"""
Shared layout helpers for dashboard components.

Provides common UI utilities for state messages, metric cards, charts and
per-session view mounting.
"""

from typing import Any, Callable, Dict, List, Optional, TypeVar

import streamlit as st

from charts.theme import Theme, get_theme
from charts.view import ChartView
from config.config import DASHBOARD_THEME, EMPTY_DATA_MESSAGE, LOADING_MESSAGE
from metrics.cards import MetricCard
from utils.logging import dashboard_logger

V = TypeVar("V")


def current_theme() -> Theme:
    """Theme from Streamlit's configured base, falling back to ``DASHBOARD_THEME``."""
    try:
        base = st.get_option("theme.base")
    except Exception:
        base = None
    return get_theme(base or DASHBOARD_THEME)


def mount_view(key: str, factory: Callable[[], V]) -> V:
    """
    Return the view mounted under ``key`` for this session, mounting it once.

    Args:
        key: Session-state key for the view
        factory: Zero-argument constructor for the view

    Returns:
        The mounted view (its single fetch has already been issued)
    """
    view = st.session_state.get(key)
    if view is None:
        view = factory()
        st.session_state[key] = view
        dashboard_logger.info(f"Mounting view {key}")
        view.mount()
    return view


def render_fetch_state(result: Dict[str, Any]) -> bool:
    """
    Render the loading/failure message for a panel snapshot.

    Returns:
        True when the panel is ready and its content should be drawn
    """
    status = result.get("status")
    if status == "pending":
        st.info(result.get("message") or LOADING_MESSAGE)
        return False
    if status == "failed":
        st.error(f"Erro: {result.get('message')}")
        return False
    return True


def render_metric_card(card: MetricCard) -> None:
    """Render a single summary card with its accent colour."""
    complement_html = ""
    if card.complement_value:
        complement_html = f"""
        <span style="font-size: 0.875rem; opacity: 0.7; margin-left: 0.5rem;">
            {card.complement_value}
        </span>
        """

    st.markdown(f"""
    <div style="
        border: 1px solid rgba(128, 128, 128, 0.25);
        border-left: 4px solid {card.color};
        border-radius: 0.5rem;
        padding: 0.75rem 1rem;
        margin: 0.25rem 0;
    ">
        <div style="font-size: 0.875rem; font-weight: 500; margin-bottom: 0.25rem;">
            {card.title}
        </div>
        <div style="display: flex; align-items: baseline;">
            <span style="color: {card.color}; font-size: 1.5rem; font-weight: 700;">
                {card.main_value}
            </span>
            {complement_html}
        </div>
    </div>
    """, unsafe_allow_html=True)


def render_metric_cards(cards: List[MetricCard]) -> None:
    """Render cards side by side, one column each."""
    if not cards:
        return
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        with column:
            render_metric_card(card)


def render_chart(chart: Optional[ChartView]) -> bool:
    """
    Show the chart's current figure.

    Returns:
        True if a figure was shown, False when there was nothing drawn
    """
    if chart is None or chart.scene is None:
        st.info(EMPTY_DATA_MESSAGE)
        return False
    st.pyplot(chart.container.figure)
    return True


def apply_custom_css() -> None:
    """Apply custom CSS styling for compact layout."""
    st.markdown("""
    <style>
    .block-container {
        padding-top: 2rem;
    }

    section[data-testid="stSidebar"] h1 {
        font-size: 1.25rem;
    }
    </style>
    """, unsafe_allow_html=True)
