"""
Energy & Health Statistics Dashboard - Streamlit Application

Main dashboard presenting energy-efficiency and health-correlation
statistics fetched from the statistics API.
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

import streamlit as st

# Add src and the repository root to the path when run from a checkout
dashboard_path = Path(__file__).parent
sys.path.insert(0, str(dashboard_path.parent / "src"))
sys.path.insert(0, str(dashboard_path.parent))

from config.config import API_BASE_URL, API_ENDPOINTS, HTTP_TIMEOUT_S, RESIZE_DEBOUNCE_S
from utils.logging import dashboard_logger

from dashboard.components import energy, health
from dashboard.components.layout import apply_custom_css, current_theme
from dashboard.components.views import PanelView

PAGES = ("⚡ Energia", "🩺 Saúde", "📋 Sobre")


def main():
    """Main dashboard application."""

    # Page configuration
    st.set_page_config(
        page_title="Painel de Estatísticas",
        page_icon="📊",
        layout="wide",
        initial_sidebar_state="expanded"
    )
    apply_custom_css()

    st.title("📊 Painel de Estatísticas")
    st.markdown("Eficiência energética e correlações de saúde.")

    # Sidebar navigation
    st.sidebar.title("🧭 Navegação")
    page = st.sidebar.radio("Página:", options=PAGES, index=0)

    # Reloading remounts every view, which issues a fresh request per view
    if st.sidebar.button("🔄 Recarregar dados"):
        remount_views()
        st.rerun()

    if page == PAGES[0]:
        render_energy_page()
    elif page == PAGES[1]:
        render_health_page()
    else:
        render_about_page()


def remount_views() -> int:
    """Unmount every mounted view of this session. Returns how many were dropped."""
    keys = [k for k, v in st.session_state.items() if isinstance(v, PanelView)]
    for key in keys:
        st.session_state[key].unmount()
        del st.session_state[key]
    dashboard_logger.info(f"Unmounted {len(keys)} views")
    return len(keys)


def _render_isolated(name: str, render) -> None:
    """Render one panel; its failure is reported without affecting siblings."""
    try:
        render()
    except Exception as e:
        dashboard_logger.exception(f"Panel {name} failed")
        st.error(f"❌ Erro ao renderizar {name}: {e}")


def render_energy_page():
    """Render the energy page: efficiency per hour and other metrics."""
    st.header("⚡ Energia")
    _render_isolated("Rendimento Médio por Horário", energy.render_average_per_hour_panel)
    st.divider()
    _render_isolated("Outras Métricas", energy.render_energy_metrics_panel)


def render_health_page():
    """Render the health page: heat map and scatter side by side."""
    st.header("🩺 Saúde")
    col1, col2 = st.columns(2)
    with col1:
        _render_isolated("Mapa de Calor de Correlação", health.render_heatmap_panel)
    with col2:
        _render_isolated("Colesterol x Pressão Arterial", health.render_scatter_panel)


def render_about_page():
    """Render the about/configuration page."""
    st.header("📋 Sobre")
    st.markdown("""
    ### 🎯 Propósito
    Painel somente leitura com estatísticas obtidas da API.

    - **Energia**: rendimento médio por horário, rendimento máximo/mínimo e potência máxima
    - **Saúde**: mapa de calor de correlação e dispersão colesterol x pressão arterial

    Cada painel faz uma única requisição ao ser montado; use **Recarregar dados**
    para montar os painéis novamente.
    """)

    st.subheader("⚙️ Configuração atual")
    endpoints = "\n".join(
        f"{page}.{name}: {url}"
        for page, urls in API_ENDPOINTS.items()
        for name, url in urls.items()
    )
    st.code(f"""
API Base URL: {API_BASE_URL}
HTTP Timeout: {HTTP_TIMEOUT_S if HTTP_TIMEOUT_S is not None else 'padrão'}
Resize debounce: {RESIZE_DEBOUNCE_S}s
Tema: {current_theme().name}
{endpoints}
    """)


if __name__ == "__main__":
    main()
