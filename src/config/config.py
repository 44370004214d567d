"""Project-wide single-source configuration constants for the statistics dashboard."""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from utils.path_utils import find_repo_root

# ----- Base directory configuration -------
PROJECT_ROOT = find_repo_root()
load_dotenv(PROJECT_ROOT / ".env")


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


# ------ API boundary -------
API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
HTTP_TIMEOUT_S: Optional[float] = _env_float("HTTP_TIMEOUT_S")  # None = transport default


def build_endpoints(base_url: str) -> Dict[str, Dict[str, str]]:
    """Return the endpoint table for ``base_url``, grouped by page."""
    base = base_url.rstrip("/")
    return {
        "energia": {
            "rendimento": f"{base}/api/energia/rendimento/",
            "dados": f"{base}/api/energia/dados/",
        },
        "saude": {
            "mapa_calor": f"{base}/api/saude/mapa-calor-correlacao/",
            "dispersao": f"{base}/api/saude/dispersao-colesterol-pressao/",
        },
    }


API_ENDPOINTS: Dict[str, Dict[str, str]] = build_endpoints(API_BASE_URL)

# ------ Messages (pt-BR, single locale) -------
LOADING_MESSAGE: str = "Carregando dados..."
FETCH_ERROR_MESSAGE: str = "Erro ao carregar dados"
EMPTY_DATA_MESSAGE: str = "Nenhum dado disponível"

# ------ Logging -------
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LOGGERS: tuple[str, ...] = ("urllib3", "matplotlib", "PIL")  # capped at WARNING

# ------ Theme -------
DASHBOARD_THEME: str = os.getenv("DASHBOARD_THEME", "light")  # "light" | "dark"

# ------ Chart lifecycle -------
RESIZE_DEBOUNCE_S: float = 0.1      # container resize debounce
CHART_DPI: int = 100                # 1 scene unit == 1 pixel at this DPI
CHART_WIDTH_PX: int = 800           # measured width used by the Streamlit panels

# ------ Bar chart -------
BAR_CHART_HEIGHT_PX: int = 200       # plot-area height; margins are added around it
BAR_BAND_PADDING: float = 0.2
BAR_HEADROOM: float = 1.1           # y domain is [0, max * 1.1]
BAR_Y_TICKS: int = 5

# ------ Heat map -------
HEATMAP_BAND_PADDING: float = 0.1
HEATMAP_MAX_CELL_PX: float = 80.0
HEATMAP_COLOR_DOMAIN: tuple[float, float] = (0.85, 1.0)  # emphasise high correlations
HEATMAP_LIGHT_TEXT_ABOVE: float = 0.93
HEATMAP_LEGEND_STOPS: int = 10

# ------ Scatter -------
SCATTER_HEIGHT_PX: int = 300        # total height including margins
SCATTER_DOMAIN_PADDING: float = 0.1
SCATTER_FALLBACK_PADDING: float = 10.0  # used when min == max
SCATTER_TICKS: int = 5
