"""
Mounted views backing the dashboard panels.

A view owns one ``ApiResource`` (one request per mount) and, for chart
panels, one ``ChartView`` bound to it. ``snapshot()`` collapses the fetch
state and any aggregate failure into the dict the panel renders.
"""

from typing import Any, Callable, Dict, Optional

import requests

from charts.render import ChartContainer
from charts.theme import LIGHT_THEME, Theme
from charts.view import ChartView, SceneFn
from config.config import EMPTY_DATA_MESSAGE, LOADING_MESSAGE
from data_pipeline.collectors.api_resource import ApiResource
from metrics.statistics import EmptyDatasetError
from utils.logging import get_logger

logger = get_logger(__name__)


class PanelView:
    """Fetch-and-derive unit plus an optional chart for one panel."""

    def __init__(
        self,
        name: str,
        url: str,
        transform: Callable[[Any], Any],
        *,
        build_scene: Optional[SceneFn] = None,
        session: Optional[requests.Session] = None,
        container: Optional[ChartContainer] = None,
        theme: Theme = LIGHT_THEME,
    ) -> None:
        self.name = name
        self.resource = ApiResource(url, session=session, transform=transform, source_name=name)
        self.chart: Optional[ChartView] = None
        if build_scene is not None:
            self.chart = ChartView(build_scene, container=container, theme=theme, name=name)
            self.chart.bind(self.resource)

    def mount(self, background: bool = False) -> None:
        self.resource.start(background=background)

    def unmount(self) -> None:
        self.resource.stop()
        if self.chart is not None:
            self.chart.dispose()

    def derive(self, data: Any) -> Dict[str, Any]:
        """Panel-specific content for ready data. May raise ``EmptyDatasetError``."""
        return {}

    def snapshot(self) -> Dict[str, Any]:
        state = self.resource.state
        if state.is_pending:
            return {"status": "pending", "message": LOADING_MESSAGE}
        if state.is_failed:
            return {"status": "failed", "message": state.message}
        try:
            content = self.derive(state.data)
        except EmptyDatasetError as e:
            logger.warning(f"[{self.name}] {e}")
            return {"status": "failed", "message": EMPTY_DATA_MESSAGE}
        result = {"status": "ready", **content}
        if self.chart is not None:
            result["scene"] = self.chart.scene
        return result
