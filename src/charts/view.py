"""Chart lifecycle: redraw on data arrival, container resize and theme change."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from charts.render import ChartContainer, HoverController, RenderedScene, draw_scene
from charts.scene import Scene
from charts.theme import LIGHT_THEME, Theme
from config.config import RESIZE_DEBOUNCE_S
from data_pipeline.collectors.api_resource import ApiResource
from utils.decorators import timer
from utils.logging import get_logger

logger = get_logger(__name__)

SceneFn = Callable[[Any, float, Theme], Optional[Scene]]


class Debouncer:
    """Run ``fn`` once, ``delay`` seconds after the last call."""

    def __init__(self, delay: float, fn: Callable[[], Any]) -> None:
        self.delay = delay
        self.fn = fn
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        self.fn()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class ChartView:
    """A chart mounted in a container.

    ``build_scene(data, width_px, theme)`` turns the current inputs into a
    scene; every trigger funnels into :meth:`draw`, which fully clears and
    redraws the container. Missing data or a zero-width container make
    :meth:`draw` a no-op.
    """

    def __init__(
        self,
        build_scene: SceneFn,
        *,
        container: Optional[ChartContainer] = None,
        theme: Theme = LIGHT_THEME,
        debounce_s: float = RESIZE_DEBOUNCE_S,
        interactive: bool = True,
        name: str = "chart",
    ) -> None:
        self.build_scene = build_scene
        self.container = container or ChartContainer()
        self.name = name
        self.interactive = interactive
        self._theme = theme
        self._data: Any = None
        self._select: Callable[[Any], Any] = lambda payload: payload
        self._lock = threading.RLock()
        self._debouncer = Debouncer(debounce_s, self.draw)
        self._hover: Optional[HoverController] = None
        self._disposed = False
        self.scene: Optional[Scene] = None
        self.rendered: Optional[RenderedScene] = None
        self.draw_count = 0

    @property
    def data(self) -> Any:
        return self._data

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def hover(self) -> Optional[HoverController]:
        return self._hover

    @property
    def resize_pending(self) -> bool:
        return self._debouncer.pending

    def bind(self, resource: ApiResource, select: Optional[Callable[[Any], Any]] = None) -> None:
        """Redraw with ``select(payload)`` whenever ``resource`` becomes ready."""
        if select is not None:
            self._select = select
        resource.add_listener(self._on_fetch_event)
        if resource.state.is_ready:
            self.set_data(self._select(resource.state.data))

    def _on_fetch_event(self, event: Dict[str, Any]) -> None:
        state = event["state"]
        if state.is_ready:
            self.set_data(self._select(state.data))

    def set_data(self, data: Any) -> Optional[Scene]:
        self._data = data
        return self.draw()

    def set_theme(self, theme: Theme) -> Optional[Scene]:
        if theme == self._theme:
            return self.scene
        self._theme = theme
        return self.draw()

    def resize(self, width_px: float) -> None:
        """Record the new container width and schedule a debounced redraw."""
        self.container.resize(width_px)
        if not self._disposed:
            self._debouncer()

    @timer
    def draw(self) -> Optional[Scene]:
        with self._lock:
            if self._disposed or self._data is None:
                return None
            scene = self.build_scene(self._data, self.container.measured_width, self._theme)
            if scene is None:
                if not self._data:
                    # empty data clears; a zero-width container keeps the last drawing
                    self._clear()
                logger.debug(f"[{self.name}] nothing to draw at width {self.container.measured_width}")
                return None

            if self._hover is not None:
                self._hover.disconnect()
                self._hover = None
            self.rendered = draw_scene(self.container, scene)
            if self.interactive:
                self._hover = HoverController(self.rendered)
                self._hover.connect()
            self.scene = scene
            self.draw_count += 1
            return scene

    def _clear(self) -> None:
        if self._hover is not None:
            self._hover.disconnect()
            self._hover = None
        self.container.figure.clear()
        self.rendered = None
        self.scene = None

    def dispose(self) -> None:
        self._debouncer.cancel()
        with self._lock:
            self._disposed = True
            if self._hover is not None:
                self._hover.disconnect()
                self._hover = None
