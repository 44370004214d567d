"""HTTP JSON resource with a three-state fetch lifecycle.

One ``ApiResource`` backs one mounted view: ``start()`` issues exactly one
GET, the outcome is exposed as a :class:`FetchState`, and ``stop()`` cancels
the resource so a late response is discarded instead of reaching a view that
is already gone.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

import requests

from config.config import FETCH_ERROR_MESSAGE, HTTP_TIMEOUT_S
from data_pipeline.collectors.base import BaseCollector
from utils.decorators import timer
from utils.logging import get_logger

logger = get_logger(__name__)


class FetchError(Exception):
    """Transport failure, non-success status, or malformed payload."""


class FetchStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus
    data: Any = None
    message: Optional[str] = None

    @classmethod
    def pending(cls) -> "FetchState":
        return cls(FetchStatus.PENDING)

    @classmethod
    def ready(cls, data: Any) -> "FetchState":
        return cls(FetchStatus.READY, data=data)

    @classmethod
    def failed(cls, message: str) -> "FetchState":
        return cls(FetchStatus.FAILED, message=message)

    @property
    def is_pending(self) -> bool:
        return self.status is FetchStatus.PENDING

    @property
    def is_ready(self) -> bool:
        return self.status is FetchStatus.READY

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED


class ApiResource(BaseCollector):
    """Fetch one JSON document from ``url`` once per activation.

    Args:
        url: Endpoint to GET.
        session: Optional ``requests.Session``; a private one is created otherwise.
        timeout: Request timeout in seconds; ``None`` keeps the transport default.
        transform: Optional callable applied to the decoded JSON. ``KeyError``,
            ``TypeError`` or ``ValueError`` raised here marks the payload as malformed.
        source_name: Name used in logs and events. Defaults to ``url``.
        on_event: Callback for state-change events (see :class:`BaseCollector`).
    """

    def __init__(
        self,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = HTTP_TIMEOUT_S,
        transform: Optional[Callable[[Any], Any]] = None,
        source_name: Optional[str] = None,
        on_event: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> None:
        super().__init__(source_name or url, on_event)
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.transform = transform
        self._state = FetchState.pending()
        self._lock = threading.Lock()
        self._cancelled = threading.Event()
        self._activated = False
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self, background: bool = False) -> None:
        """Issue the request. Repeated calls on the same resource are no-ops."""
        with self._lock:
            if self._activated:
                logger.debug(f"[{self.source_name}] Already activated; not refetching")
                return
            self._activated = True
            self.is_running = True

        if background:
            self._thread = threading.Thread(
                target=self._run, name=f"fetch-{self.source_name}", daemon=True
            )
            self._thread.start()
        else:
            self._run()

    def stop(self) -> None:
        """Cancel the resource; any response that has not been applied yet is dropped."""
        self._cancelled.set()
        self.is_running = False

    def wait(self, timeout: Optional[float] = None) -> FetchState:
        """Block until a background fetch finishes (or ``timeout`` elapses)."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self._state

    def _run(self) -> None:
        try:
            data = self._fetch()
        except FetchError as e:
            self._handle_error(e, "fetch")
            self._resolve(FetchState.failed(FETCH_ERROR_MESSAGE))
        else:
            self._resolve(FetchState.ready(data))
        finally:
            self.is_running = False

    @timer
    def _fetch(self) -> Any:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"request to {self.url} failed: {e}") from e

        if not response.ok:
            raise FetchError(f"{self.url} returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(f"{self.url} returned invalid JSON: {e}") from e

        if self.transform is None:
            return payload
        try:
            return self.transform(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise FetchError(f"{self.url} returned an unexpected payload: {e!r}") from e

    def _resolve(self, state: FetchState) -> None:
        with self._lock:
            if self._cancelled.is_set():
                logger.debug(f"[{self.source_name}] Discarding {state.status.value} response after cancel")
                return
            self._state = state
        self._emit_event(
            self._create_base_event(status=state.status.value, state=state)
        )
