"""Base collector class for data collection sources."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from utils.datetime import now_iso
from utils.logging import get_logger

logger = get_logger(__name__)


class BaseCollector(ABC):
    """Abstract base class for all data collectors.

    Provides common functionality for event dispatch, logging,
    and error handling across different data sources.
    """

    def __init__(
        self,
        source_name: str,
        on_event: Optional[Callable[[Dict[str, Any]], None]] = None
    ):
        """Initialize the base collector.

        Args:
            source_name: Name of the data source (e.g., "energia.rendimento")
            on_event: Callback invoked for every emitted event, before listeners
        """
        self.source_name = source_name
        self.on_event = on_event or self._default_event_handler
        self.is_running = False
        self._listeners: List[Callable[[Dict[str, Any]], None]] = []

    def add_listener(self, listener: Callable[[Dict[str, Any]], None]) -> None:
        """Register an additional event listener."""
        self._listeners.append(listener)

    def _default_event_handler(self, event: Dict[str, Any]) -> None:
        """Default event handler that logs the event."""
        logger.debug(f"[{self.source_name}] Event: {event.get('status')}")

    def _create_base_event(self, **kwargs) -> Dict[str, Any]:
        """Create a base event structure with common fields.

        Args:
            **kwargs: Additional fields to include in the event

        Returns:
            Event dictionary with base structure
        """
        base_event = {
            "timestamp": now_iso(),
            "source": self.source_name,
        }
        base_event.update(kwargs)
        return base_event

    def _emit_event(self, event: Dict[str, Any]) -> None:
        """Safely emit an event through the callback and listeners.

        A failing listener is logged and does not stop the others.

        Args:
            event: Event dictionary to emit
        """
        for callback in [self.on_event, *self._listeners]:
            try:
                callback(event)
            except Exception as e:
                logger.error(f"[{self.source_name}] Error in event callback: {e}")

    def _handle_error(self, error: Exception, context: str = "") -> None:
        """Handle errors consistently across collectors.

        Args:
            error: The exception that occurred
            context: Optional context about when the error occurred
        """
        context_str = f" ({context})" if context else ""
        logger.error(f"[{self.source_name}] Error{context_str}: {error}")

    @abstractmethod
    def start(self) -> None:
        """Start the data collection process."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the data collection process."""
        pass
