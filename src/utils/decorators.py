"""Utility decorators for common functionality."""

import functools
import time
from typing import Any, Callable

from utils.logging import get_logger

logger = get_logger(__name__)


def timer(func: Callable) -> Callable:
    """Decorator to time function execution and log results at DEBUG."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__qualname__} took {elapsed_ms:.1f}ms")
    return wrapper
