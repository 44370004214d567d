"""Data collectors for the statistics API."""

from .base import BaseCollector
from .api_resource import ApiResource, FetchError, FetchState, FetchStatus

__all__ = [
    "BaseCollector",
    "ApiResource",
    "FetchError",
    "FetchState",
    "FetchStatus",
]
