"""DateTime utilities for the project."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Get current timestamp in ISO format."""
    return utc_now().isoformat()


def format_hour(hora: str) -> str:
    """Format an hour-of-day label the way the cards show it (``"07"`` -> ``"às 07h"``)."""
    return f"às {hora}h"
