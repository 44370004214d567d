"""Logging setup for the dashboard and its fetch/render layers.

Level, file and format come from ``config.config`` (``LOG_LEVEL`` can be set
in ``.env``). Chatty third-party loggers (HTTP connection pool, matplotlib
font discovery) are capped at WARNING so DEBUG output stays about the
dashboard itself.
"""

import logging
import sys
from typing import Iterable, Optional

from config.config import LOG_FILE, LOG_FORMAT, LOG_LEVEL, QUIET_LOGGERS


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name; defaults to ``LOG_LEVEL``
        log_file: Optional path to a log file; defaults to ``LOG_FILE``
        format_string: Record format; defaults to ``LOG_FORMAT``
        quiet: Logger names raised to at least WARNING
    """
    level = level or LOG_LEVEL
    log_file = log_file or LOG_FILE

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string or LOG_FORMAT,
        handlers=handlers,
    )
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring the root logger on first use."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


dashboard_logger = get_logger("dashboard")
