"""
Shared logging setup for the scoping library and the dashboard.

Library modules take a logger from :func:`get_logger` (``scoping.registry``,
``scoping.session``...) so scope writes, duplicate bindings and unbound
output slots all go through one stdout handler. The Streamlit script calls
:func:`setup_logging` with the level from ``AppConfig``.
"""

import logging
import sys
from typing import Optional

from config.config import LOG_LEVEL, LOG_FORMAT


def setup_logging(
    level: str = LOG_LEVEL,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Install the stdout handler (and an optional file handler) on the root logger.

    Handlers are installed once. The level is applied on every call, since
    ``scoping`` modules call :func:`get_logger` at import time, before
    ``dashboard.app`` knows the configured level.

    Args:
        level: Level name such as ``"DEBUG"`` to see every scoped registry write
        log_file: Also append records to this file
        format_string: Overrides ``LOG_FORMAT``
    """
    if format_string is None:
        format_string = LOG_FORMAT

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stdout),
            *([logging.FileHandler(log_file)] if log_file else [])
        ]
    )
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> logging.Logger:
    """Module logger, installing the default handler on first use."""
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)


# Panel-level errors in dashboard/app.py
dashboard_logger = get_logger("dashboard")
