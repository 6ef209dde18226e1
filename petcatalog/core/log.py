"""Loguru sink setup shared by the app and the scripts."""
from __future__ import annotations

import sys

from loguru import logger

from .config import get_settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a stderr sink at the configured level."""
    global _configured
    if _configured and level is None:
        return
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or get_settings().log_level).upper(),
        format="{time:HH:mm:ss} | {level} | {name}:{line} | {message}",
    )
    _configured = True
