"""Logging configuration shared by the CLI and embedding applications."""
from __future__ import annotations

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    # force=True replaces handlers installed by a host application
    resolved = logging.getLevelName((level or settings.log_level).upper())
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(resolved))
