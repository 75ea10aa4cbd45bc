"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this configures the root
logger once per process.
"""

from __future__ import annotations

import logging
import sys

from . import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def resolve_level(name: str | None) -> int:
    # Unknown names fall back to INFO instead of failing startup.
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(resolve_level(level or settings.log_level()))
    root.addHandler(handler)
    _configured = True
