"""Logger factory for pyidioms modules.

The root handler is installed on first use, at the level taken from
``Settings.log_level`` (``PYIDIOMS_LOG_LEVEL``: DEBUG|INFO|WARNING|ERROR).
Unknown level names fall back to INFO.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..config import load_settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED = False


def _configure_once() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    level = logging.getLevelName(load_settings().log_level)
    logging.basicConfig(level=level if isinstance(level, int) else logging.INFO, format=LOG_FORMAT)
    _CONFIGURED = True


class ContextAdapter(logging.LoggerAdapter):
    """Prefix every message with ``[k=v ...]`` from the bound context."""

    def process(self, msg, kwargs):  # type: ignore[override]
        ctx = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{ctx}] {msg}", kwargs


def get_logger(name: str, context: Optional[Mapping[str, object]] = None) -> logging.Logger:
    _configure_once()
    logger = logging.getLogger(name)
    if context:
        return ContextAdapter(logger, dict(context))  # type: ignore[return-value]
    return logger
