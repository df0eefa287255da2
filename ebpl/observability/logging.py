"""Centralised logging helpers for the EBPL compiler."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str = "ebpl") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def log_compile_event(
    event: str,
    message: str,
    *,
    level: int = logging.INFO,
    logger: Optional[logging.Logger] = None,
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured log entry for a compile pipeline event."""

    target_logger = logger or get_logger("ebpl.pipeline")
    target_logger.log(
        level,
        message,
        extra={"ebpl_event": event, "ebpl_data": dict(data or {})},
    )


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a console handler to the ``ebpl`` logger at ``level``."""

    numeric_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    root_logger = get_logger("ebpl")
    root_logger.setLevel(numeric_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        root_logger.propagate = False
    return root_logger
