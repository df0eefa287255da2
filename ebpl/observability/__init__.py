"""Lightweight observability helpers for logging."""

from __future__ import annotations

from .logging import LOG_LEVELS, configure_logging, get_logger, log_compile_event

__all__ = [
    "LOG_LEVELS",
    "configure_logging",
    "get_logger",
    "log_compile_event",
]
