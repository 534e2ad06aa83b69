"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging

import structlog

from src.common.constants import LOG_LEVEL


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


def configure_structlog(level: int | str | None = None) -> None:
    """Configure structlog for human-readable console output.

    Call once at process startup.  *level* defaults to ``STATLIB_LOG_LEVEL``.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
