"""Structured logging configuration using structlog.

Call setup_logging() once at process startup before any log calls.
"""

from __future__ import annotations

import logging

import structlog

from src.config.settings import LoggingSettings


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for the process.

    Args:
        settings: Level and renderer choice. Read from LOG_* env vars when omitted.
    """
    settings = settings or LoggingSettings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.level]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
