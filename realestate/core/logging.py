"""Structured logging configuration."""

import logging

import structlog


def setup_logging(level: str = "INFO", format_type: str = "console") -> None:
    """
    Configure structlog for the application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "console" for human-readable output or "json"

    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer: structlog.types.Processor
    if format_type == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
