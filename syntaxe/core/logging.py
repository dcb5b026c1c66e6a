"""Structured logging configuration for the validation engine.

This module configures structlog for consistent, machine-readable logging
across the engine, the resolvers and the command-line interface.
"""

import logging
import sys
import time
from typing import Any

import structlog
from structlog.typing import EventDict


def add_app_context(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application-specific context to log events."""
    event_dict["service"] = "syntaxe"
    event_dict["component"] = event_dict.get("logger", "unknown")
    return event_dict


def add_correlation_id(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add correlation ID for tracing a single validation run."""
    correlation_id = structlog.contextvars.get_contextvars().get("correlation_id")
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def configure_logging(
    environment: str = "development", log_level: str = "INFO", json_logs: bool = False
) -> None:
    """Configure structured logging for the application.

    Args:
        environment: Application environment (development/testing/production)
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR)
        json_logs: Whether to output JSON format logs
    """
    # Configure stdlib logging to work with structlog
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    # Determine output format based on environment
    if json_logs or environment == "production":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    processors = [
        # Built-in processors
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        # Custom processors
        add_app_context,
        add_correlation_id,
        # Format and render
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    The logger is bound to stdlib logging even before ``configure_logging``
    runs, so library use never prints below the host's configured level.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def bind_context(**kwargs: Any) -> None:
    """Bind context variables for tracing.

    Args:
        **kwargs: Context variables to bind (e.g., correlation_id)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class TraversalLogger:
    """Helper for logging the duration and outcome of a root validation run."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, target: Any):
        self.logger = logger
        self.target_type = type(target).__qualname__
        self.start_time: float | None = None
        self.error_count = 0

    def __enter__(self) -> "TraversalLogger":
        self.start_time = time.perf_counter()
        self.logger.debug("Validation started", target_type=self.target_type)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return

        duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.debug(
                "Validation completed",
                target_type=self.target_type,
                error_count=self.error_count,
                duration_ms=round(duration * 1000, 2),
            )
        else:
            self.logger.error(
                "Validation aborted",
                target_type=self.target_type,
                duration_ms=round(duration * 1000, 2),
                error=str(exc_val),
                error_type=exc_type.__name__,
            )
