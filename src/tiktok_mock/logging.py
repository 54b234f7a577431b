"""
Structured logging configuration for the mock creative report server.

Provides JSON (or console) logging with the response request id bound
to every entry logged while a request is being handled.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

import structlog

from .utils.id_generator import generate_request_id

SERVICE_NAME = "tiktok-mock"

# Context variable for request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get()


def add_request_id(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to add request ID to log entries."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to add service info to log entries."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
        show_timestamps: Whether to include timestamps
    """
    # Environment wins over arguments
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        add_request_id,
        add_service_info,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if format == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


def http_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for HTTP request/response events."""
    return get_logger("tiktok_mock.http")


def report_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for report synthesis events."""
    return get_logger("tiktok_mock.report")


class LogContext:
    """Context manager for request-scoped logging."""

    def __init__(self, request_id: str | None = None, **initial_context: Any):
        """
        Initialize log context.

        Args:
            request_id: Optional request ID (generated if not provided)
            **initial_context: Additional context to bind
        """
        self.request_id = request_id or generate_request_id()
        self.initial_context = initial_context
        self.token = None

    def __enter__(self) -> "LogContext":
        """Enter context and set request ID."""
        self.token = request_id_var.set(self.request_id)
        if self.initial_context:
            structlog.contextvars.bind_contextvars(**self.initial_context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context and clear request ID."""
        request_id_var.reset(self.token)
        structlog.contextvars.clear_contextvars()


# Initialize with defaults on module load
configure_logging()
