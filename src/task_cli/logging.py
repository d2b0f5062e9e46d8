"""Structured logging configuration for task-cli.

Uses structlog for structured, context-rich logging that supports
both human-readable console output and machine-readable JSON format.
All log output goes to stderr so listings on stdout stay clean.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from task_cli.config import BaseSettings


def configure_logging(settings: "BaseSettings | None" = None) -> None:
    """Configure structured logging based on settings.

    Args:
        settings: Application settings. If None, uses defaults.
    """
    log_level = logging.WARNING
    log_format = "console"

    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        log_format = settings.log_format

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    # Loggers are rebuilt per call so a later configure_logging() takes effect
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls in the current context.

    Example:
        bind_context(operation="add", path="/tmp/todo.json")
        logger.info("task_added")  # Will include operation and path

    Args:
        **kwargs: Key-value pairs to bind to logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class Loggers:
    """Pre-configured logger instances for task-cli components."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        """Logger for the command-line entry point."""
        return get_logger("task_cli.cli")

    @staticmethod
    def tasks() -> structlog.stdlib.BoundLogger:
        """Logger for task operations."""
        return get_logger("task_cli.tasks")

    @staticmethod
    def persistence() -> structlog.stdlib.BoundLogger:
        """Logger for the storage layer."""
        return get_logger("task_cli.persistence")
