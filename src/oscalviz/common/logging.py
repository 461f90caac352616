"""Structured JSON logging using structlog.

Provides consistent logging configuration for OSCALViz components.
Supports both JSON (production) and console (development) formats.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from oscalviz.common.config import LoggingSettings, get_settings


def add_service_context(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add service context to log entries."""
    settings = get_settings()
    event_dict["service"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        settings: Logging settings. Uses global settings if not provided.
    """
    if settings is None:
        settings = get_settings().logging

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if settings.include_caller:
        shared_processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ))

    shared_processors.append(add_service_context)

    if settings.format == "json":
        format_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        format_processors = [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=shared_processors + format_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.level),
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually __name__).
        **initial_context: Initial context to bind to the logger.

    Returns:
        Configured structlog logger.

    Example:
        logger = get_logger(__name__, profile_uuid="abc123")
        logger.info("Resolving profile", imports=3)
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


class LoggerMixin:
    """Mixin class to add a logger to any class.

    Example:
        class MyResolver(LoggerMixin):
            def resolve(self):
                self.logger.debug("Resolving")
    """

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get logger bound to this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


def bind_context(**context: Any) -> None:
    """Bind document identifiers to every log event in the current context.

    Loggers of nested components pick the values up too, so resolver and
    aggregator events carry the id of the document being analyzed.

    Example:
        bind_context(profile_uuid=profile.uuid)
        try:
            resolver.resolve(profile, catalogs)
        finally:
            unbind_context("profile_uuid")
    """
    structlog.contextvars.bind_contextvars(**context)


def unbind_context(*keys: str) -> None:
    """Remove keys bound with ``bind_context``."""
    structlog.contextvars.unbind_contextvars(*keys)
