"""
FilterSet - Logging Configuration
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from filterset.core.config import settings


def setup_logging() -> None:
    """Route structlog events through the standard library root logger."""

    log_level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    # Request-scoped context (bound with structlog.contextvars) rides along
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Debug: readable console lines
    # Otherwise: one JSON object per event
    if settings.DEBUG:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    # Statement echo belongs to the caller's engine, not to filter compilation
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Gives a class a `logger` named after the class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)
