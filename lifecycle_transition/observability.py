"""Structured logging configuration with structlog.

Usage:
    from lifecycle_transition.observability import configure_logging

    configure_logging(get_settings())

    log = structlog.get_logger(__name__)
    log.info("event_name", key="value")
"""

import logging

import structlog
from structlog.typing import Processor

from .config import Settings


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog once at application startup.

    'json' renders one JSON object per line for log aggregation;
    'console' renders coloured key=value output for development.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_level(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
