"""
Structured logging setup.

All modules log through structlog with snake_case event names and
key/value context:

    logger = get_logger(__name__)
    logger.info("advertisement_request_created", user_ip=ip)
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from streamvault.core.config import settings


def setup_logging() -> None:
    """
    Configure structlog and the standard library root logger.

    LOG_FORMAT=json renders one JSON object per line (for log aggregation);
    LOG_FORMAT=text renders human-readable console output.
    """
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name)
