"""Structured logging configuration with structlog.

Production emits one JSON object per line; every other environment
renders colored console output. The environment is passed explicitly or
read from ``REVIEW_ENGINE_ENV``.

Log entry (production):
    {
        "timestamp": "2026-01-05T09:00:00.000000Z",
        "level": "info",
        "event": "Peer nominations saved",
        "service": "PeerNominationService",
        "component": "review_engine",
        "correlation_id": "uuid",
        "cycle_id": "uuid",
        ...operation context
    }

Usage:
    from review_engine.infrastructure.observability import configure_structlog

    configure_structlog()                           # from REVIEW_ENGINE_ENV
    configure_structlog(environment="development")  # console output
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from review_engine.infrastructure.observability.correlation import (
    correlation_id_processor,
)

ENVIRONMENT_ENV = "REVIEW_ENGINE_ENV"
LOG_LEVEL_ENV = "LOG_LEVEL"
PRODUCTION = "production"

# Level used when LOG_LEVEL is unset
_DEFAULT_LEVELS: dict[str, str] = {PRODUCTION: "INFO", "development": "DEBUG"}


def resolve_environment(environment: str | None = None) -> str:
    """Return the explicit environment, else REVIEW_ENGINE_ENV, else production."""
    if environment:
        return environment.strip().lower()
    return os.getenv(ENVIRONMENT_ENV, PRODUCTION).strip().lower() or PRODUCTION


def _get_log_level(environment: str) -> int:
    default = _DEFAULT_LEVELS.get(environment, "INFO")
    level_name = os.getenv(LOG_LEVEL_ENV, default).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog once at startup.

    Args:
        environment: 'production' for JSON output, anything else for
            console output. Resolved from REVIEW_ENGINE_ENV when omitted.
    """
    resolved = resolve_environment(environment)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
    ]

    if resolved == PRODUCTION:
        # Tracebacks become a string field so each entry stays one JSON line
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(resolved)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "review_engine"
) -> structlog.BoundLogger:
    """Logger with ``service`` and ``component`` already bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
