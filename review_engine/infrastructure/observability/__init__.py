"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID management across async boundaries

Usage:
    from review_engine.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )

    # At startup
    configure_structlog()  # honours REVIEW_ENGINE_ENV

    # In request handling
    set_correlation_id(request_correlation_id)
"""

from review_engine.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from review_engine.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    resolve_environment,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "resolve_environment",
    "set_correlation_id",
]
