"""Startup logging for processes embedding the review engine."""

from __future__ import annotations

from structlog import get_logger

from review_engine.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)
from review_engine.infrastructure.observability.logging import resolve_environment


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog and report the environment in effect.

    Args:
        environment: Explicit environment name; falls back to
            REVIEW_ENGINE_ENV, then production.

    Returns:
        The resolved environment name.
    """
    resolved = resolve_environment(environment)
    _configure_structlog(environment=resolved)
    get_logger().info("logging_configured", environment=resolved)
    return resolved


__all__ = ["configure_logging"]
