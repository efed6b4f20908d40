"""Shared service plumbing: structured logging and cycle lookup.

Usage:
    from review_engine.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, cycle_repo: ReviewCycleRepositoryProtocol) -> None:
            self._cycle_repo = cycle_repo
            self._init_logger()

        async def do_something(self, cycle_id: ReviewCycleId) -> None:
            log = self._log_operation("do_something", cycle_id=str(cycle_id))
            log.info("operation_started")
            cycle = await require_cycle(self._cycle_repo, cycle_id)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.infrastructure.observability.correlation import get_correlation_id
from review_engine.infrastructure.observability.logging import get_logger_for_service

if TYPE_CHECKING:
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.domain.models.identifiers import ReviewCycleId
    from review_engine.domain.models.review_cycle import ReviewCycle


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with the service class name and component; each
    operation additionally binds its name and the current correlation ID.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "review_engine") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.
        """
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )


async def require_cycle(
    cycle_repo: ReviewCycleRepositoryProtocol, cycle_id: ReviewCycleId
) -> ReviewCycle:
    """Load a cycle or fail.

    Raises:
        ReviewNotFoundError: If no cycle has this ID.
    """
    cycle = await cycle_repo.find_by_id(cycle_id)
    if cycle is None:
        raise ReviewNotFoundError.for_cycle(cycle_id)
    return cycle
