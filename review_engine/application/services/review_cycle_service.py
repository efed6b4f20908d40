"""Review cycle lifecycle service.

Creates cycles and drives them through DRAFT -> ACTIVE -> CALIBRATION
-> COMPLETED. The aggregate validates each transition; this service adds
the cross-cycle rule that at most one cycle is ACTIVE at a time.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING

from review_engine.application.dtos.review_cycle import (
    ReviewCycleSummary,
    StartReviewCycleResult,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.domain.errors.review_cycle import AnotherCycleActiveError
from review_engine.domain.models.cycle_deadlines import CycleDeadlines
from review_engine.domain.models.review_cycle import ReviewCycle

if TYPE_CHECKING:
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.domain.models.identifiers import ReviewCycleId


class ReviewCycleService(LoggingMixin):
    """Service for review cycle creation and phase transitions.

    Example:
        >>> service = ReviewCycleService(cycle_repo=cycle_repo)
        >>> created = await service.create_cycle("2026 Annual", 2026, deadlines)
        >>> await service.start_cycle(ReviewCycleId(created.id))
    """

    def __init__(self, cycle_repo: ReviewCycleRepositoryProtocol) -> None:
        """Initialize the review cycle service.

        Args:
            cycle_repo: Repository for cycle persistence.
        """
        self._cycle_repo = cycle_repo
        self._init_logger()

    async def create_cycle(
        self,
        name: str,
        year: int,
        deadlines: CycleDeadlines | Mapping[str, datetime],
        start_date: datetime | None = None,
    ) -> ReviewCycleSummary:
        """Create a cycle in DRAFT status.

        Args:
            name: Display name.
            year: Calendar year reviewed.
            deadlines: Phase deadlines, or a mapping of phase name to date.
            start_date: Optional explicit start date (defaults to now).

        Raises:
            InvalidDeadlineOrderError: If deadlines are not strictly increasing.
        """
        log = self._log_operation("create_cycle", name=name, year=year)

        if not isinstance(deadlines, CycleDeadlines):
            deadlines = CycleDeadlines.create(deadlines)

        cycle = ReviewCycle.create(
            name=name,
            year=year,
            deadlines=deadlines,
            start_date=start_date,
        )
        saved = await self._cycle_repo.save(cycle)

        log.info("review_cycle_created", cycle_id=str(saved.id))
        return ReviewCycleSummary.from_cycle(saved)

    async def start_cycle(self, cycle_id: ReviewCycleId) -> StartReviewCycleResult:
        """Open a DRAFT cycle.

        Steps, in order:
        1. Load the cycle
        2. Reject if a different cycle is already ACTIVE
        3. Transition DRAFT -> ACTIVE
        4. Persist

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
            AnotherCycleActiveError: Another cycle is ACTIVE.
            InvalidReviewCycleStateError: Cycle is not DRAFT.
        """
        log = self._log_operation("start_cycle", cycle_id=str(cycle_id))
        log.info("Starting review cycle")

        cycle = await require_cycle(self._cycle_repo, cycle_id)

        active = await self._cycle_repo.find_active()
        if active is not None and active.id != cycle_id:
            log.warning(
                "Another review cycle is already active",
                active_cycle_id=str(active.id),
            )
            raise AnotherCycleActiveError(active.id)

        cycle.start()
        saved = await self._cycle_repo.save(cycle)

        log.info("Review cycle started", status=saved.status.value)
        return StartReviewCycleResult(
            id=saved.id.value,
            status=saved.status.value,
            started_at=saved.start_date,
        )

    async def enter_calibration(self, cycle_id: ReviewCycleId) -> ReviewCycleSummary:
        """Move an ACTIVE cycle into calibration.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
            InvalidReviewCycleStateError: Cycle is not ACTIVE.
        """
        log = self._log_operation("enter_calibration", cycle_id=str(cycle_id))

        cycle = await require_cycle(self._cycle_repo, cycle_id)
        cycle.enter_calibration()
        saved = await self._cycle_repo.save(cycle)

        log.info("Review cycle entered calibration")
        return ReviewCycleSummary.from_cycle(saved)

    async def complete_cycle(self, cycle_id: ReviewCycleId) -> ReviewCycleSummary:
        """Close a cycle that finished calibration.

        Raises:
            ReviewNotFoundError: Cycle doesn't exist.
            InvalidReviewCycleStateError: Cycle is not in CALIBRATION.
        """
        log = self._log_operation("complete_cycle", cycle_id=str(cycle_id))

        cycle = await require_cycle(self._cycle_repo, cycle_id)
        cycle.complete()
        saved = await self._cycle_repo.save(cycle)

        log.info(
            "Review cycle completed",
            end_date=saved.end_date.isoformat() if saved.end_date else None,
        )
        return ReviewCycleSummary.from_cycle(saved)

    async def get_cycle(self, cycle_id: ReviewCycleId) -> ReviewCycleSummary:
        """Retrieve a cycle, raising ReviewNotFoundError if absent."""
        cycle = await require_cycle(self._cycle_repo, cycle_id)
        return ReviewCycleSummary.from_cycle(cycle)

    async def get_active_cycle(self) -> ReviewCycleSummary | None:
        """Retrieve the ACTIVE cycle, or None when no cycle is open."""
        cycle = await self._cycle_repo.find_active()
        if cycle is None:
            return None
        return ReviewCycleSummary.from_cycle(cycle)

    async def list_cycles_for_year(self, year: int) -> list[ReviewCycleSummary]:
        cycles = await self._cycle_repo.find_by_year(year)
        return [ReviewCycleSummary.from_cycle(cycle) for cycle in cycles]
