"""Score adjustment service.

Managers may dispute a direct report's final score once scores are
locked. Filing a request runs a fixed validation chain with no side
effects before the final save:

1. Cycle exists
2. Final score exists for (employee, cycle)
3. Final score is locked
4. Employee exists
5. Requester is the employee's recorded manager
6. Reason is non-blank
7. Persist a PENDING request

Requests are then approved or rejected exactly once. Approval records
the decision only; recomputing scores belongs to the scoring process.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from review_engine.application.dtos.score_adjustment import (
    ScoreAdjustmentReviewResult,
    ScoreAdjustmentSummary,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)
from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.domain.errors.score_adjustment import (
    AdjustmentReasonRequiredError,
    NotDirectReportError,
    RejectionReasonRequiredError,
)
from review_engine.domain.errors.scoring import FinalScoreNotLockedError
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.score_adjustment import (
    AdjustmentStatus,
    ScoreAdjustmentRequest,
)

if TYPE_CHECKING:
    from review_engine.application.ports.final_score_repository import (
        FinalScoreRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.score_adjustment_repository import (
        ScoreAdjustmentRepositoryProtocol,
    )
    from review_engine.application.ports.user_directory import UserDirectoryProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class ScoreAdjustmentService(LoggingMixin):
    """Service for filing and reviewing score adjustment requests."""

    def __init__(
        self,
        adjustment_repo: ScoreAdjustmentRepositoryProtocol,
        final_score_repo: FinalScoreRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        user_directory: UserDirectoryProtocol,
        config: ReviewPolicyConfig | None = None,
    ) -> None:
        """Initialize the score adjustment service.

        Args:
            adjustment_repo: Repository for adjustment requests.
            final_score_repo: Repository for final score lookup.
            cycle_repo: Repository for cycle lookup.
            user_directory: Directory for reporting-line checks.
            config: Review policy (rejection reason length).
        """
        self._adjustment_repo = adjustment_repo
        self._final_score_repo = final_score_repo
        self._cycle_repo = cycle_repo
        self._user_directory = user_directory
        self._config = config or DEFAULT_REVIEW_POLICY_CONFIG
        self._init_logger()

    async def request_adjustment(
        self,
        cycle_id: ReviewCycleId,
        employee_id: UserId,
        manager_id: UserId,
        reason: str,
        proposed_scores: PillarScores | Mapping[str, int],
    ) -> ScoreAdjustmentSummary:
        """File a request to adjust a locked final score.

        Args:
            cycle_id: Cycle of the final score.
            employee_id: Employee whose score is disputed.
            manager_id: Requesting manager.
            reason: Justification (required).
            proposed_scores: Proposed pillar scores.

        Raises:
            ReviewNotFoundError: Cycle, final score or employee missing.
            FinalScoreNotLockedError: Final score is not locked yet.
            NotDirectReportError: Employee does not report to manager_id.
            AdjustmentReasonRequiredError: Reason is blank.
            InvalidPillarScoreError: Proposed scores out of range.
        """
        log = self._log_operation(
            "request_adjustment",
            cycle_id=str(cycle_id),
            employee_id=str(employee_id),
            manager_id=str(manager_id),
        )
        log.info("Starting score adjustment request")

        await require_cycle(self._cycle_repo, cycle_id)

        final_score = await self._final_score_repo.find_by_user_and_cycle(
            employee_id, cycle_id
        )
        if final_score is None:
            raise ReviewNotFoundError("Final score not found", resource_id=employee_id)

        if not final_score.locked:
            log.warning("Final score not locked")
            raise FinalScoreNotLockedError(final_score.id)

        employee = await self._user_directory.find_by_id(employee_id)
        if employee is None:
            raise ReviewNotFoundError("Employee not found", resource_id=employee_id)

        if not employee.reports_to(manager_id):
            log.warning("Requester is not the employee's manager")
            raise NotDirectReportError(
                manager_id, employee_id, action="request adjustments"
            )

        if not reason or not reason.strip():
            log.warning("Adjustment reason missing")
            raise AdjustmentReasonRequiredError(employee_id)

        if not isinstance(proposed_scores, PillarScores):
            proposed_scores = PillarScores.create(proposed_scores)

        request = ScoreAdjustmentRequest(
            id=uuid4(),
            cycle_id=cycle_id,
            employee_id=employee_id,
            requester_id=manager_id,
            reason=reason,
            proposed_scores=proposed_scores,
            requested_at=datetime.now(timezone.utc),
            status=AdjustmentStatus.PENDING,
        )
        saved = await self._adjustment_repo.save(request)

        log.info("Score adjustment requested", request_id=str(saved.id))
        return ScoreAdjustmentSummary.from_request(saved)

    async def review_adjustment(
        self,
        request_id: UUID,
        reviewer_id: UserId,
        approve: bool,
        notes: str | None = None,
    ) -> ScoreAdjustmentReviewResult:
        """Approve or reject a pending request.

        Args:
            request_id: The request to review.
            reviewer_id: Administrator deciding the request.
            approve: True to approve, False to reject.
            notes: Approval notes, or the rejection reason (required
                when rejecting).

        Raises:
            ReviewNotFoundError: Request doesn't exist.
            AdjustmentAlreadyReviewedError: Request is not PENDING.
            RejectionReasonRequiredError: Rejecting without a reason.
        """
        log = self._log_operation(
            "review_adjustment",
            request_id=str(request_id),
            reviewer_id=str(reviewer_id),
            approve=approve,
        )

        request = await self._adjustment_repo.find_by_id(request_id)
        if request is None:
            raise ReviewNotFoundError(
                "Score adjustment request not found", resource_id=request_id
            )

        if approve:
            reviewed = request.approve(reviewer_id, notes)
        else:
            reason_length = len((notes or "").strip())
            if (
                request.status == AdjustmentStatus.PENDING
                and reason_length < self._config.min_rejection_reason_length
            ):
                log.warning("Rejection reason missing")
                raise RejectionReasonRequiredError(request_id)
            reviewed = request.reject(reviewer_id, notes)

        saved = await self._adjustment_repo.save(reviewed)

        log.info("Score adjustment reviewed", status=saved.status.value)
        return ScoreAdjustmentReviewResult(
            id=saved.id,
            status=saved.status.value,
            reviewed_at=saved.reviewed_at or datetime.now(timezone.utc),
            reviewed_by=reviewer_id.value,
            review_notes=saved.review_notes,
        )

    async def list_pending(self) -> list[ScoreAdjustmentSummary]:
        requests = await self._adjustment_repo.find_pending()
        return [ScoreAdjustmentSummary.from_request(request) for request in requests]

    async def list_for_employee(
        self, employee_id: UserId
    ) -> list[ScoreAdjustmentSummary]:
        requests = await self._adjustment_repo.find_by_employee(employee_id)
        return [ScoreAdjustmentSummary.from_request(request) for request in requests]
