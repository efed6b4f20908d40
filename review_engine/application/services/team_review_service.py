"""Team aggregation service.

Builds a manager's view over their direct reports for one cycle: review
progress (self review, peer feedback, manager evaluation) and final
scores.

Records that haven't been submitted yet are normal during an open cycle
and are reported with defaults rather than failing the request:

- self review / manager evaluation absent: status NOT_STARTED
- no peer feedback: count 0, status PENDING
- no final score: weighted 0, percentage 0, tier BELOW, not delivered

Fetches run concurrently per employee and, within an employee, per
record. Any raised error aborts the whole request.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from review_engine.application.dtos.team import (
    NOT_STARTED,
    PEER_FEEDBACK_COMPLETE,
    PEER_FEEDBACK_PENDING,
    TeamFinalScoresResult,
    TeamMemberReview,
    TeamMemberScore,
    TeamReviewsResult,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)
from review_engine.domain.models.bonus_tier import BonusTier

if TYPE_CHECKING:
    from review_engine.application.ports.final_score_repository import (
        FinalScoreRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.review_record_repositories import (
        ManagerEvaluationRepositoryProtocol,
        PeerFeedbackRepositoryProtocol,
        SelfReviewRepositoryProtocol,
    )
    from review_engine.application.ports.user_directory import UserDirectoryProtocol
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId
    from review_engine.domain.models.user import DirectoryUser


class TeamReviewService(LoggingMixin):
    """Service producing manager views over direct reports.

    Example:
        >>> service = TeamReviewService(
        ...     user_directory=directory,
        ...     cycle_repo=cycle_repo,
        ...     self_review_repo=self_reviews,
        ...     peer_feedback_repo=peer_feedback,
        ...     manager_eval_repo=manager_evals,
        ...     final_score_repo=final_scores,
        ... )
        >>> result = await service.get_team_reviews(manager_id, cycle_id)
        >>> result.total
        4
    """

    def __init__(
        self,
        user_directory: UserDirectoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        self_review_repo: SelfReviewRepositoryProtocol,
        peer_feedback_repo: PeerFeedbackRepositoryProtocol,
        manager_eval_repo: ManagerEvaluationRepositoryProtocol,
        final_score_repo: FinalScoreRepositoryProtocol,
        config: ReviewPolicyConfig | None = None,
    ) -> None:
        self._user_directory = user_directory
        self._cycle_repo = cycle_repo
        self._self_review_repo = self_review_repo
        self._peer_feedback_repo = peer_feedback_repo
        self._manager_eval_repo = manager_eval_repo
        self._final_score_repo = final_score_repo
        self._config = config or DEFAULT_REVIEW_POLICY_CONFIG
        self._init_logger()

    async def get_team_reviews(
        self, manager_id: UserId, cycle_id: ReviewCycleId
    ) -> TeamReviewsResult:
        """Review progress for each of a manager's direct reports.

        Args:
            manager_id: The manager whose reports are listed.
            cycle_id: The cycle to report on.

        Returns:
            One entry per direct report, in directory order.

        Raises:
            ReviewNotFoundError: Cycle does not exist.
        """
        log = self._log_operation(
            "get_team_reviews", manager_id=str(manager_id), cycle_id=str(cycle_id)
        )

        # Step 1: Validate cycle
        await require_cycle(self._cycle_repo, cycle_id)

        # Step 2: Resolve direct reports
        reports = await self._user_directory.find_by_manager_id(manager_id)
        if not reports:
            log.info("Manager has no direct reports")
            return TeamReviewsResult(reviews=[], total=0)

        # Step 3: Fetch per-employee records concurrently
        reviews = await asyncio.gather(
            *(self._review_for(employee, cycle_id) for employee in reports)
        )

        log.info("Team reviews aggregated", total=len(reviews))
        return TeamReviewsResult(reviews=list(reviews), total=len(reviews))

    async def get_team_final_scores(
        self, manager_id: UserId, cycle_id: ReviewCycleId
    ) -> TeamFinalScoresResult:
        """Final score for each of a manager's direct reports.

        Raises:
            ReviewNotFoundError: Cycle does not exist.
        """
        log = self._log_operation(
            "get_team_final_scores",
            manager_id=str(manager_id),
            cycle_id=str(cycle_id),
        )

        await require_cycle(self._cycle_repo, cycle_id)

        reports = await self._user_directory.find_by_manager_id(manager_id)
        if not reports:
            log.info("Manager has no direct reports")
            return TeamFinalScoresResult(team_scores=[])

        team_scores = await asyncio.gather(
            *(self._score_for(employee, cycle_id) for employee in reports)
        )

        log.info("Team final scores aggregated", total=len(team_scores))
        return TeamFinalScoresResult(team_scores=list(team_scores))

    async def _review_for(
        self, employee: DirectoryUser, cycle_id: ReviewCycleId
    ) -> TeamMemberReview:
        self_review, peer_feedback, manager_eval = await asyncio.gather(
            self._self_review_repo.find_by_user_and_cycle(employee.id, cycle_id),
            self._peer_feedback_repo.find_by_reviewee_and_cycle(employee.id, cycle_id),
            self._manager_eval_repo.find_by_employee_and_cycle(employee.id, cycle_id),
        )

        peer_count = len(peer_feedback or [])
        peer_status = (
            PEER_FEEDBACK_COMPLETE
            if peer_count >= self._config.peer_feedback_complete_threshold
            else PEER_FEEDBACK_PENDING
        )

        return TeamMemberReview(
            employee_id=employee.id.value,
            employee_name=employee.name,
            employee_level=employee.display_level,
            self_review_status=self_review.status.value if self_review else NOT_STARTED,
            peer_feedback_count=peer_count,
            peer_feedback_status=peer_status,
            manager_eval_status=(
                manager_eval.status.value if manager_eval else NOT_STARTED
            ),
            has_submitted_evaluation=bool(manager_eval and manager_eval.is_submitted),
        )

    async def _score_for(
        self, employee: DirectoryUser, cycle_id: ReviewCycleId
    ) -> TeamMemberScore:
        score = await self._final_score_repo.find_by_user_and_cycle(
            employee.id, cycle_id
        )
        if score is None:
            return TeamMemberScore(
                employee_id=employee.id.value,
                employee_name=employee.name,
                level=employee.display_level,
                weighted_score=0.0,
                percentage_score=0.0,
                bonus_tier=BonusTier.BELOW,
                feedback_delivered=False,
            )
        return TeamMemberScore(
            employee_id=employee.id.value,
            employee_name=employee.name,
            level=employee.display_level,
            weighted_score=score.weighted_score.value,
            percentage_score=score.percentage_score,
            bonus_tier=score.bonus_tier,
            feedback_delivered=score.feedback_delivered,
        )
