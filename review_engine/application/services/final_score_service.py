"""Final score service.

Read views of final scores for employees and administrators, the
administrator correction path (unlock, correct, re-lock), and manager
feedback delivery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from review_engine.application.dtos.final_score import (
    CycleReference,
    EmployeeSummary,
    FeedbackDeliveryResult,
    FinalScoreDetail,
    MyFinalScoreResult,
    PeerFeedbackSummary,
    PillarScoresPayload,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.domain.errors.score_adjustment import NotDirectReportError
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.weighted_score import WeightedScore

if TYPE_CHECKING:
    from review_engine.application.ports.final_score_repository import (
        FinalScoreRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.user_directory import UserDirectoryProtocol
    from review_engine.domain.models.bonus_tier import BonusTier
    from review_engine.domain.models.final_score import FinalScore
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


class FinalScoreService(LoggingMixin):
    """Service for reading, correcting and delivering final scores."""

    def __init__(
        self,
        final_score_repo: FinalScoreRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        user_directory: UserDirectoryProtocol,
    ) -> None:
        self._final_score_repo = final_score_repo
        self._cycle_repo = cycle_repo
        self._user_directory = user_directory
        self._init_logger()

    async def get_final_score(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScoreDetail | None:
        """Retrieve one final score, or None if it hasn't been calculated."""
        score = await self._final_score_repo.find_by_user_and_cycle(
            employee_id, cycle_id
        )
        if score is None:
            return None
        return FinalScoreDetail.from_final_score(score)

    async def get_my_final_score(
        self, cycle_id: ReviewCycleId, user_id: UserId
    ) -> MyFinalScoreResult:
        """Retrieve an employee's own final score view.

        The peer feedback summary is included only when peer averages
        exist and at least one peer responded.

        Raises:
            ReviewNotFoundError: Cycle, user or final score missing.
        """
        cycle = await require_cycle(self._cycle_repo, cycle_id)

        user = await self._user_directory.find_by_id(user_id)
        if user is None:
            raise ReviewNotFoundError("User not found", resource_id=user_id)

        score = await self._final_score_repo.find_by_user_and_cycle(user_id, cycle_id)
        if score is None:
            raise ReviewNotFoundError(
                "Final score not found for this user and cycle", resource_id=user_id
            )

        peer_summary = None
        if score.peer_average_scores is not None and score.peer_feedback_count > 0:
            peer_summary = PeerFeedbackSummary(
                average_scores=PillarScoresPayload(
                    **score.peer_average_scores.to_dict()
                ),
                count=score.peer_feedback_count,
            )

        return MyFinalScoreResult(
            employee=EmployeeSummary(
                id=user.id.value, name=user.name, level=user.display_level
            ),
            cycle=CycleReference(id=cycle.id.value, name=cycle.name, year=cycle.year),
            scores=PillarScoresPayload(**score.pillar_scores.to_dict()),
            peer_feedback_summary=peer_summary,
            weighted_score=score.weighted_score.value,
            percentage_score=score.percentage_score,
            bonus_tier=score.bonus_tier,
            is_locked=score.locked,
            feedback_delivered=score.feedback_delivered,
            feedback_delivered_at=score.feedback_delivered_at,
        )

    async def list_by_bonus_tier(
        self, cycle_id: ReviewCycleId, tier: BonusTier
    ) -> list[FinalScoreDetail]:
        """List a cycle's final scores that fall in one bonus tier."""
        await require_cycle(self._cycle_repo, cycle_id)
        scores = await self._final_score_repo.find_by_bonus_tier(cycle_id, tier)
        return [FinalScoreDetail.from_final_score(score) for score in scores]

    async def unlock_final_score(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScoreDetail:
        """Unlock a final score so an administrator can correct it.

        Raises:
            ReviewNotFoundError: Final score missing.
        """
        log = self._log_operation(
            "unlock_final_score", employee_id=str(employee_id), cycle_id=str(cycle_id)
        )
        score = await self._require_score(employee_id, cycle_id)
        score.unlock()
        saved = await self._final_score_repo.save(score)
        log.info("Final score unlocked", final_score_id=str(saved.id))
        return FinalScoreDetail.from_final_score(saved)

    async def relock_final_score(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScoreDetail:
        """Lock a single final score again after correction."""
        log = self._log_operation(
            "relock_final_score", employee_id=str(employee_id), cycle_id=str(cycle_id)
        )
        score = await self._require_score(employee_id, cycle_id)
        score.lock()
        saved = await self._final_score_repo.save(score)
        log.info("Final score locked", final_score_id=str(saved.id))
        return FinalScoreDetail.from_final_score(saved)

    async def correct_final_score(
        self,
        employee_id: UserId,
        cycle_id: ReviewCycleId,
        pillar_scores: PillarScores | Mapping[str, int],
        weighted_score: WeightedScore | float,
    ) -> FinalScoreDetail:
        """Replace the scores of an unlocked final score.

        Raises:
            ReviewNotFoundError: Final score missing.
            FinalScoreLockedError: Score is locked; nothing is saved.
        """
        log = self._log_operation(
            "correct_final_score", employee_id=str(employee_id), cycle_id=str(cycle_id)
        )
        if not isinstance(pillar_scores, PillarScores):
            pillar_scores = PillarScores.create(pillar_scores)
        if not isinstance(weighted_score, WeightedScore):
            weighted_score = WeightedScore.from_value(weighted_score)

        score = await self._require_score(employee_id, cycle_id)
        score.update_scores(pillar_scores, weighted_score)
        saved = await self._final_score_repo.save(score)

        log.info(
            "Final score corrected",
            weighted_score=saved.weighted_score.value,
            bonus_tier=saved.bonus_tier.value,
        )
        return FinalScoreDetail.from_final_score(saved)

    async def mark_feedback_delivered(
        self,
        cycle_id: ReviewCycleId,
        employee_id: UserId,
        manager_id: UserId,
        feedback_notes: str | None = None,
    ) -> FeedbackDeliveryResult:
        """Record that a manager delivered feedback to a direct report.

        Re-delivery overwrites the previous delivery record.

        Raises:
            ReviewNotFoundError: Cycle, employee or final score missing.
            NotDirectReportError: Employee does not report to manager_id.
        """
        log = self._log_operation(
            "mark_feedback_delivered",
            cycle_id=str(cycle_id),
            employee_id=str(employee_id),
            manager_id=str(manager_id),
        )

        await require_cycle(self._cycle_repo, cycle_id)

        employee = await self._user_directory.find_by_id(employee_id)
        if employee is None:
            raise ReviewNotFoundError("Employee not found", resource_id=employee_id)

        if not employee.reports_to(manager_id):
            log.warning("Manager is not the employee's manager")
            raise NotDirectReportError(
                manager_id, employee_id, action="mark feedback delivered"
            )

        score = await self._require_score(employee_id, cycle_id)
        if score.feedback_delivered:
            log.info(
                "Overwriting previous feedback delivery",
                previous_delivered_by=str(score.delivered_by),
            )
        score.mark_feedback_delivered(manager_id, feedback_notes)
        saved = await self._final_score_repo.save(score)

        log.info("Feedback marked delivered")
        return FeedbackDeliveryResult(
            employee_id=saved.user_id.value,
            feedback_delivered=saved.feedback_delivered,
            feedback_delivered_at=saved.feedback_delivered_at,
            delivered_by=manager_id.value,
        )

    async def _require_score(
        self, employee_id: UserId, cycle_id: ReviewCycleId
    ) -> FinalScore:
        score = await self._final_score_repo.find_by_user_and_cycle(
            employee_id, cycle_id
        )
        if score is None:
            raise ReviewNotFoundError("Final score not found", resource_id=employee_id)
        return score
