"""Calibration service.

Schedules calibration sessions for a cycle, applies score adjustments
agreed in a session to submitted manager evaluations, and locks the
cycle's final scores once calibration concludes.

Applying an adjustment checks, in order:

1. Manager evaluation exists
2. Calibration session exists
3. Justification reaches the minimum length (20 characters by default)
4. Evaluation is submitted
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

from review_engine.application.dtos.calibration import (
    CalibrationAdjustmentResult,
    CalibrationSessionSummary,
)
from review_engine.application.dtos.final_score import (
    LockFinalScoresResult,
    PillarScoresPayload,
)
from review_engine.application.services.base import LoggingMixin, require_cycle
from review_engine.config.review_policy_config import (
    DEFAULT_REVIEW_POLICY_CONFIG,
    ReviewPolicyConfig,
)
from review_engine.domain.errors.not_found import ReviewNotFoundError
from review_engine.domain.errors.review_submission import (
    CalibrationJustificationError,
)
from review_engine.domain.models.calibration_session import (
    CalibrationSession,
    CalibrationSessionStatus,
)
from review_engine.domain.models.pillar_scores import PillarScores

if TYPE_CHECKING:
    from uuid import UUID

    from review_engine.application.ports.calibration_session_repository import (
        CalibrationSessionRepositoryProtocol,
    )
    from review_engine.application.ports.final_score_repository import (
        FinalScoreRepositoryProtocol,
    )
    from review_engine.application.ports.review_cycle_repository import (
        ReviewCycleRepositoryProtocol,
    )
    from review_engine.application.ports.review_record_repositories import (
        ManagerEvaluationRepositoryProtocol,
    )
    from review_engine.domain.models.final_score import FinalScore
    from review_engine.domain.models.identifiers import ReviewCycleId, UserId


def _to_summary(session: CalibrationSession) -> CalibrationSessionSummary:
    return CalibrationSessionSummary(
        id=session.id,
        cycle_id=session.cycle_id.value,
        name=session.name,
        status=session.status.value,
        scheduled_at=session.scheduled_at,
        department=session.department,
        participant_count=len(session.participant_ids),
    )


class CalibrationService(LoggingMixin):
    """Service for calibration sessions, adjustments and final score locking."""

    def __init__(
        self,
        session_repo: CalibrationSessionRepositoryProtocol,
        cycle_repo: ReviewCycleRepositoryProtocol,
        final_score_repo: FinalScoreRepositoryProtocol,
        evaluation_repo: ManagerEvaluationRepositoryProtocol,
        config: ReviewPolicyConfig | None = None,
    ) -> None:
        self._session_repo = session_repo
        self._cycle_repo = cycle_repo
        self._final_score_repo = final_score_repo
        self._evaluation_repo = evaluation_repo
        self._config = config or DEFAULT_REVIEW_POLICY_CONFIG
        self._init_logger()

    async def create_session(
        self,
        cycle_id: ReviewCycleId,
        name: str,
        facilitator_id: UserId,
        participant_ids: Sequence[UserId],
        scheduled_at: datetime,
        department: str | None = None,
    ) -> CalibrationSessionSummary:
        """Schedule a calibration session for a cycle.

        Args:
            cycle_id: Cycle being calibrated.
            name: Session display name.
            facilitator_id: User running the session.
            participant_ids: Managers taking part.
            scheduled_at: Meeting time.
            department: Optional department scope.

        Returns:
            Summary of the saved session with its participant count.

        Raises:
            ReviewNotFoundError: Cycle does not exist.
        """
        log = self._log_operation(
            "create_session",
            cycle_id=str(cycle_id),
            facilitator_id=str(facilitator_id),
        )
        log.info("Creating calibration session", participant_count=len(participant_ids))

        await require_cycle(self._cycle_repo, cycle_id)

        session = CalibrationSession(
            id=uuid4(),
            cycle_id=cycle_id,
            name=name,
            facilitator_id=facilitator_id,
            participant_ids=tuple(participant_ids),
            scheduled_at=scheduled_at,
            department=department,
            status=CalibrationSessionStatus.SCHEDULED,
        )
        saved = await self._session_repo.save(session)

        log.info("Calibration session created", session_id=str(saved.id))
        return _to_summary(saved)

    async def get_session(self, session_id: UUID) -> CalibrationSessionSummary:
        session = await self._session_repo.find_by_id(session_id)
        if session is None:
            raise ReviewNotFoundError(
                f"Calibration session with ID {session_id} not found",
                resource_id=session_id,
            )
        return _to_summary(session)

    async def list_sessions(
        self, cycle_id: ReviewCycleId
    ) -> list[CalibrationSessionSummary]:
        await require_cycle(self._cycle_repo, cycle_id)
        sessions = await self._session_repo.find_by_cycle(cycle_id)
        return [_to_summary(session) for session in sessions]

    async def apply_calibration_adjustment(
        self,
        session_id: UUID,
        evaluation_id: UUID,
        adjusted_scores: PillarScores | Mapping[str, int],
        justification: str,
    ) -> CalibrationAdjustmentResult:
        """Replace a submitted evaluation's scores with the calibrated ones.

        The evaluation ends CALIBRATED. Weighted and final scores are not
        recomputed here; the scoring process reads the calibrated scores.

        Args:
            session_id: Session where the adjustment was agreed.
            evaluation_id: Manager evaluation to adjust.
            adjusted_scores: Calibrated pillar scores.
            justification: Why the scores changed.

        Raises:
            ReviewNotFoundError: Evaluation or session missing.
            CalibrationJustificationError: Justification too short.
            EvaluationNotSubmittedError: Evaluation still DRAFT.
            InvalidPillarScoreError: Scores out of range.
        """
        log = self._log_operation(
            "apply_calibration_adjustment",
            session_id=str(session_id),
            evaluation_id=str(evaluation_id),
        )
        log.info("Applying calibration adjustment")

        evaluation = await self._evaluation_repo.find_by_id(evaluation_id)
        if evaluation is None:
            raise ReviewNotFoundError(
                "Manager evaluation not found", resource_id=evaluation_id
            )

        session = await self._session_repo.find_by_id(session_id)
        if session is None:
            raise ReviewNotFoundError(
                "Calibration session not found", resource_id=session_id
            )

        minimum = self._config.min_calibration_justification_length
        if len((justification or "").strip()) < minimum:
            log.warning("Calibration justification too short")
            raise CalibrationJustificationError(minimum)

        if not isinstance(adjusted_scores, PillarScores):
            adjusted_scores = PillarScores.create(adjusted_scores)

        original_scores = evaluation.scores
        evaluation.apply_calibration_adjustment(adjusted_scores)
        saved = await self._evaluation_repo.save(evaluation)

        log.info("Calibration adjustment applied", status=saved.status.value)
        return CalibrationAdjustmentResult(
            evaluation_id=saved.id,
            session_id=session.id,
            original_scores=PillarScoresPayload(**original_scores.to_dict()),
            adjusted_scores=PillarScoresPayload(**saved.scores.to_dict()),
            justification=justification.strip(),
            status=saved.status.value,
            calibrated_at=saved.calibrated_at,
        )

    async def lock_final_scores(self, cycle_id: ReviewCycleId) -> LockFinalScoresResult:
        """Lock every final score of a cycle.

        Already-locked scores are left alone and not saved again. The
        reported total counts every score of the cycle.

        Raises:
            ReviewNotFoundError: Cycle does not exist.
        """
        log = self._log_operation("lock_final_scores", cycle_id=str(cycle_id))

        await require_cycle(self._cycle_repo, cycle_id)

        scores = await self._final_score_repo.find_by_cycle(cycle_id)
        locked_at = datetime.now(timezone.utc)
        to_lock = [score for score in scores if not score.locked]

        async def _lock(score: FinalScore) -> FinalScore:
            score.lock()
            return await self._final_score_repo.save(score)

        await asyncio.gather(*(_lock(score) for score in to_lock))

        log.info(
            "Final scores locked",
            total_scores=len(scores),
            newly_locked=len(to_lock),
        )
        return LockFinalScoresResult(
            cycle_id=cycle_id.value,
            total_scores_locked=len(scores),
            newly_locked=len(to_lock),
            locked_at=locked_at,
        )
