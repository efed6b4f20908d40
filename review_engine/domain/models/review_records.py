"""Review submission records.

Self reviews and manager evaluations are drafts until submitted:

    DRAFT -> SUBMITTED -> CALIBRATED

Content can only change while DRAFT. Calibration applies to submitted
manager evaluations only. Peer feedback is written once, at submission,
and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from review_engine.domain.errors.review_submission import (
    EvaluationNotSubmittedError,
    ReviewAlreadySubmittedError,
)
from review_engine.domain.models.engineer_level import EngineerLevel
from review_engine.domain.models.identifiers import ReviewCycleId, UserId
from review_engine.domain.models.narrative import Narrative
from review_engine.domain.models.pillar_scores import PillarScores


class ReviewStatus(str, Enum):
    """Submission status shared by self reviews and manager evaluations."""

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    CALIBRATED = "CALIBRATED"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class SelfReview:
    """An employee's self review for a cycle.

    Attributes:
        id: Self review identifier.
        cycle_id: The cycle reviewed.
        user_id: The employee writing the review.
        status: DRAFT until submitted.
        submitted_at: When it was submitted.
        scores: Self-assessed pillar scores.
        narrative: Self-assessment text (required to submit).
        updated_at: Last change.
    """

    id: UUID
    cycle_id: ReviewCycleId
    user_id: UserId
    status: ReviewStatus = field(default=ReviewStatus.DRAFT)
    submitted_at: datetime | None = field(default=None)
    scores: PillarScores = field(default_factory=PillarScores.zero)
    narrative: Narrative = field(default_factory=Narrative)
    updated_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def create(
        cls,
        cycle_id: ReviewCycleId,
        user_id: UserId,
        scores: PillarScores | None = None,
        narrative: Narrative | None = None,
    ) -> SelfReview:
        """Create a DRAFT self review, empty unless content is given."""
        return cls(
            id=uuid4(),
            cycle_id=cycle_id,
            user_id=user_id,
            scores=scores or PillarScores.zero(),
            narrative=narrative or Narrative(),
        )

    @property
    def is_submitted(self) -> bool:
        return self.status in (ReviewStatus.SUBMITTED, ReviewStatus.CALIBRATED)

    def update_scores(self, scores: PillarScores) -> None:
        self._require_draft("Cannot update scores after submission")
        self.scores = scores
        self.updated_at = _utc_now()

    def update_narrative(self, narrative: Narrative) -> None:
        self._require_draft("Cannot update narrative after submission")
        self.narrative = narrative
        self.updated_at = _utc_now()

    def submit(self) -> None:
        """Move DRAFT to SUBMITTED and stamp the time.

        Raises:
            ReviewAlreadySubmittedError: Already submitted.
        """
        self._require_draft("Self-review has already been submitted")
        now = _utc_now()
        self.status = ReviewStatus.SUBMITTED
        self.submitted_at = now
        self.updated_at = now

    def _require_draft(self, message: str) -> None:
        if self.is_submitted:
            raise ReviewAlreadySubmittedError(self.id, message)


@dataclass(frozen=True)
class PeerFeedback:
    """One peer's feedback about a reviewee.

    The reviewer id is stored for duplicate checks; views shown to the
    reviewee never include it.
    """

    id: UUID
    cycle_id: ReviewCycleId
    reviewer_id: UserId
    reviewee_id: UserId
    submitted_at: datetime
    scores: PillarScores = field(default_factory=PillarScores.zero)
    strengths: str | None = field(default=None)
    growth_areas: str | None = field(default=None)
    general_comments: str | None = field(default=None)

    @property
    def is_anonymized(self) -> bool:
        return True


@dataclass(eq=False)
class ManagerEvaluation:
    """A manager's evaluation of a direct report for a cycle.

    Attributes:
        id: Evaluation identifier.
        cycle_id: The cycle evaluated.
        employee_id: The direct report.
        manager_id: The evaluating manager.
        status: DRAFT, SUBMITTED or CALIBRATED.
        scores: Manager-assessed pillar scores.
        narrative: Overall assessment.
        strengths: Observed strengths.
        growth_areas: Areas to develop.
        development_plan: Plan for the next cycle.
        proposed_level: Level the manager proposes, if any.
        submitted_at: When it was submitted.
        calibrated_at: When calibration last touched it.
        updated_at: Last change.
    """

    id: UUID
    cycle_id: ReviewCycleId
    employee_id: UserId
    manager_id: UserId
    status: ReviewStatus = field(default=ReviewStatus.DRAFT)
    scores: PillarScores = field(default_factory=PillarScores.zero)
    narrative: str = field(default="")
    strengths: str = field(default="")
    growth_areas: str = field(default="")
    development_plan: str = field(default="")
    proposed_level: EngineerLevel | None = field(default=None)
    submitted_at: datetime | None = field(default=None)
    calibrated_at: datetime | None = field(default=None)
    updated_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def create(
        cls,
        cycle_id: ReviewCycleId,
        employee_id: UserId,
        manager_id: UserId,
        scores: PillarScores,
        narrative: Narrative | None = None,
        strengths: Narrative | None = None,
        growth_areas: Narrative | None = None,
        development_plan: Narrative | None = None,
        proposed_level: EngineerLevel | None = None,
    ) -> ManagerEvaluation:
        """Create a DRAFT evaluation."""
        return cls(
            id=uuid4(),
            cycle_id=cycle_id,
            employee_id=employee_id,
            manager_id=manager_id,
            scores=scores,
            narrative=str(narrative or ""),
            strengths=str(strengths or ""),
            growth_areas=str(growth_areas or ""),
            development_plan=str(development_plan or ""),
            proposed_level=proposed_level,
        )

    @property
    def is_submitted(self) -> bool:
        return self.status in (ReviewStatus.SUBMITTED, ReviewStatus.CALIBRATED)

    def update_scores(self, scores: PillarScores) -> None:
        self._require_draft("Cannot update scores after submission")
        self.scores = scores
        self.updated_at = _utc_now()

    def update_text(
        self,
        narrative: Narrative | None = None,
        strengths: Narrative | None = None,
        growth_areas: Narrative | None = None,
        development_plan: Narrative | None = None,
    ) -> None:
        """Replace whichever text fields are given.

        Raises:
            ReviewAlreadySubmittedError: Evaluation already submitted.
        """
        self._require_draft("Cannot update evaluation after submission")
        if narrative is not None:
            self.narrative = narrative.text
        if strengths is not None:
            self.strengths = strengths.text
        if growth_areas is not None:
            self.growth_areas = growth_areas.text
        if development_plan is not None:
            self.development_plan = development_plan.text
        self.updated_at = _utc_now()

    def update_proposed_level(self, level: EngineerLevel) -> None:
        self._require_draft("Cannot update proposed level after submission")
        self.proposed_level = level
        self.updated_at = _utc_now()

    def submit(self) -> None:
        """Move DRAFT to SUBMITTED.

        Raises:
            ReviewAlreadySubmittedError: Already submitted.
        """
        self._require_draft("Manager evaluation has already been submitted")
        now = _utc_now()
        self.status = ReviewStatus.SUBMITTED
        self.submitted_at = now
        self.updated_at = now

    def calibrate(self) -> None:
        """Mark a submitted evaluation CALIBRATED.

        Raises:
            EvaluationNotSubmittedError: Still DRAFT.
        """
        if not self.is_submitted:
            raise EvaluationNotSubmittedError(self.id)
        now = _utc_now()
        self.status = ReviewStatus.CALIBRATED
        self.calibrated_at = now
        self.updated_at = now

    def apply_calibration_adjustment(self, scores: PillarScores) -> None:
        """Replace the scores agreed in calibration and mark CALIBRATED.

        Raises:
            EvaluationNotSubmittedError: Still DRAFT. Nothing changes.
        """
        if not self.is_submitted:
            raise EvaluationNotSubmittedError(self.id)
        self.scores = scores
        self.calibrate()

    def _require_draft(self, message: str) -> None:
        if self.is_submitted:
            raise ReviewAlreadySubmittedError(self.id, message)
