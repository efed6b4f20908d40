"""Final score aggregate.

Holds an employee's official scores for a cycle together with lock and
feedback-delivery state.

Lock workflow:
- created unlocked by the scoring process
- locked once calibration finalizes
- an administrator may unlock to correct, and must re-lock afterwards

Scores can only change while unlocked. Percentage and bonus tier are
always derived from the current weighted score and are never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from review_engine.domain.errors.scoring import FinalScoreLockedError
from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.engineer_level import EngineerLevel
from review_engine.domain.models.identifiers import FinalScoreId, ReviewCycleId, UserId
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.weighted_score import WeightedScore


@dataclass(eq=False)
class FinalScore:
    """Official review outcome for one employee in one cycle.

    Attributes:
        id: Final score identifier.
        cycle_id: The cycle scored.
        user_id: The employee scored.
        pillar_scores: Current official pillar scores.
        weighted_score: Current official weighted score (0-4).
        final_level: Level the employee was assessed at.
        peer_average_scores: Average pillar scores from peer feedback, if any.
        peer_feedback_count: Number of peer feedback submissions averaged.
        calculated_at: When the score was computed.
        locked: Whether scores are frozen.
        locked_at: When the score was locked (None while unlocked).
        feedback_delivered: Whether the manager has delivered feedback.
        feedback_delivered_at: When delivery was marked.
        delivered_at: Delivery timestamp (mirrors feedback_delivered_at).
        delivered_by: Manager who delivered feedback.
        feedback_notes: Notes recorded at delivery.
    """

    id: FinalScoreId
    cycle_id: ReviewCycleId
    user_id: UserId
    pillar_scores: PillarScores
    weighted_score: WeightedScore
    final_level: EngineerLevel
    peer_average_scores: PillarScores | None = field(default=None)
    peer_feedback_count: int = field(default=0)
    calculated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    locked: bool = field(default=False)
    locked_at: datetime | None = field(default=None)
    feedback_delivered: bool = field(default=False)
    feedback_delivered_at: datetime | None = field(default=None)
    delivered_at: datetime | None = field(default=None)
    delivered_by: UserId | None = field(default=None)
    feedback_notes: str | None = field(default=None)

    def __post_init__(self) -> None:
        if self.peer_feedback_count < 0:
            raise ValueError(
                f"peer_feedback_count must be >= 0, got {self.peer_feedback_count}"
            )

    @classmethod
    def create(
        cls,
        cycle_id: ReviewCycleId,
        user_id: UserId,
        pillar_scores: PillarScores,
        weighted_score: WeightedScore,
        final_level: EngineerLevel,
        peer_average_scores: PillarScores | None = None,
        peer_feedback_count: int = 0,
        calculated_at: datetime | None = None,
        final_score_id: FinalScoreId | None = None,
    ) -> FinalScore:
        """Create a new, unlocked final score with no delivery recorded."""
        return cls(
            id=final_score_id or FinalScoreId.generate(),
            cycle_id=cycle_id,
            user_id=user_id,
            pillar_scores=pillar_scores,
            weighted_score=weighted_score,
            final_level=final_level,
            peer_average_scores=peer_average_scores,
            peer_feedback_count=peer_feedback_count,
            calculated_at=calculated_at or datetime.now(timezone.utc),
        )

    def lock(self) -> None:
        """Freeze the scores. No-op if already locked."""
        if self.locked:
            return
        self.locked = True
        self.locked_at = datetime.now(timezone.utc)

    def unlock(self) -> None:
        """Unfreeze the scores for correction. No-op if already unlocked."""
        if not self.locked:
            return
        self.locked = False
        self.locked_at = None

    def update_scores(
        self, pillar_scores: PillarScores, weighted_score: WeightedScore
    ) -> None:
        """Replace pillar and weighted scores together.

        Raises:
            FinalScoreLockedError: If the score is locked. Nothing changes.
        """
        if self.locked:
            raise FinalScoreLockedError(self.id)
        self.pillar_scores = pillar_scores
        self.weighted_score = weighted_score

    def mark_feedback_delivered(
        self, delivered_by: UserId, feedback_notes: str | None = None
    ) -> None:
        """Record feedback delivery; independent of lock state.

        Repeat calls overwrite the previous delivery metadata. Omitting
        notes keeps any notes already recorded.
        """
        now = datetime.now(timezone.utc)
        self.feedback_delivered = True
        self.feedback_delivered_at = now
        self.delivered_at = now
        self.delivered_by = delivered_by
        if feedback_notes:
            self.feedback_notes = feedback_notes

    @property
    def percentage_score(self) -> float:
        return self.weighted_score.percentage

    @property
    def bonus_tier(self) -> BonusTier:
        return self.weighted_score.bonus_tier

    @property
    def employee_id(self) -> UserId:
        """Alias of ``user_id`` used by manager-facing services."""
        return self.user_id
