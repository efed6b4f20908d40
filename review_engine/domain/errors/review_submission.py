"""Review submission errors.

Self reviews and manager evaluations are editable while DRAFT and frozen
once submitted. Peer feedback may only come from a nominated peer, once
per reviewee. Calibration adjusts submitted evaluations only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from review_engine.domain.errors.business_rule import BusinessRuleViolationError
from review_engine.domain.exceptions import ReviewEngineError

if TYPE_CHECKING:
    from review_engine.domain.models.identifiers import UserId


class ReviewAlreadySubmittedError(ReviewEngineError):
    """Raised when a submitted self review or evaluation is changed.

    Attributes:
        record_id: The submitted record.
    """

    def __init__(self, record_id: UUID, message: str) -> None:
        self.record_id = record_id
        super().__init__(message)


class NarrativeTooLongError(ReviewEngineError):
    """Raised when narrative text exceeds the word limit."""

    def __init__(self, word_count: int, limit: int) -> None:
        self.word_count = word_count
        self.limit = limit
        super().__init__(
            f"Narrative exceeds {limit} word limit ({word_count} words)"
        )


class IncompleteSelfReviewError(BusinessRuleViolationError):
    """Raised when a self review is submitted with an empty narrative."""

    def __init__(self, review_id: UUID) -> None:
        self.review_id = review_id
        super().__init__("Cannot submit incomplete self-review. Narrative is required.")


class PeerNominationNotFoundError(BusinessRuleViolationError):
    """Raised when a reviewer was never nominated by the reviewee."""

    def __init__(self, reviewer_id: UserId, reviewee_id: UserId) -> None:
        self.reviewer_id = reviewer_id
        self.reviewee_id = reviewee_id
        super().__init__("No peer nomination found for this reviewer and reviewee")


class InactiveNominationError(BusinessRuleViolationError):
    """Raised when the nomination was declined or overridden."""

    def __init__(self, nomination_id: UUID, status: str) -> None:
        self.nomination_id = nomination_id
        self.status = status
        super().__init__("Peer nomination is not active")


class DuplicatePeerFeedbackError(BusinessRuleViolationError):
    """Raised when a reviewer gives feedback to the same reviewee twice."""

    def __init__(self, reviewer_id: UserId, reviewee_id: UserId) -> None:
        self.reviewer_id = reviewer_id
        self.reviewee_id = reviewee_id
        super().__init__("Peer feedback already submitted for this reviewee")


class EvaluationNotSubmittedError(ReviewEngineError):
    """Raised when calibration targets a DRAFT manager evaluation."""

    def __init__(self, evaluation_id: UUID) -> None:
        self.evaluation_id = evaluation_id
        super().__init__("Cannot apply calibration to unsubmitted evaluation")


class CalibrationJustificationError(BusinessRuleViolationError):
    """Raised when a calibration adjustment lacks a sufficient justification."""

    def __init__(self, minimum: int) -> None:
        self.minimum = minimum
        super().__init__(f"Justification must be at least {minimum} characters")
