"""Domain errors for the review engine.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ReviewEngineError.
"""

from review_engine.domain.errors.business_rule import BusinessRuleViolationError
from review_engine.domain.errors.identifier import InvalidIdentifierError
from review_engine.domain.errors.nomination import (
    DuplicateNominationError,
    InvalidNominationCountError,
    ManagerNominationError,
    SelfNominationError,
)
from review_engine.domain.errors.not_found import ReviewNotFoundError, UserNotFoundError
from review_engine.domain.errors.review_cycle import (
    AnotherCycleActiveError,
    DeadlinePassedError,
    InvalidDeadlineOrderError,
    InvalidReviewCycleStateError,
)
from review_engine.domain.errors.review_submission import (
    CalibrationJustificationError,
    DuplicatePeerFeedbackError,
    EvaluationNotSubmittedError,
    InactiveNominationError,
    IncompleteSelfReviewError,
    NarrativeTooLongError,
    PeerNominationNotFoundError,
    ReviewAlreadySubmittedError,
)
from review_engine.domain.errors.score_adjustment import (
    AdjustmentAlreadyReviewedError,
    AdjustmentReasonRequiredError,
    NotDirectReportError,
    RejectionReasonRequiredError,
)
from review_engine.domain.errors.scoring import (
    FinalScoreLockedError,
    FinalScoreNotLockedError,
    InvalidEngineerLevelError,
    InvalidPillarScoreError,
    InvalidWeightedScoreError,
)
from review_engine.domain.errors.timestamp import NaiveTimestampError

__all__: list[str] = [
    "AdjustmentAlreadyReviewedError",
    "AdjustmentReasonRequiredError",
    "AnotherCycleActiveError",
    "BusinessRuleViolationError",
    "CalibrationJustificationError",
    "DeadlinePassedError",
    "DuplicateNominationError",
    "DuplicatePeerFeedbackError",
    "EvaluationNotSubmittedError",
    "FinalScoreLockedError",
    "FinalScoreNotLockedError",
    "InactiveNominationError",
    "IncompleteSelfReviewError",
    "InvalidDeadlineOrderError",
    "InvalidEngineerLevelError",
    "InvalidIdentifierError",
    "InvalidNominationCountError",
    "InvalidPillarScoreError",
    "InvalidReviewCycleStateError",
    "InvalidWeightedScoreError",
    "ManagerNominationError",
    "NaiveTimestampError",
    "NarrativeTooLongError",
    "NotDirectReportError",
    "PeerNominationNotFoundError",
    "RejectionReasonRequiredError",
    "ReviewAlreadySubmittedError",
    "ReviewNotFoundError",
    "SelfNominationError",
    "UserNotFoundError",
]
