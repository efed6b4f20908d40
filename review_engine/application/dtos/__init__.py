"""Application DTOs.

Frozen pydantic models shaping service results for the transport layer.
"""

from review_engine.application.dtos.calibration import (
    CalibrationAdjustmentResult,
    CalibrationSessionSummary,
)
from review_engine.application.dtos.final_score import (
    CycleReference,
    EmployeeSummary,
    FeedbackDeliveryResult,
    FinalScoreDetail,
    LockFinalScoresResult,
    MyFinalScoreResult,
    PeerFeedbackSummary,
    PillarScoresPayload,
)
from review_engine.application.dtos.manager_evaluation import ManagerEvaluationDetail
from review_engine.application.dtos.peer_feedback import PeerFeedbackSubmission
from review_engine.application.dtos.peer_nomination import (
    MyNominationsResult,
    NominatePeersResult,
    NominationSummary,
)
from review_engine.application.dtos.review_cycle import (
    ReviewCycleSummary,
    StartReviewCycleResult,
)
from review_engine.application.dtos.score_adjustment import (
    ScoreAdjustmentReviewResult,
    ScoreAdjustmentSummary,
)
from review_engine.application.dtos.self_review import SelfReviewDetail
from review_engine.application.dtos.team import (
    TeamFinalScoresResult,
    TeamMemberReview,
    TeamMemberScore,
    TeamReviewsResult,
)

__all__: list[str] = [
    "CalibrationAdjustmentResult",
    "CalibrationSessionSummary",
    "CycleReference",
    "EmployeeSummary",
    "FeedbackDeliveryResult",
    "FinalScoreDetail",
    "LockFinalScoresResult",
    "ManagerEvaluationDetail",
    "MyFinalScoreResult",
    "MyNominationsResult",
    "NominatePeersResult",
    "NominationSummary",
    "PeerFeedbackSubmission",
    "PeerFeedbackSummary",
    "PillarScoresPayload",
    "ReviewCycleSummary",
    "ScoreAdjustmentReviewResult",
    "ScoreAdjustmentSummary",
    "SelfReviewDetail",
    "StartReviewCycleResult",
    "TeamFinalScoresResult",
    "TeamMemberReview",
    "TeamMemberScore",
    "TeamReviewsResult",
]
