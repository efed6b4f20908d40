"""Application services - Use case orchestration.

Services sequence validation against the domain aggregates and the
repository ports, and return frozen DTOs.

Available services:
- ReviewCycleService: Cycle creation and lifecycle transitions
- PeerNominationService: Peer nomination validation chain
- SelfReviewService: Self review drafts and deadline-gated submission
- PeerFeedbackService: Deadline-gated peer feedback from nominated peers
- ManagerEvaluationService: Manager evaluation drafts and submission
- ScoreAdjustmentService: Adjustment requests on locked final scores
- FinalScoreService: Final score views, correction and feedback delivery
- CalibrationService: Calibration sessions, adjustments and score locking
- TeamReviewService: Manager views over direct reports
- TimeAuthorityService: System UTC clock
"""

from review_engine.application.services.calibration_service import CalibrationService
from review_engine.application.services.final_score_service import FinalScoreService
from review_engine.application.services.manager_evaluation_service import (
    ManagerEvaluationService,
)
from review_engine.application.services.peer_feedback_service import (
    PeerFeedbackService,
)
from review_engine.application.services.peer_nomination_service import (
    PeerNominationService,
)
from review_engine.application.services.review_cycle_service import ReviewCycleService
from review_engine.application.services.score_adjustment_service import (
    ScoreAdjustmentService,
)
from review_engine.application.services.self_review_service import SelfReviewService
from review_engine.application.services.team_review_service import TeamReviewService
from review_engine.application.services.time_authority_service import (
    TimeAuthorityService,
)

__all__ = [
    "CalibrationService",
    "FinalScoreService",
    "ManagerEvaluationService",
    "PeerFeedbackService",
    "PeerNominationService",
    "ReviewCycleService",
    "ScoreAdjustmentService",
    "SelfReviewService",
    "TeamReviewService",
    "TimeAuthorityService",
]
