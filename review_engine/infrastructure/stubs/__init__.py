"""Infrastructure stubs for development and testing.

In-memory implementations of every application port.

Available stubs:
- ReviewCycleRepositoryStub: Cycles, with active-cycle lookup
- FinalScoreRepositoryStub: Final scores, unique per (user, cycle)
- UserDirectoryStub: Users and reporting lines
- PeerNominationRepositoryStub: Peer nominations
- ScoreAdjustmentRepositoryStub: Score adjustment requests
- CalibrationSessionRepositoryStub: Calibration sessions
- SelfReviewRepositoryStub, PeerFeedbackRepositoryStub,
  ManagerEvaluationRepositoryStub: Self reviews, peer feedback and
  manager evaluations

WARNING: These stubs are NOT for production use.
"""

from review_engine.infrastructure.stubs.calibration_session_repository_stub import (
    CalibrationSessionRepositoryStub,
)
from review_engine.infrastructure.stubs.final_score_repository_stub import (
    FinalScoreRepositoryStub,
)
from review_engine.infrastructure.stubs.peer_nomination_repository_stub import (
    PeerNominationRepositoryStub,
)
from review_engine.infrastructure.stubs.review_cycle_repository_stub import (
    ReviewCycleRepositoryStub,
)
from review_engine.infrastructure.stubs.review_record_stubs import (
    ManagerEvaluationRepositoryStub,
    PeerFeedbackRepositoryStub,
    SelfReviewRepositoryStub,
)
from review_engine.infrastructure.stubs.score_adjustment_repository_stub import (
    ScoreAdjustmentRepositoryStub,
)
from review_engine.infrastructure.stubs.user_directory_stub import UserDirectoryStub

__all__ = [
    "CalibrationSessionRepositoryStub",
    "FinalScoreRepositoryStub",
    "ManagerEvaluationRepositoryStub",
    "PeerFeedbackRepositoryStub",
    "PeerNominationRepositoryStub",
    "ReviewCycleRepositoryStub",
    "ScoreAdjustmentRepositoryStub",
    "SelfReviewRepositoryStub",
    "UserDirectoryStub",
]
