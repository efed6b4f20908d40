"""Application ports (collaborator contracts) for the review engine.

Ports are typing.Protocol classes. Persistence adapters implement them
outside this package; infrastructure.stubs provides in-memory versions.
"""

from review_engine.application.ports.calibration_session_repository import (
    CalibrationSessionRepositoryProtocol,
)
from review_engine.application.ports.final_score_repository import (
    FinalScoreRepositoryProtocol,
)
from review_engine.application.ports.peer_nomination_repository import (
    PeerNominationRepositoryProtocol,
)
from review_engine.application.ports.review_cycle_repository import (
    ReviewCycleRepositoryProtocol,
)
from review_engine.application.ports.review_record_repositories import (
    ManagerEvaluationRepositoryProtocol,
    PeerFeedbackRepositoryProtocol,
    SelfReviewRepositoryProtocol,
)
from review_engine.application.ports.score_adjustment_repository import (
    ScoreAdjustmentRepositoryProtocol,
)
from review_engine.application.ports.time_authority import TimeAuthorityProtocol
from review_engine.application.ports.user_directory import UserDirectoryProtocol

__all__: list[str] = [
    "CalibrationSessionRepositoryProtocol",
    "FinalScoreRepositoryProtocol",
    "ManagerEvaluationRepositoryProtocol",
    "PeerFeedbackRepositoryProtocol",
    "PeerNominationRepositoryProtocol",
    "ReviewCycleRepositoryProtocol",
    "ScoreAdjustmentRepositoryProtocol",
    "SelfReviewRepositoryProtocol",
    "TimeAuthorityProtocol",
    "UserDirectoryProtocol",
]
