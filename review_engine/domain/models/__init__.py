"""Domain models for the review engine.

Value objects are frozen dataclasses or enums validated on
construction. ReviewCycle, FinalScore, SelfReview and ManagerEvaluation
are mutable aggregates whose methods enforce their lifecycle rules.
"""

from review_engine.domain.models.bonus_tier import BonusTier
from review_engine.domain.models.calibration_session import (
    CalibrationSession,
    CalibrationSessionStatus,
)
from review_engine.domain.models.cycle_deadlines import CycleDeadlines, ReviewPhase
from review_engine.domain.models.engineer_level import EngineerLevel
from review_engine.domain.models.final_score import FinalScore
from review_engine.domain.models.identifiers import FinalScoreId, ReviewCycleId, UserId
from review_engine.domain.models.narrative import Narrative
from review_engine.domain.models.peer_nomination import NominationStatus, PeerNomination
from review_engine.domain.models.pillar_scores import PillarScores
from review_engine.domain.models.review_cycle import CycleStatus, ReviewCycle
from review_engine.domain.models.review_records import (
    ManagerEvaluation,
    PeerFeedback,
    ReviewStatus,
    SelfReview,
)
from review_engine.domain.models.score_adjustment import (
    AdjustmentStatus,
    ScoreAdjustmentRequest,
)
from review_engine.domain.models.user import DirectoryUser
from review_engine.domain.models.weighted_score import WeightedScore

__all__: list[str] = [
    "AdjustmentStatus",
    "BonusTier",
    "CalibrationSession",
    "CalibrationSessionStatus",
    "CycleDeadlines",
    "CycleStatus",
    "DirectoryUser",
    "EngineerLevel",
    "FinalScore",
    "FinalScoreId",
    "ManagerEvaluation",
    "Narrative",
    "NominationStatus",
    "PeerFeedback",
    "PeerNomination",
    "PillarScores",
    "ReviewCycle",
    "ReviewCycleId",
    "ReviewPhase",
    "ReviewStatus",
    "ScoreAdjustmentRequest",
    "SelfReview",
    "UserId",
    "WeightedScore",
]
