"""Bootstrap wiring for review engine services.

Repositories are process-wide singletons backed by the in-memory stubs;
persistence adapters live outside this package and are injected with
the ``set_*`` functions. Services are built on demand from the current
singletons, so a ``set_*`` call is picked up by the next ``get_*``.
"""

from __future__ import annotations

from structlog import get_logger

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
from review_engine.config.review_policy_config import ReviewPolicyConfig
from review_engine.infrastructure.stubs import (
    CalibrationSessionRepositoryStub,
    FinalScoreRepositoryStub,
    ManagerEvaluationRepositoryStub,
    PeerFeedbackRepositoryStub,
    PeerNominationRepositoryStub,
    ReviewCycleRepositoryStub,
    ScoreAdjustmentRepositoryStub,
    SelfReviewRepositoryStub,
    UserDirectoryStub,
)

logger = get_logger()

_cycle_repo: ReviewCycleRepositoryProtocol | None = None
_final_score_repo: FinalScoreRepositoryProtocol | None = None
_user_directory: UserDirectoryProtocol | None = None
_nomination_repo: PeerNominationRepositoryProtocol | None = None
_adjustment_repo: ScoreAdjustmentRepositoryProtocol | None = None
_session_repo: CalibrationSessionRepositoryProtocol | None = None
_self_review_repo: SelfReviewRepositoryProtocol | None = None
_peer_feedback_repo: PeerFeedbackRepositoryProtocol | None = None
_manager_eval_repo: ManagerEvaluationRepositoryProtocol | None = None
_policy_config: ReviewPolicyConfig | None = None
_time_authority: TimeAuthorityProtocol | None = None


def get_review_policy_config() -> ReviewPolicyConfig:
    """Get the review policy, read from the environment on first use."""
    global _policy_config
    if _policy_config is None:
        _policy_config = ReviewPolicyConfig.from_environment()
        logger.info(
            "review_policy_loaded",
            min_peer_nominations=_policy_config.min_peer_nominations,
            max_peer_nominations=_policy_config.max_peer_nominations,
        )
    return _policy_config


def get_cycle_repository() -> ReviewCycleRepositoryProtocol:
    global _cycle_repo
    if _cycle_repo is None:
        logger.warning(
            "review_cycle_repository_initialized",
            repository_type="in-memory",
            message="No persistence adapter set, using in-memory stub",
        )
        _cycle_repo = ReviewCycleRepositoryStub()
    return _cycle_repo


def get_final_score_repository() -> FinalScoreRepositoryProtocol:
    global _final_score_repo
    if _final_score_repo is None:
        _final_score_repo = FinalScoreRepositoryStub()
    return _final_score_repo


def get_user_directory() -> UserDirectoryProtocol:
    global _user_directory
    if _user_directory is None:
        _user_directory = UserDirectoryStub()
    return _user_directory


def get_nomination_repository() -> PeerNominationRepositoryProtocol:
    global _nomination_repo
    if _nomination_repo is None:
        _nomination_repo = PeerNominationRepositoryStub()
    return _nomination_repo


def get_adjustment_repository() -> ScoreAdjustmentRepositoryProtocol:
    global _adjustment_repo
    if _adjustment_repo is None:
        _adjustment_repo = ScoreAdjustmentRepositoryStub()
    return _adjustment_repo


def get_calibration_session_repository() -> CalibrationSessionRepositoryProtocol:
    global _session_repo
    if _session_repo is None:
        _session_repo = CalibrationSessionRepositoryStub()
    return _session_repo


def get_self_review_repository() -> SelfReviewRepositoryProtocol:
    global _self_review_repo
    if _self_review_repo is None:
        _self_review_repo = SelfReviewRepositoryStub()
    return _self_review_repo


def get_peer_feedback_repository() -> PeerFeedbackRepositoryProtocol:
    global _peer_feedback_repo
    if _peer_feedback_repo is None:
        _peer_feedback_repo = PeerFeedbackRepositoryStub()
    return _peer_feedback_repo


def get_manager_evaluation_repository() -> ManagerEvaluationRepositoryProtocol:
    global _manager_eval_repo
    if _manager_eval_repo is None:
        _manager_eval_repo = ManagerEvaluationRepositoryStub()
    return _manager_eval_repo


def get_time_authority() -> TimeAuthorityProtocol:
    global _time_authority
    if _time_authority is None:
        _time_authority = TimeAuthorityService()
    return _time_authority


def get_review_cycle_service() -> ReviewCycleService:
    return ReviewCycleService(cycle_repo=get_cycle_repository())


def get_peer_nomination_service() -> PeerNominationService:
    return PeerNominationService(
        nomination_repo=get_nomination_repository(),
        cycle_repo=get_cycle_repository(),
        user_directory=get_user_directory(),
        config=get_review_policy_config(),
    )


def get_score_adjustment_service() -> ScoreAdjustmentService:
    return ScoreAdjustmentService(
        adjustment_repo=get_adjustment_repository(),
        final_score_repo=get_final_score_repository(),
        cycle_repo=get_cycle_repository(),
        user_directory=get_user_directory(),
        config=get_review_policy_config(),
    )


def get_final_score_service() -> FinalScoreService:
    return FinalScoreService(
        final_score_repo=get_final_score_repository(),
        cycle_repo=get_cycle_repository(),
        user_directory=get_user_directory(),
    )


def get_calibration_service() -> CalibrationService:
    return CalibrationService(
        session_repo=get_calibration_session_repository(),
        cycle_repo=get_cycle_repository(),
        final_score_repo=get_final_score_repository(),
        evaluation_repo=get_manager_evaluation_repository(),
        config=get_review_policy_config(),
    )


def get_self_review_service() -> SelfReviewService:
    return SelfReviewService(
        self_review_repo=get_self_review_repository(),
        cycle_repo=get_cycle_repository(),
        time_authority=get_time_authority(),
    )


def get_peer_feedback_service() -> PeerFeedbackService:
    return PeerFeedbackService(
        feedback_repo=get_peer_feedback_repository(),
        nomination_repo=get_nomination_repository(),
        cycle_repo=get_cycle_repository(),
        time_authority=get_time_authority(),
    )


def get_manager_evaluation_service() -> ManagerEvaluationService:
    return ManagerEvaluationService(
        evaluation_repo=get_manager_evaluation_repository(),
        cycle_repo=get_cycle_repository(),
        user_directory=get_user_directory(),
        time_authority=get_time_authority(),
    )


def get_team_review_service() -> TeamReviewService:
    return TeamReviewService(
        user_directory=get_user_directory(),
        cycle_repo=get_cycle_repository(),
        self_review_repo=get_self_review_repository(),
        peer_feedback_repo=get_peer_feedback_repository(),
        manager_eval_repo=get_manager_evaluation_repository(),
        final_score_repo=get_final_score_repository(),
        config=get_review_policy_config(),
    )


def reset_review_dependencies() -> None:
    """Reset review engine dependency singletons."""
    global _cycle_repo
    global _final_score_repo
    global _user_directory
    global _nomination_repo
    global _adjustment_repo
    global _session_repo
    global _self_review_repo
    global _peer_feedback_repo
    global _manager_eval_repo
    global _policy_config
    global _time_authority

    _cycle_repo = None
    _final_score_repo = None
    _user_directory = None
    _nomination_repo = None
    _adjustment_repo = None
    _session_repo = None
    _self_review_repo = None
    _peer_feedback_repo = None
    _manager_eval_repo = None
    _policy_config = None
    _time_authority = None


def set_cycle_repository(repo: ReviewCycleRepositoryProtocol) -> None:
    """Set the cycle repository (persistence adapter or test double)."""
    global _cycle_repo
    _cycle_repo = repo


def set_final_score_repository(repo: FinalScoreRepositoryProtocol) -> None:
    global _final_score_repo
    _final_score_repo = repo


def set_user_directory(directory: UserDirectoryProtocol) -> None:
    global _user_directory
    _user_directory = directory


def set_review_policy_config(config: ReviewPolicyConfig) -> None:
    """Set custom review policy for testing."""
    global _policy_config
    _policy_config = config


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set the clock used for deadline checks."""
    global _time_authority
    _time_authority = time_authority
