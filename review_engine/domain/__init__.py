"""
Domain layer - Pure business logic for the review engine.

This layer contains:
- Value objects (scores, tiers, deadlines, identifiers)
- Aggregates (ReviewCycle, FinalScore)
- Records (PeerNomination, ScoreAdjustmentRequest, CalibrationSession)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from review_engine.domain.exceptions import ReviewEngineError

__all__: list[str] = ["ReviewEngineError"]
