"""Business rule violation base error.

Business rules are cross-record checks performed by the application
services (nomination bounds, direct-report checks, lock gating).
Their messages are fixed text relied upon by API clients.
"""

from review_engine.domain.exceptions import ReviewEngineError


class BusinessRuleViolationError(ReviewEngineError):
    """Raised when an orchestrated business rule rejects a request.

    Subclasses carry the identifiers involved as attributes; the
    message itself is a fixed, user-facing sentence.
    """

    pass
