"""Timestamp errors.

Every timestamp held by the domain is timezone-aware; deadline checks
compare against the current UTC time.
"""

from review_engine.domain.exceptions import ReviewEngineError


class NaiveTimestampError(ReviewEngineError):
    """Raised when a datetime without tzinfo reaches a domain record.

    Attributes:
        field_name: The field that held the naive datetime.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} must be timezone-aware (UTC)")
