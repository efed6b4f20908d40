"""System clock implementation of TimeAuthorityProtocol."""

from datetime import datetime, timezone

from review_engine.application.ports.time_authority import TimeAuthorityProtocol


class TimeAuthorityService(TimeAuthorityProtocol):
    """Reads the wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
