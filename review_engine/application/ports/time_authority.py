"""Time authority port.

Services that compare against phase deadlines read the current time
from this port instead of calling datetime.now() themselves, so tests
can pin the clock.
"""

from abc import abstractmethod
from datetime import datetime
from typing import Protocol


class TimeAuthorityProtocol(Protocol):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
