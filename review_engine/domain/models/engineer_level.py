"""Engineer level value object."""

from __future__ import annotations

from enum import Enum

from review_engine.domain.errors.scoring import InvalidEngineerLevelError


class EngineerLevel(str, Enum):
    """Career level recorded on a final score."""

    JUNIOR = "JUNIOR"
    MID = "MID"
    SENIOR = "SENIOR"
    LEAD = "LEAD"
    MANAGER = "MANAGER"

    @classmethod
    def from_string(cls, level: str) -> EngineerLevel:
        """Parse a level name, ignoring case and surrounding whitespace.

        Raises:
            InvalidEngineerLevelError: If level is empty or unknown.
        """
        if not isinstance(level, str) or not level.strip():
            raise InvalidEngineerLevelError(
                "Invalid engineer level: Level cannot be empty"
            )
        normalized = level.strip().upper()
        try:
            return cls(normalized)
        except ValueError as e:
            valid_levels = ", ".join(member.value for member in cls)
            raise InvalidEngineerLevelError(
                f"Invalid engineer level: {level}. Valid levels: {valid_levels}"
            ) from e
