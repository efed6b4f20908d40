"""Narrative value object.

Free text written in self reviews and manager evaluations, capped at
1000 words. Words are whitespace-separated tokens.
"""

from __future__ import annotations

from dataclasses import dataclass

from review_engine.domain.errors.review_submission import NarrativeTooLongError

MAX_NARRATIVE_WORDS: int = 1000


@dataclass(frozen=True, eq=True)
class Narrative:
    """Trimmed narrative text within the word limit."""

    text: str = ""

    def __post_init__(self) -> None:
        if self.word_count > MAX_NARRATIVE_WORDS:
            raise NarrativeTooLongError(self.word_count, MAX_NARRATIVE_WORDS)

    @classmethod
    def create(cls, text: str | None) -> Narrative:
        """Build a narrative from raw input; None becomes empty text.

        Raises:
            NarrativeTooLongError: More than 1000 words.
        """
        return cls((text or "").strip())

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def __str__(self) -> str:
        return self.text
