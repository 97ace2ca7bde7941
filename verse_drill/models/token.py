"""Data model for a word token extracted from passage or attempt text."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """A single word of a passage or attempt.

    Attributes:
        text: Surface form as it appeared, punctuation included, markup removed
        verse: Verse number the word belongs to (or None if unknown)
        word: Surface form without leading/trailing punctuation (for display lists)
        key: Normalized comparison key ("" when the token is not comparable)
    """
    text: str
    verse: Optional[int] = None
    word: str = ""
    key: str = ""

    @property
    def comparable(self) -> bool:
        return bool(self.key)
