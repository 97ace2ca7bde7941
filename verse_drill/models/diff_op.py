"""Data model for one alignment step between reference and attempt tokens."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .token import Token

MATCH = "match"
DELETE = "delete"
INSERT = "insert"

DIFF_KINDS = (MATCH, DELETE, INSERT)


@dataclass(frozen=True)
class DiffOp:
    """Represents an aligned position between reference text and attempt.

    Attributes:
        kind: Operation type - "match", "delete" (missed word) or "insert" (extra word)
        reference: The reference token (or None for inserts)
        attempt: The attempt token (or None for deletes)
        exact: For matches, True when no normalization was needed
    """
    kind: str  # "match" | "delete" | "insert"
    reference: Optional[Token] = None
    attempt: Optional[Token] = None
    exact: bool = False

    def __post_init__(self) -> None:
        if self.kind not in DIFF_KINDS:
            raise ValueError(f"Unknown diff kind: {self.kind!r}")

    @property
    def token(self) -> Token:
        """Token shown to the user: the reference side unless this is an insert."""
        if self.kind == INSERT:
            return self.attempt  # type: ignore[return-value]
        return self.reference  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any]:
        token = self.token
        return {
            "op": self.kind,
            "token": token.text,
            "verse": token.verse,
            "exact": self.exact,
        }
