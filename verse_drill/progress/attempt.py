"""Attempt records built from grading results for the sync/export layer."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.grade_result import GradeResult

PRACTICE_MODES = ("type", "speech", "stealth", "sequence")


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Attempt:
    """One graded practice attempt.

    Attributes:
        ts: Epoch timestamp in milliseconds
        mode: Practice mode ("type", "speech", "stealth" or "sequence")
        input_length: Character length of the attempt text
        accuracy: Accuracy 0-100
        missed_words: Missed reference words
        extra_words: Extra attempt words
        feedback: Feedback message shown to the user
        diff: Plain-data diff entries
        transcription: Speech transcript, for speech attempts
    """
    ts: int
    mode: str
    input_length: int
    accuracy: int
    missed_words: List[str] = field(default_factory=list)
    extra_words: List[str] = field(default_factory=list)
    feedback: Optional[str] = None
    diff: List[Dict[str, Any]] = field(default_factory=list)
    transcription: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mode not in PRACTICE_MODES:
            raise ValueError(f"Unknown practice mode: {self.mode!r}")

    @classmethod
    def from_grade(
        cls,
        result: GradeResult,
        mode: str,
        attempt_text: str,
        ts: Optional[int] = None,
        transcription: Optional[str] = None,
    ) -> "Attempt":
        return cls(
            ts=_now_ms() if ts is None else ts,
            mode=mode,
            input_length=len(attempt_text or ""),
            accuracy=result.accuracy,
            missed_words=list(result.missed_words),
            extra_words=list(result.extra_words),
            feedback=result.feedback,
            diff=[op.to_dict() for op in result.diff],
            transcription=transcription,
        )

    def to_dict(self) -> Dict[str, Any]:
        """camelCase record as stored by the remote progress store."""
        record: Dict[str, Any] = {
            "ts": self.ts,
            "mode": self.mode,
            "inputLength": self.input_length,
            "accuracy": self.accuracy,
            "missedWords": list(self.missed_words),
            "extraWords": list(self.extra_words),
            "diff": list(self.diff),
        }
        if self.feedback is not None:
            record["feedback"] = self.feedback
        if self.transcription is not None:
            record["transcription"] = self.transcription
        return record
