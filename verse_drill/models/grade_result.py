"""Data model for the outcome of grading one attempt."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .diff_op import DiffOp


@dataclass(frozen=True)
class GradeResult:
    """Grading outcome returned to the UI and to the attempt sync payload.

    Attributes:
        accuracy: Integer percentage (0-100) of reference words matched
        missed_words: Reference words absent from the attempt, in reference order
        extra_words: Attempt words absent from the reference, in attempt order
        diff: Full alignment used for highlighting
        paraphrase_ok: True for near-perfect attempts within the paraphrase tolerance
        feedback: Fixed message chosen by accuracy band
        graded_by: Grading backend identifier
        word_error_rate: WER over comparison keys (0.0-1.0)
    """
    accuracy: int
    missed_words: List[str] = field(default_factory=list)
    extra_words: List[str] = field(default_factory=list)
    diff: Tuple[DiffOp, ...] = ()
    paraphrase_ok: bool = False
    feedback: str = ""
    graded_by: str = "naive"
    word_error_rate: float = 0.0

    @property
    def perfect(self) -> bool:
        return self.accuracy == 100 and not self.missed_words and not self.extra_words

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data payload (camelCase keys) for JSON responses and sync records."""
        return {
            "accuracy": self.accuracy,
            "missedWords": list(self.missed_words),
            "extraWords": list(self.extra_words),
            "diff": [op.to_dict() for op in self.diff],
            "paraphraseOk": self.paraphrase_ok,
            "feedback": self.feedback,
            "gradedBy": self.graded_by,
            "wordErrorRate": self.word_error_rate,
        }
