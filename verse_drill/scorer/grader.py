"""Attempt grading: alignment, accuracy, word lists and feedback."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..alignment.aligner import diff_tokens
from ..alignment.tokenizer import comparable_tokens, tokenize_attempt, tokenize_passage
from ..errors import BlankAttemptError
from ..models.diff_op import DELETE, INSERT, MATCH, DiffOp
from ..models.grade_result import GradeResult
from .feedback import feedback_for, is_paraphrase_ok
from .metrics import word_error_rate
from .rules import GRADED_BY

logger = logging.getLogger(__name__)


def _percent(matched: int, total: int) -> int:
    # round half up, like the UI does
    return (200 * matched + total) // (2 * total)


def compute_accuracy(matched: int, reference_count: int, extra_count: int) -> int:
    """Integer accuracy 0-100.

    A reference with no comparable words (e.g. only punctuation) scores 100
    when the attempt adds nothing, and 0 otherwise.
    """
    if reference_count == 0:
        return 100 if extra_count == 0 else 0
    return max(0, min(100, _percent(matched, reference_count)))


def grade_diff(diff: Sequence[DiffOp], reference_count: int) -> GradeResult:
    """Aggregate an alignment into a GradeResult.

    Args:
        diff: DiffOp sequence from :func:`diff_tokens`
        reference_count: Number of comparable reference tokens

    Returns:
        GradeResult with accuracy, word lists, paraphrase verdict and feedback
    """
    matched = sum(1 for op in diff if op.kind == MATCH)
    missed_words: List[str] = [op.reference.word for op in diff if op.kind == DELETE]
    extra_words: List[str] = [op.attempt.word for op in diff if op.kind == INSERT]

    accuracy = compute_accuracy(matched, reference_count, len(extra_words))
    ref_keys = [op.reference.key for op in diff if op.reference is not None]
    hyp_keys = [op.attempt.key for op in diff if op.attempt is not None]

    return GradeResult(
        accuracy=accuracy,
        missed_words=missed_words,
        extra_words=extra_words,
        diff=tuple(diff),
        paraphrase_ok=is_paraphrase_ok(len(missed_words), len(extra_words), reference_count),
        feedback=feedback_for(accuracy),
        graded_by=GRADED_BY,
        word_error_rate=word_error_rate(ref_keys, hyp_keys),
    )


def grade_attempt(reference_text: str, attempt_text: Optional[str]) -> GradeResult:
    """Grade a memorization attempt against its reference passage.

    Args:
        reference_text: Passage text, possibly with ``<sup>N</sup>`` verse markers
        attempt_text: Typed text or speech transcript

    Returns:
        GradeResult for the attempt

    Raises:
        BlankAttemptError: If the attempt is missing or whitespace only
        EmptyInputError: If the reference is blank
    """
    if attempt_text is None or not str(attempt_text).strip():
        raise BlankAttemptError()

    reference = tokenize_passage(reference_text)
    attempt = tokenize_attempt(attempt_text)
    diff = diff_tokens(reference, attempt)
    result = grade_diff(diff, len(comparable_tokens(reference)))

    logger.debug(
        "Graded attempt: accuracy=%d missed=%d extra=%d paraphrase_ok=%s",
        result.accuracy, len(result.missed_words), len(result.extra_words), result.paraphrase_ok,
    )
    return result
