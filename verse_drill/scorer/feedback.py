"""Accuracy banding, feedback strings and paraphrase tolerance."""
from __future__ import annotations

from .rules import (
    FEEDBACK_MESSAGES,
    HIGH_BAND_FLOOR,
    MID_BAND_FLOOR,
    PARAPHRASE_MAX_DEVIATIONS,
    PARAPHRASE_MAX_RATIO,
    PERFECT_ACCURACY,
)


def accuracy_band(accuracy: int) -> str:
    """Map a 0-100 accuracy to its band name ("perfect", "high", "mid", "low")."""
    if accuracy >= PERFECT_ACCURACY:
        return "perfect"
    if accuracy >= HIGH_BAND_FLOOR:
        return "high"
    if accuracy >= MID_BAND_FLOOR:
        return "mid"
    return "low"


def feedback_for(accuracy: int) -> str:
    """Fixed user-facing message for the band the accuracy falls into."""
    return FEEDBACK_MESSAGES[accuracy_band(accuracy)]


def is_paraphrase_ok(missed_count: int, extra_count: int, reference_count: int) -> bool:
    """Decide whether a non-perfect attempt is a near-perfect paraphrase.

    Perfect attempts are excluded: they are flagged as perfect, not as
    paraphrases.

    Args:
        missed_count: Number of missed reference words
        extra_count: Number of extra attempt words
        reference_count: Number of comparable reference words

    Returns:
        True when 0 < deviations <= PARAPHRASE_MAX_DEVIATIONS and the
        deviations are at most PARAPHRASE_MAX_RATIO of the reference length
    """
    deviations = missed_count + extra_count
    if deviations == 0 or reference_count <= 0:
        return False
    if deviations > PARAPHRASE_MAX_DEVIATIONS:
        return False
    return deviations / reference_count <= PARAPHRASE_MAX_RATIO
