from __future__ import annotations

from typing import Sequence

from jiwer import wer


def word_error_rate(reference_keys: Sequence[str], attempt_keys: Sequence[str]) -> float:
    """WER between two key sequences, clamped to 0.0-1.0."""
    ref_str = " ".join(reference_keys)
    hyp_str = " ".join(attempt_keys)
    if not ref_str:
        return 1.0 if hyp_str else 0.0
    if not hyp_str:
        return 1.0
    v = wer(ref_str, hyp_str)
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return round(float(v), 4)
