"""Grading rules and thresholds for memorization attempts."""
from __future__ import annotations

# Paraphrase tolerance: a non-perfect attempt is "close enough" when the
# missed + extra word count stays within both limits below.
PARAPHRASE_MAX_DEVIATIONS = 1
PARAPHRASE_MAX_RATIO = 0.10  # of the comparable reference length

# Accuracy band floors (inclusive). Anything below MID_BAND_FLOOR is "low".
PERFECT_ACCURACY = 100
HIGH_BAND_FLOOR = 85
MID_BAND_FLOOR = 60

# Fixed feedback table, keyed by accuracy band
FEEDBACK_MESSAGES = {
    "perfect": "¡Perfecto! Sigue reforzándolo.",
    "high": "¡Muy cerca! Revisa las palabras marcadas y vuelve a intentarlo.",
    "mid": "Concéntrate en las palabras omitidas e inténtalo de nuevo.",
    "low": "Sigue practicando: lee el pasaje completo antes del próximo intento.",
}

# Grader identifier carried in results (the only local backend)
GRADED_BY = "naive"
