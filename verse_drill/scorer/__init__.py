"""Attempt scoring and feedback for memorization drills."""
from .feedback import accuracy_band, feedback_for, is_paraphrase_ok
from .grader import compute_accuracy, grade_attempt, grade_diff
from .metrics import word_error_rate

__all__ = [
    "accuracy_band",
    "feedback_for",
    "is_paraphrase_ok",
    "compute_accuracy",
    "grade_attempt",
    "grade_diff",
    "word_error_rate",
]
