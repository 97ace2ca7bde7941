"""Grading engine for scripture memorization drills."""
from .errors import BlankAttemptError, EmptyInputError, ErrorKind, GradingError
from .models import DiffOp, GradeResult, Token
from .scorer.grader import grade_attempt

__all__ = [
    "grade_attempt",
    "Token",
    "DiffOp",
    "GradeResult",
    "GradingError",
    "EmptyInputError",
    "BlankAttemptError",
    "ErrorKind",
]

__version__ = "0.1.0"
