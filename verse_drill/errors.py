"""Error types raised by the grading engine."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Known failure kinds, so callers never match on message text."""

    EMPTY_INPUT = "empty_input"
    BLANK_ATTEMPT = "blank_attempt"


class GradingError(ValueError):
    """Base class for every error the grader raises on purpose."""

    kind: ErrorKind = ErrorKind.EMPTY_INPUT


class EmptyInputError(GradingError):
    """Raised when a text handed to the tokenizer is blank."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "El texto está vacío.") -> None:
        super().__init__(message)


class BlankAttemptError(EmptyInputError):
    """Raised when the attempt (not the reference) is blank."""

    kind = ErrorKind.BLANK_ATTEMPT

    def __init__(self, message: str = "No se puede calificar un intento vacío.") -> None:
        super().__init__(message)
