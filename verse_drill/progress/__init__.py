"""Attempt records and practice-mode completion tracking."""
from .attempt import PRACTICE_MODES, Attempt
from .completion import (
    PERFECT_ATTEMPTS_REQUIRED,
    MemorizedPassage,
    ModeCompletion,
    ModeCompletionStatus,
    PassageCompletion,
    PassageProgress,
    best_accuracy,
    is_memorized,
    latest_completed_at,
    memorized_passages,
    mode_completion_status,
    passage_completion,
    rebuild_mode_completions,
    update_mode_completion,
)

__all__ = [
    "PRACTICE_MODES",
    "PERFECT_ATTEMPTS_REQUIRED",
    "Attempt",
    "MemorizedPassage",
    "ModeCompletion",
    "ModeCompletionStatus",
    "PassageCompletion",
    "PassageProgress",
    "best_accuracy",
    "is_memorized",
    "latest_completed_at",
    "memorized_passages",
    "mode_completion_status",
    "passage_completion",
    "rebuild_mode_completions",
    "update_mode_completion",
]
