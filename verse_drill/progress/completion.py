"""Practice-mode completion tracking.

A mode is completed once the user has PERFECT_ATTEMPTS_REQUIRED perfect
(100%) attempts in it. A passage is fully memorized when every mode is
completed. All helpers return new objects and never mutate their inputs.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Mapping, Optional

from .attempt import PRACTICE_MODES, Attempt

PERFECT_ATTEMPTS_REQUIRED = 3


@dataclass(frozen=True)
class ModeCompletion:
    perfect_count: int = 0
    completed_at: Optional[int] = None


@dataclass(frozen=True)
class ModeCompletionStatus:
    mode: str
    perfect_count: int
    is_completed: bool
    completed_at: Optional[int]
    progress: float  # 0-100 towards completion


@dataclass(frozen=True)
class PassageCompletion:
    completed_modes: List[str] = field(default_factory=list)
    completion_percent: float = 0.0
    mode_statuses: List[ModeCompletionStatus] = field(default_factory=list)
    total_perfect_attempts: int = 0


def update_mode_completion(existing: Optional[ModeCompletion], attempt: Attempt) -> ModeCompletion:
    """Return the completion for the attempt's mode after adding the attempt.

    Non-perfect attempts leave the completion unchanged.
    """
    current = existing or ModeCompletion()
    if attempt.accuracy != 100:
        return current

    updated = replace(current, perfect_count=current.perfect_count + 1)
    if updated.perfect_count == PERFECT_ATTEMPTS_REQUIRED and updated.completed_at is None:
        updated = replace(updated, completed_at=attempt.ts)
    return updated


def rebuild_mode_completions(attempts: Iterable[Attempt]) -> Dict[str, ModeCompletion]:
    """Recompute per-mode completions from an attempt history (timestamp order)."""
    completions: Dict[str, ModeCompletion] = {mode: ModeCompletion() for mode in PRACTICE_MODES}
    for attempt in sorted(attempts, key=lambda a: a.ts):
        completions[attempt.mode] = update_mode_completion(completions[attempt.mode], attempt)
    return completions


def mode_completion_status(mode: str, completion: Optional[ModeCompletion]) -> ModeCompletionStatus:
    perfect_count = completion.perfect_count if completion else 0
    return ModeCompletionStatus(
        mode=mode,
        perfect_count=perfect_count,
        is_completed=perfect_count >= PERFECT_ATTEMPTS_REQUIRED,
        completed_at=completion.completed_at if completion else None,
        progress=min(100.0, perfect_count / PERFECT_ATTEMPTS_REQUIRED * 100),
    )


def passage_completion(completions: Optional[Mapping[str, ModeCompletion]]) -> PassageCompletion:
    """Summarize completion over all practice modes for one passage."""
    completions = completions or {}
    statuses = [mode_completion_status(mode, completions.get(mode)) for mode in PRACTICE_MODES]
    completed = [s.mode for s in statuses if s.is_completed]
    return PassageCompletion(
        completed_modes=completed,
        completion_percent=len(completed) / len(PRACTICE_MODES) * 100,
        mode_statuses=statuses,
        total_perfect_attempts=sum(s.perfect_count for s in statuses),
    )


def is_memorized(completions: Optional[Mapping[str, ModeCompletion]]) -> bool:
    """True when every practice mode has reached the perfect-attempt threshold."""
    if not completions:
        return False
    return all(
        (completions.get(mode) or ModeCompletion()).perfect_count >= PERFECT_ATTEMPTS_REQUIRED
        for mode in PRACTICE_MODES
    )


@dataclass(frozen=True)
class PassageProgress:
    """Stored progress for one passage.

    Attributes:
        reference: Human-readable reference (e.g. "Salmos 23:1")
        source: "built-in" or "custom" (user-entered passages)
        mode_completions: Completion per practice mode
    """
    reference: str
    source: str = "built-in"
    mode_completions: Mapping[str, ModeCompletion] = field(default_factory=dict)


@dataclass(frozen=True)
class MemorizedPassage:
    passage_id: str
    progress: PassageProgress
    summary: PassageCompletion


def latest_completed_at(completions: Optional[Mapping[str, ModeCompletion]]) -> Optional[int]:
    """Most recent completion timestamp across modes (None if no mode is completed)."""
    timestamps = [c.completed_at for c in (completions or {}).values() if c and c.completed_at]
    return max(timestamps) if timestamps else None


def memorized_passages(passages: Mapping[str, PassageProgress]) -> List[MemorizedPassage]:
    """Built-in passages with every mode completed, most recently completed first.

    Custom passages never count as memorized.
    """
    memorized = [
        MemorizedPassage(passage_id, progress, passage_completion(progress.mode_completions))
        for passage_id, progress in passages.items()
        if progress.source != "custom" and is_memorized(progress.mode_completions)
    ]
    memorized.sort(key=lambda m: latest_completed_at(m.progress.mode_completions) or 0, reverse=True)
    return memorized


def best_accuracy(attempts: Iterable[Attempt]) -> int:
    return max((a.accuracy for a in attempts), default=0)
