"""Request/response models for the grading endpoint."""
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Longest text accepted per field (characters)
MAX_TEXT_LENGTH = int(os.environ.get("VERSE_DRILL_MAX_TEXT_LENGTH", "20000"))


class GradeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    target_text: str = Field(alias="targetText", max_length=MAX_TEXT_LENGTH)
    attempt_text: str = Field(alias="attemptText", max_length=MAX_TEXT_LENGTH)


class DiffEntry(BaseModel):
    op: str
    token: str
    verse: Optional[int] = None
    exact: bool = False


class GradeResponse(BaseModel):
    accuracy: int
    missedWords: List[str]
    extraWords: List[str]
    diff: List[DiffEntry]
    paraphraseOk: bool
    feedback: str
    gradedBy: str
    wordErrorRate: float


class ErrorResponse(BaseModel):
    error: str
    kind: str
    details: Optional[List[Dict[str, Any]]] = None
