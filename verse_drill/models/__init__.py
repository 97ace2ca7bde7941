"""Data models shared by the alignment and scoring packages."""
from .diff_op import DELETE, DIFF_KINDS, INSERT, MATCH, DiffOp
from .grade_result import GradeResult
from .token import Token

__all__ = ["Token", "DiffOp", "GradeResult", "MATCH", "DELETE", "INSERT", "DIFF_KINDS"]
