"""Alignment orchestration between reference tokens and attempt tokens."""
from __future__ import annotations

from typing import List, Sequence

from ..models.diff_op import DELETE, INSERT, MATCH, DiffOp
from ..models.token import Token
from .edit_distance import align_sequences
from .tokenizer import comparable_tokens, tokenize_attempt, tokenize_passage


def diff_tokens(reference: Sequence[Token], attempt: Sequence[Token]) -> List[DiffOp]:
    """Align attempt tokens against reference tokens using normalized keys.

    Tokens with an empty comparison key are left out of the alignment.

    Args:
        reference: Tokens of the reference passage
        attempt: Tokens of the user's attempt

    Returns:
        List of DiffOp objects covering each comparable token exactly once
    """
    ref_tokens = comparable_tokens(list(reference))
    hyp_tokens = comparable_tokens(list(attempt))

    ops = align_sequences([t.key for t in ref_tokens], [t.key for t in hyp_tokens])
    diff: List[DiffOp] = []
    for op, ri, hj in ops:
        if op == MATCH:
            ref_token, hyp_token = ref_tokens[ri], hyp_tokens[hj]
            diff.append(DiffOp(MATCH, ref_token, hyp_token, exact=ref_token.word == hyp_token.word))
        elif op == DELETE:
            diff.append(DiffOp(DELETE, reference=ref_tokens[ri]))
        else:
            diff.append(DiffOp(INSERT, attempt=hyp_tokens[hj]))
    return diff


def align_texts(reference_text: str, attempt_text: str) -> List[DiffOp]:
    """Tokenize both texts and align them.

    Raises:
        EmptyInputError: If either text is blank
    """
    return diff_tokens(tokenize_passage(reference_text), tokenize_attempt(attempt_text))
