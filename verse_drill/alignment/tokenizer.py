"""Passage and attempt tokenization for alignment."""
from __future__ import annotations

import re
from typing import List, Optional

from ..errors import EmptyInputError
from ..models.token import Token
from .normalizer import normalize_token, split_joined_words, strip_punctuation
from .sanitize import split_verse_segments


def make_token(text: str, verse: Optional[int] = None) -> Token:
    """Build a Token with its display word and comparison key filled in."""
    return Token(text=text, verse=verse, word=strip_punctuation(text), key=normalize_token(text))


def _split_words(prose: str, verse: Optional[int]) -> List[Token]:
    return [
        make_token(piece, verse)
        for raw in re.split(r"\s+", prose) if raw
        for piece in split_joined_words(raw)
    ]


def tokenize_passage(text: Optional[str], markup: bool = True) -> List[Token]:
    """Tokenize passage markup or a plain attempt into word tokens.

    Verse markers (``<sup>N</sup>`` optionally followed by ``&nbsp;``) are
    removed and their number is carried forward onto every following token.
    With ``markup`` off (typed or transcribed attempts) only well-formed
    tags are stripped, so a literal "a < b c d > e" keeps every word.

    Example: "<sup>1</sup>&nbsp;En el principio" ->
        [Token("En", 1), Token("el", 1), Token("principio", 1)]

    Args:
        text: Raw reference markup or attempt text
        markup: Whether the text is passage markup (any "<...>" run is a tag)

    Returns:
        Ordered list of tokens (punctuation stays attached in ``text``)

    Raises:
        EmptyInputError: If the text is missing or whitespace only
    """
    if text is None or not str(text).strip():
        raise EmptyInputError()

    tokens: List[Token] = []
    for verse, prose in split_verse_segments(str(text), strict_tags=not markup):
        tokens.extend(_split_words(prose, verse))
    return tokens


def tokenize_attempt(text: Optional[str]) -> List[Token]:
    """Tokenize a typed or transcribed attempt (only well-formed tags stripped)."""
    return tokenize_passage(text, markup=False)


def comparable_tokens(tokens: List[Token]) -> List[Token]:
    """Filter out tokens whose comparison key is empty (stray punctuation, markup)."""
    return [t for t in tokens if t.comparable]
