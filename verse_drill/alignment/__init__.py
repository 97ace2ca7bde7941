"""Alignment utilities for matching reference passages to attempts."""
from .aligner import align_texts, diff_tokens
from .normalizer import is_punctuation, normalize_token, split_joined_words, strip_punctuation
from .sanitize import sanitize_verse_text, split_verse_segments, strip_verse_numbers
from .tokenizer import comparable_tokens, make_token, tokenize_attempt, tokenize_passage

__all__ = [
    "align_texts",
    "diff_tokens",
    "is_punctuation",
    "normalize_token",
    "split_joined_words",
    "strip_punctuation",
    "sanitize_verse_text",
    "split_verse_segments",
    "strip_verse_numbers",
    "comparable_tokens",
    "make_token",
    "tokenize_attempt",
    "tokenize_passage",
]
