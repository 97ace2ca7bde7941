"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata
from typing import List

# Combining marks dropped during comparison. The combining tilde (U+0303)
# is kept on purpose so that "ñ" never collapses into "n".
KEPT_COMBINING_MARKS = {"\u0303"}

# Typographic apostrophes folded into the ASCII one
APOSTROPHES = {"\u2019", "\u2018", "\u02bc", "`", "\u00b4"}

# Characters allowed inside a word besides letters and digits
INNER_WORD_PUNCTUATION = {"'", "-"}


def _is_word_char(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] in ("L", "N") or category == "Mn"


def is_punctuation(token: str) -> bool:
    """Check if token has no letters or digits at all.

    Args:
        token: The token to check

    Returns:
        True if token is made only of punctuation, symbols or spaces
    """
    return not any(_is_word_char(ch) for ch in token)


def strip_punctuation(token: str) -> str:
    """Strip leading/trailing punctuation and symbols, keeping case and accents.

    Example: "¡Amén!" -> "Amén", "faltará." -> "faltará"
    """
    start, end = 0, len(token)
    while start < end and not _is_word_char(token[start]):
        start += 1
    while end > start and not _is_word_char(token[end - 1]):
        end -= 1
    return token[start:end]


def _joins_word(chunk: str, i: int) -> bool:
    ch = chunk[i]
    if ch not in INNER_WORD_PUNCTUATION and ch not in APOSTROPHES:
        return False
    return i + 1 < len(chunk) and _is_word_char(chunk[i + 1])


def split_joined_words(chunk: str) -> List[str]:
    """Split a whitespace-free chunk where punctuation glues two words together.

    Apostrophes and hyphens between letters stay inside the word. Each piece
    keeps the punctuation that follows it, so the pieces concatenate back to
    the chunk.

    Example: "pastor;nada" -> ["pastor;", "nada"], "dijo:—Sea" -> ["dijo:—", "Sea"],
        "Beth-el," -> ["Beth-el,"]
    """
    starts: List[int] = []
    in_word = False
    for i, ch in enumerate(chunk):
        if _is_word_char(ch):
            if not in_word:
                starts.append(i)
                in_word = True
        elif not (in_word and _joins_word(chunk, i)):
            in_word = False
    if len(starts) <= 1:
        return [chunk]
    bounds = [0] + starts[1:] + [len(chunk)]
    return [chunk[a:b] for a, b in zip(bounds, bounds[1:])]


def _strip_diacritics(token: str) -> str:
    decomposed = unicodedata.normalize("NFD", token)
    kept = "".join(
        ch for ch in decomposed
        if unicodedata.category(ch) != "Mn" or ch in KEPT_COMBINING_MARKS
    )
    return unicodedata.normalize("NFC", kept)


def normalize_token(token: str) -> str:
    """Normalize a token into its comparison key.

    Lowercases, removes accents (but not the tilde of "ñ"), strips
    surrounding punctuation and drops inner punctuation other than
    apostrophes and hyphens.

    Args:
        token: The token string to normalize (may carry attached punctuation)

    Returns:
        Normalized key, or "" when nothing comparable is left
    """
    if not token:
        return ""
    for apostrophe in APOSTROPHES:
        token = token.replace(apostrophe, "'")
    token = _strip_diacritics(token.casefold())
    token = strip_punctuation(token)
    # drop inner punctuation except apostrophes and hyphens
    token = "".join(
        ch for ch in token
        if _is_word_char(ch) or ch in INNER_WORD_PUNCTUATION
    )
    return re.sub(r"(['-])\1+", r"\1", token)
