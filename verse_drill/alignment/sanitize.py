"""Cleanup of verse markup before tokenization.

Passage text arrives with HTML-ish artifacts: spaced entities such as
``& nbsp ;``, stray tags, and inconsistent ``<sup>`` verse-number markers.
The helpers here are deterministic regex passes, not an HTML parser.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

# Canonical verse-number marker after sanitizing: <sup>N</sup>
VERSE_MARKER_RE = re.compile(r"<sup>\s*(\d+)\s*</sup>(?:\s*&\s*nbsp\s*;| )?", re.IGNORECASE)

_ENTITIES = (
    (re.compile(r"&\s*amp\s*;", re.IGNORECASE), "&"),
    (re.compile(r"&\s*quot\s*;", re.IGNORECASE), '"'),
    (re.compile(r"&\s*#0*39\s*;|&\s*apos\s*;", re.IGNORECASE), "'"),
)
_NBSP_RE = re.compile(r"&\s*nbsp\s*;", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[^>]+>")
# Well-formed tags only: a name right after "<", so "a < b c d > e" is left alone
_HTML_TAG_RE = re.compile(r"</?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?>")
_LINE_BREAK_RE = re.compile(r"\s*/n\s*", re.IGNORECASE)


VerseSegment = Tuple[Optional[int], str]


def decode_entities_loose(text: str) -> str:
    """Decode the handful of entities found in verse text, spaced variants included."""
    text = _NBSP_RE.sub(" ", text)
    for pattern, replacement in _ENTITIES:
        text = pattern.sub(replacement, text)
    text = re.sub(r"&\s*lt\s*;", "<", text, flags=re.IGNORECASE)
    return re.sub(r"&\s*gt\s*;", ">", text, flags=re.IGNORECASE)


def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _clean_prose(text: str, tag_re: re.Pattern[str] = _ANY_TAG_RE) -> str:
    # tags go before entities are decoded: "&lt;b&gt;" is text, not a tag
    text = tag_re.sub(" ", text)
    text = decode_entities_loose(text)
    text = _LINE_BREAK_RE.sub(" ", text)
    return _collapse(text.replace("_", ""))


def split_verse_segments(raw: str, strict_tags: bool = False) -> List[VerseSegment]:
    """Split passage markup into (verse, prose) segments.

    Verse markers are located on the raw markup, before any entity is
    decoded, so an escaped ``&lt;sup&gt;7&lt;/sup&gt;`` stays literal text.
    The first segment holds the prose before any marker (verse None).

    Example: "<sup>1</sup>&nbsp;En el <b>principio</b>" ->
        [(None, ""), (1, "En el principio")]

    Args:
        raw: Raw passage text (may contain tags, entities, verse markers)
        strict_tags: Strip only well-formed tags (for user-typed attempts)

    Returns:
        List of (verse number or None, cleaned prose) tuples ([] for empty input)
    """
    if not raw:
        return []
    tag_re = _HTML_TAG_RE if strict_tags else _ANY_TAG_RE
    text = str(raw).replace("\u00a0", " ")
    segments: List[VerseSegment] = []
    verse: Optional[int] = None
    last = 0
    for m in VERSE_MARKER_RE.finditer(text):
        segments.append((verse, _clean_prose(text[last:m.start()], tag_re)))
        verse = int(m.group(1))
        last = m.end()
    segments.append((verse, _clean_prose(text[last:], tag_re)))
    return segments


def sanitize_verse_text(raw: str, preserve_sup: bool = True) -> str:
    """Normalize passage markup to plain prose plus canonical verse markers.

    Args:
        raw: Raw passage text (may contain tags, entities, verse markers)
        preserve_sup: Keep ``<sup>N</sup>`` verse markers (canonicalized)

    Returns:
        Sanitized text with collapsed whitespace ("" for empty input)
    """
    parts: List[str] = []
    for index, (verse, prose) in enumerate(split_verse_segments(raw)):
        if index and preserve_sup:
            parts.append(f"<sup>{verse}</sup>")
        parts.append(prose)
    return _collapse(" ".join(parts))


def strip_verse_numbers(raw: str) -> str:
    """Remove verse markers (numbers included) and all other markup."""
    return sanitize_verse_text(raw, preserve_sup=False)
