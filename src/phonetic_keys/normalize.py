"""Raw-text normalization.

Two forms of a name are used by the engine: a script-preserving form for
language detection and transliteration, and a filtered ASCII-ish form that
rule tables are written against.
"""

from __future__ import annotations

import re
import unicodedata

_NON_LETTERS = re.compile(r"[^a-z\s]+")
_WHITESPACE = re.compile(r"\s+")

# Spelled out before mark stripping would reduce the umlauts to bare vowels
_LETTER_EXPANSIONS = {
    "ß": "ss",
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
}


def detection_form(raw: str) -> str:
    """Lowercase a name without leaving its script.

    Cyrillic, Hebrew and accented Latin letters are kept so that script
    sensitive heuristics and transliterators still see them.
    """
    return unicodedata.normalize("NFC", raw).lower()


def strip_marks(text: str) -> str:
    """Decompose text and drop combining diacritical marks (U+0300-U+036F)."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not "\u0300" <= c <= "\u036f")


def preprocess(raw: str) -> str:
    """Normalize text for the rule engine.

    Lowercases, strips diacritics, replaces every run of characters outside
    the rule alphabet with a single space, and collapses whitespace. ß and
    the umlauts are spelled out first (ä becomes ae rather than a).

    Args:
        raw: Text to normalize (usually already transliterated)

    Returns:
        Normalized text, possibly empty
    """
    text = unicodedata.normalize("NFC", raw.lower())
    for letter, expansion in _LETTER_EXPANSIONS.items():
        text = text.replace(letter, expansion)
    text = _NON_LETTERS.sub(" ", strip_marks(text))
    return _WHITESPACE.sub(" ", text).strip()
