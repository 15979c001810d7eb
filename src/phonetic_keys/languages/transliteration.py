"""Script transliterators.

Lightweight character tables that bring Cyrillic and Hebrew names into the
Latin alphabet the rule tables are written against. Input is expected to be
lowercased already.
"""

from __future__ import annotations

import re

CYRILLIC_TO_LATIN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ы": "y", "э": "e", "ю": "yu", "я": "ya", "ь": "", "ъ": "",
}

# Letters followed by a geresh are handled before single letters
HEBREW_GERESH_LETTERS = {
    "ג׳": "j",
    "ז׳": "zh",
    "צ׳": "ch",
}

HEBREW_TO_LATIN = {
    "א": "a", "ב": "b", "ג": "g", "ד": "d", "ה": "h", "ו": "v", "ז": "z",
    "ח": "kh", "ט": "t", "י": "y", "כ": "kh", "ך": "kh", "ל": "l", "מ": "m",
    "ם": "m", "נ": "n", "ן": "n", "ס": "s", "ע": "a", "פ": "p", "ף": "f",
    "צ": "ts", "ץ": "ts", "ק": "k", "ר": "r", "ש": "sh", "ת": "t",
}

_NON_LATIN = re.compile(r"[^a-z\s]")
# Consonant + v + i/y at word end reads as "-evi" (לוי -> levi)
_FINAL_VI = re.compile(r"([bcdfghjklmnpqrstvwxz])v([iy])\b")


def cyrillic_to_latin(text: str) -> str:
    """Romanize Cyrillic text; characters left outside a-z are dropped."""
    romanized = "".join(CYRILLIC_TO_LATIN.get(c, c) for c in text.lower())
    return _NON_LATIN.sub("", romanized)


def hebrew_to_latin(text: str) -> str:
    """Romanize Hebrew text; non-Hebrew characters pass through."""
    for letters, latin in HEBREW_GERESH_LETTERS.items():
        # An ASCII apostrophe often stands in for the geresh
        text = text.replace(letters, latin).replace(letters[0] + "'", latin)
    text = text.replace("׳", "").replace("״", "")
    romanized = "".join(HEBREW_TO_LATIN.get(c, c) for c in text)
    return _FINAL_VI.sub(r"\1evi", romanized)
