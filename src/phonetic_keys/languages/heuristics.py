"""Language heuristics and the APPROX merger table.

Heuristic predicates run on the case-folded, script-preserving form of a
name, so they can look for Cyrillic, Hebrew and accented Latin letters.
"""

from __future__ import annotations

import re

from phonetic_keys.languages.transliteration import cyrillic_to_latin, hebrew_to_latin
from phonetic_keys.models import LanguageHeuristic, Predicate


def contains(pattern: str) -> Predicate:
    """Build a predicate that searches text for a regular expression."""
    compiled = re.compile(pattern)

    def predicate(text: str) -> bool:
        return compiled.search(text) is not None

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Build a predicate that holds when any of the given predicates does."""

    def predicate(text: str) -> bool:
        return any(p(text) for p in predicates)

    return predicate


HEURISTICS: tuple[LanguageHeuristic, ...] = (
    LanguageHeuristic(language="german", weight=1.2, predicate=contains(r"(sch|tsch|tz|z|ä|ö|ü|ß)")),
    LanguageHeuristic(language="english", weight=1.0, predicate=contains(r"[a-z]")),
    LanguageHeuristic(language="french", weight=1.0, predicate=contains(r"(eau|eux|ain$|ault$)")),
    LanguageHeuristic(language="spanish", weight=1.0, predicate=contains(r"(ll|ñ|guez$|ez$)")),
    LanguageHeuristic(language="portuguese", weight=1.0, predicate=contains(r"(ção|lh|nh|ão$)")),
    LanguageHeuristic(language="polish", weight=1.1, predicate=contains(r"(cz|sz|rz|wicz$|ska$|cki$)")),
    LanguageHeuristic(
        language="russian",
        weight=1.1,
        predicate=any_of(contains(r"[а-яё]"), contains(r"(zh|shch|ov$|eva$|sky$|ski$)")),
        transliterator=cyrillic_to_latin,
    ),
    LanguageHeuristic(
        language="hebrew",
        weight=1.2,
        predicate=contains(r"[\u0590-\u05ff]"),
        transliterator=hebrew_to_latin,
    ),
)

# Folds near-equivalent symbols together in APPROX mode
APPROX_MERGER_TABLE: dict[str, str] = {
    # Consonants
    "V": "F",
    "W": "F",
    "KV": "K",
    "KW": "K",
    "GE": "G",
    "GI": "G",
    "KE": "K",
    "KI": "K",
    "ZH": "Z",
    "SH": "X",
    "NY": "N",
    "LY": "L",
    "GN": "N",
    "C": "S",
    # Vowels and nasal vowels
    "AO": "A",
    "AN": "A",
    "ON": "A",
    "IN": "A",
    "OI": "A",
    "AI": "A",
    "EI": "A",
    "E~": "A",
    # Portuguese suffixes
    "SAO": "SA",
    "SOIS": "SS",
}
