"""Bundled rule tables.

Patterns are written against the output of preprocess(): lowercase a-z with
marks stripped, so accented spellings are matched through their base letters
(Portuguese "ção" is matched as "cao").
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from phonetic_keys.languages.context import (
    at_word_end,
    at_word_start,
    left_ends_with,
    right_starts_with,
)
from phonetic_keys.models import LanguageRuleSet, Predicate, Rule

VOWEL_LETTERS = "aeiou"


def rule(
    pattern: str,
    outputs: Union[str, Sequence[str]],
    priority: int,
    left: Optional[Predicate] = None,
    right: Optional[Predicate] = None,
    consumes: Optional[int] = None,
) -> Rule:
    """Shorthand constructor used by the tables below."""
    return Rule(
        pattern=pattern,
        outputs=outputs if isinstance(outputs, str) else tuple(outputs),
        priority=priority,
        left_context=left,
        right_context=right,
        consumes=consumes,
    )


def singles(letters: Sequence[str], silent: str = "") -> list[Rule]:
    """Lowest-priority one-letter rules mapping a letter to its capital.

    Letters listed in silent map to the empty output.
    """
    return [rule(c, "" if c in silent else c.upper(), 1) for c in letters]


def vowels(letters: Sequence[str] = VOWEL_LETTERS) -> list[Rule]:
    """Lowest-priority rules mapping every vowel to the neutral "A"."""
    return [rule(v, "A", 1) for v in letters]


def soft_c(priority: int = 8) -> list[Rule]:
    """c before e/i reads as S, otherwise as K."""
    return [
        rule("c", "S", priority, right=right_starts_with("e")),
        rule("c", "S", priority, right=right_starts_with("i")),
        rule("c", "K", priority - 1),
    ]


ENGLISH = LanguageRuleSet(
    language="english",
    rules=(
        rule("ough", ["AF", "OF", "AU"], 10),
        rule("eigh", "EY", 10),
        rule("shw", "XV", 9),
        rule("ph", "F", 9),
        rule("gh", "", 8),
        rule("ch", "X", 8),
        *soft_c(),
        rule("kh", "H", 8),
        rule("sh", "X", 8),
        rule("th", "T", 8),
        rule("wr", "R", 7, left=at_word_start),
        rule("kn", "N", 7, left=at_word_start),
        rule("tz", "S", 7),
        rule("en", ["AN", "N"], 7, right=at_word_end),
        rule("qu", "KW", 6),
        *singles("bdgkptmnlrfsxvzjwyh"),
        # y is also a vowel, so it branches both ways
        *vowels("aeiouy"),
    ),
)

GERMAN = LanguageRuleSet(
    language="german",
    rules=(
        rule("schm", "SM", 11),
        rule("schw", "XV", 11),
        rule("sch", "X", 10),
        rule("tsch", "X", 10),
        rule("dt", "T", 9),
        rule("ch", "X", 9, left=left_ends_with("s")),
        rule("ch", "X", 9, left=left_ends_with("t")),
        rule("ch", "H", 8),
        rule("ph", "F", 8),
        rule("tz", "S", 8),
        rule("sp", "SP", 7, left=at_word_start),
        rule("st", "ST", 7, left=at_word_start),
        rule("v", "F", 7),
        rule("w", "V", 7),
        rule("z", "S", 7),
        rule("th", "T", 6),
        rule("qu", "KV", 6),
        *singles("bdgkptmnlrfsxjch"),
        *vowels("aeiouy"),
    ),
)

FRENCH = LanguageRuleSet(
    language="french",
    rules=(
        rule("eaux", "O", 10),
        rule("eau", "O", 10),
        rule("au", "O", 9),
        rule("aux", "O", 9),
        rule("oi", "WA", 9),
        rule("ou", "U", 9),
        rule("an", "AN", 9),
        rule("en", "AN", 9),
        rule("on", "ON", 9),
        rule("in", "IN", 9),
        rule("ain", "IN", 9),
        rule("gn", "GN", 8),
        rule("ph", "F", 8),
        rule("ch", "X", 8),
        rule("th", "T", 7),
        # Final s and t are silent
        rule("s", "", 2, right=at_word_end),
        rule("t", "", 2, right=at_word_end),
        *singles("bdgkpmnlrfvzjxchwy", silent="h"),
        *vowels("aeiouy"),
    ),
)

SPANISH = LanguageRuleSet(
    language="spanish",
    rules=(
        *soft_c(),
        rule("ll", "Y", 10),
        rule("ch", "X", 9),
        rule("j", "X", 9),
        rule("ge", "X", 9),
        rule("gi", "X", 9),
        rule("gue", "GE", 8),
        rule("gui", "GI", 8),
        rule("que", "KE", 8),
        rule("qui", "KI", 8),
        rule("v", "B", 7),
        rule("z", "S", 7),
        rule("h", "", 7),
        *singles("bdgkptmnlrfsxyw"),
        *vowels(),
    ),
)

PORTUGUESE = LanguageRuleSet(
    language="portuguese",
    rules=(
        *soft_c(),
        rule("coes", "SOIS", 10),
        rule("cao", "SAO", 10),
        rule("nh", ["NY", "N"], 9),
        rule("lh", "LY", 9),
        rule("ch", "X", 9),
        rule("j", "ZH", 9),
        rule("ge", "ZH", 9),
        rule("gi", "ZH", 9),
        rule("ao", "AO", 9),
        rule("aes", "AES", 9),
        # x has several readings; all of them branch
        rule("x", ["SH", "S", "Z", "KS"], 8),
        rule("gue", "GE", 8),
        rule("gui", "GI", 8),
        rule("que", "KE", 8),
        rule("qui", "KI", 8),
        rule("em", "E~", 7, right=at_word_end),
        rule("ens", "E~", 7, right=at_word_end),
        *singles("bdgkptmnlrfsvzwyh", silent="h"),
        *vowels(),
    ),
)

POLISH = LanguageRuleSet(
    language="polish",
    rules=(
        rule("szcz", "X", 10),
        rule("cz", "X", 9),
        rule("sz", "X", 9),
        rule("rz", "Z", 9),
        rule("ch", "H", 8),
        rule("w", "V", 7),
        *singles("bdgkptmnlrfszjyh", silent="h"),
        *vowels(),
    ),
)

RUSSIAN = LanguageRuleSet(
    language="russian",
    rules=(
        rule("shch", "X", 10),
        rule("zh", "Z", 9),
        rule("sh", "X", 9),
        rule("ch", "X", 9),
        rule("kh", "H", 9),
        rule("ts", "C", 8),
        # Surname endings
        rule("sky", "SKI", 6, right=at_word_end),
        rule("ski", "SKI", 6, right=at_word_end),
        rule("ov", "OF", 6, right=at_word_end),
        rule("ova", "OFA", 6, right=at_word_end),
        rule("ev", "EF", 6, right=at_word_end),
        rule("eva", "EFA", 6, right=at_word_end),
        *singles("bdgkptmnlrfszvjyh", silent="h"),
        *vowels(),
    ),
)

HEBREW = LanguageRuleSet(
    language="hebrew",
    rules=(
        rule("tz", "C", 9),
        rule("ts", "C", 9),
        rule("kh", "H", 9),
        rule("ch", "H", 9),
        rule("sh", "X", 9),
        rule("zh", "Z", 9),
        rule("th", "T", 7),
        *singles("bdgkptmnlrfszvjwyh"),
        *vowels("aeiouy"),
    ),
)

RULE_SETS: dict[str, LanguageRuleSet] = {
    rule_set.language: rule_set
    for rule_set in (ENGLISH, GERMAN, FRENCH, SPANISH, PORTUGUESE, POLISH, RUSSIAN, HEBREW)
}
