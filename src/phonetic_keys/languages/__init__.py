"""Bundled language configuration.

Assembles rule tables for English, German, French, Spanish, Portuguese,
Polish, Russian and Hebrew together with their heuristics, transliterators
and the APPROX merger table into a ready-to-use Configuration.
"""

from __future__ import annotations

from typing import Any

from phonetic_keys.config import Configuration, NameType, RuleType
from phonetic_keys.languages.heuristics import APPROX_MERGER_TABLE, HEURISTICS
from phonetic_keys.languages.rules import RULE_SETS, rule
from phonetic_keys.languages.transliteration import cyrillic_to_latin, hebrew_to_latin

SUPPORTED_LANGUAGES = tuple(RULE_SETS)


def default_configuration(**overrides: Any) -> Configuration:
    """Build the bundled configuration.

    Args:
        **overrides: Configuration fields to replace (e.g. rule_type)

    Returns:
        Configuration with every bundled language registered

    Raises:
        ConfigurationError: If an override is invalid
    """
    config = Configuration(
        name_type=NameType.GENERIC,
        rule_type=RuleType.APPROX,
        max_expansions=20_000,
        min_key_length=1,
        collapse_duplicates=True,
        merger_table=APPROX_MERGER_TABLE,
        top_languages=5,
        language_heuristics=HEURISTICS,
        language_rule_sets=RULE_SETS,
    )
    if overrides:
        config = config.with_overrides(**overrides)
    return config


__all__ = [
    "SUPPORTED_LANGUAGES",
    "default_configuration",
    "rule",
    "cyrillic_to_latin",
    "hebrew_to_latin",
]
