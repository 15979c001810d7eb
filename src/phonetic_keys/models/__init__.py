"""Data models for phonetic-keys.

Rule tables and heuristics are Pydantic models (read-only configuration data);
encoding results are plain dataclasses.
"""

from __future__ import annotations

from phonetic_keys.models.results import EncodeResult, LanguageCandidate
from phonetic_keys.models.rules import (
    LanguageHeuristic,
    LanguageRuleSet,
    Predicate,
    Rule,
    Transliterator,
)

__all__ = [
    # Rule tables
    "Rule",
    "LanguageRuleSet",
    "LanguageHeuristic",
    "Predicate",
    "Transliterator",
    # Results
    "EncodeResult",
    "LanguageCandidate",
]
