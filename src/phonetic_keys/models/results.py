"""Result models produced by language detection and encoding."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageCandidate:
    """A language selected for a name, with its normalized score."""

    language: str
    score: float


@dataclass(frozen=True)
class EncodeResult:
    """Phonetic keys produced for one language.

    Keys are unordered and deduplicated.
    """

    language: str
    keys: frozenset[str]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"language": self.language, "keys": sorted(self.keys)}
