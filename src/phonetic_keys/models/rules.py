"""Rule and heuristic models.

A language is described purely by data: an ordered collection of rules, and
zero or more weighted heuristics that decide when the language is a
candidate for a given name. Context checks are small pure functions over
string slices.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Predicate = Callable[[str], bool]
Transliterator = Callable[[str], str]


class Rule(BaseModel):
    """A pattern-to-output mapping applied at a cursor position.

    The pattern must match literally at the cursor. When several rules match,
    only those with the highest priority survive, and among them only those
    consuming the most characters. Every survivor, and every one of its
    outputs, becomes a separate branch of the search.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(min_length=1)
    # Alternative renderings; "" means the pattern is silent
    outputs: tuple[str, ...] = Field(min_length=1)
    priority: int
    # Evaluated on the text before the cursor
    left_context: Optional[Predicate] = None
    # Evaluated on the text after the consumed span
    right_context: Optional[Predicate] = None
    # Characters to advance; defaults to len(pattern)
    consumes: Optional[int] = Field(default=None, ge=1)

    @field_validator("outputs", mode="before")
    @classmethod
    def _single_output(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        return value

    @property
    def span(self) -> int:
        """Number of characters this rule advances the cursor by."""
        if self.consumes is not None:
            return self.consumes
        return len(self.pattern)

    def applies(self, text: str, cursor: int) -> bool:
        """Check whether this rule matches at cursor, contexts included.

        Args:
            text: Normalized text being encoded
            cursor: Position to test

        Returns:
            True if the pattern and both context predicates hold
        """
        if not text.startswith(self.pattern, cursor):
            return False
        if self.left_context is not None and not self.left_context(text[:cursor]):
            return False
        if self.right_context is not None and not self.right_context(
            text[cursor + self.span :]
        ):
            return False
        return True


class LanguageRuleSet(BaseModel):
    """The rule table for one language."""

    model_config = ConfigDict(frozen=True)

    language: str
    rules: tuple[Rule, ...]


class LanguageHeuristic(BaseModel):
    """A weighted signal that a name belongs to a language.

    The transliterator, when present, converts script-specific text into the
    Latin-ish alphabet the language's rules are written against.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    weight: float = Field(gt=0)
    predicate: Predicate
    transliterator: Optional[Transliterator] = None
