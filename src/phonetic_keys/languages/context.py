"""Context predicate builders for rule tables.

Left predicates receive the text before the cursor; right predicates receive
the text after the consumed span. All are pure.
"""

from __future__ import annotations

from phonetic_keys.models import Predicate


def at_word_start(left: str) -> bool:
    """True at the start of the text or right after whitespace."""
    return not left or left[-1].isspace()


def at_word_end(right: str) -> bool:
    """True at the end of the text or right before whitespace."""
    return not right or right[0].isspace()


def left_ends_with(suffix: str) -> Predicate:
    """Build a left predicate requiring the preceding text to end with suffix."""

    def predicate(left: str) -> bool:
        return left.endswith(suffix)

    return predicate


def right_starts_with(prefix: str) -> Predicate:
    """Build a right predicate requiring the following text to start with prefix."""

    def predicate(right: str) -> bool:
        return right.startswith(prefix)

    return predicate
