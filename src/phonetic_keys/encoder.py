"""Rule-based phonetic encoder.

Turns a normalized string into a set of phonetic keys by breadth-first search
over partial parses. Each frontier entry is a cursor into the text plus the
key built so far. At every position the applicable rules are narrowed by
priority, then by consumed length; all survivors and all of their outputs
branch. A counter of pushed branches bounds the search: once it passes
max_expansions, the frontier is pruned once to the entries closest to
finishing, and from then on each entry follows only its first branch, so the
remaining work is linear in the text length.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

from phonetic_keys.config import Configuration, RuleType
from phonetic_keys.folding import collapse_repeats, finalize_key
from phonetic_keys.logging import get_logger
from phonetic_keys.models import LanguageRuleSet, Rule

logger = get_logger(__name__)

VOWELS = frozenset("aeiouy")
NEUTRAL_VOWEL = "A"


@dataclass(frozen=True)
class SearchState:
    """One partial parse: how far into the text, and the key so far."""

    cursor: int
    key: str


def index_rules(rules: Iterable[Rule]) -> dict[str, list[Rule]]:
    """Group rules by the first character of their pattern."""
    index: dict[str, list[Rule]] = {}
    for rule in rules:
        index.setdefault(rule.pattern[0], []).append(rule)
    return index


def select_applicable_rules(text: str, cursor: int, rules: Sequence[Rule]) -> list[Rule]:
    """Find the rules to apply at a cursor position.

    A rule is a candidate if its pattern starts at the cursor and both of its
    context predicates hold. Candidates are narrowed to the highest priority,
    then to the longest span among those.

    Args:
        text: Normalized text
        cursor: Position to match at
        rules: Rules to consider

    Returns:
        Surviving rules; empty if nothing matches
    """
    matches = [rule for rule in rules if rule.applies(text, cursor)]
    if not matches:
        return []

    top_priority = max(rule.priority for rule in matches)
    matches = [rule for rule in matches if rule.priority == top_priority]
    longest = max(rule.span for rule in matches)
    return [rule for rule in matches if rule.span == longest]


def fallback_symbol(char: str, rule_type: RuleType) -> str:
    """Symbol contributed by a character no rule covers."""
    if rule_type is RuleType.EXACT and char in VOWELS:
        return NEUTRAL_VOWEL
    return ""


def prune_frontier(frontier: Iterable[SearchState], cap: int) -> deque[SearchState]:
    """Keep the cap entries closest to producing a key.

    Entries are ordered by cursor, furthest first, then by key length,
    shortest first. The sort is stable, so ties keep frontier order.
    """
    ordered = sorted(frontier, key=lambda state: (-state.cursor, len(state.key)))
    return deque(ordered[:cap])


def encode_with_rules(text: str, rule_set: LanguageRuleSet, config: Configuration) -> set[str]:
    """Encode normalized text with one language's rules.

    Args:
        text: Normalized (and, where needed, transliterated) text
        rule_set: Rules for the language
        config: Engine configuration

    Returns:
        Finalized keys of at least config.min_key_length characters
    """
    results: set[str] = set()
    index = index_rules(rule_set.rules)
    frontier: deque[SearchState] = deque([SearchState(0, "")])
    expansions = 0
    pruned = False

    while frontier:
        state = frontier.popleft()

        if state.cursor >= len(text):
            key = finalize_key(state.key, config)
            if len(key) >= config.min_key_length:
                results.add(key)
            continue

        char = text[state.cursor]
        if char.isspace():
            frontier.append(SearchState(state.cursor + 1, state.key))
            continue

        applicable = select_applicable_rules(text, state.cursor, index.get(char, ()))
        if not applicable:
            symbol = fallback_symbol(char, config.rule_type)
            frontier.append(SearchState(state.cursor + 1, state.key + symbol))
            continue

        branches = [(rule, output) for rule in applicable for output in rule.outputs]
        if pruned:
            # Past the limit every state follows a single branch to the end
            branches = branches[:1]

        for rule, output in branches:
            key = state.key + output
            if config.collapse_duplicates:
                key = collapse_repeats(key)
            frontier.append(SearchState(state.cursor + rule.span, key))

            expansions += 1
            if not pruned and expansions > config.max_expansions:
                logger.debug(
                    "Expansion limit reached, pruning frontier",
                    extra={
                        "language": rule_set.language,
                        "expansions": expansions,
                        "frontier": len(frontier),
                    },
                )
                pruned = True
                frontier = prune_frontier(frontier, config.frontier_cap)

    return results
