"""Key finalization helpers: merger folding and duplicate collapsing."""

from __future__ import annotations

from typing import Mapping, Optional

from phonetic_keys.config import Configuration, RuleType


def collapse_repeats(text: str) -> str:
    """Remove immediately repeated characters, keeping the first of each run.

    Example: "AABBA" -> "ABA"
    """
    if not text:
        return text
    out = [text[0]]
    for char in text[1:]:
        if char != out[-1]:
            out.append(char)
    return "".join(out)


def apply_merger_table(key: str, table: Optional[Mapping[str, str]]) -> str:
    """Fold multi-symbol sequences of a key into their merged symbols.

    Scans left to right; at each position the longest matching table entry
    wins. Characters not covered by any entry pass through unchanged.

    Args:
        key: Key to fold
        table: Symbol sequence -> replacement mapping

    Returns:
        Folded key
    """
    if not table:
        return key

    symbols = sorted(table, key=len, reverse=True)
    out = []
    i = 0
    while i < len(key):
        for symbol in symbols:
            if key.startswith(symbol, i):
                out.append(table[symbol])
                i += len(symbol)
                break
        else:
            out.append(key[i])
            i += 1
    return "".join(out)


def finalize_key(key: str, config: Configuration) -> str:
    """Apply end-of-search folding for the configured rule type."""
    if config.rule_type is RuleType.APPROX:
        key = apply_merger_table(key, config.merger_table)
        key = collapse_repeats(key)
    return key
