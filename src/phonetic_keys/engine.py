"""Top-level encoding and name comparison.

encode() runs language selection, transliteration, normalization and the
rule encoder for every candidate language. match() and similarity() compare
the union of keys two names produce.
"""

from __future__ import annotations

from typing import Iterable

from phonetic_keys.config import Configuration
from phonetic_keys.encoder import encode_with_rules
from phonetic_keys.errors import require_text
from phonetic_keys.logging import get_logger
from phonetic_keys.models import EncodeResult
from phonetic_keys.normalize import detection_form, preprocess
from phonetic_keys.selector import detect_languages, transliterate_for_language

logger = get_logger(__name__)


def encode(name: str, config: Configuration) -> list[EncodeResult]:
    """Encode a name into phonetic keys for each candidate language.

    Args:
        name: Raw name, in any supported script
        config: Engine configuration

    Returns:
        One result per language that produced keys, in detection rank order.
        Empty for empty or whitespace-only names.

    Raises:
        InvalidArgumentError: If name is not a string
    """
    require_text(name, "name")
    if not name.strip():
        return []

    text = detection_form(name)
    candidates = detect_languages(text, config)
    logger.debug(
        "Detected languages",
        extra={"languages": ",".join(c.language for c in candidates)},
    )

    results = []
    for candidate in candidates:
        rule_set = config.rule_set_for(candidate.language)
        if rule_set is None:
            logger.debug("No rule set, skipping", extra={"language": candidate.language})
            continue

        normalized = preprocess(transliterate_for_language(text, candidate.language, config))
        if not normalized:
            continue

        keys = encode_with_rules(normalized, rule_set, config)
        logger.debug(
            "Encoded",
            extra={"language": candidate.language, "text": normalized, "keys": len(keys)},
        )
        if keys:
            results.append(EncodeResult(language=candidate.language, keys=frozenset(keys)))

    return results


def key_set(results: Iterable[EncodeResult]) -> set[str]:
    """Union of keys across all languages."""
    keys: set[str] = set()
    for result in results:
        keys.update(result.keys)
    return keys


def match(name_a: str, name_b: str, config: Configuration) -> bool:
    """Check whether two names share at least one phonetic key.

    Raises:
        InvalidArgumentError: If either name is not a string
    """
    require_text(name_a, "name_a")
    require_text(name_b, "name_b")
    keys_a = key_set(encode(name_a, config))
    keys_b = key_set(encode(name_b, config))
    return not keys_a.isdisjoint(keys_b)


def similarity(name_a: str, name_b: str, config: Configuration) -> float:
    """Jaccard index of the key sets of two names.

    Returns:
        Shared keys over all keys, in [0, 1]; 0.0 when neither name has keys

    Raises:
        InvalidArgumentError: If either name is not a string
    """
    require_text(name_a, "name_a")
    require_text(name_b, "name_b")
    keys_a = key_set(encode(name_a, config))
    keys_b = key_set(encode(name_b, config))
    union = keys_a | keys_b
    if not union:
        return 0.0
    return len(keys_a & keys_b) / len(union)
