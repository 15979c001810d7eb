"""Language selection.

Scores candidate languages for a name from weighted heuristics, falling back
to the name-type defaults of the configuration when nothing fires.
"""

from __future__ import annotations

from phonetic_keys.config import Configuration
from phonetic_keys.logging import get_logger
from phonetic_keys.models import LanguageCandidate

logger = get_logger(__name__)


def detect_languages(text: str, config: Configuration) -> list[LanguageCandidate]:
    """Rank candidate languages for a name.

    Every heuristic whose predicate holds adds its weight to its language.
    Scores are normalized to sum to one, sorted highest first (ties keep
    evaluation order) and truncated to config.top_languages.

    Args:
        text: Case-folded, script-preserving name
        config: Engine configuration

    Returns:
        Candidates, best first; empty if neither a heuristic nor a default
        applies
    """
    scores: dict[str, float] = {}
    for heuristic in config.language_heuristics:
        if heuristic.predicate(text):
            scores[heuristic.language] = scores.get(heuristic.language, 0.0) + heuristic.weight

    if not scores:
        for language, weight in config.name_type_defaults.get(config.name_type, ()):
            scores[language] = scores.get(language, 0.0) + weight
        if scores:
            logger.debug(
                "No heuristic fired, using name-type defaults",
                extra={"name_type": config.name_type.value},
            )

    total = sum(scores.values())
    candidates = [
        LanguageCandidate(language=language, score=score / total if total else score)
        for language, score in scores.items()
    ]
    candidates.sort(key=lambda c: c.score, reverse=True)

    if config.top_languages is not None:
        candidates = candidates[: config.top_languages]
    return candidates


def transliterate_for_language(text: str, language: str, config: Configuration) -> str:
    """Transliterate text for a language, or return it unchanged."""
    transliterator = config.transliterator_for(language)
    if transliterator is None:
        return text
    return transliterator(text)
