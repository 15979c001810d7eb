"""Engine configuration for phonetic-keys.

A Configuration is an immutable value passed explicitly into every call. It
carries the tuning knobs of the search together with the language registry
(rule sets, heuristics, merger table). Loading scalar settings from a JSON
file is supported for the CLI; rule tables are always assembled in code.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from phonetic_keys.errors import ConfigurationError
from phonetic_keys.models.rules import LanguageHeuristic, LanguageRuleSet, Transliterator


class NameType(str, Enum):
    """Cultural pool used to pick languages when no heuristic fires."""

    GENERIC = "generic"
    ASHKENAZI = "ashkenazi"
    SEPHARDIC = "sephardic"


class RuleType(str, Enum):
    """Rule-application strictness.

    APPROX folds keys through the merger table, collapses repeated symbols
    and drops every unmatched character. EXACT keeps keys as produced and
    maps unmatched vowels to a neutral symbol.
    """

    EXACT = "exact"
    APPROX = "approx"


DEFAULT_NAME_TYPE_LANGUAGES: dict[NameType, tuple[tuple[str, float], ...]] = {
    NameType.GENERIC: (("english", 1.0), ("german", 1.0), ("french", 1.0)),
    NameType.ASHKENAZI: (
        ("yiddish", 2.0),
        ("german", 1.0),
        ("polish", 1.0),
        ("russian", 1.0),
        ("hebrew", 1.0),
    ),
    NameType.SEPHARDIC: (("spanish", 2.0), ("portuguese", 1.0), ("hebrew", 1.0)),
}


class Configuration(BaseModel):
    """Complete, read-only input to every encode/match/similarity call."""

    model_config = ConfigDict(frozen=True)

    name_type: NameType = NameType.GENERIC
    rule_type: RuleType = RuleType.APPROX
    # Branch expansions allowed before the frontier starts being pruned
    max_expansions: int = Field(default=20_000, ge=0)
    # Keys shorter than this are discarded
    min_key_length: int = Field(default=1, ge=0)
    # Collapse adjacent repeated symbols while searching
    collapse_duplicates: bool = True
    # Multi-symbol folding map, only consulted in APPROX mode
    merger_table: Optional[dict[str, str]] = None
    # Cap on candidate languages carried into encoding (None = no cap)
    top_languages: Optional[int] = Field(default=None, ge=1)
    # Frontier size kept after pruning
    frontier_cap: int = Field(default=1024, ge=1)
    language_heuristics: tuple[LanguageHeuristic, ...] = ()
    language_rule_sets: dict[str, LanguageRuleSet] = Field(default_factory=dict)
    name_type_defaults: dict[NameType, tuple[tuple[str, float], ...]] = Field(
        default_factory=lambda: dict(DEFAULT_NAME_TYPE_LANGUAGES)
    )

    @field_validator("merger_table")
    @classmethod
    def _non_empty_symbols(cls, table: Optional[dict[str, str]]) -> Optional[dict[str, str]]:
        if table and any(not symbol for symbol in table):
            raise ValueError("merger table symbols must be non-empty")
        return table

    @model_validator(mode="after")
    def _registry_keys_match(self) -> "Configuration":
        for language, rule_set in self.language_rule_sets.items():
            if rule_set.language != language:
                raise ValueError(
                    f"rule set for '{rule_set.language}' registered under '{language}'"
                )
        return self

    def rule_set_for(self, language: str) -> Optional[LanguageRuleSet]:
        """Look up the rule set registered for a language."""
        return self.language_rule_sets.get(language)

    def transliterator_for(self, language: str) -> Optional[Transliterator]:
        """Find the transliterator registered for a language, if any.

        The first heuristic for the language that carries a transliterator
        wins.
        """
        for heuristic in self.language_heuristics:
            if heuristic.language == language and heuristic.transliterator is not None:
                return heuristic.transliterator
        return None

    def with_overrides(self, **changes: Any) -> "Configuration":
        """Return a validated copy with some fields replaced.

        Args:
            **changes: Field values to replace

        Returns:
            New Configuration

        Raises:
            ConfigurationError: If the changes produce an invalid configuration
        """
        try:
            return type(self).model_validate({**dict(self), **changes})
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid configuration override",
                context={"fields": ", ".join(sorted(changes)), "errors": e.error_count()},
            ) from e


class SettingsFile(BaseModel):
    """Scalar settings that may be supplied from a JSON file."""

    model_config = ConfigDict(extra="forbid")

    name_type: Optional[NameType] = None
    rule_type: Optional[RuleType] = None
    max_expansions: Optional[int] = Field(default=None, ge=0)
    min_key_length: Optional[int] = Field(default=None, ge=0)
    collapse_duplicates: Optional[bool] = None
    top_languages: Optional[int] = Field(default=None, ge=1)
    frontier_cap: Optional[int] = Field(default=None, ge=1)
    use_merger_table: Optional[bool] = None


def load_overrides(path: Path) -> dict[str, Any]:
    """Load configuration overrides from a JSON file.

    Only the keys present in the file are returned, ready to be passed to
    Configuration.with_overrides(). "use_merger_table": false becomes
    merger_table=None; true keeps whatever table the configuration has.

    Args:
        path: Path to the JSON settings file

    Returns:
        Mapping of field name to validated value

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise ConfigurationError("Settings file not found", context={"path": str(path)})

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Settings file is not valid JSON: {e.msg}",
            context={"path": str(path), "line": e.lineno},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Settings file must contain a JSON object", context={"path": str(path)}
        )

    try:
        settings = SettingsFile(**data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid settings file",
            context={"path": str(path), "errors": e.error_count()},
        ) from e

    overrides = settings.model_dump(exclude_unset=True)
    if overrides.pop("use_merger_table", None) is False:
        overrides["merger_table"] = None
    return overrides
