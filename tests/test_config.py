"""Tests for configuration models and settings files."""

import json

import pytest
from pydantic import ValidationError

from phonetic_keys.config import (
    Configuration,
    NameType,
    RuleType,
    SettingsFile,
    load_overrides,
)
from phonetic_keys.errors import ConfigurationError
from phonetic_keys.languages import default_configuration
from phonetic_keys.languages.heuristics import APPROX_MERGER_TABLE
from phonetic_keys.languages.rules import rule
from phonetic_keys.models import LanguageHeuristic, LanguageRuleSet, Rule


class TestRule:
    """Tests for the Rule model."""

    def test_span_defaults_to_pattern_length(self):
        """Test consumed length defaults to the pattern."""
        assert Rule(pattern="sch", outputs=("X",), priority=1).span == 3

    def test_single_output_string(self):
        """Test a bare string becomes a one-element tuple."""
        assert Rule(pattern="a", outputs="A", priority=1).outputs == ("A",)

    def test_empty_pattern_rejected(self):
        """Test patterns must be non-empty."""
        with pytest.raises(ValidationError):
            Rule(pattern="", outputs=("A",), priority=1)

    def test_no_outputs_rejected(self):
        """Test at least one output is required."""
        with pytest.raises(ValidationError):
            Rule(pattern="a", outputs=(), priority=1)

    def test_zero_consumption_rejected(self):
        """Test rules must advance the cursor."""
        with pytest.raises(ValidationError):
            Rule(pattern="a", outputs=("A",), priority=1, consumes=0)

    def test_frozen(self):
        """Test rules cannot be modified."""
        built = rule("a", "A", 1)

        with pytest.raises(ValidationError):
            built.priority = 5

    def test_applies_checks_contexts(self):
        """Test applies() combines pattern and context checks."""
        built = rule("c", "S", 5, right=lambda right: right.startswith("e"))

        assert built.applies("ce", 0) is True
        assert built.applies("ca", 0) is False
        assert built.applies("ac", 0) is False


class TestLanguageHeuristic:
    """Tests for the LanguageHeuristic model."""

    def test_weight_must_be_positive(self):
        """Test non-positive weights are rejected."""
        with pytest.raises(ValidationError):
            LanguageHeuristic(language="english", weight=0, predicate=lambda s: True)

    def test_predicate_must_be_callable(self):
        """Test predicates are validated as callables."""
        with pytest.raises(ValidationError):
            LanguageHeuristic(language="english", weight=1.0, predicate="not callable")


class TestConfiguration:
    """Tests for the Configuration model."""

    def test_defaults(self):
        """Test default values."""
        config = Configuration()

        assert config.name_type is NameType.GENERIC
        assert config.rule_type is RuleType.APPROX
        assert config.frontier_cap == 1024
        assert config.top_languages is None
        assert config.merger_table is None
        assert config.name_type_defaults[NameType.GENERIC][0] == ("english", 1.0)

    def test_frozen(self):
        """Test configurations cannot be modified in place."""
        config = Configuration()

        with pytest.raises(ValidationError):
            config.max_expansions = 5

    def test_empty_merger_symbol_rejected(self):
        """Test merger symbols must be non-empty."""
        with pytest.raises(ValidationError):
            Configuration(merger_table={"": "A"})

    def test_rule_set_registered_under_its_language(self):
        """Test registry keys must match rule set languages."""
        rules = LanguageRuleSet(language="english", rules=(rule("a", "A", 1),))

        with pytest.raises(ValidationError):
            Configuration(language_rule_sets={"german": rules})

    def test_rule_set_for(self):
        """Test rule set lookup by language."""
        rules = LanguageRuleSet(language="english", rules=(rule("a", "A", 1),))
        config = Configuration(language_rule_sets={"english": rules})

        assert config.rule_set_for("english") is rules
        assert config.rule_set_for("german") is None

    def test_transliterator_for(self):
        """Test transliterator lookup by language."""
        config = Configuration(
            language_heuristics=(
                LanguageHeuristic(
                    language="russian",
                    weight=1.0,
                    predicate=lambda s: True,
                    transliterator=str.upper,
                ),
            )
        )

        assert config.transliterator_for("russian") is str.upper
        assert config.transliterator_for("english") is None

    def test_with_overrides(self):
        """Test overrides produce a new validated configuration."""
        config = Configuration()

        changed = config.with_overrides(rule_type="exact", max_expansions=10)

        assert changed.rule_type is RuleType.EXACT
        assert changed.max_expansions == 10
        assert config.rule_type is RuleType.APPROX

    def test_with_invalid_overrides(self):
        """Test invalid overrides raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            Configuration().with_overrides(frontier_cap=0)

        assert "frontier_cap" in str(exc_info.value)


class TestLoadOverrides:
    """Tests for load_overrides()."""

    def test_loads_set_keys_only(self, tmp_path):
        """Test only keys present in the file are returned."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"rule_type": "exact", "max_expansions": 50}))

        overrides = load_overrides(path)

        assert overrides == {"rule_type": RuleType.EXACT, "max_expansions": 50}

    def test_null_top_languages(self, tmp_path):
        """Test an explicit null removes the language cap."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"top_languages": None}))

        assert load_overrides(path) == {"top_languages": None}

    def test_disable_merger_table(self, tmp_path):
        """Test use_merger_table false removes the merger table."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"use_merger_table": False}))

        overrides = load_overrides(path)

        assert overrides == {"merger_table": None}
        assert default_configuration(**overrides).merger_table is None

    def test_enable_merger_table_keeps_default(self, tmp_path):
        """Test use_merger_table true leaves the bundled table in place."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"use_merger_table": True}))

        overrides = load_overrides(path)

        assert overrides == {}
        assert default_configuration(**overrides).merger_table == APPROX_MERGER_TABLE

    def test_missing_file(self, tmp_path):
        """Test a missing file is a configuration error."""
        with pytest.raises(ConfigurationError):
            load_overrides(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is a configuration error."""
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_overrides(path)

    def test_not_an_object(self, tmp_path):
        """Test a JSON array is rejected."""
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError):
            load_overrides(path)

    def test_unknown_key(self, tmp_path):
        """Test unknown settings are rejected."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_expansion": 10}))

        with pytest.raises(ConfigurationError):
            load_overrides(path)

    def test_invalid_value(self, tmp_path):
        """Test out-of-range values are rejected."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"rule_type": "fuzzy"}))

        with pytest.raises(ConfigurationError):
            load_overrides(path)

    def test_settings_file_model(self):
        """Test the settings model accepts enum values by name."""
        settings = SettingsFile(name_type="ashkenazi")

        assert settings.name_type is NameType.ASHKENAZI
