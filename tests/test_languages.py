"""Tests for the bundled language configuration."""

import pytest

from phonetic_keys.config import RuleType
from phonetic_keys.encoder import encode_with_rules
from phonetic_keys.errors import ConfigurationError
from phonetic_keys.languages import SUPPORTED_LANGUAGES, default_configuration
from phonetic_keys.languages.context import (
    at_word_end,
    at_word_start,
    left_ends_with,
    right_starts_with,
)
from phonetic_keys.languages.heuristics import APPROX_MERGER_TABLE, HEURISTICS
from phonetic_keys.languages.rules import GERMAN, PORTUGUESE, RULE_SETS, rule
from phonetic_keys.languages.transliteration import cyrillic_to_latin, hebrew_to_latin
from phonetic_keys.normalize import detection_form, preprocess
from phonetic_keys.selector import detect_languages


class TestContextPredicates:
    """Tests for context predicate builders."""

    def test_at_word_start(self):
        """Test word-start detection on the left context."""
        assert at_word_start("") is True
        assert at_word_start("jean ") is True
        assert at_word_start("jean") is False

    def test_at_word_end(self):
        """Test word-end detection on the right context."""
        assert at_word_end("") is True
        assert at_word_end(" luc") is True
        assert at_word_end("luc") is False

    def test_left_ends_with(self):
        """Test suffix check on the left context."""
        predicate = left_ends_with("s")

        assert predicate("bus") is True
        assert predicate("but") is False

    def test_right_starts_with(self):
        """Test prefix check on the right context."""
        predicate = right_starts_with("e")

        assert predicate("el") is True
        assert predicate("al") is False


class TestTransliteration:
    """Tests for script transliterators."""

    def test_cyrillic(self):
        """Test basic Cyrillic romanization."""
        assert cyrillic_to_latin("новак") == "novak"
        assert cyrillic_to_latin("щука") == "shchuka"

    def test_cyrillic_signs_dropped(self):
        """Test soft and hard signs disappear."""
        assert cyrillic_to_latin("игорь") == "igor"

    def test_cyrillic_uppercase(self):
        """Test uppercase letters are folded before mapping."""
        assert cyrillic_to_latin("Новак") == "novak"

    def test_hebrew(self):
        """Test basic Hebrew romanization."""
        assert hebrew_to_latin("כהן") == "khhn"

    def test_hebrew_final_vi(self):
        """Test a word-final vav-yod reads as -evi."""
        assert hebrew_to_latin("לוי") == "levi"

    def test_hebrew_geresh(self):
        """Test letters with a geresh, or an apostrophe standing in for one."""
        assert hebrew_to_latin("ג׳") == "j"
        assert hebrew_to_latin("ג'") == "j"

    def test_latin_passes_through_hebrew(self):
        """Test non-Hebrew text is left alone."""
        assert hebrew_to_latin("smith") == "smith"


class TestNormalize:
    """Tests for text normalization."""

    def test_preprocess_strips_marks_and_case(self):
        """Test accents and case are removed."""
        assert preprocess("García") == "garcia"

    def test_preprocess_punctuation_becomes_space(self):
        """Test non-letters split words."""
        assert preprocess("O'Connor") == "o connor"
        assert preprocess("Jean-Luc  Picard") == "jean luc picard"

    def test_preprocess_sharp_s(self):
        """Test ß is spelled out."""
        assert preprocess("Strauß") == "strauss"

    def test_preprocess_umlauts_spelled_out(self):
        """Test umlauts expand to vowel plus e instead of losing their mark."""
        assert preprocess("Müller") == "mueller"
        assert preprocess("Schäfer Köhler") == "schaefer koehler"

    def test_preprocess_decomposed_umlaut(self):
        """Test a decomposed umlaut is composed before expansion."""
        assert preprocess("Mu\u0308ller") == "mueller"

    def test_preprocess_non_latin_removed(self):
        """Test scripts outside the rule alphabet are dropped."""
        assert preprocess("Новак") == ""

    def test_detection_form_keeps_script(self):
        """Test the detection form only folds case."""
        assert detection_form("Новак") == "новак"
        assert detection_form("García") == "garcía"


class TestHeuristics:
    """Tests for the bundled heuristics."""

    def _languages(self, name):
        return [c.language for c in detect_languages(detection_form(name), default_configuration())]

    def test_german(self):
        """Test German spellings score German first."""
        assert self._languages("Schmidt") == ["german", "english"]

    def test_cyrillic_is_russian(self):
        """Test Cyrillic script selects Russian only."""
        assert self._languages("Новак") == ["russian"]

    def test_hebrew_script(self):
        """Test Hebrew script selects Hebrew only."""
        assert self._languages("לוי") == ["hebrew"]

    def test_every_heuristic_has_rules(self):
        """Test each heuristic language is backed by a rule set."""
        assert {h.language for h in HEURISTICS} <= set(RULE_SETS)


class TestRuleTables:
    """Tests for the bundled rule tables."""

    def test_rule_builder(self):
        """Test the rule shorthand."""
        built = rule("ab", "X", 3)

        assert built.outputs == ("X",)
        assert built.span == 2
        assert rule("ab", ["X", "Y"], 3, consumes=1).span == 1

    def test_supported_languages(self):
        """Test all bundled languages are registered."""
        assert set(SUPPORTED_LANGUAGES) == {
            "english",
            "german",
            "french",
            "spanish",
            "portuguese",
            "polish",
            "russian",
            "hebrew",
        }

    def test_german_schmidt(self):
        """Test the German cluster rules."""
        config = default_configuration()

        assert encode_with_rules("schmidt", GERMAN, config) == {"SMAT"}

    def test_portuguese_x_branches(self):
        """Test an ambiguous letter yields every reading."""
        config = default_configuration(rule_type=RuleType.EXACT)

        assert encode_with_rules("x", PORTUGUESE, config) == {"SH", "S", "Z", "KS"}

    def test_portuguese_x_folded(self):
        """Test APPROX folds the readings through the merger table."""
        config = default_configuration()

        assert encode_with_rules("x", PORTUGUESE, config) == {"X", "S", "Z", "KS"}


class TestDefaultConfiguration:
    """Tests for default_configuration()."""

    def test_defaults(self):
        """Test the bundled settings."""
        config = default_configuration()

        assert config.rule_type is RuleType.APPROX
        assert config.max_expansions == 20_000
        assert config.min_key_length == 1
        assert config.collapse_duplicates is True
        assert config.top_languages == 5
        assert config.merger_table == APPROX_MERGER_TABLE

    def test_overrides(self):
        """Test fields can be replaced."""
        config = default_configuration(rule_type=RuleType.EXACT, top_languages=2)

        assert config.rule_type is RuleType.EXACT
        assert config.top_languages == 2
        assert set(config.language_rule_sets) == set(SUPPORTED_LANGUAGES)

    def test_invalid_override(self):
        """Test invalid overrides are reported as configuration errors."""
        with pytest.raises(ConfigurationError):
            default_configuration(max_expansions=-1)
