"""Phonetic Keys - Cross-language phonetic name matching.

Encodes personal names into sets of language-specific phonetic keys so that
spellings, transliterations and scripts of the same name can be compared:
1. encode(): per-language key sets for a name
2. match(): whether two names share a key
3. similarity(): Jaccard overlap of two names' keys
"""

__version__ = "0.1.0"

from phonetic_keys.config import Configuration, NameType, RuleType
from phonetic_keys.engine import encode, key_set, match, similarity
from phonetic_keys.errors import ConfigurationError, InvalidArgumentError, PhoneticKeysError
from phonetic_keys.languages import default_configuration
from phonetic_keys.models import EncodeResult, LanguageHeuristic, LanguageRuleSet, Rule

__all__ = [
    "__version__",
    # API
    "encode",
    "match",
    "similarity",
    "key_set",
    # Configuration
    "Configuration",
    "NameType",
    "RuleType",
    "Rule",
    "LanguageRuleSet",
    "LanguageHeuristic",
    "default_configuration",
    # Results
    "EncodeResult",
    # Errors
    "PhoneticKeysError",
    "InvalidArgumentError",
    "ConfigurationError",
]
