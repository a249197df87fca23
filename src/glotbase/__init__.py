"""glotbase: lexicon, affix derivation and word-order tools for constructed languages."""

from glotbase.models import (
    WordEntry, AffixRule, Sentence,
    PartOfSpeech, Gender, AffixType, WordOrder,
)
from glotbase.affixes import (
    Prefix, Suffix, Infix, Circumfix, Derivation,
    parse_affix, apply_affix, derive_words, generate_derived_words,
)
from glotbase.syntax import (
    ValidationResult, validate_word_order, validate_strict_order, get_validator,
)
from glotbase.storage import Storage, StorageKey
from glotbase.lexicon import Lexicon, AffixRuleBook
from glotbase.exchange import export_json, export_csv, import_json
from glotbase.stats import LexiconStats, lexicon_stats
from glotbase.errors import ConfigError, GlotbaseError, ImportFormatError
from glotbase.workspace import Workspace

__all__ = [
    "WordEntry", "AffixRule", "Sentence",
    "PartOfSpeech", "Gender", "AffixType", "WordOrder",
    "Prefix", "Suffix", "Infix", "Circumfix", "Derivation",
    "parse_affix", "apply_affix", "derive_words", "generate_derived_words",
    "ValidationResult", "validate_word_order", "validate_strict_order", "get_validator",
    "Storage", "StorageKey",
    "Lexicon", "AffixRuleBook",
    "export_json", "export_csv", "import_json",
    "LexiconStats", "lexicon_stats",
    "ConfigError", "GlotbaseError", "ImportFormatError",
    "Workspace",
]
