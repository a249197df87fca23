"""Exceptions raised by GlotBase operations."""


class GlotbaseError(Exception):
    """Base class for GlotBase errors."""


class ImportFormatError(GlotbaseError):
    """An import file was rejected; nothing was added."""


class UnknownWordError(GlotbaseError, KeyError):
    def __init__(self, word_id: str):
        super().__init__(word_id)
        self.word_id = word_id

    def __str__(self) -> str:
        return f"No word with id {self.word_id!r}"


class UnknownRuleError(GlotbaseError, KeyError):
    def __init__(self, rule_id: str):
        super().__init__(rule_id)
        self.rule_id = rule_id

    def __str__(self) -> str:
        return f"No affix rule with id {self.rule_id!r}"


class ConfigError(GlotbaseError):
    """The TOML config file could not be parsed or holds a bad value."""
