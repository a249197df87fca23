"""
Core data types for a GlotBase lexicon.

Usage:
    from glotbase.models import WordEntry, AffixRule, PartOfSpeech

    word = WordEntry.create(romanization="tulis", part_of_speech="verb")
    rule = AffixRule.create(name="Agent", type="prefix", replacement="pe-$ROOT")
    print(rule.affix)   # Prefix(text='pe')
"""

from __future__ import annotations

import enum
import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone

from glotbase.affixes import ROOT_PLACEHOLDER, Affix, parse_affix


class PartOfSpeech(str, enum.Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    PARTICLE = "particle"
    INTERJECTION = "interjection"
    DETERMINER = "determiner"


class Gender(str, enum.Enum):
    """Fixed genders. A word's gender may also be any custom label."""

    NEUTRAL = "neutral"
    MASCULINE = "masculine"
    FEMININE = "feminine"
    DIVINE = "divine"
    CUSTOM = "custom"


class AffixType(str, enum.Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"
    INFIX = "infix"
    CIRCUMFIX = "circumfix"


class WordOrder(str, enum.Enum):
    VSO = "VSO"
    SVO = "SVO"
    SOV = "SOV"
    VOS = "VOS"
    OVS = "OVS"
    OSV = "OSV"


_FIXED_GENDERS = {
    Gender.NEUTRAL.value, Gender.MASCULINE.value,
    Gender.FEMININE.value, Gender.DIVINE.value,
}

# Parts of speech that can fill the subject or object slot
NOMINALS = frozenset({PartOfSpeech.NOUN, PartOfSpeech.PRONOUN})


def is_custom_gender(value: str) -> bool:
    """True for 'custom' and for any free-form gender label."""
    return value not in _FIXED_GENDERS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """Generate an id like ``word-1718000000000-k3j9x0a1b``."""
    millis = int(time.time() * 1000)
    alphabet = string.ascii_lowercase + string.digits
    suffix = "".join(random.choices(alphabet, k=9))
    return f"{prefix}-{millis}-{suffix}"


@dataclass(slots=True)
class WordEntry:
    """A single lexicon entry."""

    id: str
    romanization: str
    part_of_speech: PartOfSpeech
    native_script: str = ""
    ipa: str = ""
    gender: str = Gender.NEUTRAL.value
    definition: str = ""
    etymology: str = ""
    tags: list[str] = field(default_factory=list)
    is_root: bool = True
    root_word_id: str | None = None  # weak reference, may dangle
    notes: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.part_of_speech = PartOfSpeech(self.part_of_speech)
        if isinstance(self.gender, Gender):
            self.gender = self.gender.value
        if not self.gender:
            raise ValueError("gender cannot be empty")
        self.tags = list(self.tags)

    @classmethod
    def create(cls, **fields) -> WordEntry:
        """Build a new entry with a fresh id and matching timestamps."""
        now = utcnow()
        fields.pop("id", None)
        fields.setdefault("created_at", now)
        fields.setdefault("updated_at", now)
        return cls(id=new_id("word"), **fields)

    @property
    def is_nominal(self) -> bool:
        return self.part_of_speech in NOMINALS

    def __repr__(self) -> str:
        return f"WordEntry({self.id}: {self.romanization!r} [{self.part_of_speech.value}])"


@dataclass(slots=True)
class AffixRule:
    """A morphological template such as ``ke-$ROOT-an``.

    ``replacement`` is parsed into ``affix`` whenever the rule is built,
    so updating a rule through ``dataclasses.replace`` re-parses it.
    ``pattern`` is kept for display only.
    """

    id: str
    name: str
    type: AffixType
    replacement: str
    pattern: str = ROOT_PLACEHOLDER
    resulting_pos: PartOfSpeech | None = None
    description: str = ""
    example: str = ""
    affix: Affix = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.type = AffixType(self.type)
        if self.resulting_pos:
            self.resulting_pos = PartOfSpeech(self.resulting_pos)
        else:
            self.resulting_pos = None
        self.affix = parse_affix(self.type, self.replacement)

    @classmethod
    def create(cls, **fields) -> AffixRule:
        fields.pop("id", None)
        return cls(id=new_id("affix"), **fields)


@dataclass(slots=True)
class Sentence:
    """A sentence assembled from lexicon ids. Stored shape only."""

    id: str
    word_ids: list[str]
    word_order: WordOrder
    translation: str = ""
    gloss: str | None = None  # interlinear gloss
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.word_order = WordOrder(self.word_order)
