"""
Affix engine: derive new words from a root with prefix, suffix, infix or
circumfix rules.

A rule's replacement template (``me-$ROOT``, ``$ROOT-an``, ``-um-``,
``ke-$ROOT-an``) is parsed once into one of four affix variants.  Applying
a variant is plain string concatenation: there is no phonological
adjustment, and the native script receives the same literal material as
the romanization.

Usage:
    from glotbase.affixes import apply_affix, derive_words

    derived = apply_affix(root, rule)
    print(derived.romanization, derived.part_of_speech)

    for fields in derive_words(root, rules):
        lexicon.add_word(**fields)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from glotbase.models import AffixRule, PartOfSpeech, WordEntry

ROOT_PLACEHOLDER = "$ROOT"
DERIVED_TAG = "derived"


# ── Affix variants ───────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Prefix:
    text: str

    def apply(self, base: str) -> str:
        return self.text + base


@dataclass(frozen=True, slots=True)
class Suffix:
    text: str

    def apply(self, base: str) -> str:
        return base + self.text


@dataclass(frozen=True, slots=True)
class Infix:
    """Inserted at ``len(base) // 2``, whatever the string's syllables."""

    text: str

    def apply(self, base: str) -> str:
        mid = len(base) // 2
        return base[:mid] + self.text + base[mid:]


@dataclass(frozen=True, slots=True)
class Circumfix:
    prefix: str
    suffix: str

    def apply(self, base: str) -> str:
        return self.prefix + base + self.suffix


Affix = Union[Prefix, Suffix, Infix, Circumfix]


def parse_affix(affix_type: str, replacement: str) -> Affix:
    """Turn a replacement template into its affix variant.

    A template without ``$ROOT`` is used whole as affix material.
    """
    if affix_type == "prefix":
        return Prefix(replacement.replace(ROOT_PLACEHOLDER, "", 1).removesuffix("-"))
    if affix_type == "suffix":
        return Suffix(replacement.replace(ROOT_PLACEHOLDER, "", 1).removeprefix("-"))
    if affix_type == "infix":
        return Infix(replacement.replace(ROOT_PLACEHOLDER, "", 1).replace("-", ""))
    if affix_type == "circumfix":
        parts = replacement.split(ROOT_PLACEHOLDER)
        before = parts[0].removesuffix("-")
        after = parts[1].removeprefix("-") if len(parts) > 1 else ""
        return Circumfix(before, after)
    raise ValueError(f"Unknown affix type: {affix_type!r}")


# ── Derivation ───────────────────────────────────────────────────────────────

@dataclass(slots=True)
class Derivation:
    """Surface forms and grammar of a word derived from a root."""

    romanization: str
    native_script: str
    part_of_speech: PartOfSpeech
    root_word_id: str
    is_root: bool = False


def apply_affix(
    root: WordEntry, rule: AffixRule, *, mirror_native_script: bool = True,
) -> Derivation:
    """Apply one rule to a root word.

    The native script gets the same affix material when it is non-empty.
    ``mirror_native_script=False`` leaves it untouched and only rewrites
    the romanization.
    """
    native = root.native_script
    if mirror_native_script and native:
        native = rule.affix.apply(native)

    return Derivation(
        romanization=rule.affix.apply(root.romanization),
        native_script=native,
        part_of_speech=rule.resulting_pos or root.part_of_speech,
        root_word_id=root.id,
    )


def preview(root: WordEntry, rule: AffixRule) -> str:
    return rule.affix.apply(root.romanization)


def generate_derived_words(root: WordEntry, rules: list[AffixRule]) -> list[Derivation]:
    """Apply every rule to the same root. Rules are never chained."""
    return [apply_affix(root, rule) for rule in rules]


def derive_words(root: WordEntry, rules: list[AffixRule]) -> list[dict]:
    """Build ready-to-add word fields for each rule applied to ``root``.

    Each result carries an etymology note naming the root and rule, a
    definition pointing back at the root's, and the root's tags plus
    ``"derived"``.
    """
    results = []
    for rule in rules:
        derived = apply_affix(root, rule)
        results.append({
            "native_script": derived.native_script,
            "romanization": derived.romanization,
            "ipa": root.ipa,
            "part_of_speech": derived.part_of_speech,
            "etymology": f'Derived from "{root.romanization}" using {rule.name}',
            "gender": root.gender,
            "definition": f"{rule.description or rule.name} form of: {root.definition}",
            "tags": [*root.tags, DERIVED_TAG],
            "is_root": False,
            "root_word_id": root.id,
        })
    return results


def get_derived_words(root_id: str, words: list[WordEntry]) -> list[WordEntry]:
    return [w for w in words if w.root_word_id == root_id]
