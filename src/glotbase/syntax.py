"""
Word-order validation for sentences built from lexicon entries.

Two strategies are provided and kept separate:

- ``rich-suggestions`` (``validate_word_order``): checks that a verb and two
  nouns/pronouns are present, compares the positions of the first verb,
  the first nominal and the next nominal against the expected order, and
  returns corrective suggestions.
- ``strict-order-string`` (``validate_strict_order``): labels the first verb
  V and the first two nominals S and O, sorts them by position and
  requires the resulting string to equal the expected order.

Subjects and objects are not told apart: the rich strategy only knows the
"first" and "second" nominal, so VSO/VOS, SVO/OVS and SOV/OSV apply the
same positional test.

Usage:
    from glotbase.syntax import validate_word_order, get_validator

    result = validate_word_order([verb, noun1, noun2], "VSO")
    print(result.is_valid, result.pattern, result.suggestions)

    strict = get_validator("strict-order-string")
    print(strict(words, "SVO").message)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from glotbase.models import NOMINALS, PartOfSpeech, WordEntry, WordOrder

RICH_SUGGESTIONS = "rich-suggestions"
STRICT_ORDER_STRING = "strict-order-string"


@dataclass(slots=True)
class ValidationResult:
    is_valid: bool
    pattern: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    expected_order: str | None = None
    message: str | None = None
    actual_order: str | None = None


# Human-readable role sequence for each order
ORDER_PATTERNS: dict[WordOrder, str] = {
    WordOrder.VSO: "Verb → Subject → Object",
    WordOrder.SVO: "Subject → Verb → Object",
    WordOrder.SOV: "Subject → Object → Verb",
    WordOrder.VOS: "Verb → Object → Subject",
    WordOrder.OVS: "Object → Verb → Subject",
    WordOrder.OSV: "Object → Subject → Verb",
}

ORDER_INFO: dict[WordOrder, dict] = {
    WordOrder.VSO: {
        "pattern": ["V", "S", "O"],
        "example": "Ate the cat the fish",
        "languages": "Welsh, Irish, Classical Arabic",
    },
    WordOrder.SVO: {
        "pattern": ["S", "V", "O"],
        "example": "The cat ate the fish",
        "languages": "English, Mandarin, French, Spanish",
    },
    WordOrder.SOV: {
        "pattern": ["S", "O", "V"],
        "example": "The cat the fish ate",
        "languages": "Japanese, Korean, Turkish, Hindi",
    },
    WordOrder.VOS: {
        "pattern": ["V", "O", "S"],
        "example": "Ate the fish the cat",
        "languages": "Malagasy, Fijian",
    },
    WordOrder.OVS: {
        "pattern": ["O", "V", "S"],
        "example": "The fish ate the cat",
        "languages": "Hixkaryana (rare)",
    },
    WordOrder.OSV: {
        "pattern": ["O", "S", "V"],
        "example": "The fish the cat ate",
        "languages": "Warao (rare)",
    },
}


# ── Role labels ──────────────────────────────────────────────────────────────

def word_role(word: WordEntry) -> str:
    """'V' for verbs, 'S/O' for nouns and pronouns, else the POS initial."""
    if word.part_of_speech == PartOfSpeech.VERB:
        return "V"
    if word.part_of_speech in NOMINALS:
        return "S/O"
    return word.part_of_speech.value[:1].upper()


def word_order_indicator(word: WordEntry) -> str:
    """Like word_role, but blank for anything that is not V or S/O."""
    if word.part_of_speech == PartOfSpeech.VERB:
        return "V"
    if word.part_of_speech in NOMINALS:
        return "S/O"
    return ""


def _is_verb(word: WordEntry) -> bool:
    return word.part_of_speech == PartOfSpeech.VERB


# ── Rich-suggestions strategy ────────────────────────────────────────────────

def _order_holds(order: WordOrder, verb: int, first: int, second: int) -> bool:
    if order in (WordOrder.VSO, WordOrder.VOS):
        return verb < first < second
    if order in (WordOrder.SVO, WordOrder.OVS):
        return first < verb < second
    # SOV, OSV
    return first < second < verb


def validate_word_order(
    words: list[WordEntry], expected_order: WordOrder | str,
) -> ValidationResult:
    """Check a sentence against one of the six canonical word orders."""
    order = WordOrder(expected_order)

    if not words:
        return ValidationResult(
            is_valid=False,
            suggestions=["Add at least one word to validate"],
        )

    pattern = [word_role(w) for w in words]
    suggestions: list[str] = []
    is_valid = True

    has_verb = any(_is_verb(w) for w in words)
    nominal_count = sum(1 for w in words if w.is_nominal)

    if not has_verb:
        suggestions.append("Add a verb to your sentence")
        is_valid = False

    if nominal_count < 2:
        suggestions.append("Add at least 2 nouns/pronouns (subject and object)")
        is_valid = False

    if has_verb and nominal_count >= 2:
        verb_index = next(i for i, w in enumerate(words) if _is_verb(w))
        first_index = next(i for i, w in enumerate(words) if w.is_nominal)
        second_index = next(
            i for i, w in enumerate(words) if i > first_index and w.is_nominal
        )

        if _order_holds(order, verb_index, first_index, second_index):
            suggestions.append(f"✓ Perfect {order.value} structure!")
        else:
            suggestions.append(f"Expected {ORDER_PATTERNS[order]} word order")
            is_valid = False

    return ValidationResult(
        is_valid=is_valid,
        pattern=pattern,
        suggestions=suggestions,
        expected_order=order.value,
    )


def validate_vso(words: list[WordEntry]) -> ValidationResult:
    """VSO-specific checks: the sentence opens with a verb followed by
    its subject and object."""
    if not words:
        return ValidationResult(
            is_valid=False,
            suggestions=["Add at least one word to validate"],
        )

    pattern = [word_role(w) for w in words]
    suggestions: list[str] = []
    is_valid = True

    if len(words) < 2:
        suggestions.append("VSO order requires at least a verb and one noun/pronoun")
        is_valid = False

    if not _is_verb(words[0]):
        suggestions.append("VSO order should start with a verb (V)")
        is_valid = False

    if len(words) >= 2 and not any(w.is_nominal for w in words[1:]):
        suggestions.append("Add a subject (noun/pronoun) after the verb")
        is_valid = False

    if len(words) >= 3 and _is_verb(words[0]):
        nominal_count = sum(1 for w in words[1:] if w.is_nominal)
        if nominal_count >= 2:
            suggestions.append("✓ Perfect VSO structure: Verb + Subject + Object")
        elif nominal_count == 1:
            suggestions.append("Good start! Add another noun/pronoun for object")

    if is_valid and not suggestions:
        suggestions.append("✓ Valid VSO word order")

    return ValidationResult(
        is_valid=is_valid,
        pattern=pattern,
        suggestions=suggestions,
        expected_order=WordOrder.VSO.value,
    )


# ── Strict-order-string strategy ─────────────────────────────────────────────

def actual_order(words: list[WordEntry]) -> str:
    """Order string of the first verb and the first two nominals, e.g. 'SVO'."""
    positions: dict[str, int] = {}
    for index, word in enumerate(words):
        if _is_verb(word):
            positions.setdefault("V", index)
        elif word.is_nominal:
            if "S" not in positions:
                positions["S"] = index
            elif "O" not in positions:
                positions["O"] = index
    return "".join(sorted(positions, key=positions.__getitem__))


def validate_strict_order(
    words: list[WordEntry], expected_order: WordOrder | str,
) -> ValidationResult:
    """Valid only when the roles appear in exactly the expected order.

    Fewer than two words, or fewer than two recognised roles, always pass.
    """
    order = WordOrder(expected_order)
    pattern = [word_role(w) for w in words]

    if len(words) < 2:
        return ValidationResult(is_valid=True, pattern=pattern)

    found = actual_order(words)
    if found == order.value or len(found) < 2:
        return ValidationResult(is_valid=True, pattern=pattern)

    message = (
        f"Expected {order.value} word order, but found "
        f"{found or 'incomplete sentence'}"
    )
    return ValidationResult(
        is_valid=False,
        pattern=pattern,
        suggestions=[message],
        expected_order=order.value,
        message=message,
        actual_order=found,
    )


Validator = Callable[[list[WordEntry], "WordOrder | str"], ValidationResult]

STRATEGIES: dict[str, Validator] = {
    RICH_SUGGESTIONS: validate_word_order,
    STRICT_ORDER_STRING: validate_strict_order,
}


def get_validator(name: str = RICH_SUGGESTIONS) -> Validator:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown validation strategy {name!r} "
            f"(choose from: {', '.join(STRATEGIES)})"
        ) from None


def render_sentence(words: list[WordEntry], order: WordOrder | str) -> str:
    """History line for a built sentence, e.g. '[VSO] makan kucing ikan'."""
    text = " ".join(w.romanization for w in words if w.romanization)
    return f"[{WordOrder(order).value}] {text}"
