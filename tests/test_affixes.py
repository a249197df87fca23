"""Tests for the affix engine (affixes.py)."""

import dataclasses

import pytest

from conftest import make_rule, make_word
from glotbase.affixes import (
    Circumfix, Infix, Prefix, Suffix,
    apply_affix, derive_words, generate_derived_words, get_derived_words,
    parse_affix, preview,
)
from glotbase.models import PartOfSpeech

ROOTS = ["baik", "tulis", "a", "", "makan", "sejahtera"]


# ── parse_affix ───────────────────────────────────────────────────────────────

def test_parse_prefix_strips_placeholder_and_hyphen():
    assert parse_affix("prefix", "me-$ROOT") == Prefix("me")


def test_parse_prefix_strips_only_one_trailing_hyphen():
    assert parse_affix("prefix", "me--$ROOT") == Prefix("me-")


def test_parse_suffix_strips_leading_hyphen():
    assert parse_affix("suffix", "$ROOT-an") == Suffix("an")


def test_parse_infix_drops_every_hyphen():
    assert parse_affix("infix", "-um-") == Infix("um")
    assert parse_affix("infix", "$ROOT-el-") == Infix("el")


def test_parse_circumfix_splits_on_placeholder():
    assert parse_affix("circumfix", "ke-$ROOT-an") == Circumfix("ke", "an")


def test_parse_circumfix_without_placeholder_is_all_prefix():
    assert parse_affix("circumfix", "ke-") == Circumfix("ke", "")


def test_parse_template_without_placeholder_uses_whole_string():
    assert parse_affix("prefix", "ber") == Prefix("ber")
    assert parse_affix("suffix", "-kan") == Suffix("kan")


def test_parse_unknown_type_raises():
    with pytest.raises(ValueError):
        parse_affix("suprafix", "$ROOT")


def test_rule_parses_template_on_creation():
    rule = make_rule(type="circumfix", replacement="pe-$ROOT-an")
    assert rule.affix == Circumfix("pe", "an")


def test_rule_replace_reparses_template():
    rule = make_rule(type="prefix", replacement="me-$ROOT")
    updated = dataclasses.replace(rule, replacement="ber-$ROOT")
    assert updated.affix == Prefix("ber")


# ── apply_affix: romanization ─────────────────────────────────────────────────

@pytest.mark.parametrize("root", ROOTS)
def test_suffix_appends(root):
    word = make_word(root)
    rule = make_rule(type="suffix", replacement="$ROOT-an")
    assert apply_affix(word, rule).romanization == root + "an"


@pytest.mark.parametrize("root", ROOTS)
def test_prefix_prepends(root):
    word = make_word(root)
    rule = make_rule(type="prefix", replacement="me-$ROOT")
    assert apply_affix(word, rule).romanization == "me" + root


@pytest.mark.parametrize("root", ROOTS)
def test_circumfix_wraps(root):
    word = make_word(root)
    rule = make_rule(type="circumfix", replacement="ke-$ROOT-an")
    assert apply_affix(word, rule).romanization == "ke" + root + "an"


@pytest.mark.parametrize("root", ROOTS)
def test_infix_inserted_at_midpoint(root):
    word = make_word(root)
    rule = make_rule(type="infix", replacement="-um-")
    result = apply_affix(word, rule).romanization

    mid = len(root) // 2
    assert result[mid:mid + 2] == "um"
    assert result[:mid] + result[mid + 2:] == root


def test_infix_example():
    word = make_word("tulis")
    rule = make_rule(type="infix", replacement="-um-")
    assert apply_affix(word, rule).romanization == "tuumlis"


# ── apply_affix: native script ────────────────────────────────────────────────

def test_native_script_gets_same_material():
    word = make_word("makan", native_script="ماکن")
    rule = make_rule(type="suffix", replacement="$ROOT-an")
    assert apply_affix(word, rule).native_script == "ماکنan"


def test_infix_midpoints_computed_per_string():
    word = make_word("abcd", native_script="xyz")
    rule = make_rule(type="infix", replacement="Q")
    derived = apply_affix(word, rule)
    assert derived.romanization == "abQcd"
    assert derived.native_script == "xQyz"


def test_empty_native_script_stays_empty():
    word = make_word("baik", native_script="")
    rule = make_rule(type="circumfix", replacement="ke-$ROOT-an")
    assert apply_affix(word, rule).native_script == ""


def test_native_script_untouched_without_mirroring():
    word = make_word("baik", native_script="بايق")
    rule = make_rule(type="prefix", replacement="ber-$ROOT")
    derived = apply_affix(word, rule, mirror_native_script=False)
    assert derived.romanization == "berbaik"
    assert derived.native_script == "بايق"


# ── apply_affix: grammar ──────────────────────────────────────────────────────

def test_resulting_pos_overrides_root():
    word = make_word("baik", part_of_speech="adjective")
    rule = make_rule(type="circumfix", replacement="ke-$ROOT-an", resulting_pos="noun")
    assert apply_affix(word, rule).part_of_speech == PartOfSpeech.NOUN


def test_pos_inherited_without_override():
    word = make_word("tulis", part_of_speech="verb")
    rule = make_rule(type="prefix", replacement="me-$ROOT")
    assert apply_affix(word, rule).part_of_speech == PartOfSpeech.VERB


def test_derived_points_back_at_root():
    word = make_word("tulis")
    derived = apply_affix(word, make_rule())
    assert derived.is_root is False
    assert derived.root_word_id == word.id


def test_preview_is_derived_romanization():
    assert preview(make_word("tulis"), make_rule(replacement="pe-$ROOT")) == "petulis"


# ── Batch derivation ──────────────────────────────────────────────────────────

def test_rules_are_not_chained():
    word = make_word("ajar")
    rules = [
        make_rule(type="prefix", replacement="be-$ROOT"),
        make_rule(type="suffix", replacement="$ROOT-an"),
    ]
    results = generate_derived_words(word, rules)
    assert [d.romanization for d in results] == ["beajar", "ajaran"]


def test_derive_words_builds_full_entries():
    root = make_word(
        "baik", part_of_speech="adjective", definition="good",
        ipa="ba.ik", gender="divine", tags=["core", "quality"],
    )
    rule = make_rule(
        type="circumfix", replacement="ke-$ROOT-an", name="Nominalizer",
        description="Abstract noun", resulting_pos="noun",
    )
    [fields] = derive_words(root, [rule])

    assert fields["romanization"] == "kebaikan"
    assert fields["etymology"] == 'Derived from "baik" using Nominalizer'
    assert fields["definition"] == "Abstract noun form of: good"
    assert fields["tags"] == ["core", "quality", "derived"]
    assert fields["gender"] == "divine"
    assert fields["ipa"] == "ba.ik"
    assert fields["part_of_speech"] == PartOfSpeech.NOUN
    assert fields["is_root"] is False
    assert fields["root_word_id"] == root.id


def test_derive_words_definition_falls_back_to_rule_name():
    root = make_word("tulis", definition="write")
    [fields] = derive_words(root, [make_rule(name="Agent", description="")])
    assert fields["definition"] == "Agent form of: write"


def test_derive_words_does_not_mutate_root_tags():
    root = make_word("tulis", tags=["verb-core"])
    derive_words(root, [make_rule(), make_rule()])
    assert root.tags == ["verb-core"]


def test_get_derived_words():
    root = make_word("tulis")
    child = make_word("menulis", is_root=False, root_word_id=root.id)
    other = make_word("makan")
    assert get_derived_words(root.id, [root, child, other]) == [child]
