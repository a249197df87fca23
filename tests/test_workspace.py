"""Tests for Workspace wiring and configuration (workspace.py)."""

import pytest

from glotbase.errors import ConfigError, UnknownRuleError, UnknownWordError
from glotbase.models import PartOfSpeech
from glotbase.workspace import Workspace


def _write_config(tmp_path, body: str):
    path = tmp_path / "glotbase.toml"
    path.write_text(body, encoding="utf-8")
    return path


# ── Configuration ─────────────────────────────────────────────────────────────

def test_from_config_resolves_relative_dir(tmp_path):
    path = _write_config(tmp_path, '[storage]\ndir = "lang"\n[lexicon]\ngoal = 40\n')
    ws = Workspace.from_config(path)
    assert ws.data_dir == tmp_path / "lang"
    assert ws.goal == 40
    assert ws.log_level == "INFO"


def test_from_config_defaults(tmp_path):
    ws = Workspace.from_config(_write_config(tmp_path, '[logging]\nlevel = "debug"\n'))
    assert ws.data_dir == tmp_path / "glotbase-data"
    assert ws.goal == 100
    assert ws.log_level == "DEBUG"


def test_from_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Workspace.from_config(tmp_path / "absent.toml")


# ── Operations ────────────────────────────────────────────────────────────────

def _workspace(tmp_path):
    ws = Workspace(tmp_path / "data")
    root = ws.lexicon.add_word(romanization="baik", part_of_speech="adjective",
                               definition="good", tags=["core"])
    rule = ws.rules.add_rule(name="Nominalizer", type="circumfix",
                             replacement="ke-$ROOT-an", resulting_pos="noun")
    return ws, root, rule


def test_derive_adds_words(tmp_path):
    ws, root, rule = _workspace(tmp_path)

    [word] = ws.derive(root.id, [rule.id])

    assert word.romanization == "kebaikan"
    assert word.part_of_speech == PartOfSpeech.NOUN
    assert word.root_word_id == root.id
    assert word.tags == ["core", "derived"]
    assert ws.lexicon.derived_words(root.id) == [word]
    assert len(Workspace(tmp_path / "data").lexicon) == 2


def test_derive_unknown_root(tmp_path):
    ws, _, rule = _workspace(tmp_path)
    with pytest.raises(UnknownWordError):
        ws.derive("word-missing", [rule.id])


def test_derive_unknown_rule_adds_nothing(tmp_path):
    ws, root, _ = _workspace(tmp_path)
    with pytest.raises(UnknownRuleError):
        ws.derive(root.id, ["affix-missing"])
    assert len(ws.lexicon) == 1


def test_validate_by_id(tmp_path):
    ws = Workspace(tmp_path / "data")
    verb = ws.lexicon.add_word(romanization="makan", part_of_speech="verb")
    cat = ws.lexicon.add_word(romanization="kucing", part_of_speech="noun")
    fish = ws.lexicon.add_word(romanization="ikan", part_of_speech="noun")

    assert ws.validate([verb.id, cat.id, fish.id], "VSO").is_valid is True
    assert ws.validate([cat.id, verb.id, fish.id], "VSO").is_valid is False
    strict = ws.validate([cat.id, verb.id, fish.id], "SVO", strategy="strict-order-string")
    assert strict.is_valid is True


def test_stats_uses_goal(tmp_path):
    ws = Workspace(tmp_path / "data", goal=4)
    ws.lexicon.add_word(romanization="a", part_of_speech="noun")
    assert ws.stats().completion == 25


def test_summary(tmp_path):
    ws, _, _ = _workspace(tmp_path)
    text = ws.summary()
    assert "Words:   1" in text
    assert "Affix rules: 1" in text


def test_from_config_rejects_bad_values(tmp_path):
    with pytest.raises(ConfigError, match="goal"):
        Workspace.from_config(_write_config(tmp_path, '[lexicon]\ngoal = "lots"\n'))
    with pytest.raises(ConfigError, match="level"):
        Workspace.from_config(_write_config(tmp_path, '[logging]\nlevel = "loud"\n'))
    with pytest.raises(ConfigError, match="Invalid config"):
        Workspace.from_config(_write_config(tmp_path, "[storage\n"))
