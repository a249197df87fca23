"""Smoke tests for the command-line interface (cli.py)."""

import pytest

from glotbase.cli import main
from glotbase.workspace import Workspace


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)  # keep any real glotbase.toml out of the way
    return tmp_path / "data"


def _run(data_dir, *args):
    return main(["--data-dir", str(data_dir), *args])


def test_summary_by_default(data_dir, capsys):
    assert _run(data_dir) == 0
    assert "GlotBase workspace" in capsys.readouterr().out


def test_add_and_list(data_dir, capsys):
    assert _run(data_dir, "--add", "tulis", "--part-of-speech", "verb",
                "--definition", "to write", "--tags", "core, action") == 0
    assert _run(data_dir, "--list") == 0

    out = capsys.readouterr().out
    assert "Added word word-" in out
    assert "tulis [verb] — to write" in out
    [word] = Workspace(data_dir).lexicon.words
    assert word.tags == ["core", "action"]


def test_rule_and_derive(data_dir, capsys):
    ws = Workspace(data_dir)
    root = ws.lexicon.add_word(romanization="tulis", part_of_speech="verb")

    assert _run(data_dir, "--add-rule", "Agent", "--type", "prefix",
                "--replacement", "pe-$ROOT", "--resulting-pos", "noun") == 0
    [rule] = Workspace(data_dir).rules.rules

    assert _run(data_dir, "--derive", root.id, "--apply", rule.id) == 0
    out = capsys.readouterr().out
    assert "petulis [noun]" in out


def test_validate(data_dir, capsys):
    ws = Workspace(data_dir)
    ids = [
        ws.lexicon.add_word(romanization="makan", part_of_speech="verb").id,
        ws.lexicon.add_word(romanization="kucing", part_of_speech="noun").id,
        ws.lexicon.add_word(romanization="ikan", part_of_speech="noun").id,
    ]

    assert _run(data_dir, "--validate", *ids, "--order", "VSO") == 0
    out = capsys.readouterr().out
    assert "  VALID\n" in out
    assert "INVALID" not in out
    assert "[VSO] makan kucing ikan" in out


def test_validate_unknown_word(data_dir, capsys):
    assert _run(data_dir, "--validate", "word-missing") == 1
    assert "ERROR" in capsys.readouterr().err


def test_export_then_import(data_dir, tmp_path, capsys):
    Workspace(data_dir).lexicon.add_word(romanization="tulis", part_of_speech="verb")
    out_dir = tmp_path / "exports"

    assert _run(data_dir, "--export-json", str(out_dir), "--export-csv", str(out_dir)) == 0
    [json_file] = out_dir.glob("*.json")
    assert len(list(out_dir.glob("*.csv"))) == 1

    assert _run(data_dir, "--import", str(json_file)) == 0
    assert len(Workspace(data_dir).lexicon) == 2


def test_import_bad_file(data_dir, tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    assert _run(data_dir, "--import", str(bad)) == 1
    assert "Invalid JSON file format" in capsys.readouterr().err


def test_stats(data_dir, capsys):
    Workspace(data_dir).lexicon.add_word(romanization="a", part_of_speech="noun")
    assert _run(data_dir, "--stats") == 0
    assert "Total words:   1" in capsys.readouterr().out


def test_malformed_config_goal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "glotbase.toml"
    cfg.write_text('[lexicon]\ngoal = "lots"\n', encoding="utf-8")

    assert main(["--config", str(cfg), "--stats"]) == 1
    assert "ERROR: [lexicon] goal must be an integer, got 'lots'" in capsys.readouterr().err


def test_unparseable_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "glotbase.toml").write_text("[storage\ndir = ", encoding="utf-8")

    assert main(["--stats"]) == 1
    assert "ERROR: Invalid config" in capsys.readouterr().err


def test_config_sets_data_dir_and_goal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "glotbase.toml").write_text(
        '[storage]\ndir = "lang"\n[lexicon]\ngoal = 4\n', encoding="utf-8",
    )
    Workspace(tmp_path / "lang").lexicon.add_word(romanization="a", part_of_speech="noun")

    assert main(["--stats"]) == 0
    assert "Progress:      25% (goal: 4 words)" in capsys.readouterr().out
