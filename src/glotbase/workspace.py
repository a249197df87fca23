"""
A GlotBase workspace: one data directory, its lexicon and its affix rules,
with TOML-based configuration.

Usage:
    from glotbase.workspace import Workspace

    ws = Workspace.from_config()            # loads glotbase.toml
    ws = Workspace("glotbase-data")         # or point at a directory

    derived = ws.derive(root_id, [rule_id])
    result = ws.validate([w1, w2, w3], "VSO")
    print(ws.summary())

Config file:

    [storage]
    dir = "glotbase-data"     # relative to the config file

    [lexicon]
    goal = 100

    [logging]
    level = "INFO"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from glotbase.affixes import derive_words
from glotbase.errors import ConfigError
from glotbase.lexicon import AffixRuleBook, Lexicon
from glotbase.models import WordEntry, WordOrder
from glotbase.stats import DEFAULT_GOAL, LexiconStats, lexicon_stats
from glotbase.storage import Storage
from glotbase.syntax import RICH_SUGGESTIONS, ValidationResult, get_validator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "glotbase.toml"
DEFAULT_DATA_DIR = "glotbase-data"


class Workspace:
    """The stores for one data directory, built once and passed around."""

    def __init__(self, data_dir: str | Path = DEFAULT_DATA_DIR, goal: int = DEFAULT_GOAL,
                 log_level: str = "INFO"):
        self.data_dir = Path(data_dir)
        self.goal = goal
        self.log_level = log_level
        self.storage = Storage(self.data_dir)
        self.lexicon = Lexicon(self.storage)
        self.rules = AffixRuleBook(self.storage)
        logger.debug(
            "Loaded %d word(s) and %d rule(s) from %s",
            len(self.lexicon), len(self.rules), self.data_dir,
        )

    @classmethod
    def from_config(cls, config_path: str | Path = CONFIG_FILENAME) -> Workspace:
        """Build a Workspace from a TOML config file.

        The storage directory is resolved relative to the config file.
        """
        return cls(**load_config(config_path))

    # ── Operations ───────────────────────────────────────────────────────

    def derive(self, root_id: str, rule_ids: list[str]) -> list[WordEntry]:
        """Apply each rule to the root and add the results to the lexicon."""
        root = self.lexicon.require(root_id)
        rules = [self.rules.require(rule_id) for rule_id in rule_ids]
        added = [self.lexicon.add_word(**fields) for fields in derive_words(root, rules)]
        logger.info("Derived %d word(s) from %r", len(added), root.romanization)
        return added

    def validate(
        self,
        word_ids: list[str],
        expected_order: WordOrder | str,
        strategy: str = RICH_SUGGESTIONS,
    ) -> ValidationResult:
        validator = get_validator(strategy)
        words = [self.lexicon.require(word_id) for word_id in word_ids]
        return validator(words, expected_order)

    def stats(self) -> LexiconStats:
        return lexicon_stats(self.lexicon.words, self.rules.rules, goal=self.goal)

    def summary(self) -> str:
        lines = [f"GlotBase workspace at {self.data_dir}"]
        for sub_line in self.lexicon.summary().split("\n"):
            lines.append(f"  {sub_line}")
        lines.append(f"  Affix rules: {len(self.rules):,}")
        return "\n".join(lines)


def load_config(config_path: str | Path = CONFIG_FILENAME) -> dict:
    """Read a TOML config into ``Workspace`` keyword arguments.

    Raises FileNotFoundError for a missing file and ConfigError for
    malformed TOML or a bad setting.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    try:
        with config_path.open("rb") as f:
            cfg = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    data_dir = Path(cfg.get("storage", {}).get("dir", DEFAULT_DATA_DIR))
    if not data_dir.is_absolute():
        data_dir = config_path.parent / data_dir

    goal = cfg.get("lexicon", {}).get("goal", DEFAULT_GOAL)
    if not isinstance(goal, int) or isinstance(goal, bool):
        raise ConfigError(f"[lexicon] goal must be an integer, got {goal!r}")

    log_level = str(cfg.get("logging", {}).get("level", "INFO")).upper()
    if log_level not in logging.getLevelNamesMapping():
        raise ConfigError(f"[logging] level is not a logging level: {log_level!r}")

    return {"data_dir": data_dir, "goal": goal, "log_level": log_level}


def find_default_config() -> Path | None:
    """Look for glotbase.toml in the working directory."""
    candidate = Path(CONFIG_FILENAME)
    if candidate.exists():
        return candidate
    return None
