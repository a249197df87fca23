"""Shared test fixtures."""

from datetime import datetime, timezone
from itertools import count

import pytest

from glotbase.models import AffixRule, WordEntry
from glotbase.storage import Storage

_ids = count(1)


def make_word(romanization="kata", part_of_speech="noun", **fields) -> WordEntry:
    """Build a WordEntry without going through a store."""
    fields.setdefault("id", f"word-test-{next(_ids)}")
    return WordEntry(romanization=romanization, part_of_speech=part_of_speech, **fields)


def make_rule(type="prefix", replacement="me-$ROOT", name="Rule", **fields) -> AffixRule:
    fields.setdefault("id", f"affix-test-{next(_ids)}")
    return AffixRule(name=name, type=type, replacement=replacement, **fields)


@pytest.fixture
def storage(tmp_path) -> Storage:
    return Storage(tmp_path / "data")


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 5, 1, 12, 30, 45, tzinfo=timezone.utc)
