"""
Key/value persistence: one JSON document per key in a data directory.

Any string value that starts like an ISO-8601 timestamp (``YYYY-MM-DDT``)
is revived as a ``datetime`` on load unless the caller asks for the raw
document with ``revive_dates=False``.  Read failures are logged and fall
back to the caller's default, so a corrupt file behaves like an empty one.

Usage:
    from glotbase.storage import Storage, StorageKey

    store = Storage("glotbase-data")
    words = store.get(StorageKey.LEXICON, [])
    store.set(StorageKey.LEXICON, words)
"""

from __future__ import annotations

import enum
import json
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}T")


class StorageKey(str, enum.Enum):
    LEXICON = "glotbase_lexicon"
    AFFIX_RULES = "glotbase_affixes"
    # Reserved; nothing reads or writes these yet
    PHONOLOGY = "glotbase_phonology"
    GRAMMAR = "glotbase_grammar"
    CORPUS = "glotbase_corpus"
    METADATA = "glotbase_metadata"


# ── JSON (de)serialization ───────────────────────────────────────────────────

def revive(value: Any) -> Any:
    """Turn timestamp-looking strings into datetimes, recursively."""
    if isinstance(value, str):
        if _ISO_PREFIX.match(value):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                return value
        return value
    if isinstance(value, list):
        return [revive(v) for v in value]
    if isinstance(value, dict):
        return {k: revive(v) for k, v in value.items()}
    return value


def _revive_object(obj: dict) -> dict:
    return {k: revive(v) for k, v in obj.items()}


def loads(text: str) -> Any:
    data = json.loads(text, object_hook=_revive_object)
    # object_hook never sees a bare top-level string or list of strings
    return revive(data) if not isinstance(data, dict) else data


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any, indent: int | None = None) -> str:
    return json.dumps(value, default=_default, ensure_ascii=False, indent=indent)


# ── Storage ──────────────────────────────────────────────────────────────────

class Storage:
    """JSON documents stored as ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_key_name(key)}.json"

    def get(self, key: str, default: Any, revive_dates: bool = True) -> Any:
        """Read a key.  With ``revive_dates=False`` strings come back untouched."""
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            text = path.read_text(encoding="utf-8")
            if not text.strip():
                return default
            return loads(text) if revive_dates else json.loads(text)
        except (OSError, ValueError) as e:
            logger.error("Error reading from storage (%s): %s", _key_name(key), e, exc_info=True)
            return default

    def set(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(dumps(value), encoding="utf-8")
        except (OSError, TypeError) as e:
            logger.error("Error writing to storage (%s): %s", _key_name(key), e, exc_info=True)

    def remove(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as e:
            logger.error("Error removing from storage (%s): %s", _key_name(key), e, exc_info=True)

    def clear(self) -> None:
        """Remove every GlotBase key, leaving other files alone."""
        for key in StorageKey:
            self.remove(key)

    def __repr__(self) -> str:
        return f"Storage({str(self.directory)!r})"


def _key_name(key: str) -> str:
    return key.value if isinstance(key, StorageKey) else key
