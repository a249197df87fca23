"""
Export a lexicon to JSON or CSV and import it back from JSON.

Exported JSON is the same camelCase shape the store persists.  Importing
only parses and validates; ``Lexicon.import_words`` then adds the records
as new entries with fresh ids and timestamps.

Usage:
    from glotbase.exchange import export_csv, read_import, write_export

    path = write_export(lexicon.words, "exports", "json")
    records = read_import(path)
    lexicon.import_words(records)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from marshmallow import ValidationError

from glotbase.errors import ImportFormatError
from glotbase.models import WordEntry
from glotbase.schemas import ImportedWordSchema, WordEntrySchema
from glotbase.storage import dumps

logger = logging.getLogger(__name__)

EXPORT_BASENAME = "glotbase-lexicon"

CSV_HEADERS = [
    "Native Script",
    "Romanization",
    "IPA",
    "Part of Speech",
    "Gender",
    "Definition",
    "Etymology",
    "Tags",
    "Is Root",
    "Created At",
]


def timestamped_filename(basename: str, extension: str, now: datetime | None = None) -> str:
    """``<basename>-2024-05-01T12-30-00.<extension>`` (UTC, to the second)."""
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S").replace(":", "-")
    return f"{basename}-{stamp}.{extension}"


# ── Export ───────────────────────────────────────────────────────────────────

def export_json(words: list[WordEntry]) -> str:
    return dumps(WordEntrySchema().dump(words, many=True), indent=2)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def export_csv(words: list[WordEntry]) -> str:
    """CSV with free-text columns always quoted and quotes doubled."""
    lines = [",".join(CSV_HEADERS)]
    for w in words:
        lines.append(",".join([
            _quote(w.native_script),
            _quote(w.romanization),
            _quote(w.ipa),
            w.part_of_speech.value,
            w.gender,
            _quote(w.definition),
            _quote(w.etymology),
            _quote(", ".join(w.tags)),
            "Yes" if w.is_root else "No",
            w.created_at.isoformat(),
        ]))
    return "\n".join(lines)


_EXPORTERS = {"json": export_json, "csv": export_csv}


def write_export(words: list[WordEntry], directory: str | Path, fmt: str = "json") -> Path:
    """Write a timestamped export file into ``directory`` and return its path."""
    try:
        render = _EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown export format: {fmt!r}") from None

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / timestamped_filename(EXPORT_BASENAME, fmt)
    path.write_text(render(words), encoding="utf-8")
    logger.info("Exported %d word(s) to %s", len(words), path)
    return path


# ── Import ───────────────────────────────────────────────────────────────────

def import_json(text: str) -> list[dict]:
    """Parse an exported lexicon.

    Returns validated records with dates parsed; a date that does not parse
    loads as None, since the import replaces it anyway.  A document whose
    root is not an array yields no records.  Invalid JSON or an invalid record
    raises ImportFormatError.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ImportFormatError("Invalid JSON file format") from e

    if not isinstance(data, list):
        logger.info("Import root is %s, not an array; nothing to import", type(data).__name__)
        return []

    try:
        return ImportedWordSchema().load(data, many=True, partial=("id",))
    except ValidationError as e:
        raise ImportFormatError(f"Invalid lexicon entries: {e.messages}") from e


def read_import(path: str | Path) -> list[dict]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFormatError("Failed to read file") from e
    return import_json(text)
