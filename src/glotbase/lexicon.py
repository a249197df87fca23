"""
The lexicon and affix rule stores.

Each store owns one list, loads it from ``Storage`` when constructed and
writes the whole list back after every change.  Without a ``Storage`` the
store lives in memory only.

Usage:
    from glotbase.lexicon import Lexicon, AffixRuleBook
    from glotbase.storage import Storage

    storage = Storage("glotbase-data")
    lexicon = Lexicon(storage)
    word = lexicon.add_word(romanization="tulis", part_of_speech="verb")
    lexicon.update_word(word.id, definition="to write")
    lexicon.search("write")

    rules = AffixRuleBook(storage)
    rules.add_rule(name="Agent", type="prefix", replacement="pe-$ROOT")
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator

from marshmallow import ValidationError

from glotbase.errors import UnknownRuleError, UnknownWordError
from glotbase.ipa import contains_ipa
from glotbase.models import AffixRule, PartOfSpeech, WordEntry, utcnow
from glotbase.schemas import IMPORT_REGENERATED, AffixRuleSchema, WordEntrySchema
from glotbase.storage import Storage, StorageKey

logger = logging.getLogger(__name__)


def _load_records(storage: Storage | None, key: StorageKey, schema) -> list[dict]:
    """Load and validate a stored list.

    A malformed document reads as empty; a record that fails validation is
    logged and skipped.  Free text is read raw so that a definition shaped
    like a timestamp stays a string; the schema parses the date fields.
    """
    if storage is None:
        return []
    raw = storage.get(key, [], revive_dates=False)
    if not isinstance(raw, list):
        logger.error("Stored %s is not a list; starting empty", key.value)
        return []

    records = []
    for i, item in enumerate(raw):
        try:
            records.append(schema.load(item))
        except ValidationError as e:
            logger.error("Skipping stored %s record %d: %s", key.value, i, e.messages)
    return records


class Lexicon:
    """All word entries, in insertion order."""

    def __init__(self, storage: Storage | None = None):
        self.storage = storage
        self._schema = WordEntrySchema()
        self.words: list[WordEntry] = [
            WordEntry(**record)
            for record in _load_records(storage, StorageKey.LEXICON, self._schema)
        ]

    def _save(self) -> None:
        if self.storage is not None:
            self.storage.set(StorageKey.LEXICON, self._schema.dump(self.words, many=True))

    # ── Mutation ─────────────────────────────────────────────────────────

    def add_word(self, **fields) -> WordEntry:
        """Create an entry with a fresh id and timestamps."""
        word = WordEntry.create(**fields)
        if word.ipa and not contains_ipa(word.ipa):
            logger.debug("IPA for %r contains no IPA symbols: %r", word.romanization, word.ipa)
        self.words.append(word)
        self._save()
        logger.debug("Added %r", word)
        return word

    def update_word(self, word_id: str, **changes) -> WordEntry | None:
        """Merge ``changes`` into an entry and refresh its updated_at.

        Unknown ids are ignored.
        """
        for i, word in enumerate(self.words):
            if word.id == word_id:
                updated = dataclasses.replace(word, **{**changes, "updated_at": utcnow()})
                self.words[i] = updated
                self._save()
                logger.debug("Updated %r", updated)
                return updated
        return None

    def delete_word(self, word_id: str) -> bool:
        """Remove an entry. Words derived from it keep their root_word_id."""
        before = len(self.words)
        self.words = [w for w in self.words if w.id != word_id]
        if len(self.words) == before:
            return False
        self._save()
        logger.debug("Deleted word %s", word_id)
        return True

    def import_words(self, records: Iterable[dict]) -> list[WordEntry]:
        """Add each record as a brand-new entry.

        Ids and timestamps in the records are discarded; nothing is merged
        or deduplicated.  If any record is invalid, none are added.
        """
        added = []
        for record in records:
            fields = {k: v for k, v in record.items() if k not in IMPORT_REGENERATED}
            added.append(WordEntry.create(**fields))
        self.words.extend(added)
        self._save()
        logger.info("Imported %d word(s)", len(added))
        return added

    # ── Queries ──────────────────────────────────────────────────────────

    def get(self, word_id: str) -> WordEntry | None:
        for word in self.words:
            if word.id == word_id:
                return word
        return None

    def require(self, word_id: str) -> WordEntry:
        word = self.get(word_id)
        if word is None:
            raise UnknownWordError(word_id)
        return word

    def search(self, query: str) -> list[WordEntry]:
        """Substring search over romanization, native script, definition
        and etymology.  Native script is matched case-sensitively."""
        needle = query.lower()
        return [
            w for w in self.words
            if needle in w.romanization.lower()
            or query in w.native_script
            or needle in w.definition.lower()
            or needle in w.etymology.lower()
        ]

    def filter_by_tag(self, tag: str) -> list[WordEntry]:
        return [w for w in self.words if tag in w.tags]

    def filter_by_pos(self, pos: PartOfSpeech | str) -> list[WordEntry]:
        pos = PartOfSpeech(pos)
        return [w for w in self.words if w.part_of_speech == pos]

    def root_words(self) -> list[WordEntry]:
        return [w for w in self.words if w.is_root]

    def derived_words(self, root_id: str) -> list[WordEntry]:
        return [w for w in self.words if w.root_word_id == root_id]

    def resolve_root(self, word: WordEntry) -> WordEntry | None:
        """The word's root entry, or None when absent or dangling."""
        if not word.root_word_id:
            return None
        return self.get(word.root_word_id)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.words)

    def __contains__(self, word_id: object) -> bool:
        return any(w.id == word_id for w in self.words)

    def summary(self) -> str:
        roots = sum(1 for w in self.words if w.is_root)
        lines = ["Lexicon"]
        lines.append(f"  Words:   {len(self.words):,}")
        lines.append(f"  Roots:   {roots:,}")
        lines.append(f"  Derived: {len(self.words) - roots:,}")
        return "\n".join(lines)


class AffixRuleBook:
    """All affix rules, in insertion order."""

    def __init__(self, storage: Storage | None = None):
        self.storage = storage
        self._schema = AffixRuleSchema()
        self.rules: list[AffixRule] = [
            AffixRule(**record)
            for record in _load_records(storage, StorageKey.AFFIX_RULES, self._schema)
        ]

    def _save(self) -> None:
        if self.storage is not None:
            self.storage.set(StorageKey.AFFIX_RULES, self._schema.dump(self.rules, many=True))

    def add_rule(self, **fields) -> AffixRule:
        rule = AffixRule.create(**fields)
        self.rules.append(rule)
        self._save()
        logger.debug("Added affix rule %s (%s)", rule.id, rule.name)
        return rule

    def update_rule(self, rule_id: str, **changes) -> AffixRule | None:
        """Merge ``changes`` into a rule; the template is parsed again."""
        for i, rule in enumerate(self.rules):
            if rule.id == rule_id:
                updated = dataclasses.replace(rule, **changes)
                self.rules[i] = updated
                self._save()
                return updated
        return None

    def delete_rule(self, rule_id: str) -> bool:
        before = len(self.rules)
        self.rules = [r for r in self.rules if r.id != rule_id]
        if len(self.rules) == before:
            return False
        self._save()
        return True

    def get(self, rule_id: str) -> AffixRule | None:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None

    def require(self, rule_id: str) -> AffixRule:
        rule = self.get(rule_id)
        if rule is None:
            raise UnknownRuleError(rule_id)
        return rule

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[AffixRule]:
        return iter(self.rules)
