"""
Dashboard statistics for a lexicon: counts, tag and part-of-speech
distributions, progress toward a word-count goal, and recent additions.

Usage:
    from glotbase.stats import lexicon_stats

    stats = lexicon_stats(lexicon.words, rules.rules, goal=100)
    print(stats.summary())
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from glotbase.models import AffixRule, WordEntry

DEFAULT_GOAL = 100


@dataclass(slots=True)
class LexiconStats:
    total_words: int = 0
    root_words: int = 0
    derived_words: int = 0
    affix_rules: int = 0
    goal: int = DEFAULT_GOAL
    top_tags: list[tuple[str, int]] = field(default_factory=list)
    pos_counts: Counter = field(default_factory=Counter)  # POS value → count
    recent: list[WordEntry] = field(default_factory=list)  # newest first

    @property
    def completion(self) -> float:
        """Percent of the goal reached, capped at 100."""
        if self.goal <= 0:
            return 100.0
        return min(self.total_words / self.goal * 100, 100.0)

    def summary(self) -> str:
        lines = ["Dashboard"]
        lines.append(f"  Total words:   {self.total_words:,}")
        lines.append(f"  Root words:    {self.root_words:,}")
        lines.append(f"  Derived words: {self.derived_words:,}")
        lines.append(f"  Affix rules:   {self.affix_rules:,}")
        lines.append(f"  Progress:      {self.completion:.0f}% (goal: {self.goal} words)")

        if self.top_tags:
            lines.append("  Top tags:")
            for tag, count in self.top_tags:
                lines.append(f"    {tag:15s} {count:,}")

        if self.pos_counts:
            lines.append("  Parts of speech:")
            for pos, count in self.pos_counts.most_common():
                lines.append(f"    {pos:15s} {count:,}")

        if self.recent:
            lines.append("  Recent additions:")
            for w in self.recent:
                lines.append(f"    {w.romanization:20s} [{w.part_of_speech.value}] {w.definition}")

        return "\n".join(lines)


def lexicon_stats(
    words: list[WordEntry],
    rules: Sequence[AffixRule] = (),
    goal: int = DEFAULT_GOAL,
    top: int = 5,
) -> LexiconStats:
    roots = sum(1 for w in words if w.is_root)

    tag_counts: Counter = Counter()
    for w in words:
        tag_counts.update(w.tags)

    return LexiconStats(
        total_words=len(words),
        root_words=roots,
        derived_words=len(words) - roots,
        affix_rules=len(rules),
        goal=goal,
        top_tags=tag_counts.most_common(top),
        pos_counts=Counter(w.part_of_speech.value for w in words),
        recent=sorted(words, key=lambda w: w.created_at, reverse=True)[:top],
    )
