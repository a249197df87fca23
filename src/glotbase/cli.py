#!/usr/bin/env python3
"""
GlotBase conlang workbench CLI.

Loads the workspace from glotbase.toml by default, or override with flags:

    glotbase --stats
    glotbase --data-dir mylang --list
    glotbase --add tulis --part-of-speech verb --definition "to write"
    glotbase --add-rule Agent --type prefix --replacement 'pe-$ROOT'
    glotbase --derive WORD_ID --apply RULE_ID [RULE_ID ...]
    glotbase --validate ID1 ID2 ID3 --order VSO
    glotbase --export-json exports/ --export-csv exports/
    glotbase --import exports/glotbase-lexicon-2024-05-01T12-00-00.json
"""

import argparse
import logging
import sys
from pathlib import Path

from glotbase.errors import GlotbaseError
from glotbase.models import AffixType, Gender, PartOfSpeech, WordEntry, WordOrder
from glotbase.syntax import ORDER_INFO, STRATEGIES, RICH_SUGGESTIONS, render_sentence, word_role


def _format_word(w: WordEntry) -> str:
    native = f" {w.native_script}" if w.native_script else ""
    return f"  {w.id}  {w.romanization}{native} [{w.part_of_speech.value}] — {w.definition}"


def _print_words(title: str, words: list[WordEntry]) -> None:
    print(f"═══ {title} ({len(words)}) ═══")
    for w in words:
        print(_format_word(w))
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Constructed-language lexicon workbench"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect glotbase.toml)",
    )
    parser.add_argument(
        "--data-dir",
        metavar="DIR",
        help="Workspace data directory (overrides config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    # ── Lexicon ──────────────────────────────────────────────────────────
    parser.add_argument("--stats", action="store_true", help="Show the dashboard")
    parser.add_argument("--list", action="store_true", help="List every word")
    parser.add_argument("--roots", action="store_true", help="List root words")
    parser.add_argument("--search", help="Search romanization, script, definition, etymology")
    parser.add_argument("--tag", help="List words carrying a tag")
    parser.add_argument("--pos", choices=[p.value for p in PartOfSpeech],
                        help="List words with a part of speech")
    parser.add_argument("--add", metavar="ROMANIZATION", help="Add a word")
    parser.add_argument("--part-of-speech", choices=[p.value for p in PartOfSpeech],
                        default=PartOfSpeech.NOUN.value)
    parser.add_argument("--native", default="", help="Native-script form")
    parser.add_argument("--ipa", default="")
    parser.add_argument("--gender", default=Gender.NEUTRAL.value,
                        help="neutral, masculine, feminine, divine or a custom label")
    parser.add_argument("--definition", default="")
    parser.add_argument("--etymology", default="")
    parser.add_argument("--tags", default="", help="Comma-separated tags")
    parser.add_argument("--root-id", help="Mark the new word as derived from this id")
    parser.add_argument("--delete", metavar="WORD_ID", help="Delete a word")

    # ── Affix rules ──────────────────────────────────────────────────────
    parser.add_argument("--rules", action="store_true", help="List affix rules")
    parser.add_argument("--add-rule", metavar="NAME", help="Add an affix rule")
    parser.add_argument("--type", choices=[t.value for t in AffixType],
                        default=AffixType.PREFIX.value)
    parser.add_argument("--replacement", help="Template such as 'me-$ROOT'")
    parser.add_argument("--pattern", default="$ROOT")
    parser.add_argument("--resulting-pos", choices=[p.value for p in PartOfSpeech])
    parser.add_argument("--description", default="")
    parser.add_argument("--example", default="")
    parser.add_argument("--derive", metavar="ROOT_ID", help="Derive words from a root")
    parser.add_argument("--apply", nargs="+", metavar="RULE_ID", help="Rules for --derive")

    # ── Word order ───────────────────────────────────────────────────────
    parser.add_argument("--validate", nargs="+", metavar="WORD_ID",
                        help="Validate the word order of a sentence")
    parser.add_argument("--order", choices=[o.value for o in WordOrder],
                        default=WordOrder.VSO.value)
    parser.add_argument("--strategy", choices=list(STRATEGIES), default=RICH_SUGGESTIONS)

    # ── Exchange ─────────────────────────────────────────────────────────
    parser.add_argument("--export-json", metavar="DIR", help="Export the lexicon as JSON")
    parser.add_argument("--export-csv", metavar="DIR", help="Export the lexicon as CSV")
    parser.add_argument("--import", dest="import_file", metavar="FILE",
                        help="Import words from an exported JSON file")
    return parser


def _workspace_settings(args, parser) -> dict:
    from glotbase.workspace import DEFAULT_DATA_DIR, find_default_config, load_config

    config_path = Path(args.config) if args.config else find_default_config()
    if args.config and not config_path.exists():
        parser.error(f"Config not found: {config_path}")

    settings = load_config(config_path) if config_path is not None else {}
    if args.data_dir or not settings:
        settings["data_dir"] = args.data_dir or DEFAULT_DATA_DIR
    return settings


def main(argv: list[str] | None = None) -> int:
    from glotbase.workspace import Workspace

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _workspace_settings(args, parser)
        # Must precede Workspace(); the stores log while loading
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.get("log_level", "INFO"),
            format="%(levelname)s %(name)s: %(message)s",
        )
        ws = Workspace(**settings)
        _run(args, ws, parser)
    except (GlotbaseError, KeyError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def _run(args, ws, parser) -> None:
    from glotbase.exchange import read_import, write_export

    # ── Mutations first, so listings below show the result ───────────────

    if args.import_file:
        records = read_import(args.import_file)
        added = ws.lexicon.import_words(records)
        print(f"Imported {len(added)} word(s) from {args.import_file}")
        print()

    if args.add:
        tags = [t.strip() for t in args.tags.split(",") if t.strip()]
        word = ws.lexicon.add_word(
            romanization=args.add,
            part_of_speech=args.part_of_speech,
            native_script=args.native,
            ipa=args.ipa,
            gender=args.gender,
            definition=args.definition,
            etymology=args.etymology,
            tags=tags,
            is_root=args.root_id is None,
            root_word_id=args.root_id,
        )
        print(f"Added word {word.id}")
        print(_format_word(word))
        print()

    if args.add_rule:
        if not args.replacement:
            parser.error("--add-rule requires --replacement")
        rule = ws.rules.add_rule(
            name=args.add_rule,
            type=args.type,
            pattern=args.pattern,
            replacement=args.replacement,
            resulting_pos=args.resulting_pos,
            description=args.description,
            example=args.example,
        )
        print(f"Added affix rule {rule.id}: {rule.name} ({rule.type.value}, {rule.replacement})")
        print()

    if args.derive:
        if not args.apply:
            parser.error("--derive requires --apply RULE_ID [RULE_ID ...]")
        added = ws.derive(args.derive, args.apply)
        _print_words(f"Derived from {args.derive}", added)

    if args.delete:
        if ws.lexicon.delete_word(args.delete):
            print(f"Deleted word {args.delete}")
        else:
            print(f"No word with id {args.delete!r}")
        print()

    # ── Listings ─────────────────────────────────────────────────────────

    if args.stats:
        print(ws.stats().summary())
        print()

    if args.list:
        _print_words("Lexicon", ws.lexicon.words)

    if args.roots:
        _print_words("Root words", ws.lexicon.root_words())

    if args.search:
        _print_words(f"Search '{args.search}'", ws.lexicon.search(args.search))

    if args.tag:
        _print_words(f"Tagged '{args.tag}'", ws.lexicon.filter_by_tag(args.tag))

    if args.pos:
        _print_words(f"Part of speech '{args.pos}'", ws.lexicon.filter_by_pos(args.pos))

    if args.rules:
        print(f"═══ Affix rules ({len(ws.rules)}) ═══")
        for r in ws.rules:
            target = f" → {r.resulting_pos.value}" if r.resulting_pos else ""
            print(f"  {r.id}  {r.name} [{r.type.value}] {r.replacement}{target}")
        print()

    # ── Validate ─────────────────────────────────────────────────────────

    if args.validate:
        result = ws.validate(args.validate, args.order, strategy=args.strategy)
        words = [ws.lexicon.require(word_id) for word_id in args.validate]
        info = ORDER_INFO[WordOrder(args.order)]
        print(f"═══ Word order {args.order} ({args.strategy}) ═══")
        print(f"  Expected: {' → '.join(info['pattern'])}  e.g. {info['example']}")
        print(f"  Roles:    {' '.join(word_role(w) for w in words)}")
        print(f"  Sentence: {render_sentence(words, args.order)}")
        print(f"  {'VALID' if result.is_valid else 'INVALID'}")
        for s in result.suggestions:
            print(f"    {s}")
        print()

    # ── Export ───────────────────────────────────────────────────────────

    if args.export_json:
        path = write_export(ws.lexicon.words, args.export_json, "json")
        print(f"Exported {len(ws.lexicon)} word(s) to {path}")

    if args.export_csv:
        path = write_export(ws.lexicon.words, args.export_csv, "csv")
        print(f"Exported {len(ws.lexicon)} word(s) to {path}")

    if not any([
        args.import_file, args.add, args.add_rule, args.derive, args.delete,
        args.stats, args.list, args.roots, args.search, args.tag, args.pos,
        args.rules, args.validate, args.export_json, args.export_csv,
    ]):
        print(ws.summary())


if __name__ == "__main__":
    sys.exit(main())
