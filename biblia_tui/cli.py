"""Command line interface: reader, corpus conversion and one-shot lookups."""

import argparse
import logging
from typing import List, Optional

from biblia_tui.config import get_config
from biblia_tui.corpus import load_corpus, merge_corpus_files
from biblia_tui.data.types import CorpusLoadError
from biblia_tui.search import format_result, search

logger = logging.getLogger(__name__)


def cmd_read(args: argparse.Namespace) -> int:
    from biblia_tui.app import BibliaApp

    BibliaApp(corpus_path=getattr(args, "corpus", None)).run()
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    try:
        document = merge_corpus_files(args.input_dir, args.output, args.bible_version)
    except CorpusLoadError as exc:
        logger.error("%s", exc)
        return 1

    print(f"[ok] {args.output}: {len(document.books)} books, {document.verse_count} verses")
    for warning in document.warnings:
        print(f"[warn] {warning}")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    corpus_path = args.corpus or get_config().corpus_path
    if not corpus_path:
        logger.error("No corpus file given (use --corpus or set corpus_path in the config)")
        return 1

    try:
        document = load_corpus(corpus_path)
    except CorpusLoadError as exc:
        logger.error("%s", exc)
        return 1

    result = search(document, " ".join(args.query))
    print(format_result(result))
    return 0 if result.success else 1


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    p = argparse.ArgumentParser(
        prog="biblia-tui",
        description="Bible corpus converter and reference reader",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subs = p.add_subparsers(dest="command")

    s = subs.add_parser("read", help="Open the terminal reader (default)")
    s.add_argument("--corpus", help="Path to a JSON corpus file")
    s.set_defaults(func=cmd_read)

    s = subs.add_parser("convert", help="Convert raw .txt verse files to a JSON corpus")
    s.add_argument("input_dir", help="Directory searched recursively for .txt files")
    s.add_argument("output", help="Output JSON file")
    s.add_argument(
        "--bible-version",
        default=config.bible_version,
        help=f"Version label (default: {config.bible_version})",
    )
    s.set_defaults(func=cmd_convert)

    s = subs.add_parser("lookup", help="Print a verse or range, e.g. 'genesis 1:1-3'")
    s.add_argument("query", nargs="+", help="Reference query")
    s.add_argument("--corpus", help="Path to a JSON corpus file")
    s.set_defaults(func=cmd_lookup)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    func = getattr(args, "func", cmd_read)
    if func is not cmd_read:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(levelname)s: %(message)s",
        )
    return func(args)
