"""dictcc CLI - Offline German/English dictionary.

Usage:
    python -m dictcc.main --import dictcc_export.txt
    python -m dictcc.main Haus
    python -m dictcc.main --regexp '^hau'
    python -m dictcc.main --fulltext --compact 'feline'
    python -m dictcc.main                 # interactive mode
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from . import config as cfg
from .builder import DictionaryBuilder
from .errors import DictccError, MissingStoreError
from .query import Query, QueryEngine, QueryMode, parse_query
from .schema import OutputFormat

QUIT_COMMAND = "^Q"
SEPARATOR_LINE = "-" * 80


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dictcc",
        description="dictcc - Offline German/English dictionary",
        epilog="If no option nor QUERY is given, dictcc enters interactive mode.",
    )
    parser.add_argument("query", nargs="*", help="Word or pattern to look up")

    build = parser.add_argument_group("Database building options")
    build.add_argument(
        "--import",
        "-i",
        dest="import_file",
        type=Path,
        metavar="DICTCC_FILE",
        help="Import the dict file from dict.cc",
    )

    misc = parser.add_argument_group("Misc options")
    misc.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {__version__}"
    )
    misc.add_argument(
        "--size",
        "-S",
        action="store_true",
        help="Show the number of entries in the databases",
    )
    misc.add_argument(
        "--directory",
        "-d",
        type=Path,
        default=cfg.default_dict_dir(),
        help=f"Use DIRECTORY instead of {cfg.default_dict_dir()}",
    )
    misc.add_argument("--verbose", action="store_true", default=cfg.get_default("verbose", False))
    misc.add_argument("--quiet", "-q", action="store_true", default=cfg.get_default("quiet", False))

    fmt = parser.add_argument_group("Format options")
    fmt.add_argument(
        "--compact",
        "-c",
        action="store_true",
        help="Use compact output format (default: output_format from config)",
    )

    modes = parser.add_argument_group("Query options").add_mutually_exclusive_group()
    modes.add_argument(
        "--simple",
        "-s",
        dest="mode",
        action="store_const",
        const=QueryMode.EXACT,
        help="Translate the word given as QUERY (default)",
    )
    modes.add_argument(
        "--regexp",
        "-r",
        dest="mode",
        action="store_const",
        const=QueryMode.PATTERN,
        help="Translate all words matching the regexp QUERY",
    )
    modes.add_argument(
        "--fulltext",
        "-f",
        dest="mode",
        action="store_const",
        const=QueryMode.FULLTEXT,
        help="Translate all sentences matching the regexp QUERY",
    )
    return parser


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="** %(message)s")


def run_import(args) -> int:
    builder = DictionaryBuilder(
        dict_dir=args.directory,
        ingestor=cfg.default_source_format(),
        progress_interval=cfg.default_progress_interval(),
    )
    stats = builder.build(args.import_file)

    print(f"Lines read: {stats.lines_read:,}")
    for label, count in stats.by_direction.items():
        print(f"  {label}: {count:,} entries ({stats.skipped[label]:,} phrases skipped)")
    if stats.errors:
        print(f"  Malformed lines: {len(stats.errors):,}")
    print(f"Files written: {len(stats.files_written)}")
    return 0


def run_size(engine: QueryEngine) -> int:
    for direction, count in engine.store_sizes().items():
        print(f"{direction.label} Database has {count:,} entries")
    print(f"Total: {engine.entry_count():,}")
    return 0


def interactive_mode(engine: QueryEngine, stdin: TextIO | None = None) -> int:
    stdin = stdin or sys.stdin
    print("Welcome to dictcc's interactive mode. This mode will read from stdin")
    print(f"and print the translations until it reads {QUIT_COMMAND} (literally, not Ctrl-Q).")
    print("=> ", end="", flush=True)
    for line in stdin:
        word = line.rstrip("\n")
        print()
        if word == QUIT_COMMAND:
            break
        try:
            engine.query(parse_query(word))
        except DictccError as e:
            print(f"✗ Error: {e}")
        print(SEPARATOR_LINE)
        print("=> ", end="", flush=True)
    print("Bye.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        if args.import_file is not None:
            return run_import(args)

        if args.compact:
            output_format = OutputFormat.COMPACT
        else:
            output_format = cfg.default_output_format()

        engine = QueryEngine(args.directory, output_format=output_format)

        if args.size:
            return run_size(engine)

        if not args.query:
            return interactive_mode(engine)

        text = " ".join(args.query)
        if args.mode is None:
            query = parse_query(text)
        else:
            query = Query(args.mode, text)
        engine.query(query)
    except MissingStoreError as e:
        print(f"✗ {e}")
        return 1
    except DictccError as e:
        print(f"✗ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
