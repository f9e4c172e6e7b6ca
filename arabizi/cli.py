#!/usr/bin/env python3
"""
Arabizi Transliterator CLI

Command-line interface for converting Latin-alphabet Arabic into Arabic script.

Usage:
    python -m arabizi <text> [options]
    python -m arabizi "salam 3alaykum"
    echo "7abibi" | python -m arabizi
    python -m arabizi --files notes.txt chat.txt      # convert files
    python -m arabizi --files notes.txt -o ./out       # save converted files

Options:
    -c, --config PATH    JSON settings file (default: built-in rules)
    --files              Treat sources as text file paths
    -o, --output DIR     With --files, save results to DIR instead of printing
    --length-priority    Apply longer rules first instead of list order
    --show-rules         Print the active rules as JSON
    --init-config PATH   Write the default settings to PATH
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigError, dumps_rules, load_config, save_config
from .core import Transliterator
from .rules import Configuration


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="arabizi",
        description=(
            "Arabizi Transliterator\n\n"
            "Converts Latin-alphabet Arabic (\"Arabizi\") into Arabic script\n"
            "by applying an ordered list of from -> to rules to each word."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m arabizi \"marhaba ya 7abibi\"\n"
            "  python -m arabizi -c my_rules.json \"shukran\"\n"
            "  python -m arabizi --length-priority \"shams\"\n"
            "  python -m arabizi --files chat.txt -o ./arabic_out\n"
            "  python -m arabizi --init-config ~/.arabizi.json\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Text to convert (or file paths with --files); reads stdin if empty",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="JSON settings file (default: built-in rules)",
    )
    parser.add_argument(
        "--files",
        action="store_true",
        help="Treat sources as paths of UTF-8 text files",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="With --files, write <name>.ar.txt files to this directory",
    )
    parser.add_argument(
        "--length-priority",
        action="store_true",
        help="Apply rules longest-first instead of in list order",
    )
    parser.add_argument(
        "--show-rules",
        action="store_true",
        help="Print the active rules as JSON and exit",
    )
    parser.add_argument(
        "--init-config",
        metavar="PATH",
        default=None,
        help="Write the default settings to PATH and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.init_config:
        path = save_config(Configuration(), Path(args.init_config).expanduser())
        print(f"[SAVED] {path}")
        return 0

    try:
        config = load_config(Path(args.config).expanduser()) if args.config else Configuration()
    except ConfigError as e:
        print(f"[ERROR] {args.config}: {e}", file=sys.stderr)
        return 1

    if args.length_priority:
        config = config.replace(apply_rules_in_order=False)

    if args.show_rules:
        print(dumps_rules(config.rules))
        return 0

    engine = Transliterator(config)

    if not args.sources:
        sys.stdout.write(engine.convert_text(sys.stdin.read()))
        return 0

    if not args.files:
        print(engine.convert_text(" ".join(args.sources)))
        return 0

    return _convert_files(engine, args.sources, args.output)


def _convert_files(engine: Transliterator, sources: list[str], output_dir=None) -> int:
    """Convert each file, printing or saving the result; returns the exit status."""
    out_dir = Path(output_dir) if output_dir else None
    if out_dir:
        out_dir.mkdir(parents=True, exist_ok=True)

    success_count = 0
    error_count = 0

    for source in sources:
        try:
            converted = engine.convert_file(source)
        except OSError as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        if out_dir:
            out_path = out_dir / f"{Path(source).stem}.ar.txt"
            out_path.write_text(converted, encoding="utf-8")
            print(f"[SAVED] {out_path}")
        else:
            print(converted)
        success_count += 1

    if out_dir:
        print("-" * 60)
        print(f"  Done: {success_count} converted, {error_count} errors")
        print(f"  Output: {out_dir}")
        print("-" * 60)

    return 1 if error_count else 0


if __name__ == "__main__":
    sys.exit(main())
