"""
Command-line entry point: ``python -m parsefullname "Mr. John Smithe, Jr."``.

Names come from the command line or, when none are given, one per line
from standard input. Results are written as JSON lines or CSV.
"""

import argparse
import csv
import json
import logging
import sys

from parsefullname.parser import NameParser
from parsefullname.services import CaseFixMode, InvalidInputError, NameParserConfig, NameResult, WordListError, WordListService


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parsefullname",
        description="Split full names into title, first, middle and last names, suffix and nickname.",
    )
    parser.add_argument("names", nargs="*", help="Names to parse. Read from stdin, one per line, when omitted.")
    parser.add_argument(
        "--fix-case",
        choices=[mode.value for mode in CaseFixMode],
        default=CaseFixMode.SMART.value,
        help="When to recapitalize the parsed fields.",
    )
    parser.add_argument("--long-lists", action="store_true", help="Use the long prefix, suffix and title lists.")
    parser.add_argument("--word-lists", metavar="PATH", help="YAML file with custom word lists.")
    parser.add_argument("--format", choices=["json", "csv"], default="json", help="Output format.")
    parser.add_argument("--verbose", action="store_true", help="Log parsing details to stderr.")
    return parser


def _read_names(args: argparse.Namespace) -> list[str]:
    if args.names:
        return list(args.names)
    return [line.strip() for line in sys.stdin if line.strip()]


def main(argv=None) -> int:
    args = _build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = NameParserConfig(fix_case_mode=args.fix_case, use_long_lists=args.long_lists)
    try:
        word_lists = WordListService.from_yaml(args.word_lists) if args.word_lists else None
    except WordListError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    name_parser = NameParser(config, word_list_service=word_lists)

    writer = None
    if args.format == "csv":
        writer = csv.DictWriter(sys.stdout, fieldnames=["name", *NameResult.FIELDS])
        writer.writeheader()

    status = 0
    for name in _read_names(args):
        try:
            result = name_parser.parse(name)
        except InvalidInputError as e:
            print(f"error: {name!r}: {e}", file=sys.stderr)
            status = 1
            continue

        if writer is not None:
            writer.writerow({"name": name, **result.to_dict()})
        else:
            print(json.dumps(result.to_dict(), ensure_ascii=False))

    return status


if __name__ == "__main__":
    raise SystemExit(main())
