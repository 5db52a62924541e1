#!/usr/bin/env python3
"""Check a single value against a number-as-string schema."""
import argparse
import json
import sys

from pydantic import ValidationError

from fieldrules import Rejected, number_as_string
from fieldrules.errors import MESSAGES
from fieldrules.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("value", help="Candidate number string")
    parser.add_argument("--separator", choices=[".", ","], help="Allowed decimal separator")
    parser.add_argument("--decimals", type=int, help="Exact number of decimals")
    parser.add_argument("--min-decimals", type=int)
    parser.add_argument("--max-decimals", type=int)
    parser.add_argument("--min", type=float, dest="min_limit")
    parser.add_argument("--max", type=float, dest="max_limit")
    parser.add_argument("--greater", type=float)
    parser.add_argument("--less", type=float)
    parser.add_argument("--no-convert", action="store_true", help="Do not trim whitespace")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(json_output=False)

    if args.decimals is not None and not args.separator:
        print("Error: --decimals needs --separator", file=sys.stderr)
        return 2

    schema = number_as_string()
    try:
        if args.separator:
            schema = schema.decimal_separator(args.separator)
        if args.decimals is not None:
            schema = schema.decimal(args.separator, args.decimals)
        if args.min_decimals is not None:
            schema = schema.min_decimals(args.min_decimals)
        if args.max_decimals is not None:
            schema = schema.max_decimals(args.max_decimals)
        if args.min_limit is not None:
            schema = schema.min(args.min_limit)
        if args.max_limit is not None:
            schema = schema.max(args.max_limit)
        if args.greater is not None:
            schema = schema.greater(args.greater)
        if args.less is not None:
            schema = schema.less(args.less)
    except ValidationError as e:
        print(f"Error: invalid argument: {e}", file=sys.stderr)
        return 2

    outcome = schema.check(args.value, convert=not args.no_convert)
    if isinstance(outcome, Rejected):
        message = MESSAGES[outcome.code].format(**outcome.context)
        print(json.dumps({"valid": False, "code": str(outcome.code), "message": message, **outcome.context}))
        return 1

    print(json.dumps({"valid": True, "value": outcome.value}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
