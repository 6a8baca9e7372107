"""Command-line entry point.

Usage:
  echo '{"a": 1}' | python -m typezero -d typescript
  python -m typezero -i payload.json -d sql --table-name payloads
  python -m typezero -i payload.json -d pydantic > models.py
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import GenerationOptions
from .engine import DIALECT_ALIASES, Dialect, generate_strict
from .errors import ConfigError, InvalidJsonError, UnknownDialectError


def build_parser() -> argparse.ArgumentParser:
    dialects = [d.value for d in Dialect] + sorted(DIALECT_ALIASES)
    parser = argparse.ArgumentParser(prog="typezero", description="Generate typed definitions from JSON")
    parser.add_argument("-i", "--input", default="-", help="Input JSON file (default: stdin)")
    parser.add_argument(
        "-d",
        "--dialect",
        default=Dialect.TYPED_INTERFACE.value,
        choices=dialects,
        help="Target dialect (default: typed-interface)",
    )
    parser.add_argument("--root-name", default=None, help="Name of the root type (default: Root)")
    parser.add_argument("--table-name", default=None, help="Table name for the SQL dialect")
    parser.add_argument(
        "--readonly-arrays",
        action="store_true",
        default=None,
        help="Render TypeScript arrays as ReadonlyArray<T>",
    )
    parser.add_argument(
        "--optional-fields",
        action="store_true",
        default=None,
        help="Render Pydantic fields missing from some samples as Optional[T] = None",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_input(parser: argparse.ArgumentParser, input_path: str) -> str:
    if input_path == "-":
        return sys.stdin.read()
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        parser.error(f"Input file not found: {input_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = GenerationOptions.from_env().with_overrides(
            root_name=args.root_name,
            table_name=args.table_name,
            readonly_arrays=args.readonly_arrays,
            pydantic_optional_fields=args.optional_fields,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    text = read_input(parser, args.input)
    try:
        code = generate_strict(text, args.dialect, options=options)
    except InvalidJsonError as exc:
        source = "stdin" if args.input == "-" else args.input
        print(f"Invalid JSON in {source}: {exc}", file=sys.stderr)
        return 1
    except UnknownDialectError as exc:
        parser.error(str(exc))

    print(code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
