"""
Command-line interface for printing JSON-encoded shell syntax trees as shell
source.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from loader import LoadError, load_json
from printer import SinkError, fprint


def print_command(args: argparse.Namespace) -> int:
    input_path = Path(args.input).resolve()
    if not input_path.exists():
        sys.stderr.write(f"ERROR: Input file not found: {input_path}\n")
        return 1

    try:
        source = input_path.read_text(encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to read {input_path}: {exc}\n")
        return 1

    try:
        load_result = load_json(source, source_name=str(input_path))
    except LoadError as exc:
        sys.stderr.write(f"ERROR {input_path}: {exc}\n")
        return 1

    if not args.out:
        try:
            fprint(sys.stdout, load_result.ast)
            sys.stdout.write("\n")
            sys.stdout.flush()
        except SinkError as exc:
            sys.stderr.write(f"ERROR: {exc}\n")
            return 1
        except (OSError, ValueError) as exc:
            sys.stderr.write(f"ERROR: Failed to write output: {exc}\n")
            return 1
        return 0

    output_path = Path(args.out)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with output_path.open("w", encoding="utf-8") as out:
            fprint(out, load_result.ast)
            out.write("\n")
    except SinkError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 1
    except OSError as exc:
        sys.stderr.write(f"ERROR: Failed to write {output_path}: {exc}\n")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shunparse", description="Print shell syntax trees as shell source"
    )
    subparsers = parser.add_subparsers(dest="command")

    print_parser = subparsers.add_parser(
        "print", help="Print a JSON-encoded syntax tree as shell source"
    )
    print_parser.add_argument("input", help="Path to the JSON syntax tree")
    print_parser.add_argument(
        "--out",
        help="Output script path (defaults to standard output)",
    )
    print_parser.set_defaults(func=print_command)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
