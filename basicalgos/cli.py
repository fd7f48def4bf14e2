"""Command-line entry point: greets, or prints one of the text patterns."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from basicalgos import patterns

GREETING = "Hello World"

_PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "pyramid": patterns.pyramid,
    "centered-triangle": patterns.centered_triangle,
    "inverted-triangle": patterns.inverted_triangle,
    "arrow-right": patterns.arrow_right,
    "arrow-left": patterns.arrow_left,
    "spaced-triangle": patterns.spaced_triangle,
    "spaced-inverted-triangle": patterns.spaced_inverted_triangle,
    "spaced-arrow-right": patterns.spaced_arrow_right,
    "spaced-arrow-left": patterns.spaced_arrow_left,
    "palindromic-pyramid": lambda _size: patterns.palindromic_pyramid(),
    "zigzag": patterns.zigzag,
    "pascal-triangle": patterns.pascal_triangle,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="basicalgos")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help="print a greeting")
    pattern = commands.add_parser("pattern", help="print a text pattern")
    pattern.add_argument("name", choices=sorted(_PATTERNS))
    pattern.add_argument("size", type=int, nargs="?", default=5)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; with no command, print the greeting."""
    args = _parser().parse_args(argv)
    if args.command == "pattern":
        for line in _PATTERNS[args.name](args.size):
            print(line)
    else:
        print(GREETING)
    return 0