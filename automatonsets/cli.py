"""Command line: load an automaton and show one of its parts."""

from __future__ import annotations

import argparse
import sys

from automatonsets.automaton import AutomatonFormatError, Component, parse_automaton

DEFAULT_AUTOMATON = "{q0,q1},{0,1},{[q0,0,q0],[q0,1,q1],[q1,0,q0],[q1,1,q1]},q0,{q1}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="automatonsets",
        description="Load an automaton and query one of its five parts.",
    )
    parser.add_argument(
        "--automaton",
        default=DEFAULT_AUTOMATON,
        help="automaton text: {states},{alphabet},{transitions},initial,{accepting}",
    )
    parser.add_argument(
        "--option",
        help="part to show, 1 to 5; asked for interactively when omitted",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)

    print("Welcome.\nThe following text is processed as an automaton: " + args.automaton)
    print("\nLoading the automaton:\n")
    try:
        automaton = parse_automaton(args.automaton)
    except AutomatonFormatError as error:
        print(f"Invalid automaton: {error}", file=sys.stderr)
        return 1
    print("Automaton\n")
    print(automaton)

    print("\nSelect the element to query:")
    for part in Component:
        print(f"{part.value}) {part.label}")

    raw = args.option
    if raw is None:
        try:
            raw = input("Option: ")
        except EOFError:
            raw = ""
    try:
        print(automaton.describe(int(raw)))
    except ValueError:
        print("Invalid option", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())