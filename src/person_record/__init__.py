"""person_record: a demonstration person record."""

from __future__ import annotations

import argparse
import sys

from person_record.core import GenericFailure, PersonRecord, RiskyResult, call_risky
from person_record.trials import DEFAULT_TRIALS, TrialStats, run_trials

__version__ = "0.1.0"

__all__ = [
    "GenericFailure",
    "PersonRecord",
    "RiskyResult",
    "TrialStats",
    "call_risky",
    "main",
    "run_trials",
]


def _add_person_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Person name")
    parser.add_argument("age", type=int, help="Person age")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="person-record",
        description="Exercise a demonstration person record.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    show_parser = subparsers.add_parser("show", help="Print the record")
    _add_person_args(show_parser)

    describe_parser = subparsers.add_parser(
        "describe", help="Print the description, which may be absent"
    )
    _add_person_args(describe_parser)

    concat_parser = subparsers.add_parser("concat", help="Join words with spaces")
    concat_parser.add_argument("words", nargs="*", help="Words to join")

    subparsers.add_parser("risky", help="Call the fallible method once")
    subparsers.add_parser("greet", help="Print the static greeting")
    subparsers.add_parser("names", help="List the demo names")
    subparsers.add_parser("scores", help="List the demo scores")

    # trials command - measure the random branch split
    trials_parser = subparsers.add_parser(
        "trials", help="Measure how often describe/risky take each branch"
    )
    _add_person_args(trials_parser)
    trials_parser.add_argument(
        "--n",
        type=int,
        default=DEFAULT_TRIALS,
        help=f"Number of calls per method (default: {DEFAULT_TRIALS})",
    )

    args = parser.parse_args(argv)

    if args.command == "show":
        return cmd_show(args.name, args.age)
    if args.command == "describe":
        return cmd_describe(args.name, args.age)
    if args.command == "concat":
        return cmd_concat(args.words)
    if args.command == "risky":
        return cmd_risky()
    if args.command == "greet":
        return cmd_greet()
    if args.command == "names":
        return cmd_names()
    if args.command == "scores":
        return cmd_scores()
    if args.command == "trials":
        return cmd_trials(args.name, args.age, args.n)

    parser.print_help()
    return 1


def cmd_show(name: str, age: int) -> int:
    """Print the record's string form."""
    print(PersonRecord(name, age))
    return 0


def cmd_describe(name: str, age: int) -> int:
    """Print the description, or a notice when it is absent."""
    description = PersonRecord(name, age).get_description()
    if description is None:
        print("No description available")
    else:
        print(description)
    return 0


def cmd_concat(words: list[str]) -> int:
    """Print the words joined by the record."""
    # Any record will do; concatenate ignores name and age
    print(PersonRecord("", 0).concatenate(*words))
    return 0


def cmd_risky() -> int:
    """Call risky_method once and report the outcome."""
    result = call_risky(PersonRecord("", 0))
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    print(result.value)
    return 0


def cmd_greet() -> int:
    """Print the static greeting; no record is constructed."""
    print(PersonRecord.static_greeting())
    return 0


def cmd_names() -> int:
    """Print one demo name per line."""
    for name in PersonRecord("", 0).get_names():
        print(name)
    return 0


def cmd_scores() -> int:
    """Print the demo scores as name: score lines."""
    for name, score in PersonRecord("", 0).get_scores().items():
        print(f"{name}: {score}")
    return 0


def cmd_trials(name: str, age: int, n: int) -> int:
    """Run repeated calls and report the branch split."""
    from person_record.ui import create_trials_progress

    if n <= 0:
        print(f"Error: --n must be positive, got {n}", file=sys.stderr)
        return 1

    record = PersonRecord(name, age)
    with create_trials_progress() as progress:
        stats = run_trials(record, n, progress)

    print(f"Trials: {stats.trials}")
    print(f"Description absent: {stats.absent_ratio:.1%}")
    print(f"Risky failures: {stats.failure_ratio:.1%}")

    if not stats.within():
        print("Error: branch split outside 40-60%", file=sys.stderr)
        return 1
    return 0
