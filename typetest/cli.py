"""Command line interface for the typing test."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from typing import Callable, Sequence

from typetest.scoring import compare_accuracy, words_per_minute
from typetest.sentences import (
    generate_reference_quote,
    generate_reference_string,
    generate_reference_string_api,
)
from typetest.storage import ResultStore


class RunType(enum.Enum):
    """Where the sentence to type comes from."""

    API = "api"
    QUOTE = "quote"
    NORMAL = "normal"


def _read_answer(input_func: Callable[[], str]) -> str:
    try:
        return input_func()
    except EOFError:
        return ""


def run_typing_test(
    num_words: int = -1,
    run_type: RunType = RunType.NORMAL,
    store: ResultStore | None = None,
    input_func: Callable[[], str] = input,
    clock: Callable[[], float] = time.perf_counter,
) -> tuple[float, float]:
    """Run one typing test, record it and return (accuracy %, WPM)."""
    if run_type is RunType.API:
        reference = generate_reference_string_api(num_words)
    elif run_type is RunType.QUOTE:
        reference = generate_reference_quote()
    else:
        reference = generate_reference_string(num_words)
    if not reference:
        raise ValueError("no sentence available to type")

    print(f"Your sentence is: {reference}")
    start = clock()
    answer = _read_answer(input_func)
    elapsed = clock() - start

    accuracy = compare_accuracy(reference, answer) * 100
    wpm = words_per_minute(elapsed, len(reference) / 5.0)
    print(f"Your accuracy is: {accuracy:g}%, in {elapsed:g}s")
    print(f"Your calculated WPM is: {wpm:g}")
    (store or ResultStore()).record(accuracy, wpm)
    return accuracy, wpm


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Typing Test")
    commands = parser.add_subparsers(dest="command")
    run = commands.add_parser("run", help="Run a typing test")
    run.add_argument(
        "num_words", nargs="?", type=int, default=-1,
        help="Number of words to be used for typing test",
    )
    run.add_argument("-a", dest="api", action="store_true", help="Flag used to check for API request")
    run.add_argument("-q", dest="quote", action="store_true", help="Flag used to check for quote request")
    commands.add_parser("total_runs", help="Get total number of typing test runs")
    commands.add_parser("accuracy", help="Gets average accuracy from all typing test runs")
    commands.add_parser("wpm", help="Gets average wpm from all typing test runs")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``typetest`` command."""
    args = _build_parser().parse_args(argv)
    store = ResultStore()

    if args.command == "run":
        if args.api:
            run_type = RunType.API
        elif args.quote:
            run_type = RunType.QUOTE
        else:
            run_type = RunType.NORMAL
        try:
            run_typing_test(args.num_words, run_type, store)
        except ValueError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
    elif args.command == "total_runs":
        print(store.num_runs())
    elif args.command == "accuracy":
        print(f"Your average accuracy is: {store.average_accuracy():g}")
    elif args.command == "wpm":
        print(f"Your average wpm is: {store.average_wpm():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())