"""Command line front end: sort numbers with a chosen algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any

from sortkit.comparison import bucket_sort, insertion_sort, merge_sort
from sortkit.counting import counting_sort, counting_sort_with_negatives
from sortkit.quicksort import median_of_three_quicksort, quicksort, randomized_quicksort
from sortkit.radix import radix_sort, radix_sort_with_buckets, radix_sort_with_negatives
from sortkit.trace import render_array, trace_quicksort

DEFAULT_VALUES = ["170", "45", "75", "90", "802", "24", "2", "66"]

_ALGORITHMS: dict[str, Callable[[list[Any]], list[Any]]] = {
    "radix": radix_sort,
    "radix-buckets": radix_sort_with_buckets,
    "radix-negative": radix_sort_with_negatives,
    "counting": counting_sort,
    "counting-negative": counting_sort_with_negatives,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "bucket": bucket_sort,
    "quick": quicksort,
    "quick-median": median_of_three_quicksort,
    "quick-random": randomized_quicksort,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortkit", description="Sort a list of numbers and print the result."
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(_ALGORITHMS),
        default="radix",
        help="sorting algorithm to use (default: radix)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="print every step of a median-of-three quicksort instead",
    )
    parser.add_argument("values", nargs="*", help="numbers to sort")
    return parser


def _print_values(values: Sequence[Any]) -> None:
    print(" ".join(str(value) for value in values))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    raw = args.values or DEFAULT_VALUES
    convert: Callable[[str], Any] = float if args.algorithm == "bucket" and not args.trace else int
    try:
        values = [convert(text) for text in raw]
    except ValueError as exc:
        parser.error(f"invalid number: {exc}")

    if args.trace:
        print(f"Original array: {render_array(values, 0, len(values) - 1)}")
        result, lines = trace_quicksort(values)
        for line in lines:
            print(line)
        print()
        print(f"Final sorted array: {render_array(result, 0, len(result) - 1)}")
        return 0

    try:
        result = _ALGORITHMS[args.algorithm](values)
    except ValueError as exc:
        print(f"sortkit: error: {exc}", file=sys.stderr)
        return 2

    print("Original array:")
    _print_values(values)
    print("Sorted array:")
    _print_values(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())