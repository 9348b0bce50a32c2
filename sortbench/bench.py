"""Read integers, time one sorting algorithm on them and check the result."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import pairwise
from typing import Any, TextIO

from sortbench.heap import heap_sort
from sortbench.merge import merge_sort
from sortbench.quick import quick_sort
from sortbench.radix import radix_sort_base10, radix_sort_base65536
from sortbench.shell import shell_sort
from sortbench.tim import tim_sort

SortFunction = Callable[[MutableSequence[Any]], None]

ALGORITHMS: dict[str, SortFunction] = {
    "heap": heap_sort,
    "radix10": radix_sort_base10,
    "radix65536": radix_sort_base65536,
    "merge": merge_sort,
    "quick": quick_sort,
    "shell": shell_sort,
    "tim": tim_sort,
}


class UnsortedResultError(AssertionError):
    """Raised when a sorting algorithm leaves its input out of order."""


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return int(float(token))


def _tokens(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield from line.split()


def read_values(stream: TextIO) -> list[int]:
    """Read a count followed by that many numbers from ``stream``.

    Numbers written with a fractional part are truncated toward zero.
    """
    tokens = iter(_tokens(stream))
    try:
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("input holds no item count") from None
    if count < 0:
        raise ValueError(f"item count must not be negative, got {count}")
    values = []
    for token in tokens:
        if len(values) == count:
            break
        values.append(_parse_int(token))
    if len(values) < count:
        raise ValueError(f"expected {count} values, found {len(values)}")
    return values


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def time_sort(algorithm: SortFunction, values: MutableSequence[Any]) -> float:
    """Sort ``values`` in place with ``algorithm`` and return the CPU seconds taken.

    Raises UnsortedResultError if the result is not in order.
    """
    start = time.process_time()
    algorithm(values)
    elapsed = time.process_time() - start
    if not is_sorted(values):
        raise UnsortedResultError("algorithm left the values unsorted")
    return elapsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time a sorting algorithm on a list of integers.",
    )
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding a count and the values (default: standard input)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark from the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.input is None:
            values = read_values(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as stream:
                values = read_values(stream)
    except (OSError, ValueError) as exc:
        print(f"sortbench: {exc}", file=sys.stderr)
        return 2
    try:
        elapsed = time_sort(ALGORITHMS[args.algorithm], values)
    except UnsortedResultError as exc:
        print(f"sortbench: {exc}", file=sys.stderr)
        return 1
    print(f"{elapsed:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())