"""Simplified timsort: insertion-sorted runs merged bottom-up."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from sortbench.merge import merge

RUN = 32


def insertion_sort(values: MutableSequence[Any], low: int, high: int) -> None:
    """Sort ``values[low:high+1]`` in place by insertion."""
    for i in range(low + 1, high + 1):
        item = values[i]
        j = i - 1
        while j >= low and values[j] > item:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = item


def tim_sort(values: MutableSequence[Any], run: int = RUN) -> None:
    """Sort ``values`` in place using runs of ``run`` items."""
    if run < 1:
        raise ValueError("run length must be positive")
    size = len(values)
    for start in range(0, size, run):
        insertion_sort(values, start, min(start + run - 1, size - 1))
    width = run
    while width < size:
        for left in range(0, size, 2 * width):
            mid = left + width - 1
            right = min(left + 2 * width - 1, size - 1)
            if mid < right:
                merge(values, left, mid, right)
        width *= 2