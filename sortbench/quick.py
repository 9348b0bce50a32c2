"""Quicksort with Lomuto partitioning around the last element."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high+1]`` around ``values[high]``.

    Returns the pivot's final index; items before it are ``<=`` the pivot,
    items after it are greater.
    """
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in ascending order, in place."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            index = partition(values, low, high)
            pending.append((index + 1, high))
            pending.append((low, index - 1))