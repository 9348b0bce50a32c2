"""Top-down merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]``.

    Ties are taken from the left run first, so the merge is stable.
    """
    first = values[left : mid + 1]
    second = values[mid + 1 : right + 1]
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    values[left : right + 1] = merged


def _merge_sort(values: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(values, left, mid)
    _merge_sort(values, mid + 1, right)
    merge(values, left, mid, right)


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in ascending order, in place."""
    _merge_sort(values, 0, len(values) - 1)