"""In-place heap sort over a binary max-heap."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def heapify(values: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``values[root]`` down within the first ``size`` items.

    The subtrees below ``root`` must already be max-heaps.
    """
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in ascending order, in place."""
    size = len(values)
    for root in reversed(range(size // 2)):
        heapify(values, size, root)
    for end in reversed(range(1, size)):
        values[0], values[end] = values[end], values[0]
        heapify(values, end, 0)