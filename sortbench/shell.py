"""Shell sort with gaps of the form 2**k - 1."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def shell_gaps(size: int) -> list[int]:
    """Return the descending gap sequence used for ``size`` items.

    The largest power of two ``p`` with ``p*p - 1 <= size`` (halved once
    past the bound) starts the sequence ``p-1, p/2-1, ..., 1``. A size of
    two yields no gaps at all.
    """
    power = 1
    while power * power - 1 <= size:
        power *= 2
    power //= 2
    gaps = []
    while power > 1:
        gaps.append(power - 1)
        power //= 2
    return gaps


def shell_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with gapped insertion passes."""
    size = len(values)
    for gap in shell_gaps(size):
        for i in range(gap, size):
            item = values[i]
            j = i
            while j >= gap and values[j - gap] > item:
                values[j] = values[j - gap]
                j -= gap
            values[j] = item