"""LSD radix sorts for signed integers, in base 10 and base 2**16."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import chain

_DIGIT_BITS = 16
_DIGIT_MASK = (1 << _DIGIT_BITS) - 1


def _distribute(items: list[int], radix: int, digit: Callable[[int], int]) -> list[int]:
    """One stable counting pass keyed on ``digit``."""
    buckets: list[list[int]] = [[] for _ in range(radix)]
    for item in items:
        buckets[digit(item)].append(item)
    return list(chain.from_iterable(buckets))


def _sort_base10(magnitudes: list[int]) -> list[int]:
    if not magnitudes:
        return magnitudes
    largest = max(magnitudes)
    place = 1
    while place <= largest:
        current = place
        magnitudes = _distribute(magnitudes, 10, lambda m: (m // current) % 10)
        place *= 10
    return magnitudes


def _sort_base65536(magnitudes: list[int]) -> list[int]:
    if not magnitudes:
        return magnitudes
    largest = max(magnitudes)
    shift = 0
    while largest >> shift > 0:
        current = shift
        magnitudes = _distribute(
            magnitudes, _DIGIT_MASK + 1, lambda m: (m >> current) & _DIGIT_MASK
        )
        shift += _DIGIT_BITS
    return magnitudes


def _signed_sort(
    values: MutableSequence[int], sort_magnitudes: Callable[[list[int]], list[int]]
) -> None:
    negatives = sort_magnitudes([-v for v in values if v < 0])
    non_negatives = sort_magnitudes([v for v in values if v >= 0])
    values[:] = [-m for m in reversed(negatives)] + non_negatives


def radix_sort_base10(values: MutableSequence[int]) -> None:
    """Sort integers in place, one decimal digit per pass."""
    _signed_sort(values, _sort_base10)


def radix_sort_base65536(values: MutableSequence[int]) -> None:
    """Sort integers in place, sixteen bits per pass."""
    _signed_sort(values, _sort_base65536)