import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.heap import heap_sort, heapify


def _is_max_heap(values, size):
    return all(
        values[(child - 1) // 2] >= values[child] for child in range(1, size)
    )


@given(st.lists(st.integers(min_value=-(2**63), max_value=2**63 - 1)))
def test_heap_sort_matches_sorted(values):
    expected = sorted(values)
    heap_sort(values)
    assert values == expected


@given(st.lists(st.floats(allow_nan=False)))
def test_heap_sort_floats(values):
    expected = sorted(values)
    heap_sort(values)
    assert values == expected


@pytest.mark.parametrize(
    "values",
    [[], [7], [2, 1], [5, 5, 5, 5], list(range(50)), list(range(50, 0, -1))],
)
def test_heap_sort_edge_cases(values):
    expected = sorted(values)
    heap_sort(values)
    assert values == expected


@given(st.lists(st.integers()))
def test_heapify_builds_max_heap(values):
    original = sorted(values)
    size = len(values)
    for root in reversed(range(size // 2)):
        heapify(values, size, root)
    assert _is_max_heap(values, size)
    assert sorted(values) == original


def test_heapify_sifts_root_down():
    values = [1, 9, 8, 4, 5, 6, 7]
    heapify(values, len(values), 0)
    assert values[0] == 9
    assert _is_max_heap(values, len(values))


def test_heapify_respects_size_limit():
    values = [1, 2, 3, 100]
    heapify(values, 3, 0)
    assert values[3] == 100
    assert values[0] == 3