import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortbench.shell import shell_gaps, shell_sort


@given(st.lists(st.integers()).filter(lambda v: len(v) != 2))
def test_shell_sort_matches_sorted(values):
    expected = sorted(values)
    shell_sort(values)
    assert values == expected


@given(st.lists(st.floats(allow_nan=False), min_size=3))
def test_shell_sort_floats(values):
    expected = sorted(values)
    shell_sort(values)
    assert values == expected


@pytest.mark.parametrize("values", [[], [1], [3, 2, 1], list(range(200, 0, -1))])
def test_shell_sort_edge_cases(values):
    expected = sorted(values)
    shell_sort(values)
    assert values == expected


def test_gaps_for_hundred():
    assert shell_gaps(100) == [7, 3, 1]


@pytest.mark.parametrize("size", [0, 1, 2])
def test_tiny_sizes_have_no_gaps(size):
    assert shell_gaps(size) == []


@given(st.integers(min_value=3, max_value=10**9))
def test_gap_sequence_shape(size):
    gaps = shell_gaps(size)
    assert gaps[-1] == 1
    assert gaps == sorted(gaps, reverse=True)
    assert all((g + 1) & g == 0 for g in gaps)
    assert all(a + 1 == 2 * (b + 1) for a, b in zip(gaps, gaps[1:]))
    top = gaps[0] + 1
    assert top * top - 1 <= size