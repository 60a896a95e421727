import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from pushswap.positions import (
    find_max,
    find_min,
    index_of,
    insert_index_a,
    insert_index_b,
)


def _descents(values):
    """Number of circular descents; at most one means circularly ascending."""
    n = len(values)
    return sum(values[i] > values[(i + 1) % n] for i in range(n))


@st.composite
def rotated_sorted(draw, descending=False):
    values = sorted(draw(st.lists(st.integers(-500, 500), unique=True, min_size=2)))
    if descending:
        values.reverse()
    shift = draw(st.integers(0, len(values) - 1))
    return values[shift:] + values[:shift]


def test_find_min_and_max():
    stack = [4, -2, 9, 0]
    assert find_min(stack) == -2
    assert find_max(stack) == 9


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        find_min([])


def test_index_of_present_and_absent():
    stack = [4, -2, 9, 0]
    assert index_of(stack, 9) == 2
    assert index_of(stack, 4) == 0
    assert index_of(stack, 77) == -1


def test_insert_index_a_between_bottom_and_top_is_zero():
    assert insert_index_a([5, 7, 1, 3], 4) == 0


def test_insert_index_a_new_extreme_goes_before_min():
    stack = [5, 7, 1, 3]
    assert insert_index_a(stack, 100) == index_of(stack, 1)
    assert insert_index_a(stack, -100) == index_of(stack, 1)


def test_insert_index_b_new_extreme_goes_before_max():
    stack = [3, 1, 7, 5]
    assert insert_index_b(stack, 100) == index_of(stack, 7)
    assert insert_index_b(stack, -100) == index_of(stack, 7)


def test_insert_index_b_between_bottom_and_top_is_zero():
    assert insert_index_b([3, 1, 7, 5], 4) == 0


def test_insert_index_b_without_insertion_point_raises():
    with pytest.raises(ValueError):
        insert_index_b([5], 5)


@given(rotated_sorted(), st.integers(-600, 600))
def test_insert_index_a_keeps_circular_order(stack, value):
    assume(value not in stack)
    position = insert_index_a(stack, value)
    assert 0 <= position < len(stack)
    result = list(stack)
    result.insert(position, value)
    assert _descents(result) <= 1


@given(rotated_sorted(descending=True), st.integers(-600, 600))
def test_insert_index_b_keeps_circular_order(stack, value):
    assume(value not in stack)
    position = insert_index_b(stack, value)
    assert 0 <= position < len(stack)
    result = [-v for v in stack]
    result.insert(position, -value)
    assert _descents(result) <= 1


@given(st.lists(st.integers(), unique=True, min_size=1))
def test_index_of_finds_every_element(values):
    for position, value in enumerate(values):
        assert index_of(values, value) == position