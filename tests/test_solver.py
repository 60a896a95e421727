from collections import deque
from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.costs import Cost, Direction, Movement
from pushswap.solver import (
    apply_movement,
    is_sorted,
    move_min_to_top,
    solve,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Stacks


def _replay(values, moves):
    stacks = Stacks(values)
    for name in moves:
        getattr(stacks, name)()
    return stacks


def _circularly_ascending(stack):
    items = list(stack)
    if not items:
        return True
    start = items.index(min(items))
    rotated = items[start:] + items[:start]
    return rotated == sorted(items)


@pytest.mark.parametrize(
    "stack, expected",
    [([], True), ([1], True), ([1, 2, 2], True), ([2, 1], False), ([1, 3, 2], False)],
)
def test_is_sorted(stack, expected):
    assert is_sorted(stack) is expected


@pytest.mark.parametrize("values", [list(p) for p in permutations([1, 2, 3])])
def test_sort_three_sorts_every_permutation(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.moves) <= 2


@pytest.mark.parametrize(
    "values, moves",
    [
        ([3, 1, 2], ["ra"]),
        ([2, 3, 1], ["rra"]),
        ([2, 1, 3], ["sa"]),
    ],
)
def test_sort_three_moves(values, moves):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.moves == moves


def test_sort_three_needs_three_elements():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


def test_move_min_to_top_rotates_up_when_near_top():
    stacks = Stacks([3, 4, 1, 2])
    move_min_to_top(stacks)
    assert list(stacks.a) == [1, 2, 3, 4]
    assert set(stacks.moves) == {"ra"}


def test_move_min_to_top_rotates_down_when_near_bottom():
    stacks = Stacks([2, 3, 4, 5, 1])
    move_min_to_top(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert stacks.moves == ["rra"]


def test_apply_movement_to_b_pushes_top():
    stacks = Stacks([1, 4])
    stacks.b = deque([5, 3, 2])
    apply_movement(stacks, Cost(0, 1, Movement.RR), Direction.TO_B)
    assert stacks.moves == ["pb"]
    assert list(stacks.a) == [4]
    assert list(stacks.b) == [1, 5, 3, 2]


@pytest.mark.parametrize("movement", list(Movement))
def test_apply_movement_to_a_keeps_a_ordered(movement):
    stacks = Stacks([1, 3, 5])
    stacks.b = deque([4, 2])
    apply_movement(stacks, Cost(0, 4, movement), Direction.TO_A)
    assert stacks.moves[-1] == "pa"
    assert stacks.a[0] == 4
    assert _circularly_ascending(stacks.a)
    assert list(stacks.b) == [2]


def test_sort_stacks_on_empty_does_nothing():
    stacks = Stacks([])
    sort_stacks(stacks)
    assert stacks.moves == []


def test_sort_stacks_sorts_and_empties_b():
    stacks = Stacks([5, 2, 8, 1, 9, 3, 7])
    sort_stacks(stacks)
    assert list(stacks.a) == [1, 2, 3, 5, 7, 8, 9]
    assert not stacks.b


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []


def test_solve_two_elements_swaps():
    assert solve([2, 1]) == ["sa"]


def test_solve_empty_input():
    assert solve([]) == []


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-1000, 1000), unique=True, max_size=40))
def test_solve_moves_sort_the_input(values):
    moves = solve(values)
    stacks = _replay(values, moves)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b