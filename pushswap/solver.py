"""Sorting stack a with the help of stack b using the cheapest-move strategy."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise

from pushswap.costs import Cost, Direction, Movement, best_move_to_a, best_move_to_b
from pushswap.positions import find_min, index_of, insert_index_a, insert_index_b
from pushswap.stacks import Stacks

_Operation = Callable[[Stacks], None]

# For each movement: the rotation of a, the rotation of b, and the combined
# rotation of both when there is one.
_ROTATIONS: dict[Movement, tuple[_Operation, _Operation, _Operation | None]] = {
    Movement.RR: (Stacks.ra, Stacks.rb, Stacks.rr),
    Movement.RARRB: (Stacks.ra, Stacks.rrb, None),
    Movement.RRARB: (Stacks.rra, Stacks.rb, None),
    Movement.RRR: (Stacks.rra, Stacks.rrb, Stacks.rrr),
}


def is_sorted(stack: Sequence[int]) -> bool:
    """Tell whether the stack is in ascending order from the top."""
    return all(current <= following for current, following in pairwise(stack))


def sort_three(stacks: Stacks) -> None:
    """Order the three top elements of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a needs at least three elements")
    a = stacks.a
    if a[0] > a[2] and a[0] > a[1]:
        stacks.ra()
    elif a[1] > a[0] and a[1] > a[2]:
        stacks.rra()
    a = stacks.a
    if a[0] > a[1]:
        stacks.sa()


def move_min_to_top(stacks: Stacks) -> None:
    """Rotate a the shorter way until its smallest value is on top."""
    size = len(stacks.a)
    index = index_of(stacks.a, find_min(stacks.a))
    if index <= size // 2:
        for _ in range(index):
            stacks.ra()
    else:
        for _ in range(size - index):
            stacks.rra()


def apply_movement(stacks: Stacks, cost: Cost, direction: Direction) -> None:
    """Rotate both stacks as ``cost`` says, then push its value across."""
    value = cost.value
    rotate_a, rotate_b, rotate_both = _ROTATIONS[cost.movement]

    if direction is Direction.TO_B:

        def a_pending() -> bool:
            return stacks.a[0] != value

        def b_pending() -> bool:
            return insert_index_b(stacks.b, value) > 0

        push = stacks.pb
    else:

        def a_pending() -> bool:
            return insert_index_a(stacks.a, value) > 0

        def b_pending() -> bool:
            return stacks.b[0] != value

        push = stacks.pa

    steps: list[tuple[Callable[[], bool], _Operation]] = [
        (a_pending, rotate_a),
        (b_pending, rotate_b),
    ]
    if rotate_both is not None:
        while a_pending() and b_pending():
            rotate_both(stacks)
        if direction is Direction.TO_A:
            steps.reverse()
    for pending, rotate in steps:
        while pending():
            rotate(stacks)
    push()


def _fill_b(stacks: Stacks) -> None:
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        apply_movement(stacks, best_move_to_b(stacks.a, stacks.b), Direction.TO_B)


def _empty_b(stacks: Stacks) -> None:
    while stacks.b:
        apply_movement(stacks, best_move_to_a(stacks.a, stacks.b), Direction.TO_A)


def _init_b(stacks: Stacks) -> None:
    if len(stacks.a) <= 3 or is_sorted(stacks.a):
        return
    for _ in range(2):
        if len(stacks.a) > 3:
            stacks.pb()
    if len(stacks.a) > 3:
        _fill_b(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort a in place, using b as scratch space."""
    if not stacks.a:
        return
    _init_b(stacks)
    if stacks.b:
        _empty_b(stacks)
    move_min_to_top(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` onto stack a."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        size = len(stacks.a)
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return stacks.moves