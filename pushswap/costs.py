"""Estimating how many rotations bring a value to where it is pushed."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from pushswap.positions import index_of, insert_index_a, insert_index_b


class Movement(Enum):
    """How the two stacks are rotated before a push."""

    RR = 0  # rotate both up
    RARRB = 1  # rotate a up, b down
    RRARB = 2  # rotate a down, b up
    RRR = 3  # rotate both down


class Direction(Enum):
    """Which way a value travels."""

    TO_B = 0
    TO_A = 1


@dataclass(frozen=True)
class Cost:
    """The cheapest way found to push ``value``: ``moves`` rotations of kind ``movement``."""

    moves: int
    value: int
    movement: Movement


def _down_distance(size: int, index: int) -> int:
    return size - index if index else 0


# Pushing a value from b into ascending stack a.


def rarb_cost_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from b into a, rotating both up."""
    return max(insert_index_a(a, value), index_of(b, value))


def rarrb_cost_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from b into a, a up and b down."""
    return _down_distance(len(b), index_of(b, value)) + insert_index_a(a, value)


def rrarb_cost_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from b into a, a down and b up."""
    return _down_distance(len(a), insert_index_a(a, value)) + index_of(b, value)


def rrarrb_cost_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from b into a, rotating both down."""
    return max(
        _down_distance(len(a), insert_index_a(a, value)),
        _down_distance(len(b), index_of(b, value)),
    )


# Pushing a value from a into descending stack b.


def rarb_cost_b(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from a into b, rotating both up."""
    return max(insert_index_b(b, value), index_of(a, value))


def rarrb_cost_b(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from a into b, a up and b down."""
    return _down_distance(len(b), insert_index_b(b, value)) + index_of(a, value)


def rrarb_cost_b(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from a into b, a down and b up."""
    return _down_distance(len(a), index_of(a, value)) + insert_index_b(b, value)


def rrarrb_cost_b(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Rotations to bring ``value`` from a into b, rotating both down."""
    return max(
        _down_distance(len(b), insert_index_b(b, value)),
        _down_distance(len(a), index_of(a, value)),
    )


_Estimator = Callable[[Sequence[int], Sequence[int], int], int]

# Order matters: on equal cost the first kind tried wins.
_TO_B: tuple[tuple[Movement, _Estimator], ...] = (
    (Movement.RR, rarb_cost_b),
    (Movement.RRR, rrarrb_cost_b),
    (Movement.RRARB, rrarb_cost_b),
    (Movement.RARRB, rarrb_cost_b),
)
_TO_A: tuple[tuple[Movement, _Estimator], ...] = (
    (Movement.RR, rarb_cost_a),
    (Movement.RRR, rrarrb_cost_a),
    (Movement.RRARB, rrarb_cost_a),
    (Movement.RARRB, rarrb_cost_a),
)


def _cheapest(
    a: Sequence[int],
    b: Sequence[int],
    candidates: Sequence[int],
    estimators: tuple[tuple[Movement, _Estimator], ...],
    stop_at_zero: bool,
) -> Cost:
    best: Cost | None = None
    for value in candidates:
        for movement, estimate in estimators:
            moves = estimate(a, b, value)
            if best is None or moves < best.moves:
                best = Cost(moves, value, movement)
        if stop_at_zero and best.moves == 0:
            break
    if best is None:
        raise ValueError("no value to move")
    return best


def best_move_to_b(a: Sequence[int], b: Sequence[int]) -> Cost:
    """Cheapest value of a to push onto non-empty b, stopping at a free one."""
    return _cheapest(a, b, a, _TO_B, stop_at_zero=True)


def best_move_to_a(a: Sequence[int], b: Sequence[int]) -> Cost:
    """Cheapest value of b to push onto non-empty a."""
    return _cheapest(a, b, b, _TO_A, stop_at_zero=False)