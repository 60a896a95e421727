"""Queries on a stack: extremes, positions and insertion points."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def find_min(stack: Sequence[int]) -> int:
    """Smallest value in a non-empty stack."""
    return min(stack)


def find_max(stack: Sequence[int]) -> int:
    """Largest value in a non-empty stack."""
    return max(stack)


def index_of(stack: Sequence[int], value: int) -> int:
    """Position of ``value`` from the top, or -1 when it is absent."""
    for position, item in enumerate(stack):
        if item == value:
            return position
    return -1


def insert_index_a(stack: Sequence[int], value: int) -> int:
    """Position in ascending stack a where ``value`` should be pushed.

    Rotating a up by the result and pushing ``value`` keeps a in circular
    ascending order.
    """
    if stack[-1] < value < stack[0]:
        return 0
    if value > find_max(stack) or value < find_min(stack):
        return index_of(stack, find_min(stack))
    for position, (current, following) in enumerate(pairwise(stack), start=1):
        if current <= value <= following:
            return position
    return max(len(stack) - 1, 1)


def insert_index_b(stack: Sequence[int], value: int) -> int:
    """Position in descending stack b where ``value`` should be pushed.

    Rotating b up by the result and pushing ``value`` keeps b in circular
    descending order.
    """
    if stack[0] < value < stack[-1]:
        return 0
    if value > find_max(stack) or value < find_min(stack):
        return index_of(stack, find_max(stack))
    for position, (current, following) in enumerate(pairwise(stack), start=1):
        if current >= value >= following:
            return position
    raise ValueError(f"no insertion point for {value} in stack b")