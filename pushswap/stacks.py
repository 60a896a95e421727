"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _swap(stack: deque[int]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top at index 0, with a log of applied operations.

    Every operation that takes effect appends its name to :attr:`moves`.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str) -> None:
        self.moves.append(name)

    # swaps

    def sa(self) -> None:
        """Swap the two top elements of a; nothing happens with fewer than two."""
        if len(self.a) < 2:
            return
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of b; nothing happens with fewer than two."""
        if len(self.b) < 2:
            return
        _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks, only if each holds at least two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _swap(self.a)
        _swap(self.b)
        self._record("ss")

    # pushes

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    # rotations

    def ra(self) -> None:
        """Shift a up by one: the top becomes the bottom.

        Stack a must not be empty; a single element is left in place but the
        operation is still recorded.
        """
        if not self.a:
            raise IndexError("cannot rotate an empty stack a")
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Shift b up by one; nothing happens with fewer than two elements."""
        if len(self.b) < 2:
            return
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks, provided b holds at least two elements."""
        if len(self.b) < 2:
            return
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Shift a down by one: the bottom becomes the top.

        Stack a must not be empty; a single element is left in place but the
        operation is still recorded.
        """
        if not self.a:
            raise IndexError("cannot reverse-rotate an empty stack a")
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Shift b down by one; nothing happens with fewer than two elements."""
        if len(self.b) < 2:
            return
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks, provided b holds at least two elements."""
        if len(self.b) < 2:
            return
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr")