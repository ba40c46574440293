"""The two stacks and the eleven operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


class Stacks:
    """Stacks ``a`` and ``b``, tops on the left, with a log of applied moves.

    ``a`` starts with ``values`` (first value on top) and ``b`` starts empty.
    Every operation that takes effect appends its name to ``moves``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    @staticmethod
    def _swap(stack: deque) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    def sa(self) -> None:
        """Swap the two top numbers of ``a``."""
        if self._swap(self.a):
            self.moves.append("sa")

    def sb(self) -> None:
        """Swap the two top numbers of ``b``; the move is logged even if ``b`` is short."""
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; always logged."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top number goes to the bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top number goes to the bottom."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks up; does nothing unless both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom number goes to the top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom number goes to the top."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; does nothing unless both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(1)
        self.b.rotate(1)
        self.moves.append("rrr")


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` never decrease from one to the next."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some number occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def lowest_position(values: Sequence[int]) -> int:
    """Return the index of the first smallest number, or 0 when empty."""
    items = list(values)
    if not items:
        return 0
    return min(range(len(items)), key=items.__getitem__)