"""Where a number belongs in a stack, and what moving it there costs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .stacks import lowest_position


def max_position(values: Sequence[int]) -> int:
    """Return the index of the first largest number; raises ValueError when empty."""
    items = list(values)
    if not items:
        raise ValueError("max_position() of an empty stack")
    return max(range(len(items)), key=items.__getitem__)


def target_index(values: Sequence[int], number: int, side: str) -> int:
    """Return the index that matters for ``number`` in a stack.

    On side ``"b"`` it is the position of ``number`` itself. On side ``"a"``
    it is the position at which ``number`` would be inserted to keep the
    circularly sorted stack in order. An empty stack gives 0.
    """
    if side not in ("a", "b"):
        raise ValueError(f"side must be 'a' or 'b', not {side!r}")
    items = list(values)
    if not items:
        return 0
    index_low = lowest_position(items)
    lowest = items[index_low]
    index_max = max_position(items)
    following = items[1:] + [None]
    for index, (value, after) in enumerate(zip(items, following)):
        if side == "b" and value == number:
            return index
        if side == "a" and after is not None and value < number < after:
            return index + 1
        if side == "a" and index == index_low and lowest > number:
            return index
        if index == index_max and value < number:
            return index + 1
    return 0


@dataclass(frozen=True)
class Rotations:
    """How many times each rotation is applied to line up both stacks."""

    rr: int = 0
    ra: int = 0
    rb: int = 0
    rrr: int = 0
    rra: int = 0
    rrb: int = 0

    @property
    def total(self) -> int:
        return self.rr + self.ra + self.rb + self.rrr + self.rra + self.rrb


def plan_rotations(index_a: int, index_b: int, size_a: int, size_b: int) -> Rotations:
    """Plan rotations bringing ``index_a`` and ``index_b`` to the tops of their stacks.

    Positions in the upper half are rotated up, the others down, and
    rotations both stacks need are shared.
    """
    half_a, half_b = size_a // 2, size_b // 2
    rr = ra = rb = rrr = rra = rrb = 0
    if index_a <= half_a or index_b <= half_b:
        if index_a <= half_a and index_b <= half_b:
            rr = min(index_a, index_b)
            index_a -= rr
            index_b -= rr
        if index_a <= half_a:
            ra = index_a
            index_a = 0
        if index_b <= half_b:
            rb = index_b
            index_b = 0
    if index_a > half_a or index_b > half_b:
        if index_a > half_a and index_b > half_b:
            rrr = max(0, min(size_a - index_a, size_b - index_b))
            index_a += rrr
            index_b += rrr
        if index_a > half_a and index_a < size_a:
            rra = size_a - index_a
            index_a = size_a
        if index_b > half_b and index_b < size_b:
            rrb = size_b - index_b
            index_b = size_b
    return Rotations(rr=rr, ra=ra, rb=rb, rrr=rrr, rra=rra, rrb=rrb)


def move_cost(a: Sequence[int], b: Sequence[int], value: int, index_b: int) -> int:
    """Count the rotations needed before ``value``, at ``index_b`` in ``b``, can go onto ``a``."""
    items_a = list(a)
    index_a = target_index(items_a, value, "a")
    return plan_rotations(index_a, index_b, len(items_a), len(b)).total