"""Sorting strategies that drive the stack operations."""

from __future__ import annotations

from typing import Callable

from .positions import move_cost, plan_rotations, target_index
from .stacks import Stacks, is_sorted, lowest_position


def _repeat(move: Callable[[], None], times: int) -> None:
    for _ in range(times):
        move()


def sort2(stacks: Stacks) -> None:
    """Sort two numbers in ``a`` by swapping them."""
    stacks.sa()


def sort3(stacks: Stacks) -> None:
    """Sort the three numbers of ``a`` in at most two moves."""
    if is_sorted(stacks.a):
        return
    if len(stacks.a) < 3:
        raise ValueError("sort3 needs three numbers in stack a")
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and first > third:
        if second > third:
            stacks.sa()
            stacks.rra()
        else:
            stacks.ra()
    elif first > second:
        stacks.sa()
    elif first > third:
        stacks.rra()
    else:
        stacks.sa()
        stacks.ra()


def sort4(stacks: Stacks) -> None:
    """Sort four numbers: park the smallest in ``b``, sort three, bring it back."""
    min_pos = lowest_position(stacks.a)
    if min_pos == 1:
        stacks.sa()
    elif min_pos == 2:
        _repeat(stacks.rra, 2)
    elif min_pos == 3:
        stacks.rra()
    stacks.pb()
    sort3(stacks)
    stacks.pa()


def sort5(stacks: Stacks) -> None:
    """Sort five numbers: park the smallest in ``b``, sort four, bring it back."""
    min_pos = lowest_position(stacks.a)
    if min_pos == 1:
        stacks.sa()
    elif min_pos == 2:
        _repeat(stacks.ra, 2)
    elif min_pos == 3:
        _repeat(stacks.rra, 2)
    elif min_pos == 4:
        stacks.rra()
    stacks.pb()
    sort4(stacks)
    stacks.pa()


def sort_lowest(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its smallest number is on top."""
    size = len(stacks.a)
    lowest = lowest_position(stacks.a)
    if lowest < size // 2:
        _repeat(stacks.ra, lowest)
    else:
        _repeat(stacks.rra, size - lowest)


def best_candidate(stacks: Stacks) -> int:
    """Return the number in ``b`` that is cheapest to move onto ``a``."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    a = list(stacks.a)
    b = list(stacks.b)
    _, value = min(enumerate(b), key=lambda pair: move_cost(a, b, pair[1], pair[0]))
    return value


def organize(stacks: Stacks, element: int) -> None:
    """Rotate both stacks so that ``element`` tops ``b`` and its place in ``a`` is on top."""
    a = list(stacks.a)
    b = list(stacks.b)
    plan = plan_rotations(
        target_index(a, element, "a"), target_index(b, element, "b"), len(a), len(b)
    )
    for move, times in (
        (stacks.rr, plan.rr),
        (stacks.ra, plan.ra),
        (stacks.rb, plan.rb),
        (stacks.rrr, plan.rrr),
        (stacks.rra, plan.rra),
        (stacks.rrb, plan.rrb),
    ):
        _repeat(move, times)


def big_sort(stacks: Stacks) -> None:
    """Push all but three numbers to ``b`` and insert them back cheapest first."""
    while len(stacks.a) > 3:
        stacks.pb()
    sort3(stacks)
    while stacks.b:
        organize(stacks, best_candidate(stacks))
        stacks.pa()
    sort_lowest(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy for the size of ``a`` and sort it."""
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        sort2(stacks)
    elif size == 3:
        sort3(stacks)
    elif size == 4:
        sort4(stacks)
    elif size == 5:
        sort5(stacks)
    else:
        big_sort(stacks)