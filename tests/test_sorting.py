import random
from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.positions import move_cost
from pushswap.sorting import (
    best_candidate,
    big_sort,
    organize,
    sort2,
    sort3,
    sort4,
    sort5,
    sort_lowest,
    sort_stacks,
)
from pushswap.stacks import Stacks


def replay(values, moves):
    stacks = Stacks(values)
    operations = {
        "sa": stacks.sa,
        "sb": stacks.sb,
        "ss": stacks.ss,
        "pa": stacks.pa,
        "pb": stacks.pb,
        "ra": stacks.ra,
        "rb": stacks.rb,
        "rr": stacks.rr,
        "rra": stacks.rra,
        "rrb": stacks.rrb,
        "rrr": stacks.rrr,
    }
    for move in moves:
        operations[move]()
    return stacks


def circularly_sorted(values):
    start = values.index(min(values))
    return values[start:] + values[:start] == sorted(values)


def test_sort2():
    stacks = Stacks([2, 1])
    sort2(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.moves == ["sa"]


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort3_all_orders(values):
    stacks = Stacks(values)
    sort3(stacks)
    assert list(stacks.a) == sorted(values)
    assert len(stacks.moves) <= 2
    assert list(replay(values, stacks.moves).a) == sorted(values)


def test_sort3_too_short():
    with pytest.raises(ValueError):
        sort3(Stacks([2, 1]))


@pytest.mark.parametrize("values", list(permutations([4, -2, 7, 0])))
def test_sort4_all_orders(values):
    stacks = Stacks(values)
    sort4(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert list(replay(values, stacks.moves).a) == sorted(values)


@pytest.mark.parametrize("values", list(permutations([5, 1, 4, 2, 3])))
def test_sort5_all_orders(values):
    stacks = Stacks(values)
    sort5(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize("shift", range(6))
def test_sort_lowest(shift):
    ordered = [-5, 0, 3, 8, 12, 40]
    stacks = Stacks(ordered[shift:] + ordered[:shift])
    sort_lowest(stacks)
    assert list(stacks.a) == ordered
    assert len(stacks.moves) <= len(ordered) // 2


def test_best_candidate_empty_b():
    with pytest.raises(ValueError):
        best_candidate(Stacks([1, 2, 3]))


@given(st.lists(st.integers(min_value=-500, max_value=500), min_size=4, max_size=20, unique=True))
def test_best_candidate_is_cheapest(values):
    stacks = Stacks(sorted(values[:3]))
    stacks.b.extend(values[3:])
    a, b = list(stacks.a), list(stacks.b)
    chosen = best_candidate(stacks)
    costs = [move_cost(a, b, v, i) for i, v in enumerate(b)]
    assert chosen in b
    assert costs[b.index(chosen)] == min(costs)
    assert b.index(chosen) == costs.index(min(costs))


@given(
    st.lists(st.integers(min_value=-500, max_value=500), min_size=4, max_size=20, unique=True),
    st.integers(min_value=0, max_value=30),
)
def test_organize_matches_cost_and_keeps_order(values, shift):
    head = sorted(values[:3])
    k = shift % len(head)
    a = head[k:] + head[:k]
    b = values[3:]
    for index, element in enumerate(b):
        stacks = Stacks(a)
        stacks.b.extend(b)
        organize(stacks, element)
        assert len(stacks.moves) == move_cost(a, b, element, index)
        assert stacks.b[0] == element
        stacks.pa()
        assert circularly_sorted(list(stacks.a))


def test_big_sort_hundred():
    values = random.Random(7).sample(range(-1000, 1000), 100)
    stacks = Stacks(values)
    big_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    replayed = replay(values, stacks.moves)
    assert list(replayed.a) == sorted(values)
    assert replayed.moves == stacks.moves


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=-2**31, max_value=2**31 - 1), min_size=3, max_size=40, unique=True))
def test_sort_stacks_sorts(values):
    stacks = Stacks(values)
    sort_stacks(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert list(replay(values, stacks.moves).a) == sorted(values)


def test_sort_stacks_single_value_untouched():
    stacks = Stacks([9])
    sort_stacks(stacks)
    assert list(stacks.a) == [9]
    assert stacks.moves == []