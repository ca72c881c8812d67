import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.treap import TreapNode, build, cut, merge, size, split, to_list


def _check_invariants(t):
    if t is None:
        return 0
    left = _check_invariants(t.left)
    right = _check_invariants(t.right)
    assert t.size == left + right + 1
    for child in (t.left, t.right):
        if child is not None:
            assert t.priority > child.priority
    return t.size


@given(st.lists(st.integers()))
def test_build_round_trip(values):
    t = build(values)
    assert to_list(t) == values
    assert size(t) == len(values)
    assert _check_invariants(t) == len(values)


@given(st.lists(st.integers(), max_size=40), st.integers(min_value=0, max_value=50))
def test_split_then_merge(values, k):
    first, rest = split(build(values), k)
    assert to_list(first) == values[:k]
    assert to_list(rest) == values[k:]
    _check_invariants(first)
    _check_invariants(rest)
    joined = merge(first, rest)
    assert to_list(joined) == values
    _check_invariants(joined)


def test_cut_three_parts():
    values = list(range(10, 20))
    left, middle, right = cut(build(values), 3, 6)
    assert to_list(left) == values[:2]
    assert to_list(middle) == values[2:6]
    assert to_list(right) == values[6:]


def test_cut_and_reorder():
    rng = random.Random(1)
    values = [rng.randint(0, 100) for _ in range(30)]
    left, middle, right = cut(build(values), 5, 12)
    t = merge(merge(middle, left), right)
    assert to_list(t) == values[4:12] + values[:4] + values[12:]
    _check_invariants(t)


def test_empty_treap():
    assert to_list(None) == []
    assert size(None) == 0
    assert split(None, 3) == (None, None)


def test_single_node():
    node = TreapNode(42)
    assert to_list(node) == [42]
    assert size(node) == 1


def test_cut_invalid_range():
    with pytest.raises(ValueError):
        cut(build([1, 2, 3]), 0, 2)
    with pytest.raises(ValueError):
        cut(build([1, 2, 3]), 3, 1)