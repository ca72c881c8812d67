"""Digit DP counting numbers without equal adjacent digits, and knapsack on a tree."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def count_no_adjacent_equal(n: int) -> int:
    """How many integers in [0, n] have no two equal adjacent digits."""
    if n < 0:
        return 0
    digits = [int(c) for c in str(n)]
    length = len(digits)

    @lru_cache(maxsize=None)
    def search(pos: int, pre: int, limit: bool, lead: bool) -> int:
        if pos == length:
            return 1
        top = digits[pos] if limit else 9
        total = 0
        for d in range(top + 1):
            if d == pre and (pre != 0 or not lead):
                continue
            total += search(pos + 1, d, limit and d == top, lead and d == 0)
        return total

    return search(0, 0, True, True)


def count_in_range(lo: int, hi: int) -> int:
    """How many integers in [lo, hi] have no two equal adjacent digits."""
    if lo > hi:
        raise ValueError("lo must not exceed hi")
    return count_no_adjacent_equal(hi) - count_no_adjacent_equal(lo - 1)


def tree_knapsack(
    parents: Sequence[int],
    weights: Sequence[int],
    values: Sequence[int],
    capacity: int,
) -> int:
    """Best total value of an ancestor-closed node set with total weight <= capacity.

    ``parents[i]`` is the parent of node ``i`` or -1 for a root; a node may be
    chosen only together with its parent.
    """
    n = len(parents)
    if len(weights) != n or len(values) != n:
        raise ValueError("parents, weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")

    children: list[list[int]] = [[] for _ in range(n + 1)]
    for i, p in enumerate(parents):
        if not -1 <= p < n or p == i:
            raise ValueError(f"invalid parent {p} for node {i}")
        children[p + 1].append(i + 1)
    w = [0, *weights]
    v = [0, *values]

    order: list[int] = []
    stack = [(0, False)]
    while stack:
        node, done = stack.pop()
        if done:
            order.append(node)
            continue
        stack.append((node, True))
        stack.extend((c, False) for c in reversed(children[node]))
    if len(order) != n + 1:
        raise ValueError("parents do not form a forest")

    sz = [1] * (n + 1)
    dp = [[0] * (capacity + 1)]
    for x in order:
        for c in children[x]:
            sz[x] += sz[c]
        prev = dp[-1]
        skip = dp[len(dp) - sz[x]]
        row = [0] * (capacity + 1)
        for i in range(w[x], capacity + 1):
            row[i] = prev[i - w[x]] + v[x]
        dp.append([max(a, b) for a, b in zip(row, skip)])
    return dp[-1][capacity]