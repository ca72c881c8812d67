"""Static range-minimum sparse table and a Fenwick tree with k-th order lookup."""

from __future__ import annotations

from collections.abc import Sequence


class SparseTable:
    """Range minimum queries over a fixed sequence in O(1)."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("values must be non-empty")
        self._n = len(values)
        self._table = [list(values)]
        for i in range(1, self._n.bit_length()):
            prev = self._table[-1]
            gap = 1 << (i - 1)
            self._table.append([min(x, y) for x, y in zip(prev, prev[gap:])])

    def query(self, lo: int, hi: int) -> int:
        """Minimum of values[lo:hi]."""
        if not 0 <= lo < hi <= self._n:
            raise IndexError(f"invalid range [{lo}, {hi})")
        h = (hi - lo).bit_length() - 1
        row = self._table[h]
        return min(row[lo], row[hi - (1 << h)])


class FenwickTree:
    """Binary indexed tree over positions 1..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def add(self, i: int, delta: int) -> None:
        """Add ``delta`` at 1-based position ``i``."""
        if not 1 <= i <= self._size:
            raise IndexError(f"position {i} out of range")
        while i <= self._size:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, i: int) -> int:
        """Sum of positions 1..i."""
        if not 0 <= i <= self._size:
            raise IndexError(f"position {i} out of range")
        total = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def kth(self, k: int) -> int:
        """Smallest position whose prefix sum reaches ``k`` (counts must be non-negative)."""
        if k < 1 or k > self.prefix_sum(self._size):
            raise ValueError(f"k={k} out of range")
        res = 0
        step = 1 << self._size.bit_length()
        while step:
            nxt = res + step
            if nxt <= self._size and self._tree[nxt] < k:
                res = nxt
                k -= self._tree[nxt]
            step >>= 1
        return res + 1