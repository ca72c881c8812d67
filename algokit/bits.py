"""XOR linear basis, sum over subsets, and submask enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class XorBasis:
    """Linear basis over GF(2) of non-negative integers."""

    def __init__(self) -> None:
        self._basis: list[int] = []

    def _reduce(self, x: int) -> int:
        if x < 0:
            raise ValueError("values must be non-negative")
        for v in self._basis:
            x = min(x, x ^ v)
        return x

    def add(self, x: int) -> bool:
        """Add ``x``; return True if it enlarged the span."""
        x = self._reduce(x)
        if x:
            self._basis.append(x)
            return True
        return False

    def contains(self, x: int) -> bool:
        """Whether ``x`` is the XOR of some subset of the added values."""
        return self._reduce(x) == 0

    def max_xor(self) -> int:
        """Largest value obtainable as a XOR of added values."""
        ans = 0
        for v in sorted(self._basis, reverse=True):
            ans = max(ans, ans ^ v)
        return ans

    def __len__(self) -> int:
        return len(self._basis)


def subset_sums(values: Sequence[int], n: int) -> list[int]:
    """dp[mask] = sum of values[s] over all submasks s of mask; len(values) must be 2**n."""
    if len(values) != 1 << n:
        raise ValueError("values must have length 2**n")
    dp = list(values)
    for i in range(n):
        bit = 1 << i
        for mask in range(1 << n):
            if mask & bit:
                dp[mask] += dp[mask ^ bit]
    return dp


def enumerate_submasks(mask: int) -> Iterator[int]:
    """Yield every submask of ``mask`` in decreasing order, ending with 0."""
    if mask < 0:
        raise ValueError("mask must be non-negative")
    s = mask
    while True:
        yield s
        if s == 0:
            return
        s = (s - 1) & mask