"""Binary trie answering maximum XOR queries."""

from __future__ import annotations


class BinaryTrie:
    """Trie over the ``bits`` lowest bits of non-negative integers."""

    def __init__(self, bits: int = 31) -> None:
        if bits < 1:
            raise ValueError("bits must be positive")
        self.bits = bits
        self._children: list[list[int]] = [[0, 0]]

    def _check(self, n: int) -> None:
        if not 0 <= n < 1 << self.bits:
            raise ValueError(f"{n} does not fit in {self.bits} bits")

    def insert(self, n: int) -> None:
        """Insert ``n``."""
        self._check(n)
        node = 0
        for i in range(self.bits - 1, -1, -1):
            v = n >> i & 1
            nxt = self._children[node][v]
            if not nxt:
                nxt = len(self._children)
                self._children.append([0, 0])
                self._children[node][v] = nxt
            node = nxt

    def max_xor(self, n: int) -> int:
        """Largest ``n ^ x`` over inserted values ``x``."""
        self._check(n)
        if len(self._children) == 1:
            raise ValueError("trie is empty")
        node = ret = 0
        for i in range(self.bits - 1, -1, -1):
            v = n >> i & 1
            other = self._children[node][1 - v]
            if other:
                ret |= 1 << i
                node = other
            else:
                node = self._children[node][v]
        return ret