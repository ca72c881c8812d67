"""Suffix array with LCP queries and k-th distinct substring."""

from __future__ import annotations

from itertools import pairwise

from algokit.rangequery import SparseTable


class SuffixArray:
    """Suffix array ``sa``, adjacent LCP array ``lcp`` and rank array ``pos`` of a string.

    ``lcp[i]`` is the longest common prefix of suffixes ``sa[i]`` and ``sa[i+1]``.
    """

    def __init__(self, s: str) -> None:
        self.s = s
        n = len(s)
        sa = list(range(n))
        rank = [ord(c) for c in s]
        k = 1
        while n:

            def key(i: int) -> tuple[int, int]:
                return rank[i], rank[i + k] if i + k < n else -1

            sa.sort(key=key)
            new_rank = [0] * n
            for prev, cur in pairwise(sa):
                new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
            rank = new_rank
            if rank[sa[-1]] == n - 1:
                break
            k *= 2
        self.sa = sa
        self.pos = [0] * n
        for i, start in enumerate(sa):
            self.pos[start] = i

        self.lcp = [0] * max(n - 1, 0)
        h = 0
        for i in range(n):
            r = self.pos[i]
            if r == 0:
                h = 0
                continue
            j = sa[r - 1]
            while i + h < n and j + h < n and s[i + h] == s[j + h]:
                h += 1
            self.lcp[r - 1] = h
            if h:
                h -= 1
        self._table = SparseTable(self.lcp) if self.lcp else None

    def get_lcp(self, l1: int, r1: int, l2: int, r2: int) -> int:
        """Longest common prefix of s[l1..r1] and s[l2..r2] (inclusive, 0-based)."""
        pos_1, len_1 = self.pos[l1], r1 - l1 + 1
        pos_2, len_2 = self.pos[l2], r2 - l2 + 1
        if pos_1 > pos_2:
            pos_1, pos_2 = pos_2, pos_1
        if l1 == l2 or self._table is None:
            return min(len_1, len_2)
        return min(self._table.query(pos_1, pos_2), len_1, len_2)

    def substring_cmp(self, l1: int, r1: int, l2: int, r2: int) -> int:
        """Negative, zero or positive as s[l1..r1] sorts before, with, or after s[l2..r2].

        Equal substrings are ordered by their start index.
        """
        len_1 = r1 - l1 + 1
        len_2 = r2 - l2 + 1
        res = self.get_lcp(l1, r1, l2, r2)
        if res < len_1 and res < len_2:
            return ord(self.s[l1 + res]) - ord(self.s[l2 + res])
        if res == len_1 and res == len_2:
            return l1 - l2
        return -1 if res == len_1 else 1

    def left_right_lcp(self, p: int) -> tuple[list[int], list[int]]:
        """For each suffix i <= p, LCP with the nearest suffix starting after p in
        sorted order, looking left (first list) and right (second list)."""
        pre = [0] * (p + 1)
        suf = [0] * (p + 1)
        n = len(self.s)
        now = 0
        for i in range(n):
            start = self.sa[i]
            if start <= p:
                pre[start] = now
                if i < len(self.lcp):
                    now = min(now, self.lcp[i])
            elif i < len(self.lcp):
                now = self.lcp[i]
        now = 0
        for i in range(n - 1, -1, -1):
            start = self.sa[i]
            if start <= p:
                suf[start] = now
                if i >= 1:
                    now = min(now, self.lcp[i - 1])
            elif i >= 1:
                now = self.lcp[i - 1]
        return pre, suf


def kth_distinct_substring(s: str, k: int) -> str:
    """The k-th (1-based) lexicographically smallest distinct substring of ``s``."""
    if k < 1:
        raise ValueError("k must be positive")
    n = len(s)
    sa = SuffixArray(s)
    pre_prefix = 0
    now_rank = 0
    for i, start in enumerate(sa.sa):
        add = n - start - pre_prefix
        if now_rank + add >= k:
            return s[start : start + pre_prefix + k - now_rank]
        pre_prefix = sa.lcp[i] if i < len(sa.lcp) else 0
        now_rank += add
    raise ValueError(f"s has fewer than {k} distinct substrings")