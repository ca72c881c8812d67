"""Rolling hash, prefix function, Z function, Manacher and minimal rotation."""

from __future__ import annotations

import random

HASH_MOD = 10**9 + 7

_START = object()
_SEP = object()


class RollingHash:
    """Polynomial prefix hashes of a string modulo 1e9+7."""

    def __init__(self, s: str, base: int | None = None) -> None:
        self.base = random.randint(100_000, 800_000_000) if base is None else base
        self._pow: list[int] = []
        self._pre: list[int] = []
        p, h = 1, 0
        for i, ch in enumerate(s):
            if i:
                p = p * self.base % HASH_MOD
            h = (h * self.base + ord(ch)) % HASH_MOD
            self._pow.append(p)
            self._pre.append(h)

    def get(self, l: int, r: int) -> int:
        """Hash of s[l..r] inclusive."""
        if not 0 <= l <= r < len(self._pre):
            raise IndexError(f"invalid range [{l}, {r}]")
        if l == 0:
            return self._pre[r]
        return (self._pre[r] - self._pre[l - 1] * self._pow[r - l + 1]) % HASH_MOD


def prefix_function(s: str) -> list[int]:
    """pi[i] = length of the longest proper border of s[:i+1]."""
    n = len(s)
    pi = [0] * n
    for i in range(1, n):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def z_function(s: str) -> list[int]:
    """z[i] = length of the longest common prefix of s and s[i:]; z[0] = len(s)."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    ll = rr = 0
    for i in range(1, n):
        j = min(z[i - ll], rr - i) if i < rr else 0
        while i + j < n and s[j] == s[i + j]:
            j += 1
        z[i] = j
        if i + j > rr:
            ll, rr = i, i + j
    z[0] = n
    return z


def longest_palindrome(s: str) -> str:
    """Leftmost longest palindromic substring (Manacher's algorithm)."""
    t: list[object] = [_START, _SEP]
    for ch in s:
        t.extend((ch, _SEP))
    m = len(t)
    p = [0] * m
    mx = cid = best = center = 0
    for i in range(1, m):
        p[i] = min(p[2 * cid - i], mx - i) if mx > i else 1
        while i + p[i] < m and t[i + p[i]] == t[i - p[i]]:
            p[i] += 1
        if mx < i + p[i]:
            mx, cid = i + p[i], i
        if best < p[i]:
            best, center = p[i], i
    start = (center - best) // 2
    return s[start : start + best - 1]


def min_rotation(s: str) -> int:
    """Start index of the lexicographically smallest rotation of ``s``."""
    n = len(s)
    d = s + s
    a = b = 0
    while b < n:
        for k in range(n):
            if a + k == b or d[a + k] < d[b + k]:
                b += max(0, k - 1)
                break
            if d[a + k] > d[b + k]:
                a = b
                break
        b += 1
    return a