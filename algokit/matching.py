"""Maximum bipartite matching with vertex cover, and maximum-weight assignment."""

from __future__ import annotations

import math
from enum import IntEnum


class Side(IntEnum):
    """Which part of a bipartite graph a vertex belongs to."""

    LEFT = 1
    RIGHT = 2


class BipartiteMatching:
    """Augmenting-path maximum matching between ``n`` left and ``m`` right vertices."""

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("part sizes must be non-negative")
        self.n = n
        self.m = m
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._mx = [-1] * n
        self._my = [-1] * m
        self._visited = [0] * n
        self._stamp = 0
        self._solved = False

    def add_edge(self, x: int, y: int) -> None:
        """Connect left vertex ``x`` with right vertex ``y``."""
        if not 0 <= x < self.n or not 0 <= y < self.m:
            raise IndexError(f"edge ({x}, {y}) out of range")
        self._adj[x].append(y)
        self._solved = False

    def _augment(self, now: int) -> bool:
        self._visited[now] = self._stamp
        for y in self._adj[now]:
            if self._my[y] == -1:
                self._mx[now] = y
                self._my[y] = now
                return True
        for y in self._adj[now]:
            if self._visited[self._my[y]] != self._stamp and self._augment(self._my[y]):
                self._mx[now] = y
                self._my[y] = now
                return True
        return False

    def max_matching(self) -> list[tuple[int, int]]:
        """Pairs ``(x, y)`` of a maximum matching, ordered by left vertex."""
        while True:
            self._stamp += 1
            found = 0
            for i in range(self.n):
                if self._mx[i] == -1 and self._augment(i):
                    found += 1
            if not found:
                break
        self._solved = True
        return [(x, y) for x, y in enumerate(self._mx) if y != -1]

    def min_vertex_cover(self) -> list[tuple[Side, int]]:
        """A minimum vertex cover as ``(side, index)`` pairs (König's theorem)."""
        if not self._solved:
            self.max_matching()
        seen_x = [False] * self.n
        seen_y = [False] * self.m
        stack = [i for i in range(self.n) if self._mx[i] == -1]
        while stack:
            now = stack.pop()
            seen_x[now] = True
            for y in self._adj[now]:
                if self._my[y] != -1 and not seen_y[y]:
                    seen_y[y] = True
                    stack.append(self._my[y])
        cover = [(Side.LEFT, i) for i in range(self.n) if not seen_x[i]]
        cover += [(Side.RIGHT, j) for j in range(self.m) if seen_y[j]]
        return cover


class KuhnMunkres:
    """Maximum-weight perfect matching on an ``n`` x ``n`` weight matrix in O(n^3).

    Missing edges weigh 0. After :meth:`solve`, ``match[j]`` is the left vertex
    assigned to right vertex ``j``.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._w = [[0] * n for _ in range(n)]
        self.match = [-1] * n
        self._lx = [0] * n
        self._ly = [0] * n
        self._slack: list[float] = [math.inf] * n
        self._visx = [0] * n
        self._visy = [0] * n
        self._stamp = 0

    def add_edge(self, x: int, y: int, w: int) -> None:
        """Offer weight ``w`` for pairing left ``x`` with right ``y`` (keeps the maximum)."""
        if not 0 <= x < self.n or not 0 <= y < self.n:
            raise IndexError(f"edge ({x}, {y}) out of range")
        self._w[x][y] = max(self._w[x][y], w)

    def _dfs(self, i: int, aug: bool) -> bool:
        if self._visx[i] == self._stamp:
            return False
        self._visx[i] = self._stamp
        for j in range(self.n):
            if self._visy[j] == self._stamp:
                continue
            d = self._lx[i] + self._ly[j] - self._w[i][j]
            if d == 0:
                self._visy[j] = self._stamp
                if self.match[j] == -1 or self._dfs(self.match[j], aug):
                    if aug:
                        self.match[j] = i
                    return True
            else:
                self._slack[j] = min(self._slack[j], d)
        return False

    def _augment(self) -> bool:
        for j in range(self.n):
            if self._visy[j] != self._stamp and self._slack[j] == 0:
                self._visy[j] = self._stamp
                if self.match[j] == -1 or self._dfs(self.match[j], False):
                    return True
        return False

    def _relabel(self) -> None:
        delta = min(
            (self._slack[j] for j in range(self.n) if self._visy[j] != self._stamp),
            default=math.inf,
        )
        for i in range(self.n):
            if self._visx[i] == self._stamp:
                self._lx[i] -= delta
        for j in range(self.n):
            if self._visy[j] == self._stamp:
                self._ly[j] += delta
            else:
                self._slack[j] -= delta

    def solve(self) -> int:
        """Total weight of a maximum-weight perfect matching."""
        self._lx = [max(row, default=0) for row in self._w]
        self._ly = [0] * self.n
        self.match = [-1] * self.n
        for i in range(self.n):
            self._slack = [math.inf] * self.n
            self._stamp += 1
            if self._dfs(i, True):
                continue
            while not self._augment():
                self._relabel()
            self._stamp += 1
            self._dfs(i, True)
        return sum(self._w[i][j] for j, i in enumerate(self.match) if i != -1)