"""Maximum flow (Dinic) with minimum cut, and min-cost maximum flow (SPFA)."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class _Edge:
    to: int
    cap: int
    rev: int


@dataclass(slots=True)
class _CostEdge:
    to: int
    cap: int
    cost: int
    rev: int


def _check_nodes(n: int, *nodes: int) -> None:
    for u in nodes:
        if not 0 <= u < n:
            raise IndexError(f"node {u} out of range [0, {n})")


class Dinic:
    """Maximum flow on a directed graph with integer capacities."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self._graph: list[list[_Edge]] = [[] for _ in range(n)]
        self._level: list[int] = []
        self._it: list[int] = []

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add the directed edge u -> v with capacity ``cap``."""
        _check_nodes(self.n, u, v)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        fwd_index = len(self._graph[u])
        back_index = len(self._graph[v]) + (1 if u == v else 0)
        self._graph[u].append(_Edge(v, cap, back_index))
        self._graph[v].append(_Edge(u, 0, fwd_index))

    def _dfs(self, u: int, t: int, f: float) -> int:
        if u == t:
            return int(f)
        edges = self._graph[u]
        while self._it[u] < len(edges):
            e = edges[self._it[u]]
            if e.cap > 0 and self._level[e.to] == self._level[u] + 1:
                df = self._dfs(e.to, t, min(f, e.cap))
                if df > 0:
                    e.cap -= df
                    self._graph[e.to][e.rev].cap += df
                    return df
            self._it[u] += 1
        return 0

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow as possible from ``s`` to ``t`` and return its value."""
        _check_nodes(self.n, s, t)
        if s == t:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            level = [-1] * self.n
            level[s] = 0
            queue = deque([s])
            while queue:
                u = queue.popleft()
                for e in self._graph[u]:
                    if e.cap > 0 and level[e.to] < 0:
                        level[e.to] = level[u] + 1
                        queue.append(e.to)
            if level[t] < 0:
                return total
            self._level = level
            self._it = [0] * self.n
            while (df := self._dfs(s, t, math.inf)) > 0:
                total += df

    def min_cut(self, s: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
        """Edges of ``edges`` leaving the residual-reachable side of ``s``.

        Call after :meth:`max_flow`; ``edges`` are the graph's edges without capacities.
        """
        _check_nodes(self.n, s)
        seen = [False] * self.n
        seen[s] = True
        stack = [s]
        while stack:
            u = stack.pop()
            for e in self._graph[u]:
                if e.cap > 0 and not seen[e.to]:
                    seen[e.to] = True
                    stack.append(e.to)
        return [(u, v) for u, v in edges if seen[u] and not seen[v]]


class MinCostFlow:
    """Minimum-cost maximum flow using shortest augmenting paths (SPFA)."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self._graph: list[list[_CostEdge]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, cap: int, cost: int) -> None:
        """Add the directed edge u -> v with capacity ``cap`` and unit cost ``cost``."""
        _check_nodes(self.n, u, v)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        fwd_index = len(self._graph[u])
        back_index = len(self._graph[v]) + (1 if u == v else 0)
        self._graph[u].append(_CostEdge(v, cap, cost, back_index))
        self._graph[v].append(_CostEdge(u, 0, -cost, fwd_index))

    def _shortest_path(self, s: int) -> tuple[list[float], list[int], list[int]]:
        dist: list[float] = [math.inf] * self.n
        parent = [-1] * self.n
        parent_edge = [-1] * self.n
        in_queue = [False] * self.n
        dist[s] = 0
        in_queue[s] = True
        queue = deque([s])
        while queue:
            v = queue.popleft()
            in_queue[v] = False
            for i, e in enumerate(self._graph[v]):
                if e.cap > 0 and dist[v] + e.cost < dist[e.to]:
                    dist[e.to] = dist[v] + e.cost
                    parent[e.to] = v
                    parent_edge[e.to] = i
                    if not in_queue[e.to]:
                        in_queue[e.to] = True
                        queue.append(e.to)
        return dist, parent, parent_edge

    def flow(self, s: int, t: int) -> tuple[int, int]:
        """Return ``(max flow, min cost)`` from ``s`` to ``t``."""
        _check_nodes(self.n, s, t)
        if s == t:
            raise ValueError("source and sink must differ")
        total_flow = 0
        total_cost = 0
        while True:
            dist, parent, parent_edge = self._shortest_path(s)
            if dist[t] == math.inf:
                return total_flow, total_cost
            path: list[_CostEdge] = []
            v = t
            while v != s:
                path.append(self._graph[parent[v]][parent_edge[v]])
                v = parent[v]
            pushed = min(e.cap for e in path)
            total_flow += pushed
            total_cost += int(dist[t]) * pushed
            for e in path:
                e.cap -= pushed
                self._graph[e.to][e.rev].cap += pushed