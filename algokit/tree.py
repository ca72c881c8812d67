"""Rooted-tree queries: binary-lifting LCA, heavy-light decomposition, dominator trees."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def _check_node(n: int, *nodes: int) -> None:
    for u in nodes:
        if not 0 <= u < n:
            raise IndexError(f"node {u} out of range [0, {n})")


class Tree:
    """Undirected tree with ancestor jumps and lowest common ancestors by binary lifting.

    After :meth:`build`, ``parent[v]`` is the parent of ``v`` (the root is its own
    parent) and ``depth[v]`` its distance from the root.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._levels = n.bit_length()
        self._up: list[list[int]] = []
        self.parent: list[int] = [-1] * n
        self.depth: list[int] = [0] * n
        self.root: int | None = None

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge u-v."""
        _check_node(self.n, u, v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def build(self, root: int = 0) -> None:
        """Root the tree at ``root`` and fill the jump tables."""
        _check_node(self.n, root)
        parent = [-1] * self.n
        depth = [0] * self.n
        parent[root] = root
        seen = [False] * self.n
        seen[root] = True
        stack = [root]
        visited = 1
        while stack:
            v = stack.pop()
            for w in self._adj[v]:
                if not seen[w]:
                    seen[w] = True
                    visited += 1
                    parent[w] = v
                    depth[w] = depth[v] + 1
                    stack.append(w)
        if visited != self.n:
            raise ValueError("graph is not connected")
        up = [parent]
        for _ in range(1, self._levels):
            prev = up[-1]
            up.append([prev[p] for p in prev])
        self.parent = parent
        self.depth = depth
        self._up = up
        self.root = root

    def _require_built(self) -> None:
        if self.root is None:
            raise RuntimeError("call build() first")

    def jump(self, u: int, step: int) -> int:
        """Ancestor ``step`` levels above ``u``; steps past the root stop at the root."""
        self._require_built()
        _check_node(self.n, u)
        if step < 0:
            raise ValueError("step must be non-negative")
        step = min(step, self.depth[u])
        for i, row in enumerate(self._up):
            if step >> i & 1:
                u = row[u]
        return u

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._require_built()
        _check_node(self.n, u, v)
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self.jump(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self.parent[u]


class HeavyLight:
    """Heavy-light decomposition of a tree given by adjacency lists.

    ``pos[v]`` is the 0-based position of ``v`` in an order where every heavy
    chain occupies consecutive positions, starting at ``head[v]``.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adjacency)
        if n < 1:
            raise ValueError("tree must have at least one node")
        _check_node(n, root)
        self.n = n
        parent = [-1] * n
        depth = [0] * n
        order: list[int] = []
        seen = [False] * n
        seen[root] = True
        stack = [root]
        while stack:
            v = stack.pop()
            order.append(v)
            for u in adjacency[v]:
                if not seen[u]:
                    seen[u] = True
                    parent[u] = v
                    depth[u] = depth[v] + 1
                    stack.append(u)
        if len(order) != n:
            raise ValueError("adjacency does not describe a connected tree")

        size = [1] * n
        for v in reversed(order):
            if parent[v] != -1:
                size[parent[v]] += size[v]
        heavy = [-1] * n
        for v in range(n):
            best = 0
            for u in adjacency[v]:
                if u != parent[v] and size[u] > best:
                    best = size[u]
                    heavy[v] = u

        head = [0] * n
        pos = [0] * n
        counter = 0
        chain = [(root, root)]
        while chain:
            v, top = chain.pop()
            pos[v] = counter
            counter += 1
            head[v] = top
            lights = [u for u in adjacency[v] if u != parent[v] and u != heavy[v]]
            chain.extend((u, u) for u in reversed(lights))
            if heavy[v] != -1:
                chain.append((heavy[v], top))

        self.parent = parent
        self.depth = depth
        self.size = size
        self.heavy = heavy
        self.head = head
        self.pos = pos

    def path_query(self, a: int, b: int, query: Callable[[int, int], Any]) -> Any:
        """Maximum of ``query(l, r)`` over the inclusive position ranges covering path a-b."""
        _check_node(self.n, a, b)
        head, depth, pos = self.head, self.depth, self.pos
        results = []
        while head[a] != head[b]:
            if depth[head[a]] < depth[head[b]]:
                a, b = b, a
            results.append(query(pos[head[a]], pos[a]))
            a = self.parent[head[a]]
        if depth[a] < depth[b]:
            a, b = b, a
        results.append(query(pos[b], pos[a]))
        return max(results)


class DominatorTree:
    """Immediate dominators of a directed graph from a root (Lengauer-Tarjan).

    After :meth:`build`, ``tree[v]`` is the immediate dominator of ``v``; the root
    maps to itself and vertices unreachable from the root map to -1.
    """

    def __init__(self, n: int, root: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        _check_node(n, root)
        self.n = n
        self.root = root
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self.idom: list[int] = [-1] * n

    def add_edge(self, u: int, v: int) -> None:
        """Add the directed edge u -> v."""
        _check_node(self.n, u, v)
        self._adj[u].append(v)

    def __getitem__(self, x: int) -> int:
        _check_node(self.n, x)
        return self.idom[x]

    def build(self) -> list[int]:
        """Compute and return the immediate dominator of every vertex."""
        n, root = self.n, self.root
        dfn = [-1] * n
        rev = [root]
        par = [-1] * n
        rg: list[list[int]] = [[] for _ in range(n)]
        dfn[root] = 0
        stack = [(root, iter(self._adj[root]))]
        while stack:
            x, it = stack[-1]
            for u in it:
                if dfn[u] == -1:
                    dfn[u] = len(rev)
                    rev.append(u)
                    par[dfn[u]] = dfn[x]
                    rg[dfn[u]].append(dfn[x])
                    stack.append((u, iter(self._adj[u])))
                    break
                rg[dfn[u]].append(dfn[x])
            else:
                stack.pop()

        count = len(rev)
        fa = list(range(count))
        sdom = list(range(count))
        val = list(range(count))
        dom = [-1] * count
        buckets: list[list[int]] = [[] for _ in range(count)]

        def evaluate(x: int) -> int:
            if fa[x] == x:
                return x
            path = []
            y = x
            while fa[fa[y]] != fa[y]:
                path.append(y)
                y = fa[y]
            for z in reversed(path):
                if sdom[val[z]] > sdom[val[fa[z]]]:
                    val[z] = val[fa[z]]
                fa[z] = y
            return val[x]

        for x in range(count - 1, -1, -1):
            for y in rg[x]:
                sdom[x] = min(sdom[x], sdom[evaluate(y)])
            if x > 0:
                buckets[sdom[x]].append(x)
            for u in buckets[x]:
                p = evaluate(u)
                dom[u] = x if sdom[p] == x else p
            if x > 0:
                fa[x] = par[x]

        for x in range(1, count):
            if sdom[x] != dom[x]:
                dom[x] = dom[dom[x]]

        idom = [-1] * n
        idom[root] = root
        for i in range(1, count):
            idom[rev[i]] = rev[dom[i]]
        self.idom = idom
        return idom