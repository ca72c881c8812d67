"""Bridges and 2-edge-connected components, biconnected components,
articulation points, and triangle / 4-cycle counting."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


def _check_node(n: int, *nodes: int) -> None:
    for u in nodes:
        if not 0 <= u < n:
            raise IndexError(f"node {u} out of range [0, {n})")


class EdgeBCC:
    """2-edge-connected components and bridges of an undirected multigraph.

    After :meth:`build`: ``components`` lists the vertices of each component,
    ``component_of[v]`` is the component of ``v`` and ``bridges`` holds the bridge
    edges in the order they were added.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.edges: list[tuple[int, int]] = []
        self.components: list[list[int]] = []
        self.component_of: list[int] = [-1] * n
        self.bridges: list[tuple[int, int]] = []

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge u-v; parallel edges are allowed."""
        _check_node(self.n, u, v)
        eid = len(self.edges)
        self.edges.append((u, v))
        self._adj[u].append((v, eid))
        self._adj[v].append((u, eid))

    def build(self) -> list[list[int]]:
        """Find the components and bridges; return the components."""
        n = self.n
        dfn = [0] * n
        low = [0] * n
        is_bridge = [False] * len(self.edges)
        stack: list[int] = []
        components: list[list[int]] = []
        component_of = [-1] * n
        timer = 0
        for root in range(n):
            if dfn[root]:
                continue
            timer += 1
            dfn[root] = low[root] = timer
            stack.append(root)
            frames: list[tuple[int, int, Iterator[tuple[int, int]]]] = [
                (root, -1, iter(self._adj[root]))
            ]
            while frames:
                v, pre, it = frames[-1]
                for x, eid in it:
                    if not dfn[x]:
                        timer += 1
                        dfn[x] = low[x] = timer
                        stack.append(x)
                        frames.append((x, eid, iter(self._adj[x])))
                        break
                    if eid != pre:
                        low[v] = min(low[v], dfn[x])
                else:
                    frames.pop()
                    if low[v] == dfn[v]:
                        if pre != -1:
                            is_bridge[pre] = True
                        cid = len(components)
                        members = []
                        while True:
                            u = stack.pop()
                            members.append(u)
                            component_of[u] = cid
                            if u == v:
                                break
                        components.append(members)
                    if frames:
                        parent = frames[-1][0]
                        low[parent] = min(low[parent], low[v])
        self.components = components
        self.component_of = component_of
        self.bridges = [e for e, flag in zip(self.edges, is_bridge) if flag]
        return components


def vertex_bcc(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Vertex sets of the biconnected components; isolated vertices form none."""
    n = len(adjacency)
    depth = [0] * n
    low = [0] * n
    visited = [False] * n
    stack: list[int] = []
    result: list[list[int]] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        depth[root] = low[root] = 1
        stack.append(root)
        frames: list[tuple[int, int, Iterator[int]]] = [(root, -1, iter(adjacency[root]))]
        while frames:
            v, p, it = frames[-1]
            for u in it:
                if u == p:
                    continue
                if not visited[u]:
                    visited[u] = True
                    depth[u] = low[u] = depth[v] + 1
                    stack.append(u)
                    frames.append((u, v, iter(adjacency[u])))
                    break
                low[v] = min(low[v], depth[u])
            else:
                frames.pop()
                if not frames:
                    stack.clear()
                    continue
                pv = frames[-1][0]
                low[pv] = min(low[pv], low[v])
                if low[v] >= depth[pv]:
                    block = []
                    while True:
                        w = stack.pop()
                        block.append(w)
                        if w == v:
                            break
                    block.append(pv)
                    result.append(block)
    return result


@dataclass(slots=True)
class _Frame:
    node: int
    pre: int
    edges: Iterator[int]
    children: int = 0
    cut: bool = False


def articulation_points(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Sorted list of the vertices whose removal disconnects their component."""
    n = len(adjacency)
    visited = [False] * n
    dep = [0] * n
    low = [0] * n
    result: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        frames = [_Frame(root, root, iter(adjacency[root]))]
        while frames:
            fr = frames[-1]
            v = fr.node
            for x in fr.edges:
                if x == fr.pre:
                    continue
                if not visited[x]:
                    fr.children += 1
                    visited[x] = True
                    dep[x] = low[x] = dep[v] + 1
                    frames.append(_Frame(x, v, iter(adjacency[x])))
                    break
                low[v] = min(low[v], dep[x])
            else:
                frames.pop()
                if (v == fr.pre and fr.children >= 2) or (v != fr.pre and fr.cut):
                    result.append(v)
                if frames:
                    parent = frames[-1]
                    low[parent.node] = min(low[parent.node], low[v])
                    if low[v] >= dep[parent.node]:
                        parent.cut = True
    return sorted(result)


def count_c3_c4(n: int, edges: Sequence[tuple[int, int]]) -> tuple[int, int]:
    """Number of triangles and of 4-cycles in a simple undirected graph, O(m sqrt m)."""
    deg = [0] * n
    for u, v in edges:
        _check_node(n, u, v)
        if u == v:
            raise ValueError("self-loops are not allowed")
        deg[u] += 1
        deg[v] += 1
    order = sorted(range(n), key=lambda x: -deg[x])
    rank = [0] * n
    for i, x in enumerate(order):
        rank[x] = i
    down: list[list[int]] = [[] for _ in range(n)]
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if rank[u] > rank[v]:
            u, v = v, u
        down[u].append(v)
        adj[u].append(v)
        adj[v].append(u)

    vis = [0] * n
    c3 = 0
    for x in order:
        for y in down[x]:
            vis[y] = 1
        for y in down[x]:
            for z in down[y]:
                c3 += vis[z]
        for y in down[x]:
            vis[y] = 0

    c4 = 0
    for x in order:
        for y in down[x]:
            for z in adj[y]:
                if rank[z] > rank[x]:
                    c4 += vis[z]
                    vis[z] += 1
        for y in down[x]:
            for z in adj[y]:
                if rank[z] > rank[x]:
                    vis[z] -= 1
    return c3, c4