"""Faces of a straight-line planar graph."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.geometry import Point


class PlanarGraph:
    """Planar embedding with vertices at integer points."""

    def __init__(self, points: Sequence[Point]) -> None:
        self.points = list(points)
        self._adj: list[list[tuple[int, int]]] = [[] for _ in self.points]
        self._origin: list[int] = []

    def add_edge(self, x: int, y: int) -> None:
        """Add the undirected edge x-y."""
        n = len(self.points)
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) out of range")
        eid = len(self._origin)
        self._adj[x].append((y, eid))
        self._adj[y].append((x, eid + 1))
        self._origin.extend((x, y))

    def enumerate_faces(self) -> list[int]:
        """Twice the area of each bounded face; outer faces are skipped."""
        pts = self.points
        total = len(self._origin)
        nxt = [0] * total
        for i, nbrs in enumerate(self._adj):
            nbrs.sort(key=lambda e: (pts[e[0]] - pts[i]).polar_key())
            for (_, prev_id), (_, cur_id) in zip(nbrs[-1:] + nbrs[:-1], nbrs):
                nxt[prev_id] = cur_id ^ 1
        seen = [False] * total
        areas: list[int] = []
        for start in range(total):
            if seen[start]:
                continue
            cycle: list[int] = []
            now = start
            while not seen[now]:
                seen[now] = True
                cycle.append(self._origin[now])
                now = nxt[now]
            cycle.append(cycle[0])
            area = -sum(pts[a].cross(pts[b]) for a, b in zip(cycle, cycle[1:]))
            if area > 0:
                areas.append(area)
        return areas