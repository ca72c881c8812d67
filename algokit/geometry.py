"""Planar points, lines and polygons: orientation tests, convex hulls and half-planes."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key

EPS = 1e-9


def sign(x: float) -> int:
    """1 for positive, 0 for zero, -1 for negative (floats use a 1e-9 tolerance)."""
    if isinstance(x, float):
        if abs(x) < EPS:
            return 0
        return 1 if x > 0 else -1
    return (x > 0) - (x < 0)


@dataclass(frozen=True)
class Point:
    """Point or vector in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    def dot(self, other: Point) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Z component of the cross product."""
        return self.x * other.y - self.y * other.x

    def rotate(self, other: Point) -> Point:
        """Rotate by the argument of ``other`` (scaled by its length)."""
        return Point(
            self.x * other.x - self.y * other.y, self.x * other.y + self.y * other.x
        )

    def _side(self) -> bool:
        return self.x > 0 if self.y == 0 else self.y < 0

    def polar_key(self) -> _PolarKey:
        """Sort key ordering vectors counter-clockwise by angle."""
        return _PolarKey(self)


class _PolarKey:
    __slots__ = ("p",)

    def __init__(self, p: Point) -> None:
        self.p = p

    def __lt__(self, other: _PolarKey) -> bool:
        a, b = self.p, other.p
        sa, sb = a._side(), b._side()
        if sa == sb:
            return a.x * b.y > b.x * a.y
        return sa < sb

    def __gt__(self, other: _PolarKey) -> bool:
        return other < self


def ori(a: Point, b: Point, c: Point) -> int:
    """Turn from ab to ac: 1 counter-clockwise, 0 collinear, -1 clockwise."""
    return sign((b - a).cross(c - a))


def between(a: Point, b: Point, c: Point) -> bool:
    """Whether ``c`` lies on segment ab."""
    return ori(a, b, c) == 0 and sign((a - c).dot(b - c)) <= 0


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether segments ab and cd share a point."""
    if between(a, b, c) or between(a, b, d) or between(c, d, a) or between(c, d, b):
        return True
    u = ori(a, b, c) * ori(a, b, d)
    v = ori(c, d, a) * ori(c, d, b)
    return u < 0 and v < 0


def arg(p: Point) -> float:
    """Polar angle in [-pi, pi]; 0 for the origin."""
    return math.atan2(p.y, p.x) if (p.x != 0 or p.y != 0) else 0.0


def abs2(p: Point) -> float:
    """Squared length."""
    return p.dot(p)


class Line:
    """Directed line through p1 and p2, also stored as a*x + b*y + c = 0."""

    def __init__(self, p1: Point, p2: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        self.a = p1.y - p2.y
        self.b = p2.x - p1.x
        self.c = -self.a * p1.x - self.b * p1.y

    def ori(self, p: Point) -> int:
        """1 if ``p`` is left of the line, 0 on it, -1 right of it."""
        return sign((self.p2 - self.p1).cross(p - self.p1))

    def parallel(self, other: Line) -> bool:
        """Whether the two lines have the same slope."""
        return (self.p1 - self.p2).cross(other.p1 - other.p2) == 0

    def intersection(self, other: Line) -> Point:
        """Intersection point of two non-parallel lines."""
        u = self.p2 - self.p1
        v = other.p2 - other.p1
        s = other.p1 - self.p1
        den = u.cross(v)
        if den == 0:
            raise ValueError("lines are parallel")
        t = s.cross(v) / den
        return Point(float(self.p1.x) + u.x * t, float(self.p1.y) + u.y * t)


class Polygon:
    """Polygon given by its vertices; convex routines need a CCW hull, no three collinear."""

    def __init__(self, points: Sequence[Point] = ()) -> None:
        self.v: list[Point] = list(points)

    def make_convex_hull(self, simple: bool = True) -> None:
        """Replace the vertices by their CCW convex hull; ``simple`` drops collinear points."""
        limit = 1 if simple else 0
        pts = sorted(set(self.v), key=lambda p: (p.x, p.y))
        hull: list[Point] = []
        for _ in range(2):
            base = len(hull)
            for p in pts:
                while len(hull) >= base + 2 and ori(hull[-2], hull[-1], p) < limit:
                    hull.pop()
                hull.append(p)
            hull.pop()
            pts.reverse()
        self.v = hull

    def in_polygon(self, a: Point, max_pos: float = 10**9 + 5) -> int:
        """1 inside, 0 on the boundary, -1 outside (simple polygon, coordinates < max_pos)."""
        pre = self.v[-1]
        b = Point(max_pos, a.y + 1)
        cnt = 0
        for p in self.v:
            if between(pre, p, a):
                return 0
            if segments_intersect(a, b, pre, p):
                cnt += 1
            pre = p
        return 1 if cnt % 2 else -1

    def in_convex(self, p: Point) -> int:
        """1 inside, 0 on an edge, -1 outside, in O(log n)."""
        v = self.v
        n = len(v)
        if ori(v[0], v[1], p) < 0 or ori(v[0], v[n - 1], p) > 0:
            return -1
        if between(v[0], v[1], p) or between(v[0], v[n - 1], p):
            return 0
        lo, hi = 1, n - 1
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if ori(v[0], v[mid], p) >= 0:
                lo = mid
            else:
                hi = mid
        k = ori(v[lo], v[hi], p)
        return k if k <= 0 else 1

    def cycle_search(self, f: Callable[[int, int], bool]) -> int:
        """Cyclic binary search over the hull vertices; returns a 0-based index."""
        n = len(self.v)
        lo, hi = 0, n
        rv = f(1, 0)
        while hi - lo > 1:
            m = (lo + hi) // 2
            if (rv if f(0, m) else f(m, (m + 1) % n)):
                hi = m
            else:
                lo = m
        return lo if f(lo, hi % n) else hi % n

    def _extremes(self, p: Point) -> tuple[int, int]:
        def gt(neg: int) -> int:
            return self.cycle_search(
                lambda x, y: sign((self.v[x] - self.v[y]).dot(p)) == neg
            )

        return gt(1), gt(-1)

    def line_cut_convex(self, line: Line) -> int:
        """1 if the line crosses the hull, 0 if it only touches, -1 if it misses."""
        p = Point(line.a, line.b)
        i, j = self._extremes(p)
        x, y = -self.v[i].dot(p), -self.v[j].dot(p)
        if line.c < x or y < line.c:
            return -1
        return int(not (line.c == x or line.c == y))

    def _segment_probe(self, line: Line, strict: bool) -> int | None:
        p = Point(line.a, line.b)
        i, j = self._extremes(p)
        v = self.v
        n = len(v)
        x, y = -v[i].dot(p), -v[j].dot(p)
        if line.c < x or y < line.c:
            return -1
        if line.c == x or line.c == y:
            return 0
        if i > j:
            i, j = j, i

        def g(x: int, lim: int) -> int:
            now = 0
            step = 1 << (lim.bit_length() - 1) if lim > 0 else 0
            while step > 0:
                if now + step <= lim:
                    nxt = (x + step) % n
                    prod = line.ori(v[x]) * line.ori(v[nxt])
                    if (prod > 0) if strict else (prod >= 0):
                        x = nxt
                        now += step
                step //= 2
            a, b = v[x], v[(x + 1) % n]
            return -(ori(a, b, line.p1) * ori(a, b, line.p2))

        return max(g(i, j - i), g(j, n - (j - i))) + 2  # offset marks "computed"

    def segment_across_convex(self, line: Line) -> int:
        """1 if some hull edge cuts the segment in two, 0 if it only touches, -1 if apart."""
        res = self._segment_probe(line, strict=False)
        return res - 2 if res is not None and res >= 1 else res

    def segment_pass_convex_interior(self, line: Line) -> int:
        """1 if the segment enters the interior, 0 if it only touches, -1 if outside."""
        if self.in_convex(line.p1) == 1 or self.in_convex(line.p2) == 1:
            return 1
        res = self._segment_probe(line, strict=True)
        if res is None or res < 1:
            return res
        ret = res - 2
        if ret == 0:
            return int(self.in_convex(line.p1) == 0 and self.in_convex(line.p2) == 0)
        return ret

    def convex_tangent_point(self, p: Point) -> tuple[int, int]:
        """Indices of the two tangent points from ``p`` (order not guaranteed)."""
        v = self.v
        n = len(v)
        z = edg = -1

        def check(x: int) -> None:
            nonlocal z, edg
            if v[x] == p:
                z = x
            if between(v[x], v[(x + 1) % n], p):
                edg = x
            if between(v[(x + n - 1) % n], v[x], p):
                edg = (x + n - 1) % n

        def gt(neg: int) -> int:
            def f(x: int, y: int) -> bool:
                check(x)
                check(y)
                return ori(p, v[x], v[y]) == neg

            return self.cycle_search(f)

        x, y = gt(1), gt(-1)
        if z != -1:
            return (z + n - 1) % n, (z + 1) % n
        if edg != -1:
            return edg, (edg + 1) % n
        return x, y


def _angle_cmp(a: Line, b: Line) -> int:
    ka, kb = (a.p2 - a.p1).polar_key(), (b.p2 - b.p1).polar_key()
    return -1 if ka < kb else (1 if kb < ka else 0)


def halfplane_intersection(lines: Sequence[Line]) -> Polygon:
    """Intersection of the half-planes left of each line; empty polygon if degenerate."""
    s = sorted(lines, key=cmp_to_key(_angle_cmp))
    n = len(s)
    if n == 0:
        return Polygon()
    px: list[Point] = [Point(0.0, 0.0)] * n
    q: list[Line] = [s[0]] * n
    lo = hi = 0
    for i in range(1, n):
        while lo < hi and s[i].ori(px[hi - 1]) <= 0:
            hi -= 1
        while lo < hi and s[i].ori(px[lo]) <= 0:
            lo += 1
        hi += 1
        q[hi] = s[i]
        if q[hi].parallel(q[hi - 1]):
            hi -= 1
            if q[hi].ori(s[i].p1) > 0:
                q[hi] = s[i]
        if lo < hi:
            px[hi - 1] = q[hi - 1].intersection(q[hi])
    while lo < hi and q[lo].ori(px[hi - 1]) <= 0:
        hi -= 1
    if hi - lo <= 1:
        return Polygon()
    px[hi] = q[hi].intersection(q[lo])
    return Polygon(px[lo : hi + 1])