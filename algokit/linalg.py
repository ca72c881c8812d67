"""Modular matrices, GF(2) matrices, Lagrange interpolation and Berlekamp-Massey."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_MOD = 998244353


class Matrix:
    """Dense matrix with entries modulo a prime ``mod``."""

    def __init__(self, rows: int, cols: int, mod: int = DEFAULT_MOD) -> None:
        self.rows = rows
        self.cols = cols
        self.mod = mod
        self.data = [[0] * cols for _ in range(rows)]

    def __getitem__(self, i: int) -> list[int]:
        return self.data[i]

    def __mul__(self, other: Matrix) -> Matrix:
        if self.cols != other.rows:
            raise ValueError("matrix dimensions do not match")
        if self.mod != other.mod:
            raise ValueError("matrices use different moduli")
        result = Matrix(self.rows, other.cols, self.mod)
        columns = list(zip(*other.data)) if other.rows else [()] * other.cols
        result.data = [
            [sum(x * y for x, y in zip(row, col)) % self.mod for col in columns]
            for row in self.data
        ]
        return result

    def _require_square(self) -> None:
        if self.rows != self.cols:
            raise ValueError("matrix must be square")

    def power(self, p: int) -> Matrix:
        """Return this matrix raised to the non-negative power ``p``."""
        self._require_square()
        if p < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix(self.rows, self.rows, self.mod)
        for i in range(self.rows):
            result.data[i][i] = 1
        base = self
        while p:
            if p & 1:
                result = result * base
            base = base * base
            p >>= 1
        return result

    def det(self) -> int:
        """Determinant modulo ``mod`` by Gaussian elimination."""
        self._require_square()
        mod = self.mod
        n = self.rows
        arr = [[x % mod for x in row] for row in self.data]
        flipped = False
        for i in range(n):
            target = next((j for j in range(i, n) if arr[j][i]), None)
            if target is None:
                return 0
            if target != i:
                arr[i], arr[target] = arr[target], arr[i]
                flipped = not flipped
            inv = pow(arr[i][i], mod - 2, mod)
            pivot = arr[i]
            for j in range(i + 1, n):
                row = arr[j]
                if not row[i]:
                    continue
                freq = row[i] * inv % mod
                for k in range(i, n):
                    row[k] = (row[k] - freq * pivot[k]) % mod
        ret = mod - 1 if flipped else 1
        for i in range(n):
            ret = ret * arr[i][i] % mod
        return ret


class BitMatrix:
    """Matrix over GF(2) with rows stored as integer bitsets."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._bits = [0] * rows

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"index {key} out of range")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._check(key)
        return self._bits[i] >> j & 1

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._check(key)
        if value & 1:
            self._bits[i] |= 1 << j
        else:
            self._bits[i] &= ~(1 << j)

    def __mul__(self, other: BitMatrix) -> BitMatrix:
        if self.cols != other.rows:
            raise ValueError("matrix dimensions do not match")
        columns = [0] * other.cols
        for i, row in enumerate(other._bits):
            for j in range(other.cols):
                if row >> j & 1:
                    columns[j] |= 1 << i
        result = BitMatrix(self.rows, other.cols)
        for i, row in enumerate(self._bits):
            bits = 0
            for j, col in enumerate(columns):
                if (row & col).bit_count() & 1:
                    bits |= 1 << j
            result._bits[i] = bits
        return result


def lagrange_interpolate(
    points: Sequence[tuple[int, int]], x: int, mod: int = DEFAULT_MOD
) -> int:
    """Value at ``x`` of the polynomial through ``points``, modulo a prime ``mod``."""
    xs = [px % mod for px, _ in points]
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation points must have distinct x modulo mod")
    ret = 0
    for i, (xi, yi) in enumerate(points):
        now = yi % mod
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            now = now * ((x - xj) % mod) % mod
            now = now * pow((xi - xj) % mod, mod - 2, mod) % mod
        ret = (ret + now) % mod
    return ret


class ConsecutiveLagrange:
    """Polynomial given by f(x0), f(x0+1), ..., f(x0+n); evaluates anywhere in O(n)."""

    def __init__(self, x0: int, values: Sequence[int], mod: int = 10**9 + 7) -> None:
        if not values:
            raise ValueError("at least one value is required")
        self.mod = mod
        self.values = [v % mod for v in values]
        self.shift = (1 - x0) % mod
        if len(self.values) == 1:
            self.values.append(self.values[0])
        m = len(self.values)
        fac = [1] * m
        for i in range(1, m):
            fac[i] = fac[i - 1] * i % mod
        inv_fac = [1] * m
        inv_fac[m - 1] = pow(fac[m - 1], mod - 2, mod)
        for i in range(m - 1, 0, -1):
            inv_fac[i - 1] = inv_fac[i] * i % mod
        self._inv_fac = inv_fac

    def sample(self, x: int) -> int:
        """Value of the polynomial at ``x`` modulo ``mod``."""
        mod = self.mod
        values = self.values
        m = len(values)
        x = (x + self.shift) % mod
        suffix = [0] * m
        now = 1
        for i in range(m, 0, -1):
            suffix[i - 1] = now
            now = now * (x - i) % mod
        ret = 0
        neg = bool((m - 1) & 1)
        now = 1
        for i in range(1, m + 1):
            up = now * suffix[i - 1] % mod
            down = self._inv_fac[m - i] * self._inv_fac[i - 1] % mod
            tmp = values[i - 1] * up % mod * down % mod
            ret = (ret + (mod - tmp if neg and tmp else tmp)) % mod
            now = now * (x - i) % mod
            neg = not neg
        return ret


def berlekamp_massey(a: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Shortest recurrence s with a[i] = sum(s[j] * a[i-1-j]) modulo a prime ``mod``."""
    s: list[int] = []
    best: list[int] = []
    best_pos = 0
    for i, ai in enumerate(a):
        error = (ai - sum(c * a[i - 1 - j] for j, c in enumerate(s))) % mod
        if error == 0:
            continue
        inv_error = pow(error, mod - 2, mod)
        if not s:
            s = [0] * (i + 1)
            best_pos = i
            best = [inv_error]
            continue
        fix = [0] * (i - best_pos - 1) + [x * error % mod for x in best]
        if len(fix) >= len(s):
            best = [inv_error] + [x * (mod - inv_error) % mod for x in s]
            best_pos = i
            s.extend([0] * (len(fix) - len(s)))
        for j, f in enumerate(fix):
            s[j] = (s[j] + f) % mod
    return s