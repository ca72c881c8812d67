"""Primality testing, factor finding, congruences and Josephus problems."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

DEFAULT_BASES: tuple[int, ...] = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def is_prime(n: int, bases: Sequence[int] = DEFAULT_BASES) -> bool:
    """Deterministic Miller-Rabin test (exact for 64-bit inputs with the default bases)."""
    if n == 2:
        return True
    if n < 2 or n % 2 == 0:
        return False
    u, t = n - 1, 0
    while u % 2 == 0:
        u >>= 1
        t += 1
    for base in bases:
        a = base % n
        if a in (0, 1, n - 1):
            continue
        x = pow(a, u, n)
        if x in (1, n - 1):
            continue
        for _ in range(t):
            x = x * x % n
            if x == 1:
                return False
            if x == n - 1:
                break
        if x != n - 1:
            return False
    return True


def pollard_rho(n: int) -> int:
    """Return a divisor of ``n`` greater than 1 (possibly ``n`` itself)."""
    if n < 2:
        raise ValueError("pollard_rho needs n >= 2")
    c = random.randint(1, n - 1)
    s = t = 0
    goal = 1
    while True:
        val = 1
        for step in range(1, goal + 1):
            t = (t * t + c) % n
            val = val * abs(t - s) % n
            if step % 127 == 0:
                d = math.gcd(val, n)
                if d > 1:
                    return d
        d = math.gcd(val, n)
        if d > 1:
            return d
        goal <<= 1
        s = t


def ext_gcd(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Solve ``a*x + b*y == c``; return ``(g, x, y)`` where ``g`` is gcd(a, b).

    Raises ValueError when no integer solution exists.
    """
    if b == 0:
        if a == 0 or c % a != 0:
            raise ValueError(f"{a}*x + {b}*y = {c} has no integer solution")
        return abs(a), c // a, 0
    q = _tdiv(a, b)
    g, x1, y1 = ext_gcd(b, a - q * b, c)
    return g, y1, x1 - q * y1


def crt_coprime(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Smallest non-negative x with x = residues[i] (mod moduli[i]), moduli pairwise coprime."""
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli must have the same length")
    p = math.prod(moduli)
    ans = 0
    for a, m in zip(residues, moduli):
        big = p // m
        _, inv, _ = ext_gcd(big, m, 1)
        ans = (ans + a * inv * big) % p
    return ans % p


def crt_merge(a1: int, m1: int, a2: int, m2: int) -> tuple[int, int] | None:
    """Merge x = a1 (mod m1) and x = a2 (mod m2) into (a, lcm), or None if inconsistent."""
    g = math.gcd(m1, m2)
    if (a2 - a1) % g != 0:
        return None
    _, x, _ = ext_gcd(m1, m2, g)
    x = (a2 - a1) * x // g
    m = m1 * m2 // g
    return (x * m1 + a1) % m, m


def mod_div(a: int, b: int, m: int) -> tuple[int, int]:
    """Solve b*t = a (mod m); the answers are ``t + k*period`` for ``(t, period)``."""
    flag = 1
    if a < 0:
        a, flag = -a, -flag
    if b < 0:
        b, flag = -b, -flag
    g, t, _ = ext_gcd(b, m, a)
    period = abs(m // g)
    return (t * flag) % period, period


def josephus(n: int, k: int) -> int:
    """0-based position of the survivor when every k-th of n people is removed."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    if n == 1:
        return 0
    if k == 1:
        return n - 1
    if k > n:
        return (josephus(n - 1, k) + k) % n
    cnt = n // k
    res = josephus(n - cnt, k) - n % k
    if res < 0:
        res += n
    else:
        res += res // (k - 1)
    return res


def josephus_every_second(n: int, k: int) -> int:
    """1-based label of the k-th person removed when every second person is removed."""
    if not 1 <= k <= n:
        raise ValueError("k must lie in [1, n]")
    if n == 1:
        return 1
    if k <= (n + 1) // 2:
        return 2 * k % n if 2 * k > n else 2 * k
    res = josephus_every_second(n // 2, k - (n + 1) // 2)
    return 2 * res + 1 if n & 1 else 2 * res - 1