"""Formal power series arithmetic modulo 998244353."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from algokit.convolution import NTT_MOD, multiply_ntt

MOD = NTT_MOD


def _fit(seq: Sequence[int], n: int) -> list[int]:
    """Truncate or zero-pad ``seq`` to exactly ``n`` entries."""
    out = list(seq[:n])
    out.extend([0] * (n - len(out)))
    return out


@dataclass
class Poly:
    """Polynomial (or truncated power series) with coefficients modulo 998244353."""

    coeffs: list[int]

    def __post_init__(self) -> None:
        self.coeffs = [c % MOD for c in self.coeffs] or [0]

    def __len__(self) -> int:
        return len(self.coeffs)

    def __add__(self, other: Poly) -> Poly:
        n = max(len(self.coeffs), len(other.coeffs))
        return Poly([x + y for x, y in zip(_fit(self.coeffs, n), _fit(other.coeffs, n))])

    def __sub__(self, other: Poly) -> Poly:
        n = max(len(self.coeffs), len(other.coeffs))
        return Poly([x - y for x, y in zip(_fit(self.coeffs, n), _fit(other.coeffs, n))])

    def __mul__(self, other: Poly | int) -> Poly:
        if isinstance(other, Poly):
            return Poly(multiply_ntt(self.coeffs, other.coeffs))
        if isinstance(other, int):
            return Poly([c * other for c in self.coeffs])
        return NotImplemented

    def derivative(self) -> Poly:
        """Formal derivative."""
        return Poly([c * i for i, c in enumerate(self.coeffs) if i > 0])

    def integral(self) -> Poly:
        """Formal antiderivative with zero constant term."""
        return Poly([0] + [c * pow(i + 1, MOD - 2, MOD) for i, c in enumerate(self.coeffs)])

    def inverse(self, n: int | None = None) -> Poly:
        """First ``n`` coefficients of 1/f (defaults to the length of f)."""
        n = len(self.coeffs) if n is None else n
        if n < 1:
            raise ValueError("length must be positive")
        if self.coeffs[0] == 0:
            raise ValueError("constant term must be non-zero")
        g = [pow(self.coeffs[0], MOD - 2, MOD)]
        length = 1
        while length < n:
            length *= 2
            fg2 = multiply_ntt(multiply_ntt(g, g), self.coeffs[:length])
            g = [(2 * x - y) % MOD for x, y in zip(_fit(g, length), _fit(fg2, length))]
        return Poly(g[:n])

    def log(self, n: int | None = None) -> Poly:
        """First ``n`` coefficients of ln f; f must have constant term 1."""
        n = len(self.coeffs) if n is None else n
        if n < 1:
            raise ValueError("length must be positive")
        if self.coeffs[0] != 1:
            raise ValueError("logarithm needs constant term 1")
        q = multiply_ntt(self.derivative().coeffs, self.inverse(n).coeffs)[: n - 1]
        return Poly(_fit(Poly(q).integral().coeffs, n))

    def exp(self) -> Poly:
        """exp f truncated to the length of f; f must have constant term 0."""
        if self.coeffs[0] != 0:
            raise ValueError("exponential needs constant term 0")
        n = len(self.coeffs)
        g = [1]
        length = 1
        while length < n:
            length *= 2
            t = _fit(self.coeffs, length)
            t[0] = (t[0] + 1) % MOD
            lg = Poly(g).log(length).coeffs
            g = multiply_ntt([x - y for x, y in zip(t, lg)], g)[:length]
        return Poly(_fit(g, n))

    def pow(self, k: int) -> Poly:
        """f**k truncated to the length of f."""
        if k < 0:
            raise ValueError("exponent must be non-negative")
        a = self.coeffs
        n = len(a)
        lead = next((i for i, c in enumerate(a) if c), n)
        if lead and k * lead > n - 1:
            return Poly([0] * n)
        if lead == n:
            return Poly([1] + [0] * (n - 1))
        inv_lead = pow(a[lead], MOD - 2, MOD)
        b = Poly([c * inv_lead for c in a[lead:]])
        e = (b.log() * (k % MOD)).exp() * pow(a[lead], k, MOD)
        shift = k * lead
        result = [0] * n
        for j, c in enumerate(e.coeffs[: n - shift]):
            result[j + shift] = c
        return Poly(result)