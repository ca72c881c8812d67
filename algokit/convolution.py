"""FFT/NTT based polynomial products, XOR convolution and min-plus convolution."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from itertools import accumulate, pairwise

NTT_MOD = 998244353
_NTT_ROOT = 62
_CLASSIC_G = 3


def _check_power_of_two(n: int) -> None:
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a positive power of two")


def _bit_reverse(a: list) -> None:
    n = len(a)
    shift = n.bit_length() - 1
    rev = [0] * n
    for i in range(1, n):
        rev[i] = (rev[i >> 1] | (i & 1) << shift) >> 1
    for i, r in enumerate(rev):
        if i < r:
            a[i], a[r] = a[r], a[i]


def fft(a: Sequence[complex]) -> list[complex]:
    """Discrete Fourier transform of a power-of-two length sequence."""
    out = [complex(x) for x in a]
    n = len(out)
    _check_power_of_two(n)
    rt = [complex(1)] * max(n, 2)
    k = 2
    while k < n:
        for j in range(k):
            rt[k + j] = cmath.exp(1j * math.pi * j / k)
        k *= 2
    _bit_reverse(out)
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                z = rt[j + k] * out[i + j + k]
                out[i + j + k] = out[i + j] - z
                out[i + j] += z
        k *= 2
    return out


def _size_for(length: int) -> int:
    return 1 << length.bit_length()


def multiply_real(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Product of two real polynomials using a single complex FFT pair."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = _size_for(size)
    packed = [complex(0)] * n
    for i, x in enumerate(a):
        packed[i] = complex(x, 0)
    for i, y in enumerate(b):
        packed[i] = complex(packed[i].real, y)
    packed = [x * x for x in fft(packed)]
    out = fft([packed[-i & (n - 1)] - packed[i].conjugate() for i in range(n)])
    return [out[i].imag / (4 * n) for i in range(size)]


def multiply_mod(a: Sequence[int], b: Sequence[int], mod: int = NTT_MOD) -> list[int]:
    """Product of two polynomials modulo an arbitrary ``mod`` (coefficients in [0, mod))."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = _size_for(size)
    cut = math.isqrt(mod)
    left = [complex(0)] * n
    right = [complex(0)] * n
    for i, x in enumerate(a):
        left[i] = complex(x // cut, x % cut)
    for i, y in enumerate(b):
        right[i] = complex(y // cut, y % cut)
    left = fft(left)
    right = fft(right)
    outl = [complex(0)] * n
    outs = [complex(0)] * n
    for i in range(n):
        j = -i & (n - 1)
        outl[j] = (left[i] + left[j].conjugate()) * right[i] / (2.0 * n)
        outs[j] = (left[i] - left[j].conjugate()) * right[i] / (2.0 * n) / 1j
    outl = fft(outl)
    outs = fft(outs)
    res = []
    for lv, sv in zip(outl[:size], outs[:size]):
        av = int(lv.real + 0.5)
        cv = int(sv.imag + 0.5)
        bv = int(lv.imag + 0.5) + int(sv.real + 0.5)
        res.append(((av % mod * cut + bv) % mod * cut + cv) % mod)
    return res


def ntt(a: Sequence[int]) -> list[int]:
    """Number theoretic transform modulo 998244353 of a power-of-two length sequence."""
    out = [x % NTT_MOD for x in a]
    n = len(out)
    _check_power_of_two(n)
    rt = [1] * max(n, 2)
    k, s = 2, 2
    while k < n:
        z = pow(_NTT_ROOT, NTT_MOD >> s, NTT_MOD)
        for i in range(k, 2 * k):
            rt[i] = rt[i // 2] * z % NTT_MOD if i & 1 else rt[i // 2]
        k *= 2
        s += 1
    _bit_reverse(out)
    k = 1
    while k < n:
        for i in range(0, n, 2 * k):
            for j in range(k):
                z = rt[j + k] * out[i + j + k] % NTT_MOD
                ai = out[i + j]
                out[i + j + k] = (ai - z) % NTT_MOD
                out[i + j] = (ai + z) % NTT_MOD
        k *= 2
    return out


def multiply_ntt(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials modulo 998244353."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    n = _size_for(size)
    inv = pow(n, NTT_MOD - 2, NTT_MOD)
    left = ntt(list(a) + [0] * (n - len(a)))
    right = ntt(list(b) + [0] * (n - len(b)))
    out = [0] * n
    for i, (x, y) in enumerate(zip(left, right)):
        out[-i & (n - 1)] = x * y % NTT_MOD * inv % NTT_MOD
    return ntt(out)[:size]


def ntt_classic(a: Sequence[int], inverse: bool = False) -> list[int]:
    """Textbook NTT modulo 998244353 with generator 3; ``inverse`` undoes it."""
    out = [x % NTT_MOD for x in a]
    n = len(out)
    _check_power_of_two(n)
    rev = [0] * n
    for i in range(1, n):
        rev[i] = rev[i // 2] // 2 + (i & 1) * (n // 2)
    for i, r in enumerate(rev):
        if i < r:
            out[i], out[r] = out[r], out[i]
    op = -1 if inverse else 1
    m = 2
    while m <= n:
        w1 = pow(_CLASSIC_G, ((NTT_MOD - 1) // m * op) % (NTT_MOD - 1), NTT_MOD)
        half = m // 2
        for i in range(0, n, m):
            wk = 1
            for k in range(half):
                x = out[i + k]
                y = out[i + k + half] * wk % NTT_MOD
                out[i + k] = (x + y) % NTT_MOD
                out[i + k + half] = (x - y) % NTT_MOD
                wk = wk * w1 % NTT_MOD
        m *= 2
    if inverse:
        inv_n = pow(n, NTT_MOD - 2, NTT_MOD)
        out = [x * inv_n % NTT_MOD for x in out]
    return out


def xor_convolution(a: Sequence[int], b: Sequence[int], k: int) -> list[int]:
    """c[i] = sum of a[x]*b[y] over x ^ y == i, for sequences of length 2**k."""
    if len(a) != 1 << k or len(b) != 1 << k:
        raise ValueError("a and b must have length 2**k")
    if k == 0:
        return [a[0] * b[0]]
    half = 1 << (k - 1)
    lo_a, hi_a = a[:half], a[half:]
    lo_b, hi_b = b[:half], b[half:]
    x = xor_convolution(
        [p + q for p, q in zip(lo_a, hi_a)], [p + q for p, q in zip(lo_b, hi_b)], k - 1
    )
    y = xor_convolution(
        [p - q for p, q in zip(lo_a, hi_a)], [p - q for p, q in zip(lo_b, hi_b)], k - 1
    )
    return [(p + q) // 2 for p, q in zip(x, y)] + [(p - q) // 2 for p, q in zip(x, y)]


def min_plus_convex(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """c[k] = min over i+j == k of a[i]+b[j], for convex sequences a and b."""
    if not a or not b:
        raise ValueError("sequences must be non-empty")
    slopes = sorted([y - x for x, y in pairwise(a)] + [y - x for x, y in pairwise(b)])
    return list(accumulate(slopes, initial=a[0] + b[0]))