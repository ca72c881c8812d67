import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.convolution import (
    NTT_MOD,
    fft,
    min_plus_convex,
    multiply_mod,
    multiply_ntt,
    multiply_real,
    ntt,
    ntt_classic,
    xor_convolution,
)


def _naive(a, b, mod=None):
    if not a or not b:
        return []
    out = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            out[i + j] += x * y
    return [v % mod for v in out] if mod else out


def test_fft_impulse():
    assert all(abs(v - 1) < 1e-9 for v in fft([1, 0, 0, 0]))


@pytest.mark.parametrize("n", [1, 2, 4, 8, 16])
def test_fft_twice_reverses(n):
    rng = random.Random(n)
    a = [complex(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(n)]
    twice = fft(fft(a))
    for i in range(n):
        assert abs(twice[i] - n * a[-i % n]) < 1e-6


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


def test_multiply_ntt_small():
    assert multiply_ntt([1, 2], [3, 4]) == [3, 10, 8]


@given(
    st.lists(st.integers(0, NTT_MOD - 1), max_size=20),
    st.lists(st.integers(0, NTT_MOD - 1), max_size=20),
)
def test_multiply_ntt_matches_naive(a, b):
    assert multiply_ntt(a, b) == _naive(a, b, NTT_MOD)


@given(
    st.lists(st.integers(0, NTT_MOD - 1), min_size=1, max_size=20),
    st.lists(st.integers(0, NTT_MOD - 1), min_size=1, max_size=20),
)
def test_multiply_mod_matches_ntt(a, b):
    assert multiply_mod(a, b) == multiply_ntt(a, b)


def test_multiply_mod_other_modulus():
    mod = 10**9 + 7
    rng = random.Random(1)
    a = [rng.randrange(mod) for _ in range(30)]
    b = [rng.randrange(mod) for _ in range(25)]
    assert multiply_mod(a, b, mod) == _naive(a, b, mod)


@given(
    st.lists(st.integers(-100, 100), min_size=1, max_size=15),
    st.lists(st.integers(-100, 100), min_size=1, max_size=15),
)
def test_multiply_real_matches_naive(a, b):
    got = multiply_real(a, b)
    assert [round(x) for x in got] == _naive(a, b)


def test_empty_products():
    assert multiply_real([], [1.0]) == []
    assert multiply_mod([1], []) == []
    assert multiply_ntt([], []) == []


@pytest.mark.parametrize("n", [1, 2, 8, 32])
def test_ntt_twice_reverses(n):
    rng = random.Random(n)
    a = [rng.randrange(NTT_MOD) for _ in range(n)]
    twice = ntt(ntt(a))
    assert twice == [n * a[-i % n] % NTT_MOD for i in range(n)]


@pytest.mark.parametrize("n", [1, 4, 16, 64])
def test_ntt_classic_round_trip(n):
    rng = random.Random(n)
    a = [rng.randrange(NTT_MOD) for _ in range(n)]
    assert ntt_classic(ntt_classic(a), inverse=True) == a


def test_ntt_classic_convolution():
    a = [5, 7, 11]
    b = [2, 3, 13, 17]
    n = 8
    fa = ntt_classic(a + [0] * (n - len(a)))
    fb = ntt_classic(b + [0] * (n - len(b)))
    prod = ntt_classic([x * y for x, y in zip(fa, fb)], inverse=True)
    assert prod[: len(a) + len(b) - 1] == multiply_ntt(a, b)
    assert prod[len(a) + len(b) - 1 :] == [0] * (n - len(a) - len(b) + 1)


@given(st.integers(0, 5), st.randoms())
def test_xor_convolution_definition(k, rng):
    n = 1 << k
    a = [rng.randint(-20, 20) for _ in range(n)]
    b = [rng.randint(-20, 20) for _ in range(n)]
    expected = [0] * n
    for i in range(n):
        for j in range(n):
            expected[i ^ j] += a[i] * b[j]
    assert xor_convolution(a, b, k) == expected


def test_xor_convolution_wrong_length():
    with pytest.raises(ValueError):
        xor_convolution([1, 2, 3], [1, 2, 3], 2)


def _convex(rng, n):
    slopes = sorted(rng.randint(-10, 10) for _ in range(n - 1))
    out = [rng.randint(-10, 10)]
    for s in slopes:
        out.append(out[-1] + s)
    return out


@given(st.integers(1, 8), st.integers(1, 8), st.randoms())
def test_min_plus_convex_brute(n, m, rng):
    a = _convex(rng, n)
    b = _convex(rng, m)
    expected = [min(a[i] + b[k - i] for i in range(n) if 0 <= k - i < m) for k in range(n + m - 1)]
    assert min_plus_convex(a, b) == expected


def test_min_plus_convex_empty():
    with pytest.raises(ValueError):
        min_plus_convex([], [1])