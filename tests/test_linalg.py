import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.linalg import (
    DEFAULT_MOD,
    BitMatrix,
    ConsecutiveLagrange,
    Matrix,
    berlekamp_massey,
    lagrange_interpolate,
)


def _matrix(rows, mod=DEFAULT_MOD):
    m = Matrix(len(rows), len(rows[0]) if rows else 0, mod)
    for i, row in enumerate(rows):
        m[i][:] = row
    return m


def _random_matrix(rng, n, m, mod=DEFAULT_MOD):
    return _matrix([[rng.randrange(mod) for _ in range(m)] for _ in range(n)], mod)


def test_fibonacci_power():
    fib = _matrix([[1, 1], [1, 0]])
    assert fib.power(10)[0][1] == 55


def test_power_matches_repeated_product():
    rng = random.Random(3)
    a = _random_matrix(rng, 3, 3)
    prod = _matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    for p in range(6):
        assert a.power(p).data == prod.data
        prod = prod * a


def test_multiplication_dimension_check():
    with pytest.raises(ValueError):
        _matrix([[1, 2]]) * _matrix([[1, 2]])


def test_power_requires_square():
    with pytest.raises(ValueError):
        _matrix([[1, 2]]).power(2)


def test_det_identity_and_singular():
    assert _matrix([[1, 0], [0, 1]]).det() == 1
    assert _matrix([[1, 2], [2, 4]]).det() == 0


def test_det_multiplicative():
    rng = random.Random(7)
    for n in range(1, 6):
        a = _random_matrix(rng, n, n)
        b = _random_matrix(rng, n, n)
        assert (a * b).det() == a.det() * b.det() % DEFAULT_MOD


def test_det_row_swap_negates():
    rng = random.Random(11)
    a = _random_matrix(rng, 4, 4)
    swapped = _matrix([a[1], a[0], a[2], a[3]])
    assert (a.det() + swapped.det()) % DEFAULT_MOD == 0


def test_bit_matrix_matches_mod2():
    rng = random.Random(5)
    n, k, m = 5, 7, 4
    a_rows = [[rng.randrange(2) for _ in range(k)] for _ in range(n)]
    b_rows = [[rng.randrange(2) for _ in range(m)] for _ in range(k)]
    a, b = BitMatrix(n, k), BitMatrix(k, m)
    for i in range(n):
        for j in range(k):
            a[i, j] = a_rows[i][j]
    for i in range(k):
        for j in range(m):
            b[i, j] = b_rows[i][j]
    expected = (_matrix(a_rows, 2) * _matrix(b_rows, 2)).data
    c = a * b
    assert [[c[i, j] for j in range(m)] for i in range(n)] == expected


def test_bit_matrix_set_clear_and_bounds():
    bm = BitMatrix(2, 2)
    bm[1, 1] = 1
    assert bm[1, 1] == 1
    bm[1, 1] = 0
    assert bm[1, 1] == 0
    with pytest.raises(IndexError):
        bm[2, 0]
    with pytest.raises(ValueError):
        BitMatrix(2, 3) * BitMatrix(2, 3)


def _horner(coeffs, x, mod):
    acc = 0
    for c in reversed(coeffs):
        acc = (acc * x + c) % mod
    return acc


@given(st.lists(st.integers(0, 1000), min_size=1, max_size=6), st.integers(-50, 50))
def test_lagrange_interpolate_recovers_polynomial(coeffs, x):
    pts = [(px, _horner(coeffs, px, DEFAULT_MOD)) for px in range(3, 3 + len(coeffs))]
    assert lagrange_interpolate(pts, x) == _horner(coeffs, x % DEFAULT_MOD, DEFAULT_MOD)


def test_lagrange_duplicate_x():
    with pytest.raises(ValueError):
        lagrange_interpolate([(1, 2), (1, 3)], 5)


@given(
    st.lists(st.integers(0, 1000), min_size=1, max_size=7),
    st.integers(-20, 20),
    st.integers(-100, 100),
)
def test_consecutive_lagrange(coeffs, x0, x):
    mod = 10**9 + 7
    values = [_horner(coeffs, (x0 + i) % mod, mod) for i in range(len(coeffs))]
    poly = ConsecutiveLagrange(x0, values)
    assert poly.sample(x) == _horner(coeffs, x % mod, mod)


def test_consecutive_lagrange_empty():
    with pytest.raises(ValueError):
        ConsecutiveLagrange(0, [])


def test_berlekamp_massey_fibonacci():
    assert berlekamp_massey([1, 1, 2, 3, 5, 8, 13, 21]) == [1, 1]


@given(st.lists(st.integers(0, 50), min_size=1, max_size=4), st.randoms())
def test_berlekamp_massey_reproduces_sequence(rec, rng):
    k = len(rec)
    seq = [rng.randrange(100) for _ in range(k)]
    while len(seq) < 2 * k + 4:
        seq.append(sum(c * seq[-1 - j] for j, c in enumerate(rec)) % DEFAULT_MOD)
    s = berlekamp_massey(seq)
    assert len(s) <= k
    for i in range(len(s), len(seq)):
        assert seq[i] == sum(c * seq[i - 1 - j] for j, c in enumerate(s)) % DEFAULT_MOD