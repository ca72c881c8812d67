import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.polynomial import MOD, Poly

coeff = st.integers(min_value=0, max_value=MOD - 1)


def _truncated_power(p, k):
    res = Poly([1])
    for _ in range(k):
        res = res * p
    n = len(p.coeffs)
    return res.coeffs[:n] + [0] * (n - len(res.coeffs[:n]))


def test_small_product():
    assert Poly([1, 1]) * Poly([1, 1]) == Poly([1, 2, 1])


def test_coefficients_are_reduced():
    assert Poly([-1]).coeffs == [MOD - 1]


@given(st.lists(coeff, min_size=1, max_size=8), st.lists(coeff, min_size=1, max_size=8))
def test_add_sub_roundtrip(a, b):
    n = max(len(a), len(b))
    a = a + [0] * (n - len(a))
    b = b + [0] * (n - len(b))
    assert (Poly(a) + Poly(b)) - Poly(b) == Poly(a)


@given(st.lists(coeff, min_size=1, max_size=8))
def test_scalar_multiplication_matches_addition(a):
    p = Poly(a)
    assert p * 3 == p + p + p


@given(st.lists(coeff, min_size=1, max_size=8))
def test_derivative_of_integral(a):
    assert Poly(a).integral().derivative() == Poly(a)


@settings(max_examples=30)
@given(
    st.lists(coeff, min_size=1, max_size=8).filter(lambda c: c[0] != 0),
    st.integers(min_value=1, max_value=10),
)
def test_inverse_times_self_is_one(a, n):
    p = Poly(a)
    prod = (p * p.inverse(n)).coeffs[:n]
    assert prod == [1] + [0] * (n - 1)


def test_inverse_needs_invertible_constant():
    with pytest.raises(ValueError):
        Poly([0, 1]).inverse()


@settings(max_examples=30)
@given(st.lists(coeff, min_size=0, max_size=7))
def test_log_exp_roundtrip(tail):
    p = Poly([1] + tail)
    assert p.log().exp() == p


def test_exp_of_x_gives_inverse_factorials():
    n = 8
    e = Poly([0, 1] + [0] * (n - 2)).exp()
    assert e.coeffs == [pow(math.factorial(i), -1, MOD) for i in range(n)]


def test_log_requires_unit_constant():
    with pytest.raises(ValueError):
        Poly([2, 1]).log()


def test_exp_requires_zero_constant():
    with pytest.raises(ValueError):
        Poly([1, 1]).exp()


@settings(max_examples=30)
@given(st.lists(coeff, min_size=1, max_size=6), st.integers(min_value=0, max_value=4))
def test_pow_matches_repeated_product(a, k):
    p = Poly(a)
    assert p.pow(k).coeffs == _truncated_power(p, k)


def test_pow_with_leading_zeros():
    p = Poly([0, 1, 1, 0])
    assert p.pow(2).coeffs == _truncated_power(p, 2)


def test_pow_overflowing_shift_is_zero():
    p = Poly([0, 0, 5])
    assert p.pow(2).coeffs == _truncated_power(p, 2)


def test_pow_of_zero_series():
    assert Poly([0, 0, 0]).pow(0).coeffs == [1, 0, 0]
    assert Poly([0, 0, 0]).pow(2).coeffs == [0, 0, 0]


def test_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        Poly([1, 1]).pow(-1)