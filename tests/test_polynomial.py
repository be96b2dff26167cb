"""Tests for secret polynomial construction."""

import logging
import random

import pytest

from secretsharing.crypto import polynomial
from secretsharing.crypto.params import SecurityTier, fixed_prime
from secretsharing.errors import CoefficientSamplingExhausted, ThresholdTooSmall

TIER = SecurityTier.BITS_256
PRIME = fixed_prime(TIER)


class _ScriptedSource:
    """Returns the scripted values in order, then repeats the last one."""

    def __init__(self, values):
        self._values = list(values)

    def getrandbits(self, k):
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


def test_constant_term_is_secret():
    poly = polynomial.construct(42, 3, PRIME, TIER)
    assert poly.coefficients[0] == 42
    assert poly(0) == 42


def test_secret_reduced_mod_p():
    poly = polynomial.construct(PRIME + 7, 1, PRIME, TIER)
    assert poly.coefficients[0] == 7


@pytest.mark.parametrize("degree", [1, 2, 5, 20])
def test_exact_degree(degree):
    for _ in range(10):
        poly = polynomial.construct(1, degree, PRIME, TIER)
        assert poly.degree == degree
        assert poly.threshold == degree + 1
        assert poly.leading_coefficient != 0
        assert all(0 <= c < PRIME for c in poly.coefficients)


def test_small_field_leading_coefficient_never_zero():
    """Over Z_23 a zero draw is common; it must always be rejected."""
    rng = random.Random(0)
    for _ in range(500):
        poly = polynomial.construct(12, 2, 23, TIER, rng)
        assert poly.coefficients[0] == 12
        assert poly.coefficients[2] % 23 != 0


def test_leading_coefficient_redrawn(caplog):
    # degree 1: first two draws are multiples of p, third is usable
    rng = _ScriptedSource([0, 23 * 5, 24])
    with caplog.at_level(logging.DEBUG, logger="secretsharing.crypto.polynomial"):
        poly = polynomial.construct(3, 1, 23, TIER, rng)
    assert poly.coefficients == (3, 1)
    assert caplog.text.count("redrawing") == 2


def test_leading_coefficient_attempts_capped():
    with pytest.raises(CoefficientSamplingExhausted):
        polynomial.construct(3, 2, 23, TIER, _ScriptedSource([0]), max_attempts=5)


def test_degree_zero_rejected():
    with pytest.raises(ThresholdTooSmall):
        polynomial.construct(3, 0, PRIME, TIER)


def test_polynomial_is_immutable():
    poly = polynomial.construct(3, 2, PRIME, TIER)
    with pytest.raises(AttributeError):
        poly.coefficients = (1, 2, 3)


def test_repr_hides_coefficients():
    poly = polynomial.construct(987654321, 2, PRIME, TIER)
    assert "987654321" not in repr(poly)


def test_evaluation_matches_direct_sum():
    poly = polynomial.construct(5, 4, PRIME, TIER)
    for x in (1, 2, 99, PRIME - 1):
        expected = sum(c * pow(x, i, PRIME) for i, c in enumerate(poly.coefficients)) % PRIME
        assert poly(x) == expected
