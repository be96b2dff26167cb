"""Tests for prime-field arithmetic and modular inverses."""

import math
import random

import pytest

from secretsharing.crypto import field
from secretsharing.crypto.params import SecurityTier, fixed_prime
from secretsharing.errors import NotCoprimes, SecretSharingError, ZeroInputGCD

P = 23
BIG = fixed_prime(SecurityTier.BITS_256)


def test_add_basic():
    assert field.add(2, 3, P) == 5


def test_add_wrap():
    assert field.add(P - 1, 2, P) == 1


def test_sub_basic():
    assert field.sub(10, 3, P) == 7


def test_sub_underflow():
    assert field.sub(0, 1, P) == P - 1


def test_sub_never_negative():
    for a in range(P):
        for b in range(P):
            assert 0 <= field.sub(a, b, P) < P


def test_mul_wrap():
    a = BIG - 1
    assert field.mul(a, 2, BIG) == (a * 2) % BIG


def test_neg():
    a = 42
    assert field.add(a, field.neg(a, BIG), BIG) == 0
    assert field.neg(0, P) == 0


def test_reduce():
    assert field.reduce(P + 5, P) == 5
    assert field.reduce(-1, P) == P - 1


# ---- gcd ----


def test_gcd_basic():
    assert field.gcd(12, 18) == 6
    assert field.gcd(17, 5) == 1


def test_gcd_matches_math_gcd():
    rnd = random.Random(7)
    for _ in range(50):
        a = rnd.randrange(1, 2**200)
        b = rnd.randrange(1, 2**200)
        assert field.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("x", [1, 7, P, BIG])
def test_gcd_zero_operand(x):
    with pytest.raises(ZeroInputGCD):
        field.gcd(0, x)
    with pytest.raises(ZeroInputGCD):
        field.gcd(x, 0)


# ---- modinv ----


def test_inverse_small():
    # 3 * 5 = 15 = 1 (mod 7)
    assert field.modinv(3, 7) == 5


def test_inverse_identity_mod_11():
    assert (7 * field.modinv(7, 11)) % 11 == 1


def test_inverse_one():
    assert field.modinv(1, BIG) == 1


def test_inverse_normalises_input():
    assert field.modinv(-1, P) == P - 1
    assert field.modinv(P + 3, P) == field.modinv(3, P)


def test_inverse_property_random_moduli():
    """a * modinv(a, m) == 1 whenever gcd(a, m) == 1, NotCoprimes otherwise."""
    rnd = random.Random(1234)
    for _ in range(100):
        bits = rnd.randrange(8, 309)
        m = rnd.getrandbits(bits) | 3
        a = rnd.getrandbits(bits) % m or 1
        if math.gcd(a, m) == 1:
            assert (a * field.modinv(a, m)) % m == 1
        else:
            with pytest.raises(NotCoprimes):
                field.modinv(a, m)


def test_no_inverse_when_not_coprime():
    with pytest.raises(NotCoprimes):
        field.modinv(4, 10)


def test_no_inverse_of_zero():
    with pytest.raises(NotCoprimes):
        field.modinv(0, P)
    with pytest.raises(NotCoprimes):
        field.modinv(BIG, BIG)


def test_errors_share_base_class():
    with pytest.raises(SecretSharingError):
        field.modinv(0, P)
    with pytest.raises(ArithmeticError):
        field.modinv(0, P)
    with pytest.raises(ValueError):
        field.gcd(0, 1)
