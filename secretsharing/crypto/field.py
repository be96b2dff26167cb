"""Prime-field arithmetic Z_p and modular inverses.

Every helper takes the modulus explicitly, so values from different
sessions never mix.  Results are Python ints in [0, p).  Subtraction and
negation add the modular complement instead of relying on signed values.
"""

from __future__ import annotations

from secretsharing.errors import NotCoprimes, ZeroInputGCD


def reduce(a: int, p: int) -> int:
    """Reduce an integer into [0, p)."""
    return a % p


def add(a: int, b: int, p: int) -> int:
    """Field addition."""
    return (a + b) % p


def neg(a: int, p: int) -> int:
    """Additive inverse, ``p - a`` folded back into [0, p)."""
    return (p - a % p) % p


def sub(a: int, b: int, p: int) -> int:
    """Field subtraction as ``a + (p - b)``."""
    return (a % p + neg(b, p)) % p


def mul(a: int, b: int, p: int) -> int:
    """Field multiplication."""
    return (a * b) % p


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers (Euclid)."""
    if a == 0 or b == 0:
        raise ZeroInputGCD(f"gcd() needs nonzero operands, got ({a}, {b})")
    while b:
        a, b = b, a % b
    return a


def modinv(a: int, p: int) -> int:
    """Return ``a^-1 mod p``.

    ``a`` is normalised into [0, p) first.  Raises :class:`NotCoprimes`
    when ``a`` is zero mod p or shares a factor with ``p``.
    """
    a = reduce(a, p)
    if a == 0:
        raise NotCoprimes(f"0 has no inverse modulo {p}")
    if gcd(a, p) != 1:
        raise NotCoprimes(f"{a} and {p} are not coprime")
    return pow(a, -1, p)
