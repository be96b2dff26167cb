"""Shamir (t-of-n) share generation and reconstruction over Z_p.

API
---
gen_shares(poly, points)   -> list of Share, one per point, same order
reconstruct(prime, shares) -> secret   (needs >= t distinct shares)

Reconstruction only needs the public modulus and the shares, never the
polynomial.  Fewer than t shares still produce a number; it is just not
the secret.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from secretsharing.crypto import field
from secretsharing.crypto.params import RandomSource, default_random_source

if TYPE_CHECKING:
    from secretsharing.crypto.polynomial import SecretPolynomial

Point = Tuple[int, int]


@dataclass(frozen=True)
class Share:
    """A point ``(x, y)`` on the secret polynomial."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"Share: (x = {self.x}, y = {self.y})"


def eval_poly(coeffs: Sequence[int], x: int, p: int) -> int:
    """Evaluate ``sum(a_i * x^i)`` mod p, keeping a running power of x."""
    y = field.reduce(coeffs[0], p)
    x_pow = field.reduce(x, p)
    for c in coeffs[1:]:
        y = field.add(y, field.mul(x_pow, c, p), p)
        x_pow = field.mul(x_pow, x, p)
    return y


def gen_shares(poly: "SecretPolynomial", points: Iterable[int]) -> List[Share]:
    """Evaluate *poly* at each of *points*.

    The x-coordinates are not checked.  Callers must use distinct, nonzero
    points: a zero x hands out the secret itself and duplicates make
    reconstruction fail with ``NotCoprimes``.
    """
    return [Share(x=x, y=eval_poly(poly.coefficients, x, poly.prime)) for x in points]


def random_points(
    count: int, prime: int, rng: Optional[RandomSource] = None
) -> List[int]:
    """Draw *count* distinct, nonzero points of Z_p."""
    if count >= prime:
        raise ValueError(f"Z_{prime} has only {prime - 1} nonzero points, asked for {count}")
    if rng is None:
        rng = default_random_source()
    bits = prime.bit_length()
    chosen: List[int] = []
    seen = set()
    while len(chosen) < count:
        x = field.reduce(rng.getrandbits(bits), prime)
        if x == 0 or x in seen:
            continue
        seen.add(x)
        chosen.append(x)
    return chosen


def reconstruct(prime: int, shares: Sequence[Union[Share, Point]]) -> int:
    """Recover the constant term by Lagrange interpolation at x = 0.

    For each share i::

        num_i    = prod_{j != i} (p - x_j)            # (0 - x_j)
        den_i    = prod_{j != i} (x_i + (p - x_j))    # (x_i - x_j)
        lambda_i = num_i * den_i^-1

    and the secret is ``sum(y_i * lambda_i) mod p``.  Duplicate
    x-coordinates make some ``den_i`` zero and raise ``NotCoprimes``.
    An empty share set gives 0.
    """
    points = [(field.reduce(x, prime), field.reduce(y, prime)) for x, y in shares]
    n = len(points)
    secret = 0
    for i in range(n):
        xi, yi = points[i]
        num = 1
        den = 1
        for j in range(n):
            if j == i:
                continue
            xj = points[j][0]
            num = field.mul(num, field.neg(xj, prime), prime)
            den = field.mul(den, field.sub(xi, xj, prime), prime)
        lagrange = field.mul(num, field.modinv(den, prime), prime)
        secret = field.add(secret, field.mul(yi, lagrange, prime), prime)
    return secret
