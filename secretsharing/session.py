"""Secret-sharing sessions.

A session binds a prime modulus to one secret polynomial and hands out
shares of it.  It is built once and never changes afterwards.

Usage::

    session = construct_session(SecurityTier.BITS_256, True, threshold=3, secret=25)
    shares = session.generate_shares([4, 16, 13, 1, 12, 7])
    assert reconstruct(session.prime, shares[:3]) == 25
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from secretsharing.crypto import polynomial
from secretsharing.crypto.params import (
    RandomSource,
    SecurityTier,
    fixed_prime,
    generate_prime,
)
from secretsharing.crypto.polynomial import SecretPolynomial
from secretsharing.crypto.shamir import Share, gen_shares, reconstruct
from secretsharing.errors import ThresholdTooSmall

__all__ = ["Session", "SessionParameters", "Share", "construct_session", "reconstruct"]

logger = logging.getLogger(__name__)


class SessionParameters(BaseModel):
    """Public parameters of a session.

    Everything a reconstructing party needs besides the shares.  Holds no
    polynomial coefficients.  ``generated_prime`` is true only when the
    modulus was freshly generated for this session; fixed-table primes and
    caller-supplied moduli both report false.
    """

    model_config = ConfigDict(frozen=True)

    tier_bits: int
    threshold: int
    prime: int
    generated_prime: bool


class Session:
    """Owns a prime and the secret polynomial for one sharing.

    Build sessions with :func:`construct_session` or :meth:`Session.from_prime`.
    The constructor rejects a polynomial defined over a different prime.
    """

    def __init__(
        self,
        prime: int,
        poly: SecretPolynomial,
        tier: SecurityTier,
        generated_prime: bool,
    ) -> None:
        if poly.prime != prime:
            raise ValueError(
                f"Polynomial is over Z_{poly.prime}, session modulus is {prime}"
            )
        self._prime = prime
        self._poly = poly
        self._tier = tier
        self._generated_prime = generated_prime

    @classmethod
    def from_prime(
        cls,
        prime: int,
        threshold: int,
        secret: int,
        tier: SecurityTier | int | None = None,
        rng: Optional[RandomSource] = None,
    ) -> "Session":
        """Build a session over an externally agreed modulus.

        *tier* only sets the bit size of the random draws that are reduced
        into Z_p.  *prime* must be a prime greater than 2; primality is the
        caller's responsibility.
        """
        if threshold <= 1:
            raise ThresholdTooSmall(threshold)
        if prime <= 2:
            raise ValueError(f"Modulus must be a prime > 2, got {prime}")
        tier = SecurityTier.coerce(tier)
        poly = polynomial.construct(secret, threshold - 1, prime, tier, rng)
        return cls(prime, poly, tier, generated_prime=False)

    @property
    def prime(self) -> int:
        """The modulus in effect for this session."""
        return self._prime

    @property
    def threshold(self) -> int:
        return self._poly.threshold

    @property
    def tier(self) -> SecurityTier:
        return self._tier

    @property
    def polynomial(self) -> SecretPolynomial:
        return self._poly

    def generate_shares(self, points: Iterable[int]) -> List[Share]:
        """One share per point, in the same order.

        Points are not validated; see :func:`secretsharing.crypto.shamir.gen_shares`.
        """
        return gen_shares(self._poly, points)

    def parameters(self) -> SessionParameters:
        return SessionParameters(
            tier_bits=self._tier.bits,
            threshold=self.threshold,
            prime=self._prime,
            generated_prime=self._generated_prime,
        )

    def __repr__(self) -> str:
        return (
            f"Session(tier={self._tier.name}, threshold={self.threshold}, "
            f"prime={self._prime})"
        )


def construct_session(
    tier: SecurityTier | int | None,
    use_fixed_prime: bool,
    threshold: int,
    secret: int,
    rng: Optional[RandomSource] = None,
) -> Session:
    """Create a session sharing *secret* with the given *threshold*.

    Raises :class:`ThresholdTooSmall` for ``threshold <= 1`` before any
    prime is looked up or generated.  A *tier* of None uses the configured
    default.  With ``use_fixed_prime=False`` a fresh safe prime is
    generated, which may be slow for large tiers.
    """
    if threshold <= 1:
        raise ThresholdTooSmall(threshold)
    tier = SecurityTier.coerce(tier)

    if use_fixed_prime:
        prime = fixed_prime(tier)
    else:
        prime = generate_prime(tier, rng)

    poly = polynomial.construct(secret, threshold - 1, prime, tier, rng)
    logger.debug(
        "Constructed session: tier=%s threshold=%d fixed_prime=%s",
        tier.name,
        threshold,
        use_fixed_prime,
    )
    return Session(prime, poly, tier, generated_prime=not use_fixed_prime)
