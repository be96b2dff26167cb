"""Secret-embedding polynomial over Z_p.

The polynomial ``P(x) = a_0 + a_1 x + ... + a_d x^d`` has ``a_0 = secret``
and a nonzero leading coefficient, so its degree is exactly ``d`` and any
``d + 1`` points are needed to recover ``a_0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field as dc_field
from typing import List, Optional, Tuple

from secretsharing import config
from secretsharing.crypto import field
from secretsharing.crypto.params import RandomSource, SecurityTier, random_field_element
from secretsharing.crypto.shamir import eval_poly
from secretsharing.errors import CoefficientSamplingExhausted, ThresholdTooSmall

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecretPolynomial:
    """Coefficients ``(a_0, ..., a_d)`` in Z_p, lowest degree first.

    The coefficients are kept out of ``repr`` since ``a_0`` is the secret.
    """

    coefficients: Tuple[int, ...] = dc_field(repr=False)
    prime: int

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def threshold(self) -> int:
        """Number of points needed to recover the constant term."""
        return len(self.coefficients)

    @property
    def leading_coefficient(self) -> int:
        return self.coefficients[-1]

    def __call__(self, x: int) -> int:
        return eval_poly(self.coefficients, x, self.prime)


def construct(
    secret: int,
    degree: int,
    prime: int,
    tier: SecurityTier,
    rng: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
) -> SecretPolynomial:
    """Build a random polynomial of exact *degree* with ``P(0) = secret``.

    Middle coefficients are uniform in Z_p.  The leading coefficient is
    redrawn until it is nonzero mod p, at most *max_attempts* times
    (``config.MAX_COEFFICIENT_ATTEMPTS`` by default).
    """
    if degree < 1:
        raise ThresholdTooSmall(degree + 1)
    if max_attempts is None:
        max_attempts = config.MAX_COEFFICIENT_ATTEMPTS

    coeffs: List[int] = [field.reduce(secret, prime)]
    for _ in range(degree - 1):
        coeffs.append(field.reduce(random_field_element(tier, rng), prime))

    for attempt in range(1, max_attempts + 1):
        leading = field.reduce(random_field_element(tier, rng), prime)
        if leading != 0:
            coeffs.append(leading)
            return SecretPolynomial(coefficients=tuple(coeffs), prime=prime)
        logger.debug("Leading coefficient was 0 mod p (attempt %d), redrawing", attempt)

    raise CoefficientSamplingExhausted(
        f"No nonzero leading coefficient after {max_attempts} attempts"
    )
