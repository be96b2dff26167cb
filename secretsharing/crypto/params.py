"""Field parameters: security tiers, primes and field-element sampling.

A tier fixes the bit size used both for the modulus and for raw random
draws.  Each tier has a hard-coded prime (shared, reproducible parameters)
and can also produce a fresh safe prime on demand.

Randomness comes from a *random source*: anything with a ``getrandbits``
method.  Production code uses :func:`default_random_source`
(``secrets.SystemRandom``); tests pass a seeded ``random.Random``.
"""

from __future__ import annotations

import enum
import logging
import secrets
import time
from typing import Dict, Optional, Protocol

import sympy

from secretsharing import config
from secretsharing.errors import PrimeGenerationExhausted

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Minimal randomness capability used by the library."""

    def getrandbits(self, k: int) -> int:
        ...


def default_random_source() -> RandomSource:
    """Cryptographically secure source backed by the OS."""
    return secrets.SystemRandom()


class SecurityTier(enum.Enum):
    """Supported security levels; the value is the bit size."""

    BN254 = 254
    BITS_256 = 256
    BITS_512 = 512
    BITS_1024 = 1024

    @property
    def bits(self) -> int:
        return self.value

    @classmethod
    def from_bits(cls, bits: int) -> "SecurityTier":
        try:
            return cls(bits)
        except ValueError:
            supported = ", ".join(str(t.value) for t in cls)
            raise ValueError(
                f"Unsupported security tier {bits} (supported: {supported})"
            ) from None

    @classmethod
    def coerce(cls, tier: "SecurityTier | int | None") -> "SecurityTier":
        """Accept a tier, a bit size, or None (configured default)."""
        if tier is None:
            return cls.from_bits(config.DEFAULT_TIER_BITS)
        if isinstance(tier, cls):
            return tier
        return cls.from_bits(int(tier))


# ---------------------------------------------------------------------------
# Fixed primes
# ---------------------------------------------------------------------------

_FIXED_PRIMES: Dict[SecurityTier, int] = {
    # BN254 scalar field order r
    SecurityTier.BN254: int(
        "21888242871839275222246405745257275088548364400416034343698204186575808495617"
    ),
    SecurityTier.BITS_256: int(
        "D7F71B07B75BC19077A53B9B1BAEA33249C8CD5C132C7FA3E20E18AAF17F5A9B",
        16,
    ),
    SecurityTier.BITS_512: int(
        "EB3CFFA5DBAB1325022CE08399445F0E4B9B146B0BA3D17967D70616B2E33B62"
        "FCE08149C3D76FA8EAC2769B4DB5232DFF3416848ED598BA2470CEC3CB5DCD6B",
        16,
    ),
    SecurityTier.BITS_1024: int(
        "DE97F71CFA25F986F6D07618C9EDB1378517A16101CEF67262AFBD3D703E9413"
        "4F91757A03262A988C1A8DE361AAE62F96D7E2C70C10AFD647F718A628651C23"
        "4225FE75F25FB1D6FB28596BEA5E2802B5B4E4BE3CE573192CC1E1F1DEB8CACA"
        "C9BC55AA8CB213945388C78271D5E500D34469A4108680E1AF56FA7C05D321DF",
        16,
    ),
}


def fixed_prime(tier: SecurityTier) -> int:
    """Return the hard-coded prime for *tier*."""
    return _FIXED_PRIMES[tier]


# ---------------------------------------------------------------------------
# Fresh safe primes
# ---------------------------------------------------------------------------

def generate_prime(
    tier: SecurityTier,
    rng: Optional[RandomSource] = None,
    max_candidates: Optional[int] = None,
) -> int:
    """Generate a safe prime ``p = 2q + 1`` of exactly ``tier.bits`` bits.

    Candidates ``q`` have their top and bottom bits forced and must be
    ``2 (mod 3)`` (otherwise 3 divides q or p).  Both q and p are checked
    with ``sympy.isprime``.  This can take a while for the larger tiers.

    Parameters
    ----------
    tier : SecurityTier
        Bit size of the resulting prime.
    rng : RandomSource or None
        Source for candidates.  Defaults to the OS CSPRNG.
    max_candidates : int or None
        Give up after this many candidates (0 = never).  Defaults to
        ``config.MAX_PRIME_CANDIDATES``.
    """
    if rng is None:
        rng = default_random_source()
    if max_candidates is None:
        max_candidates = config.MAX_PRIME_CANDIDATES

    q_bits = tier.bits - 1
    top = 1 << (q_bits - 1)
    started = time.perf_counter()
    candidates = 0
    while True:
        if max_candidates and candidates >= max_candidates:
            raise PrimeGenerationExhausted(
                f"No {tier.bits}-bit safe prime after {candidates} candidates"
            )
        candidates += 1
        q = rng.getrandbits(q_bits) | top | 1
        if q % 3 != 2:
            continue
        if not sympy.isprime(q):
            continue
        p = 2 * q + 1
        if sympy.isprime(p):
            logger.debug(
                "Generated %d-bit safe prime after %d candidates in %.2fs",
                tier.bits,
                candidates,
                time.perf_counter() - started,
            )
            return p


def random_field_element(
    tier: SecurityTier, rng: Optional[RandomSource] = None
) -> int:
    """Uniform integer in [0, 2^bits).  Callers reduce it mod p."""
    if rng is None:
        rng = default_random_source()
    return rng.getrandbits(tier.bits)
