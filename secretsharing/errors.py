"""Error taxonomy for secret sharing.

Every failure the library raises derives from :class:`SecretSharingError`,
and also from the builtin exception that best describes it so callers can
catch either.
"""

from __future__ import annotations


class SecretSharingError(Exception):
    """Base class for all secretsharing errors."""


class ThresholdTooSmall(SecretSharingError, ValueError):
    """Threshold must be at least 2."""

    def __init__(self, threshold: int) -> None:
        super().__init__(f"Threshold must be >= 2, got {threshold}")
        self.threshold = threshold


class ZeroInputGCD(SecretSharingError, ValueError):
    """gcd() was called with a zero operand."""


class NotCoprimes(SecretSharingError, ArithmeticError):
    """Value has no inverse modulo the modulus.

    During reconstruction this almost always means two shares carry the
    same x-coordinate.
    """


class CoefficientSamplingExhausted(SecretSharingError, RuntimeError):
    """Could not draw a nonzero leading coefficient within the attempt cap."""


class PrimeGenerationExhausted(SecretSharingError, RuntimeError):
    """Safe-prime search gave up after the configured number of candidates."""
