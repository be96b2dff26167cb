"""Global configuration for secretsharing."""

import os

# ---------- Security tier used when the caller does not pick one ----------
# One of 254 (BN254), 256, 512, 1024.
DEFAULT_TIER_BITS = int(os.environ.get("SECRETSHARING_DEFAULT_TIER", "256"))

# ---------- Polynomial construction ----------
# Cap on redraws of the leading coefficient (each redraw fails with prob 1/p).
MAX_COEFFICIENT_ATTEMPTS = int(
    os.environ.get("SECRETSHARING_MAX_COEFFICIENT_ATTEMPTS", "64")
)

# ---------- Safe-prime generation ----------
# 0 means search until a safe prime is found.
MAX_PRIME_CANDIDATES = int(os.environ.get("SECRETSHARING_MAX_PRIME_CANDIDATES", "0"))
