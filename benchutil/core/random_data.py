# Path: benchutil/core/random_data.py
"""
Random Data Helpers

Inputs for callers' own benchmarks. The report engine does not use
these.
"""

import random
import secrets
from typing import Optional

ALPHANUM = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'
MAX_SEED = (1 << 63) - 1


def seed_value() -> int:
    """Return a random non-negative 63-bit seed from the OS entropy source."""
    return secrets.randbelow(MAX_SEED)


def rand_bytes(length: int, rng: Optional[random.Random] = None) -> bytes:
    """Return length random ASCII alphanumeric bytes."""
    return rand_string(length, rng).encode('ascii')


def rand_string(length: int, rng: Optional[random.Random] = None) -> str:
    """Return a random ASCII alphanumeric string of the given length."""
    rng = rng or random
    return ''.join(rng.choice(ALPHANUM) for _ in range(length))


def rand_bool(rng: Optional[random.Random] = None) -> bool:
    """Return a pseudo-random bool."""
    rng = rng or random
    return rng.getrandbits(1) == 1


__all__ = ['ALPHANUM', 'seed_value', 'rand_bytes', 'rand_string', 'rand_bool']
