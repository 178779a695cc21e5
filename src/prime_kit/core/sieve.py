"""Small-prime table built with the sieve of Eratosthenes.

The table feeds trial division in the factorizer, the first stage of the
Baillie-PSW test and the base primes of the segmented sieve.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np


def _numpy_sieve(limit: int) -> np.ndarray:
    """NumPy-based Sieve of Eratosthenes.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[0] = False
    is_prime[1] = False

    for i in range(2, int(np.sqrt(limit)) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return np.nonzero(is_prime)[0].astype(np.int64)


def small_primes_up_to(limit: int) -> np.ndarray:
    """Return all primes p <= limit in ascending order.

    Args:
        limit: Upper bound (inclusive). Bounds below 2 give an empty table.

    Returns:
        int64 array of primes up to limit.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")
    return _numpy_sieve(int(limit))


@lru_cache(maxsize=16)
def trial_primes(limit: int) -> tuple[int, ...]:
    """Primes up to limit as Python ints, safe to mix with big integers."""
    return tuple(small_primes_up_to(limit).tolist())
