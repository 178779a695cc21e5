"""Strong Miller-Rabin tests.

is_prime_det64 uses a fixed witness set and no randomness.
is_probable_prime draws its bases from an injected generator and is the
high-confidence screen used by the factorizer.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from prime_kit.config import DET64_BASES, DET64_TRIAL_PRIMES, MR_ROUNDS
from prime_kit.core.rand import ensure_rng, random_range

UINT64_LIMIT = 1 << 64


def decompose(m: int) -> tuple[int, int]:
    """Write m = d * 2**s with d odd. Returns (d, s)."""
    s = (m & -m).bit_length() - 1
    return m >> s, s


def strong_probable_prime(n: int, a: int, d: int, s: int) -> bool:
    """One strong Miller-Rabin round for odd n with n - 1 = d * 2**s."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def miller_rabin(n: int, bases: Iterable[int]) -> bool:
    """Strong Miller-Rabin test of odd n > 2 against each base."""
    d, s = decompose(n - 1)
    for a in bases:
        a %= n
        if a == 0:
            continue
        if not strong_probable_prime(n, a, d, s):
            return False
    return True


def mr_base2(n: int) -> bool:
    """Strong probable-prime test to base 2 for odd n > 2."""
    d, s = decompose(n - 1)
    return strong_probable_prime(n, 2, d, s)


def is_prime_det64(n: int) -> bool:
    """Fixed-base primality test for n < 2**64.

    Trial-divides by the primes up to 31, then runs strong Miller-Rabin with
    the bases 2, 3, 5, 7, 11, 13 and 17. That base set is proven exact only
    for n < 341,550,071,728,321 (about 3.4e14), which is itself the first
    composite it accepts. Between that bound and 2**64 the answer is a
    strong probable-prime verdict; use is_prime_bpsw there when a composite
    must not slip through.

    Args:
        n: Integer to test.

    Returns:
        True if n is prime, False otherwise.

    Raises:
        ValueError: If n does not fit in 64 bits.
    """
    if n >= UINT64_LIMIT:
        raise ValueError(f"n must be < 2**64, got {n}")
    if n < 2:
        return False

    for p in DET64_TRIAL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    return miller_rabin(n, DET64_BASES)


def is_probable_prime(
    n: int,
    rounds: int = MR_ROUNDS,
    rng: Optional[np.random.Generator] = None,
) -> bool:
    """Miller-Rabin with random bases.

    A composite survives each round with probability at most 1/4.

    Args:
        n: Integer to test.
        rounds: Number of random bases to try.
        rng: Random source for the bases.

    Returns:
        False if n is certainly composite, True if n is probably prime.
    """
    if n < 2:
        return False
    for p in DET64_TRIAL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    rng = ensure_rng(rng)
    d, s = decompose(n - 1)
    for _ in range(rounds):
        a = random_range(rng, 2, n - 1)
        if not strong_probable_prime(n, a, d, s):
            return False
    return True
