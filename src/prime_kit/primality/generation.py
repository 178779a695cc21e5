"""Prime search and random prime generation on top of Baillie-PSW."""

from __future__ import annotations

from typing import Optional

import numpy as np

from prime_kit.core.rand import ensure_rng, random_bits
from prime_kit.primality.bpsw import is_prime_bpsw


def next_prime(n: int) -> int:
    """Return the smallest prime >= n (2 when n <= 2).

    Raises:
        TypeError: If n is None.
    """
    if n is None:
        raise TypeError("n must be an integer, got None")
    if n <= 2:
        return 2

    p = n if n & 1 else n + 1
    while not is_prime_bpsw(p):
        p += 2
    return p


def random_prime(bits: int, rng: Optional[np.random.Generator] = None) -> int:
    """Random probable prime of exactly `bits` bits.

    Candidates are uniform over odd numbers with the top bit set; the result
    is therefore not uniform over primes of that size.

    Args:
        bits: Bit length, >= 2.
        rng: Random source. A fresh generator is used when omitted.

    Returns:
        A BPSW-accepted prime p with p.bit_length() == bits.

    Raises:
        ValueError: If bits is less than 2.
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")

    rng = ensure_rng(rng)
    top = 1 << (bits - 1)
    while True:
        candidate = random_bits(rng, bits) | top | 1
        if is_prime_bpsw(candidate):
            return candidate


def random_safe_prime(bits: int, rng: Optional[np.random.Generator] = None) -> int:
    """Random safe prime p = 2q + 1 of `bits` bits with q prime.

    Args:
        bits: Bit length, >= 3.
        rng: Random source. A fresh generator is used when omitted.

    Raises:
        ValueError: If bits is less than 3.
    """
    if bits < 3:
        raise ValueError(f"bits must be >= 3, got {bits}")

    rng = ensure_rng(rng)
    while True:
        q = random_prime(bits - 1, rng)
        p = 2 * q + 1
        if is_prime_bpsw(p):
            return p
