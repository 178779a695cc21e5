"""Baillie-PSW probable-prime test for arbitrary-precision integers.

Stages, each able to settle the answer early:

1. Trial division by the primes up to 1000.
2. Rejection of perfect squares (the Lucas parameter search needs a
   non-square).
3. Strong Miller-Rabin to base 2.
4. Strong Lucas test with Selfridge parameters.

No composite is known to pass all four, but the test is not a proof.
"""

from __future__ import annotations

from prime_kit.config import BPSW_TRIAL_LIMIT
from prime_kit.core.sieve import trial_primes
from prime_kit.primality.lucas import strong_lucas_selfridge
from prime_kit.primality.miller_rabin import mr_base2


def isqrt(n: int) -> int:
    """Integer square root by Newton's method.

    Starts above the root at 2**ceil(bits/2). Iterates decrease strictly
    until they reach floor(sqrt(n)); the first iterate that fails to
    decrease marks convergence.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return 0

    x = 1 << ((n.bit_length() + 1) >> 1)
    while True:
        y = (x + n // x) >> 1
        if y >= x:
            return x
        x = y


def is_square(n: int) -> bool:
    if n < 0:
        return False
    r = isqrt(n)
    return r * r == n


def is_prime_bpsw(n: int) -> bool:
    """Baillie-PSW probable-prime test.

    Args:
        n: Integer to test.

    Returns:
        True if n is prime (or a BPSW pseudoprime, none known), else False.

    Raises:
        TypeError: If n is None.
    """
    if n is None:
        raise TypeError("n must be an integer, got None")
    if n < 2:
        return False

    for p in trial_primes(BPSW_TRIAL_LIMIT):
        if n == p:
            return True
        if n % p == 0:
            return False

    if is_square(n):
        return False
    if not mr_base2(n):
        return False
    return strong_lucas_selfridge(n)
