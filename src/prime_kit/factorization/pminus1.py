"""Pollard's p-1 method, stage 1."""

from __future__ import annotations

import math

from prime_kit.config import PM1_BOUND


def pollard_pm1(n: int, bound: int = PM1_BOUND) -> int:
    """Look for a prime p | n with bound-smooth p - 1.

    Raises a = 2 to 2, 3, ..., bound in turn, so after step j the exponent
    is j!, and checks gcd(a - 1, n) at every step.

    Args:
        n: Composite to split.
        bound: Smoothness bound B.

    Returns:
        A proper divisor of n, or 1 if none surfaced within the bound.
    """
    a = 2
    for j in range(2, bound + 1):
        a = pow(a, j, n)
        g = math.gcd(a - 1, n)
        if 1 < g < n:
            return g
        if g == n:
            # Every prime factor was caught at once; larger j cannot separate them.
            break
    return 1
