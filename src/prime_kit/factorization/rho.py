"""Pollard's rho with Brent's cycle detection."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from prime_kit.config import RHO_ATTEMPTS
from prime_kit.core.rand import ensure_rng, random_range


def _brent(n: int, y: int, c: int, m: int) -> int:
    """One Brent run of x -> x^2 + c (mod n). Returns a divisor of n (may be n)."""
    g = r = q = 1
    x = ys = y

    while g == 1:
        x = y
        for _ in range(r):
            y = (y * y + c) % n

        k = 0
        while k < r and g == 1:
            ys = y
            for _ in range(min(m, r - k)):
                y = (y * y + c) % n
                q = q * abs(x - y) % n
            g = math.gcd(q, n)
            k += m
        r <<= 1

    if g == n:
        # The batch overshot; replay it one step at a time from its checkpoint.
        g = 1
        while g == 1:
            ys = (ys * ys + c) % n
            g = math.gcd(abs(x - ys), n)

    return g


def pollard_rho_brent(
    n: int,
    rng: Optional[np.random.Generator] = None,
    attempts: int = RHO_ATTEMPTS,
) -> int:
    """Find a divisor of composite n.

    GCDs are taken over batches of m products |x - y| to amortize their
    cost, the batch window r doubling at every macro step. A polynomial
    whose cycle closes without exposing a proper divisor is replaced by a
    fresh random one.

    Args:
        n: Odd composite to split. Even n returns 2 immediately.
        rng: Random source for the start point, constant and batch size.
        attempts: Polynomials to try before giving up.

    Returns:
        A proper divisor of n, or 1 if every attempt failed.
    """
    if n % 2 == 0:
        return 2
    if n < 4:
        return 1

    rng = ensure_rng(rng)
    for _ in range(attempts):
        y = random_range(rng, 1, n)
        c = random_range(rng, 1, n)
        m = random_range(rng, 1, max(2, n.bit_length() // 2) + 1)
        g = _brent(n, y, c, m)
        if 1 < g < n:
            return g
    return 1
