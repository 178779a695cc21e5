"""Stage-1 "ECM" sketch.

NOT a real elliptic-curve method. The point addition below does not
implement the elliptic-curve group law: it mixes coordinates with the
curve parameter so that gcd(z, n) occasionally leaks a factor. It is kept
as a last, weak splitting attempt with the usual contract (return 1 or a
proper divisor) and must not be relied on to find factors.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from prime_kit.config import ECM_BOUND, ECM_CURVES
from prime_kit.core.rand import ensure_rng, random_below
from prime_kit.core.sieve import trial_primes

Point = tuple[int, int]


def _add(p: Point, q: Point, a: int, n: int) -> Point:
    """Placeholder addition, see module docstring."""
    return (p[0] * q[0] + a) % n, abs(p[1] * q[1] - a) % n


def _multiply(p: Point, k: int, a: int, n: int) -> Point:
    """Double-and-add scalar multiple k * p over the placeholder addition."""
    result = (1, 0)
    addend = p
    while k > 0:
        if k & 1:
            result = _add(result, addend, a, n)
        addend = _add(addend, addend, a, n)
        k >>= 1
    return result


def ecm_phase1(
    n: int,
    bound: int = ECM_BOUND,
    curves: int = ECM_CURVES,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Try `curves` random (point, parameter) pairs against n.

    For every prime p <= bound the point is multiplied by p,
    floor(log bound / log p) times, checking gcd(z, n) after each step.

    Args:
        n: Composite to split. Even n returns 2 immediately.
        bound: Prime bound for the scalar multipliers.
        curves: Number of random starts.
        rng: Random source.

    Returns:
        A proper divisor of n, or 1.
    """
    if n % 2 == 0:
        return 2

    rng = ensure_rng(rng)
    primes = trial_primes(bound)
    log_bound = math.log(bound)

    for _ in range(curves):
        point = (random_below(rng, n), 1)
        a = random_below(rng, n)
        for p in primes:
            for _ in range(int(log_bound / math.log(p))):
                point = _multiply(point, p, a, n)
                g = math.gcd(point[1], n)
                if 1 < g < n:
                    return g
    return 1
