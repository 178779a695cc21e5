"""Arbitrary-precision draws from a numpy random Generator.

numpy generators produce fixed-width integers only, so big values are
assembled from rng.bytes().
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def ensure_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return rng, or a freshly seeded generator when none is given."""
    if rng is None:
        rng = np.random.default_rng()
    return rng


def random_bits(rng: np.random.Generator, bits: int) -> int:
    """Uniform integer in [0, 2**bits)."""
    if bits <= 0:
        return 0
    nbytes = (bits + 7) // 8
    value = int.from_bytes(rng.bytes(nbytes), "little")
    return value >> (nbytes * 8 - bits)


def random_below(rng: np.random.Generator, n: int) -> int:
    """Uniform integer in [0, n) by rejection sampling."""
    if n <= 0:
        raise ValueError(f"n must be >= 1, got {n}")
    bits = n.bit_length()
    while True:
        value = random_bits(rng, bits)
        if value < n:
            return value


def random_range(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform integer in [low, high)."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return low + random_below(rng, high - low)
