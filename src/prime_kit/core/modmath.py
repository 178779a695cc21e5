"""Modular arithmetic helpers over Python integers.

Exponentiation and inverses delegate to the built-in three-argument pow;
gcd and lcm to the math module. crt combines congruences with
pairwise-coprime moduli.
"""

from __future__ import annotations

import math
from typing import Sequence


def mod_pow(a: int, e: int, m: int) -> int:
    """(a ** e) mod m."""
    return pow(a, e, m)


def mod_inverse(a: int, m: int) -> int:
    """Return a^-1 mod m.

    Raises:
        ValueError: If a is not invertible modulo m.
    """
    return pow(a, -1, m)


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    return math.lcm(a, b)


def crt(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Solve x = r_i (mod m_i) for pairwise-coprime moduli.

    Args:
        residues: Residues r_i.
        moduli: Pairwise-coprime moduli m_i, same length as residues.

    Returns:
        The unique solution x in [0, prod(m_i)).

    Raises:
        ValueError: If the sequences are empty or differ in length, or if
            the moduli are not pairwise coprime.
    """
    if len(residues) != len(moduli) or not residues:
        raise ValueError(
            f"residues and moduli must be non-empty and of equal length, "
            f"got {len(residues)} and {len(moduli)}"
        )

    x = 0
    modulus = 1
    for r, m in zip(residues, moduli):
        t = (r - x) % m
        x += modulus * (t * mod_inverse(modulus, m) % m)
        modulus *= m
        x %= modulus
    return x
