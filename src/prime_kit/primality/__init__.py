"""Primality tests and prime generation."""

from prime_kit.primality.miller_rabin import (
    is_prime_det64,
    is_probable_prime,
    miller_rabin,
    mr_base2,
)
from prime_kit.primality.lucas import (
    jacobi,
    lucas_uv,
    selfridge_parameters,
    strong_lucas_selfridge,
)
from prime_kit.primality.bpsw import is_prime_bpsw, is_square, isqrt
from prime_kit.primality.generation import next_prime, random_prime, random_safe_prime

__all__ = [
    # Miller-Rabin
    "is_prime_det64",
    "is_probable_prime",
    "miller_rabin",
    "mr_base2",
    # Lucas
    "jacobi",
    "lucas_uv",
    "selfridge_parameters",
    "strong_lucas_selfridge",
    # Baillie-PSW
    "is_prime_bpsw",
    "is_square",
    "isqrt",
    # Generation
    "next_prime",
    "random_prime",
    "random_safe_prime",
]
