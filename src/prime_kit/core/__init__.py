"""Core tables, modular helpers and the segmented sieve."""

from prime_kit.core.sieve import small_primes_up_to, trial_primes
from prime_kit.core.segmented import primes_between, count_primes_between, sieve_segment
from prime_kit.core.modmath import mod_pow, mod_inverse, gcd, lcm, crt

__all__ = [
    "small_primes_up_to",
    "trial_primes",
    "primes_between",
    "count_primes_between",
    "sieve_segment",
    "mod_pow",
    "mod_inverse",
    "gcd",
    "lcm",
    "crt",
]
