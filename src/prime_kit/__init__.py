"""prime_kit - primality testing, factorization, certificates and a segmented sieve."""

__version__ = "0.1.0"

import logging

from prime_kit.core.sieve import small_primes_up_to
from prime_kit.core.segmented import primes_between, count_primes_between
from prime_kit.primality import (
    is_prime_det64,
    is_prime_bpsw,
    is_probable_prime,
    next_prime,
    random_prime,
    random_safe_prime,
)
from prime_kit.factorization import Factorization, Factorizer, factor
from prime_kit.certificates import (
    PrimeCertificate,
    PrattCertificate,
    PocklingtonCertificate,
    prove,
    prove_pratt,
    prove_pocklington,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "small_primes_up_to",
    "primes_between",
    "count_primes_between",
    "is_prime_det64",
    "is_prime_bpsw",
    "is_probable_prime",
    "next_prime",
    "random_prime",
    "random_safe_prime",
    "Factorization",
    "Factorizer",
    "factor",
    "PrimeCertificate",
    "PrattCertificate",
    "PocklingtonCertificate",
    "prove",
    "prove_pratt",
    "prove_pocklington",
]
