"""Pocklington primality certificates.

Write n - 1 = F * R where F is the product of the prime powers of n - 1
that are known. If F^2 > n and some a satisfies a^(n-1) = 1 (mod n) and
gcd(a^((n-1)/q) - 1, n) = 1 for every prime q | F, then n is prime. For
prime n the gcd condition is the same as a^((n-1)/q) != 1 (mod n). Only
part of n - 1 has to be factored.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from prime_kit.factorization.factorizer import factor
from prime_kit.primality.bpsw import is_prime_bpsw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PocklingtonCertificate:
    """Pocklington witness for n.

    Attributes:
        n: The proven prime.
        q: Largest known prime factor of n - 1 used in the proof.
        a: Witness base.
        factored_part: F, the factored portion of n - 1, with F^2 > n.
    """
    n: int
    q: int
    a: int
    factored_part: int

    kind: ClassVar[str] = "pocklington"

    def pretty(self) -> str:
        return f"Pocklington: n={self.n}, q={self.q}, a={self.a}"

    def verify(self) -> bool:
        """Re-check F^2 > n and the congruences for the prime factors of F.

        The prime factors of F are recovered by factoring F again.
        """
        n, a, f = self.n, self.a, self.factored_part
        if n < 3 or f < 2 or (n - 1) % f or f * f <= n or (n - 1) % self.q:
            return False
        if pow(a, n - 1, n) != 1:
            return False
        primes = factor(f).primes()
        if not all(is_prime_bpsw(q) for q in primes):
            return False
        return all(math.gcd(pow(a, (n - 1) // q, n) - 1, n) == 1 for q in primes)


def prove_pocklington(n: int) -> Optional[PocklingtonCertificate]:
    """Search for a Pocklington certificate of n.

    Factors n - 1 and keeps the prime powers whose base passes Baillie-PSW,
    so a cofactor the factorizer could not split does not enter the proof.
    Their product F must satisfy F^2 > n; bases a = 2 .. n - 2 are then
    scanned for one meeting the congruence conditions.

    Args:
        n: Candidate prime.

    Returns:
        The certificate, or None if n <= 2, F is too small, or no base
        qualifies.
    """
    if n <= 2:
        return None

    nm1 = n - 1
    fac = factor(nm1)
    known = {q: e for q, e in fac.factors.items() if is_prime_bpsw(q)}

    f = 1
    for q, e in known.items():
        f *= q ** e
    if f * f <= n:
        logger.debug(f"Pocklington for {n}: factored part {f} too small")
        return None

    for a in range(2, nm1):
        if pow(a, nm1, n) != 1:
            continue
        if all(math.gcd(pow(a, nm1 // q, n) - 1, n) == 1 for q in known):
            logger.debug(f"Pocklington witness for {n}: a={a}")
            return PocklingtonCertificate(n, max(known), a, f)

    return None
