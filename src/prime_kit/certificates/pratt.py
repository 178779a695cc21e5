"""Pratt primality certificates.

n is prime if some a has order exactly n - 1 modulo n: a^(n-1) = 1 and
a^((n-1)/q) != 1 for every prime q dividing n - 1. This needs the full
factorization of n - 1.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional

from prime_kit.factorization.factorizer import factor
from prime_kit.primality.bpsw import is_prime_bpsw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrattCertificate:
    """Pratt witness for n.

    Attributes:
        n: The proven prime.
        tree: Maps n to the prime factors q of n - 1 checked against the
            witness.
        witness: Base a of multiplicative order n - 1.
    """
    n: int
    tree: Dict[int, List[int]]
    witness: int

    kind: ClassVar[str] = "pratt"

    def pretty(self) -> str:
        lines = [f"Pratt certificate for {self.n}"]
        for p, factors in self.tree.items():
            lines.append(f"  p={p} via bases {factors}")
        return "\n".join(lines) + "\n"

    def verify(self) -> bool:
        """Re-check the witness against the recorded factors of n - 1.

        Every recorded factor must pass Baillie-PSW and together they must
        account for all of n - 1.
        """
        n, a = self.n, self.witness
        factors = self.tree.get(n)
        if n < 3 or not factors:
            return False

        cofactor = n - 1
        for q in factors:
            if not is_prime_bpsw(q) or cofactor % q:
                return False
            while cofactor % q == 0:
                cofactor //= q
        if cofactor != 1:
            return False

        if pow(a, n - 1, n) != 1:
            return False
        return all(math.gcd(pow(a, (n - 1) // q, n) - 1, n) == 1 for q in factors)


def prove_pratt(n: int) -> Optional[PrattCertificate]:
    """Search for a Pratt certificate of n.

    Factors n - 1 (which must come back complete), then scans bases
    a = 2 .. n - 2 for one with a^(n-1) = 1 (mod n) and
    gcd(a^((n-1)/q) - 1, n) = 1 for every prime q | n - 1.

    Args:
        n: Candidate prime.

    Returns:
        The certificate, or None if n < 2, the factorization of n - 1 is
        incomplete, or no base qualifies.
    """
    if n < 2:
        return None

    nm1 = n - 1
    fac = factor(nm1)
    if not fac.complete:
        return None

    primes = fac.primes()
    for a in range(2, nm1):
        if pow(a, nm1, n) != 1:
            continue
        if all(math.gcd(pow(a, nm1 // q, n) - 1, n) == 1 for q in primes):
            logger.debug(f"Pratt witness for {n}: a={a}")
            return PrattCertificate(n, {n: primes}, a)

    return None
