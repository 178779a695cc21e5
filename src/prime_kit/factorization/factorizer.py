"""Best-effort integer factorization.

Trial division by the small-prime table removes small factors. Whatever
is left goes on a work stack: each entry is either accepted as prime by a
random-base Miller-Rabin screen or split by Pollard rho (Brent), Pollard
p-1 stage 1, or the ECM sketch, in that order. Both halves of a split go
back on the stack. An entry none of the methods can split is accepted as
probably prime so the loop always terminates; such entries are listed in
Factorization.unresolved.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from prime_kit.config import FactorizerConfig
from prime_kit.core.rand import ensure_rng
from prime_kit.core.sieve import trial_primes
from prime_kit.factorization.ecm import ecm_phase1
from prime_kit.factorization.pminus1 import pollard_pm1
from prime_kit.factorization.result import Factorization
from prime_kit.factorization.rho import pollard_rho_brent
from prime_kit.primality.miller_rabin import is_probable_prime

logger = logging.getLogger(__name__)

STAGES = ("rho", "p-1", "ecm1")


class Factorizer:
    """Factor integers with a fixed configuration and random source.

    A Factorizer holds a numpy Generator, so share one instance across
    threads only if the generator is not used concurrently; the module-level
    factor() creates a fresh instance per call.
    """

    def __init__(
        self,
        config: Optional[FactorizerConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize factorizer.

        Args:
            config: Stage bounds. Defaults to FactorizerConfig().
            rng: Random source for rho, the ECM sketch and the prime screen.
        """
        self.config = config or FactorizerConfig()
        self.rng = ensure_rng(rng)

    def trial_divide(self, n: int, factors: Dict[int, int]) -> int:
        """Divide out every table prime from n > 0, recording exponents.

        Returns:
            The remaining cofactor.
        """
        for p in trial_primes(self.config.trial_limit):
            if p * p > n:
                break
            while n % p == 0:
                factors[p] = factors.get(p, 0) + 1
                n //= p

        # A cofactor below the square of the table bound is prime.
        if 1 < n <= self.config.trial_limit ** 2:
            factors[n] = factors.get(n, 0) + 1
            n = 1
        return n

    def split(self, m: int, fired: set[str]) -> int:
        """Try each splitting stage on composite m.

        Returns:
            A proper divisor of m, or 1 if every stage failed.
        """
        cfg = self.config
        attempts = (
            ("rho", lambda: pollard_rho_brent(m, self.rng, cfg.rho_attempts)),
            ("p-1", lambda: pollard_pm1(m, cfg.pm1_bound)),
            ("ecm1", lambda: ecm_phase1(m, cfg.ecm_bound, cfg.ecm_curves, self.rng)),
        )
        for name, attempt in attempts:
            fired.add(name)
            d = attempt()
            if 1 < d < m:
                logger.debug(f"{name} split {m} -> {d} * {m // d}")
                return d
        return 1

    def factor(self, n: int) -> Factorization:
        """Factor a signed integer.

        Args:
            n: Any integer.

        Returns:
            Factorization with complete=True. The method tag lists the
            stages that ran.
        """
        factors: Dict[int, int] = {}
        if n < 0:
            factors[-1] = 1
            n = -n
        if n == 0:
            return Factorization({0: 1}, True, "zero")

        n = self.trial_divide(n, factors)
        if n == 1:
            return Factorization(_sorted(factors), True, "trial")

        fired: set[str] = set()
        unresolved: list[int] = []
        stack = [n]
        while stack:
            m = stack.pop()
            if is_probable_prime(m, self.config.mr_rounds, self.rng):
                factors[m] = factors.get(m, 0) + 1
                continue

            d = self.split(m, fired)
            if d == 1:
                logger.warning(f"Could not split {m}; accepting it as probably prime")
                unresolved.append(m)
                factors[m] = factors.get(m, 0) + 1
            else:
                stack.append(d)
                stack.append(m // d)

        method = "+".join(["trial"] + [s for s in STAGES if s in fired])
        return Factorization(_sorted(factors), True, method, tuple(unresolved))


def _sorted(factors: Dict[int, int]) -> Dict[int, int]:
    return dict(sorted(factors.items()))


def factor(
    n: int,
    rng: Optional[np.random.Generator] = None,
    config: Optional[FactorizerConfig] = None,
) -> Factorization:
    """Factor n with a fresh Factorizer. See Factorizer.factor."""
    return Factorizer(config, rng).factor(n)
