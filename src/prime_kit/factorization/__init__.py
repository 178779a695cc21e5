"""Integer factorization: trial division, Pollard rho, Pollard p-1 and an ECM sketch."""

from prime_kit.factorization.result import Factorization
from prime_kit.factorization.rho import pollard_rho_brent
from prime_kit.factorization.pminus1 import pollard_pm1
from prime_kit.factorization.ecm import ecm_phase1
from prime_kit.factorization.factorizer import Factorizer, factor

__all__ = [
    "Factorization",
    "Factorizer",
    "factor",
    "pollard_rho_brent",
    "pollard_pm1",
    "ecm_phase1",
]
