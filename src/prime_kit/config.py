"""Tunable bounds for the primality, factorization and sieve routines.

Every limit used by the algorithms lives here as a module constant so the
whole toolkit can be tuned from one place. The factorizer takes its bounds
through a FactorizerConfig, which defaults to these constants.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


# Small-prime tables
TRIAL_DIVISION_LIMIT = 10_000
BPSW_TRIAL_LIMIT = 1000
DET64_TRIAL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31)

# Witness bases for the deterministic 64-bit Miller-Rabin test, in order
DET64_BASES = (2, 3, 5, 7, 11, 13, 17)

# Factorizer stages
MR_ROUNDS = 40
RHO_ATTEMPTS = 8
PM1_BOUND = 50_000
ECM_BOUND = 50_000
ECM_CURVES = 10

# Segmented sieve
DEFAULT_SEGMENT_SIZE = 1 << 20
MIN_SEGMENT_SIZE = 1 << 16
WHEEL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)


@dataclass(frozen=True)
class FactorizerConfig:
    """Bounds used by Factorizer.

    Attributes:
        trial_limit: Largest prime used for trial division.
        mr_rounds: Random-base Miller-Rabin rounds for the cofactor screen.
        rho_attempts: Polynomials tried by Pollard rho before giving up.
        pm1_bound: Stage-1 bound B for Pollard p-1.
        ecm_bound: Stage-1 bound for the ECM sketch.
        ecm_curves: Number of random curves tried by the ECM sketch.
    """
    trial_limit: int = TRIAL_DIVISION_LIMIT
    mr_rounds: int = MR_ROUNDS
    rho_attempts: int = RHO_ATTEMPTS
    pm1_bound: int = PM1_BOUND
    ecm_bound: int = ECM_BOUND
    ecm_curves: int = ECM_CURVES

    def __post_init__(self):
        if self.trial_limit < 2:
            raise ValueError(f"trial_limit must be >= 2, got {self.trial_limit}")
        for name in ("mr_rounds", "rho_attempts", "ecm_curves"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")
        for name in ("pm1_bound", "ecm_bound"):
            value = getattr(self, name)
            if value < 2:
                raise ValueError(f"{name} must be >= 2, got {value}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'FactorizerConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
