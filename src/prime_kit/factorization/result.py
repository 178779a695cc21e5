"""Factorization result record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Factorization:
    """Outcome of factoring one integer.

    Attributes:
        factors: Map of prime (or sentinel -1 for the sign, 0 for a zero
            input) to its exponent, in ascending key order.
        complete: True when every key is believed prime and the product
            reconstructs the input.
        method: Tag naming the stages that contributed, e.g. "trial" or
            "trial+rho+p-1".
        unresolved: Cofactors no method could split, accepted as probably
            prime. Empty in the normal case.
    """
    factors: Dict[int, int]
    complete: bool
    method: str
    unresolved: tuple[int, ...] = field(default=())

    def reconstruct(self) -> int:
        """Multiply the recorded prime powers back together."""
        product = 1
        for p, e in self.factors.items():
            product *= p ** e
        return product

    def primes(self) -> list[int]:
        """Prime keys in ascending order, without the -1 and 0 sentinels."""
        return [p for p in self.factors if p > 1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'factors': {str(p): e for p, e in self.factors.items()},
            'complete': self.complete,
            'method': self.method,
            'unresolved': [str(m) for m in self.unresolved],
        }

    def __str__(self) -> str:
        if not self.factors:
            return "1"
        return " * ".join(
            str(p) if e == 1 else f"{p}^{e}" for p, e in self.factors.items()
        )
