"""Constructive primality certificates.

A certificate is either a PrattCertificate or a PocklingtonCertificate.
Both carry n, a `kind` tag, pretty() and verify(). "No certificate" is
reported as None, never as an exception.
"""

from __future__ import annotations

from typing import Optional, Union

from prime_kit.certificates.pratt import PrattCertificate, prove_pratt
from prime_kit.certificates.pocklington import PocklingtonCertificate, prove_pocklington

PrimeCertificate = Union[PrattCertificate, PocklingtonCertificate]


def prove(n: int) -> Optional[PrimeCertificate]:
    """Try a Pratt certificate, then a Pocklington one."""
    return prove_pratt(n) or prove_pocklington(n)


__all__ = [
    "PrimeCertificate",
    "PrattCertificate",
    "PocklingtonCertificate",
    "prove",
    "prove_pratt",
    "prove_pocklington",
]
