"""Jacobi symbol and the strong Lucas probable-prime test.

Parameters follow Selfridge's method A: the first D in 5, -7, 9, -11, ...
with Jacobi symbol (D/n) = -1, P = 1 and Q = (1 - D) / 4.
"""

from __future__ import annotations


def jacobi(a: int, n: int) -> int:
    """Jacobi symbol (a/n).

    Args:
        a: Any integer.
        n: Odd positive modulus.

    Returns:
        -1, 0 or 1.

    Raises:
        ValueError: If n is not odd and positive.
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError(f"n must be odd and positive, got {n}")

    a %= n
    result = 1
    while a != 0:
        t = (a & -a).bit_length() - 1
        if t > 0:
            a >>= t
            if t & 1 and n % 8 in (3, 5):
                result = -result

        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n

    return result if n == 1 else 0


def selfridge_parameters(n: int) -> tuple[int, int, int]:
    """Return (D, P, Q) for the strong Lucas test of n.

    n must be odd and not a perfect square, otherwise no D qualifies and
    the scan does not terminate.
    """
    d = 5
    while jacobi(d, n) != -1:
        d = -d - 2 if d > 0 else -d + 2
    return d, 1, (1 - d) // 4


def lucas_uv(n: int, p: int, q: int, d: int, k: int) -> tuple[int, int]:
    """Compute (U_k mod n, V_k mod n) for odd n.

    Left-to-right binary ladder: every bit doubles the index
    (U_2j = U_j V_j, V_2j = V_j^2 - 2Q^j), and a set bit adds one
    (U_j+1 = (P U_j + V_j) / 2, V_j+1 = (D U_j + P V_j) / 2), the halving
    done as multiplication by the inverse of 2 modulo n.
    """
    u, v, qk = 0, 2, 1
    inv2 = (n + 1) >> 1

    for i in range(k.bit_length() - 1, -1, -1):
        u = u * v % n
        v = (v * v - 2 * qk) % n
        qk = qk * qk % n

        if (k >> i) & 1:
            u, v = (p * u + v) * inv2 % n, (d * u + p * v) * inv2 % n
            qk = qk * q % n

    return u, v


def strong_lucas_selfridge(n: int) -> bool:
    """Strong Lucas probable-prime test with Selfridge parameters.

    Args:
        n: Odd integer > 2 that is not a perfect square.

    Returns:
        True if n is a strong Lucas probable prime.
    """
    d, p, q = selfridge_parameters(n)

    m = n + 1
    s = (m & -m).bit_length() - 1
    k = m >> s

    u, v = lucas_uv(n, p, q, d, k)
    if u == 0 or v == 0:
        return True

    qk = pow(q, k, n)
    for _ in range(s - 1):
        v = (v * v - 2 * qk) % n
        if v == 0:
            return True
        qk = qk * qk % n

    return False
