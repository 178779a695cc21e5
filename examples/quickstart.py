"""Quick start example for prime_kit.

Run this script to exercise each part of the toolkit and check the
installation. Pass -v to see the library's debug log on the console.
"""

import logging
import sys
import time

import numpy as np


def setup_console_logger(verbose: bool) -> logging.Logger:
    """Route the prime_kit package logger to stdout."""
    logger = logging.getLogger("prime_kit")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    return logger


def main():
    setup_console_logger("-v" in sys.argv[1:])
    rng = np.random.default_rng(2024)

    print("Prime Kit - Quick Start Demo")
    print("=" * 50)

    print("\n1. Primality tests...")
    from prime_kit import is_prime_det64, is_prime_bpsw

    for n in (2047, 5459, 2**61 - 1, 2**64 - 59):
        print(f"   {n}: det64={is_prime_det64(n)}, bpsw={is_prime_bpsw(n)}")
    m127 = 2**127 - 1
    print(f"   2^127 - 1: bpsw={is_prime_bpsw(m127)}")

    print("\n2. Random primes...")
    from prime_kit import next_prime, random_prime, random_safe_prime

    print(f"   next_prime(10^12) = {next_prime(10**12)}")
    print(f"   128-bit prime: {random_prime(128, rng)}")
    print(f"   64-bit safe prime: {random_safe_prime(64, rng)}")

    print("\n3. Factoring...")
    from prime_kit import factor

    for n in (600851475143, 2**64 + 1, -(10**18 + 9), 2**62 - 1):
        start = time.perf_counter()
        result = factor(n, rng=rng)
        elapsed = time.perf_counter() - start
        print(f"   {n} = {result}  [{result.method}, {elapsed:.3f}s]")

    print("\n4. Primality certificates...")
    from prime_kit import prove, prove_pocklington

    for n in (101, 2**31 - 1):
        cert = prove(n)
        print(f"   {cert.kind}, verified={cert.verify()}")
        print("   " + cert.pretty().rstrip().replace("\n", "\n   "))
    cert = prove_pocklington(719)
    print(f"   {cert.pretty()}, verified={cert.verify()}")

    print("\n5. Segmented sieve...")
    from prime_kit import primes_between, count_primes_between

    start = time.perf_counter()
    count = count_primes_between(0, 10_000_000)
    elapsed = time.perf_counter() - start
    print(f"   {count:,} primes below 10M (sequential) in {elapsed:.3f}s")

    start = time.perf_counter()
    count = count_primes_between(0, 10_000_000, parallel=True)
    elapsed = time.perf_counter() - start
    print(f"   {count:,} primes below 10M (parallel) in {elapsed:.3f}s")

    window = list(primes_between(10**12, 10**12 + 200))
    print(f"   Primes in [10^12, 10^12 + 200): {window}")

    print("\n" + "=" * 50)
    print("Demo complete.")


if __name__ == "__main__":
    main()
