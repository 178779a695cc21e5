"""Segmented sieve of Eratosthenes over a half-open range [start, stop).

The range is cut into fixed-size segments. Each segment gets its own
boolean composite array, is pre-crossed with a small wheel of primes up to
29, then crossed with the base primes whose square falls inside it.
Segments share nothing but the read-only base-prime array, so they can be
sieved on a thread pool; results are always emitted in segment order.
"""

from __future__ import annotations

import logging
import math
import os
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, Optional, Sequence

import numpy as np

from prime_kit.config import DEFAULT_SEGMENT_SIZE, MIN_SEGMENT_SIZE, WHEEL_PRIMES
from prime_kit.core.sieve import small_primes_up_to

logger = logging.getLogger(__name__)


def _cross_off(composite: np.ndarray, p: int, low: int, high: int) -> None:
    """Mark multiples of p in [low, high), starting no lower than p*p."""
    first = max(p * p, ((low + p - 1) // p) * p)
    if first < high:
        composite[first - low::p] = True


def sieve_segment(base_primes: Sequence[int], low: int, high: int) -> np.ndarray:
    """Sieve one segment [low, high).

    Args:
        base_primes: Ascending primes up to at least isqrt(high - 1), as
            Python ints.
        low: Segment start (inclusive), >= 2.
        high: Segment end (exclusive).

    Returns:
        int64 array of the primes in the segment.
    """
    composite = np.zeros(high - low, dtype=bool)

    for p in WHEEL_PRIMES:
        if p >= high:
            break
        _cross_off(composite, p, low, high)

    wheel_max = WHEEL_PRIMES[-1]
    for p in base_primes:
        if p * p >= high:
            break
        if p <= wheel_max:
            continue
        _cross_off(composite, p, low, high)

    return np.flatnonzero(~composite).astype(np.int64) + low


def _segment_bounds(start: int, stop: int, size: int) -> list[tuple[int, int]]:
    return [(low, min(stop, low + size)) for low in range(start, stop, size)]


def primes_between(
    start: int,
    stop: int,
    segment_size: int = DEFAULT_SEGMENT_SIZE,
    parallel: bool = False,
    parallelism: Optional[int] = None,
) -> Iterator[int]:
    """Yield the primes in [start, stop) in ascending order.

    Args:
        start: Lower bound (inclusive); values below 2 are clamped to 2.
        stop: Upper bound (exclusive).
        segment_size: Numbers per segment. Raised to MIN_SEGMENT_SIZE if
            smaller.
        parallel: Sieve segments on a thread pool.
        parallelism: Worker count for the pool. Defaults to os.cpu_count().

    Returns:
        Iterator over Python ints. Empty when stop <= start after clamping.

    Raises:
        ValueError: If segment_size or parallelism is less than 1.
    """
    if segment_size < 1:
        raise ValueError(f"segment_size must be >= 1, got {segment_size}")
    if parallelism is not None and parallelism < 1:
        raise ValueError(f"parallelism must be >= 1, got {parallelism}")

    # Argument checks above run at call time; the sieve itself is lazy.
    return _primes_between(start, stop, segment_size, parallel, parallelism)


def _primes_between(
    start: int,
    stop: int,
    segment_size: int,
    parallel: bool,
    parallelism: Optional[int],
) -> Iterator[int]:
    start = max(start, 2)
    if stop <= start:
        return

    base_primes = tuple(small_primes_up_to(math.isqrt(stop - 1)).tolist())
    size = max(MIN_SEGMENT_SIZE, segment_size)
    segments = _segment_bounds(start, stop, size)

    logger.debug(
        f"Sieving [{start}, {stop}) in {len(segments)} segment(s) of {size}, "
        f"{len(base_primes)} base primes, parallel={parallel}"
    )

    if not parallel:
        for low, high in segments:
            yield from sieve_segment(base_primes, low, high).tolist()
        return

    workers = parallelism or os.cpu_count() or 1
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sieve")
    pending: deque[Future] = deque()
    remaining = iter(segments)

    def submit_next() -> None:
        bounds = next(remaining, None)
        if bounds is not None:
            pending.append(executor.submit(sieve_segment, base_primes, *bounds))

    try:
        # Keep at most two segments per worker in flight.
        for _ in range(2 * workers):
            submit_next()

        while pending:
            chunk = pending.popleft().result()
            submit_next()
            yield from chunk.tolist()
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


def count_primes_between(
    start: int,
    stop: int,
    segment_size: int = DEFAULT_SEGMENT_SIZE,
    parallel: bool = False,
    parallelism: Optional[int] = None,
) -> int:
    """Count primes in [start, stop) with the segmented sieve."""
    return sum(
        1 for _ in primes_between(start, stop, segment_size, parallel, parallelism)
    )
