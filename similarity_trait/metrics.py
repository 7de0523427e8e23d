"""
similarity_trait.metrics — Small similarity metrics
===================================================

Each metric is a pure function.  Those that can be undefined return
None (an ABSENT result) instead of raising:

    absolute_difference(a, b)     |b - a|                None on overflow
    percent_change(a, b)          100·(b - a) / |a|      None when a == 0 or on overflow
    hamming(a, b)                 differing positions    always defined
    max_pairwise_hamming(xs)      max over all pairs     always defined
    population_std_dev(xs)        sqrt(mean((x-μ)²))     None when xs is empty

FIXED-WIDTH INTEGERS:
Python integers never overflow, so the integer metrics take an
IntegerDomain (32-bit two's complement by default) and treat any
intermediate result outside it as an overflow.
"""

import logging
import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Optional, Sequence

from .core import Unit

_LOGGER = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  FIXED-WIDTH INTEGER ARITHMETIC
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class IntegerDomain:
    """
    A two's-complement integer width.

    Examples:
        IntegerDomain(32).maximum   →  2147483647
        IntegerDomain(8).minimum    →  -128
    """
    bits: int = 32

    def __post_init__(self):
        if self.bits < 2:
            raise ValueError(f"Integer width must be at least 2 bits, got {self.bits}")

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def __repr__(self) -> str:
        return f"IntegerDomain(i{self.bits})"


INT32 = IntegerDomain(32)
INT64 = IntegerDomain(64)


def checked_sub(a: int, b: int, domain: IntegerDomain = INT32) -> Optional[int]:
    """a - b, or None when the difference does not fit in `domain`."""
    result = a - b
    if not domain.contains(result):
        return None
    return result


def checked_abs(value: int, domain: IntegerDomain = INT32) -> Optional[int]:
    """|value|, or None for the one value whose magnitude does not fit."""
    result = abs(value)
    if not domain.contains(result):
        return None
    return result


# ═══════════════════════════════════════════════════════════════════
#  NUMERIC METRICS
# ═══════════════════════════════════════════════════════════════════

def absolute_difference(a: int, b: int, domain: IntegerDomain = INT32) -> Optional[int]:
    """
    Absolute difference |b - a|.

    Optional: None when the subtraction (or the magnitude of its result)
    overflows `domain`.
    """
    delta = checked_sub(b, a, domain)
    if delta is None:
        _LOGGER.debug("absolute difference undefined: %d - %d overflows %r", b, a, domain)
        return None
    result = checked_abs(delta, domain)
    if result is None:
        _LOGGER.debug("absolute difference undefined: |%d| overflows %r", delta, domain)
    return result


def percent_change(a: int, b: int, domain: IntegerDomain = INT32) -> Optional[float]:
    """
    Percent change from baseline `a` to value `b`.

    Optional: None when the baseline is zero or when b - a overflows
    `domain`.  A negative baseline divides by its magnitude, so the sign
    of the result follows the direction of the change.
    """
    if a == 0:
        _LOGGER.debug("percent change undefined: zero baseline")
        return None
    delta = checked_sub(b, a, domain)
    if delta is None:
        _LOGGER.debug("percent change undefined: %d - %d overflows %r", b, a, domain)
        return None
    return 100.0 * delta / abs(a)


def population_std_dev(numbers: Iterable[float]) -> Optional[float]:
    """
    Population standard deviation (divisor = count, not count - 1).

    Optional: None for an empty collection.
    """
    values = list(numbers)
    if not values:
        _LOGGER.debug("population standard deviation undefined: empty collection")
        return None
    count = len(values)
    mean = sum(values) / count
    variance = sum((x - mean) * (x - mean) for x in values) / count
    return math.sqrt(variance)


# ═══════════════════════════════════════════════════════════════════
#  HAMMING DISTANCE
# ═══════════════════════════════════════════════════════════════════

def hamming(a: Sequence[Unit], b: Sequence[Unit]) -> int:
    """
    Number of positions at which a and b differ.

    Always defined.  Only the first min(len(a), len(b)) positions are
    compared: trailing units of the longer sequence are ignored, not
    counted as differences.
    """
    return sum(1 for x, y in zip(a, b) if x != y)


def max_pairwise_hamming(collection: Sequence[Sequence[Unit]]) -> int:
    """
    Largest Hamming distance between any two members of `collection`.

    Always defined: 0 when the collection has fewer than two members.
    Compares all k·(k-1)/2 unordered pairs.
    """
    return max(
        (hamming(a, b) for a, b in combinations(collection, 2)),
        default=0,
    )
