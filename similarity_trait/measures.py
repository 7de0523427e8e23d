"""
similarity_trait.measures — Ready-made implementations of each shape.

Every class here satisfies one of the Protocols in
similarity_trait.core and delegates the arithmetic to
similarity_trait.metrics:

    AbsoluteDifference           IO    (a, b)      → Optional[int]
    PercentChange                IO    (a, b)      → Optional[float]
    PercentChangePair            IIO   a, b        → Optional[float]
    Baseline(a)                  SIO   b           → Optional[float]
    HammingDistance              IO    (a, b)      → int
    Word(text)                   SIO   other       → int
    MaximumHammingDistance       IO    [s₁..sₖ]    → int
    LevenshteinDistance          IO    (a, b)      → int
    LevenshteinPair              IIO   a, b        → int
    PopulationStandardDeviation  IO    [x₁..xₙ]    → Optional[float]
    Sample(xs)                   SO                → Optional[float]
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .core import levenshtein
from .metrics import (
    INT32, IntegerDomain,
    absolute_difference, hamming, max_pairwise_hamming,
    percent_change, population_std_dev,
)


# ═══════════════════════════════════════════════════════════════════
#  NUMBERS
# ═══════════════════════════════════════════════════════════════════

class AbsoluteDifference:
    """
    SimilarityIO[(int, int), Optional[int]].

    None when the subtraction overflows 32-bit integers.

        AbsoluteDifference.similarity((100, 120))  →  20
    """

    @staticmethod
    def similarity(input: tuple[int, int]) -> Optional[int]:
        a, b = input
        return absolute_difference(a, b, INT32)


class PercentChange:
    """
    SimilarityIO[(int, int), Optional[float]].

    None for a zero baseline or an overflowing subtraction.
    """

    @staticmethod
    def similarity(input: tuple[int, int]) -> Optional[float]:
        a, b = input
        return percent_change(a, b, INT32)


class PercentChangePair:
    """SimilarityIIO[int, int, Optional[float]]; same policy as PercentChange."""

    @staticmethod
    def similarity(input0: int, input1: int) -> Optional[float]:
        return percent_change(input0, input1, INT32)


@dataclass(frozen=True, slots=True)
class Baseline:
    """
    A reference number that measures percent change to other numbers.

    SimilaritySIO[int, Optional[float]]:

        Baseline(100).similarity(120)  →  20.0
        Baseline(0).similarity(120)    →  None
    """
    value: int
    domain: IntegerDomain = INT32

    def similarity(self, input: int) -> Optional[float]:
        return percent_change(self.value, input, self.domain)


class PopulationStandardDeviation:
    """
    SimilarityIO[Sequence[float], Optional[float]].

    None for an empty collection.
    """

    @staticmethod
    def similarity(input: Sequence[float]) -> Optional[float]:
        return population_std_dev(input)


@dataclass(frozen=True, slots=True)
class Sample:
    """
    A collection of measurements compared against itself.

    SimilaritySO[Optional[float]]: the population standard deviation of
    the sample's own values, None when the sample is empty.
    """
    values: tuple[float, ...]

    def __init__(self, values: Sequence[float] = ()):
        object.__setattr__(self, 'values', tuple(values))

    def similarity(self) -> Optional[float]:
        return population_std_dev(self.values)


# ═══════════════════════════════════════════════════════════════════
#  STRINGS
# ═══════════════════════════════════════════════════════════════════

class HammingDistance:
    """
    SimilarityIO[(str, str), int].  Always defined.

    Strings of different lengths are compared up to the shorter one.
    """

    @staticmethod
    def similarity(input: tuple[str, str]) -> int:
        a, b = input
        return hamming(a, b)


@dataclass(frozen=True, slots=True)
class Word:
    """
    A string that measures Hamming distance to other strings.

    SimilaritySIO[str, int]:

        Word("information").similarity("informatics")  →  2
    """
    text: str

    def similarity(self, input: str) -> int:
        return hamming(self.text, input)


class MaximumHammingDistance:
    """
    SimilarityIO[Sequence[str], int].  Always defined.

    The largest pairwise Hamming distance; 0 for fewer than two strings.
    """

    @staticmethod
    def similarity(input: Sequence[str]) -> int:
        return max_pairwise_hamming(input)


class LevenshteinDistance:
    """SimilarityIO[(str, str), int].  Always defined."""

    @staticmethod
    def similarity(input: tuple[str, str]) -> int:
        a, b = input
        return levenshtein(a, b)


class LevenshteinPair:
    """SimilarityIIO[str, str, int].  Always defined."""

    @staticmethod
    def similarity(input0: str, input1: str) -> int:
        return levenshtein(input0, input1)
