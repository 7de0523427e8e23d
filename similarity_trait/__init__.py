"""
similarity-trait
================

One contract, `similarity`, for comparing any kind of input and
returning any kind of output, plus a handful of metrics built on it.

    levenshtein("inform", "information")                        → 5
    hamming("information", "informatics")                       → 2
    max_pairwise_hamming(["information", "informatics",
                          "affirmation"])                       → 5
    population_std_dev([2, 4, 4, 4, 5, 5, 7, 9])                → 2.0
    absolute_difference(100, 120)                               → 20
    percent_change(100, 120)                                    → 20.0
    percent_change(0, 120)                                      → None

The contract comes in four shapes (SimilarityIO, SimilarityIIO,
SimilaritySO, SimilaritySIO).  Metrics that can be undefined return
None rather than raising.
"""

from similarity_trait.core import (
    # Shapes
    SimilarityIO,
    SimilarityIIO,
    SimilaritySO,
    SimilaritySIO,
    # Edit distance
    distance_matrix,
    levenshtein,
    is_consistent,
)
from similarity_trait.metrics import (
    IntegerDomain, INT32, INT64,
    checked_sub, checked_abs,
    absolute_difference, percent_change, population_std_dev,
    hamming, max_pairwise_hamming,
)
from similarity_trait.measures import (
    AbsoluteDifference, PercentChange, PercentChangePair, Baseline,
    HammingDistance, Word, MaximumHammingDistance,
    LevenshteinDistance, LevenshteinPair,
    PopulationStandardDeviation, Sample,
)

__version__ = "0.1.0"
__all__ = [
    "SimilarityIO", "SimilarityIIO", "SimilaritySO", "SimilaritySIO",
    "distance_matrix", "levenshtein", "is_consistent",
    "IntegerDomain", "INT32", "INT64", "checked_sub", "checked_abs",
    "absolute_difference", "percent_change", "population_std_dev",
    "hamming", "max_pairwise_hamming",
    "AbsoluteDifference", "PercentChange", "PercentChangePair", "Baseline",
    "HammingDistance", "Word", "MaximumHammingDistance",
    "LevenshteinDistance", "LevenshteinPair",
    "PopulationStandardDeviation", "Sample",
]
