"""
Test suite for similarity_trait.core — the edit distance engine.

Tests are organized to demonstrate the claims made in core.py:
    §1  Known Levenshtein distances
    §2  Metric properties (d≥0, identity, symmetry, triangle inequality)
    §3  Empty-sequence edge cases
    §4  Distance matrix invariants
    §5  Unit equality (no normalization, non-string sequences)
"""

import sys
import os
import itertools
import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from similarity_trait.core import distance_matrix, levenshtein, is_consistent


# ═══════════════════════════════════════════════════════════════════
#  §1  KNOWN DISTANCES
# ═══════════════════════════════════════════════════════════════════

class TestKnownDistances:

    @pytest.mark.parametrize("s1,s2,expected", [
        ("", "", 0),
        ("a", "", 1),
        ("", "a", 1),
        ("inform", "information", 5),
        ("kitten", "sitting", 3),
        ("saturday", "sunday", 3),
        ("abc", "abc", 0),
        ("abc", "axc", 1),
        ("abc", "abcd", 1),
        ("abcd", "abc", 1),
        ("a", "b", 1),
        ("ab", "ba", 2),
        ("intention", "execution", 5),
        ("flaw", "lawn", 2),
    ])
    def test_levenshtein(self, s1, s2, expected):
        assert levenshtein(s1, s2) == expected

    def test_result_is_bottom_right_of_matrix(self):
        matrix = distance_matrix("kitten", "sitting")
        assert matrix[6][7] == levenshtein("kitten", "sitting") == 3

    def test_completely_different(self):
        """No shared units: cost is the longer length."""
        assert levenshtein("abc", "xyzw") == 4


# ═══════════════════════════════════════════════════════════════════
#  §2  METRIC PROPERTIES
# ═══════════════════════════════════════════════════════════════════

class TestMetricProperties:

    WORDS = ["", "a", "ab", "ba", "abc", "kitten", "sitting", "inform",
             "information", "informatics", "affirmation"]

    def test_identity(self):
        for s in self.WORDS:
            assert levenshtein(s, s) == 0, f"d({s!r}, {s!r}) ≠ 0"

    def test_positive_for_distinct(self):
        for s, t in itertools.combinations(self.WORDS, 2):
            assert levenshtein(s, t) > 0

    def test_symmetry(self):
        for s, t in itertools.product(self.WORDS, repeat=2):
            assert levenshtein(s, t) == levenshtein(t, s), (
                f"Asymmetric: d({s!r},{t!r}) ≠ d({t!r},{s!r})"
            )

    def test_triangle_inequality(self):
        subset = self.WORDS[:8]
        for x, y, z in itertools.product(subset, repeat=3):
            assert levenshtein(x, z) <= levenshtein(x, y) + levenshtein(y, z), (
                f"Triangle inequality violated for {x!r}, {y!r}, {z!r}"
            )

    def test_exhaustive_small_alphabet(self):
        """Symmetry and length bounds over every string of length ≤ 3 on {a, b}."""
        strings = [""] + ["".join(c) for n in range(1, 4)
                          for c in itertools.product("ab", repeat=n)]
        for s, t in itertools.product(strings, repeat=2):
            d = levenshtein(s, t)
            assert d == levenshtein(t, s)
            assert abs(len(s) - len(t)) <= d <= max(len(s), len(t))


# ═══════════════════════════════════════════════════════════════════
#  §3  EMPTY SEQUENCES
# ═══════════════════════════════════════════════════════════════════

class TestEmptySequences:

    @pytest.mark.parametrize("s", ["", "a", "hello", "information"])
    def test_empty_first(self, s):
        assert levenshtein("", s) == len(s)

    @pytest.mark.parametrize("s", ["", "a", "hello", "information"])
    def test_empty_second(self, s):
        assert levenshtein(s, "") == len(s)

    def test_empty_matrix_shapes(self):
        assert distance_matrix("", "") == [[0]]
        assert distance_matrix("ab", "") == [[0], [1], [2]]
        assert distance_matrix("", "ab") == [[0, 1, 2]]


# ═══════════════════════════════════════════════════════════════════
#  §4  DISTANCE MATRIX INVARIANTS
# ═══════════════════════════════════════════════════════════════════

class TestDistanceMatrix:

    def test_shape(self):
        matrix = distance_matrix("inform", "information")
        assert len(matrix) == len("inform") + 1
        assert all(len(row) == len("information") + 1 for row in matrix)

    def test_borders(self):
        a, b = "saturday", "sunday"
        matrix = distance_matrix(a, b)
        assert [row[0] for row in matrix] == list(range(len(a) + 1))
        assert matrix[0] == list(range(len(b) + 1))

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("inform", "information"),
        ("flaw", "lawn"),
        ("", "abc"),
    ])
    def test_recurrence_holds(self, a, b):
        assert is_consistent(distance_matrix(a, b), a, b)

    def test_full_matrix_values(self):
        assert distance_matrix("ab", "ba") == [
            [0, 1, 2],
            [1, 1, 1],
            [2, 1, 2],
        ]

    def test_tampered_matrix_is_inconsistent(self):
        matrix = distance_matrix("kitten", "sitting")
        matrix[3][3] += 1
        assert not is_consistent(matrix, "kitten", "sitting")

    def test_wrong_shape_is_inconsistent(self):
        assert not is_consistent([[0, 1]], "a", "a")

    def test_fresh_matrix_per_call(self):
        first = distance_matrix("abc", "abd")
        first[1][1] = 99
        assert distance_matrix("abc", "abd")[1][1] == 0


# ═══════════════════════════════════════════════════════════════════
#  §5  UNIT EQUALITY
# ═══════════════════════════════════════════════════════════════════

class TestUnits:

    def test_case_sensitive(self):
        assert levenshtein("ABC", "abc") == 3

    def test_code_points_not_normalized(self):
        composed = "caf\u00e9"
        decomposed = "cafe\u0301"
        assert levenshtein(composed, "cafe") == 1
        assert levenshtein(composed, decomposed) == 2

    def test_integer_sequences(self):
        assert levenshtein([1, 2, 3], [1, 3]) == 1
        assert levenshtein((1, 2, 3), (3, 2, 1)) == 2

    def test_token_sequences(self):
        assert levenshtein(("the", "cat", "sat"), ("the", "hat", "sat")) == 1

    def test_inputs_not_mutated(self):
        a, b = [1, 2, 3], [3, 4]
        levenshtein(a, b)
        assert a == [1, 2, 3] and b == [3, 4]

    def test_unhashable_units(self):
        """Units only need ==, so lists work as units."""
        assert levenshtein([[1], [2], [3]], [[1], [4], [3]]) == 1
        assert distance_matrix([[1]], [[1]]) == [[0, 1], [1, 0]]
