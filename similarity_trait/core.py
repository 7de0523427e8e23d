"""
similarity_trait.core — The similarity contract and edit distance
=================================================================

§1  ONE NAME, FOUR SHAPES
─────────────────────────

Every measure in this package answers the same question, "how alike
are these inputs?", through a method called `similarity`.  What varies
is where the inputs come from:

    SimilarityIO    similarity(input)           one packed input, e.g. a pair
    SimilarityIIO   similarity(input0, input1)  two separate inputs
    SimilaritySO    obj.similarity()            the receiver against itself
    SimilaritySIO   obj.similarity(input)       the receiver against one input

Each shape is its own Protocol.  Nothing dispatches on argument count;
a caller picks the shape it needs and a measure declares which shapes
it satisfies.

DEFINEDNESS POLICY:
An implementer either returns a plain value (the operation is always
defined) or an Optional value, where None marks an ABSENT result
(division by zero, overflow, empty input).  Absent is not an error and
never raises.  Every implementer states its policy in its docstring,
since callers branch on it.


§2  LEVENSHTEIN DISTANCE
────────────────────────

The minimum number of single-unit insertions, deletions and
substitutions that turn sequence a into sequence b:

    D[i][0] = i
    D[0][j] = j
    D[i][j] = min(
        D[i-1][j]   + 1,           # delete a[i-1]
        D[i][j-1]   + 1,           # insert b[j-1]
        D[i-1][j-1] + cost(i, j),  # substitute (cost 0 on a match)
    )

    distance = D[m][n]

Units are compared with ==.  A str decomposes into code points; no
case folding or Unicode normalization happens here, so callers that
want it must normalize first.

COMPLEXITY:  O(m·n) time and O(m·n) space.  The full matrix is kept
(rather than two rolling rows) so it can be inspected through
distance_matrix().
"""

from typing import Any, Protocol, Sequence, TypeVar


# ═══════════════════════════════════════════════════════════════════
#  SIMILARITY SHAPES
# ═══════════════════════════════════════════════════════════════════

In = TypeVar("In", contravariant=True)
In0 = TypeVar("In0", contravariant=True)
In1 = TypeVar("In1", contravariant=True)
Out = TypeVar("Out", covariant=True)


class SimilarityIO(Protocol[In, Out]):
    """
    One input, one output.

    The input is usually a tuple packing everything being compared,
    such as a pair of strings or a list of numbers.  Implementers are
    typically stateless and define `similarity` as a staticmethod.
    """

    def similarity(self, input: In) -> Out: ...


class SimilarityIIO(Protocol[In0, In1, Out]):
    """Two separate inputs, one output (pairwise similarity)."""

    def similarity(self, input0: In0, input1: In1) -> Out: ...


class SimilaritySO(Protocol[Out]):
    """
    The receiver compared against itself.

    Typical use is an internal consistency check over the receiver's
    own attributes, such as the spread of a sample.
    """

    def similarity(self) -> Out: ...


class SimilaritySIO(Protocol[In, Out]):
    """The receiver compared against one other value."""

    def similarity(self, input: In) -> Out: ...


# ═══════════════════════════════════════════════════════════════════
#  EDIT DISTANCE ENGINE
# ═══════════════════════════════════════════════════════════════════

# Units only need ==; hashability is not required.
Unit = Any
DistanceMatrix = list[list[int]]


def distance_matrix(a: Sequence[Unit], b: Sequence[Unit]) -> DistanceMatrix:
    """
    Build the (len(a)+1) x (len(b)+1) Levenshtein matrix.

    matrix[i][j] is the edit distance between a[:i] and b[:j].  A new
    matrix is allocated on every call and belongs to the caller.
    """
    m, n = len(a), len(b)
    matrix = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        matrix[i][0] = i
    for j in range(n + 1):
        matrix[0][j] = j

    for i in range(1, m + 1):
        unit = a[i - 1]
        row, above = matrix[i], matrix[i - 1]
        for j in range(1, n + 1):
            cost = 0 if unit == b[j - 1] else 1
            row[j] = min(
                above[j] + 1,           # deletion
                row[j - 1] + 1,         # insertion
                above[j - 1] + cost,    # substitution
            )

    return matrix


def levenshtein(a: Sequence[Unit], b: Sequence[Unit]) -> int:
    """
    Levenshtein distance between two sequences.

    Always defined: returns a non-negative int for any pair of finite
    sequences, and len of the other sequence when either one is empty.
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m
    return distance_matrix(a, b)[m][n]


def is_consistent(matrix: DistanceMatrix, a: Sequence[Unit], b: Sequence[Unit]) -> bool:
    """
    Check that `matrix` satisfies the border and recurrence invariants
    for sequences a and b.
    """
    m, n = len(a), len(b)
    if len(matrix) != m + 1 or any(len(row) != n + 1 for row in matrix):
        return False
    if any(matrix[i][0] != i for i in range(m + 1)):
        return False
    if any(matrix[0][j] != j for j in range(n + 1)):
        return False

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            expected = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
            if matrix[i][j] != expected:
                return False
    return True

