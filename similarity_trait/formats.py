"""
similarity_trait.formats — Getting values in and results out.

Supported conversions:
    • Command-line text → fixed-width int / float
    • Labelled results → "label: value" report lines
"""

from typing import Any, Iterable, Optional

from .metrics import INT32, IntegerDomain


UNDEFINED = "undefined"


# ═══════════════════════════════════════════════════════════════════
#  PARSING  (caller-input errors raise ValueError)
# ═══════════════════════════════════════════════════════════════════

def parse_int(text: str, domain: IntegerDomain = INT32) -> int:
    """Parse a decimal integer that must fit in `domain`."""
    try:
        value = int(text.strip(), 10)
    except ValueError:
        raise ValueError(f"invalid integer: {text!r}") from None
    if not domain.contains(value):
        raise ValueError(
            f"integer {value} out of range for {domain!r} "
            f"[{domain.minimum}, {domain.maximum}]"
        )
    return value


def parse_float(text: str) -> float:
    """Parse a finite real number."""
    try:
        value = float(text.strip())
    except ValueError:
        raise ValueError(f"invalid number: {text!r}") from None
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"number must be finite: {text!r}")
    return value


def parse_floats(texts: Iterable[str]) -> list[float]:
    return [parse_float(t) for t in texts]


# ═══════════════════════════════════════════════════════════════════
#  REPORTS
# ═══════════════════════════════════════════════════════════════════

def format_value(value: Optional[Any]) -> str:
    """
    Render one result.  None (absent) prints as "undefined"; floats
    with no fractional part print without a trailing ".0".
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_report(rows: Iterable[tuple[str, Optional[Any]]]) -> str:
    """
    Render labelled values, one per line:

        render_report([("word 1", "inform"), ("levenshtein distance", 5)])
        →  "word 1: inform\\nlevenshtein distance: 5"
    """
    return "\n".join(f"{label}: {format_value(value)}" for label, value in rows)
