"""Approximate float comparison shared by every value type."""

# Tolerance for all float comparisons and for the shadow-acne surface offset
EPSILON = 1e-5


def is_equal(a: float, b: float) -> bool:
    """Return True if a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON
