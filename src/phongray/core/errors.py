"""Exception taxonomy for the ray tracer.

Every failure in the tracer is a structural data error: a matrix built from
the wrong amount of data, a singular transform, or an out-of-range index.
None of them is retried. Each class also derives from the closest builtin
exception so callers may catch either.
"""


class RaytracerError(Exception):
    """Base class for all ray tracer errors."""


class DimensionMismatchError(RaytracerError, ValueError):
    """A matrix was constructed from the wrong amount of source data."""


class NonInvertibleMatrixError(RaytracerError, ArithmeticError):
    """inverse() was requested for a matrix whose determinant is ~0.

    Attributes:
        determinant: The determinant that made inversion impossible.
    """

    def __init__(self, determinant: float) -> None:
        super().__init__(f"Matrix is not invertible (determinant {determinant!r})")
        self.determinant = determinant


class IndexOutOfRangeError(RaytracerError, IndexError):
    """A matrix or canvas was indexed outside its declared bounds."""
