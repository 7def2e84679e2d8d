"""Core math module.

This module contains the value types every other part of the tracer uses:

Components:
    numeric: Epsilon and approximate float comparison
    errors: Exception taxonomy for structural data errors
    tuples: Tuple, Point and Vector algebra
    color: RGB color arithmetic
    matrix: 2x2/3x3/4x4 matrices, transform builders and view_transform
    ray: Ray value type

All types compare with an epsilon of 1e-5, never with exact float equality.
"""

from .color import BLACK, WHITE, Color
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    NonInvertibleMatrixError,
    RaytracerError,
)
from .matrix import Matrix, Matrix2, Matrix3, Matrix4, view_transform
from .numeric import EPSILON, is_equal
from .ray import Ray
from .tuples import Point, Tuple, Vector

__all__ = [
    "EPSILON",
    "is_equal",
    "RaytracerError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "NonInvertibleMatrixError",
    "Tuple",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "view_transform",
    "Ray",
]
