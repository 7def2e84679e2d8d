"""Square matrices and affine transform builders.

This module provides fixed-order square matrices (2x2, 3x3, 4x4) backed by
NumPy arrays. Determinants use Laplace (cofactor) expansion along row 0 down
to the 2x2 base case, and inverses use the classical adjugate method:

    inverse[col, row] = cofactor(row, col) / determinant

Matrix4 also offers fluent transform builders. Each builder constructs an
elementary matrix E and returns E * self, so the factor added last is the
one applied last to a point:

    >>> from phongray.core.matrix import Matrix4
    >>> from phongray.core.tuples import Point
    >>> m = Matrix4.identity().scale(2, 2, 2).translate(1, 0, 0)
    >>> m * Point(1, 1, 1)   # scaled first, then translated
    Point(3.0, 2.0, 2.0)

Example:
    >>> from phongray.core.matrix import view_transform
    >>> from phongray.core.tuples import Point, Vector
    >>> m = view_transform(Point(0, 0, 8), Point(0, 0, 0), Vector(0, 1, 0))
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import ClassVar

import numpy as np
import numpy.typing as npt

from phongray.core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    NonInvertibleMatrixError,
)
from phongray.core.numeric import EPSILON, is_equal
from phongray.core.tuples import Point, Tuple, Vector


class Matrix:
    """A square matrix of a fixed order.

    Subclasses fix ORDER; the element storage is always ORDER x ORDER.

    Attributes:
        ORDER: Number of rows (and columns).
    """

    ORDER: ClassVar[int] = 0

    __slots__ = ("_data", "_rows", "_inverse")

    def __init__(self, data: Sequence[float] | Sequence[Sequence[float]] | npt.ArrayLike | None = None) -> None:
        """Create a matrix from nested rows or a flat row-major sequence.

        Args:
            data: ORDER rows of ORDER values, or ORDER*ORDER values in
                row-major order. None creates a zero matrix.

        Raises:
            DimensionMismatchError: If data does not hold exactly
                ORDER*ORDER values arranged as rows or as a flat sequence.
        """
        n = self.ORDER
        if data is None:
            array = np.zeros((n, n), dtype=np.float64)
        else:
            try:
                array = np.array(data, dtype=np.float64)
            except ValueError as e:
                raise DimensionMismatchError(
                    f"{type(self).__name__} requires {n}x{n} values: {e}"
                ) from e
            if array.ndim == 1 and array.size == n * n:
                array = array.reshape(n, n)
            elif array.shape != (n, n):
                raise DimensionMismatchError(
                    f"{type(self).__name__} requires {n * n} values, got shape {array.shape}"
                )
        self._data = array
        self._rows: tuple[tuple[float, ...], ...] | None = None
        self._inverse: Matrix | None = None

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def identity(cls):
        return cls(np.identity(cls.ORDER, dtype=np.float64))

    # =========================================================================
    # Element access
    # =========================================================================

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        row, col = index
        if not (0 <= row < self.ORDER and 0 <= col < self.ORDER):
            raise IndexOutOfRangeError(
                f"{type(self).__name__} is {self.ORDER}x{self.ORDER}, index is ({row}, {col})"
            )
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return float(self._data[row, col])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        self._data[row, col] = value
        self._rows = None
        self._inverse = None

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        """Elements as nested Python tuples (cached until the next write)."""
        if self._rows is None:
            self._rows = tuple(tuple(row) for row in self._data.tolist())
        return self._rows

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the elements as an ORDER x ORDER array."""
        return self._data.copy()

    # =========================================================================
    # Algebra
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.ORDER != other.ORDER:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.ORDER != self.ORDER:
                raise DimensionMismatchError(
                    f"Cannot multiply {type(self).__name__} by {type(other).__name__}"
                )
            return type(self)(self._data @ other._data)
        if isinstance(other, Tuple) and self.ORDER == 4:
            (a, b, c, d), (e, f, g, h), (i, j, k, l), (m, n, o, p) = self.rows
            x, y, z, w = other.x, other.y, other.z, other.w
            return Tuple.of(
                a * x + b * y + c * z + d * w,
                e * x + f * y + g * z + h * w,
                i * x + j * y + k * z + l * w,
                m * x + n * y + o * z + p * w,
            )
        return NotImplemented

    def transpose(self):
        return type(self)(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column.

        Args:
            row: Row to remove.
            col: Column to remove.

        Returns:
            A matrix one order smaller.

        Raises:
            IndexOutOfRangeError: If row or col is outside the matrix.
        """
        self._check_index((row, col))
        if self.ORDER <= 2:
            raise DimensionMismatchError("Matrix2 has no square submatrix")
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return _BY_ORDER[self.ORDER - 1](reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        if self.ORDER == 2:
            self._check_index((row, col))
            return float(self._data[1 - row, 1 - col])
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Signed minor: (-1)^(row + col) * minor(row, col)."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        """Determinant by Laplace expansion along row 0."""
        if self.ORDER == 2:
            (a, b), (c, d) = self.rows
            return a * d - b * c
        first_row = self.rows[0]
        return sum(first_row[col] * self.cofactor(0, col) for col in range(self.ORDER))

    def is_invertible(self) -> bool:
        return not is_equal(self.determinant(), 0.0)

    def inverse(self):
        """Invert via the transposed cofactor matrix divided by the determinant.

        The result is cached until the matrix is modified.

        Returns:
            The inverse matrix.

        Raises:
            NonInvertibleMatrixError: If |determinant| < EPSILON.
        """
        if self._inverse is None:
            det = self.determinant()
            if is_equal(det, 0.0):
                raise NonInvertibleMatrixError(det)
            n = self.ORDER
            result = np.empty((n, n), dtype=np.float64)
            for row in range(n):
                for col in range(n):
                    # (col, row) on the left performs the transpose
                    result[col, row] = self.cofactor(row, col) / det
            self._inverse = type(self)(result)
        return self._inverse

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self.rows]!r})"


class Matrix2(Matrix):
    """2x2 matrix; the base case of cofactor expansion."""

    ORDER = 2
    __slots__ = ()


class Matrix3(Matrix):
    """3x3 matrix."""

    ORDER = 3
    __slots__ = ()


class Matrix4(Matrix):
    """4x4 matrix for affine transforms of points and vectors."""

    ORDER = 4
    __slots__ = ()

    # =========================================================================
    # Elementary transforms
    # =========================================================================

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        m = cls.identity()
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return m

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix4:
        m = cls.identity()
        m[0, 0] = x
        m[1, 1] = y
        m[2, 2] = z
        return m

    @classmethod
    def rotation_x(cls, radians: float) -> Matrix4:
        cos, sin = math.cos(radians), math.sin(radians)
        m = cls.identity()
        m[1, 1] = cos
        m[1, 2] = -sin
        m[2, 1] = sin
        m[2, 2] = cos
        return m

    @classmethod
    def rotation_y(cls, radians: float) -> Matrix4:
        cos, sin = math.cos(radians), math.sin(radians)
        m = cls.identity()
        m[0, 0] = cos
        m[0, 2] = sin
        m[2, 0] = -sin
        m[2, 2] = cos
        return m

    @classmethod
    def rotation_z(cls, radians: float) -> Matrix4:
        cos, sin = math.cos(radians), math.sin(radians)
        m = cls.identity()
        m[0, 0] = cos
        m[0, 1] = -sin
        m[1, 0] = sin
        m[1, 1] = cos
        return m

    @classmethod
    def shearing(
        cls,
        x_y: float,
        x_z: float,
        y_x: float,
        y_z: float,
        z_x: float,
        z_y: float,
    ) -> Matrix4:
        """Shear matrix; x_y moves x in proportion to y, and so on."""
        m = cls.identity()
        m[0, 1] = x_y
        m[0, 2] = x_z
        m[1, 0] = y_x
        m[1, 2] = y_z
        m[2, 0] = z_x
        m[2, 1] = z_y
        return m

    # =========================================================================
    # Fluent builders (new factor is left-multiplied onto self)
    # =========================================================================

    def translate(self, x: float, y: float, z: float) -> Matrix4:
        return Matrix4.translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Matrix4:
        return Matrix4.scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Matrix4:
        return Matrix4.rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Matrix4:
        return Matrix4.rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Matrix4:
        return Matrix4.rotation_z(radians) * self

    def shear(
        self,
        x_y: float,
        x_z: float,
        y_x: float,
        y_z: float,
        z_x: float,
        z_y: float,
    ) -> Matrix4:
        return Matrix4.shearing(x_y, x_z, y_x, y_z, z_x, z_y) * self


_BY_ORDER: dict[int, type[Matrix]] = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix4:
    """Build the world-to-camera transform for an eye looking at a target.

    The orientation rows are (left, true_up, -forward), where
    forward = normalize(to - from), left = forward x normalize(up) and
    true_up = left x forward. The orientation is composed with a
    translation that moves the eye to the origin.

    Args:
        from_point: Eye position in world space.
        to: Point the eye looks at.
        up: Approximate up direction (need not be exactly perpendicular).

    Returns:
        The view transform matrix.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix4(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * Matrix4.translation(-from_point.x, -from_point.y, -from_point.z)
