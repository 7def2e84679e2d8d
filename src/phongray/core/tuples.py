"""Tuple, Point and Vector algebra.

A Tuple is a 4-component value (x, y, z, w). The w component separates
positions from directions:
- w = 1: a Point, which is affected by translation
- w = 0: a Vector, which is not

Arithmetic keeps that distinction automatically: subtracting two points gives
a vector, adding a vector to a point gives a point. Results whose w is
neither 0 nor 1 stay plain Tuples.

Example:
    >>> from phongray.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v
    Point(1.0, 2.0, 4.0)
    >>> (p - Point(0.0, 0.0, 0.0)).magnitude()
    3.7416573867739413
"""

from __future__ import annotations

import logging
import math

from phongray.core.numeric import is_equal

logger = logging.getLogger(__name__)


class Tuple:
    """A 4-component (x, y, z, w) value.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: 1.0 for points, 0.0 for vectors.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def of(x: float, y: float, z: float, w: float) -> Tuple:
        """Build the most specific tuple type for the given w.

        A w within EPSILON of 1 or 0 is snapped to exactly 1 or 0, since
        products with inverted matrices carry rounding error in w.
        """
        if is_equal(w, 1.0):
            return Point(x, y, z)
        if is_equal(w, 0.0):
            return Vector(x, y, z)
        return Tuple(x, y, z, w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            is_equal(self.x, other.x)
            and is_equal(self.y, other.y)
            and is_equal(self.z, other.z)
            and is_equal(self.w, other.w)
        )

    __hash__ = None  # epsilon equality cannot be hashed consistently

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple.of(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple.of(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Tuple:
        return Tuple.of(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple.of(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple.of(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Scale to unit length.

        A zero-length tuple has no direction. It is returned unchanged and a
        warning is logged.

        Returns:
            A tuple of the same kind with magnitude 1, or the zero tuple.
        """
        magnitude = self.magnitude()
        if is_equal(magnitude, 0.0):
            logger.warning("Normalizing a zero-length %s; returning it unchanged", type(self).__name__)
            return self
        return self / magnitude

    def dot(self, other: Tuple) -> float:
        """Dot product over all four components."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def __repr__(self) -> str:
        return f"Tuple({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"


class Point(Tuple):
    """A position in space (w = 1)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 1.0)

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r}, {self.z!r})"


class Vector(Tuple):
    """A direction in space (w = 0)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 0.0)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)

    def cross(self, other: Vector) -> Vector:
        """Cross product (only meaningful for vectors).

        Args:
            other: Right-hand operand.

        Returns:
            The vector self x other, perpendicular to both inputs.
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a normal.

        Args:
            normal: Surface normal (should be unit length).

        Returns:
            self - normal * 2 * (self . normal).
        """
        return self - normal * (2.0 * self.dot(normal))

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r}, {self.z!r})"
