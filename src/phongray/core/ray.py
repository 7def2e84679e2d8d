"""Ray value type.

A ray is an origin point plus a direction vector. Rays are immutable:
transform() returns a new ray and never modifies the original.

Example:
    >>> from phongray.core.ray import Ray
    >>> from phongray.core.tuples import Point, Vector
    >>> ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
    >>> ray.position(2.5)
    Point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from phongray.core.tuples import Point, Vector

if TYPE_CHECKING:
    from phongray.core.matrix import Matrix4


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Not required to be unit length;
            object-space rays are generally not normalized.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix4) -> Ray:
        """Apply a matrix to both origin and direction.

        Args:
            matrix: Transform to apply.

        Returns:
            A new, transformed ray.
        """
        return Ray(matrix * self.origin, matrix * self.direction)
