"""Infinite plane primitive.

In object space the plane is the xz plane (y = 0) with a constant normal of
(0, 1, 0). A ray whose direction has |y| < epsilon is parallel to the plane
(or lies within it) and never intersects it; any other ray crosses it exactly
once, at t = -origin.y / direction.y.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phongray.core.numeric import EPSILON
from phongray.core.tuples import Point, Vector
from phongray.geometry.shape import Shape
from phongray.scene.intersection import Intersection

if TYPE_CHECKING:
    from phongray.core.ray import Ray

_UP = Vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The object-space xz plane."""

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        if abs(local_ray.direction.y) < EPSILON:
            return []
        t = -local_ray.origin.y / local_ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Point) -> Vector:
        return _UP
