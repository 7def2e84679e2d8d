"""Unit sphere primitive.

The canonical sphere has radius 1 and is centered at the object-space
origin; size and position come entirely from the shape transform.

Ray-sphere intersection solves

    a*t^2 + b*t + c = 0

with

    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

A negative discriminant means a miss, a discriminant within epsilon of zero
a single tangent hit, and otherwise two hits with the smaller t first.

Example:
    >>> from phongray.scene.builder import SceneBuilder
    >>> from phongray.core.ray import Ray
    >>> from phongray.core.tuples import Point, Vector
    >>> sphere = SceneBuilder().sphere()
    >>> [i.t for i in sphere.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from phongray.core.numeric import is_equal
from phongray.core.tuples import Point, Vector
from phongray.geometry.shape import Shape
from phongray.scene.intersection import Intersection

if TYPE_CHECKING:
    from phongray.core.ray import Ray

_CENTER = Point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """A unit sphere centered at the object-space origin."""

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        sphere_to_ray = local_ray.origin - _CENTER
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        # A tangent ray touches the surface once
        if is_equal(discriminant, 0.0):
            return [Intersection(-b / (2.0 * a), self)]

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t0, self), Intersection(t1, self)]

    def local_normal_at(self, local_point: Point) -> Vector:
        return local_point - _CENTER
