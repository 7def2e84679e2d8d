"""World: the shapes and the light, and the per-ray shading pipeline.

The world answers every question the camera asks about a ray:

    intersect(ray)   all hits from all shapes, sorted by t
    is_shadowed(p)   is anything between p and the light?
    shade_hit(comps) Phong color of a prepared hit, with shadows
    color_at(ray)    black on a miss, otherwise shade_hit of the hit

Intersection is brute force: every ray is tested against every shape. The
world is treated as read-only while rendering.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from phongray.core.color import BLACK, Color
from phongray.core.ray import Ray
from phongray.materials.lighting import PointLight, lighting
from phongray.scene.intersection import Computation, Intersection, hit

if TYPE_CHECKING:
    from phongray.core.tuples import Point
    from phongray.geometry.shape import Shape


class World:
    """A collection of shapes lit by exactly one point light.

    Attributes:
        light: The scene's point light.
        shapes: Shapes in insertion order.
    """

    def __init__(self, light: PointLight, shapes: Iterable[Shape] = ()) -> None:
        self.light = light
        self.shapes: list[Shape] = list(shapes)

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def __contains__(self, shape: object) -> bool:
        return shape in self.shapes

    def __len__(self) -> int:
        return len(self.shapes)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a ray with every shape.

        Args:
            ray: World-space ray.

        Returns:
            All intersections, sorted ascending by t.
        """
        intersections = [i for shape in self.shapes for i in shape.intersect(ray)]
        intersections.sort(key=lambda i: i.t)
        return intersections

    def is_shadowed(self, point: Point) -> bool:
        """Check whether any shape blocks the light from a point.

        Args:
            point: World-space point, normally a Computation.over_point.

        Returns:
            True if a hit lies strictly closer than the light.
        """
        to_light = self.light.position - point
        distance = to_light.magnitude()
        shadow_ray = Ray(point, to_light.normalize())
        h = hit(self.intersect(shadow_ray))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computation) -> Color:
        """Color a prepared hit, including the shadow test."""
        shadowed = self.is_shadowed(comps.over_point)
        return lighting(
            comps.shape,
            self.light,
            comps.over_point,
            comps.eye,
            comps.normal,
            shadowed,
        )

    def color_at(self, ray: Ray) -> Color:
        """Color seen along a ray; black if it hits nothing."""
        h = hit(self.intersect(ray))
        if h is None:
            return BLACK
        return self.shade_hit(h.prepare(ray))

    def __repr__(self) -> str:
        return f"World(light={self.light!r}, shapes={self.shapes!r})"
