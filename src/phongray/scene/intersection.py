"""Intersection records, hit selection and shading-point preparation.

An Intersection pairs a ray parameter t with the shape that was hit.
hit() chooses the visible intersection: the smallest t that is not behind
the ray origin. prepare() turns that intersection into a Computation that
holds everything lighting needs (point, eye vector, normal, inside flag)
plus the over_point used to seed shadow rays.

The over_point sits EPSILON above the surface along the normal. Starting
shadow rays there keeps them from re-hitting the surface they leave because
of floating-point rounding ("shadow acne").

Example:
    >>> xs = sorted(world.intersect(ray), key=lambda i: i.t)
    >>> h = hit(xs)
    >>> if h is not None:
    ...     comps = h.prepare(ray)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from phongray.core.numeric import EPSILON

if TYPE_CHECKING:
    from phongray.core.ray import Ray
    from phongray.core.tuples import Point, Vector
    from phongray.geometry.shape import Shape


@dataclass(frozen=True)
class Computation:
    """Precomputed shading state for one ray-surface hit.

    Attributes:
        t: Ray parameter of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        over_point: point nudged EPSILON along the normal (shadow-ray origin).
        eye: Unit vector from the hit point back toward the ray origin.
        normal: Surface normal, flipped to face the eye when inside is True.
        inside: True if the ray hit the back face of the surface.
    """

    t: float
    shape: Shape
    point: Point
    over_point: Point
    eye: Vector
    normal: Vector
    inside: bool


@dataclass(frozen=True)
class Intersection:
    """A ray parameter t at which a ray meets a shape.

    Attributes:
        t: Parametric distance along the ray.
        shape: The shape that was hit.
    """

    t: float
    shape: Shape

    def prepare(self, ray: Ray) -> Computation:
        """Compute the shading state for this intersection.

        Args:
            ray: The ray that produced this intersection.

        Returns:
            A Computation for lighting and shadow testing.
        """
        point = ray.position(self.t)
        eye = -ray.direction
        normal = self.shape.normal_at(point)
        inside = False
        if normal.dot(eye) < 0.0:
            inside = True
            normal = -normal
        over_point = point + normal * EPSILON
        return Computation(
            t=self.t,
            shape=self.shape,
            point=point,
            over_point=over_point,
            eye=eye,
            normal=normal,
            inside=inside,
        )


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Args:
        intersections: Candidate intersections, normally sorted by t.

    Returns:
        The intersection with the smallest t >= 0 (t within EPSILON of 0
        counts), or None if there are none or all are behind the origin.
        Among equal t values the earliest in the input wins.
    """
    return min(
        (i for i in intersections if i.t > -EPSILON),
        key=lambda i: i.t,
        default=None,
    )
