"""Shape protocol: world-space queries built on object-space geometry.

Concrete shapes implement only the geometry of their canonical form in
object space:

    local_intersect(local_ray) -> list[Intersection]
    local_normal_at(local_point) -> Vector

The Shape base class supplies the world-space versions. intersect() moves
the ray into object space with the inverse transform; normal_at() moves the
point in, computes the local normal, and maps it back out with the
inverse-transpose so normals stay perpendicular under non-uniform scaling.

Shapes are identified by an integer id handed out by the scene builder.
Two shapes are equal exactly when their ids match, regardless of transform
or material.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from phongray.core.matrix import Matrix4
from phongray.core.tuples import Vector
from phongray.materials.material import Material

if TYPE_CHECKING:
    from phongray.core.ray import Ray
    from phongray.core.tuples import Point
    from phongray.scene.intersection import Intersection


class Shape(ABC):
    """Abstract base class for all surfaces.

    Attributes:
        id: Unique, stable identifier assigned at construction.
        transform: Object-to-world transform.
        material: Surface reflectance parameters.
    """

    def __init__(
        self,
        shape_id: int,
        transform: Matrix4 | None = None,
        material: Material | None = None,
    ) -> None:
        self._id = shape_id
        self.transform = transform if transform is not None else Matrix4.identity()
        # (inverse, transpose of that inverse)
        self._normal_cache: tuple[Matrix4, Matrix4] | None = None
        self.material = material if material is not None else Material()

    @property
    def id(self) -> int:
        return self._id

    @property
    def inverse_transform(self) -> Matrix4:
        """World-to-object transform.

        The matrix caches its own inverse and drops it when an entry is
        written, so in-place edits of the transform are picked up.

        Raises:
            NonInvertibleMatrixError: If the transform is singular.
        """
        return self.transform.inverse()

    @property
    def normal_transform(self) -> Matrix4:
        """Transpose of the inverse transform, used to map normals out."""
        inverse = self.inverse_transform
        if self._normal_cache is None or self._normal_cache[0] is not inverse:
            self._normal_cache = (inverse, inverse.transpose())
        return self._normal_cache[1]

    def world_to_object(self, point: Point) -> Point:
        return self.inverse_transform * point

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Args:
            ray: Ray in world space.

        Returns:
            Intersections in the order produced by local_intersect().
        """
        return self.local_intersect(ray.transform(self.inverse_transform))

    def normal_at(self, point: Point) -> Vector:
        """Unit surface normal at a world-space point on the shape."""
        local_normal = self.local_normal_at(self.world_to_object(point))
        world_normal = self.normal_transform * local_normal
        # w picks up the translation column of the inverse-transpose; a
        # normal is a direction, so rebuild it with w = 0
        return Vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        """Intersect an object-space ray with the canonical shape."""

    @abstractmethod
    def local_normal_at(self, local_point: Point) -> Vector:
        """Normal of the canonical shape at an object-space point."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
