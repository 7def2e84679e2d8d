"""Scene construction with explicit shape-id allocation.

Every shape needs a distinct, stable id (shape equality is id equality).
Ids come from an IdAllocator owned by the SceneBuilder rather than from
hidden global state, so independent scenes never share a counter and tests
stay isolated.

Example:
    >>> from phongray.core.color import Color
    >>> from phongray.core.matrix import Matrix4
    >>> from phongray.core.tuples import Point
    >>> from phongray.materials.lighting import PointLight
    >>> builder = SceneBuilder()
    >>> floor = builder.plane()
    >>> ball = builder.sphere(transform=Matrix4.identity().translate(0, 1, 0))
    >>> world = builder.build(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    >>> len(world)
    2
"""

from __future__ import annotations

import itertools
import threading
from typing import TYPE_CHECKING

from phongray.geometry.plane import Plane
from phongray.geometry.sphere import Sphere
from phongray.scene.world import World

if TYPE_CHECKING:
    from phongray.core.matrix import Matrix4
    from phongray.geometry.shape import Shape
    from phongray.materials.lighting import PointLight
    from phongray.materials.material import Material


class IdAllocator:
    """Thread-safe source of unique, monotonically increasing ids.

    Args:
        start: First id handed out.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class SceneBuilder:
    """Creates shapes with fresh ids and collects them into a World.

    Attributes:
        allocator: The id allocator shared by every shape this builder makes.
        shapes: Shapes created so far, in creation order.
    """

    def __init__(self, allocator: IdAllocator | None = None) -> None:
        self.allocator = allocator if allocator is not None else IdAllocator()
        self.shapes: list[Shape] = []

    def add(self, shape_type: type[Shape], transform: Matrix4 | None = None, material: Material | None = None) -> Shape:
        """Create a shape of any type with a fresh id and record it.

        Args:
            shape_type: Concrete Shape subclass to instantiate.
            transform: Object-to-world transform (default identity).
            material: Surface material (default Material()).

        Returns:
            The new shape.
        """
        shape = shape_type(self.allocator.next_id(), transform=transform, material=material)
        self.shapes.append(shape)
        return shape

    def sphere(self, transform: Matrix4 | None = None, material: Material | None = None) -> Sphere:
        return self.add(Sphere, transform, material)

    def plane(self, transform: Matrix4 | None = None, material: Material | None = None) -> Plane:
        return self.add(Plane, transform, material)

    def build(self, light: PointLight) -> World:
        """Create a World holding every shape built so far."""
        return World(light, self.shapes)
