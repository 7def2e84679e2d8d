"""Scene module for intersections, the world, and scene construction.

Components:
    intersection: Intersection/Computation records and hit selection
    world: Shape collection + single light; shading of rays
    builder: Id allocation and shape creation
    default_world: The standard two-sphere test world

The world owns its shapes for its whole lifetime and is read-only while a
camera renders it.
"""

from .intersection import Computation, Intersection, hit
from .world import World

# Note: builder and default_world are NOT imported here to avoid circular imports
# (they create shapes, and the shape modules import scene.intersection).
# Import them directly when needed:
#   from phongray.scene.builder import SceneBuilder
#   from phongray.scene.default_world import create_default_world

__all__ = [
    "Intersection",
    "Computation",
    "hit",
    "World",
]
