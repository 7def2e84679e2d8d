"""Geometry module for shape primitives.

This module provides the shape protocol and the concrete primitives:

Components:
    shape: Abstract Shape with world <-> object space mapping
    sphere: Unit sphere centered at the object-space origin
    plane: Infinite xz plane through the object-space origin

Every shape answers two object-space questions, local_intersect() and
local_normal_at(). The Shape base class wraps them with the shape's
transform.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
]
