"""Interpolating patterns: linear and radial gradients.

Both blend from operand A to operand B using the fractional part of a
distance, so the ramp repeats every unit:

    Gradient:       x - floor(x)
    RadialGradient: r - floor(r), with r = sqrt(x^2 + z^2)

The result is A + (B - A) * fraction.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import TYPE_CHECKING

from phongray.patterns.base import NestedOperands, TwoOperandPattern

if TYPE_CHECKING:
    from phongray.core.color import Color
    from phongray.core.tuples import Point


class InterpolatedPattern(TwoOperandPattern):
    """Linearly interpolates between A and B."""

    @abstractmethod
    def fraction(self, point: Point) -> float:
        """Blend weight in [0, 1) for a point in pattern space."""

    def at(self, point: Point) -> Color:
        color_a = self._operand_color(self.a, point)
        color_b = self._operand_color(self.b, point)
        return color_a + (color_b - color_a) * self.fraction(point)


class Gradient(InterpolatedPattern):
    """Linear ramp along x, repeating every unit."""

    def fraction(self, point: Point) -> float:
        return point.x - math.floor(point.x)


class RadialGradient(InterpolatedPattern):
    """Ramp outward from the y axis, repeating every unit of radius."""

    def fraction(self, point: Point) -> float:
        radius = math.hypot(point.x, point.z)
        return radius - math.floor(radius)


class NestedGradient(NestedOperands, Gradient):
    """Gradient between two child patterns."""


class NestedRadialGradient(NestedOperands, RadialGradient):
    """Radial gradient between two child patterns."""
