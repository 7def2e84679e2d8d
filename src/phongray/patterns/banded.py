"""Parity patterns: stripes, rings and 3-D checkers.

Each variant reduces the sample point to an integer band index and selects
operand A when the index is even, operand B when it is odd:

    Stripe:   floor(x)
    Ring:     floor(sqrt(x^2 + z^2))
    Checkers: floor(x) + floor(y) + floor(z)

Python's floor modulo keeps negative indices consistent, so bands alternate
across zero without a seam (-0.1 falls in band -1, which is odd).
"""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import TYPE_CHECKING

from phongray.patterns.base import NestedOperands, TwoOperandPattern

if TYPE_CHECKING:
    from phongray.core.color import Color
    from phongray.core.tuples import Point


class ParityPattern(TwoOperandPattern):
    """Selects A or B by the parity of an integer band index."""

    @abstractmethod
    def band(self, point: Point) -> int:
        """Integer band index of a point in pattern space."""

    def at(self, point: Point) -> Color:
        operand = self.a if self.band(point) % 2 == 0 else self.b
        return self._operand_color(operand, point)


class Stripe(ParityPattern):
    """Stripes alternating along x, constant in y and z."""

    def band(self, point: Point) -> int:
        return math.floor(point.x)


class Ring(ParityPattern):
    """Concentric rings around the y axis."""

    def band(self, point: Point) -> int:
        return math.floor(math.hypot(point.x, point.z))


class Checkers(ParityPattern):
    """Alternating unit cubes in all three dimensions."""

    def band(self, point: Point) -> int:
        return math.floor(point.x) + math.floor(point.y) + math.floor(point.z)


class NestedStripe(NestedOperands, Stripe):
    """Stripe whose bands are filled with child patterns."""


class NestedRing(NestedOperands, Ring):
    """Ring whose bands are filled with child patterns."""


class NestedCheckers(NestedOperands, Checkers):
    """Checkers whose cells are filled with child patterns."""
