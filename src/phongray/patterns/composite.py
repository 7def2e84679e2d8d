"""Composite patterns that combine or distort child patterns."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from phongray.core.tuples import Point
from phongray.patterns.base import Pattern
from phongray.patterns.noise import noise3

if TYPE_CHECKING:
    from phongray.core.color import Color
    from phongray.core.matrix import Matrix4

# Maximum per-axis displacement applied by Perturb
PERTURB_SCALE = 0.2

NoiseFunction = Callable[[float, float, float], float]


class Blended(Pattern):
    """Average of two child patterns sampled at the same point.

    Attributes:
        a: First child pattern.
        b: Second child pattern.
    """

    def __init__(self, a: Pattern, b: Pattern, transform: Matrix4 | None = None) -> None:
        super().__init__(transform)
        self.a = a
        self.b = b

    def at(self, point: Point) -> Color:
        return (self.a.at_local(point) + self.b.at_local(point)) * 0.5

    def __repr__(self) -> str:
        return f"Blended({self.a!r}, {self.b!r})"


class Perturb(Pattern):
    """Jitters the sample point with 3-D noise before sampling a child.

    Every axis is displaced by the same amount, noise(x, y, z) * scale,
    which breaks up the straight edges of the wrapped pattern.

    Attributes:
        pattern: The wrapped child pattern.
        noise: Noise function returning values in [-1, 1].
        scale: Displacement multiplier (default PERTURB_SCALE).
    """

    def __init__(
        self,
        pattern: Pattern,
        transform: Matrix4 | None = None,
        noise: NoiseFunction = noise3,
        scale: float = PERTURB_SCALE,
    ) -> None:
        super().__init__(transform)
        self.pattern = pattern
        self.noise = noise
        self.scale = scale

    def at(self, point: Point) -> Color:
        offset = self.noise(point.x, point.y, point.z) * self.scale
        displaced = Point(point.x + offset, point.y + offset, point.z + offset)
        return self.pattern.at_local(displaced)

    def __repr__(self) -> str:
        return f"Perturb({self.pattern!r})"
