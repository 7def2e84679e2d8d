"""Surface material parameters for Phong shading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from phongray.core.color import WHITE, Color

if TYPE_CHECKING:
    from phongray.patterns.base import Pattern


@dataclass
class Material:
    """Reflectance parameters for one shape.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Fraction of light reflected regardless of orientation.
        diffuse: Matte (Lambertian) reflectance coefficient.
        specular: Highlight reflectance coefficient.
        shininess: Highlight exponent; larger values give smaller highlights.
        pattern: Optional pattern that overrides color per surface point.
    """

    color: Color = field(default_factory=lambda: Color(*WHITE))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None
