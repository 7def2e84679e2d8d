"""Patterns module for procedural surface color.

A pattern maps a point in its own local space to a color. Patterns compose
into trees: nested variants, Blended and Perturb sample child patterns
instead of fixed colors.

Components:
    base: Pattern protocol, Solid, and the two-operand building blocks
    banded: Stripe, Ring, Checkers (parity selection) and nested forms
    gradient: Gradient, RadialGradient (linear interpolation) and nested forms
    composite: Blended (average of two patterns), Perturb (noise displacement)
    noise: Seeded 3-D Perlin noise used by Perturb

Space mapping, applied by Pattern.at_object():
    world point -> shape object space (shape inverse transform)
                -> pattern space (pattern inverse transform)
                -> at()

Example:
    >>> from phongray.core.color import Color
    >>> from phongray.core.matrix import Matrix4
    >>> stripes = Stripe(Color(1, 0, 0), Color(1, 1, 1))
    >>> stripes.transform = Matrix4.identity().scale(0.25, 1, 1)
    >>> tree = Blended(stripes, Checkers())
"""

from .banded import Checkers, NestedCheckers, NestedRing, NestedStripe, Ring, Stripe
from .base import Pattern, Solid
from .composite import PERTURB_SCALE, Blended, Perturb
from .gradient import Gradient, NestedGradient, NestedRadialGradient, RadialGradient
from .noise import PerlinNoise, noise3

__all__ = [
    "Pattern",
    "Solid",
    "Stripe",
    "Ring",
    "Checkers",
    "NestedStripe",
    "NestedRing",
    "NestedCheckers",
    "Gradient",
    "RadialGradient",
    "NestedGradient",
    "NestedRadialGradient",
    "Blended",
    "Perturb",
    "PERTURB_SCALE",
    "PerlinNoise",
    "noise3",
]
