"""Pattern protocol and shared two-operand machinery.

Concrete patterns implement at(point), a pure function of a point in
pattern space. The Pattern base class owns the transform and provides the
space mapping on top of it:

    at_local(point):   parent space  -> pattern space -> at()
    at_object(shape, world_point):
                       world -> shape object space -> at_local()

Two-operand patterns (stripes, rings, gradients, ...) come in two flavors
that share the same arithmetic. The plain flavor holds two Colors; the
nested flavor holds two child Patterns that are sampled recursively through
their own transforms. NestedOperands switches a plain variant to the nested
flavor by overriding how an operand is turned into a color.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from phongray.core.color import BLACK, WHITE, Color
from phongray.core.matrix import Matrix4

if TYPE_CHECKING:
    from phongray.core.tuples import Point
    from phongray.geometry.shape import Shape


class Pattern(ABC):
    """Abstract base class for all patterns.

    Attributes:
        transform: Object-to-pattern-space placement of the pattern.
    """

    def __init__(self, transform: Matrix4 | None = None) -> None:
        self.transform = transform if transform is not None else Matrix4.identity()

    @property
    def inverse_transform(self) -> Matrix4:
        """Inverse of the pattern transform, kept current across in-place edits.

        Raises:
            NonInvertibleMatrixError: If the transform is singular.
        """
        return self.transform.inverse()

    @abstractmethod
    def at(self, point: Point) -> Color:
        """Color at a point given in this pattern's own space."""

    def at_local(self, point: Point) -> Color:
        """Color at a point given in the parent's space.

        The point is moved into pattern space with the inverse transform
        before at() is evaluated.
        """
        return self.at(self.inverse_transform * point)

    def at_object(self, shape: Shape, world_point: Point) -> Color:
        """Color of a shape's surface at a world-space point.

        Args:
            shape: The shape the pattern is applied to.
            world_point: Surface point in world space.

        Returns:
            The pattern color after mapping world -> object -> pattern space.
        """
        return self.at_local(shape.world_to_object(world_point))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Solid(Pattern):
    """A single constant color everywhere."""

    def __init__(self, color: Color, transform: Matrix4 | None = None) -> None:
        super().__init__(transform)
        self.color = color

    def at(self, point: Point) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"Solid({self.color!r})"


class TwoOperandPattern(Pattern):
    """A pattern combining two operands, A and B.

    Operands are Colors for plain variants; subclasses mixing in
    NestedOperands take Patterns instead.

    Attributes:
        a: First operand (default white).
        b: Second operand (default black).
    """

    def __init__(self, a: Any = None, b: Any = None, transform: Matrix4 | None = None) -> None:
        super().__init__(transform)
        self.a = a if a is not None else self._default_operand(WHITE)
        self.b = b if b is not None else self._default_operand(BLACK)

    def _default_operand(self, color: Color) -> Any:
        return color

    def _operand_color(self, operand: Any, point: Point) -> Color:
        return operand

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a!r}, {self.b!r})"


class NestedOperands:
    """Mixin turning a TwoOperandPattern's operands into child patterns.

    Must precede the plain variant in the base list, e.g.
    ``class NestedStripe(NestedOperands, Stripe)``.
    """

    def _default_operand(self, color: Color) -> Pattern:
        return Solid(color)

    def _operand_color(self, operand: Pattern, point: Point) -> Color:
        return operand.at_local(point)
