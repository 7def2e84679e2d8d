"""RGB color arithmetic.

Colors are unclamped linear RGB triples. Values above 1.0 are legal while
shading (several light terms add up); clamping happens only when a canvas is
quantized for output.
"""

from __future__ import annotations

from phongray.core.numeric import is_equal


class Color:
    """An immutable RGB color.

    Channels are fixed at construction and arithmetic returns a new Color.

    Attributes:
        red: Red channel (nominally in [0, 1]).
        green: Green channel.
        blue: Blue channel.
    """

    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float) -> None:
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Color is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Color is immutable; cannot delete {name!r}")

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            is_equal(self.red, other.red)
            and is_equal(self.green, other.green)
            and is_equal(self.blue, other.blue)
        )

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the Hadamard (per-channel) product
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def __repr__(self) -> str:
        return f"Color({self.red!r}, {self.green!r}, {self.blue!r})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
