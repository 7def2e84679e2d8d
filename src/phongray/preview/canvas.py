"""Taichi-backed pixel grid and PPM serialization.

A Canvas is a width x height grid of linear RGB colors stored in a 64-bit
Taichi vector field, addressed as canvas[x, y] with (0, 0) at the top-left.
Colors are kept unclamped; quantize() converts them to 8-bit channel values
in parallel with a Taichi kernel:

    channel = clamp(ceil(value * 255), 0, 255)

to_ppm() emits plain-text PPM (P3):

    P3
    <width> <height>
    255
    r g b r g b ...     (one image row per block, lines wrapped at 70 chars)

Taichi must be initialized (see phongray.backend.init_backend) before a
Canvas is created.

Example:
    >>> from phongray.backend import init_backend
    >>> from phongray.core.color import Color
    >>> init_backend()
    >>> canvas = Canvas(5, 3)
    >>> canvas[0, 0] = Color(1.5, 0.0, 0.0)
    >>> print(canvas.to_ppm().splitlines()[3])
    255 0 0 0 0 0 0 0 0 0 0 0 0 0 0
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from phongray.core.color import Color
from phongray.core.errors import IndexOutOfRangeError

PPM_MAX_COLOR_VALUE = 255
PPM_MAX_LINE_LENGTH = 70


@ti.kernel
def _quantize(pixels: ti.template(), out: ti.template(), max_value: ti.f64):
    """Scale, round up and clamp every channel of every pixel."""
    for i, j in pixels:
        scaled = ti.ceil(pixels[i, j] * max_value)
        out[i, j] = ti.cast(ti.math.clamp(scaled, 0.0, max_value), ti.i32)


def _wrap_tokens(tokens: list[str], max_length: int) -> list[str]:
    """Join tokens with spaces, starting a new line before max_length is exceeded."""
    lines: list[str] = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) > max_length:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}"
    if current:
        lines.append(current)
    return lines


class Canvas:
    """A 2-D grid of colors, initially black.

    Attributes:
        width: Number of columns (x ranges over [0, width)).
        height: Number of rows (y ranges over [0, height)).
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the pixel fields.

        Args:
            width: Image width in pixels (must be positive).
            height: Image height in pixels (must be positive).

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f64, shape=(width, height))
        self._quantized = ti.Vector.field(3, dtype=ti.i32, shape=(width, height))

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        x, y = index
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfRangeError(
                f"Canvas is {self.width}x{self.height}, index is ({x}, {y})"
            )
        return x, y

    def __getitem__(self, index: tuple[int, int]) -> Color:
        x, y = self._check_index(index)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def __setitem__(self, index: tuple[int, int], color: Color) -> None:
        x, y = self._check_index(index)
        self._pixels[x, y] = [color.red, color.green, color.blue]

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels.fill(0.0)

    def from_numpy(self, image: npt.NDArray[np.float64]) -> None:
        """Overwrite all pixels from an array of shape (width, height, 3).

        Raises:
            ValueError: If the array shape does not match the canvas.
        """
        expected = (self.width, self.height, 3)
        if image.shape != expected:
            raise ValueError(f"Image shape must be {expected}, got {image.shape}")
        self._pixels.from_numpy(np.ascontiguousarray(image, dtype=np.float64))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return linear colors as an array of shape (width, height, 3)."""
        return self._pixels.to_numpy()

    def quantize(self) -> npt.NDArray[np.int32]:
        """Convert to 8-bit channel values, shape (width, height, 3)."""
        _quantize(self._pixels, self._quantized, float(PPM_MAX_COLOR_VALUE))
        return self._quantized.to_numpy()

    def to_ppm(self) -> str:
        """Serialize as plain-text PPM (P3).

        Returns:
            The PPM text, terminated by a newline.
        """
        values = self.quantize()
        lines = ["P3", f"{self.width} {self.height}", str(PPM_MAX_COLOR_VALUE)]
        for y in range(self.height):
            tokens = [str(v) for v in values[:, y, :].reshape(-1).tolist()]
            lines.extend(_wrap_tokens(tokens, PPM_MAX_LINE_LENGTH))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"
