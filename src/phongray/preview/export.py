"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain-text P3, written from Canvas.to_ppm)
    - PNG (8-bit RGB via Pillow)

Both formats share the canvas quantization, so a PNG and a PPM written from
the same canvas hold identical channel values.

Example:
    >>> from phongray.preview.export import save_png, save_ppm
    >>> canvas = camera.render(world)
    >>> save_ppm(canvas, "output.ppm")
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from phongray.preview.canvas import Canvas

logger = logging.getLogger(__name__)


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit image array.

    Args:
        canvas: The canvas to convert.

    Returns:
        Image array of shape (height, width, 3) with dtype uint8, row-major
        with the top image row first.
    """
    quantized = canvas.quantize()
    return np.ascontiguousarray(quantized.transpose(1, 0, 2)).astype(np.uint8)


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as a plain-text PPM file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).
    """
    path = Path(filepath)
    path.write_text(canvas.to_ppm(), encoding="ascii")
    logger.info("Wrote %dx%d PPM to %s", canvas.width, canvas.height, path)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save the canvas as an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
    """
    path = Path(filepath)
    PILImage.fromarray(canvas_to_uint8(canvas)).save(path)
    logger.info("Wrote %dx%d PNG to %s", canvas.width, canvas.height, path)
