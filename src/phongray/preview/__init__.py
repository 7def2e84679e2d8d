"""Canvas storage and image export."""

from .canvas import PPM_MAX_COLOR_VALUE, PPM_MAX_LINE_LENGTH, Canvas
from .export import canvas_to_uint8, save_png, save_ppm

__all__ = [
    "Canvas",
    "PPM_MAX_COLOR_VALUE",
    "PPM_MAX_LINE_LENGTH",
    "canvas_to_uint8",
    "save_png",
    "save_ppm",
]
