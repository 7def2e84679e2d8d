"""Camera module for viewport-to-ray mapping and rendering.

Components:
    camera: Pinhole camera with a look-at transform and the render loop

Ray generation uses pixel coordinates:
    x in [0, hsize): left to right across the image
    y in [0, vsize): top to bottom across the image
"""

from .camera import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
