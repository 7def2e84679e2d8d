"""Perspective camera and the per-pixel render loop.

The camera sits at the origin of its own space looking down -z at a
viewport one unit away. The viewport spans the full field of view along
its longer image axis:

    aspect = hsize / vsize
    aspect >= 1:  half_width = tan(fov / 2),  half_height = half_width / aspect
    aspect <  1:  half_height = tan(fov / 2), half_width = half_height * aspect
    pixel_size = 2 * half_width / hsize

The camera transform orients the world relative to the camera (normally a
view_transform), so rays are built in camera space and moved into world
space with its inverse.

Example:
    >>> import math
    >>> from phongray.core.matrix import view_transform
    >>> from phongray.core.tuples import Point, Vector
    >>> camera = Camera(
    ...     160, 120, math.pi / 3,
    ...     view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)),
    ... )
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from phongray.core.matrix import Matrix4
from phongray.core.ray import Ray
from phongray.core.tuples import Point
from phongray.preview.canvas import Canvas

if TYPE_CHECKING:
    from phongray.scene.world import World

logger = logging.getLogger(__name__)

# Called with (rows_done, total_rows) after each image row
ProgressCallback = Callable[[int, int], None]


class Camera:
    """A pinhole camera producing one primary ray per pixel.

    Attributes:
        hsize: Horizontal size of the image in pixels.
        vsize: Vertical size of the image in pixels.
        field_of_view: Angle (radians) covered by the longer image axis.
        half_width: Half the viewport width, one unit in front of the camera.
        half_height: Half the viewport height.
        pixel_size: World-space size of one pixel on the viewport.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix4 | None = None,
    ) -> None:
        """Create a camera and derive its viewport.

        Args:
            hsize: Image width in pixels (must be positive).
            vsize: Image height in pixels (must be positive).
            field_of_view: Field of view in radians.
            transform: World-to-camera transform (default identity).

        Raises:
            ValueError: If either image dimension is not positive.
        """
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera image size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else Matrix4.identity()

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2.0 / hsize

    @property
    def inverse_transform(self) -> Matrix4:
        """Camera-to-world transform.

        Follows in-place edits of the transform, since the matrix drops its
        cached inverse whenever an entry is written.

        Raises:
            NonInvertibleMatrixError: If the camera transform is singular.
        """
        return self.transform.inverse()

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Build the world-space ray through the center of a pixel.

        Args:
            x: Pixel column, 0 at the left.
            y: Pixel row, 0 at the top.

        Returns:
            A ray from the camera position with a unit direction.
        """
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.inverse_transform
        pixel = inverse * Point(world_x, world_y, -1.0)
        origin = inverse * Point.origin()
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world: World, progress: ProgressCallback | None = None) -> Canvas:
        """Render a world into a new canvas.

        Pixels are traced in row-major order. The world and the camera must
        not be modified while rendering.

        Args:
            world: The scene to render.
            progress: Optional callback receiving (rows_done, total_rows)
                after each image row.

        Returns:
            A canvas of hsize x vsize holding the traced colors.

        Example:
            >>> def progress(done, total):
            ...     print(f"{done}/{total} rows")
            >>> canvas = camera.render(world, progress=progress)
        """
        start = time.perf_counter()
        image = np.zeros((self.hsize, self.vsize, 3), dtype=np.float64)

        for y in range(self.vsize):
            for x in range(self.hsize):
                color = world.color_at(self.ray_for_pixel(x, y))
                image[x, y] = (color.red, color.green, color.blue)
            if progress is not None:
                progress(y + 1, self.vsize)

        canvas = Canvas(self.hsize, self.vsize)
        canvas.from_numpy(image)

        elapsed = time.perf_counter() - start
        logger.info(
            "Rendered %dx%d image (%d shapes) in %.2fs",
            self.hsize,
            self.vsize,
            len(world),
            elapsed,
        )
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self.hsize}, vsize={self.vsize}, "
            f"field_of_view={self.field_of_view!r})"
        )
