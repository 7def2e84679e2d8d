"""Default two-sphere world.

The default world is the standard fixture for shading tests:
- A white point light at (-10, 10, -10)
- An outer unit sphere at the origin, color (0.8, 1.0, 0.6),
  diffuse 0.7, specular 0.2
- An inner sphere with the default material, scaled by 0.5

Example:
    >>> from phongray.scene.default_world import create_default_world
    >>> world = create_default_world()
    >>> len(world)
    2
"""

from __future__ import annotations

from dataclasses import dataclass

from phongray.core.color import Color
from phongray.core.matrix import Matrix4
from phongray.core.tuples import Point
from phongray.materials.lighting import PointLight
from phongray.materials.material import Material
from phongray.scene.builder import SceneBuilder
from phongray.scene.world import World


@dataclass
class DefaultWorldParams:
    """Parameters for the default world.

    Attributes:
        light_position: Position of the point light.
        light_color: RGB intensity of the light.
        outer_color: Surface color of the outer sphere.
        outer_diffuse: Diffuse coefficient of the outer sphere.
        outer_specular: Specular coefficient of the outer sphere.
        inner_scale: Uniform scale of the inner sphere.

    Example:
        >>> params = DefaultWorldParams(light_position=(0.0, 0.25, 0.0))
        >>> world = create_default_world(params)
    """

    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    outer_color: tuple[float, float, float] = (0.8, 1.0, 0.6)
    outer_diffuse: float = 0.7
    outer_specular: float = 0.2
    inner_scale: float = 0.5


def create_default_world(
    params: DefaultWorldParams | None = None,
    builder: SceneBuilder | None = None,
) -> World:
    """Create the default two-sphere world.

    Args:
        params: Optional overrides; defaults to DefaultWorldParams().
        builder: Builder to create the spheres with. Pass one in to add
            more shapes to the same scene afterwards.

    Returns:
        A World whose shapes are [outer, inner].
    """
    if params is None:
        params = DefaultWorldParams()
    if builder is None:
        builder = SceneBuilder()

    builder.sphere(
        material=Material(
            color=Color(*params.outer_color),
            diffuse=params.outer_diffuse,
            specular=params.outer_specular,
        )
    )
    s = params.inner_scale
    builder.sphere(transform=Matrix4.identity().scale(s, s, s))

    light = PointLight(Point(*params.light_position), Color(*params.light_color))
    return builder.build(light)
