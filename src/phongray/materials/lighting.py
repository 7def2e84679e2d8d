"""Point light and the Phong illumination model.

lighting() evaluates the classic three-term Phong model at one surface
point:

    base      = pattern color at the point, or material.color
    effective = base * light.intensity
    ambient   = effective * material.ambient
    diffuse   = effective * material.diffuse * (light_dir . normal)
    specular  = light.intensity * material.specular * (reflect_dir . eye)^shininess

Diffuse and specular are black when the point is in shadow or the light is
behind the surface; specular is also black when the reflection points away
from the eye. The sum is not clamped; clamping happens at image output.

Example:
    >>> from phongray.core.color import Color
    >>> from phongray.core.tuples import Point
    >>> light = PointLight(Point(0, 0, -10), Color(1, 1, 1))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from phongray.core.color import BLACK, Color
from phongray.core.numeric import is_equal

if TYPE_CHECKING:
    from phongray.core.tuples import Point, Vector
    from phongray.geometry.shape import Shape


@dataclass(frozen=True)
class PointLight:
    """A point light source with no size.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the emitted light.
    """

    position: Point
    intensity: Color


def lighting(
    shape: Shape,
    light: PointLight,
    point: Point,
    eye: Vector,
    normal: Vector,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point with the Phong model.

    Args:
        shape: The shape being shaded; supplies the material and, for
            patterned materials, the object space the pattern lives in.
        light: The scene's point light.
        point: World-space surface point.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal facing the eye.
        in_shadow: If True, only the ambient term contributes.

    Returns:
        The unclamped sum of the ambient, diffuse and specular terms.
    """
    material = shape.material
    if material.pattern is not None:
        base = material.pattern.at_object(shape, point)
    else:
        base = material.color

    effective = base * light.intensity
    ambient = effective * material.ambient

    light_dir = (light.position - point).normalize()
    light_dot_normal = light_dir.dot(normal)
    if in_shadow or light_dot_normal < 0.0:
        return ambient

    diffuse = effective * (material.diffuse * light_dot_normal)

    reflect_dir = (-light_dir).reflect(normal)
    reflect_dot_eye = reflect_dir.dot(eye)
    if reflect_dot_eye < 0.0 or is_equal(reflect_dot_eye, 0.0):
        specular = BLACK
    else:
        specular = light.intensity * (material.specular * reflect_dot_eye**material.shininess)

    return ambient + diffuse + specular
