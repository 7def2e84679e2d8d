"""Materials module for surface appearance and lighting.

Components:
    material: Per-shape reflectance parameters (color or pattern, Phong coefficients)
    lighting: Point light source and the Phong illumination model

Shading is local: a surface point is lit by ambient + diffuse + specular
terms from the scene's single point light, with diffuse and specular
dropped when the point is in shadow.
"""

from .lighting import PointLight, lighting
from .material import Material

__all__ = [
    "Material",
    "PointLight",
    "lighting",
]
