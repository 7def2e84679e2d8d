"""CPU ray tracer with Phong shading and composable surface patterns.

This package turns a scene description (shapes, one point light, a camera)
into a 2-D grid of colors, with support for:
- Affine transforms built from 4x4 matrices (translate, scale, rotate, shear)
- Geometric primitives (spheres, planes) with object-space intersection
- Phong lighting with hard shadows from a single point light
- Nested color patterns (stripes, rings, checkers, gradients, noise)

Subpackages:
    core: Tuples, colors, matrices, rays and the error taxonomy
    geometry: Shape protocol and primitives
    scene: Intersections, world, scene construction
    materials: Surface materials and the Phong lighting model
    patterns: Color patterns and procedural noise
    camera: Camera model and the render loop
    preview: Taichi-backed canvas and image export
"""

__version__ = "0.1.0"
