"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Immutable Vector3 value type (also used for colors)
    ray: Ray data structure
    optics: Mirror reflection and Snell's-law refraction
    shader: The recursive shader (lighting, shadows, reflection, refraction)
    renderer: Framebuffer driver that shades every pixel of the image

The shader is the heart of the tracer: shade(ray, scene, depth) returns the
color seen along a ray, recursing at most MAX_DEPTH levels deep. It is pure
Python over immutable values and holds no shared state.
"""

from .optics import reflect, refract
from .ray import Ray, make_ray, ray_at
from .vector import UP, WHITE, ZERO, Color, Vector3

# Note: shader and renderer are NOT imported here to avoid circular imports
# (they depend on tinytracer.scene, which depends on this package).
#
# For rendering, use:
#   from tinytracer.core.shader import shade
#   from tinytracer.core.renderer import Renderer

__all__ = [
    "Vector3",
    "Color",
    "ZERO",
    "UP",
    "WHITE",
    "Ray",
    "ray_at",
    "make_ray",
    "reflect",
    "refract",
]
