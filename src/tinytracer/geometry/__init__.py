"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with geometric ray-sphere intersection
    checkerboard: The bounded checkerboard floor and its procedural material

Every intersection routine returns the hit distance along the ray, or None
on a miss:

    t = hit_sphere(ray, sphere)
    t = hit_checkerboard(ray)

Choosing the closest primitive and building the hit record is the job of
tinytracer.scene.intersection.
"""

from .checkerboard import (
    CHECKERBOARD_BASE_MATERIAL,
    CHECKERBOARD_NORMAL,
    PLANE_HEIGHT,
    checkerboard_color,
    checkerboard_material,
    hit_checkerboard,
    in_checkerboard_bounds,
)
from .sphere import Sphere, hit_sphere, sphere_normal

__all__ = [
    "Sphere",
    "hit_sphere",
    "sphere_normal",
    "hit_checkerboard",
    "in_checkerboard_bounds",
    "checkerboard_color",
    "checkerboard_material",
    "CHECKERBOARD_BASE_MATERIAL",
    "CHECKERBOARD_NORMAL",
    "PLANE_HEIGHT",
]
