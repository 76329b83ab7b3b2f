"""Sphere primitive with geometric ray-sphere intersection.

The intersection projects the sphere center onto the ray instead of solving
the quadratic directly:

    L   = center - origin
    tca = dot(L, direction)          # distance to the closest approach
    d2  = dot(L, L) - tca^2          # squared distance from center to the ray
    thc = sqrt(radius^2 - d2)        # half chord length
    t0, t1 = tca - thc, tca + thc

The nearest non-negative root wins. A ray starting inside the sphere reports
the far root; a sphere entirely behind the origin is a miss.

Example:
    >>> from tinytracer.core.ray import Ray
    >>> from tinytracer.core.vector import Vector3
    >>> from tinytracer.geometry.sphere import Sphere, hit_sphere
    >>> from tinytracer.materials import IVORY
    >>> sphere = Sphere(center=Vector3(0.0, 0.0, -5.0), radius=1.0, material=IVORY)
    >>> hit_sphere(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), sphere)
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinytracer.core.ray import Ray
from tinytracer.core.vector import Vector3
from tinytracer.materials.material import Material


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: The material of the whole surface.

    Raises:
        ValueError: If the radius is not positive.
    """

    center: Vector3
    radius: float
    material: Material

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive.")


def hit_sphere(ray: Ray, sphere: Sphere) -> float | None:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test. The direction should be normalized so that the
            returned value is a distance in world units.
        sphere: The sphere to test intersection against.

    Returns:
        The distance along the ray to the nearest non-negative intersection,
        or None if the ray misses or the sphere is entirely behind the origin.
    """
    to_center = sphere.center - ray.origin
    tca = to_center.dot(ray.direction)
    d2 = to_center.dot(to_center) - tca * tca
    radius2 = sphere.radius * sphere.radius
    if d2 > radius2:
        return None

    thc = math.sqrt(radius2 - d2)
    t0 = tca - thc
    t1 = tca + thc
    if t0 < 0.0:
        t0 = t1
    if t0 < 0.0:
        return None
    return t0


def sphere_normal(sphere: Sphere, point: Vector3) -> Vector3:
    """Outward unit normal of the sphere at a surface point."""
    return (point - sphere.center).normalize()
