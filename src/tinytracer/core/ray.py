"""Ray data structure.

Rays are transient values: a fresh Ray is created for every cast (primary,
reflected, refracted, or shadow probe) and is never shared or mutated.

Example:
    >>> from tinytracer.core.ray import Ray, ray_at
    >>> from tinytracer.core.vector import Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray_at(ray, 5.0)  # Point 5 units along the ray
    Vector3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from tinytracer.core.vector import Vector3


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Expected to be normalized; the
            intersection routines treat distances along it as world units.
    """

    origin: Vector3
    direction: Vector3


def ray_at(ray: Ray, t: float) -> Vector3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + ray.direction * t


def make_ray(origin: Vector3, direction: Vector3) -> Ray:
    """Create a ray from an origin and a direction, normalizing the direction."""
    return Ray(origin=origin, direction=direction.normalize())
