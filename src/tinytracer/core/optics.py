"""Geometric optics: mirror reflection and Snell's-law refraction.

Both functions are pure and return unnormalized directions; callers normalize
before casting a new ray.

Example:
    >>> from tinytracer.core.optics import reflect, refract
    >>> from tinytracer.core.vector import Vector3
    >>> incident = Vector3(0.0, -1.0, 0.0)
    >>> normal = Vector3(0.0, 1.0, 0.0)
    >>> reflect(incident, normal)
    Vector3(x=0.0, y=1.0, z=0.0)
    >>> refract(incident, normal, 1.0)  # Index 1.0 does not bend the ray
    Vector3(x=0.0, y=-1.0, z=0.0)
"""

from __future__ import annotations

import math

from tinytracer.core.vector import ZERO, Vector3

# Refractive index of the medium surrounding every object (vacuum / air)
AMBIENT_REFRACTIVE_INDEX = 1.0


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be unit length).

    Returns:
        incident - normal * 2 * dot(incident, normal).
    """
    return incident - normal * (2.0 * incident.dot(normal))


def refract(incident: Vector3, normal: Vector3, refractive_index: float) -> Vector3:
    """Refract an incident vector through a surface using Snell's law.

    The normal is expected to point outward from the object. When the incident
    direction lies on the same side as the normal the ray is exiting the
    medium, so the indices are swapped and the normal is flipped.

    Args:
        incident: The incoming direction vector (should be normalized).
        normal: The outward surface normal (should be normalized).
        refractive_index: Refractive index of the object's material.

    Returns:
        The refracted direction (unnormalized), or the zero vector if total
        internal reflection occurs.
    """
    cos_i = -max(-1.0, min(1.0, incident.dot(normal)))
    eta_i = AMBIENT_REFRACTIVE_INDEX
    eta_t = refractive_index
    n = normal
    if cos_i < 0.0:
        # Ray is inside the object, leaving through the surface
        cos_i = -cos_i
        eta_i, eta_t = eta_t, eta_i
        n = -normal

    eta = eta_i / eta_t
    k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
    if k < 0.0:
        return ZERO
    return incident * eta + n * (eta * cos_i - math.sqrt(k))
