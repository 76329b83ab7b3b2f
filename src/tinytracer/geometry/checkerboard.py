"""Bounded checkerboard floor.

The floor is not a scene object: it is a fixed horizontal plane at
``PLANE_HEIGHT`` clipped to a rectangle in x and z, and its material is
synthesized for each hit point.

The tile color alternates on the parity of

    floor(0.5 * x + 1000) + floor(0.5 * z)

so each tile is 2 world units wide. The +1000 offset keeps the x term
positive across the whole floor.

Example:
    >>> from tinytracer.core.ray import Ray
    >>> from tinytracer.core.vector import Vector3
    >>> from tinytracer.geometry.checkerboard import hit_checkerboard
    >>> ray = Ray(Vector3(0.0, 0.0, -20.0), Vector3(0.0, -1.0, 0.0))
    >>> hit_checkerboard(ray)
    4.0
"""

from __future__ import annotations

import math

from tinytracer.core.ray import Ray, ray_at
from tinytracer.core.vector import UP, Vector3
from tinytracer.materials.material import Material

# =============================================================================
# Floor Geometry
# =============================================================================

# Height of the floor plane
PLANE_HEIGHT = -4.0

# The floor spans |x| < PLANE_X_LIMIT and PLANE_Z_FAR < z < PLANE_Z_NEAR
PLANE_X_LIMIT = 10.0
PLANE_Z_NEAR = -10.0
PLANE_Z_FAR = -30.0

# Rays whose vertical direction is this close to zero never hit the floor
PARALLEL_EPSILON = 1e-3

# =============================================================================
# Floor Material
# =============================================================================

LIGHT_TILE_COLOR = (0.3, 0.3, 0.3)
DARK_TILE_COLOR = (0.3, 0.21, 0.09)

CHECKERBOARD_BASE_MATERIAL = Material(
    diffuse_color=LIGHT_TILE_COLOR,
    albedo=(1.0, 0.0, 0.0, 0.0),
    specular_exponent=0.0,
    refractive_index=1.0,
)

# Normal of the floor, always facing up
CHECKERBOARD_NORMAL = UP


def hit_checkerboard(ray: Ray) -> float | None:
    """Test for ray-floor intersection.

    Args:
        ray: The ray to test (normalized direction).

    Returns:
        The distance along the ray to the floor, or None if the ray is nearly
        parallel to the floor, points away from it, or crosses the plane
        outside the tiled rectangle.
    """
    if abs(ray.direction.y) <= PARALLEL_EPSILON:
        return None

    d = -(ray.origin.y - PLANE_HEIGHT) / ray.direction.y
    if d <= 0.0:
        return None

    point = ray_at(ray, d)
    if not in_checkerboard_bounds(point):
        return None
    return d


def in_checkerboard_bounds(point: Vector3) -> bool:
    """Check whether a point on the plane lies inside the tiled rectangle."""
    return abs(point.x) < PLANE_X_LIMIT and PLANE_Z_FAR < point.z < PLANE_Z_NEAR


def checkerboard_color(point: Vector3) -> tuple[float, float, float]:
    """Tile color at a point on the floor."""
    parity = (math.floor(0.5 * point.x + 1000.0) + math.floor(0.5 * point.z)) % 2
    return LIGHT_TILE_COLOR if parity == 1 else DARK_TILE_COLOR


def checkerboard_material(point: Vector3) -> Material:
    """Synthesize the floor material at a hit point.

    Only the diffuse color varies; the remaining fields come from
    CHECKERBOARD_BASE_MATERIAL.
    """
    return CHECKERBOARD_BASE_MATERIAL.with_color(checkerboard_color(point))
