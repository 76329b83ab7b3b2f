"""Scene-level closest-hit intersection.

This module tests a ray against every sphere in the scene and against the
checkerboard floor, and returns the closest hit with its surface normal and
material.

The scan is a plain O(n) loop with no spatial index; scenes hold a handful of
spheres. Anything farther than MAX_TRACE_DISTANCE counts as escaping to the
background.

Example:
    >>> from tinytracer.core.ray import Ray
    >>> from tinytracer.core.vector import Vector3
    >>> from tinytracer.materials import IVORY
    >>> from tinytracer.scene.intersection import intersect_scene
    >>> from tinytracer.scene.scene import Scene
    >>> scene = Scene()
    >>> _ = scene.add_sphere(Vector3(0.0, 0.0, -5.0), 1.0, IVORY)
    >>> record = intersect_scene(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), scene)
    >>> record.point
    Vector3(x=0.0, y=0.0, z=-4.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinytracer.core.ray import Ray, ray_at
from tinytracer.core.vector import Vector3
from tinytracer.geometry.checkerboard import (
    CHECKERBOARD_NORMAL,
    checkerboard_material,
    hit_checkerboard,
)
from tinytracer.geometry.sphere import Sphere, hit_sphere, sphere_normal
from tinytracer.materials.material import Material
from tinytracer.scene.scene import Scene

# Hits at or beyond this distance are treated as misses
MAX_TRACE_DISTANCE = 1000.0


@dataclass(frozen=True)
class HitRecord:
    """Record of a ray-scene intersection.

    Attributes:
        t: Distance along the ray to the hit point.
        point: The 3D point where the ray hit the surface.
        normal: Unit surface normal at the hit point. Outward for spheres,
            always up for the floor.
        material: The material active at the hit point.
    """

    t: float
    point: Vector3
    normal: Vector3
    material: Material


def intersect_scene(ray: Ray, scene: Scene) -> HitRecord | None:
    """Find the closest surface hit by a ray.

    Spheres are scanned in order keeping the strictly smallest distance, so
    the first sphere seen wins an exact tie. The floor then overrides the
    sphere hit only if it is strictly closer.

    Args:
        ray: The ray to trace (normalized direction).
        scene: The scene to intersect.

    Returns:
        A HitRecord for the closest hit within MAX_TRACE_DISTANCE, or None if
        the ray escapes.
    """
    closest_t = math.inf
    closest_sphere: Sphere | None = None

    for sphere in scene.spheres:
        t = hit_sphere(ray, sphere)
        if t is not None and t < closest_t:
            closest_t = t
            closest_sphere = sphere

    floor_t = hit_checkerboard(ray)
    if floor_t is not None and floor_t < closest_t and floor_t < MAX_TRACE_DISTANCE:
        point = ray_at(ray, floor_t)
        return HitRecord(
            t=floor_t,
            point=point,
            normal=CHECKERBOARD_NORMAL,
            material=checkerboard_material(point),
        )

    if closest_sphere is None or closest_t >= MAX_TRACE_DISTANCE:
        return None

    point = ray_at(ray, closest_t)
    return HitRecord(
        t=closest_t,
        point=point,
        normal=sphere_normal(closest_sphere, point),
        material=closest_sphere.material,
    )
