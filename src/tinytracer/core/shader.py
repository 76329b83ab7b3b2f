"""Recursive Whitted-style shader.

This module computes the color seen along a ray. At every surface hit it
combines:
    - Diffuse and specular (Phong) lighting from each unshadowed point light
    - A recursively traced mirror reflection
    - A recursively traced Snell refraction

weighted by the four albedo components of the hit material. The recursion is
a binary tree bounded by MAX_DEPTH: each non-terminal hit spawns at most one
reflected and one refracted child, plus one shadow probe per light.

Key features:
    - Hard (binary) shadows from shadow probe rays
    - Self-intersection avoidance with a biased ray origin
    - Hue-preserving tone mapping of over-bright colors

Example:
    >>> from tinytracer.core.ray import Ray
    >>> from tinytracer.core.shader import BACKGROUND_COLOR, shade
    >>> from tinytracer.core.vector import Vector3
    >>> from tinytracer.scene.scene import Scene
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    >>> shade(ray, Scene()) == BACKGROUND_COLOR
    True
"""

from __future__ import annotations

from tinytracer.core.optics import reflect, refract
from tinytracer.core.ray import Ray
from tinytracer.core.vector import WHITE, ZERO, Color, Vector3
from tinytracer.scene.intersection import intersect_scene
from tinytracer.scene.scene import Light, Scene

# =============================================================================
# Shading Constants
# =============================================================================

# Deepest recursion level that is still shaded; deeper rays see the background
MAX_DEPTH = 4

# Ray offset epsilon to avoid self-intersection
RAY_EPSILON = 1e-3

# Color returned for rays that escape the scene or exceed MAX_DEPTH
BACKGROUND_COLOR = Vector3(0.2, 0.7, 0.8)

# Brightest displayable channel value
DISPLAY_MAX = 1.0


# =============================================================================
# Helpers
# =============================================================================


def offset_ray_origin(point: Vector3, normal: Vector3, direction: Vector3) -> Vector3:
    """Offset a ray origin to avoid self-intersection.

    Pushes the point slightly along the normal on the side the new ray will
    travel (above the surface for reflection and shadow probes, below it for
    refraction into the object).

    Args:
        point: The intersection point.
        normal: The surface normal at the point.
        direction: The direction of the ray being spawned.

    Returns:
        The offset origin point.
    """
    if direction.dot(normal) < 0.0:
        return point - normal * RAY_EPSILON
    return point + normal * RAY_EPSILON


def tone_map(color: Color) -> Color:
    """Bring an over-bright color back into display range.

    If the brightest channel exceeds DISPLAY_MAX, all three channels are scaled
    by the same factor so the hue is preserved. Colors already in range are
    returned unchanged.
    """
    brightest = color.max_component()
    if brightest > DISPLAY_MAX:
        return color * (DISPLAY_MAX / brightest)
    return color


def is_shadowed(point: Vector3, normal: Vector3, light: Light, scene: Scene) -> bool:
    """Test whether a light is blocked from a surface point.

    Casts a shadow probe from the biased point toward the light. The light is
    occluded only if the probe hits a surface strictly closer than the light.

    Args:
        point: The surface point being lit.
        normal: The surface normal at the point.
        light: The light to test.
        scene: The scene providing occluders.

    Returns:
        True if something lies between the point and the light.
    """
    to_light = light.position - point
    light_distance = to_light.length()
    light_dir = to_light.normalize()

    probe_origin = offset_ray_origin(point, normal, light_dir)
    blocker = intersect_scene(Ray(probe_origin, light_dir), scene)
    if blocker is None:
        return False
    return (blocker.point - probe_origin).length() < light_distance


def direct_lighting(
    point: Vector3,
    normal: Vector3,
    view_dir: Vector3,
    specular_exponent: float,
    scene: Scene,
) -> tuple[float, float]:
    """Accumulate diffuse and specular intensity from all visible lights.

    Args:
        point: The surface point.
        normal: Unit surface normal at the point.
        view_dir: Direction of the incoming ray (from the eye to the point).
        specular_exponent: Phong exponent of the surface material.
        scene: The scene providing lights and occluders.

    Returns:
        A tuple (diffuse_intensity, specular_intensity).
    """
    diffuse = 0.0
    specular = 0.0
    for light in scene.lights:
        if is_shadowed(point, normal, light, scene):
            continue
        light_dir = (light.position - point).normalize()
        diffuse += light.intensity * max(0.0, light_dir.dot(normal))
        highlight = max(0.0, -reflect(-light_dir, normal).dot(view_dir))
        specular += light.intensity * highlight**specular_exponent
    return diffuse, specular


# =============================================================================
# Recursive Shading
# =============================================================================


def shade(ray: Ray, scene: Scene, depth: int = 0) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to shade (normalized direction).
        scene: The scene to render.
        depth: Recursion level of this ray; primary rays are at depth 0.

    Returns:
        The color, channels in [0, DISPLAY_MAX]. BACKGROUND_COLOR if the ray
        escapes or depth exceeds MAX_DEPTH.
    """
    if depth > MAX_DEPTH:
        return BACKGROUND_COLOR
    hit = intersect_scene(ray, scene)
    if hit is None:
        return BACKGROUND_COLOR

    point = hit.point
    normal = hit.normal
    material = hit.material

    # Children with zero weight contribute nothing and are not traced
    reflect_color = ZERO
    if material.reflection_weight != 0.0:
        reflect_dir = reflect(ray.direction, normal).normalize()
        reflect_origin = offset_ray_origin(point, normal, reflect_dir)
        reflect_color = shade(Ray(reflect_origin, reflect_dir), scene, depth + 1)

    refract_color = ZERO
    if material.refraction_weight != 0.0:
        refract_dir = refract(ray.direction, normal, material.refractive_index).normalize()
        refract_origin = offset_ray_origin(point, normal, refract_dir)
        refract_color = shade(Ray(refract_origin, refract_dir), scene, depth + 1)

    diffuse, specular = direct_lighting(
        point, normal, ray.direction, material.specular_exponent, scene
    )

    color = (
        material.color * (diffuse * material.diffuse_weight)
        + WHITE * (specular * material.specular_weight)
        + reflect_color * material.reflection_weight
        + refract_color * material.refraction_weight
    )
    return tone_map(color)
