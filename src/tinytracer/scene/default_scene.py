"""Demo scene configuration.

This module provides a factory function for the standard demo scene: four
spheres of different materials hovering over the checkerboard floor, lit by
three point lights, seen from a camera at the origin looking down -z.

The scene consists of:
- Ivory sphere (diffuse with a soft highlight)
- Glass sphere (mostly refraction)
- Red rubber sphere (diffuse, dull)
- Mirror sphere (reflection with a hot highlight)
- Three white point lights

Example:
    >>> from tinytracer.scene.default_scene import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> scene.sphere_count, scene.light_count
    (4, 3)
    >>> camera.width, camera.height
    (1024, 768)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinytracer.camera.pinhole import PinholeCamera
from tinytracer.core.vector import Vector3
from tinytracer.materials.presets import GLASS, IVORY, MIRROR, RED_RUBBER
from tinytracer.scene.scene import Scene

# =============================================================================
# Demo Scene Parameters
# =============================================================================


@dataclass
class DefaultSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Field of view in radians.
        light_scale: Multiplier applied to every light intensity.
    """

    width: int = 1024
    height: int = 768
    fov: float = math.pi / 3.0
    light_scale: float = 1.0


# =============================================================================
# Demo Scene Constants
# =============================================================================

# (center, radius, material)
SPHERES = (
    ((-3.0, 0.0, -16.0), 2.0, IVORY),
    ((-1.0, -1.5, -12.0), 2.0, GLASS),
    ((1.5, -0.5, -18.0), 3.0, RED_RUBBER),
    ((7.0, 5.0, -18.0), 4.0, MIRROR),
)

# (position, intensity)
LIGHTS = (
    ((-20.0, 20.0, 20.0), 1.5),
    ((30.0, 50.0, -25.0), 1.8),
    ((30.0, 20.0, 30.0), 1.7),
)


# =============================================================================
# Demo Scene Factory
# =============================================================================


def create_default_scene(
    params: DefaultSceneParams | None = None,
) -> tuple[Scene, PinholeCamera]:
    """Create the demo scene and its camera.

    Args:
        params: Optional DefaultSceneParams for image size, field of view and
            light brightness. If None, uses default DefaultSceneParams().

    Returns:
        A tuple of (Scene, PinholeCamera). The camera still has to be passed
        to setup_camera() before rendering.
    """
    if params is None:
        params = DefaultSceneParams()

    scene = Scene()
    for center, radius, material in SPHERES:
        scene.add_sphere(Vector3(*center), radius, material)
    for position, intensity in LIGHTS:
        scene.add_light(Vector3(*position), intensity * params.light_scale)

    camera = PinholeCamera(width=params.width, height=params.height, fov=params.fov)
    return scene, camera
