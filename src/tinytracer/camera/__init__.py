"""Camera module for primary ray generation.

Components:
    pinhole: Fixed pinhole camera at the eye point looking down -z

Camera responsibilities:
    - Map pixel (i, j) centers to image-plane offsets at unit distance
    - Account for the field of view and aspect ratio
    - Hand normalized primary rays to the renderer

Pixel coordinates:
    i in [0, width): left to right across the image
    j in [0, height): top to bottom across the image

Primary ray directions for the whole image are generated in a Taichi kernel
and read back per pixel by the renderer.
"""

from .pinhole import (
    MAX_IMAGE_HEIGHT,
    MAX_IMAGE_WIDTH,
    PinholeCamera,
    clear_camera,
    get_camera_info,
    get_camera_origin,
    get_ray,
    get_ray_directions,
    is_camera_ready,
    setup_camera,
)

__all__ = [
    "PinholeCamera",
    "setup_camera",
    "clear_camera",
    "is_camera_ready",
    "get_ray",
    "get_ray_directions",
    "get_camera_origin",
    "get_camera_info",
    "MAX_IMAGE_WIDTH",
    "MAX_IMAGE_HEIGHT",
]
