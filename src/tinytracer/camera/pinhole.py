"""Pinhole camera model for primary ray generation.

This module implements the fixed pinhole camera that feeds the shader: the eye
sits at ``origin`` looking down -z with +y up, and the image plane lies at
unit distance along the viewing axis.

For pixel (i, j), with j = 0 the top row, the ray direction is

    x =  (2 * (i + 0.5) / width  - 1) * tan(fov / 2) * width / height
    y = -(2 * (j + 0.5) / height - 1) * tan(fov / 2)
    z = -1

normalized. All directions for an image are generated at once by a Taichi
kernel into a vector field; the renderer then reads them back per pixel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinytracer.camera.pinhole import PinholeCamera, setup_camera, get_ray
    >>>
    >>> camera = PinholeCamera(width=640, height=480)
    >>> setup_camera(camera)
    >>> ray = get_ray(320, 240)  # Ray through the pixel just below center
"""

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from tinytracer.core.ray import Ray
from tinytracer.core.vector import Vector3

# Type alias for 3D vectors in Taichi scope
vec3 = tm.vec3

# Maximum supported image dimensions
MAX_IMAGE_WIDTH = 4096
MAX_IMAGE_HEIGHT = 4096

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class PinholeCamera:
    """Configuration for the pinhole (perspective) camera.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Vertical field of view in radians (default pi/3, i.e. 60 degrees).
        origin: Eye position in world space (x, y, z).

    Raises:
        ValueError: If the image size is not positive or the field of view is
            outside (0, pi).
    """

    width: int
    height: int
    fov: float = math.pi / 3.0
    origin: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions ({self.width}x{self.height}) must be positive"
            )
        if not 0.0 < self.fov < math.pi:
            raise ValueError(f"Field of view = {self.fov} must be in (0, pi) radians")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


# =============================================================================
# Camera State
# =============================================================================

# Ray directions indexed by (i, j); allocated by setup_camera
_ray_directions = None

# Camera the directions were generated for
_active_camera: PinholeCamera | None = None


# =============================================================================
# Ray Generation Kernel
# =============================================================================


@ti.kernel
def _generate_directions(
    directions: ti.template(),
    width: ti.i32,
    height: ti.i32,
    tan_half_fov: ti.f32,
):
    """Fill the direction field with normalized primary ray directions.

    Args:
        directions: Vector field of shape (width, height) to fill.
        width: Image width in pixels.
        height: Image height in pixels.
        tan_half_fov: tan(fov / 2).
    """
    w = ti.cast(width, ti.f32)
    h = ti.cast(height, ti.f32)
    for i, j in ti.ndrange(width, height):
        x = (2.0 * (ti.cast(i, ti.f32) + 0.5) / w - 1.0) * tan_half_fov * w / h
        y = -(2.0 * (ti.cast(j, ti.f32) + 0.5) / h - 1.0) * tan_half_fov
        directions[i, j] = tm.normalize(vec3(x, y, -1.0))


# =============================================================================
# Camera Setup (Python-side)
# =============================================================================


def setup_camera(camera: PinholeCamera) -> None:
    """Generate the primary ray directions for a camera.

    Must be called (after ti.init) before rendering. Calling it again with a
    different camera replaces the previous state.

    Args:
        camera: Camera configuration with image size and field of view.

    Raises:
        ValueError: If the image size exceeds the maximum supported size.
    """
    global _ray_directions, _active_camera

    if camera.width > MAX_IMAGE_WIDTH or camera.height > MAX_IMAGE_HEIGHT:
        raise ValueError(
            f"Image dimensions ({camera.width}x{camera.height}) exceed maximum supported "
            f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
        )

    shape = (camera.width, camera.height)
    if _ray_directions is None or _ray_directions.shape != shape:
        _ray_directions = ti.Vector.field(3, dtype=ti.f32, shape=shape)

    _generate_directions(
        _ray_directions, camera.width, camera.height, math.tan(camera.fov / 2.0)
    )
    _active_camera = camera


def clear_camera() -> None:
    """Forget the active camera. get_ray() fails until setup_camera() is called."""
    global _active_camera
    _active_camera = None


def is_camera_ready() -> bool:
    """Check if a camera has been set up."""
    return _active_camera is not None


def _check_camera_initialized() -> PinholeCamera:
    """Return the active camera, raising if none has been set up."""
    if _active_camera is None:
        raise RuntimeError("Camera not set up. Call setup_camera() first.")
    return _active_camera


# =============================================================================
# Ray Access
# =============================================================================


def get_ray(i: int, j: int) -> Ray:
    """Get the primary ray through pixel (i, j).

    Args:
        i: Pixel column (0 = left).
        j: Pixel row (0 = top).

    Returns:
        A Ray from the eye through the pixel center.

    Raises:
        RuntimeError: If the camera has not been set up.
        ValueError: If (i, j) lies outside the image.
    """
    camera = _check_camera_initialized()
    if not 0 <= i < camera.width:
        raise ValueError(f"Pixel column i = {i} is outside [0, {camera.width}).")
    if not 0 <= j < camera.height:
        raise ValueError(f"Pixel row j = {j} is outside [0, {camera.height}).")
    direction = _ray_directions[i, j]
    return Ray(
        origin=Vector3(*camera.origin),
        direction=Vector3(float(direction[0]), float(direction[1]), float(direction[2])),
    )


def get_ray_directions() -> npt.NDArray[np.float32]:
    """Get every primary ray direction as a NumPy array.

    Returns:
        Array of shape (height, width, 3); row 0 is the top of the image.

    Raises:
        RuntimeError: If the camera has not been set up.
    """
    _check_camera_initialized()
    # Field layout is (width, height, 3); images are (height, width, 3)
    return np.transpose(_ray_directions.to_numpy(), (1, 0, 2))


def get_camera_origin() -> Vector3:
    """Get the eye position of the active camera.

    Raises:
        RuntimeError: If the camera has not been set up.
    """
    return Vector3(*_check_camera_initialized().origin)


# =============================================================================
# Utility Functions
# =============================================================================


def get_camera_info() -> dict[str, object]:
    """Get current camera state for debugging.

    Returns:
        Dictionary with origin, width, height, fov and aspect_ratio.

    Raises:
        RuntimeError: If the camera has not been set up.
    """
    camera = _check_camera_initialized()
    return {
        "origin": tuple(float(c) for c in camera.origin),
        "width": camera.width,
        "height": camera.height,
        "fov": camera.fov,
        "aspect_ratio": camera.aspect_ratio,
    }
