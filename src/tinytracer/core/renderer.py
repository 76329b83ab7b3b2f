"""Framebuffer driver that shades every pixel of the image.

This module owns the pixel buffer: for each pixel it takes the primary ray
from the pinhole camera, calls the recursive shader, and stores the resulting
color. Rendering is sequential, one row at a time, with progress reported
per batch of rows.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinytracer.camera.pinhole import setup_camera
    >>> from tinytracer.core.renderer import Renderer
    >>> from tinytracer.scene.default_scene import create_default_scene
    >>>
    >>> scene, camera = create_default_scene()
    >>> setup_camera(camera)
    >>>
    >>> renderer = Renderer(camera.width, camera.height)
    >>> renderer.render(scene)
    >>> image = renderer.get_image_uint8()
"""

from collections.abc import Callable, Generator

import numpy as np
import numpy.typing as npt

from tinytracer.camera.pinhole import get_camera_info, get_camera_origin, get_ray_directions
from tinytracer.core.ray import Ray
from tinytracer.core.shader import shade
from tinytracer.core.vector import Vector3
from tinytracer.scene.scene import Scene

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Renderer:
    """A sequential renderer writing shaded colors into a pixel buffer.

    The buffer has shape (height, width, 3) with dtype float32 and channels
    in [0, 1]; row 0 is the top of the image.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the renderer with a cleared buffer.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions ({width}x{height}) must be positive")
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.float32)
        self._rows_done = 0

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    @property
    def rows_done(self) -> int:
        """Number of rows rendered since the last reset."""
        return self._rows_done

    @property
    def is_complete(self) -> bool:
        """Whether every row has been rendered."""
        return self._rows_done == self._height

    def reset(self) -> None:
        """Clear the buffer for a new render."""
        self._buffer.fill(0.0)
        self._rows_done = 0

    def _check_camera(self) -> None:
        """Check that the active camera matches the buffer size.

        Raises:
            RuntimeError: If no camera has been set up.
            ValueError: If the camera image size differs from the buffer size.
        """
        info = get_camera_info()
        if (info["width"], info["height"]) != (self._width, self._height):
            raise ValueError(
                f"Camera image size ({info['width']}x{info['height']}) doesn't match "
                f"renderer size ({self._width}x{self._height})"
            )

    def _render_row(self, scene: Scene, origin: Vector3, directions: npt.NDArray, j: int) -> None:
        """Shade every pixel of row j."""
        for i in range(self._width):
            dx, dy, dz = directions[j, i]
            ray = Ray(origin, Vector3(float(dx), float(dy), float(dz)))
            self._buffer[j, i] = shade(ray, scene).to_tuple()

    def render(
        self,
        scene: Scene,
        batch_size: int = 16,
        callback: ProgressCallback | None = None,
    ) -> None:
        """Render the whole image, replacing the previous contents.

        Args:
            scene: The scene to render.
            batch_size: Number of rows to render before each callback.
            callback: Optional callback function called after each batch.
                Receives (rows_done, total_rows).

        Raises:
            RuntimeError: If no camera has been set up.
            ValueError: If the camera image size differs from the buffer size.

        Example:
            >>> def progress(done, total):
            ...     print(f"Progress: {done}/{total} rows")
            >>> renderer.render(scene, batch_size=64, callback=progress)
        """
        for done, total in self.render_progressive(scene, batch_size=batch_size):
            if callback is not None:
                callback(done, total)

    def render_progressive(
        self,
        scene: Scene,
        batch_size: int = 16,
    ) -> Generator[tuple[int, int], None, None]:
        """Render the image, yielding progress after each batch of rows.

        This is a generator-based alternative to render() with callbacks.

        Args:
            scene: The scene to render.
            batch_size: Number of rows to render before each yield.

        Yields:
            Tuple of (rows_done, total_rows).

        Raises:
            RuntimeError: If no camera has been set up.
            ValueError: If the camera image size differs from the buffer size.
        """
        self._check_camera()
        if batch_size <= 0:
            raise ValueError(f"Batch size = {batch_size} must be positive")

        self.reset()
        origin = get_camera_origin()
        directions = get_ray_directions()

        for j in range(self._height):
            self._render_row(scene, origin, directions, j)
            self._rows_done = j + 1
            if self._rows_done % batch_size == 0 or self._rows_done == self._height:
                yield (self._rows_done, self._height)

    def get_image_numpy(self) -> npt.NDArray[np.float32]:
        """Get a copy of the rendered image.

        Returns:
            NumPy array of shape (height, width, 3) with dtype float32, channels
            in [0, 1].
        """
        return self._buffer.copy()

    def get_image_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the rendered image as an 8-bit NumPy array.

        Channels are scaled by 255 and truncated.

        Returns:
            NumPy array of shape (height, width, 3) with dtype uint8.
        """
        from tinytracer.preview.export import image_to_uint8

        return image_to_uint8(self._buffer)

    def save_image(self, filepath: str, alpha: bool = True) -> None:
        """Save the rendered image to a PNG file.

        Args:
            filepath: Path to save the image (e.g., "out.png").
            alpha: Write an opaque alpha channel (RGBA) if True, RGB otherwise.
        """
        from tinytracer.preview.export import save_png

        save_png(self, filepath, alpha=alpha)

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"rows_done={self.rows_done})"
        )
