"""Image export utilities for rendered images.

This module converts rendered float images to 8-bit pixels and saves them
with Pillow.

Supported formats:
    - PNG, 8-bit RGBA (opaque alpha) or RGB

It also provides the gradient test pattern used to check the output path
without rendering anything.

Example:
    >>> from tinytracer.preview.export import gradient_test_pattern, save_png_from_array
    >>> pattern = gradient_test_pattern(1024, 768)
    >>> save_png_from_array(pattern, "out.png")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from tinytracer.core.renderer import Renderer


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a float image with channels in [0, 1] to uint8.

    Values are clamped to [0, 1], scaled by 255 and truncated.

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    # NaN from degenerate shading becomes black
    clean = np.nan_to_num(image.astype(np.float64), nan=0.0)
    return (np.clip(clean, 0.0, 1.0) * 255.0).astype(np.uint8)


def image_to_rgba(image: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Append an opaque alpha channel to an 8-bit RGB image.

    Args:
        image: 8-bit image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 4) with alpha = 255.
    """
    height, width = image.shape[:2]
    alpha = np.full((height, width, 1), 255, dtype=np.uint8)
    return np.concatenate([image, alpha], axis=2)


def save_png_from_array(
    image: npt.NDArray,
    filepath: str,
    *,
    alpha: bool = True,
) -> None:
    """Save an image array as a PNG file.

    Args:
        image: Image array of shape (H, W, 3). uint8 arrays are written as-is;
            float arrays are treated as channels in [0, 1].
        filepath: Output file path (should end in .png).
        alpha: Write an opaque alpha channel (RGBA) if True, RGB otherwise.

    Raises:
        ValueError: If the array is not of shape (H, W, 3).
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Image shape {image.shape} doesn't match expected (H, W, 3)")

    image_uint8 = image if image.dtype == np.uint8 else image_to_uint8(image)

    if alpha:
        pil_image = PILImage.fromarray(image_to_rgba(image_uint8), mode="RGBA")
    else:
        pil_image = PILImage.fromarray(image_uint8, mode="RGB")
    pil_image.save(filepath)


def save_png(
    renderer: Renderer,
    filepath: str,
    *,
    alpha: bool = True,
) -> None:
    """Save the rendered image as a PNG file.

    Args:
        renderer: The Renderer instance to save.
        filepath: Output file path (should end in .png).
        alpha: Write an opaque alpha channel (RGBA) if True, RGB otherwise.

    Example:
        >>> renderer = Renderer(1024, 768)
        >>> renderer.render(scene)
        >>> save_png(renderer, "out.png")
    """
    save_png_from_array(renderer.get_image_uint8(), filepath, alpha=alpha)


def gradient_test_pattern(width: int, height: int) -> npt.NDArray[np.uint8]:
    """Build the gradient test pattern.

    Red ramps from top to bottom, green from left to right, blue is zero:

        red   = 255 * j // height
        green = 255 * i // width

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        8-bit image array of shape (height, width, 3).

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions ({width}x{height}) must be positive")

    rows = (255 * np.arange(height)) // height
    cols = (255 * np.arange(width)) // width

    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = rows[:, np.newaxis]
    image[:, :, 1] = cols[np.newaxis, :]
    return image
