"""Preview module for rendering output.

Components:
    export: 8-bit conversion, PNG export and the gradient test pattern

Features:
    - Truncating float-to-8-bit conversion (channels in [0, 1])
    - PNG export with an opaque alpha channel (or plain RGB)
    - Gradient test pattern for checking the output path

Example:
    >>> from tinytracer.preview import save_png
    >>> from tinytracer.core.renderer import Renderer
    >>>
    >>> renderer = Renderer(1024, 768)
    >>> renderer.render(scene)
    >>> save_png(renderer, "out.png")
"""

from tinytracer.preview.export import (
    gradient_test_pattern,
    image_to_rgba,
    image_to_uint8,
    save_png,
    save_png_from_array,
)

__all__ = [
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
    "image_to_rgba",
    "gradient_test_pattern",
]
