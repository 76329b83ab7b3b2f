#!/usr/bin/env python3
"""Render the demo scene.

This script renders the demo scene (four spheres over a checkerboard floor,
three point lights) with the recursive ray tracer and saves it as a PNG.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 1024)
    --height HEIGHT     Image height in pixels (default: 768)
    --fov DEGREES       Vertical field of view in degrees (default: 60)
    --output OUTPUT     Output file path (default: out.png)
    --batch-size ROWS   Rows per progress update (default: 16)
    --test-pattern      Write the gradient test pattern instead of rendering
    --no-alpha          Write an RGB PNG instead of RGBA
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 320 --height 240
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=1024,
        help="Image width in pixels (default: 1024)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=768,
        help="Image height in pixels (default: 768)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Vertical field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="out.png",
        help="Output file path (default: out.png)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=16,
        help="Rows per progress update (default: 16)",
    )
    parser.add_argument(
        "--test-pattern",
        action="store_true",
        help="Write the gradient test pattern instead of rendering",
    )
    parser.add_argument(
        "--no-alpha",
        action="store_true",
        help="Write an RGB PNG instead of RGBA",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def write_test_pattern(
    width: int = 1024,
    height: int = 768,
    output_path: str = "out.png",
    alpha: bool = True,
    quiet: bool = False,
) -> Path:
    """Write the gradient test pattern to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (PNG).
        alpha: Write an opaque alpha channel.
        quiet: If True, suppress output.

    Returns:
        Path to the saved image file.
    """
    from tinytracer.preview.export import gradient_test_pattern, save_png_from_array

    output_file = Path(output_path)
    save_png_from_array(gradient_test_pattern(width, height), str(output_file), alpha=alpha)
    if not quiet:
        print(f"Saved test pattern to: {output_file.absolute()}")
    return output_file


def render_scene(
    width: int = 1024,
    height: int = 768,
    fov_degrees: float = 60.0,
    output_path: str = "out.png",
    batch_size: int = 16,
    alpha: bool = True,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Vertical field of view in degrees.
        output_path: Output file path (PNG).
        batch_size: Number of rows to render between progress updates.
        alpha: Write an opaque alpha channel.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from tinytracer.camera.pinhole import setup_camera
    from tinytracer.core.renderer import Renderer
    from tinytracer.scene.default_scene import DefaultSceneParams, create_default_scene

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")

    params = DefaultSceneParams(width=width, height=height, fov=math.radians(fov_degrees))
    scene, camera = create_default_scene(params)
    setup_camera(camera)

    renderer = Renderer(width, height)

    if not quiet:
        print(f"Tracing {scene.sphere_count} spheres, {scene.light_count} lights...")

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (done / total) * 100 if total > 0 else 0
            rows_per_sec = done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {done}/{total} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    renderer.render(scene, batch_size=batch_size, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    renderer.save_image(str(output_file), alpha=alpha)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        if args.test_pattern:
            write_test_pattern(
                width=args.width,
                height=args.height,
                output_path=args.output,
                alpha=not args.no_alpha,
                quiet=args.quiet,
            )
            return 0

        # Camera rays are generated by a Taichi kernel; the CPU backend is enough
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

        render_scene(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            batch_size=args.batch_size,
            alpha=not args.no_alpha,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
