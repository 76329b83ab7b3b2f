"""Recursive ray tracer for spheres over a checkerboard floor.

This package renders a fixed in-memory scene with Whitted-style recursive ray
tracing, with support for:
- Phong-style diffuse and specular lighting from point lights
- Hard shadows
- Mirror reflection and Snell's-law refraction
- A bounded procedural checkerboard floor

Subpackages:
    core: Vector algebra, geometric optics, the recursive shader and the renderer
    geometry: Sphere and checkerboard intersection
    materials: Material records and presets
    scene: Scene container, lights, and closest-hit intersection
    camera: Pinhole camera primary ray generation
    preview: Image export utilities
"""

__version__ = "0.1.0"
