"""Scene module for scene contents and ray-scene queries.

Components:
    scene: Scene container holding spheres and point lights
    intersection: Closest-hit query over all spheres and the checkerboard
    default_scene: Factory for the demo scene and its camera

The scene module manages:
    - Ordered sphere storage (iteration order only, closest hit wins)
    - Point light enumeration for direct lighting
    - Hit records carrying the point, normal and material of a hit

Note: default_scene is NOT imported here. It builds a PinholeCamera, which
pulls in Taichi; the shader only needs scene and intersection. Use:
    from tinytracer.scene.default_scene import create_default_scene
"""

from .intersection import MAX_TRACE_DISTANCE, HitRecord, intersect_scene
from .scene import Light, Scene

__all__ = [
    # Scene contents
    "Scene",
    "Light",
    # Intersection
    "HitRecord",
    "intersect_scene",
    "MAX_TRACE_DISTANCE",
]
