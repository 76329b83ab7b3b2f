"""Scene container: an ordered list of spheres and a list of point lights.

The checkerboard floor is implicit and always present; it is not stored in
the Scene. The Scene is built up front and must not be modified while a
render is in progress.

Example:
    >>> from tinytracer.core.vector import Vector3
    >>> from tinytracer.materials import IVORY
    >>> from tinytracer.scene.scene import Scene
    >>> scene = Scene()
    >>> scene.add_sphere(Vector3(-3.0, 0.0, -16.0), 2.0, IVORY)
    0
    >>> scene.add_light(Vector3(-20.0, 20.0, 20.0), 1.5)
    0
    >>> scene.sphere_count, scene.light_count
    (1, 1)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tinytracer.core.vector import Vector3
from tinytracer.geometry.sphere import Sphere
from tinytracer.materials.material import Material


@dataclass(frozen=True)
class Light:
    """An isotropic point light.

    Attributes:
        position: Position of the light in world space.
        intensity: Non-negative scalar intensity.

    Raises:
        ValueError: If the intensity is negative.
    """

    position: Vector3
    intensity: float

    def __post_init__(self) -> None:
        if self.intensity < 0.0:
            raise ValueError(f"Light intensity = {self.intensity} is negative.")


@dataclass
class Scene:
    """Spheres and lights of a scene.

    Attributes:
        spheres: Spheres in insertion order. The order only affects
            iteration; the closest hit always wins.
        lights: Point lights.
    """

    spheres: list[Sphere] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)

    def add_sphere(self, center: Vector3, radius: float, material: Material) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere.
            radius: The radius of the sphere (must be positive).
            material: The material of the sphere.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If the radius is not positive.
        """
        self.spheres.append(Sphere(center=center, radius=radius, material=material))
        return len(self.spheres) - 1

    def add_light(self, position: Vector3, intensity: float) -> int:
        """Add a point light to the scene.

        Returns:
            The index of the added light.

        Raises:
            ValueError: If the intensity is negative.
        """
        self.lights.append(Light(position=position, intensity=intensity))
        return len(self.lights) - 1

    def clear(self) -> None:
        """Remove all spheres and lights."""
        self.spheres.clear()
        self.lights.clear()

    @property
    def sphere_count(self) -> int:
        return len(self.spheres)

    @property
    def light_count(self) -> int:
        return len(self.lights)
