"""Material record shared by every surface in the scene.

A Material bundles a flat diffuse color, a Phong specular exponent, a
refractive index, and a 4-component albedo that weights the diffuse,
specular, reflected and refracted contributions of the recursive shader.

The albedo weights are artistic controls rather than physical reflectances:
they are not required to sum to 1, and a mirror may weight its highlight
far above 1.

Example:
    >>> from tinytracer.materials.material import Material
    >>> rubber = Material(
    ...     diffuse_color=(0.3, 0.1, 0.1),
    ...     albedo=(0.9, 0.1, 0.0, 0.0),
    ...     specular_exponent=10.0,
    ... )
    >>> rubber.diffuse_weight
    0.9
"""

from __future__ import annotations

from dataclasses import dataclass

from tinytracer.core.vector import Color, Vector3

# Number of albedo weights: diffuse, specular, reflection, refraction
ALBEDO_COMPONENTS = 4


@dataclass(frozen=True)
class Material:
    """Surface material properties.

    Attributes:
        diffuse_color: Base RGB color, each channel in [0, 1].
        albedo: Weights for (diffuse, specular, reflection, refraction).
        specular_exponent: Phong exponent controlling highlight sharpness (>= 0).
        refractive_index: Index of refraction (> 0). 1.0 means no bending.

    Raises:
        ValueError: If the albedo does not have exactly 4 components, the color
            does not have 3 channels, the specular exponent is negative, or
            the refractive index is not positive.
    """

    diffuse_color: tuple[float, float, float]
    albedo: tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.0)
    specular_exponent: float = 0.0
    refractive_index: float = 1.0

    def __post_init__(self) -> None:
        if len(self.albedo) != ALBEDO_COMPONENTS:
            raise ValueError(
                f"Albedo must have {ALBEDO_COMPONENTS} components "
                f"(diffuse, specular, reflection, refraction), got {len(self.albedo)}"
            )
        if len(self.diffuse_color) != 3:
            raise ValueError(
                f"Diffuse color must have 3 channels, got {len(self.diffuse_color)}"
            )
        if self.specular_exponent < 0.0:
            raise ValueError(f"Specular exponent = {self.specular_exponent} is negative.")
        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Refractive index = {self.refractive_index} must be positive."
            )
        object.__setattr__(self, "albedo", tuple(float(a) for a in self.albedo))
        object.__setattr__(
            self, "diffuse_color", tuple(float(c) for c in self.diffuse_color)
        )

    @property
    def color(self) -> Color:
        """The diffuse color as a Vector3."""
        return Vector3(*self.diffuse_color)

    @property
    def diffuse_weight(self) -> float:
        return self.albedo[0]

    @property
    def specular_weight(self) -> float:
        return self.albedo[1]

    @property
    def reflection_weight(self) -> float:
        return self.albedo[2]

    @property
    def refraction_weight(self) -> float:
        return self.albedo[3]

    def with_color(self, diffuse_color: tuple[float, float, float]) -> Material:
        """Return a copy of this material with a different diffuse color."""
        return Material(
            diffuse_color=diffuse_color,
            albedo=self.albedo,
            specular_exponent=self.specular_exponent,
            refractive_index=self.refractive_index,
        )
