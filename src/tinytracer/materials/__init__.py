"""Materials module for surface shading properties.

Components:
    material: The Material record (color, specular exponent, refractive
        index, and the 4-component albedo weighting)
    presets: Named materials (ivory, glass, red rubber, mirror, matte)

Materials are plain immutable values. They carry no behavior of their own;
the recursive shader in tinytracer.core.shader applies the same formula to
every material:

    color = diffuse_color * diffuse * albedo[0]
          + white * specular * albedo[1]
          + reflected * albedo[2]
          + refracted * albedo[3]
"""

from .material import ALBEDO_COMPONENTS, Material
from .presets import GLASS, IVORY, MATTE, MIRROR, PRESETS, RED_RUBBER

__all__ = [
    "Material",
    "ALBEDO_COMPONENTS",
    # Presets
    "IVORY",
    "GLASS",
    "RED_RUBBER",
    "MIRROR",
    "MATTE",
    "PRESETS",
]
