"""Named material presets used by the demo scene.

Albedo order is (diffuse, specular, reflection, refraction).
"""

from tinytracer.materials.material import Material

IVORY = Material(
    diffuse_color=(0.4, 0.4, 0.3),
    albedo=(0.6, 0.3, 0.1, 0.0),
    specular_exponent=50.0,
    refractive_index=1.0,
)

GLASS = Material(
    diffuse_color=(0.6, 0.7, 0.8),
    albedo=(0.0, 0.5, 0.1, 0.8),
    specular_exponent=125.0,
    refractive_index=1.5,
)

RED_RUBBER = Material(
    diffuse_color=(0.3, 0.1, 0.1),
    albedo=(0.9, 0.1, 0.0, 0.0),
    specular_exponent=10.0,
    refractive_index=1.0,
)

# Near-perfect mirror with a very hot highlight
MIRROR = Material(
    diffuse_color=(1.0, 1.0, 1.0),
    albedo=(0.0, 10.0, 0.8, 0.0),
    specular_exponent=1425.0,
    refractive_index=1.0,
)

# Plain diffuse-only material
MATTE = Material(
    diffuse_color=(1.0, 1.0, 1.0),
    albedo=(1.0, 0.0, 0.0, 0.0),
    specular_exponent=0.0,
    refractive_index=1.0,
)

PRESETS: dict[str, Material] = {
    "ivory": IVORY,
    "glass": GLASS,
    "red_rubber": RED_RUBBER,
    "mirror": MIRROR,
    "matte": MATTE,
}
