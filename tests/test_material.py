"""Unit tests for materials and the named presets."""

import dataclasses

import pytest

from tinytracer.core.vector import Vector3
from tinytracer.materials import GLASS, IVORY, MATTE, MIRROR, PRESETS, RED_RUBBER, Material


class TestMaterialValidation:
    """Tests for Material construction checks."""

    def test_defaults(self):
        material = Material(diffuse_color=(0.5, 0.5, 0.5))
        assert material.albedo == (1.0, 0.0, 0.0, 0.0)
        assert material.specular_exponent == 0.0
        assert material.refractive_index == 1.0

    @pytest.mark.parametrize("albedo", [(1.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0, 0.0)])
    def test_albedo_must_have_four_components(self, albedo):
        with pytest.raises(ValueError, match="4 components"):
            Material(diffuse_color=(1.0, 1.0, 1.0), albedo=albedo)

    def test_color_must_have_three_channels(self):
        with pytest.raises(ValueError, match="3 channels"):
            Material(diffuse_color=(1.0, 1.0))

    def test_negative_specular_exponent_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Material(diffuse_color=(1.0, 1.0, 1.0), specular_exponent=-1.0)

    @pytest.mark.parametrize("index", [0.0, -1.5])
    def test_non_positive_refractive_index_rejected(self, index):
        with pytest.raises(ValueError, match="must be positive"):
            Material(diffuse_color=(1.0, 1.0, 1.0), refractive_index=index)

    def test_albedo_above_one_allowed(self):
        """Test that albedo weights are not capped at 1."""
        material = Material(diffuse_color=(1.0, 1.0, 1.0), albedo=(0.0, 10.0, 0.8, 0.0))
        assert material.specular_weight == 10.0

    def test_lists_are_coerced_to_tuples(self):
        material = Material(diffuse_color=[1, 0, 0], albedo=[1, 0, 0, 0])
        assert material.diffuse_color == (1.0, 0.0, 0.0)
        assert material.albedo == (1.0, 0.0, 0.0, 0.0)

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            IVORY.specular_exponent = 1.0


class TestMaterialAccessors:
    def test_weights(self):
        material = Material(diffuse_color=(1.0, 1.0, 1.0), albedo=(0.1, 0.2, 0.3, 0.4))
        assert material.diffuse_weight == 0.1
        assert material.specular_weight == 0.2
        assert material.reflection_weight == 0.3
        assert material.refraction_weight == 0.4

    def test_color_is_vector(self):
        assert RED_RUBBER.color == Vector3(0.3, 0.1, 0.1)

    def test_with_color_keeps_other_fields(self):
        recolored = GLASS.with_color((0.1, 0.2, 0.3))
        assert recolored.diffuse_color == (0.1, 0.2, 0.3)
        assert recolored.albedo == GLASS.albedo
        assert recolored.specular_exponent == GLASS.specular_exponent
        assert recolored.refractive_index == GLASS.refractive_index
        assert GLASS.diffuse_color == (0.6, 0.7, 0.8)


class TestPresets:
    """Tests for the demo scene materials."""

    def test_ivory(self):
        assert IVORY.diffuse_color == (0.4, 0.4, 0.3)
        assert IVORY.albedo == (0.6, 0.3, 0.1, 0.0)
        assert IVORY.specular_exponent == 50.0

    def test_glass(self):
        assert GLASS.albedo == (0.0, 0.5, 0.1, 0.8)
        assert GLASS.specular_exponent == 125.0
        assert GLASS.refractive_index == 1.5

    def test_red_rubber(self):
        assert RED_RUBBER.albedo == (0.9, 0.1, 0.0, 0.0)
        assert RED_RUBBER.specular_exponent == 10.0

    def test_mirror(self):
        assert MIRROR.albedo == (0.0, 10.0, 0.8, 0.0)
        assert MIRROR.specular_exponent == 1425.0

    def test_only_glass_refracts(self):
        refracting = [name for name, m in PRESETS.items() if m.refraction_weight > 0.0]
        assert refracting == ["glass"]

    def test_registry(self):
        assert set(PRESETS) == {"ivory", "glass", "red_rubber", "mirror", "matte"}
        assert PRESETS["matte"] is MATTE
