"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (nearest root)
- Ray missing sphere
- Ray starting inside sphere (far root promoted)
- Sphere entirely behind the ray origin
- Ray tangent to sphere
- Outward normal computation
- Radius validation
"""

import pytest

from tinytracer.core.ray import Ray
from tinytracer.core.vector import Vector3
from tinytracer.geometry.sphere import Sphere, hit_sphere, sphere_normal
from tinytracer.materials import IVORY


def make_unit_sphere(center=Vector3(0.0, 0.0, 0.0)):
    return Sphere(center=center, radius=1.0, material=IVORY)


class TestSphereBasics:
    """Tests for the Sphere dataclass."""

    def test_fields(self):
        sphere = Sphere(center=Vector3(1.0, 2.0, 3.0), radius=0.5, material=IVORY)
        assert sphere.center == Vector3(1.0, 2.0, 3.0)
        assert sphere.radius == 0.5
        assert sphere.material is IVORY

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_non_positive_radius_rejected(self, radius):
        with pytest.raises(ValueError, match="positive"):
            Sphere(center=Vector3(0.0, 0.0, 0.0), radius=radius, material=IVORY)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_hit_sphere_direct_hit(self):
        """Test ray hitting sphere head-on from outside."""
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        t = hit_sphere(ray, make_unit_sphere())
        # Should hit at z=1 (front of sphere), so t=4
        assert t == pytest.approx(4.0)

    def test_hit_sphere_miss(self):
        """Test ray missing sphere entirely."""
        ray = Ray(Vector3(5.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert hit_sphere(ray, make_unit_sphere()) is None

    def test_hit_sphere_inside(self):
        """Test ray starting inside sphere reports the far root."""
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        assert hit_sphere(ray, make_unit_sphere()) == pytest.approx(1.0)

    def test_hit_sphere_behind_origin(self):
        """Test that a sphere entirely behind the origin is a miss."""
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 1.0))
        assert hit_sphere(ray, make_unit_sphere()) is None

    def test_hit_sphere_tangent(self):
        """Test ray tangent to sphere (grazing hit)."""
        ray = Ray(Vector3(1.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))
        assert hit_sphere(ray, make_unit_sphere()) == pytest.approx(5.0)

    def test_hit_sphere_just_outside_tangent(self):
        ray = Ray(Vector3(1.0001, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))
        assert hit_sphere(ray, make_unit_sphere()) is None

    def test_hit_sphere_off_axis(self):
        """Test an off-center hit: x=0.6 reaches the surface at z=0.8."""
        ray = Ray(Vector3(0.6, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert hit_sphere(ray, make_unit_sphere()) == pytest.approx(4.2)

    def test_nearest_root_chosen(self):
        """Test that the returned distance is the nearer of the two roots."""
        sphere = Sphere(center=Vector3(0.0, 0.0, -10.0), radius=2.0, material=IVORY)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert hit_sphere(ray, sphere) == pytest.approx(8.0)


class TestSphereNormal:
    """Tests for the outward normal."""

    def test_normal_points_outward(self):
        sphere = Sphere(center=Vector3(0.0, 0.0, -5.0), radius=2.0, material=IVORY)
        normal = sphere_normal(sphere, Vector3(0.0, 0.0, -3.0))
        assert normal == Vector3(0.0, 0.0, 1.0)

    def test_normal_is_unit_length(self):
        sphere = Sphere(center=Vector3(1.0, 1.0, 1.0), radius=3.0, material=IVORY)
        normal = sphere_normal(sphere, Vector3(1.0, 1.0, 1.0) + Vector3(1.0, 2.0, 2.0))
        assert normal.length() == pytest.approx(1.0)
