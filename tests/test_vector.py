"""Unit tests for the Vector3 value type.

Tests cover:
- Arithmetic (add, subtract, scale, negate)
- Dot product and length
- Normalization, including the zero vector
- Immutability
- Tolerance of NaN and Inf
"""

import dataclasses
import math

import pytest

from tinytracer.core.vector import UP, WHITE, ZERO, Vector3


class TestVectorArithmetic:
    """Tests for component-wise arithmetic."""

    def test_add(self):
        result = Vector3(1.0, 2.0, 3.0) + Vector3(4.0, 5.0, 6.0)
        assert result == Vector3(5.0, 7.0, 9.0)

    def test_sub(self):
        result = Vector3(4.0, 5.0, 6.0) - Vector3(1.0, 2.0, 3.0)
        assert result == Vector3(3.0, 3.0, 3.0)

    def test_scale_both_sides(self):
        """Test that v * s, s * v and v.scale(s) agree."""
        v = Vector3(1.0, -2.0, 3.0)
        assert v * 2.0 == Vector3(2.0, -4.0, 6.0)
        assert 2.0 * v == Vector3(2.0, -4.0, 6.0)
        assert v.scale(2.0) == Vector3(2.0, -4.0, 6.0)

    def test_negate(self):
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)

    def test_operations_return_new_instances(self):
        """Test that arithmetic never modifies its operands."""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(1.0, 1.0, 1.0)
        _ = a + b
        _ = a * 3.0
        assert a == Vector3(1.0, 2.0, 3.0)
        assert b == Vector3(1.0, 1.0, 1.0)

    def test_immutable(self):
        """Test that components cannot be reassigned."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0


class TestVectorProducts:
    """Tests for dot product, length and normalization."""

    def test_dot(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == 12.0

    def test_dot_orthogonal(self):
        assert Vector3(1.0, 0.0, 0.0).dot(Vector3(0.0, 1.0, 0.0)) == 0.0

    def test_length(self):
        assert Vector3(3.0, 0.0, 4.0).length() == 5.0

    def test_normalize_unit_length(self):
        n = Vector3(1.0, 2.0, -2.0).normalize()
        assert abs(n.length() - 1.0) < 1e-12
        assert abs(n.x - 1.0 / 3.0) < 1e-12
        assert abs(n.y - 2.0 / 3.0) < 1e-12
        assert abs(n.z + 2.0 / 3.0) < 1e-12

    def test_normalize_zero_vector_is_zero(self):
        """Test that normalizing the zero vector returns zero instead of raising."""
        assert ZERO.normalize() == ZERO

    def test_max_component(self):
        assert Vector3(0.2, 0.9, 0.5).max_component() == 0.9

    def test_to_tuple_and_iter(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert v.to_tuple() == (1.0, 2.0, 3.0)
        x, y, z = v
        assert (x, y, z) == (1.0, 2.0, 3.0)


class TestVectorDegenerate:
    """Tests for NaN and Inf tolerance."""

    def test_nan_propagates_without_raising(self):
        v = Vector3(math.nan, 0.0, 0.0)
        assert math.isnan((v + UP).x)
        assert math.isnan(v.length())

    def test_infinite_vector_normalize_does_not_raise(self):
        n = Vector3(math.inf, 0.0, 0.0).normalize()
        assert math.isnan(n.x)


class TestConstants:
    def test_constants(self):
        assert ZERO == Vector3(0.0, 0.0, 0.0)
        assert UP == Vector3(0.0, 1.0, 0.0)
        assert WHITE == Vector3(1.0, 1.0, 1.0)
