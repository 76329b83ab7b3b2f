"""Immutable 3D vector used throughout the ray tracer.

Every operation returns a new Vector3; instances are never mutated. Colors
share the same representation (see the ``Color`` alias), with channels
normalized to [0, 1].

Degenerate math is tolerated rather than raised on: NaN and Inf propagate
through the arithmetic, and normalizing a zero-length vector yields the zero
vector.

Example:
    >>> from tinytracer.core.vector import Vector3
    >>> v = Vector3(3.0, 0.0, 4.0)
    >>> v.length()
    5.0
    >>> v.normalize()
    Vector3(x=0.6, y=0.0, z=0.8)
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """A 3-component real vector.

    Attributes:
        x: First component.
        y: Second component (vertical axis of the scene).
        z: Third component (the camera looks down -z).
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.scale(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def scale(self, scalar: float) -> Vector3:
        """Multiply every component by a scalar."""
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Compute the Euclidean norm."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        Returns:
            The normalized vector, or the zero vector if this vector has zero
            length. This happens for refraction directions under total
            internal reflection.
        """
        norm = self.length()
        if norm == 0.0:
            return ZERO
        return Vector3(self.x / norm, self.y / norm, self.z / norm)

    def max_component(self) -> float:
        """Return the largest of the three components."""
        return max(self.x, self.y, self.z)

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the components as a plain tuple."""
        return (self.x, self.y, self.z)


# Colors use the same value type, channels normalized to [0, 1]
Color = Vector3

ZERO = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
