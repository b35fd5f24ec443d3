"""Vector and unit-normal value types for CPU-side ray tracing.

Two distinct types carry 3D triples through the renderer:

- ``Vector``: an unconstrained triple used for points, displacements,
  unscaled directions and RGB colours.
- ``UnitNormal``: a triple of known unit length (surface normals and ray
  directions). It is produced by normalising a ``Vector`` and validates its
  length on construction. Any operation that can change the length (scaling,
  adding, component-wise products) returns a plain ``Vector``.

Dot and cross products accept any object exposing ``x``, ``y`` and ``z``, so
vectors and normals combine freely.

Example:
    >>> from hemitrace.core.vector import Vector
    >>> v = Vector(0.0, 3.0, 4.0)
    >>> v.length()
    5.0
    >>> n = v.normalized()  # UnitNormal(x=0.0, y=0.6, z=0.8)
    >>> n * 2.0  # scaling a normal yields a Vector
    Vector(x=0.0, y=1.2, z=1.6)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

# Maximum deviation of a UnitNormal's squared length from 1.0
UNIT_LENGTH_TOLERANCE = 1e-3

# Vectors shorter than this cannot be normalised
ZERO_LENGTH_EPSILON = 1e-8


class Triple(Protocol):
    """Anything with x, y and z components."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...


def dot(a: Triple, b: Triple) -> float:
    """Compute the dot product of two triples."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Triple, b: Triple) -> Vector:
    """Compute the cross product a x b.

    The result is always a ``Vector``: the cross product of two unit normals
    is only unit length when they are perpendicular.
    """
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vector:
    """A 3D vector, point or RGB colour.

    Attributes:
        x: First component (red channel when used as a colour).
        y: Second component (green channel).
        z: Third component (blue channel).
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Triple) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Triple) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other: float | Triple) -> Vector:
        if _is_scalar(other):
            return Vector(self.x * other, self.y * other, self.z * other)
        if isinstance(other, (Vector, UnitNormal)):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if _is_scalar(other):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: float | Vector) -> Vector:
        if _is_scalar(other):
            return Vector(self.x / other, self.y / other, self.z / other)
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Triple) -> float:
        return dot(self, other)

    def cross(self, other: Triple) -> Vector:
        return cross(self, other)

    def length_squared(self) -> float:
        return dot(self, self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> UnitNormal:
        """Return the unit normal pointing the same way as this vector.

        Raises:
            ValueError: If the vector has (near-)zero length. Normalising a
                zero vector is a geometry bug upstream and is never recovered.
        """
        length = self.length()
        if length <= ZERO_LENGTH_EPSILON:
            raise ValueError(f"Cannot normalize near-zero vector {self!r}")
        return UnitNormal(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class UnitNormal:
    """A direction of unit length.

    Construct one with ``Vector.normalized()`` (or ``UnitNormal.from_vector``).
    Direct construction is validated: the squared length must lie within
    ``UNIT_LENGTH_TOLERANCE`` of 1.0.

    Raises:
        ValueError: If the components are not unit length.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        length_squared = self.x * self.x + self.y * self.y + self.z * self.z
        if abs(length_squared - 1.0) > UNIT_LENGTH_TOLERANCE:
            raise ValueError(
                f"UnitNormal components ({self.x}, {self.y}, {self.z}) have "
                f"squared length {length_squared}, expected 1.0"
            )

    @classmethod
    def from_vector(cls, vector: Vector) -> UnitNormal:
        return vector.normalized()

    def __neg__(self) -> UnitNormal:
        return UnitNormal(-self.x, -self.y, -self.z)

    def __add__(self, other: Triple) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Triple) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: float | Triple) -> Vector:
        if _is_scalar(other):
            return Vector(self.x * other, self.y * other, self.z * other)
        if isinstance(other, (Vector, UnitNormal)):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if _is_scalar(other):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: float) -> Vector:
        if _is_scalar(other):
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Triple) -> float:
        return dot(self, other)

    def cross(self, other: Triple) -> Vector:
        return cross(self, other)

    def length_squared(self) -> float:
        return dot(self, self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y, self.z)


def as_vector(value: Vector | UnitNormal | tuple[float, float, float]) -> Vector:
    """Coerce a Vector, UnitNormal or (x, y, z) tuple into a Vector."""
    if isinstance(value, Vector):
        return value
    if isinstance(value, UnitNormal):
        return value.to_vector()
    x, y, z = value
    return Vector(float(x), float(y), float(z))
