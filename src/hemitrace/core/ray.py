"""Ray data structure.

A ray is an origin point plus a unit direction. Directions are carried as
``UnitNormal`` so that every ray in the renderer is known to be normalised,
which the intersection routines rely on (``tca = l . dir`` is only a distance
when ``dir`` has unit length).

Example:
    >>> from hemitrace.core.vector import Vector
    >>> ray = Ray(origin=Vector(0.0, 0.0, 0.0), direction=Vector(0.0, 0.0, 2.0).normalized())
    >>> ray.walk(5.0)  # Point 5 units along the ray
    Vector(x=0.0, y=0.0, z=5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from hemitrace.core.vector import UnitNormal, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and unit direction.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Must be a ``UnitNormal``;
            normalise a ``Vector`` before building a ray from it.
    """

    origin: Vector
    direction: UnitNormal

    def __post_init__(self) -> None:
        if not isinstance(self.direction, UnitNormal):
            raise TypeError(
                f"Ray direction must be a UnitNormal, got {type(self.direction).__name__}"
            )

    def walk(self, t: float) -> Vector:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def distance_to(self, point: Vector) -> float:
        """Perpendicular distance from a point to the infinite line of this ray.

        Uses |direction x (point - origin)|, which equals the distance because
        the direction has unit length. Points behind the origin are measured
        against the backward extension of the line.
        """
        return self.direction.cross(point - self.origin).length()
