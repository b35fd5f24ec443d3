"""Hit record and the primitive intersection contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from hemitrace.core.ray import Ray
from hemitrace.core.vector import UnitNormal, Vector


@dataclass(frozen=True)
class Hit:
    """Record of a ray-primitive intersection.

    Attributes:
        hitpoint: The 3D point where the ray struck the primitive.
        normal: The unit surface normal at the hit point.
        point_on_ray: The parameter t along the ray (non-negative).
        inside: Whether the ray started inside the primitive. Renderers skip
            shading hits flagged inside.
    """

    hitpoint: Vector
    normal: UnitNormal
    point_on_ray: float
    inside: bool = False


class Primitive(ABC):
    """A ray-intersectable shape. Primitives are immutable."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Hit | None:
        """Return the nearest hit in front of the ray origin, or None on a miss."""
