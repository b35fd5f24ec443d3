"""Infinite plane primitive.

A plane is stored as a unit normal and a signed distance from the origin, so
the point ``normal * distance_to_origin`` lies on it. The ray-plane test is
the parametric one used for quads, without the bounds check:

    denom = normal . dir
    t     = (plane_center - origin) . normal / denom

Rays within ``PARALLEL_EPSILON`` of parallel never hit.
"""

from __future__ import annotations

from dataclasses import dataclass

from hemitrace.core.ray import Ray
from hemitrace.core.vector import UnitNormal
from hemitrace.geometry.primitive import Hit, Primitive

# |normal . dir| at or below this counts as parallel
PARALLEL_EPSILON = 1e-4


@dataclass(frozen=True)
class Plane(Primitive):
    """An infinite plane.

    Attributes:
        normal: The plane's unit normal. Hits always report this normal,
            whichever side the ray arrives from.
        distance_to_origin: Signed distance from the world origin along
            the normal.
    """

    normal: UnitNormal
    distance_to_origin: float

    def intersect(self, ray: Ray) -> Hit | None:
        denom = self.normal.dot(ray.direction)
        if abs(denom) <= PARALLEL_EPSILON:
            return None

        plane_center = self.normal * self.distance_to_origin
        t = (plane_center - ray.origin).dot(self.normal) / denom
        if t <= 0.0:
            return None

        return Hit(
            hitpoint=ray.walk(t),
            normal=self.normal,
            point_on_ray=t,
            inside=False,
        )
