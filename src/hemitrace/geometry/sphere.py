"""Sphere primitive with geometric ray-sphere intersection.

The intersection uses the geometric (closest-approach) formulation rather
than solving the quadratic directly:

    l   = center - ray.origin
    tca = l . dir              (distance along the ray to the closest approach)
    d2  = l . l - tca^2        (squared distance from center to the ray line)
    thc = sqrt(radius^2 - d2)  (half chord length)
    t   = tca -/+ thc

The branch order below is part of the renderer's behaviour: rays whose
closest approach lies behind the origin are rejected before the miss test,
so a ray starting inside a sphere and pointing away from its center reports
no hit.

Example:
    >>> from hemitrace.core.ray import Ray
    >>> from hemitrace.core.vector import Vector
    >>> sphere = Sphere(center=Vector(0.0, 0.0, 5.0), radius=1.0)
    >>> ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0).normalized())
    >>> sphere.intersect(ray).point_on_ray
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hemitrace.core.ray import Ray
from hemitrace.core.vector import Vector
from hemitrace.geometry.primitive import Hit, Primitive


@dataclass(frozen=True)
class Sphere(Primitive):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).

    Raises:
        ValueError: If the radius is not positive.
    """

    center: Vector
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def intersect(self, ray: Ray) -> Hit | None:
        """Test for ray-sphere intersection.

        Args:
            ray: The ray to test (unit direction).

        Returns:
            A Hit at the nearest non-negative root, or None when the sphere
            center is behind the ray, the ray misses, or both roots are
            behind the origin. The hit normal points outward from the
            center. ``inside`` is always False, including when the far root
            is used because the origin lies inside the sphere.
        """
        l = self.center - ray.origin
        tca = l.dot(ray.direction)
        if tca < 0.0:
            return None

        d2 = l.dot(l) - tca * tca
        radius2 = self.radius * self.radius
        if d2 > radius2:
            return None

        thc = math.sqrt(radius2 - d2)
        t0 = tca - thc
        t1 = tca + thc
        if t0 > t1:
            t0, t1 = t1, t0

        # Origin inside the sphere: fall back to the far root
        if t0 < 0.0:
            t0 = t1
            if t0 < 0.0:
                return None

        hitpoint = ray.walk(t0)
        return Hit(
            hitpoint=hitpoint,
            normal=(hitpoint - self.center).normalized(),
            point_on_ray=t0,
            inside=False,
        )
