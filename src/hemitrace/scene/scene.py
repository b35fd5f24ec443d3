"""Scene container coordinating primitives and their materials.

The scene is an ordered, append-only list of (primitive, material) pairs.
Materials are held by reference, so one material object can be shared by any
number of primitives without copying.

Nearest-hit queries are a linear scan over every primitive in insertion
order, keeping the hit with the strictly smallest ``point_on_ray``; on equal
distances the primitive added first wins.

Example:
    >>> from hemitrace.core.vector import Vector
    >>> from hemitrace.materials.diffuse import DiffuseMaterial
    >>> scene = Scene()
    >>> red = DiffuseMaterial(color=Vector(1.0, 0.0, 0.0))
    >>> scene.add_sphere(center=(0.0, 0.0, 2.0), radius=1.0, material=red)
    0
    >>> len(scene)
    1
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from hemitrace.core.ray import Ray
from hemitrace.core.vector import UnitNormal, Vector, as_vector
from hemitrace.geometry.plane import Plane
from hemitrace.geometry.primitive import Hit, Primitive
from hemitrace.geometry.sphere import Sphere
from hemitrace.materials.material import Material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneObject:
    """A primitive bundled with the material shading it."""

    primitive: Primitive
    material: Material


class Scene:
    """An ordered collection of primitives with their materials."""

    def __init__(self) -> None:
        self._objects: list[SceneObject] = []

    def add(self, primitive: Primitive, material: Material) -> int:
        """Append a primitive with its material.

        Args:
            primitive: The shape to add.
            material: The material shading it (shared, not copied).

        Returns:
            The insertion index of the object.
        """
        self._objects.append(SceneObject(primitive, material))
        logger.debug("added %s with %s", primitive, material)
        return len(self._objects) - 1

    def add_sphere(
        self,
        center: Vector | tuple[float, float, float],
        radius: float,
        material: Material,
    ) -> int:
        """Add a sphere with its material.

        Raises:
            ValueError: If the radius is not positive.
        """
        return self.add(Sphere(center=as_vector(center), radius=radius), material)

    def add_plane(
        self,
        normal: UnitNormal | Vector | tuple[float, float, float],
        distance_to_origin: float,
        material: Material,
    ) -> int:
        """Add an infinite plane with its material.

        The normal is normalised here, so any non-zero direction is accepted.
        """
        if not isinstance(normal, UnitNormal):
            normal = as_vector(normal).normalized()
        return self.add(Plane(normal=normal, distance_to_origin=distance_to_origin), material)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)

    @property
    def materials(self) -> list[Material]:
        """Distinct materials (by identity) in order of first use."""
        seen: dict[int, Material] = {}
        for obj in self._objects:
            seen.setdefault(id(obj.material), obj.material)
        return list(seen.values())

    def nearest_hit(self, ray: Ray) -> tuple[Hit, Material] | None:
        """Find the closest intersection along a ray.

        Args:
            ray: The ray to trace.

        Returns:
            The nearest hit and the material of the primitive that produced
            it, or None if the ray misses everything.
        """
        nearest: tuple[Hit, Material] | None = None
        for obj in self._objects:
            hit = obj.primitive.intersect(ray)
            if hit is None:
                continue
            if nearest is None or hit.point_on_ray < nearest[0].point_on_ray:
                nearest = (hit, obj.material)
        return nearest
