"""Geometry module for shape primitives.

Components:
    primitive: Hit record and the Primitive base class
    sphere: Sphere primitive with geometric ray-sphere intersection
    plane: Infinite plane primitive

Every primitive maps a ray to an optional hit:
    hit = primitive.intersect(ray)  # Hit or None
"""

from .plane import PARALLEL_EPSILON, Plane
from .primitive import Hit, Primitive
from .sphere import Sphere

__all__ = [
    "Hit",
    "Primitive",
    "Sphere",
    "Plane",
    "PARALLEL_EPSILON",
]
