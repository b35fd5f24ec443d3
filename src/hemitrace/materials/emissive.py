"""Emissive material for light sources.

An emissive surface glows white scaled by its emissiveness. It ignores the
hit geometry: seen directly it returns its emission, and struck by another
surface's sample ray it scales the colour passed in (white, by convention)
by its emissiveness.

Example:
    >>> from hemitrace.core.vector import Vector
    >>> light = EmissiveMaterial(emissiveness=100.0)
    >>> light.total_emission(Vector(1.0, 1.0, 1.0))
    Vector(x=100.0, y=100.0, z=100.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hemitrace.core.vector import Vector
from hemitrace.materials.material import WHITE, Material

if TYPE_CHECKING:
    from hemitrace.core.integrator import Integrator
    from hemitrace.core.ray import Ray
    from hemitrace.geometry.primitive import Hit


@dataclass(frozen=True)
class EmissiveMaterial(Material):
    """A light-emitting surface.

    Attributes:
        emissiveness: The emission strength multiplier (non-negative). Values
            above 1.0 saturate when seen directly but brighten the diffuse
            surfaces they light.

    Raises:
        ValueError: If emissiveness is negative.
    """

    emissiveness: float

    def __post_init__(self) -> None:
        if self.emissiveness < 0.0:
            raise ValueError(f"Emissiveness must be non-negative, got {self.emissiveness}")

    def sample(self, hit: Hit, incoming: Ray, integrator: Integrator) -> Vector:
        return self.total_emission(WHITE)

    def total_emission(self, sampled_color: Vector) -> Vector:
        return sampled_color * self.emissiveness
