"""Material interface shared by every surface type.

A material answers two questions for the integrator:

- ``sample``: what colour leaves this surface toward the incoming ray's
  origin, given the geometry at the hit? Diffuse surfaces estimate this by
  tracing new rays through the integrator.
- ``total_emission``: what does this surface contribute when another
  surface's sample ray lands on it? Callers pass white and get back the
  light this surface sends along the sample ray.

Materials hold fixed parameters only and are shared by reference between
every primitive that uses them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from hemitrace.core.vector import Vector

if TYPE_CHECKING:
    from hemitrace.core.integrator import Integrator
    from hemitrace.core.ray import Ray
    from hemitrace.geometry.primitive import Hit

# Colour passed to total_emission by samplers
WHITE = Vector(1.0, 1.0, 1.0)
BLACK = Vector(0.0, 0.0, 0.0)


class Material(ABC):
    """Base class for surface materials."""

    @abstractmethod
    def sample(self, hit: Hit, incoming: Ray, integrator: Integrator) -> Vector:
        """Estimate the colour leaving the surface toward ``incoming.origin``.

        Args:
            hit: The intersection being shaded.
            incoming: The ray that produced the hit.
            integrator: Entry point for any further rays, so that they see
                the same scene.

        Returns:
            The estimated RGB colour (unclamped).
        """

    @abstractmethod
    def total_emission(self, sampled_color: Vector) -> Vector:
        """Colour this surface sends along a sample ray that hit it."""
