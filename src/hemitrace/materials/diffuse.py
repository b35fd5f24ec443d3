"""Diffuse (Lambertian-style) coloured material.

The outgoing colour is estimated with one bounce of cosine-weighted
hemisphere sampling over the integrator's fixed sample grid:

    L = (1 / N) * sum_i  E(hit_i) * base_color * max(0, dir_i . normal)

where ``E(hit_i)`` is the ``total_emission(WHITE)`` of whatever material the
i-th sample ray strikes, and sample rays that escape the scene add nothing.
Only the first bounce is evaluated; struck surfaces are never sampled
recursively.

Example:
    >>> from hemitrace.core.vector import Vector
    >>> red = DiffuseMaterial(color=Vector(1.0, 0.0, 0.0))
    >>> red.total_emission(Vector(0.5, 0.5, 0.5))
    Vector(x=0.5, y=0.5, z=0.5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hemitrace.core.sampling import local_to_world, orthonormal_basis
from hemitrace.core.vector import Vector
from hemitrace.materials.material import BLACK, WHITE, Material

if TYPE_CHECKING:
    from hemitrace.core.integrator import Integrator
    from hemitrace.core.ray import Ray
    from hemitrace.geometry.primitive import Hit


@dataclass(frozen=True)
class DiffuseMaterial(Material):
    """A diffuse surface with a constant base colour.

    Attributes:
        color: The diffuse reflectance colour (RGB, each component in [0, 1]).

    Raises:
        ValueError: If any colour component is outside [0, 1].
    """

    color: Vector

    def __post_init__(self) -> None:
        for i, component in enumerate(self.color):
            if component < 0.0 or component > 1.0:
                raise ValueError(
                    f"Color component {i} = {component} is outside [0, 1]. "
                    "This would violate energy conservation."
                )

    def sample(self, hit: Hit, incoming: Ray, integrator: Integrator) -> Vector:
        tangent, bitangent = orthonormal_basis(hit.normal)

        total = BLACK
        for local in integrator.hemisphere_directions:
            direction = local_to_world(local, tangent, bitangent, hit.normal)
            found = integrator.trace(integrator.spawn_ray(hit, direction))
            if found is None:
                continue
            _, struck = found
            cosine = max(0.0, direction.dot(hit.normal))
            total = total + struck.total_emission(WHITE) * self.color * cosine

        return total / integrator.sample_count

    def total_emission(self, sampled_color: Vector) -> Vector:
        # No self-emission: the sampled colour passes through unchanged
        return sampled_color
