"""Integrator coordinating ray-scene queries during shading.

The integrator is the single entry point every material uses to trace
further rays, so that recursive rays see the same scene as primary rays. It
also owns the estimator's sampling configuration: the fixed grid of
cosine-weighted hemisphere directions (``samples_per_axis`` squared of them)
that diffuse materials integrate over. The directions are computed once and
reused for every shaded point.

Example:
    >>> from hemitrace.scene.scene import Scene
    >>> integrator = Integrator(Scene(), samples_per_axis=11)
    >>> integrator.sample_count
    121
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hemitrace.core.ray import Ray
from hemitrace.core.sampling import hemisphere_directions
from hemitrace.core.vector import UnitNormal

if TYPE_CHECKING:
    from hemitrace.geometry.primitive import Hit
    from hemitrace.materials.material import Material
    from hemitrace.scene.scene import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Grid resolution per axis for hemisphere sampling (51 x 51 = 2601 samples)
DEFAULT_SAMPLES_PER_AXIS = 51

# Ray offset along the surface normal to avoid self-intersection
SURFACE_EPSILON = 1e-3


class Integrator:
    """Traces rays against a scene on behalf of materials.

    Attributes:
        scene: The scene all rays are traced against.
        samples_per_axis: Hemisphere grid resolution along each axis.
    """

    def __init__(self, scene: Scene, samples_per_axis: int = DEFAULT_SAMPLES_PER_AXIS) -> None:
        """Initialize the integrator.

        Args:
            scene: The scene to trace against.
            samples_per_axis: Number of grid values per axis; the diffuse
                estimate averages ``samples_per_axis ** 2`` directions.

        Raises:
            ValueError: If samples_per_axis is less than 2.
        """
        if samples_per_axis < 2:
            raise ValueError(f"samples_per_axis must be at least 2, got {samples_per_axis}")
        self._scene = scene
        self._samples_per_axis = samples_per_axis
        self._directions = hemisphere_directions(samples_per_axis)

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def samples_per_axis(self) -> int:
        return self._samples_per_axis

    @property
    def sample_count(self) -> int:
        """Number of hemisphere directions per diffuse estimate."""
        return len(self._directions)

    @property
    def hemisphere_directions(self) -> tuple[UnitNormal, ...]:
        """Cosine-weighted directions in the local frame (z is the normal)."""
        return self._directions

    def trace(self, ray: Ray) -> tuple[Hit, Material] | None:
        """Find the nearest hit and its material, or None if the ray escapes."""
        return self._scene.nearest_hit(ray)

    def spawn_ray(self, hit: Hit, direction: UnitNormal) -> Ray:
        """Build a secondary ray leaving a hit point.

        The origin is pushed ``SURFACE_EPSILON`` along the surface normal so
        the new ray does not immediately re-hit the surface it left.
        """
        return Ray(origin=hit.hitpoint + hit.normal * SURFACE_EPSILON, direction=direction)

    def __repr__(self) -> str:
        return (
            f"Integrator(primitives={len(self._scene)}, "
            f"samples_per_axis={self._samples_per_axis})"
        )
