"""Deterministic hemisphere sampling for the diffuse estimator.

The diffuse material integrates incoming light over a fixed, structured grid
of (u, v) pairs rather than random numbers, so a render is fully
reproducible. Each pair goes through Shirley's concentric square-to-disc
mapping and is lifted onto the hemisphere, which yields a cosine-weighted
distribution of directions around the local +z axis:

    (u, v) in [0, 1]^2  ->  (a, b) in [-1, 1]^2  ->  disc point (x, y)
                        ->  (x, y, sqrt(max(0, 1 - x^2 - y^2)))

Local directions are moved into world space with an orthonormal basis built
around the surface normal.
"""

from __future__ import annotations

import math

import numpy as np

from hemitrace.core.vector import UnitNormal, Vector

# Components above this make the x axis a poor helper for the basis
_HELPER_AXIS_THRESHOLD = 0.9


def stratified_grid(samples_per_axis: int) -> list[tuple[float, float]]:
    """Build the (u, v) sample grid.

    Both u and v take ``samples_per_axis`` evenly spaced values in [0, 1],
    including both ends.

    Args:
        samples_per_axis: Number of values along each axis.

    Returns:
        ``samples_per_axis ** 2`` pairs, u-major.
    """
    ticks = np.linspace(0.0, 1.0, samples_per_axis)
    return [(float(u), float(v)) for u in ticks for v in ticks]


def concentric_sample_disk(u: float, v: float) -> tuple[float, float]:
    """Map a point of the unit square onto the unit disc (Shirley's mapping).

    Args:
        u: First coordinate in [0, 1].
        v: Second coordinate in [0, 1].

    Returns:
        The (x, y) disc point. The square's centre maps to (0, 0).
    """
    a = 2.0 * u - 1.0
    b = 2.0 * v - 1.0

    if a == 0.0 and b == 0.0:
        return 0.0, 0.0

    # The larger-magnitude axis drives the radius
    if abs(a) > abs(b):
        radius = a
        theta = (math.pi / 4.0) * (b / a)
    else:
        radius = b
        theta = math.pi / 2.0 - (math.pi / 4.0) * (a / b)

    return radius * math.cos(theta), radius * math.sin(theta)


def cosine_sample_hemisphere(u: float, v: float) -> UnitNormal:
    """Cosine-weighted direction in the local frame (z is the normal)."""
    x, y = concentric_sample_disk(u, v)
    z = math.sqrt(max(0.0, 1.0 - x * x - y * y))
    return UnitNormal(x, y, z)


def hemisphere_directions(samples_per_axis: int) -> tuple[UnitNormal, ...]:
    """Local-frame directions for every point of the stratified grid."""
    return tuple(cosine_sample_hemisphere(u, v) for u, v in stratified_grid(samples_per_axis))


def orthonormal_basis(normal: UnitNormal) -> tuple[UnitNormal, UnitNormal]:
    """Build tangent and bitangent vectors completing a basis around a normal.

    A helper axis not parallel to the normal is crossed with it to get the
    tangent; the bitangent is normal x tangent.

    Args:
        normal: The surface normal (the local z axis).

    Returns:
        A tuple (tangent, bitangent) so that (tangent, bitangent, normal) is
        a right-handed orthonormal basis.
    """
    helper = Vector(1.0, 0.0, 0.0)
    if abs(normal.x) > _HELPER_AXIS_THRESHOLD:
        helper = Vector(0.0, 1.0, 0.0)
    tangent = helper.cross(normal).normalized()
    bitangent = normal.cross(tangent).normalized()
    return tangent, bitangent


def local_to_world(
    local: UnitNormal,
    tangent: UnitNormal,
    bitangent: UnitNormal,
    normal: UnitNormal,
) -> UnitNormal:
    """Transform a local-frame direction into world space."""
    return (tangent * local.x + bitangent * local.y + normal * local.z).normalized()
