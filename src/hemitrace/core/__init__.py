"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector and UnitNormal value types, dot and cross products
    ray: Ray data structure with point evaluation and distance queries
    sampling: Stratified cosine-weighted hemisphere sampling
    integrator: Scene queries on behalf of materials, sampling configuration
    render: Single-threaded render loop producing 8-bit RGB
    kernels: Taichi kernel backend running the same estimator
"""

from .ray import Ray
from .sampling import (
    concentric_sample_disk,
    cosine_sample_hemisphere,
    hemisphere_directions,
    local_to_world,
    orthonormal_basis,
    stratified_grid,
)
from .vector import UnitNormal, Vector, as_vector, cross, dot

# Note: integrator, render and kernels are NOT imported here to avoid circular imports
# (they depend on the scene and materials packages, which import this one).
# Import directly from hemitrace.core.render or hemitrace.core.kernels when needed.

__all__ = [
    "Vector",
    "UnitNormal",
    "as_vector",
    "dot",
    "cross",
    "Ray",
    "stratified_grid",
    "concentric_sample_disk",
    "cosine_sample_hemisphere",
    "hemisphere_directions",
    "orthonormal_basis",
    "local_to_world",
]
