"""Materials module.

Components:
    material: Material base class and the WHITE/BLACK colour constants
    diffuse: Diffuse coloured surface (one-bounce hemisphere estimate)
    emissive: Light-emitting surface

Each material provides:
    - sample(): Estimate the colour leaving the surface at a hit
    - total_emission(): Colour sent along a sample ray that struck it
"""

from .diffuse import DiffuseMaterial
from .emissive import EmissiveMaterial
from .material import BLACK, WHITE, Material

__all__ = [
    "Material",
    "WHITE",
    "BLACK",
    "DiffuseMaterial",
    "EmissiveMaterial",
]
