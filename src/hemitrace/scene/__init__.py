"""Scene management module.

Components:
    scene: Ordered primitive/material container with nearest-hit queries
    studio: Reference studio scene factory
"""

from .scene import Scene, SceneObject
from .studio import StudioParams, create_studio_scene

__all__ = [
    "Scene",
    "SceneObject",
    "StudioParams",
    "create_studio_scene",
]
