"""Camera module for primary ray generation.

Components:
    pinhole: Fixed-orientation pinhole camera looking along +z

Ray generation maps integer pixel coordinates linearly across a virtual
screen one unit in front of the camera, one ray per pixel.
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
