"""Preview module for image output.

Components:
    export: 8-bit quantisation, PPM/PNG writers and image comparison

Example:
    >>> from hemitrace.preview import write_ppm
    >>> write_ppm("output.ppm", width, height, data)
"""

from hemitrace.preview.export import (
    compute_rmse,
    image_to_uint8,
    save_png,
    write_ppm,
)

__all__ = [
    "image_to_uint8",
    "write_ppm",
    "save_png",
    "compute_rmse",
]
