"""Image export utilities for rendered images.

This module converts linear colour images to 8-bit RGB and writes raw RGB
buffers to disk.

Supported formats:
    - PPM (binary ``P6``, via Pillow)
    - PNG (8-bit, via Pillow)

Buffers are flat, row-major RGB bytes: channel c of pixel (x, y) sits at
``y * width * 3 + x * 3 + c``.

Example:
    >>> from hemitrace.core.render import render
    >>> from hemitrace.preview.export import write_ppm
    >>>
    >>> data = render(camera, scene)
    >>> write_ppm("output.ppm", camera.width, camera.height, data)
"""

from __future__ import annotations

import logging
import os

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear colour image to 8-bit channels.

    NaNs become 0, values are clamped to [0, 1], scaled by 255 and
    truncated toward zero.

    Args:
        image: Colour array of any shape, typically (H, W, 3).

    Returns:
        Array of the same shape with dtype uint8.
    """
    clean = np.nan_to_num(np.asarray(image, dtype=np.float64), nan=0.0)
    return (np.clip(clean, 0.0, 1.0) * 255.0).astype(np.uint8)


def _to_pil(width: int, height: int, data: bytes) -> PILImage.Image:
    expected = width * height * 3
    if len(data) != expected:
        raise ValueError(
            f"RGB buffer has {len(data)} bytes, expected {expected} for {width}x{height}"
        )
    return PILImage.frombytes("RGB", (width, height), bytes(data))


def write_ppm(filepath: str | os.PathLike[str], width: int, height: int, data: bytes) -> None:
    """Write an RGB buffer as a binary portable pixmap.

    The file is the header ``P6\\n{width} {height}\\n255\\n`` followed by the
    raw RGB bytes.

    Args:
        filepath: Output file path.
        width: Image width in pixels.
        height: Image height in pixels.
        data: Flat RGB buffer of ``width * height * 3`` bytes.

    Raises:
        ValueError: If the buffer length does not match the dimensions.
        OSError: If the file cannot be written.
    """
    _to_pil(width, height, data).save(filepath, format="PPM")
    logger.info("wrote %dx%d PPM to %s", width, height, filepath)


def save_png(filepath: str | os.PathLike[str], width: int, height: int, data: bytes) -> None:
    """Write an RGB buffer as an 8-bit PNG.

    Raises:
        ValueError: If the buffer length does not match the dimensions.
        OSError: If the file cannot be written.
    """
    _to_pil(width, height, data).save(filepath, format="PNG")
    logger.info("wrote %dx%d PNG to %s", width, height, filepath)


def compute_rmse(
    image_a: npt.NDArray[np.number],
    image_b: npt.NDArray[np.number],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
