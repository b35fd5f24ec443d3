"""Top-level render loop producing an 8-bit RGB image.

For every pixel the camera generates one primary ray, the integrator
resolves the nearest hit, and the hit's material estimates the outgoing
colour. Pixels whose ray escapes the scene, or whose hit is flagged
``inside``, stay black. Colours are clamped to [0, 1] before quantisation.

The loop is single-threaded and runs each pixel to completion before the
next. For full-resolution renders with the default 2601-sample estimator use
``hemitrace.core.kernels.KernelRenderer``, which runs the same estimator in a
Taichi kernel.

Example:
    >>> from hemitrace.core.render import render
    >>> from hemitrace.preview.export import write_ppm
    >>> from hemitrace.scene.studio import create_studio_scene
    >>>
    >>> scene, camera = create_studio_scene()
    >>> data = render(camera, scene)
    >>> write_ppm("studio.ppm", camera.width, camera.height, data)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from hemitrace.camera.pinhole import PinholeCamera
from hemitrace.core.integrator import Integrator
from hemitrace.preview.export import image_to_uint8
from hemitrace.scene.scene import Scene
from hemitrace.utils import timed

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]


def _bind_integrator(scene: Scene, integrator: Integrator | None) -> Integrator:
    if integrator is None:
        return Integrator(scene)
    if integrator.scene is not scene:
        raise ValueError("Integrator is bound to a different scene than the one being rendered")
    return integrator


@timed
def render_image(
    camera: PinholeCamera,
    scene: Scene,
    integrator: Integrator | None = None,
    *,
    callback: ProgressCallback | None = None,
) -> npt.NDArray[np.uint8]:
    """Render the scene into an 8-bit image array.

    Args:
        camera: Camera generating one primary ray per pixel.
        scene: The scene to render.
        integrator: Integrator bound to ``scene``. Defaults to one with the
            default sample grid.
        callback: Optional callback called after each image row.
            Receives (rows_completed, total_rows).

    Returns:
        Array of shape (height, width, 3) with dtype uint8.

    Raises:
        ValueError: If ``integrator`` was built for a different scene.
    """
    integrator = _bind_integrator(scene, integrator)
    width, height = camera.resolution
    logger.info(
        "rendering %dx%d with %d primitives, %d samples per shaded pixel",
        width,
        height,
        len(scene),
        integrator.sample_count,
    )

    colors = np.zeros((height, width, 3), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            ray = camera.generate_ray(x, y)
            found = integrator.trace(ray)
            if found is None:
                continue
            hit, material = found
            if hit.inside:
                continue
            colors[y, x] = tuple(material.sample(hit, ray, integrator))

        if callback is not None:
            callback(y + 1, height)

    return image_to_uint8(colors)


def render(
    camera: PinholeCamera,
    scene: Scene,
    integrator: Integrator | None = None,
    *,
    callback: ProgressCallback | None = None,
) -> bytes:
    """Render the scene into a flat, row-major RGB byte buffer.

    Channel c of pixel (x, y) is at ``y * width * 3 + x * 3 + c``. See
    ``render_image`` for the arguments.
    """
    return render_image(camera, scene, integrator, callback=callback).tobytes()
