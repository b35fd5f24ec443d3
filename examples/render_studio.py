#!/usr/bin/env python3
"""Render the studio scene.

This script renders the reference studio scene (a red diffuse sphere on a
grey floor, lit by an emissive sphere) and writes it as PPM or PNG,
depending on the output file extension.

Usage:
    python examples/render_studio.py [options]

Options:
    --width WIDTH                 Image width in pixels (default: 256)
    --height HEIGHT               Image height in pixels (default: 256)
    --samples-per-axis N          Hemisphere grid size per axis (default: 51)
    --output OUTPUT               Output file path (default: studio.ppm)
    --backend {python,taichi}     Render backend (default: python)
    --quiet                       Only log warnings and errors

Example:
    python examples/render_studio.py --width 64 --height 64 --samples-per-axis 11
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hemitrace.core.integrator import DEFAULT_SAMPLES_PER_AXIS

logger = logging.getLogger("hemitrace")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the studio scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=256,
        help="Image width in pixels (default: 256)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=256,
        help="Image height in pixels (default: 256)",
    )
    parser.add_argument(
        "--samples-per-axis",
        type=int,
        default=DEFAULT_SAMPLES_PER_AXIS,
        help=f"Hemisphere grid size per axis (default: {DEFAULT_SAMPLES_PER_AXIS})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="studio.ppm",
        help="Output file path, .ppm or .png (default: studio.ppm)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="python",
        help="Render backend (default: python)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser.parse_args()


def setup_logging(quiet: bool) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if quiet else logging.INFO)


def render_studio(
    width: int = 256,
    height: int = 256,
    samples_per_axis: int = DEFAULT_SAMPLES_PER_AXIS,
    output_path: str = "studio.ppm",
    backend: str = "python",
) -> Path:
    """Render the studio scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_axis: Hemisphere grid size per axis.
        output_path: Output file path. ``.png`` writes PNG, anything else PPM.
        backend: ``"python"`` for the reference loop, ``"taichi"`` for the
            kernel backend.

    Returns:
        Path to the saved image file.
    """
    from hemitrace.core.integrator import Integrator
    from hemitrace.core.render import render_image
    from hemitrace.preview.export import save_png, write_ppm
    from hemitrace.scene.studio import StudioParams, create_studio_scene

    scene, camera = create_studio_scene(StudioParams(resolution=(width, height)))

    if backend == "taichi":
        import taichi as ti

        # f64 keeps the kernel in step with the Python backend
        ti.init(arch=ti.cpu, default_fp=ti.f64)
        from hemitrace.core.kernels import KernelRenderer

        image = KernelRenderer(camera, scene, samples_per_axis=samples_per_axis).render()
    else:
        integrator = Integrator(scene, samples_per_axis=samples_per_axis)

        def progress_callback(rows_done: int, total_rows: int) -> None:
            if rows_done % 16 == 0 or rows_done == total_rows:
                logger.info("rendered %d/%d rows", rows_done, total_rows)

        image = render_image(camera, scene, integrator, callback=progress_callback)

    output_file = Path(output_path)
    writer = save_png if output_file.suffix.lower() == ".png" else write_ppm
    writer(output_file, camera.width, camera.height, image.tobytes())
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.quiet)

    try:
        output_file = render_studio(
            width=args.width,
            height=args.height,
            samples_per_axis=args.samples_per_axis,
            output_path=args.output,
            backend=args.backend,
        )
        logger.info("saved to %s", output_file.absolute())
        return 0
    except Exception as e:
        logger.error("render failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
