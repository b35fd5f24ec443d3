"""Pinhole camera generating one primary ray per pixel.

The camera looks along +z. A virtual screen rectangle sits one unit in front
of the camera position, centred on it, with corners

    screen_lo = position + (-width/2, -height/2, 1)
    screen_hi = position + ( width/2,  height/2, 1)

computed once at construction. Pixel (px, py) is mapped linearly across the
rectangle and the ray points from the camera position to that screen point:

    target = screen_lo + (screen_hi - screen_lo) / (res_x, res_y, 1) * (px, py, 0)

Pixels are sampled at their integer coordinate, not their centre: pixel
(0, 0) lands exactly on ``screen_lo`` and the last pixel lands one pixel step
short of ``screen_hi``. There is no jitter or anti-aliasing.

Example:
    >>> from hemitrace.core.vector import Vector
    >>> camera = PinholeCamera(Vector(0.0, 0.0, -1.0), resolution=(256, 256))
    >>> ray = camera.generate_ray(128, 128)  # Through the screen centre
"""

from __future__ import annotations

from hemitrace.core.ray import Ray
from hemitrace.core.vector import Vector, as_vector


class PinholeCamera:
    """A fixed-orientation pinhole camera.

    Attributes:
        position: Camera position in world space.
        resolution: Image size in pixels as (width, height).
        screen: The (screen_lo, screen_hi) corners of the virtual screen.
    """

    def __init__(
        self,
        position: Vector | tuple[float, float, float],
        resolution: tuple[int, int],
        screen_size: tuple[float, float] = (1.0, 1.0),
    ) -> None:
        """Initialize the camera and compute its screen rectangle.

        Args:
            position: Camera position in world space.
            resolution: Image size in pixels as (width, height).
            screen_size: Width and height of the virtual screen in world units.

        Raises:
            ValueError: If the resolution or screen size is not positive.
        """
        width, height = resolution
        if width <= 0 or height <= 0:
            raise ValueError(f"Resolution must be positive, got {width}x{height}")
        screen_width, screen_height = screen_size
        if screen_width <= 0.0 or screen_height <= 0.0:
            raise ValueError(f"Screen size must be positive, got {screen_width}x{screen_height}")

        self._position = as_vector(position)
        self._resolution = (int(width), int(height))
        self._screen = (
            self._position + Vector(-screen_width / 2.0, -screen_height / 2.0, 1.0),
            self._position + Vector(screen_width / 2.0, screen_height / 2.0, 1.0),
        )
        # Screen distance covered by one pixel along x and y
        self._pixel_step = (self._screen[1] - self._screen[0]) / Vector(
            float(width), float(height), 1.0
        )

    @property
    def position(self) -> Vector:
        return self._position

    @property
    def resolution(self) -> tuple[int, int]:
        return self._resolution

    @property
    def width(self) -> int:
        return self._resolution[0]

    @property
    def height(self) -> int:
        return self._resolution[1]

    @property
    def screen(self) -> tuple[Vector, Vector]:
        return self._screen

    @property
    def pixel_step(self) -> Vector:
        """Per-pixel screen offset (x, y) with a zero z component."""
        return self._pixel_step

    def screen_point(self, pixel_x: int, pixel_y: int) -> Vector:
        """World-space point on the virtual screen for a pixel coordinate."""
        return self._screen[0] + self._pixel_step * Vector(float(pixel_x), float(pixel_y), 0.0)

    def generate_ray(self, pixel_x: int, pixel_y: int) -> Ray:
        """Generate the primary ray through a pixel.

        Args:
            pixel_x: Pixel column (0 = screen_lo side).
            pixel_y: Pixel row (0 = screen_lo side).

        Returns:
            A ray from the camera position toward the pixel's screen point.
        """
        target = self.screen_point(pixel_x, pixel_y)
        return Ray(origin=self._position, direction=(target - self._position).normalized())

    def __repr__(self) -> str:
        return (
            f"PinholeCamera(position={self._position!r}, "
            f"resolution={self._resolution}, screen={self._screen!r})"
        )
