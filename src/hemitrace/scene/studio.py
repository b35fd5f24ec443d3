"""Studio scene configuration.

This module provides a factory for a small reference scene: a red diffuse
sphere resting on a grey floor, lit by an emissive sphere overhead, seen
by a camera one unit behind the origin looking along +z.

Layout (default parameters):
    - Camera at (0, 0, -1), 256x256 pixels, 1x1 screen
    - Subject: diffuse sphere, radius 1, centre (0, 0, 2), red
    - Light: emissive sphere, radius 1.5, centre (0, 2.5, 0)
    - Floor: diffuse plane y = -1, grey

Example:
    >>> from hemitrace.scene.studio import StudioParams, create_studio_scene
    >>> scene, camera = create_studio_scene(StudioParams(resolution=(64, 64)))
    >>> len(scene)
    3
"""

from __future__ import annotations

from dataclasses import dataclass

from hemitrace.camera.pinhole import PinholeCamera
from hemitrace.core.vector import Vector
from hemitrace.materials.diffuse import DiffuseMaterial
from hemitrace.materials.emissive import EmissiveMaterial
from hemitrace.scene.scene import Scene


@dataclass
class StudioParams:
    """Parameters for configuring the studio scene.

    All parameters have defaults matching the reference layout.

    Attributes:
        camera_position: Camera position in world space.
        resolution: Image size in pixels as (width, height).
        screen_size: Virtual screen size in world units.
        subject_center: Centre of the diffuse subject sphere.
        subject_radius: Radius of the subject sphere.
        subject_color: RGB albedo of the subject sphere.
        light_center: Centre of the emissive light sphere.
        light_radius: Radius of the light sphere.
        light_emissiveness: Emission strength of the light.
        floor_height: Height (y) of the floor plane. None leaves the floor out.
        floor_color: RGB albedo of the floor.

    Example:
        >>> params = StudioParams()
        >>> params.light_emissiveness
        10.0

        >>> # Brighter light, no floor
        >>> custom = StudioParams(light_emissiveness=20.0, floor_height=None)
    """

    camera_position: tuple[float, float, float] = (0.0, 0.0, -1.0)
    resolution: tuple[int, int] = (256, 256)
    screen_size: tuple[float, float] = (1.0, 1.0)
    subject_center: tuple[float, float, float] = (0.0, 0.0, 2.0)
    subject_radius: float = 1.0
    subject_color: tuple[float, float, float] = (1.0, 0.0, 0.0)
    light_center: tuple[float, float, float] = (0.0, 2.5, 0.0)
    light_radius: float = 1.5
    light_emissiveness: float = 10.0
    floor_height: float | None = -1.0
    floor_color: tuple[float, float, float] = (0.5, 0.5, 0.5)


def create_studio_scene(params: StudioParams | None = None) -> tuple[Scene, PinholeCamera]:
    """Create the studio scene and its camera.

    Primitives are added in the order subject, light, floor.

    Args:
        params: Scene parameters. Defaults to ``StudioParams()``.

    Returns:
        A tuple of (scene, camera).
    """
    if params is None:
        params = StudioParams()

    scene = Scene()
    scene.add_sphere(
        center=params.subject_center,
        radius=params.subject_radius,
        material=DiffuseMaterial(color=Vector(*params.subject_color)),
    )
    scene.add_sphere(
        center=params.light_center,
        radius=params.light_radius,
        material=EmissiveMaterial(emissiveness=params.light_emissiveness),
    )
    if params.floor_height is not None:
        # Plane point is normal * distance, so distance equals the floor height
        scene.add_plane(
            normal=(0.0, 1.0, 0.0),
            distance_to_origin=params.floor_height,
            material=DiffuseMaterial(color=Vector(*params.floor_color)),
        )

    camera = PinholeCamera(
        position=params.camera_position,
        resolution=params.resolution,
        screen_size=params.screen_size,
    )
    return scene, camera
