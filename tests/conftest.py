"""Pytest configuration for hemitrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Double precision
    keeps the kernel backend comparable with the Python backend.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64)
    yield


@pytest.fixture
def lit_sphere_scene():
    """Red diffuse sphere lit by an emissive sphere above and behind the camera plane.

    Layout:
        - Camera at (0, 0, -1), 16x16 pixels, 1x1 screen
        - Red diffuse sphere, radius 1, centre (0, 0, 2)
        - Emissive sphere, radius 1.5, centre (0, 2.5, 0), emissiveness 10

    No primary ray from the corner pixels reaches either sphere.
    """
    from hemitrace.camera.pinhole import PinholeCamera
    from hemitrace.core.vector import Vector
    from hemitrace.materials.diffuse import DiffuseMaterial
    from hemitrace.materials.emissive import EmissiveMaterial
    from hemitrace.scene.scene import Scene

    scene = Scene()
    scene.add_sphere(
        center=(0.0, 0.0, 2.0),
        radius=1.0,
        material=DiffuseMaterial(color=Vector(1.0, 0.0, 0.0)),
    )
    scene.add_sphere(
        center=(0.0, 2.5, 0.0),
        radius=1.5,
        material=EmissiveMaterial(emissiveness=10.0),
    )
    camera = PinholeCamera(position=(0.0, 0.0, -1.0), resolution=(16, 16))
    return scene, camera
