"""Minimal offline Monte Carlo renderer.

This package renders scenes of spheres and planes seen through a pinhole
camera, estimating the light reaching each diffuse surface with a fixed grid
of cosine-weighted hemisphere samples. It supports:
- Distinct vector and unit-normal types for the ray algebra
- Diffuse coloured and emissive materials
- A pure-Python reference renderer and a Taichi kernel backend
- PPM/PNG output

Subpackages:
    core: Vector algebra, rays, hemisphere sampling, integrator and render loops
    geometry: Shape primitives and intersection routines
    materials: Diffuse and emissive material models
    scene: Scene container and preset scenes
    camera: Pinhole camera with per-pixel ray generation
    preview: Image quantisation and export
"""

__version__ = "0.1.0"
