"""Unit tests for the integrator.

Tests cover:
- Sampling configuration
- Scene queries on behalf of materials
- Secondary ray spawning
"""

import pytest

from hemitrace.core.integrator import DEFAULT_SAMPLES_PER_AXIS, SURFACE_EPSILON, Integrator
from hemitrace.core.ray import Ray
from hemitrace.core.vector import UnitNormal, Vector
from hemitrace.geometry.primitive import Hit
from hemitrace.materials.emissive import EmissiveMaterial
from hemitrace.scene.scene import Scene


class TestIntegratorConfiguration:
    """Tests for sampling configuration."""

    def test_default_sample_count(self):
        integrator = Integrator(Scene())
        assert integrator.samples_per_axis == DEFAULT_SAMPLES_PER_AXIS
        assert integrator.sample_count == 2601
        assert len(integrator.hemisphere_directions) == 2601

    def test_custom_sample_count(self):
        assert Integrator(Scene(), samples_per_axis=11).sample_count == 121

    @pytest.mark.parametrize("samples_per_axis", [1, 0, -3])
    def test_too_few_samples_raises(self, samples_per_axis):
        with pytest.raises(ValueError):
            Integrator(Scene(), samples_per_axis=samples_per_axis)

    def test_directions_are_cached(self):
        integrator = Integrator(Scene(), samples_per_axis=3)
        assert integrator.hemisphere_directions is integrator.hemisphere_directions

    def test_repr(self):
        scene = Scene()
        scene.add_sphere((0.0, 0.0, 5.0), 1.0, EmissiveMaterial(emissiveness=1.0))
        assert repr(Integrator(scene, samples_per_axis=4)) == (
            "Integrator(primitives=1, samples_per_axis=4)"
        )


class TestIntegratorTracing:
    """Tests for trace and spawn_ray."""

    def test_trace_returns_hit_and_material(self):
        scene = Scene()
        light = EmissiveMaterial(emissiveness=1.0)
        scene.add_sphere((0.0, 0.0, 5.0), 1.0, light)
        integrator = Integrator(scene, samples_per_axis=2)

        ray = Ray(origin=Vector(0.0, 0.0, 0.0), direction=UnitNormal(0.0, 0.0, 1.0))
        hit, material = integrator.trace(ray)
        assert material is light
        assert abs(hit.point_on_ray - 4.0) < 1e-9

    def test_trace_miss(self):
        integrator = Integrator(Scene(), samples_per_axis=2)
        ray = Ray(origin=Vector(0.0, 0.0, 0.0), direction=UnitNormal(0.0, 0.0, 1.0))
        assert integrator.trace(ray) is None

    def test_spawn_ray_offsets_along_normal(self):
        integrator = Integrator(Scene(), samples_per_axis=2)
        hit = Hit(
            hitpoint=Vector(1.0, 2.0, 3.0),
            normal=UnitNormal(0.0, 1.0, 0.0),
            point_on_ray=1.0,
        )
        direction = Vector(1.0, 1.0, 0.0).normalized()
        ray = integrator.spawn_ray(hit, direction)

        assert ray.origin == Vector(1.0, 2.0 + SURFACE_EPSILON, 3.0)
        assert ray.direction is direction

    def test_spawned_ray_does_not_rehit_sphere(self):
        """A ray leaving a sphere's surface outward does not strike the same sphere."""
        scene = Scene()
        scene.add_sphere((0.0, 0.0, 0.0), 1.0, EmissiveMaterial(emissiveness=1.0))
        integrator = Integrator(scene, samples_per_axis=2)

        hit = Hit(
            hitpoint=Vector(0.0, 0.0, 1.0),
            normal=UnitNormal(0.0, 0.0, 1.0),
            point_on_ray=1.0,
        )
        for direction in [UnitNormal(0.0, 0.0, 1.0), Vector(1.0, 0.0, 0.1).normalized()]:
            assert integrator.trace(integrator.spawn_ray(hit, direction)) is None
