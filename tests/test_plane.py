"""Unit tests for infinite plane intersection.

Tests cover:
- Hits from either side of the plane
- Parallel and near-parallel rays
- Planes behind the ray origin
"""

from hemitrace.core.ray import Ray
from hemitrace.core.vector import UnitNormal, Vector
from hemitrace.geometry.plane import Plane


def _ray(origin, direction) -> Ray:
    return Ray(origin=Vector(*origin), direction=Vector(*direction).normalized())


def _floor() -> Plane:
    """The plane y = -1."""
    return Plane(normal=UnitNormal(0.0, 1.0, 0.0), distance_to_origin=-1.0)


class TestPlaneIntersection:
    """Tests for ray-plane intersection."""

    def test_hit_from_above(self):
        hit = _floor().intersect(_ray((0.0, 0.0, 0.0), (0.0, -1.0, 0.0)))

        assert hit is not None
        assert abs(hit.point_on_ray - 1.0) < 1e-12
        assert abs(hit.hitpoint.y + 1.0) < 1e-12
        assert hit.normal == UnitNormal(0.0, 1.0, 0.0)
        assert hit.inside is False

    def test_hit_from_below_keeps_plane_normal(self):
        hit = _floor().intersect(_ray((0.0, -3.0, 0.0), (0.0, 1.0, 0.0)))

        assert hit is not None
        assert abs(hit.point_on_ray - 2.0) < 1e-12
        assert hit.normal == UnitNormal(0.0, 1.0, 0.0)

    def test_oblique_hit(self):
        hit = _floor().intersect(_ray((0.0, 0.0, 0.0), (0.0, -1.0, 1.0)))

        assert hit is not None
        assert abs(hit.hitpoint.y + 1.0) < 1e-9
        assert abs(hit.hitpoint.z - 1.0) < 1e-9

    def test_parallel_ray_misses(self):
        assert _floor().intersect(_ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))) is None

    def test_nearly_parallel_ray_misses(self):
        assert _floor().intersect(_ray((0.0, 0.0, 0.0), (1.0, -1e-5, 0.0))) is None

    def test_plane_behind_ray_misses(self):
        assert _floor().intersect(_ray((0.0, 0.0, 0.0), (0.0, 1.0, 0.0))) is None

    def test_origin_on_plane_misses(self):
        assert _floor().intersect(_ray((0.0, -1.0, 0.0), (0.0, -1.0, 0.0))) is None
