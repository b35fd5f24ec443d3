"""Unit tests for the Vector and UnitNormal value types.

Tests cover:
- Arithmetic between vectors, normals and scalars
- Dot and cross products
- Normalisation and unit-length validation
- Result types (which operations keep the UnitNormal type)
"""

import dataclasses
import math
import random

import pytest

from hemitrace.core.vector import UnitNormal, Vector, as_vector, cross, dot


class TestVectorArithmetic:
    """Tests for Vector operators."""

    def test_add_and_subtract(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(0.5, -1.0, 2.0)
        assert a + b == Vector(1.5, 1.0, 5.0)
        assert a - b == Vector(0.5, 3.0, 1.0)

    def test_negate(self):
        assert -Vector(1.0, -2.0, 0.0) == Vector(-1.0, 2.0, -0.0)

    def test_scalar_multiply_both_sides(self):
        v = Vector(1.0, 2.0, 3.0)
        assert v * 2.0 == Vector(2.0, 4.0, 6.0)
        assert 2.0 * v == Vector(2.0, 4.0, 6.0)

    def test_componentwise_multiply(self):
        """Multiplying two vectors is component-wise (colour filtering)."""
        color = Vector(1.0, 0.5, 0.0)
        light = Vector(10.0, 10.0, 10.0)
        assert color * light == Vector(10.0, 5.0, 0.0)

    def test_scalar_and_componentwise_divide(self):
        v = Vector(2.0, 4.0, 6.0)
        assert v / 2.0 == Vector(1.0, 2.0, 3.0)
        assert v / Vector(2.0, 4.0, 1.0) == Vector(1.0, 1.0, 6.0)

    def test_iterates_as_components(self):
        assert list(Vector(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]

    def test_is_immutable(self):
        v = Vector(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot(self):
        assert dot(Vector(1.0, 2.0, 3.0), Vector(4.0, -5.0, 6.0)) == 12.0

    def test_cross_of_axes(self):
        x = Vector(1.0, 0.0, 0.0)
        y = Vector(0.0, 1.0, 0.0)
        assert cross(x, y) == Vector(0.0, 0.0, 1.0)
        assert cross(y, x) == Vector(0.0, 0.0, -1.0)

    def test_cross_is_perpendicular(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(-2.0, 0.5, 4.0)
        c = a.cross(b)
        assert abs(c.dot(a)) < 1e-12
        assert abs(c.dot(b)) < 1e-12

    def test_products_mix_vectors_and_normals(self):
        n = UnitNormal(0.0, 0.0, 1.0)
        v = Vector(3.0, 4.0, 5.0)
        assert n.dot(v) == 5.0
        assert v.dot(n) == 5.0
        assert isinstance(n.cross(v), Vector)


class TestNormalization:
    """Tests for length and normalisation."""

    def test_length(self):
        v = Vector(0.0, 3.0, 4.0)
        assert v.length_squared() == 25.0
        assert v.length() == 5.0

    def test_normalized_returns_unit_normal(self):
        n = Vector(0.0, 3.0, 4.0).normalized()
        assert isinstance(n, UnitNormal)
        assert abs(n.x) < 1e-12
        assert abs(n.y - 0.6) < 1e-12
        assert abs(n.z - 0.8) < 1e-12
        assert abs(n.length() - 1.0) < 1e-12

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ValueError):
            Vector(0.0, 0.0, 0.0).normalized()

    @pytest.mark.parametrize(
        "v",
        [
            Vector(1.0, 0.0, 0.0),
            Vector(0.0, -3.0, 0.0),
            Vector(1e-3, 2e-3, -5e-4),
            Vector(-7.5, 120.0, 33.25),
            Vector(1e4, -1e4, 1e4),
        ],
    )
    def test_normalized_is_parallel(self, v):
        n = v.normalized()
        assert v.dot(n) > 0.0
        assert abs(v.dot(n) - v.length()) < 1e-9 * v.length()
        assert n.cross(v).length() < 1e-9 * v.length()

    def test_random_vectors_normalize_parallel(self):
        rng = random.Random(7)
        for _ in range(200):
            v = Vector(*(rng.uniform(-50.0, 50.0) for _ in range(3)))
            n = v.normalized()
            assert abs(n.length() - 1.0) < 1e-9
            assert v.dot(n) > 0.0
            assert n.cross(v).length() < 1e-9 * v.length()

    def test_from_vector(self):
        assert UnitNormal.from_vector(Vector(0.0, 0.0, 7.0)) == UnitNormal(0.0, 0.0, 1.0)


class TestUnitNormal:
    """Tests for UnitNormal construction and result types."""

    def test_rejects_non_unit_components(self):
        with pytest.raises(ValueError):
            UnitNormal(1.0, 1.0, 1.0)

    def test_accepts_small_rounding_error(self):
        n = UnitNormal(0.0, 0.0, 1.0001)
        assert n.z == 1.0001

    def test_negation_stays_unit_normal(self):
        n = -UnitNormal(0.0, 1.0, 0.0)
        assert isinstance(n, UnitNormal)
        assert n == UnitNormal(0.0, -1.0, 0.0)

    def test_scaling_returns_vector(self):
        scaled = UnitNormal(0.0, 1.0, 0.0) * 2.0
        assert type(scaled) is Vector
        assert scaled == Vector(0.0, 2.0, 0.0)
        assert type(2.0 * UnitNormal(0.0, 1.0, 0.0)) is Vector
        assert type(UnitNormal(0.0, 1.0, 0.0) / 2.0) is Vector

    def test_sum_of_normals_returns_vector(self):
        a = UnitNormal(1.0, 0.0, 0.0)
        b = UnitNormal(0.0, 1.0, 0.0)
        total = a + b
        assert type(total) is Vector
        assert abs(total.length() - math.sqrt(2.0)) < 1e-12
        assert type(a - b) is Vector

    def test_to_vector(self):
        v = UnitNormal(1.0, 0.0, 0.0).to_vector()
        assert type(v) is Vector
        assert v == Vector(1.0, 0.0, 0.0)


class TestAsVector:
    """Tests for the as_vector coercion helper."""

    def test_tuple(self):
        assert as_vector((1, 2, 3)) == Vector(1.0, 2.0, 3.0)

    def test_vector_passes_through(self):
        v = Vector(1.0, 2.0, 3.0)
        assert as_vector(v) is v

    def test_unit_normal(self):
        assert type(as_vector(UnitNormal(0.0, 1.0, 0.0))) is Vector
