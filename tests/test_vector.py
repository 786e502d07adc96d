"""Unit tests for vector, interval and ray primitives.

Tests cover:
- Vector arithmetic, dot and cross products
- Normalization of zero vectors and near-zero detection
- Interval containment, clamping, expansion and enclosing
- Ray evaluation
"""

import math

import pytest

from pathtracer.core import Interval, Ray, Vector3
from pathtracer.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)


class TestVectorArithmetic:
    """Tests for Vector3 operators."""

    def test_add_sub_neg(self):
        """Test componentwise addition, subtraction and negation."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_and_componentwise_multiply(self):
        """Test scalar multiplication on both sides and Hadamard product."""
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0, -1) == Vector3(2, 0, -3)

    def test_division(self):
        """Test scalar division."""
        assert Vector3(2, 4, 6) / 2 == Vector3(1, 2, 3)

    def test_dot_and_cross(self):
        """Test dot product and right-handed cross product."""
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32

    def test_length(self):
        """Test length and squared length."""
        v = Vector3(3, 4, 0)
        assert v.length_squared() == 25
        assert v.length() == 5

    def test_indexing(self):
        """Test axis indexing and invalid axes."""
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        with pytest.raises(IndexError):
            v[3]

    def test_iteration(self):
        """Test unpacking a vector."""
        x, y, z = Vector3(1, 2, 3)
        assert (x, y, z) == (1, 2, 3)


class TestVectorNormalization:
    """Tests for normalize and near_zero."""

    def test_normalize_unit_length(self):
        """Test normalized vectors have unit length."""
        assert Vector3(3, 4, 12).normalize().length() == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        """Test normalizing a zero vector gives zero instead of raising."""
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        """Test near-zero detection threshold."""
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestInterval:
    """Tests for Interval."""

    def test_contains_is_closed(self):
        """Test contains includes the endpoints."""
        i = Interval(0, 1)
        assert i.contains(0) and i.contains(1) and i.contains(0.5)
        assert not i.contains(1.5)

    def test_surrounds_is_open(self):
        """Test surrounds excludes the endpoints."""
        i = Interval(0, 1)
        assert not i.surrounds(0)
        assert not i.surrounds(1)
        assert i.surrounds(0.5)

    def test_clamp(self):
        """Test clamping below, inside and above."""
        i = Interval(0, 1)
        assert i.clamp(-2) == 0
        assert i.clamp(0.25) == 0.25
        assert i.clamp(3) == 1

    def test_expand_splits_padding(self):
        """Test expand pads half of delta on each side."""
        assert Interval(1, 2).expand(1) == Interval(0.5, 2.5)

    def test_enclosing(self):
        """Test the enclosing interval covers both inputs."""
        assert Interval.enclosing(Interval(0, 1), Interval(3, 4)) == Interval(0, 4)

    def test_empty_and_universe(self):
        """Test the empty interval contains nothing and the universe everything."""
        assert not Interval.EMPTY.contains(0)
        assert Interval.EMPTY.size() < 0
        assert Interval.UNIVERSE.contains(1e300)
        assert Interval.enclosing(Interval.EMPTY, Interval(2, 3)) == Interval(2, 3)

    def test_displacement(self):
        """Test adding a scalar shifts both bounds."""
        assert Interval(0, 1) + 2 == Interval(2, 3)


class TestRay:
    """Tests for Ray."""

    def test_at(self):
        """Test evaluating a point along the ray."""
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 2, 0))
        assert ray.at(1.5) == Vector3(1, 3, 0)

    def test_default_time(self):
        """Test rays default to shutter time 0."""
        assert Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)).time == 0.0


class TestSampling:
    """Tests for random direction helpers."""

    def test_unit_sphere_samples_inside(self, rng):
        """Test rejection sampling stays strictly inside the unit sphere."""
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vector_has_unit_length(self, rng):
        """Test random unit vectors are normalized."""
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_is_planar(self, rng):
        """Test disk samples lie in the z = 0 plane inside the unit circle."""
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0


class TestOptics:
    """Tests for reflect, refract and Schlick's approximation."""

    def test_reflect(self):
        """Test mirror reflection about a normal."""
        assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_refract_normal_incidence_passes_straight(self):
        """Test a ray along the normal is not bent."""
        out = refract(Vector3(0, 0, -1), Vector3(0, 0, 1), 1 / 1.5)
        assert out.x == pytest.approx(0.0)
        assert out.y == pytest.approx(0.0)
        assert out.z == pytest.approx(-1.0)

    def test_schlick_bounds(self):
        """Test reflectance at normal incidence is r0 and at grazing is 1."""
        r0 = ((1 - 1.5) / (1 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == pytest.approx(r0)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)

    def test_schlick_is_symmetric_in_index(self):
        """Test normal-incidence reflectance is the same entering or leaving."""
        assert math.isclose(schlick(1.0, 1.5), schlick(1.0, 1 / 1.5))
