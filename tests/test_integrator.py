"""Unit tests for the recursive radiance estimate.

Tests cover:
- Background on miss, black at depth zero
- Emission from lights and attenuation through bounces
- Per-pixel averaging
"""

import pytest

from pathtracer.camera import Camera
from pathtracer.core import Ray, Vector3
from pathtracer.geometry import HittableList, Quad, Sphere
from pathtracer.materials import DiffuseLight, Metal
from pathtracer.renderer import ray_color, sample_pixel

SKY = Vector3(0.5, 0.7, 1.0)


class TestRayColor:
    """Tests for ray_color."""

    def test_miss_returns_background(self, material, rng):
        """Test an empty direction sees the background."""
        world = HittableList([Sphere(Vector3(0, 0, -5), 1, material)])
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), world, 5, SKY, rng) == SKY

    def test_depth_exhausted_is_black(self, material, rng):
        """Test no light is gathered once the bounce budget is spent."""
        world = HittableList([Sphere(Vector3(0, 0, -5), 1, material)])
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), world, 0, SKY, rng) == Vector3(0, 0, 0)

    def test_light_returns_emission(self, rng):
        """Test hitting a light returns its radiance."""
        world = HittableList([Sphere(Vector3(0, 0, -5), 1, DiffuseLight(Vector3(4, 4, 4)))])
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 5, SKY, rng)
        assert color == Vector3(4, 4, 4)

    def test_absorbing_surface_is_black(self, material, rng):
        """Test a surface that absorbs and emits nothing is black."""
        world = HittableList([Sphere(Vector3(0, 0, -5), 1, material)])
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 5, SKY, rng) == Vector3(0, 0, 0)

    def test_mirror_attenuates_background(self, rng):
        """Test a mirror reflects the background scaled by its albedo."""
        mirror = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), Metal(Vector3(0.5, 0.5, 0.5), 0.0))
        world = HittableList([mirror])
        color = ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 5, SKY, rng)
        assert color.x == pytest.approx(0.25)
        assert color.y == pytest.approx(0.35)
        assert color.z == pytest.approx(0.5)

    def test_mirror_without_bounces_left(self, rng):
        """Test the reflected ray contributes nothing at depth one."""
        mirror = Quad(Vector3(-1, -1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), Metal(Vector3(0.5, 0.5, 0.5), 0.0))
        world = HittableList([mirror])
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), world, 1, SKY, rng) == Vector3(0, 0, 0)


class TestSamplePixel:
    """Tests for sample_pixel."""

    def test_average_of_constant_samples(self, rng):
        """Test averaging identical samples returns the sample."""
        camera = Camera()
        camera.set_image_width(4)
        camera.set_samples_per_pixel(8)
        camera.set_background(SKY)
        camera.initialize()
        color = sample_pixel(camera, HittableList(), 1, 1, rng)
        assert color.x == pytest.approx(SKY.x)
        assert color.y == pytest.approx(SKY.y)
        assert color.z == pytest.approx(SKY.z)

    def test_default_generator(self, material):
        """Test omitting the generator falls back to the random module."""
        camera = Camera()
        camera.set_image_width(4)
        camera.set_samples_per_pixel(2)
        camera.set_background(SKY)
        camera.initialize()
        world = HittableList([Sphere(Vector3(0, 0, -5), 1, material)])
        color = sample_pixel(camera, world, 0, 0, None)
        assert color.z == pytest.approx(SKY.z)
        assert ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), world, 5, SKY, None) == SKY
