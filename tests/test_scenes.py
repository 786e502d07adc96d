"""Tests for the demo scenes and the command-line entry point.

Tests cover:
- Every registered scene builds a camera and a world
- Scene-specific framing and contents
- Missing textures and unknown scene names
- End-to-end renders through main()
"""

import logging
import math

import pytest
from PIL import Image

from pathtracer import scenes
from pathtracer.camera import Camera
from pathtracer.core import Interval, Ray, Vector3
from pathtracer.geometry import BVHNode
from pathtracer.main import main


class TestSceneRegistry:
    """Tests for the scene builders."""

    @pytest.mark.parametrize("name", sorted(set(scenes.SCENES) - {"final_scene"}))
    def test_builds(self, name, tmp_path, monkeypatch):
        """Test each scene returns a camera and a BVH world."""
        monkeypatch.setattr(scenes, "DEFAULT_EARTH_TEXTURE", str(tmp_path / "missing.png"))
        camera, world = scenes.build_scene(name, seed=1)
        assert isinstance(camera, Camera)
        assert isinstance(world, BVHNode)
        camera.initialize()

    def test_final_scene_builds(self, tmp_path, monkeypatch):
        """Test the largest scene builds."""
        monkeypatch.setattr(scenes, "DEFAULT_EARTH_TEXTURE", str(tmp_path / "missing.png"))
        camera, world = scenes.final_scene(seed=1)
        assert camera.image_width == 800
        assert isinstance(world, BVHNode)

    def test_unknown_scene(self):
        """Test an unknown name raises."""
        with pytest.raises(ValueError):
            scenes.build_scene("teapot")

    def test_seeded_scene_is_repeatable(self):
        """Test the same seed places the same spheres."""
        ray = Ray(Vector3(13, 2, 3), Vector3(-13, -1.8, -3))
        _, first = scenes.bouncing_spheres(seed=4)
        _, second = scenes.bouncing_spheres(seed=4)
        a = first.hit(ray, Interval(0.001, math.inf))
        b = second.hit(ray, Interval(0.001, math.inf))
        assert a.t == b.t


class TestSceneContents:
    """Tests for specific scenes."""

    def test_cornell_box_center_hits_something(self):
        """Test the camera looks into the closed box."""
        camera, world = scenes.cornell_box()
        camera.set_jitter(False)
        camera.initialize()
        ray = camera.get_ray(camera.image_width // 2, camera.image_height // 2)
        assert world.hit(ray, Interval(0.001, math.inf)) is not None

    def test_cornell_box_framing(self):
        """Test the standard Cornell box view."""
        camera, _ = scenes.cornell_box()
        assert camera.vfov == 40
        assert camera.look_from == Vector3(278, 278, -800)
        assert camera.background == Vector3(0, 0, 0)

    def test_quads_framing(self):
        """Test the quads scene uses a wide square view."""
        camera, _ = scenes.quads()
        assert camera.vfov == 80
        assert camera.aspect_ratio == 1.0

    def test_missing_default_texture_falls_back(self, tmp_path, caplog, monkeypatch):
        """Test a missing default earth map renders cyan and logs a warning."""
        monkeypatch.setattr(scenes, "DEFAULT_EARTH_TEXTURE", str(tmp_path / "missing.png"))
        with caplog.at_level(logging.WARNING, logger="pathtracer.scenes"):
            camera, world = scenes.earth()
        assert "not found" in caplog.text
        rec = world.hit(Ray(Vector3(0, 0, 12), Vector3(0, 0, -1)), Interval(0.001, math.inf))
        assert rec.material.texture.value(rec.u, rec.v, rec.p) == Vector3(0, 1, 1)

    def test_missing_explicit_texture_raises(self, tmp_path):
        """Test a texture path the caller asked for must exist."""
        with pytest.raises(FileNotFoundError):
            scenes.earth(texture_path=str(tmp_path / "missing.png"))

    def test_earth_texture_loaded(self, tmp_path):
        """Test an existing earth map is used."""
        path = tmp_path / "earth.png"
        Image.new("RGB", (4, 2), (255, 0, 0)).save(path)
        _, world = scenes.earth(texture_path=str(path))
        rec = world.hit(Ray(Vector3(0, 0, 12), Vector3(0, 0, -1)), Interval(0.001, math.inf))
        assert rec.material.texture.value(rec.u, rec.v, rec.p) == Vector3(1, 0, 0)


class TestMain:
    """End-to-end tests of the command-line entry point."""

    def test_renders_image(self, tmp_path):
        """Test a tiny render writes an image and exits cleanly."""
        output = tmp_path / "quads.png"
        code = main(["--scene", "quads", "--output", str(output), "--width", "8",
                     "--samples", "1", "--depth", "2", "--workers", "1", "--seed", "1"])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 8)

    def test_invalid_configuration(self, tmp_path):
        """Test invalid options exit with an error and write nothing."""
        output = tmp_path / "bad.png"
        code = main(["--scene", "quads", "--output", str(output), "--workers", "0"])
        assert code == 2
        assert not output.exists()

    def test_texture_option_reaches_scene(self, tmp_path):
        """Test --texture selects the earth map used by the render."""
        texture = tmp_path / "earth.png"
        Image.new("RGB", (4, 2), (255, 0, 0)).save(texture)
        output = tmp_path / "earth_out.png"
        code = main(["--scene", "earth", "--output", str(output), "--texture", str(texture),
                     "--width", "16", "--samples", "1", "--depth", "2", "--workers", "1",
                     "--seed", "1", "--quiet"])
        assert code == 0
        with Image.open(output) as img:
            # The globe fills the image center; red survives gamma and quantization.
            r, g, b = img.convert("RGB").getpixel((8, 4))
            assert r > 0 and g == 0 and b == 0

    def test_missing_texture_option_is_an_error(self, tmp_path):
        """Test a missing --texture file exits with an error and writes nothing."""
        output = tmp_path / "earth_out.png"
        code = main(["--scene", "earth", "--output", str(output),
                     "--texture", str(tmp_path / "missing.png"), "--width", "8"])
        assert code == 2
        assert not output.exists()
