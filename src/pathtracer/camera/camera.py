# camera/camera.py
import math
import random

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Color, Point3, Vector3


class Camera:
    """
    Look-at camera with a thin-lens defocus disk.

    Configure it through the setters, then call initialize() before asking
    for rays. Once rendering starts the camera is only read, so a single
    instance is shared by every render worker.
    """
    def __init__(self):
        self.aspect_ratio = 1.0
        self.image_width = 100
        self.samples_per_pixel = 10
        self.max_depth = 10
        self.background = Vector3(0.0, 0.0, 0.0)

        self.vfov = 90.0
        self.look_from = Vector3(0.0, 0.0, 0.0)
        self.look_at = Vector3(0.0, 0.0, -1.0)
        self.vup = Vector3(0.0, 1.0, 0.0)

        self.defocus_angle = 0.0
        self.focus_dist = 10.0

        # Random sub-pixel position and shutter time per sample.
        self.jitter = True

        self._initialized = False

    # Setters invalidate the derived basis; initialize() recomputes it.

    def set_aspect_ratio(self, aspect_ratio: float):
        self.aspect_ratio = aspect_ratio
        self._initialized = False

    def set_image_width(self, width: int):
        self.image_width = width
        self._initialized = False

    def set_samples_per_pixel(self, samples: int):
        self.samples_per_pixel = samples
        self._initialized = False

    def set_max_depth(self, depth: int):
        self.max_depth = depth
        self._initialized = False

    def set_background(self, color: Color):
        self.background = color

    def set_jitter(self, enabled: bool):
        self.jitter = enabled

    def set_vfov(self, degrees: float):
        self.vfov = degrees
        self._initialized = False

    def set_look_from(self, point: Point3):
        self.look_from = point
        self._initialized = False

    def set_look_at(self, point: Point3):
        self.look_at = point
        self._initialized = False

    def set_vup(self, up: Vector3):
        self.vup = up
        self._initialized = False

    def set_defocus_angle(self, degrees: float):
        self.defocus_angle = degrees
        self._initialized = False

    def set_focus_dist(self, dist: float):
        self.focus_dist = dist
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    def initialize(self):
        """Derives the viewport basis from the current configuration."""
        if self.image_width < 1:
            raise ValueError(f"Image width must be at least 1, got {self.image_width}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"Samples per pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"Max depth must be at least 1, got {self.max_depth}")

        height = self.image_height
        self.center = self.look_from

        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2) * self.focus_dist
        viewport_width = viewport_height * (self.image_width / height)

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height
        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / height

        # Top-left corner of pixel (0, 0).
        self.viewport_upper_left = (self.center
                                    - self.w * self.focus_dist
                                    - viewport_u / 2
                                    - viewport_v / 2)

        defocus_radius = self.focus_dist * math.tan(math.radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        self._initialized = True

    def get_ray(self, i: int, j: int, rng=None) -> Ray:
        """
        Ray through a random point of pixel (i, j), cast from the defocus
        disk at a random time in the shutter interval.

        With jitter disabled the ray goes through the pixel center at time 0.
        """
        if not self._initialized:
            raise RuntimeError("Camera.initialize() must be called before get_ray()")
        rng = rng or random

        jitter = self.jitter
        if jitter:
            offset_x, offset_y = rng.random(), rng.random()
        else:
            offset_x = offset_y = 0.5
        pixel_sample = (self.viewport_upper_left
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        ray_time = rng.random() if jitter else 0.0
        return Ray(ray_origin, ray_direction, ray_time)

    def defocus_disk_sample(self, rng=None) -> Point3:
        p = random_in_unit_disk(rng or random)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
