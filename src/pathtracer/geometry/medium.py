import math
import random
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic

# Step past the entry point before looking for the exit point.
EXIT_EPSILON = 0.0001


class ConstantMedium(Hittable):
    """
    Fog or smoke of constant density filling a convex boundary.

    A ray crossing the boundary scatters at an exponentially distributed
    distance, or passes straight through if that distance exceeds the
    chord. The normal and front_face of a medium hit carry no meaning.
    """
    def __init__(self, boundary: Hittable, density: float, albedo):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    @classmethod
    def from_color(cls, boundary: Hittable, density: float, color: Vector3) -> "ConstantMedium":
        return cls(boundary, density, color)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        rng = rng or random

        rec1 = self.boundary.hit(ray, Interval.UNIVERSE, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, Interval(rec1.t + EXIT_EPSILON, math.inf), rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, ray_t.min)
        t_exit = min(rec2.t, ray_t.max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            t=t,
            p=ray.at(t),
            normal=Vector3(1.0, 0.0, 0.0),  # arbitrary
            front_face=True,                # arbitrary
            material=self.phase_function,
        )

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
