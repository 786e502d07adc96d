# src/materials/dielectric.py
import math
import random
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    ref_idx is the refractive index relative to the surrounding medium.
    """
    def __init__(self, ref_idx: float):
        if ref_idx <= 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec, rng=None) -> Optional[Tuple[Ray, Color]]:
        rng = rng or random

        # Determine if we're entering or exiting the material
        ri = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if total_internal_reflection(ri, sin_theta) or schlick(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        # Glass doesn't absorb light
        return Ray(rec.p, direction, ray_in.time), WHITE


def total_internal_reflection(ri: float, sin_theta: float) -> bool:
    """True when Snell's law has no real solution."""
    return ri * sin_theta > 1.0
