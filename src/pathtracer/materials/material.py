# materials/material.py
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3

BLACK = Vector3(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses implement scatter() and, for light
    sources, emitted().
    """
    def scatter(self, ray_in: Ray, rec, rng=None) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return BLACK


class Empty(Material):
    """
    Absorbs everything and emits nothing. Stands in wherever a hit record
    needs a material but will never be shaded.
    """
    def scatter(self, ray_in: Ray, rec, rng=None) -> Optional[Tuple[Ray, Color]]:
        return None
