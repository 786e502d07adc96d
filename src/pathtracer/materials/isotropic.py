import random
from typing import Optional, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Isotropic(Material):
    """
    Phase function of a participating medium: scatters into a uniformly
    random direction, ignoring the hit normal.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    @classmethod
    def from_color(cls, color: Vector3) -> "Isotropic":
        return cls(color)

    def scatter(self, ray_in: Ray, rec, rng=None) -> Optional[Tuple[Ray, Color]]:
        scattered = Ray(rec.p, random_unit_vector(rng or random), ray_in.time)
        return scattered, self.texture.value(rec.u, rec.v, rec.p)
