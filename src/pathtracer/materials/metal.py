import random
from typing import Optional, Tuple, Union

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector, reflect
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz in [0, 1] is the radius of the sphere the reflected direction is
    perturbed within; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        if not 0.0 <= fuzz <= 1.0:
            raise ValueError(f"Metal fuzz must be within [0, 1], got {fuzz}")
        self.texture = as_texture(albedo)
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec, rng=None) -> Optional[Tuple[Ray, Color]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        reflected = reflected + random_unit_vector(rng or random) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        # Absorb the ray if fuzz pushed it below the surface
        if scattered.direction.dot(rec.normal) <= 0:
            return None
        return scattered, self.texture.value(rec.u, rec.v, rec.p)
