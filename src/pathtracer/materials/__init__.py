from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Empty, Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    Perlin,
    SolidColor,
    Texture,
)

__all__ = [
    "CheckerTexture",
    "Dielectric",
    "DiffuseLight",
    "Empty",
    "ImageTexture",
    "Isotropic",
    "Lambertian",
    "Material",
    "Metal",
    "NoiseTexture",
    "Perlin",
    "SolidColor",
    "Texture",
]
