from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.medium import ConstantMedium
from pathtracer.geometry.quad import Quad, make_box
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList

__all__ = [
    "BVHNode",
    "ConstantMedium",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Quad",
    "RotateY",
    "Sphere",
    "Translate",
    "make_box",
]
