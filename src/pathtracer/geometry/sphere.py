import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The center may move linearly from center to center + motion over the
    shutter interval; each ray sees it at the ray's own time.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 motion: Optional[Vector3] = None):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be greater than 0, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material
        self.motion = motion

        rvec = Vector3(radius, radius, radius)
        box = AABB.from_points(center - rvec, center + rvec)
        if motion is not None:
            end = center + motion
            box = AABB.surrounding_box(box, AABB.from_points(end - rvec, end + rvec))
        self.bbox = box

    @classmethod
    def moving(cls, center1: Vector3, center2: Vector3, radius: float, material) -> "Sphere":
        return cls(center1, radius, material, motion=center2 - center1)

    def center_at(self, time: float) -> Vector3:
        if self.motion is None:
            return self.center
        return self.center + self.motion * time

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord(t=root, p=ray.at(root), material=self.material)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


def sphere_uv(p: Vector3):
    """
    Maps a point on the unit sphere to (u, v) in [0, 1]^2.

    u is the angle around the Y axis starting from X = -1, v the angle from
    Y = -1 up to Y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
