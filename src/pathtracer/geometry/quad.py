from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList

# Rays closer to parallel than this are treated as missing the plane.
PARALLEL_EPSILON = 1e-8

UNIT_INTERVAL = Interval(0.0, 1.0)


class Quad(Hittable):
    """
    Planar parallelogram with corner q and edges u and v.

    The plane is stored as normal . p = d; w is the helper that recovers the
    planar (alpha, beta) coordinates of a hit point.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        self.w = n / n.dot(n)

        # Union over both diagonals; padding keeps the flat axis non-degenerate.
        self.bbox = AABB.surrounding_box(
            AABB.from_points(q, q + u + v),
            AABB.from_points(q + u, q + v),
        )

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = ray.at(t)
        planar_hitpt = intersection - self.q
        alpha = self.w.dot(planar_hitpt.cross(self.v))
        beta = self.w.dot(self.u.cross(planar_hitpt))
        if not is_interior(alpha, beta):
            return None

        rec = HitRecord(t=t, p=intersection, u=alpha, v=beta, material=self.material)
        rec.set_face_normal(ray, self.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


def is_interior(alpha: float, beta: float) -> bool:
    return UNIT_INTERVAL.contains(alpha) and UNIT_INTERVAL.contains(beta)


def make_box(a: Vector3, b: Vector3, material) -> HittableList:
    """
    Returns the six quads enclosing the box with opposite corners a and b.
    """
    sides = HittableList()

    lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0.0, 0.0)
    dy = Vector3(0.0, hi.y - lo.y, 0.0)
    dz = Vector3(0.0, 0.0, hi.z - lo.z)

    sides.add(Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom
    return sides
