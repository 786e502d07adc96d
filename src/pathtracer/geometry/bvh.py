# src/geometry/bvh.py
from typing import List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.interval import Interval
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over objects[start:end].

    Each level sorts its range by the lower bound of the longest axis of the
    range's box and bisects it at the middle index. The sort is stable, so
    the tree shape depends only on the input order. A node's box is the box
    of its whole range, which equals the union of its children's boxes.

    objects[start:end] is reordered in place.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int):
        object_span = end - start
        if object_span <= 0:
            raise ValueError(f"Cannot build a BVH over an empty range [{start}, {end})")

        self.box = AABB.EMPTY
        for i in range(start, end):
            self.box = AABB.surrounding_box(self.box, objects[i].bounding_box())

        axis = self.box.longest_axis()

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            objects[start:end] = sorted(
                objects[start:end],
                key=lambda obj: obj.bounding_box().axis_interval(axis).min)

            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid)
            self.right = BVHNode(objects, mid, end)

    @classmethod
    def from_list(cls, objects) -> "BVHNode":
        """
        Builds a tree over a copy of a HittableList's (or plain list's) objects.
        """
        items = list(getattr(objects, "objects", objects))
        return cls(items, 0, len(items))

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t, rng)
        # A one-object leaf holds the same object twice; query it once so
        # stochastic hittables such as media draw a single sample.
        if self.right is self.left:
            return hit_left

        # The right child only matters if it is closer than the left hit.
        right_t = Interval(ray_t.min, hit_left.t if hit_left else ray_t.max)
        hit_right = self.right.hit(ray, right_t, rng)

        if hit_left and hit_right:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_left or hit_right

    def bounding_box(self) -> AABB:
        return self.box
