# src/core/aabb.py
from pathtracer.core.interval import Interval
from pathtracer.core.vector import Vector3

# Minimum thickness of any box axis; keeps planar primitives hittable.
PAD_DELTA = 0.0001


class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: Interval = Interval.EMPTY, y: Interval = Interval.EMPTY,
                 z: Interval = Interval.EMPTY, pad: bool = True):
        self.x = x
        self.y = y
        self.z = z
        if pad:
            self._pad_to_minimum()

    def _pad_to_minimum(self):
        if self.x.size() < PAD_DELTA:
            self.x = self.x.expand(PAD_DELTA)
        if self.y.size() < PAD_DELTA:
            self.y = self.y.expand(PAD_DELTA)
        if self.z.size() < PAD_DELTA:
            self.z = self.z.expand(PAD_DELTA)

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """
        Box spanned by two opposite corners, in any order.
        """
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z)),
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.enclosing(box0.x, box1.x),
            Interval.enclosing(box0.y, box1.y),
            Interval.enclosing(box0.z, box1.z),
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Invalid axis: {n}")

    def longest_axis(self) -> int:
        x_size = self.x.size()
        y_size = self.y.size()
        z_size = self.z.size()
        if x_size > y_size and x_size > z_size:
            return 0
        return 1 if y_size > z_size else 2

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] axis by axis.
        t_min = ray_t.min
        t_max = ray_t.max
        for axis in range(3):
            ax = self.axis_interval(axis)
            origin = ray.origin[axis]
            direction = ray.direction[axis]
            if direction == 0.0:
                # Parallel to this slab: either always inside it or never.
                if not ax.contains(origin):
                    return False
                continue
            adinv = 1.0 / direction
            t0 = (ax.min - origin) * adinv
            t1 = (ax.max - origin) * adinv
            if adinv < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY, pad=False)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE, pad=False)
