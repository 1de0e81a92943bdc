# src/core/aabb.py
import math
from core.interval import Interval, EMPTY
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """

    def __init__(self, x: Interval = EMPTY, y: Interval = EMPTY, z: Interval = EMPTY):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        # a and b are treated as extrema, in either order.
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z)
        )

    def axis(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def contains(self, p: Vector3) -> bool:
        return self.x.contains(p.x) and self.y.contains(p.y) and self.z.contains(p.z)

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] axis by axis and bail out as soon
        # as it becomes empty. Division by a zero direction component yields
        # +/-inf, which the comparisons below handle.
        t_min = ray_t.min
        t_max = ray_t.max
        origin = ray.origin
        direction = ray.direction
        for a in range(3):
            slab = self.axis(a)
            d = direction[a]
            if d == 0.0:
                inv_d = math.copysign(math.inf, d)
            else:
                inv_d = 1.0 / d
            orig = origin[a]
            t0 = (slab.min - orig) * inv_d
            t1 = (slab.max - orig) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


EMPTY_BOX = AABB(EMPTY, EMPTY, EMPTY)
