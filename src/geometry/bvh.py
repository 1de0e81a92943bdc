# src/geometry/bvh.py
import random
from typing import List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node over a list of hittables.

    Each node picks a random split axis, sorts its span of objects by the
    minimum of their bounding boxes on that axis and splits at the middle
    index. A single object fills both children. The tree is never modified
    after construction.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int, rng: Optional[random.Random] = None):
        if end <= start:
            raise ValueError("Cannot build a BVH over an empty list of objects")
        if rng is None:
            rng = random.Random()

        axis = rng.randint(0, 2)

        def key(obj):
            return obj.bounding_box().axis(axis).min

        object_span = end - start

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if key(objects[start]) < key(objects[start + 1]):
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @classmethod
    def from_list(cls, world, rng: Optional[random.Random] = None) -> "BVHNode":
        # Build over a copy; the caller's list keeps its order.
        objects = list(world.objects)
        return cls(objects, 0, len(objects), rng)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)
        # The right subtree may only report hits closer than the left one.
        right_t = Interval(ray_t.min, hit_left.t if hit_left is not None else ray_t.max)
        hit_right = self.right.hit(ray, right_t)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)
