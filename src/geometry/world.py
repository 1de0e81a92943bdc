# src/geometry/world.py
from typing import Optional, List
from core.aabb import AABB, EMPTY_BOX
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

class HittableList(Hittable):
    """
    A list of Hittable objects intersected by linear scan. The bounding box
    grows as objects are added.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.box = EMPTY_BOX
        for obj in objects or ():
            self.add(obj)

    @classmethod
    def from_hittable(cls, obj: Hittable) -> "HittableList":
        return cls([obj])

    def add(self, obj: Hittable):
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())
        self.objects.append(obj)

    def build_bvh(self, rng=None) -> "HittableList":
        """
        Returns a new list wrapping a BVH built over this list's objects.
        """
        return HittableList.from_hittable(BVHNode.from_list(self, rng))

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box

    def __len__(self) -> int:
        return len(self.objects)
