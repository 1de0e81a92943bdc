# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A moving sphere travels linearly from its first center (time 0) to its
    second center (time 1); use Sphere.moving() to build one.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        self.center_vec = Vector3(0, 0, 0)
        self.is_moving = False
        rvec = Vector3(self.radius, self.radius, self.radius)
        self.box = AABB.from_points(center - rvec, center + rvec)

    @classmethod
    def moving(cls, center1: Vector3, center2: Vector3, radius: float, material) -> "Sphere":
        sphere = cls(center1, radius, material)
        sphere.center_vec = center2 - center1
        sphere.is_moving = True
        rvec = Vector3(sphere.radius, sphere.radius, sphere.radius)
        box1 = AABB.from_points(center1 - rvec, center1 + rvec)
        box2 = AABB.from_points(center2 - rvec, center2 + rvec)
        sphere.box = AABB.surrounding_box(box1, box2)
        return sphere

    def center_at(self, time: float) -> Vector3:
        if not self.is_moving:
            return self.center
        return self.center + self.center_vec * time

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        if self.radius > 0:
            outward_normal = (rec.p - center) / self.radius
        else:
            # Tangential hit on a point sphere; face the ray.
            outward_normal = -ray.direction.normalize()
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box

def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to equirectangular (u, v) coordinates.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1:
        <1 0 0> -> <0.50 0.50>      <-1  0  0> -> <0.00 0.50>
        <0 1 0> -> <0.50 1.00>      < 0 -1  0> -> <0.50 0.00>
        <0 0 1> -> <0.25 0.50>      < 0  0 -1> -> <0.75 0.50>
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
