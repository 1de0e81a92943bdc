# core/utils.py
import math
from core.vector import Vector3

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_on_hemisphere(normal: Vector3, rng) -> Vector3:
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk in the z = 0 plane.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.length_squared() < 1.0:
            return p
