# src/materials/dielectric.py
import math
from typing import Tuple
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water) with index of refraction ref_idx.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, refraction_ratio)

        return Ray(rec.p, direction, ray_in.time), attenuation

def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
