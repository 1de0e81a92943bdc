# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    fuzz is clamped to [0, 1]; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        super().__init__(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        reflected = ray_in.direction.normalize().reflect(rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.get_texture_color(rec)

        return None  # Absorb the ray if it does not scatter forward
