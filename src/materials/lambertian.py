# materials/lambertian.py

from typing import Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters; returns (scattered_ray, attenuation).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        return scattered, self.get_texture_color(rec)
