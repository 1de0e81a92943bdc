# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    A material's color may come from a texture, sampled at the hit point.
    """
    def __init__(self, albedo: Union[Color, Texture, None] = None):
        # Store either a solid color or a texture.
        if isinstance(albedo, Vector3):
            self.texture = SolidTexture(albedo)
        else:
            self.texture = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def get_texture_color(self, rec: HitRecord) -> Optional[Color]:
        """
        Get the texture color at the hit's surface coordinates and point.
        If no texture is set, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.sample(rec.u, rec.v, rec.p)
