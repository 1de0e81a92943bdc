# materials/presets.py
from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Air inside glass: the relative index is inverted.
        return Dielectric(1.0 / 1.5)

class ColorPresets:
    """Common colors."""

    WHITE = Color(1.0, 1.0, 1.0)
    SKY_BLUE = Color(0.5, 0.7, 1.0)
    LIGHT_GRAY = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    MOSS = Color(0.2, 0.3, 0.1)
    BROWN = Color(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, scale: float = 0.32) -> CheckerTexture:
        """Create a 3D checker texture with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.MOSS
        if color2 is None:
            color2 = ColorPresets.LIGHT_GRAY
        return CheckerTexture.from_colors(scale, color1, color2)
