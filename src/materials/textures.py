# materials/textures.py
import math
from core.interval import Interval
from core.vector import Vector3, Color
from materials.texture_loader import ImageBuffer, load_image

class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Vector3) -> Color:
        """Sample the texture at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern. Space is divided into cubes of side `scale`; the
    parity of the cube index picks the even or the odd texture.
    """
    def __init__(self, scale: float, even: Texture, odd: Texture):
        self.inv_scale = 1.0 / scale
        self.even = even
        self.odd = odd

    @classmethod
    def from_colors(cls, scale: float, color1: Color, color2: Color) -> "CheckerTexture":
        return cls(scale, SolidTexture(color1), SolidTexture(color2))

    def sample(self, u: float, v: float, p: Vector3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.sample(u, v, p)
        return self.odd.sample(u, v, p)

_UNIT = Interval(0.0, 1.0)
_COLOR_SCALE = 1.0 / 255.0

class ImageTexture(Texture):
    """A texture from an image file, mapped with (u, v) over the whole image."""
    def __init__(self, image: ImageBuffer):
        self.image = image

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        return cls(load_image(image_path))

    def sample(self, u: float, v: float, p: Vector3) -> Color:
        u = _UNIT.clamp(u)
        v = 1.0 - _UNIT.clamp(v)  # Image row 0 is the top

        i = int(u * self.image.width)
        j = int(v * self.image.height)
        r, g, b = self.image.pixel_data(i, j)
        return Color(r * _COLOR_SCALE, g * _COLOR_SCALE, b * _COLOR_SCALE)
