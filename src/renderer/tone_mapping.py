# renderer/tone_mapping.py
import math
from typing import Tuple
from core.interval import Interval
from core.vector import Color

# Upper bound stays below 1 so 256 * x never reaches 256.
INTENSITY = Interval(0.000, 0.999)

def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 transform; negative inputs map to 0."""
    if linear_component <= 0:
        return 0.0
    return math.sqrt(linear_component)

def to_byte(component: float) -> int:
    """Map a display-space channel value to [0, 255] without wrapping."""
    if math.isnan(component):
        return 0
    return int(256 * INTENSITY.clamp(component))

def resolve_color(pixel_color: Color, samples_per_pixel: int) -> Tuple[int, int, int]:
    """
    Average the accumulated sample sum, gamma-correct it and convert each
    channel to an output byte.
    """
    scale = 1.0 / samples_per_pixel
    return (to_byte(linear_to_gamma(pixel_color.x * scale)),
            to_byte(linear_to_gamma(pixel_color.y * scale)),
            to_byte(linear_to_gamma(pixel_color.z * scale)))
