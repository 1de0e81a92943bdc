# materials/texture_loader.py
import os
from typing import Tuple
from PIL import Image, UnidentifiedImageError
import numpy as np

BYTES_PER_PIXEL = 3

class ImageBuffer:
    """
    An RGB8 pixel buffer with row 0 at the top of the image.
    """
    def __init__(self, data: np.ndarray):
        if data.ndim != 3 or data.shape[2] != BYTES_PER_PIXEL:
            raise ValueError(f"Expected an (height, width, 3) array, got shape {data.shape}")
        self.data = np.ascontiguousarray(data, dtype=np.uint8)
        self.height, self.width = self.data.shape[:2]
        self.bytes_per_scanline = self.width * BYTES_PER_PIXEL

    def pixel_data(self, x: int, y: int) -> Tuple[int, int, int]:
        """
        Returns the RGB bytes of the pixel at (x, y). Coordinates outside the
        image are clamped to the nearest edge row/column.
        """
        x = _clamp(x, 0, self.width)
        y = _clamp(y, 0, self.height)
        r, g, b = self.data[y, x]
        return int(r), int(g), int(b)

def _clamp(x: int, low: int, high: int) -> int:
    # Clamp to [low, high).
    if x < low:
        return low
    if x < high:
        return x
    return high - 1

def load_image(image_path: str) -> ImageBuffer:
    """
    Load an image file as an RGB8 buffer, converting other modes to RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageBuffer holding the decoded pixels

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    return ImageBuffer(data)
