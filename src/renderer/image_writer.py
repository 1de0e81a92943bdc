# renderer/image_writer.py
import os
from typing import TextIO

import numpy as np
from PIL import Image

def ppm_header(width: int, height: int) -> str:
    return f"P3\n{width} {height}\n255\n"

def write_ppm(stream: TextIO, image: np.ndarray):
    """
    Write an (height, width, 3) uint8 raster as a plain-text PPM: the header,
    then one "R G B" line per pixel in row-major order.
    """
    height, width = image.shape[:2]
    stream.write(ppm_header(width, height))
    for row in image:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))

def save_image(path: str, image: np.ndarray):
    """
    Save a raster to path. ".ppm" files are written as plain-text PPM, any
    other suffix is encoded by Pillow.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if path.lower().endswith(".ppm"):
        with open(path, "w", newline="\n") as f:
            write_ppm(f, image)
        return
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
