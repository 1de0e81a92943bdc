# renderer/raytracer.py
import os
import random
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

import numpy as np
from tqdm import tqdm

from core.interval import Interval, INFINITY
from core.ray import Ray
from core.vector import Color
from renderer.tone_mapping import resolve_color

# Lower bound skips self-intersections caused by round-off at the ray origin.
HIT_INTERVAL = Interval(0.001, INFINITY)

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient seen by rays that miss the scene."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a

def ray_color(ray: Ray, depth: int, world, rng) -> Color:
    """
    Estimate the light arriving along ray. Each bounce multiplies in the
    material's attenuation; no light is gathered past max depth.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, HIT_INTERVAL)
    if rec is None:
        return background_color(ray)

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return BLACK
    scattered, attenuation = scatter
    return attenuation * ray_color(scattered, depth - 1, world, rng)

def render_row(camera, world, j: int, seed: int) -> np.ndarray:
    """
    Render scanline j into a (width, 3) uint8 array. The row's samples are
    drawn from random.Random(seed + j), so a row renders the same wherever
    it runs.
    """
    rng = random.Random(seed + j)
    row = np.zeros((camera.image_width, 3), dtype=np.uint8)
    for i in range(camera.image_width):
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(camera.samples_per_pixel):
            ray = camera.get_ray(i, j, rng)
            pixel_color = pixel_color + ray_color(ray, camera.max_depth, world, rng)
        row[i] = resolve_color(pixel_color, camera.samples_per_pixel)
    return row

# Scene state of a worker process, set once by the pool initializer.
_worker_scene = None

def _init_worker(camera, world, seed):
    global _worker_scene
    _worker_scene = (camera, world, seed)

def _render_row_in_worker(j: int) -> np.ndarray:
    camera, world, seed = _worker_scene
    return render_row(camera, world, j, seed)

class Renderer:
    """
    Renders a world through a camera into an (height, width, 3) uint8 raster.

    With workers > 1 scanlines are distributed over a process pool. Rows are
    collected in scanline order, and each row seeds its own generator, so the
    image is identical for any worker count.
    """
    def __init__(self, seed: int = 0, workers: Optional[int] = 1, progress: bool = True):
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.seed = seed
        self.workers = workers
        self.progress = progress

    def render(self, camera, world) -> np.ndarray:
        camera.initialize()
        if camera.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {camera.max_depth}")

        height, width = camera.image_height, camera.image_width
        image = np.zeros((height, width, 3), dtype=np.uint8)

        if self.progress:
            print(f"Rendering {width}x{height}, {camera.samples_per_pixel} samples/pixel, "
                  f"max depth {camera.max_depth}, {self.workers} worker(s)", file=sys.stderr)
        start = time.perf_counter()

        if self.workers == 1:
            rows = (render_row(camera, world, j, self.seed) for j in range(height))
            for j, row in enumerate(self._track(rows, height)):
                image[j] = row
        else:
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=(camera, world, self.seed)) as executor:
                # map() yields results in submission order.
                rows = executor.map(_render_row_in_worker, range(height))
                for j, row in enumerate(self._track(rows, height)):
                    image[j] = row

        if self.progress:
            print(f"Done in {time.perf_counter() - start:.2f}s", file=sys.stderr)
        return image

    def _track(self, rows, height):
        if not self.progress:
            return rows
        return tqdm(rows, total=height, desc="Scanlines", unit="row", file=sys.stderr)
