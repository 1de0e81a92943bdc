# scenes.py
import random
from typing import Tuple

from camera.camera import Camera
from core.vector import Vector3, Point3, Color
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets
from materials.textures import ImageTexture

def random_spheres(seed: int = 0) -> Tuple[HittableList, Camera]:
    """
    A checkered ground, a grid of small random spheres (some moving) and three
    large feature spheres, wrapped in a BVH.
    """
    rng = random.Random(seed)
    world = HittableList()

    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere.moving(center, center2, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0
    )
    return world.build_bvh(rng), camera

def two_spheres(seed: int = 0) -> Tuple[HittableList, Camera]:
    """Two large spheres sharing one checker texture."""
    world = HittableList()
    checker = TexturePresets.checkerboard(scale=0.8)
    world.add(Sphere(Point3(0, -10, 0), 10, Lambertian(checker)))
    world.add(Sphere(Point3(0, 10, 0), 10, Lambertian(checker)))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(13, 2, 3),
        lookat=Point3(0, 0, 0),
        defocus_angle=0.0
    )
    return world, camera

def earth(texture_path: str, seed: int = 0) -> Tuple[HittableList, Camera]:
    """A globe wrapped in an equirectangular image texture."""
    globe = Sphere(Point3(0, 0, 0), 2, Lambertian(ImageTexture.from_file(texture_path)))

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=100,
        max_depth=50,
        vfov=20,
        lookfrom=Point3(0, 0, 12),
        lookat=Point3(0, 0, 0),
        defocus_angle=0.0
    )
    return HittableList.from_hittable(globe), camera

def single_sphere(seed: int = 0) -> Tuple[HittableList, Camera]:
    """A white diffuse unit sphere at the origin seen from +z."""
    world = HittableList()
    world.add(Sphere(Point3(0, 0, 0), 1.0, Lambertian(ColorPresets.WHITE)))

    camera = Camera(
        aspect_ratio=1.0,
        image_width=101,
        samples_per_pixel=10,
        max_depth=10,
        vfov=90,
        lookfrom=Point3(0, 0, 3),
        lookat=Point3(0, 0, 0),
        defocus_angle=0.0,
        focus_dist=1.0
    )
    return world, camera

SCENES = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "earth": earth,
    "single_sphere": single_sphere,
}
