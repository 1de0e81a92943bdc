"""Tests for tone mapping, image output and full renders."""

import io
import random

import numpy as np
import pytest
from PIL import Image

import main
from camera.camera import Camera
from core.vector import Vector3, Point3, Color
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from renderer.image_writer import ppm_header, save_image, write_ppm
from renderer.raytracer import Renderer, background_color, render_row
from renderer.tone_mapping import linear_to_gamma, resolve_color, to_byte
from scenes import single_sphere, two_spheres


class TestToneMapping:

    def test_gamma_is_square_root(self):
        assert linear_to_gamma(0.25) == 0.5
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-1.0) == 0.0

    def test_in_range_values_map_to_bytes(self):
        for x in np.linspace(0.0, 0.999, 500):
            assert 0 <= to_byte(float(x)) <= 255

    def test_values_at_or_above_one_saturate(self):
        for x in (0.999, 1.0, 1.5, 1e9, float("inf")):
            assert to_byte(x) == 255

    def test_negative_and_nan_map_to_zero(self):
        assert to_byte(-0.3) == 0
        assert to_byte(float("nan")) == 0

    def test_resolve_color_averages_samples(self):
        # Four samples summing to 1.0 average to 0.25, gamma 0.5, byte 128.
        assert resolve_color(Color(1.0, 0.0, 4.0), 4) == (128, 0, 255)


class TestImageWriter:

    def test_ppm_layout(self):
        image = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
        out = io.StringIO()
        write_ppm(out, image)
        assert out.getvalue() == "P3\n2 1\n255\n1 2 3\n4 5 6\n"

    def test_header(self):
        assert ppm_header(400, 225) == "P3\n400 225\n255\n"

    def test_save_png(self, tmp_path):
        image = np.zeros((3, 4, 3), dtype=np.uint8)
        image[1, 2] = (10, 20, 30)
        path = tmp_path / "out" / "image.png"
        save_image(str(path), image)
        with Image.open(path) as img:
            assert img.size == (4, 3)
            assert img.getpixel((2, 1)) == (10, 20, 30)

    def test_save_ppm(self, tmp_path):
        image = np.full((1, 1, 3), 7, dtype=np.uint8)
        path = tmp_path / "image.ppm"
        save_image(str(path), image)
        assert path.read_text() == "P3\n1 1\n255\n7 7 7\n"


def tiny_scene():
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.5, 0.5, 0.5))))
    world.add(Sphere(Point3(0, 0, -1), 0.5, Lambertian(Color(0.7, 0.3, 0.3))))
    camera = Camera(aspect_ratio=2.0, image_width=12, samples_per_pixel=3, max_depth=4,
                    vfov=90, lookfrom=Point3(0, 0, 0), lookat=Point3(0, 0, -1), focus_dist=1.0)
    return world, camera


class TestRenderer:

    def test_output_shape(self):
        world, camera = tiny_scene()
        image = Renderer(seed=1, progress=False).render(camera, world)
        assert image.shape == (6, 12, 3)
        assert image.dtype == np.uint8

    def test_same_seed_same_image(self):
        world, camera = tiny_scene()
        a = Renderer(seed=5, progress=False).render(camera, world)
        b = Renderer(seed=5, progress=False).render(camera, world)
        assert np.array_equal(a, b)

    def test_parallel_matches_sequential(self):
        world, camera = tiny_scene()
        sequential = Renderer(seed=3, workers=1, progress=False).render(camera, world)
        parallel = Renderer(seed=3, workers=2, progress=False).render(camera, world)
        assert np.array_equal(sequential, parallel)

    def test_parallel_with_bvh(self):
        world, camera = two_spheres()
        camera.image_width = 16
        camera.samples_per_pixel = 2
        camera.max_depth = 3
        sequential = Renderer(seed=0, workers=1, progress=False).render(camera, world.build_bvh(random.Random(0)))
        parallel = Renderer(seed=0, workers=3, progress=False).render(camera, world.build_bvh(random.Random(0)))
        assert np.array_equal(sequential, parallel)

    def test_invalid_settings(self):
        world, camera = tiny_scene()
        camera.max_depth = 0
        with pytest.raises(ValueError):
            Renderer(progress=False).render(camera, world)
        with pytest.raises(ValueError):
            Renderer(workers=-1)

    def test_progress_goes_to_stderr(self, capsys):
        world, camera = tiny_scene()
        camera.image_width = 4
        Renderer(progress=True).render(camera, world)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Done" in captured.err

    def test_sky_only_scene_is_exact_gradient(self):
        # Ground sphere below a camera looking straight up: every ray misses.
        world = HittableList([Sphere(Point3(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5)))])
        camera = Camera(image_width=10, samples_per_pixel=1, max_depth=5, vfov=60,
                        lookfrom=Point3(0, 1, 0), lookat=Point3(0, 2, 0), vup=Vector3(0, 0, -1))
        seed = 11
        image = Renderer(seed=seed, progress=False).render(camera, world)

        for j in range(camera.image_height):
            rng = random.Random(seed + j)
            for i in range(camera.image_width):
                ray = camera.get_ray(i, j, rng)
                assert tuple(image[j, i]) == resolve_color(background_color(ray), 1)

    def test_render_row_is_independent_of_other_rows(self):
        world, camera = tiny_scene()
        image = Renderer(seed=9, progress=False).render(camera, world)
        assert np.array_equal(render_row(camera, world, 4, 9), image[4])


class TestSingleSphereRender:

    def test_center_is_sphere_and_corner_is_sky(self):
        world, camera = single_sphere()
        camera.image_width = 21
        camera.samples_per_pixel = 4
        # With a single bounce allowed, anything that hits the sphere is black.
        camera.max_depth = 1
        image = Renderer(seed=0, progress=False).render(camera, world)
        assert tuple(image[10, 10]) == (0, 0, 0)
        corner = image[0, 0].astype(int)
        assert corner[2] > corner[0] > 0


class TestCommandLine:

    def test_renders_to_file(self, tmp_path):
        out = tmp_path / "single.ppm"
        code = main.main(["--scene", "single_sphere", "--width", "6", "--samples", "1",
                          "--max-depth", "2", "--output", str(out), "--quiet"])
        assert code == 0
        lines = out.read_text().splitlines()
        assert lines[:3] == ["P3", "6 6", "255"]
        assert len(lines) == 3 + 36

    def test_renders_ppm_to_stdout(self, capsys):
        code = main.main(["--scene", "single_sphere", "--width", "4", "--samples", "1",
                          "--max-depth", "2", "--quiet"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("P3\n4 4\n255\n")

    def test_quality_preset_with_override(self):
        args = main.parse_args(["--scene", "two_spheres", "--quality", "preview", "--samples", "2"])
        _, camera = main.build_scene(args)
        assert camera.samples_per_pixel == 2
        assert camera.max_depth == main.QUALITY_LEVELS["preview"]["bounces"]
        assert camera.image_width == main.QUALITY_LEVELS["preview"]["width"]

    def test_missing_texture_aborts_without_output(self, tmp_path, capsys):
        out = tmp_path / "earth.png"
        code = main.main(["--scene", "earth", "--texture", str(tmp_path / "missing.jpg"),
                          "--output", str(out), "--quiet"])
        assert code == 1
        assert not out.exists()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR" in captured.err

    def test_earth_scene_with_texture(self, tmp_path):
        texture = tmp_path / "map.png"
        Image.new("RGB", (8, 4), color=(0, 0, 255)).save(texture)
        out = tmp_path / "earth.png"
        code = main.main(["--scene", "earth", "--texture", str(texture), "--width", "8",
                          "--samples", "1", "--max-depth", "2", "--output", str(out), "--quiet"])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (8, 4)
