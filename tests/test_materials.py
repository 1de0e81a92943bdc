"""Tests for scattering materials."""

import random

import pytest

from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric, reflectance
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets, MetalPresets, TexturePresets
from materials.textures import CheckerTexture


def make_hit(normal=Vector3(0, 0, 1), front_face=True, p=Vector3(0, 0, 0), u=0.0, v=0.0):
    return HitRecord(p=p, normal=normal, t=1.0, u=u, v=v, front_face=front_face)


class TestLambertian:

    def test_scatters_around_normal(self):
        mat = Lambertian(Color(0.1, 0.2, 0.3))
        rng = random.Random(0)
        rec = make_hit()
        for _ in range(100):
            scattered, attenuation = mat.scatter(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1), 0.25), rec, rng)
            assert scattered.origin == rec.p
            assert scattered.direction.dot(rec.normal) >= 0
            assert scattered.time == 0.25
            assert attenuation == Color(0.1, 0.2, 0.3)

    def test_degenerate_direction_falls_back_to_normal(self, scripted_rng):
        # The sampled unit vector is exactly the opposite of the normal.
        rng = scripted_rng(0.0, 0.0, -0.5)
        rec = make_hit()
        scattered, _ = Lambertian(Color(1, 1, 1)).scatter(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), rec, rng)
        assert scattered.direction == rec.normal

    def test_textured_albedo(self):
        checker = CheckerTexture.from_colors(1.0, Color(1, 0, 0), Color(0, 1, 0))
        mat = Lambertian(checker)
        rng = random.Random(1)
        _, even = mat.scatter(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), make_hit(p=Vector3(0.5, 0.5, 0.5)), rng)
        _, odd = mat.scatter(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), make_hit(p=Vector3(1.5, 0.5, 0.5)), rng)
        assert even == Color(1, 0, 0)
        assert odd == Color(0, 1, 0)


class TestMetal:

    def test_fuzz_is_clamped(self):
        assert Metal(Color(1, 1, 1), 5.0).fuzz == 1.0
        assert Metal(Color(1, 1, 1), -1.0).fuzz == 0.0
        assert Metal(Color(1, 1, 1), 0.3).fuzz == 0.3

    def test_mirror_reflection(self):
        mat = Metal(Color(0.8, 0.8, 0.8), 0.0)
        ray = Ray(Vector3(-1, 0, 1), Vector3(1, 0, -1))
        scattered, attenuation = mat.scatter(ray, make_hit(), random.Random(0))
        expected = Vector3(1, 0, 1).normalize()
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)
        assert scattered.direction.z == pytest.approx(expected.z)
        assert attenuation == Color(0.8, 0.8, 0.8)

    def test_fuzz_below_surface_is_absorbed(self, scripted_rng):
        # Grazing reflection pushed into the surface by a fuzz vector of -normal.
        mat = Metal(Color(1, 1, 1), 1.0)
        ray = Ray(Vector3(-10, 0, 1), Vector3(1, 0, -0.1))
        assert mat.scatter(ray, make_hit(), scripted_rng(0.0, 0.0, -0.5)) is None

    def test_presets(self):
        assert MetalPresets.mirror().fuzz == 0.0
        assert 0 < MetalPresets.gold().fuzz <= 1


class TestDielectric:

    def test_reflectance_at_normal_incidence(self):
        assert reflectance(1.0, 1.5) == pytest.approx(0.04)
        assert reflectance(0.0, 1.5) == pytest.approx(1.0)

    def test_always_scatters_white(self):
        mat = Dielectric(1.5)
        rng = random.Random(0)
        for front_face in (True, False):
            rec = make_hit(front_face=front_face)
            for _ in range(50):
                result = mat.scatter(Ray(Vector3(1, 0, 5), Vector3(-0.2, 0, -1)), rec, rng)
                assert result is not None
                assert result[1] == Color(1, 1, 1)

    def test_refracts_straight_through_at_normal_incidence(self, scripted_rng):
        mat = Dielectric(1.5)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        scattered, _ = mat.scatter(ray, make_hit(), scripted_rng(0.99))
        assert scattered.direction.x == pytest.approx(0)
        assert scattered.direction.z == pytest.approx(-1)

    def test_reflects_when_draw_is_below_reflectance(self, scripted_rng):
        mat = Dielectric(1.5)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        scattered, _ = mat.scatter(ray, make_hit(), scripted_rng(0.0))
        assert scattered.direction.z == pytest.approx(1)

    def test_total_internal_reflection(self, scripted_rng):
        # Leaving glass at a grazing angle: refraction ratio 1.5, sin > 2/3.
        mat = Dielectric(1.5)
        ray = Ray(Vector3(-1, 0, 1), Vector3(1, 0, -0.2))
        rec = make_hit(front_face=False)
        scattered, _ = mat.scatter(ray, rec, scripted_rng(0.999999))
        assert scattered.direction.z > 0
        assert scattered.direction.x > 0

    def test_presets(self):
        assert DielectricPresets.glass().ref_idx == 1.5
        assert DielectricPresets.air_bubble().ref_idx == pytest.approx(1 / 1.5)
        assert isinstance(TexturePresets.checkerboard(), CheckerTexture)
