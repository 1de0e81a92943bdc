# camera/camera.py
import math
from core.vector import Vector3, Point3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    A thin-lens camera. Holds the view and render settings and generates
    jittered sample rays for each pixel.

    Angles (vfov, defocus_angle) are in degrees. Call initialize() after
    changing any attribute; the renderer does this before every render.
    """
    def __init__(self, aspect_ratio: float = 1.0, image_width: int = 100,
                 samples_per_pixel: int = 10, max_depth: int = 10,
                 vfov: float = 90.0, lookfrom: Point3 = None, lookat: Point3 = None,
                 vup: Vector3 = None, defocus_angle: float = 0.0, focus_dist: float = 10.0):
        self.aspect_ratio = aspect_ratio        # Ratio of image width over height
        self.image_width = image_width          # Rendered image width in pixels
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth              # Maximum number of ray bounces
        self.vfov = vfov                        # Vertical field of view
        self.lookfrom = lookfrom if lookfrom is not None else Point3(0, 0, -1)
        self.lookat = lookat if lookat is not None else Point3(0, 0, 0)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle      # Cone angle of rays through each pixel
        self.focus_dist = focus_dist            # Distance to the plane of perfect focus
        self.initialize()

    def initialize(self):
        """Derives the image height, camera basis and viewport from the settings."""
        if self.image_width < 1:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.center = self.lookfrom

        # Viewport dimensions at the focus plane
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * self.image_width / self.image_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        viewport_u = self.u * viewport_width    # Across the horizontal edge
        viewport_v = -self.v * viewport_height  # Down the vertical edge

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center - self.w * self.focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def pixel_center(self, i: int, j: int) -> Point3:
        return self.pixel00_loc + self.pixel_delta_u * i + self.pixel_delta_v * j

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        A randomly sampled ray through pixel (i, j), originating from the
        defocus disk and emitted at a random time for motion blur.
        """
        pixel_sample = self.pixel_center(i, j) + self.pixel_sample_square(rng)

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        ray_direction = pixel_sample - ray_origin
        return Ray(ray_origin, ray_direction, rng.random())

    def pixel_sample_square(self, rng) -> Vector3:
        """A random offset within the square surrounding a pixel."""
        px = -0.5 + rng.random()
        py = -0.5 + rng.random()
        return self.pixel_delta_u * px + self.pixel_delta_v * py

    def defocus_disk_sample(self, rng) -> Point3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
