# camera/camera.py
import logging
import math
import numbers
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

import numpy as np
from tqdm import tqdm

from lumen.core.interval import Interval
from lumen.core.ray import Ray
from lumen.core.utils import degrees_to_radians, random_in_unit_disk
from lumen.core.vector import Color, Vector3
from lumen.geometry.hittable import Hittable
from lumen.renderer.tone_mapping import encode_image

logger = logging.getLogger(__name__)

# ray_color recurses once per bounce, keep well below the interpreter's recursion limit.
MAX_DEPTH_LIMIT = 500

WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)


class AntiAliasing(Enum):
    """How sample positions are chosen inside a pixel."""
    NONE = "none"        # a single ray through the pixel center
    RANDOM = "random"    # uniformly jittered samples
    UNIFORM = "uniform"  # stratified k x k grid of sub-pixel centers


@dataclass
class CameraConfig:
    """Everything needed to build a Camera."""
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    vertical_fov_degrees: float = 90.0
    look_from: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_distance: float = 1.0
    samples_per_pixel: int = 10
    max_depth: int = 10
    anti_aliasing: AntiAliasing = AntiAliasing.RANDOM
    background: Color = field(default_factory=lambda: Vector3(0.5, 0.7, 1.0))
    # Minimum hit distance for every ray, suppresses self-intersection.
    ray_epsilon: float = 0.001
    seed: Optional[int] = None

    @property
    def image_height(self) -> int:
        # Halves round up.
        return max(1, int(self.image_width / self.aspect_ratio + 0.5))

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot produce an image."""
        if not isinstance(self.image_width, numbers.Integral) or self.image_width <= 0:
            raise ValueError(f"image_width must be a positive integer, got {self.image_width!r}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio!r}")
        if not 0 < self.vertical_fov_degrees < 180:
            raise ValueError(
                f"vertical_fov_degrees must be in (0, 180), got {self.vertical_fov_degrees!r}")
        if not isinstance(self.samples_per_pixel, numbers.Integral) or self.samples_per_pixel < 1:
            raise ValueError(
                f"samples_per_pixel must be an integer of at least 1, got {self.samples_per_pixel!r}")
        if (not isinstance(self.max_depth, numbers.Integral)
                or not 0 <= self.max_depth <= MAX_DEPTH_LIMIT):
            raise ValueError(
                f"max_depth must be an integer in [0, {MAX_DEPTH_LIMIT}], got {self.max_depth!r}")
        if self.focus_distance <= 0:
            raise ValueError(f"focus_distance must be positive, got {self.focus_distance!r}")
        if self.defocus_angle < 0:
            raise ValueError(f"defocus_angle must be non-negative, got {self.defocus_angle!r}")
        if self.ray_epsilon <= 0:
            raise ValueError(f"ray_epsilon must be positive, got {self.ray_epsilon!r}")
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ValueError("look_from and look_at must be different points")
        if self.up.cross(view).near_zero():
            raise ValueError("up must not be parallel to the viewing direction")


class Camera:
    """
    Positionable thin-lens camera. Builds the pixel grid once, then traces
    sample rays through it and shades them recursively.
    """
    def __init__(self, config: CameraConfig, rng: Optional[random.Random] = None):
        config.validate()
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

        self.image_width = config.image_width
        self.image_height = config.image_height
        self.samples_per_pixel = config.samples_per_pixel
        self.max_depth = config.max_depth
        self.anti_aliasing = config.anti_aliasing
        self.center = config.look_from

        self.update_camera()

    def update_camera(self):
        """Computes the camera basis, the pixel grid and the defocus disk."""
        config = self.config

        theta = degrees_to_radians(config.vertical_fov_degrees)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * config.focus_distance
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis: w points backwards, u to the right, v up.
        self.w = (config.look_from - config.look_at).normalize()
        self.u = config.up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Viewport edges; v runs down the image since rows are stored top to bottom.
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * config.focus_distance
                               - viewport_u * 0.5
                               - viewport_v * 0.5)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        self.defocus_angle = config.defocus_angle
        if self.defocus_angle > 0:
            defocus_radius = config.focus_distance * math.tan(
                degrees_to_radians(self.defocus_angle / 2))
            self.defocus_disk_u = self.u * defocus_radius
            self.defocus_disk_v = self.v * defocus_radius
        else:
            self.defocus_disk_u = None
            self.defocus_disk_v = None

        logger.debug(
            "Camera %dx%d, viewport %.4f x %.4f, pixel00 at %r",
            self.image_width, self.image_height, viewport_width, viewport_height, self.pixel00_loc,
        )

    def defocus_disk_sample(self) -> Vector3:
        """Random ray origin on the lens disk."""
        p = random_in_unit_disk(self.rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def get_ray(self, i: int, j: int, offset: Tuple[float, float] = (0.0, 0.0)) -> Ray:
        """
        Ray from the camera (or a point on its lens) through pixel column i,
        row j, displaced from the pixel center by offset in pixel units.
        """
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset[0])
                        + self.pixel_delta_v * (j + offset[1]))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin)

    def sample_count(self) -> int:
        """Number of rays traced per pixel under the current anti-aliasing mode."""
        if self.anti_aliasing is AntiAliasing.NONE:
            return 1
        if self.anti_aliasing is AntiAliasing.UNIFORM:
            return math.isqrt(self.samples_per_pixel) ** 2
        return self.samples_per_pixel

    def sample_offsets(self) -> Iterator[Tuple[float, float]]:
        """Sub-pixel offsets in [-0.5, 0.5) for one pixel."""
        if self.anti_aliasing is AntiAliasing.NONE:
            yield 0.0, 0.0
        elif self.anti_aliasing is AntiAliasing.UNIFORM:
            k = math.isqrt(self.samples_per_pixel)
            for sy in range(k):
                for sx in range(k):
                    yield (sx + 0.5) / k - 0.5, (sy + 0.5) / k - 0.5
        else:
            for _ in range(self.samples_per_pixel):
                yield self.rng.random() - 0.5, self.rng.random() - 0.5

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Color:
        """Radiance carried back along ray, following at most depth bounces."""
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, Interval(self.config.ray_epsilon, math.inf))
        if rec is not None:
            emitted = rec.material.emitted(rec)
            scattered = rec.material.scatter(ray, rec, self.rng)
            if scattered is None:
                return emitted
            attenuation, scattered_ray = scattered
            return emitted + attenuation * self.ray_color(scattered_ray, depth - 1, world)

        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return WHITE * (1.0 - a) + self.config.background * a

    def render_pixel(self, i: int, j: int, world: Hittable) -> Color:
        """Average linear color of pixel (i, j), not yet gamma corrected."""
        color_sum = Vector3(0.0, 0.0, 0.0)
        count = 0
        for offset in self.sample_offsets():
            color_sum = color_sum + self.ray_color(self.get_ray(i, j, offset), self.max_depth, world)
            count += 1
        return color_sum / count

    def render(self, world: Hittable, progress: bool = True) -> np.ndarray:
        """
        Render the world into a (height, width, 3) uint8 array, rows top to bottom.
        """
        accumulated = np.zeros((self.image_height, self.image_width, 3), dtype=np.float64)

        start = time.perf_counter()
        for j in tqdm(range(self.image_height), desc="Scan-lines", unit="line",
                      disable=not progress, leave=False):
            for i in range(self.image_width):
                accumulated[j, i] = tuple(self.render_pixel(i, j, world))
        elapsed = time.perf_counter() - start

        logger.info(
            "Rendered %dx%d (%s, %d spp, depth %d) in %.2fs",
            self.image_width, self.image_height, self.anti_aliasing.value,
            self.sample_count(), self.max_depth, elapsed,
        )
        return encode_image(accumulated)
