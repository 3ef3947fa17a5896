# materials/lambertian.py
import random
from typing import Tuple
from lumen.core.ray import Ray
from lumen.core.vector import Color
from lumen.core.utils import random_unit_vector
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.p, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
