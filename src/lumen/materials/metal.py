# materials/metal.py
import random
from typing import Optional, Tuple
from lumen.core.ray import Ray
from lumen.core.vector import Color
from lumen.core.utils import reflect, random_unit_vector
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material


class Metal(Material):
    """
    Metal material with reflective properties. fuzz=0 is a perfect mirror.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
