# materials/dielectric.py
import math
import random
from typing import Tuple
from lumen.core.ray import Ray
from lumen.core.vector import Color, Vector3
from lumen.core.utils import reflect, refract, schlick
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material (glass, water...). Reflects or refracts, never absorbs.

    refractive_index is relative to the enclosing medium, so a bubble of air in
    glass is Dielectric(1.0 / 1.5).
    """
    def __init__(self, refractive_index: float):
        self.refractive_index = refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Color, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refractive_index if rec.front_face else self.refractive_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return attenuation, Ray(rec.p, direction)

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"
