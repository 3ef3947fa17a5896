# materials/material.py
import random
from typing import Optional, Tuple
from lumen.core.ray import Ray
from lumen.core.vector import Color, Vector3
from lumen.geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable and may be shared by any number of primitives.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, rec: HitRecord) -> Color:
        """
        Radiance emitted at the hit point. Non-emissive materials return black.
        """
        return BLACK
