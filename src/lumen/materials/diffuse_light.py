# materials/diffuse_light.py
import random
from typing import Optional, Tuple
from lumen.core.ray import Ray
from lumen.core.vector import Color, Vector3
from lumen.geometry.hittable import HitRecord
from lumen.materials.material import Material


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance.
    """
    def __init__(self, emit: Color):
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, rec: HitRecord) -> Color:
        return self.emit

    def __repr__(self) -> str:
        return f"DiffuseLight({self.emit!r})"


class NormalMaterial(Material):
    """
    Debug material that shades a surface by its normal, mapped from [-1, 1] to [0, 1].
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        return None

    def emitted(self, rec: HitRecord) -> Color:
        return (rec.normal + Vector3(1.0, 1.0, 1.0)) * 0.5
