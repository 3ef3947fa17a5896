# geometry/plane.py
from typing import Optional
from lumen.core.interval import Interval
from lumen.core.vector import Vector3
from lumen.core.ray import Ray
from lumen.geometry.hittable import Hittable, HitRecord

# Below this |D.n| the ray is treated as parallel to the plane.
PARALLEL_EPSILON = 1e-6


class Plane(Hittable):
    """
    An infinite plane through `point` with the given normal (default +y).
    """
    def __init__(self, point: Vector3, material, normal: Vector3 = None):
        self.point = point
        self.normal = (normal if normal is not None else Vector3(0, 1, 0)).normalize()
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if not ray_t.contains(t):
            return None

        rec = HitRecord(t=t, p=ray.at(t), material=self.material)
        rec.set_face_normal(ray, self.normal)
        return rec

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, normal={self.normal!r})"
