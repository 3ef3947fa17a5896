# geometry/hittable.py
from typing import TYPE_CHECKING, Optional
from lumen.core.interval import Interval
from lumen.core.vector import Vector3
from lumen.core.ray import Ray

if TYPE_CHECKING:
    from lumen.materials.material import Material


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material: "Material" = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit surface normal, facing the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outside of the surface
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.

        outward_normal is expected to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with parameter inside ray_t, or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
