# geometry/world.py
from typing import Iterator, List, Optional
from lumen.core.interval import Interval
from lumen.core.ray import Ray
from lumen.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects, scanned linearly for the nearest hit.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            # Equal t keeps the earlier object.
            if rec is not None and (hit_record is None or rec.t < closest_so_far):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
