# geometry/world.py
from typing import Iterable, List, Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere


class HittableList(Hittable):
    """
    An ordered list of Hittable objects queried for the nearest hit.

    The list is filled during scene setup and only read while rendering.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record


def build_scene(entries: Iterable[Tuple[Tuple[Vector3, float], object]]) -> HittableList:
    """
    Builds the world from ((center, radius), material) pairs.

    Materials may be shared between entries. The entries are not validated;
    see pathtracer.scenes.validate_entries.
    """
    world = HittableList()
    for (center, radius), material in entries:
        world.add(Sphere(center, radius, material))
    return world
