# materials/metal.py
from typing import Optional, Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Metal material with mirror reflection blurred by fuzz (clamped to 1).
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Fuzz pushed the ray below the surface

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz})"
