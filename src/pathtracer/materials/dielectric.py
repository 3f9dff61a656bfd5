# materials/dielectric.py
import math
from typing import Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    ref_idx is the index of refraction relative to the surrounding air.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Vector3, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or rng.random() < reflectance(cos_theta, refraction_ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return attenuation, Ray(rec.point, direction)

    def __repr__(self) -> str:
        return f"Dielectric(ref_idx={self.ref_idx})"


def reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.

    r0 is the same for ref_idx and 1/ref_idx, so either side of the interface
    can be passed.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
