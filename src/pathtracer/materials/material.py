# materials/material.py
from typing import Optional, Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built and may be shared by any number of
    primitives.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
