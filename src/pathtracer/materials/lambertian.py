# materials/lambertian.py
from typing import Tuple

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Vector3, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length() < 1e-8:
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.point, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
