# renderer/integrator.py
"""
Recursive radiance estimator.

Each call follows one light path backwards from the camera: find the nearest
surface, let its material scatter the ray, and multiply the attenuation into
the radiance carried by the scattered ray. Paths that miss everything pick up
the sky gradient; paths that are absorbed or run out of depth carry nothing.
"""
import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable

# Lower bound of the hit interval. Starting slightly above 0 keeps a
# scattered ray from re-hitting the surface it leaves ("shadow acne").
T_MIN = 0.001
T_MAX = math.inf

MAX_DEPTH = 50

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def radiance(ray: Ray, world: Hittable, depth: int, rng: np.random.Generator) -> Vector3:
    """
    Estimates the colour carried back along ray.

    Args:
        ray: The ray to trace.
        world: Anything with hit(ray, t_min, t_max), normally a HittableList.
        depth: Remaining bounces. Below zero the path is cut off and
            contributes black.
        rng: Random source handed to the materials.

    Returns:
        The RGB radiance estimate as a Vector3.
    """
    if depth < 0:
        return BLACK

    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is None:
        return sky_color(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK

    attenuation, scattered_ray = scattered
    return attenuation * radiance(scattered_ray, world, depth - 1, rng)
