# camera/camera.py
import math

import numpy as np

from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk


class Camera:
    """
    Positionable thin-lens camera.

    Maps normalized image coordinates (s, t) in [0, 1] x [0, 1], with (0, 0)
    at the lower left, to world-space rays. An aperture of 0 gives a pinhole
    camera that needs no random source.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0

        # Right-handed orthonormal basis; the camera looks along -w
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        h = math.tan(math.radians(vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = look_from
        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng: np.random.Generator = None) -> Ray:
        """Generates a ray, with depth of field when the aperture is open."""
        target = (self.lower_left_corner +
                  self.horizontal * s +
                  self.vertical * t)

        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)
