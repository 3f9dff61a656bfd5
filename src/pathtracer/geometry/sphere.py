import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The radius must be positive; a zero radius divides by zero when the
    normal is computed.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # The minus root is the nearer one since a > 0
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord(t=root, material=self.material)
        rec.point = ray.point_at(root)
        outward_normal = (rec.point - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material!r})"
