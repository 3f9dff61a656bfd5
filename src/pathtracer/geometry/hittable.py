from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, t: float = 0.0, point: Vector3 = None, normal: Vector3 = None,
                 front_face: bool = True, material=None):
        self.t = t                    # Ray parameter that produced point
        self.point = point            # Intersection point
        self.normal = normal          # Unit normal, always against the ray
        self.front_face = front_face  # Whether the ray hit the outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, point={self.point!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the nearest intersection with t strictly inside (t_min, t_max),
        or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
