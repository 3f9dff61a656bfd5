# core/ray.py
from pathtracer.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not required to be unit length.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def point_at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t. Negative t lies behind
        the origin.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
