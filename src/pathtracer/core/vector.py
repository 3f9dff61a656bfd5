# core/vector.py
import math
import numbers


class Vector3:
    """
    A 3D vector used interchangeably as a point, a direction and an RGB colour.

    Every operation returns a new Vector3; instances are never modified in
    place. Dividing by zero (including normalizing a zero-length vector) is
    left to Python's float semantics and raises ZeroDivisionError.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Componentwise, used for colour attenuation.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way. The caller must not pass
        a zero-length vector.
        """
        return self / self.length()

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
