# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def bronze() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)


class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class ColorPresets:
    """Common albedo colours."""

    BLUE = Vector3(0.1, 0.2, 0.5)
    GROUND = Vector3(0.8, 0.8, 0.0)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
