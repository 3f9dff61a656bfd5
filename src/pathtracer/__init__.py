"""Monte Carlo path tracer for scenes of spheres.

The two entry points used by scene setup and pixel sampling code are
build_scene() and radiance(); Renderer drives them for a whole frame.
"""
from pathtracer.camera.camera import Camera
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList, build_scene
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.renderer.integrator import MAX_DEPTH, radiance, sky_color
from pathtracer.renderer.raytracer import Renderer

__all__ = [
    "Camera",
    "Ray",
    "Vector3",
    "HitRecord",
    "Hittable",
    "Sphere",
    "HittableList",
    "build_scene",
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "MAX_DEPTH",
    "radiance",
    "sky_color",
    "Renderer",
]
