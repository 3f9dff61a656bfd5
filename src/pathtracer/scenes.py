# scenes.py
"""
Scene setup: named scene factories and validation of scene entries.

A scene factory takes a random generator and returns (entries, view) where
entries is a list of ((center, radius), material) pairs accepted by
build_scene and view holds the Camera keyword arguments other than the
aspect ratio.
"""
import math
from typing import Callable, Dict, List, Tuple

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets

SceneEntry = Tuple[Tuple[Vector3, float], Material]


class SceneError(ValueError):
    """Raised when a scene description cannot be rendered."""


def validate_entries(entries: List[SceneEntry]) -> None:
    """
    Reject entries the path tracer would turn into NaNs.

    Raises:
        SceneError: On the first malformed entry
    """
    for index, ((center, radius), material) in enumerate(entries):
        if not all(math.isfinite(c) for c in center):
            raise SceneError(f"Entry {index}: center {center!r} is not finite")
        if not radius > 0:
            raise SceneError(f"Entry {index}: radius must be positive, got {radius}")
        if not isinstance(material, Material):
            raise SceneError(f"Entry {index}: {material!r} is not a Material")
        if isinstance(material, Dielectric) and not material.ref_idx > 0:
            raise SceneError(f"Entry {index}: refractive index must be positive, got {material.ref_idx}")
        if isinstance(material, Metal) and material.fuzz < 0:
            raise SceneError(f"Entry {index}: fuzz must not be negative, got {material.fuzz}")


def single_sphere(rng: np.random.Generator = None):
    """One diffuse sphere resting on a large ground sphere."""
    entries = [
        ((Vector3(0, 0, -1), 0.5), Lambertian(Vector3(0.5, 0.5, 0.5))),
        ((Vector3(0, -100.5, -1), 100), ColorPresets.matte(ColorPresets.GROUND)),
    ]
    view = dict(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                vup=Vector3(0, 1, 0), vfov=90.0)
    return entries, view


def three_spheres(rng: np.random.Generator = None):
    """Glass, diffuse and metal spheres side by side."""
    entries = [
        ((Vector3(0, -100.5, -1), 100), ColorPresets.matte(ColorPresets.GROUND)),
        ((Vector3(0, 0, -1), 0.5), ColorPresets.matte(ColorPresets.BLUE)),
        ((Vector3(-1, 0, -1), 0.5), DielectricPresets.glass()),
        ((Vector3(1, 0, -1), 0.5), MetalPresets.brushed_metal()),
    ]
    view = dict(look_from=Vector3(-2, 2, 1), look_at=Vector3(0, 0, -1),
                vup=Vector3(0, 1, 0), vfov=40.0)
    return entries, view


def random_spheres(rng: np.random.Generator, extent: int = 11):
    """
    The classic cover scene: a grid of small random spheres around three
    large ones, viewed with a shallow depth of field.
    """
    entries = [((Vector3(0, -1000, 0), 1000), ColorPresets.matte(ColorPresets.GRAY))]
    keep_clear = Vector3(4, 0.2, 0)

    for a in range(-extent, extent):
        for b in range(-extent, extent):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - keep_clear).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3(rng.random(), rng.random(), rng.random()) * \
                    Vector3(rng.random(), rng.random(), rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                material = Metal(albedo, rng.uniform(0, 0.5))
            else:
                material = DielectricPresets.glass()
            entries.append(((center, 0.2), material))

    entries.append(((Vector3(0, 1, 0), 1.0), DielectricPresets.glass()))
    entries.append(((Vector3(-4, 1, 0), 1.0), Lambertian(Vector3(0.4, 0.2, 0.1))))
    entries.append(((Vector3(4, 1, 0), 1.0), MetalPresets.bronze()))

    view = dict(look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0),
                vup=Vector3(0, 1, 0), vfov=20.0, aperture=0.1, focus_dist=10.0)
    return entries, view


SCENES: Dict[str, Callable] = {
    "single_sphere": single_sphere,
    "three_spheres": three_spheres,
    "random_spheres": random_spheres,
}


def make_camera(view: dict, aspect_ratio: float) -> Camera:
    return Camera(aspect_ratio=aspect_ratio, **view)
