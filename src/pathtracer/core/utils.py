# core/utils.py
import math

import numpy as np

from pathtracer.core.vector import Vector3


def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside the unit ball.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    a = rng.uniform(0.0, 2.0 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)


def random_in_unit_disk(rng: np.random.Generator) -> Vector3:
    """Generate random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends the unit vector uv through a surface with normal n (opposing uv).
    The caller has already ruled out total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
