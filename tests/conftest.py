"""Pytest configuration for path tracer tests.

Provides seeded random generators, a scripted random source for forcing
specific material decisions, and small scenes shared across test modules.
"""

import numpy as np
import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import build_scene
from pathtracer.materials.lambertian import Lambertian


class ScriptedRng:
    """Random source that replays fixed values.

    uniform() returns the next scripted value (or `low` once the script is
    exhausted) and random() does the same from its own script. Lets tests
    force the outcome of rejection loops and reflect/refract choices.
    """

    def __init__(self, uniform_values=(), random_values=()):
        self._uniform = list(uniform_values)
        self._random = list(random_values)

    def uniform(self, low=0.0, high=1.0):
        if self._uniform:
            return self._uniform.pop(0)
        return low

    def random(self):
        if self._random:
            return self._random.pop(0)
        return 0.0


@pytest.fixture
def rng():
    """A freshly seeded NumPy generator for every test."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture
def gray_sphere_world():
    """A single diffuse sphere of albedo 0.5 at (0, 0, -1), radius 0.5."""
    return build_scene([((Vector3(0, 0, -1), 0.5), Lambertian(Vector3(0.5, 0.5, 0.5)))])
