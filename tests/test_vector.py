"""Unit tests for Vector3 and the vector helpers in core.utils.

Tests cover:
- Componentwise and scalar arithmetic
- Dot and cross products, lengths
- Pure normalization
- Reflection and refraction helpers
- Random unit vectors and points in the unit ball / disk
"""

import math

import numpy as np
import pytest

from pathtracer.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
)
from pathtracer.core.vector import Vector3


class TestArithmetic:
    """Tests for the arithmetic operators."""

    def test_add(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a + a == Vector3(2.0, 4.0, 6.0)

    def test_sub(self):
        assert Vector3(3.0, 2.0, 1.0) - Vector3(1.0, 1.0, 1.0) == Vector3(2.0, 1.0, 0.0)

    def test_neg(self):
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)

    def test_mul(self):
        a = Vector3(1.0, -2.0, 3.0)
        b = Vector3(3.0, -4.0, 5.0)
        assert a * b == Vector3(3.0, 8.0, 15.0)
        assert a * 3.0 == Vector3(3.0, -6.0, 9.0)
        assert 3.0 * a == Vector3(3.0, -6.0, 9.0)
        assert a * 2 == Vector3(2.0, -4.0, 6.0)

    def test_div(self):
        a = Vector3(6.0, -20.0, 120.0)
        assert a / Vector3(3.0, -4.0, 5.0) == Vector3(2.0, 5.0, 24.0)
        assert a / 2.0 == Vector3(3.0, -10.0, 60.0)

    @pytest.mark.parametrize("scalar", [np.float32(2.0), np.float64(2.0), np.int32(2), np.int64(2)])
    def test_numpy_scalars(self, scalar):
        a = Vector3(1.0, -2.0, 3.0)
        assert a * scalar == Vector3(2.0, -4.0, 6.0)
        assert a / scalar == Vector3(0.5, -1.0, 1.5)

    def test_operators_return_new_vectors(self):
        a = Vector3(1.0, 2.0, 3.0)
        _ = a + a
        _ = a * 2.0
        _ = -a
        assert a == Vector3(1.0, 2.0, 3.0)

    def test_iteration_order(self):
        assert list(Vector3(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


class TestProducts:
    """Tests for dot, cross and length."""

    def test_length(self):
        assert Vector3(3.0, 4.0, 0.0).length() == 5.0
        assert Vector3(3.0, -4.0, 12.0).length() == 13.0

    def test_length_squared(self):
        assert Vector3(3.0, 4.0, 0.0).length_squared() == 25.0
        assert Vector3(3.0, -4.0, 12.0).length_squared() == 169.0

    def test_dot(self):
        assert Vector3(3.0, 4.0, 0.0).dot(Vector3(3.0, -4.0, 12.0)) == -7.0

    def test_cross(self):
        assert Vector3(1.0, 2.0, 3.0).cross(Vector3(1.0, 5.0, 7.0)) == Vector3(-1.0, -4.0, 3.0)
        assert Vector3(-1.0, -2.0, 3.0).cross(Vector3(4.0, 0.0, -8.0)) == Vector3(16.0, 4.0, 8.0)

    def test_cross_is_right_handed(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.parametrize(
        "v",
        [
            Vector3(4.0, 0.0, 0.0),
            Vector3(4.0, 12.0, 3.0),
            Vector3(-0.001, 2e-4, 7e-5),
            Vector3(1e6, -3e5, 2e5),
        ],
    )
    def test_unit_length_and_parallel(self, v):
        n = v.normalize()
        assert n.length() == pytest.approx(1.0, abs=1e-12)
        # Parallel: cross product vanishes and directions agree
        assert n.cross(v).length() == pytest.approx(0.0, abs=1e-9 * v.length())
        assert n.dot(v) > 0

    def test_normalize_does_not_mutate(self):
        v = Vector3(4.0, 12.0, 3.0)
        n = v.normalize()
        assert v == Vector3(4.0, 12.0, 3.0)
        assert n.x == pytest.approx(4.0 / 13.0)
        assert n.y == pytest.approx(12.0 / 13.0)
        assert n.z == pytest.approx(3.0 / 13.0)

    def test_zero_vector_is_not_guarded(self):
        with pytest.raises(ZeroDivisionError):
            Vector3(0.0, 0.0, 0.0).normalize()


class TestReflectRefract:
    """Tests for reflect() and refract()."""

    def test_reflect_mirror(self):
        r = reflect(Vector3(1.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert r == Vector3(1.0, 1.0, 0.0)

    @pytest.mark.parametrize("seed", range(5))
    def test_reflect_flips_normal_component(self, seed):
        rng = np.random.default_rng(seed)
        n = random_unit_vector(rng)
        v = Vector3(rng.uniform(-2, 2), rng.uniform(-2, 2), rng.uniform(-2, 2))
        assert reflect(v, n).dot(n) == pytest.approx(-v.dot(n), abs=1e-12)

    def test_reflect_preserves_length(self):
        v = Vector3(0.3, -0.8, 0.2)
        n = Vector3(0.0, 1.0, 0.0)
        assert reflect(v, n).length() == pytest.approx(v.length())

    def test_refract_normal_incidence_goes_straight(self):
        d = refract(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        assert d.x == pytest.approx(0.0)
        assert d.y == pytest.approx(-1.0)
        assert d.z == pytest.approx(0.0)

    def test_refract_follows_snells_law(self):
        inv_sqrt2 = 1.0 / math.sqrt(2.0)
        d = refract(Vector3(inv_sqrt2, -inv_sqrt2, 0.0), Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        d = d.normalize()
        # sin(theta_out) = sin(45 deg) / 1.5
        assert d.x == pytest.approx(inv_sqrt2 / 1.5, abs=1e-9)
        assert d.y < 0


class TestRandomSampling:
    """Tests for the random helpers."""

    def test_random_unit_vector_has_unit_length(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0, abs=1e-12)

    def test_random_unit_vector_covers_sphere(self, rng):
        mean = Vector3(0.0, 0.0, 0.0)
        n = 4000
        for _ in range(n):
            mean = mean + random_unit_vector(rng)
        mean = mean / n
        assert mean.length() < 0.05

    def test_random_in_unit_sphere_is_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_in_unit_disk_is_flat(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_rejection_loop_retries(self, scripted_rng):
        # First candidate (0.9, 0.9, 0.9) is outside the ball and rejected.
        source = scripted_rng(uniform_values=[0.9, 0.9, 0.9, 0.1, 0.2, 0.3])
        assert random_in_unit_sphere(source) == Vector3(0.1, 0.2, 0.3)

    def test_seeded_generators_repeat(self):
        a = random_unit_vector(np.random.default_rng(7))
        b = random_unit_vector(np.random.default_rng(7))
        assert a == b
