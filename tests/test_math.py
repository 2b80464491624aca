"""Unit tests for Vec3, Ray and the sampling helpers."""

import math

import pytest

from core.math import Vec3, Ray, random_in_unit_sphere, schlick


class TestVec3Arithmetic:
    """Tests for the value operators."""

    def test_add_sub(self):
        a = Vec3(1, 2, 3)
        b = Vec3(0.5, -1, 2)
        assert a + b == Vec3(1.5, 1, 5)
        assert a - b == Vec3(0.5, 3, 1)

    def test_scalar_and_component_multiply(self):
        a = Vec3(1, 2, 3)
        assert a * 2 == Vec3(2, 4, 6)
        assert 2 * a == Vec3(2, 4, 6)
        assert a * Vec3(2, 0.5, -1) == Vec3(2, 1, -3)

    def test_divide_and_negate(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)
        assert -Vec3(1, -2, 3) == Vec3(-1, 2, -3)

    def test_operations_do_not_mutate(self):
        a = Vec3(1, 2, 3)
        _ = a + Vec3(1, 1, 1)
        _ = a * 3
        _ = a.normalize()
        assert a == Vec3(1, 2, 3)

    def test_dot_length(self):
        a = Vec3(1, 0, 0)
        b = Vec3(0, 1, 0)
        assert a.dot(b) == 0
        assert Vec3(3, 4, 0).length_squared() == 25
        assert Vec3(3, 4, 0).length() == 5

    def test_sqrt_is_component_wise(self):
        assert Vec3(4, 9, 0.25).sqrt() == Vec3(2, 3, 0.5)


class TestNormalize:
    """Tests for unit-length normalization."""

    @pytest.mark.parametrize("v", [
        Vec3(1, 0, 0),
        Vec3(3, 4, 12),
        Vec3(-1e-3, 2e-3, 5e-4),
        Vec3(1e6, -2e6, 3e6),
    ])
    def test_normalized_length_is_one(self, v):
        assert abs(v.normalize().length() - 1.0) < 1e-9

    def test_unit_vectors_stay_unit(self, rng):
        for _ in range(100):
            v = random_in_unit_sphere(rng).normalize()
            assert abs(v.normalize().length() - 1.0) < 1e-9

    def test_zero_length_raises(self):
        with pytest.raises(ValueError):
            Vec3(0, 0, 0).normalize()


class TestReflectRefract:
    """Tests for the mirror and Snell helpers."""

    def test_reflect_off_flat_surface(self):
        incoming = Vec3(1, -1, 0)
        reflected = incoming.reflect(Vec3(0, 1, 0))
        assert reflected == Vec3(1, 1, 0)

    def test_refract_with_unit_ratio_is_undeviated(self):
        d = Vec3(0.3, 0.0, -1.0).normalize()
        did_refract, refracted = d.refract(Vec3(0, 0, 1), 1.0)
        assert did_refract
        assert (refracted - d).length() < 1e-9

    def test_refract_total_internal_reflection(self):
        # 60 degrees from the normal leaving glass: 1.5 * sin(60) > 1
        d = Vec3(math.sin(math.radians(60)), 0.0, -math.cos(math.radians(60)))
        did_refract, refracted = d.refract(Vec3(0, 0, 1), 1.5)
        assert not did_refract
        assert refracted is None

    def test_refract_obeys_snell(self):
        theta_i = math.radians(30)
        d = Vec3(math.sin(theta_i), 0.0, -math.cos(theta_i))
        did_refract, refracted = d.refract(Vec3(0, 0, 1), 1.0 / 1.5)
        assert did_refract
        sin_t = refracted.normalize().x
        assert abs(sin_t - math.sin(theta_i) / 1.5) < 1e-9


class TestRay:
    """Tests for Ray construction and evaluation."""

    def test_direction_is_normalized(self):
        ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -5))
        assert ray.direction == Vec3(0, 0, -1)

    def test_at(self):
        ray = Ray(Vec3(1, 1, 1), Vec3(0, 2, 0))
        assert ray.at(3.0) == Vec3(1, 4, 1)
        assert ray.at(0.0) == Vec3(1, 1, 1)


class TestSampling:
    """Tests for the random helpers."""

    def test_random_in_unit_sphere_inside(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_schlick_endpoints(self):
        assert schlick(1.0, 1.0) == 0.0
        assert abs(schlick(1.0, 1.5) - 0.04) < 1e-12
        assert schlick(0.0, 1.5) == pytest.approx(1.0)
