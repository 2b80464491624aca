"""Shared fixtures for the ray tracer tests."""

import random

import pytest

from core.scene import RenderSettings


class FixedRandom:
    """Stand-in generator whose draws are all the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value


@pytest.fixture
def rng():
    """A seeded generator so sampled tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances."""
    return FixedRandom


@pytest.fixture
def small_settings():
    """A 32x18 render with one sample and two bounces."""
    return RenderSettings(
        aspect_ratio=16.0 / 9.0,
        image_height=18,
        samples_per_pixel=1,
        max_depth=2,
        seed=7,
    )
