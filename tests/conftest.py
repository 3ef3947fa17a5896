"""Pytest configuration for lumen tests.

Provides a seeded random source and a few small worlds shared across modules.
"""

import random

import pytest

from lumen.core.vector import Vector3
from lumen.geometry.hittable import HitRecord
from lumen.geometry.sphere import Sphere
from lumen.geometry.world import HittableList
from lumen.materials.lambertian import Lambertian


class FixedRandom:
    """Stand-in random source whose random() always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-6):
    assert abs(actual.x - expected.x) < tol, f"{actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"{actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"{actual} != {expected}"


@pytest.fixture
def rng():
    """Seeded random source so sampling tests are reproducible."""
    return random.Random(42)


@pytest.fixture
def up_hit():
    """Front-face hit at the origin on a surface facing +y."""
    return HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0, front_face=True)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def reference_world(gray):
    """Unit-half sphere at (0, 0, -1) over a radius 100 ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, gray))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, gray))
    return world
