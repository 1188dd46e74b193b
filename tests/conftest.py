"""Pytest configuration and shared fixtures."""

import os

import pytest

# Keep pygame away from any real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from balltracing.core.vector import Vector3
from balltracing.geometry.sphere import Sphere
from balltracing.geometry.world import Scene


@pytest.fixture
def diffuse_sphere():
    """Opaque, non-reflective sphere straight ahead of the camera."""
    return Sphere(Vector3(0, 0, -5), 1.0, Vector3(0.5, 0.2, 0.1))


@pytest.fixture
def overhead_light():
    """Light above the camera, visible from the front of diffuse_sphere."""
    return Sphere(Vector3(0, 10, 0), 1.0, Vector3(0, 0, 0), emission_color=Vector3(2, 2, 2))


@pytest.fixture
def lit_scene(diffuse_sphere, overhead_light):
    return Scene([diffuse_sphere, overhead_light])
