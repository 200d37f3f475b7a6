"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: cameras,
standard textures and small, fast scenes.
"""

import pytest

from whitted.camera.pinhole import PinholeCamera
from whitted.core.integrator import RenderConfig
from whitted.core.ray import Color, Ray, Vector
from whitted.geometry import Plane
from whitted.lights import DistantLight
from whitted.materials import Texture, diffuse
from whitted.scene.manager import Scene


class FixedRayCamera:
    """Camera that shoots the same ray through every pixel."""

    def __init__(self, width, height, ray):
        self.width = width
        self.height = height
        self._ray = ray

    def ray(self, x, y):
        return self._ray


@pytest.fixture
def white_diffuse() -> Texture:
    """Pure diffuse white texture with k_diffusive = 0.4."""
    return Texture(color=Color(1.0, 1.0, 1.0), k_diffusive=0.4)


@pytest.fixture
def config() -> RenderConfig:
    """Single-threaded default render settings with a fast progress poll."""
    return RenderConfig(thread_worker_count=1, progress_interval=0.001)


@pytest.fixture
def top_down_camera() -> PinholeCamera:
    """Small camera hovering above the origin, looking straight down."""
    return PinholeCamera(
        8,
        6,
        lookfrom=(0.0, 5.0, 0.0),
        lookat=(0.0, 0.0, 0.0),
        vup=(0.0, 0.0, -1.0),
        vfov=40.0,
    )


@pytest.fixture
def lit_floor_scene(top_down_camera, white_diffuse, config) -> Scene:
    """A diffuse floor lit straight from above, seen from above."""
    scene = Scene(top_down_camera, config)
    scene.add(Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), white_diffuse))
    scene.add(DistantLight(Color(1.0, 1.0, 1.0), 1.0, (0.0, -1.0, 0.0)))
    return scene


@pytest.fixture
def fixed_ray_camera():
    """Factory for cameras that shoot one fixed ray through every pixel."""

    def make(width: int, height: int, source: Vector, direction: Vector):
        return FixedRayCamera(width, height, Ray(source, direction))

    return make


@pytest.fixture
def floor() -> Plane:
    """Matte white plane at y = 0 facing up."""
    return Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), diffuse())
