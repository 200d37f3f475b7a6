"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Vector / Color algebra, the Ray dataclass, the NO_HIT sentinel
    integrator: RenderConfig and the recursive Whitted tracer
    scheduler: Parallel pixel scheduling over a pool of worker threads

The tracer is deterministic: a pixel's color depends only on its primary
ray and the static scene, so frames are identical for any worker count.
"""

from .ray import (
    BLACK,
    BLUE,
    GRAY,
    GREEN,
    NO_HIT,
    NUMERIC_EPS,
    RED,
    WHITE,
    Color,
    Ray,
    Vector,
)

# Note: integrator and scheduler are NOT imported here to avoid circular imports.
# Import directly from whitted.core.integrator or whitted.core.scheduler when needed.

__all__ = [
    "Vector",
    "Color",
    "Ray",
    "NO_HIT",
    "NUMERIC_EPS",
    "BLACK",
    "WHITE",
    "GRAY",
    "RED",
    "GREEN",
    "BLUE",
]
