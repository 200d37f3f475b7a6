"""Whitted-style recursive ray tracing integrator.

This module implements the shading kernel of the renderer: for a ray it
finds the nearest surface or light, applies direct illumination with hard
shadows, and recursively follows perfect mirror reflection and Snell's-law
refraction up to a fixed depth.

The trace is a small state machine per call:
    - terminated: depth exceeded, return the environment color
    - miss: nothing hit, return the environment color
    - light hit: a light is nearest, return its color
    - surface shaded: local lighting plus up to two recursive child traces

Key features:
    - Lambertian diffuse and Phong specular terms per light
    - Hard shadows through each light's illuminate() shadow query
    - Mirror reflection and refraction with total internal reflection
    - Self-intersection avoidance with a configurable trace bias
    - Recursion bounded by RenderConfig.trace_depth

Example:
    >>> from whitted.core.integrator import RenderConfig, trace
    >>> from whitted.core.ray import Ray, Vector
    >>> config = RenderConfig(trace_depth=4)
    >>> trace(Ray(Vector(0, 0, 0), Vector(0, 0, -1)), [], [], config)
    Vector(0.5, 0.5, 0.5)
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from whitted.core.ray import GRAY, NO_HIT, Color, Ray, Vector
from whitted.geometry.surface import Surface
from whitted.lights.light import Light

# =============================================================================
# Rendering Constants
# =============================================================================

# Phong exponent for the specular highlight
SHININESS = 20

# Refractive index of the medium camera rays start in (vacuum / air)
AMBIENT_REFRACTIVE_INDEX = 1.0


def _default_worker_count() -> int:
    return os.cpu_count() or 1


@dataclass
class RenderConfig:
    """Settings that control how a frame is traced and scheduled.

    Attributes:
        thread_worker_count: Number of worker threads rendering pixels.
        trace_depth: Maximum recursion depth; a trace deeper than this
            returns the environment color.
        trace_bias: Offset applied along the normal before casting
            secondary rays, so they do not re-hit their own surface.
        environment_color: Background color, also added as an ambient
            term to every shaded hit.
        progress_interval: Seconds between progress reports while rendering.
    """

    thread_worker_count: int = field(default_factory=_default_worker_count)
    trace_depth: int = 10
    trace_bias: float = 1e-4
    environment_color: Color = GRAY
    progress_interval: float = 0.05

    def validate(self) -> None:
        """Check the settings before a render.

        Raises:
            ValueError: If any setting is out of range.
        """
        if self.thread_worker_count < 1:
            raise ValueError(
                f"thread_worker_count must be at least 1, got {self.thread_worker_count}"
            )
        if self.trace_depth < 0:
            raise ValueError(f"trace_depth must be non-negative, got {self.trace_depth}")
        if self.trace_bias < 0.0:
            raise ValueError(f"trace_bias must be non-negative, got {self.trace_bias}")
        if self.progress_interval <= 0.0:
            raise ValueError(
                f"progress_interval must be positive, got {self.progress_interval}"
            )
        self.environment_color = Color.of(self.environment_color)


# =============================================================================
# Nearest Hit
# =============================================================================


def nearest_hit(
    ray: Ray,
    surfaces: Sequence[Surface],
    lights: Sequence[Light],
) -> tuple[float, Surface | None, Light | None]:
    """Find the nearest surface or light along a ray.

    Surfaces are scanned before lights and only strictly closer entities
    replace the current best, so a surface wins an exact tie with a light.

    Args:
        ray: The ray to test.
        surfaces: Scene surfaces.
        lights: Scene lights.

    Returns:
        A tuple of (distance, surface, light). At most one of surface and
        light is set; both are None (and distance is NO_HIT) on a miss.
    """
    distance, surface = ray.nearest(surfaces)
    light_distance, light = ray.nearest(lights)
    if light is not None and light_distance < distance:
        return light_distance, None, light
    return distance, surface, None


def _offset_origin(point: Vector, normal: Vector, direction: Vector, bias: float) -> Vector:
    """Push a secondary ray origin off the surface it leaves.

    The offset is along the normal, toward the side ``direction`` travels
    into: above the surface for reflection, below it for transmission.
    """
    if direction.dot(normal) < 0.0:
        return point - normal * bias
    return point + normal * bias


# =============================================================================
# Whitted Tracing Core
# =============================================================================


def trace(
    ray: Ray,
    lights: Sequence[Light],
    surfaces: Sequence[Surface],
    config: RenderConfig,
    refractive_index: float = AMBIENT_REFRACTIVE_INDEX,
    depth: int = 0,
) -> Color:
    """Trace a ray through the scene and return the color it sees.

    Args:
        ray: The ray to trace.
        lights: Scene lights, used for direct lighting and direct hits.
        surfaces: Scene surfaces, used for hits and shadow tests.
        config: Render settings (depth limit, bias, environment color).
        refractive_index: Refractive index of the medium the ray travels in.
        depth: Current recursion depth; camera rays start at 0.

    Returns:
        The traced color. Shaded hits always include the environment color
        as an additive ambient term.
    """
    environment = config.environment_color
    if depth > config.trace_depth:
        return environment

    distance, surface, light = nearest_hit(ray, surfaces, lights)
    if light is not None:
        return light.color
    if surface is None or distance == NO_HIT:
        return environment

    texture = surface.texture
    point = ray.at(distance)
    normal = surface.normal(point)
    light_point = point + normal * config.trace_bias
    color = Vector.ZERO

    for source in lights:
        illumination = source.illuminate(light_point, surfaces)
        if texture.k_diffusive > 0.0:
            cosine = max(0.0, normal.dot(-illumination.direction))
            color += illumination.intensity * (texture.k_diffusive * cosine)
        if texture.k_specular > 0.0:
            reflected = ray.direction.reflect(normal)
            highlight = max(0.0, ray.direction.dot(reflected)) ** SHININESS
            color += illumination.intensity * (texture.k_specular * highlight)

    if texture.k_reflective > 0.0:
        direction = ray.direction.reflect(normal)
        origin = _offset_origin(point, normal, direction, config.trace_bias)
        reflected = trace(
            Ray(origin, direction), lights, surfaces, config, refractive_index, depth + 1
        )
        color += reflected * texture.k_reflective

    if texture.k_refractive > 0.0:
        eta = refractive_index / texture.k_refractive_index
        direction = ray.direction.refract(normal, eta)
        if direction != Vector.ZERO:
            origin = _offset_origin(point, normal, direction, config.trace_bias)
            refracted = trace(
                Ray(origin, direction),
                lights,
                surfaces,
                config,
                texture.k_refractive_index,
                depth + 1,
            )
            color += refracted * texture.k_refractive

    return environment + color * surface.color(point)
