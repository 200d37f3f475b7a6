"""Directional light infinitely far away, such as the sun.

A distant light has no position: every point in the scene receives light
from the same direction. It is never hit by camera rays, and its shadow
test succeeds only if the shadow ray escapes the scene entirely.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from whitted.core.ray import NO_HIT, NUMERIC_EPS, Color, Ray, Vector
from whitted.geometry.surface import Surface
from whitted.lights.light import Illumination, Light


class DistantLight(Light):
    """A light shining along a fixed direction.

    Attributes:
        direction: Unit direction the light travels (from the light toward
            the scene).
    """

    def __init__(
        self,
        color: Color | Iterable[float],
        intensity: float,
        direction: Vector | Iterable[float],
    ) -> None:
        super().__init__(color, intensity)
        direction = Vector.of(direction)
        if direction.length() < NUMERIC_EPS:
            raise ValueError("Light direction must be a non-zero vector")
        self.direction = direction.normalize()

    def intersect(self, ray: Ray) -> float:
        return NO_HIT

    def illuminate(self, point: Vector, surfaces: Sequence[Surface]) -> Illumination:
        shadow_ray = Ray(point, -self.direction)
        if shadow_ray.intersect(surfaces) == NO_HIT:
            return Illumination(direction=self.direction, intensity=self.radiance)
        return Illumination.DARK

    def __repr__(self) -> str:
        return (
            f"DistantLight(color={self.color!r}, intensity={self.intensity!r}, "
            f"direction={self.direction!r})"
        )
