"""Point light with a small visible bulb.

The light is modeled as a point for illumination but is rendered as a
glowing sphere of ``radius`` when a camera or secondary ray hits it, so
it shows up in mirrors and in direct view. Intensity does not fall off
with distance.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from whitted.core.ray import NO_HIT, Color, Ray, Vector
from whitted.geometry.sphere import intersect_sphere
from whitted.geometry.surface import Surface
from whitted.lights.light import Illumination, Light

# Default bulb radius when the caller does not pick one
DEFAULT_RADIUS = 0.05


class PointLight(Light):
    """A light emitting from a single position.

    Attributes:
        position: Where the light sits.
        radius: Radius of the visible bulb. Zero makes the light invisible.
    """

    def __init__(
        self,
        color: Color | Iterable[float],
        intensity: float,
        position: Vector | Iterable[float],
        radius: float = DEFAULT_RADIUS,
    ) -> None:
        super().__init__(color, intensity)
        if radius < 0.0:
            raise ValueError(f"Light radius must be non-negative, got {radius}")
        self.position = Vector.of(position)
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> float:
        if self.radius == 0.0:
            return NO_HIT
        return intersect_sphere(ray, self.position, self.radius)

    def illuminate(self, point: Vector, surfaces: Sequence[Surface]) -> Illumination:
        to_light = self.position - point
        distance = to_light.length()
        if distance == 0.0:
            return Illumination.DARK

        shadow_ray = Ray(point, to_light)
        # Only occluders between the point and the light cast a shadow.
        if shadow_ray.intersect(surfaces) < distance:
            return Illumination.DARK
        return Illumination(direction=-shadow_ray.direction, intensity=self.radiance)

    def __repr__(self) -> str:
        return (
            f"PointLight(color={self.color!r}, intensity={self.intensity!r}, "
            f"position={self.position!r}, radius={self.radius!r})"
        )
