"""Abstract contract for light sources.

Lights play two roles in the tracer:

- They are entities in the nearest-hit search, so a light can be seen
  directly (intersect returns NO_HIT for lights with no visible extent).
- They illuminate shading points, answering with the incoming light
  direction and the intensity that reaches the point after a shadow test.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar

from whitted.core.ray import Color, Ray, Vector
from whitted.geometry.surface import Surface


@dataclass(frozen=True)
class Illumination:
    """Light arriving at a shading point.

    Attributes:
        direction: Unit direction the light travels, from the light toward
            the point. Zero when occluded.
        intensity: Light color times intensity, or zero when occluded.
    """

    direction: Vector
    intensity: Color

    DARK: ClassVar[Illumination]

    @property
    def occluded(self) -> bool:
        """Whether the shadow test blocked the light.

        Only occluded illumination has a zero direction. An unblocked light
        of zero intensity contributes nothing but is not occluded.
        """
        return self.direction == Vector.ZERO


Illumination.DARK = Illumination(direction=Vector.ZERO, intensity=Vector.ZERO)


class Light(ABC):
    """Base class for light sources.

    Attributes:
        color: The light color (RGB). Also what a camera sees when it looks
            straight at a visible light.
        intensity: Scalar multiplier applied to ``color`` when illuminating.
    """

    def __init__(self, color: Color | Iterable[float], intensity: float) -> None:
        if intensity < 0.0:
            raise ValueError(f"Light intensity must be non-negative, got {intensity}")
        self.color = Color.of(color)
        self.intensity = float(intensity)

    @property
    def radiance(self) -> Color:
        """The unoccluded intensity delivered to a lit point."""
        return self.color * self.intensity

    @abstractmethod
    def intersect(self, ray: Ray) -> float:
        """Distance along ``ray`` to the visible light, or ``NO_HIT``."""

    @abstractmethod
    def illuminate(self, point: Vector, surfaces: Sequence[Surface]) -> Illumination:
        """Determine the light reaching ``point``.

        Args:
            point: The (biased) shading point.
            surfaces: Every surface that may cast a shadow.

        Returns:
            The incoming direction and intensity, or ``Illumination.DARK``
            if a surface blocks the light.
        """
