"""Abstract contract for surfaces a ray can hit and shade.

Concrete surfaces answer three questions for the tracer:

- intersect(ray): how far along the ray is the first hit (or NO_HIT)
- normal(point): the unit surface normal at a hit point
- color(point): the surface color at a hit point

The tracer only ever talks to surfaces through this interface, so scenes
can mix any number of surface types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from whitted.core.ray import Color, Ray, Vector
from whitted.materials.texture import Texture


class Surface(ABC):
    """Base class for intersectable, shadeable surfaces.

    Attributes:
        texture: The material describing how the surface is shaded.
    """

    def __init__(self, texture: Texture) -> None:
        self.texture = texture

    @abstractmethod
    def intersect(self, ray: Ray) -> float:
        """Distance along ``ray`` to the first intersection.

        Returns:
            The forward distance, or ``NO_HIT`` if the ray misses.
        """

    @abstractmethod
    def normal(self, point: Vector) -> Vector:
        """Unit surface normal at ``point``."""

    def color(self, point: Vector) -> Color:
        """Surface color at ``point``, sampled from the texture."""
        return self.texture.sample(point)
