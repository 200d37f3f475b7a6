"""Ray data structure and vector algebra for the Whitted ray tracer.

This module provides the Vector value type (also used as Color), the Ray
dataclass and the nearest-intersection helper shared by the tracer and the
lights' shadow queries.

Example:
    >>> from whitted.core.ray import Ray, Vector
    >>> ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, -2.0))
    >>> ray.direction
    Vector(0.0, 0.0, -1.0)
    >>> ray.at(5.0)
    Vector(0.0, 0.0, -5.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol, TypeVar

# Tolerance for degenerate-case detection (parallel rays, grazing starts).
# An order of magnitude below the default trace bias (1e-4): a shadow ray
# leaving a plane starts at distance -1e-4 from it, and an equal tolerance
# would put that start exactly on the -eps boundary of its own surface.
NUMERIC_EPS = 1e-5

# Distance reported by intersect() when an entity is not hit.
NO_HIT = math.inf


# =============================================================================
# Vector / Color
# =============================================================================


class Vector:
    """An immutable 3-component float vector.

    Vectors double as RGB colors (see the ``Color`` alias), in which case
    ``x, y, z`` are the red, green and blue channels. Multiplying two
    vectors is componentwise, which is what color modulation needs.
    """

    __slots__ = ("x", "y", "z")

    ZERO: Vector

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of(cls, value: Vector | Iterable[float]) -> Vector:
        """Coerce a Vector or any 3-item iterable into a Vector."""
        if isinstance(value, Vector):
            return value
        x, y, z = value
        return cls(x, y, z)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r}, {self.z!r})"

    def dot(self, other: Vector) -> float:
        """Compute the dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """Return the unit vector pointing the same way.

        Raises:
            ZeroDivisionError: If the vector has zero length. Callers are
                expected to never normalize a zero vector.
        """
        return self / self.length()

    def reflect(self, normal: Vector) -> Vector:
        """Mirror this direction about a unit normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected direction ``d - 2 (d . n) n``.
        """
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: Vector, eta: float) -> Vector:
        """Refract this unit direction through a surface using Snell's law.

        The normal may face either way; when the direction arrives from the
        back side of the normal it is flipped so the solve always happens
        against the side the ray comes from.

        Args:
            normal: The surface normal (should be normalized).
            eta: The ratio of refractive indices (n_incident / n_transmitted).

        Returns:
            The transmitted unit direction, or ``Vector.ZERO`` when total
            internal reflection leaves no real solution.
        """
        cos_i = -self.dot(normal)
        if cos_i < 0.0:
            normal = -normal
            cos_i = -cos_i
        k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
        if k < 0.0:
            return Vector.ZERO
        return (self * eta + normal * (eta * cos_i - math.sqrt(k))).normalize()

    def clamp(self, low: float = 0.0, high: float = 1.0) -> Vector:
        """Clamp every component into ``[low, high]``."""
        return Vector(
            min(max(self.x, low), high),
            min(max(self.y, low), high),
            min(max(self.z, low), high),
        )


Vector.ZERO = Vector(0.0, 0.0, 0.0)

# Colors are vectors whose components are the RGB channels.
Color = Vector

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
GRAY = Color(0.5, 0.5, 0.5)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


# =============================================================================
# Ray
# =============================================================================


class Intersectable(Protocol):
    """Anything a ray can be tested against."""

    def intersect(self, ray: Ray) -> float: ...


EntityT = TypeVar("EntityT", bound=Intersectable)


@dataclass(frozen=True)
class Ray:
    """A ray with a source point and a unit direction.

    Attributes:
        source: The starting point of the ray.
        direction: The direction of travel. Normalized on construction.
    """

    source: Vector
    direction: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Vector.of(self.source))
        object.__setattr__(self, "direction", Vector.of(self.direction).normalize())

    def at(self, distance: float) -> Vector:
        """Compute the point ``source + direction * distance``."""
        return self.source + self.direction * distance

    def nearest(self, entities: Iterable[EntityT]) -> tuple[float, EntityT | None]:
        """Find the entity this ray hits first.

        Entities are scanned in order and only a strictly smaller distance
        replaces the current best, so on exactly coincident distances the
        earliest entity wins.

        Args:
            entities: Surfaces or lights to test.

        Returns:
            A tuple of (distance, entity). When nothing is hit the distance
            is ``NO_HIT`` and the entity is None.
        """
        distance = NO_HIT
        nearest = None
        for entity in entities:
            length = entity.intersect(self)
            if length < distance:
                distance = length
                nearest = entity
        return distance, nearest

    def intersect(self, entities: Iterable[Intersectable]) -> float:
        """Distance to the nearest entity hit, or ``NO_HIT``."""
        return self.nearest(entities)[0]
