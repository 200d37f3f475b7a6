"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |source + t * direction - center|^2 = radius^2

With a unit direction this is the quadratic ``t^2 + 2*h*t + c = 0`` where
``oc = source - center``, ``h = direction . oc`` and ``c = oc . oc - r^2``.
The roots are computed with the numerically stable form:

    q = -(h + sign(h) * sqrt(h^2 - c))
    t0, t1 = sorted(q, c / q)

The nearest root in front of the ray (beyond ``-NUMERIC_EPS``) wins, which
also covers rays that start inside the sphere, as transmitted rays do.

Example:
    >>> from whitted.core.ray import Ray, Vector
    >>> from whitted.geometry.sphere import Sphere
    >>> from whitted.materials import glass
    >>> ball = Sphere(Vector(0, 0, -5), 1.0, glass())
    >>> ball.intersect(Ray(Vector(0, 0, 0), Vector(0, 0, -1)))
    4.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from whitted.core.ray import NO_HIT, NUMERIC_EPS, Ray, Vector
from whitted.geometry.surface import Surface
from whitted.materials.texture import Texture


def intersect_sphere(ray: Ray, center: Vector, radius: float) -> float:
    """Distance along ``ray`` to the first hit on a sphere.

    Args:
        ray: The ray to test (unit direction).
        center: Center of the sphere.
        radius: Radius of the sphere.

    Returns:
        The nearest root greater than ``-NUMERIC_EPS``, or ``NO_HIT``.
    """
    oc = ray.source - center
    h = ray.direction.dot(oc)
    c = oc.dot(oc) - radius * radius
    discriminant = h * h - c
    if discriminant < 0.0:
        return NO_HIT

    sqrt_d = math.sqrt(discriminant)
    q = -(h + math.copysign(sqrt_d, h))
    if q == 0.0:
        # Degenerate: the source lies on the sphere and the ray is tangent.
        t0 = t1 = 0.0
    else:
        t0, t1 = sorted((q, c / q))

    if t0 > -NUMERIC_EPS:
        return t0
    if t1 > -NUMERIC_EPS:
        return t1
    return NO_HIT


class Sphere(Surface):
    """A sphere defined by center and radius.

    Attributes:
        center: The center of the sphere.
        radius: The radius, must be positive.
    """

    def __init__(
        self,
        center: Vector | Iterable[float],
        radius: float,
        texture: Texture,
    ) -> None:
        super().__init__(texture)
        if radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = Vector.of(center)
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> float:
        return intersect_sphere(ray, self.center, self.radius)

    def normal(self, point: Vector) -> Vector:
        """Outward unit normal at ``point``."""
        return (point - self.center) / self.radius

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius!r})"
