"""Infinite plane primitive with ray-plane intersection.

A plane is defined by:
- point: Any point lying on the plane
- normal: The unit normal (normalized on construction)

Ray-plane intersection solves ``(source + t * d - point) . n = 0``:

    t = (point - source) . n / (n . d)

Rays (near-)parallel to the plane and planes behind the ray source report
NO_HIT. A small negative tolerance lets rays that start marginally behind
the plane (grazing starts) still register the hit.

Example:
    >>> from whitted.core.ray import Ray, Vector
    >>> from whitted.geometry.plane import Plane
    >>> from whitted.materials import diffuse
    >>> floor = Plane(Vector(0, 0, 0), Vector(0, 1, 0), diffuse())
    >>> floor.intersect(Ray(Vector(0, 2, 0), Vector(0, -1, 0)))
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable

from whitted.core.ray import NO_HIT, NUMERIC_EPS, Ray, Vector
from whitted.geometry.surface import Surface
from whitted.materials.texture import Texture


class Plane(Surface):
    """An infinite, single-normal plane.

    Attributes:
        point: A point on the plane.
        normal_vector: The unit normal of the plane.
    """

    def __init__(
        self,
        point: Vector | Iterable[float],
        normal: Vector | Iterable[float],
        texture: Texture,
    ) -> None:
        super().__init__(texture)
        normal = Vector.of(normal)
        if normal.length() < NUMERIC_EPS:
            raise ValueError("Plane normal must be a non-zero vector")
        self.point = Vector.of(point)
        self.normal_vector = normal.normalize()

    def intersect(self, ray: Ray) -> float:
        denominator = self.normal_vector.dot(ray.direction)
        if abs(denominator) < NUMERIC_EPS:
            return NO_HIT
        distance = (self.point - ray.source).dot(self.normal_vector) / denominator
        if distance > -NUMERIC_EPS:
            return distance
        return NO_HIT

    def normal(self, point: Vector) -> Vector:
        return self.normal_vector

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal_vector!r})"
