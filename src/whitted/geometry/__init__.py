"""Geometry module for surface primitives.

This module provides the Surface contract and its concrete primitives:

Components:
    surface: Abstract Surface base (intersect / normal / color)
    plane: Infinite plane
    sphere: Sphere, plus the intersect_sphere helper shared with lights

Ray-surface intersection follows the pattern:
    distance = surface.intersect(ray)   # NO_HIT when missed
    normal = surface.normal(ray.at(distance))
"""

from .plane import Plane
from .sphere import Sphere, intersect_sphere
from .surface import Surface

__all__ = [
    "Surface",
    "Plane",
    "Sphere",
    "intersect_sphere",
]
