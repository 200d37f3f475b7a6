"""Lights module for light sources.

Components:
    light: Abstract Light base and the Illumination result
    distant: DistantLight, a direction-only light at infinity
    point: PointLight, a positional light with a visible bulb

Lights are both illuminators (illuminate -> Illumination) and entities
in the nearest-hit search (intersect -> distance).
"""

from .distant import DistantLight
from .light import Illumination, Light
from .point import PointLight

__all__ = [
    "Light",
    "Illumination",
    "DistantLight",
    "PointLight",
]
