"""Materials module: shading coefficients and surface colors.

Components:
    texture: Texture (solid color) and CheckerTexture
    presets: diffuse, plastic, mirror and glass constructors

A material is plain immutable data read by the tracer. Every weight is
looked up per hit, so one texture can be shared across many surfaces.
"""

from .presets import GLASS_IOR, diffuse, glass, mirror, plastic
from .texture import CheckerTexture, Texture

__all__ = [
    "Texture",
    "CheckerTexture",
    "GLASS_IOR",
    "diffuse",
    "plastic",
    "mirror",
    "glass",
]
