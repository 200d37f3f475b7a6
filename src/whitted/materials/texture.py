"""Surface materials: shading coefficients plus a position-dependent color.

A Texture bundles the four Whitted shading weights with the color a
surface shows at a given point:

- k_diffusive: Lambertian response to direct light
- k_specular: Phong highlight response to direct light
- k_reflective: weight of the recursively traced mirror ray
- k_refractive: weight of the recursively traced transmitted ray
- k_refractive_index: index of refraction of the medium behind the surface

The weights are informally in [0, 1] but are not clamped, so over-bright
materials are possible. Textures are immutable and may be shared by any
number of surfaces.

Example:
    >>> from whitted.core.ray import Color, Vector
    >>> from whitted.materials.texture import CheckerTexture
    >>> floor = CheckerTexture(Color(1, 1, 1), alt_color=Color(0.1, 0.1, 0.1))
    >>> floor.sample(Vector(0.5, 0.0, 0.5))
    Vector(1.0, 1.0, 1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import NUMERIC_EPS, WHITE, Color, Vector


def _non_negative_color(name: str, value: Color) -> Color:
    color = Color.of(value)
    if any(c < 0.0 for c in color):
        raise ValueError(f"{name} components must be non-negative, got {color}")
    return color


@dataclass(frozen=True)
class Texture:
    """A solid-colored material.

    Attributes:
        color: The surface color (RGB).
        k_diffusive: Diffuse (Lambertian) weight.
        k_specular: Specular (Phong) weight.
        k_reflective: Mirror reflection weight.
        k_refractive: Transmission weight.
        k_refractive_index: Refractive index of the material, must be > 0.

    Raises:
        ValueError: If a color component is negative or the refractive
            index is not positive.
    """

    color: Color = WHITE
    k_diffusive: float = 1.0
    k_specular: float = 0.0
    k_reflective: float = 0.0
    k_refractive: float = 0.0
    k_refractive_index: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", _non_negative_color("Color", self.color))
        if self.k_refractive_index <= 0.0:
            raise ValueError(
                f"Refractive index must be positive, got {self.k_refractive_index}"
            )

    def sample(self, point: Vector) -> Color:
        """Return the surface color at ``point``."""
        return self.color


@dataclass(frozen=True)
class CheckerTexture(Texture):
    """A 3D checkerboard alternating between two colors.

    The cell containing ``point`` is found by flooring each coordinate
    divided by ``scale`` (nudged by NUMERIC_EPS so points lying on a cell
    boundary do not flicker between cells). Cells whose index sum is even
    take ``color``, odd cells take ``alt_color``.

    Attributes:
        alt_color: The color of the odd cells.
        scale: Edge length of one checker cell, must be > 0.
    """

    alt_color: Color = Color(0.0, 0.0, 0.0)
    scale: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        alt_color = _non_negative_color("Alternate color", self.alt_color)
        object.__setattr__(self, "alt_color", alt_color)
        if self.scale <= 0.0:
            raise ValueError(f"Checker scale must be positive, got {self.scale}")

    def sample(self, point: Vector) -> Color:
        cells = (
            math.floor(point.x / self.scale + NUMERIC_EPS)
            + math.floor(point.y / self.scale + NUMERIC_EPS)
            + math.floor(point.z / self.scale + NUMERIC_EPS)
        )
        return self.color if cells % 2 == 0 else self.alt_color
