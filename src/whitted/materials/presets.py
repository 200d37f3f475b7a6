"""Ready-made textures for common material looks.

These are thin constructors over Texture that pick sensible coefficient
combinations, so scene code can say ``glass()`` instead of spelling out
five weights.
"""

from __future__ import annotations

from collections.abc import Iterable

from whitted.core.ray import WHITE, Color
from whitted.materials.texture import Texture

ColorLike = Color | Iterable[float]

# Index of refraction of common crown glass
GLASS_IOR = 1.5


def diffuse(color: ColorLike = WHITE, k_diffusive: float = 1.0) -> Texture:
    """A matte surface lit only through the Lambertian term."""
    return Texture(color=color, k_diffusive=k_diffusive)


def plastic(
    color: ColorLike = WHITE,
    k_diffusive: float = 0.8,
    k_specular: float = 0.3,
) -> Texture:
    """A matte surface with a Phong highlight."""
    return Texture(
        color=color,
        k_diffusive=k_diffusive,
        k_specular=k_specular,
    )


def mirror(color: ColorLike = WHITE, k_reflective: float = 1.0) -> Texture:
    """A perfect mirror tinted by ``color``.

    Args:
        color: Tint applied to everything seen in the mirror.
        k_reflective: Weight of the reflected ray.

    Returns:
        A texture with no diffuse response and only mirror reflection.
    """
    return Texture(
        color=color,
        k_diffusive=0.0,
        k_reflective=k_reflective,
    )


def glass(
    ior: float = GLASS_IOR,
    color: ColorLike = WHITE,
    k_reflective: float = 0.1,
    k_refractive: float = 0.9,
) -> Texture:
    """A clear dielectric that mostly transmits and slightly reflects.

    Args:
        ior: Index of refraction, must be positive.
        color: Tint applied to the transmitted and reflected light.
        k_reflective: Weight of the reflected ray.
        k_refractive: Weight of the transmitted ray.

    Returns:
        A texture suitable for spheres or other closed surfaces.

    Raises:
        ValueError: If ior is not positive.
    """
    return Texture(
        color=color,
        k_diffusive=0.0,
        k_specular=0.2,
        k_reflective=k_reflective,
        k_refractive=k_refractive,
        k_refractive_index=ior,
    )
