"""Showcase scene configuration.

This module provides a factory function for a small demonstration scene
that exercises every shading path of the tracer:

- Checkerboard floor (diffuse, textured by position)
- Back wall that is part mirror, part diffuse
- 3 spheres: red plastic (diffuse + specular), chrome mirror, glass
- A distant "sun" light casting hard shadows
- A point light with a visible bulb

The coordinate system places the floor at y = 0 with the camera in front
of the scene (positive z) looking toward -z.

Example:
    >>> from whitted.scene.showcase import create_showcase_scene
    >>> scene = create_showcase_scene(width=320, height=240)
    >>> scene.render()
    >>> scene.save("showcase.ppm")
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.camera.pinhole import PinholeCamera
from whitted.core.integrator import RenderConfig
from whitted.core.ray import Color
from whitted.geometry import Plane, Sphere
from whitted.lights import DistantLight, PointLight
from whitted.materials import CheckerTexture, Texture, glass, mirror, plastic
from whitted.scene.manager import Scene

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        sun_intensity: Scalar intensity of the distant light.
        sun_color: RGB color of the distant light.
        sun_direction: Direction the sunlight travels.
        bulb_intensity: Scalar intensity of the point light.
        bulb_position: Position of the point light.
        sphere_color: RGB color of the plastic sphere.
        glass_ior: Index of refraction of the glass sphere.
        environment_color: Background / ambient color.

    Example:
        >>> params = ShowcaseParams(sun_intensity=0.5, glass_ior=1.33)
    """

    sun_intensity: float = 0.7
    sun_color: tuple[float, float, float] = (1.0, 0.95, 0.85)
    sun_direction: tuple[float, float, float] = (-1.0, -2.0, -1.5)
    bulb_intensity: float = 0.3
    bulb_position: tuple[float, float, float] = (2.5, 3.0, 1.0)
    sphere_color: tuple[float, float, float] = (0.9, 0.15, 0.1)
    glass_ior: float = 1.5
    environment_color: tuple[float, float, float] = (0.05, 0.05, 0.08)


# =============================================================================
# Showcase Constants
# =============================================================================

FLOOR_LIGHT = (0.9, 0.9, 0.9)
FLOOR_DARK = (0.15, 0.15, 0.15)
CHECKER_SIZE = 1.0

WALL_COLOR = (0.8, 0.85, 0.9)
WALL_DISTANCE = 6.0

CAMERA_POSITION = (0.0, 2.0, 6.0)
CAMERA_TARGET = (0.0, 0.8, 0.0)
CAMERA_VFOV = 50.0


# =============================================================================
# Showcase Factory
# =============================================================================


def create_showcase_scene(
    width: int = 320,
    height: int = 240,
    params: ShowcaseParams | None = None,
    config: RenderConfig | None = None,
) -> Scene:
    """Create the showcase scene with its camera.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        params: Optional ShowcaseParams for customizing lights and materials.
            If None, uses default ShowcaseParams().
        config: Optional render settings. If None, a RenderConfig is built
            with the params' environment color.

    Returns:
        A Scene ready to render.
    """
    if params is None:
        params = ShowcaseParams()
    if config is None:
        config = RenderConfig(environment_color=Color.of(params.environment_color))

    camera = PinholeCamera(
        width,
        height,
        lookfrom=CAMERA_POSITION,
        lookat=CAMERA_TARGET,
        vup=(0.0, 1.0, 0.0),
        vfov=CAMERA_VFOV,
    )
    scene = Scene(camera, config)

    floor = CheckerTexture(
        color=FLOOR_LIGHT,
        alt_color=FLOOR_DARK,
        scale=CHECKER_SIZE,
        k_diffusive=0.8,
        k_reflective=0.1,
    )
    wall = Texture(color=WALL_COLOR, k_diffusive=0.3, k_reflective=0.5)

    scene.add_all(
        [
            Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), floor),
            Plane((0.0, 0.0, -WALL_DISTANCE), (0.0, 0.0, 1.0), wall),
            Sphere((-1.6, 0.8, -0.5), 0.8, plastic(params.sphere_color)),
            Sphere((0.0, 1.0, -2.0), 1.0, mirror(Color(0.95, 0.93, 0.88), k_reflective=0.9)),
            Sphere((1.4, 0.7, 0.6), 0.7, glass(params.glass_ior)),
            DistantLight(params.sun_color, params.sun_intensity, params.sun_direction),
            PointLight((1.0, 1.0, 1.0), params.bulb_intensity, params.bulb_position, radius=0.1),
        ]
    )
    return scene
