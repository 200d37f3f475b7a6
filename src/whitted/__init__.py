"""Whitted-style recursive ray tracer.

This package renders still images of surfaces and lights by tracing rays
from a pinhole camera, with support for:
- Direct lighting with Lambertian diffuse and Phong specular terms
- Hard shadows from distant and point lights
- Recursive mirror reflection and refraction
- Parallel rendering of the pixel grid over a thread pool
- Binary PPM (and PNG) output

Subpackages:
    core: Vector algebra, rays, the tracer and the pixel scheduler
    geometry: Surface contract and primitives (plane, sphere)
    lights: Light contract and light sources (distant, point)
    materials: Textures and material presets
    camera: Pinhole camera
    scene: Scene assembly, rendering and the showcase scene
    preview: Frame quantization and image export
"""

from .camera import PinholeCamera
from .core.integrator import RenderConfig, trace
from .core.ray import Color, Ray, Vector
from .core.scheduler import RenderError
from .geometry import Plane, Sphere, Surface
from .lights import DistantLight, Illumination, Light, PointLight
from .materials import CheckerTexture, Texture
from .scene import Scene

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Color",
    "Ray",
    "RenderConfig",
    "RenderError",
    "trace",
    "Surface",
    "Plane",
    "Sphere",
    "Light",
    "Illumination",
    "DistantLight",
    "PointLight",
    "Texture",
    "CheckerTexture",
    "PinholeCamera",
    "Scene",
]
