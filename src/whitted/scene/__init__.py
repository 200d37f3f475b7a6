"""Scene module for scene assembly, rendering and output.

Components:
    manager: Scene, the façade holding camera, entities, config and frame
    showcase: Factory for a demonstration scene

The scene holds plain references to its lights and surfaces. They are
read-only while a frame renders, which is what lets the worker threads
share them without locking.
"""

from .manager import Scene
from .showcase import ShowcaseParams, create_showcase_scene

__all__ = [
    "Scene",
    "ShowcaseParams",
    "create_showcase_scene",
]
