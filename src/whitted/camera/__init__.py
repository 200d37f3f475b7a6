"""Camera module for view and ray generation.

Components:
    pinhole: Simple pinhole (perspective) camera model

A camera is anything exposing ``width``, ``height`` and ``ray(x, y)``;
the scene and the scheduler only rely on that interface.
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
