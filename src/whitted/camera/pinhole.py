"""Pinhole camera model for perspective projection ray generation.

This module implements a pinhole camera that generates one primary ray
through the center of every pixel. The camera supports:
- Look-at positioning (lookfrom, lookat, vup)
- Vertical field of view specification
- Arbitrary image sizes (aspect ratio follows width / height)

The camera builds an orthonormal basis (u, v, w) from the view parameters:
- w: points from lookat toward lookfrom (opposite view direction)
- u: points right in the image plane
- v: points up in the image plane

Pixel (0, 0) is the top-left corner of the image and y grows downward,
matching the row-major layout of the frame buffer.

Example:
    >>> from whitted.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(
    ...     width=320,
    ...     height=240,
    ...     lookfrom=(0.0, 1.0, 5.0),
    ...     lookat=(0.0, 0.0, 0.0),
    ... )
    >>> ray = camera.ray(160, 120)  # Ray through the image center
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.ray import Ray, Vector

# Minimum length of cross(vup, w) before the view is considered degenerate
_DEGENERATE_BASIS = 1e-8


class PinholeCamera:
    """A pinhole (perspective) camera.

    A pinhole camera produces perfect perspective projection with no
    depth of field effects.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        origin: Camera position in world space.
        u: Right direction of the image plane.
        v: Up direction of the image plane.
        w: Backward direction (opposite the view direction).
    """

    def __init__(
        self,
        width: int,
        height: int,
        lookfrom: tuple[float, float, float] = (0.0, 0.0, 0.0),
        lookat: tuple[float, float, float] = (0.0, 0.0, -1.0),
        vup: tuple[float, float, float] = (0.0, 1.0, 0.0),
        vfov: float = 60.0,
    ) -> None:
        """Initialize the camera and precompute the viewport.

        Args:
            width: Image width in pixels, at least 1.
            height: Image height in pixels, at least 1.
            lookfrom: Camera position in world space.
            lookat: Point the camera looks at.
            vup: Up direction used to orient the camera.
            vfov: Vertical field of view in degrees, in (0, 180).

        Raises:
            ValueError: If the image size or field of view is out of range,
                or if lookfrom equals lookat or vup is parallel to the
                view direction.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {width}x{height}")
        if not 0.0 < vfov < 180.0:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {vfov}")

        self._width = int(width)
        self._height = int(height)
        self.vfov = float(vfov)

        # Viewport dimensions at unit distance
        viewport_height = 2.0 * math.tan(math.radians(vfov) / 2.0)
        viewport_width = viewport_height * self._width / self._height

        # Build orthonormal basis using NumPy
        eye = np.array(lookfrom, dtype=np.float64)
        target = np.array(lookat, dtype=np.float64)
        up = np.array(vup, dtype=np.float64)

        w = eye - target
        w_norm = np.linalg.norm(w)
        if w_norm < _DEGENERATE_BASIS:
            raise ValueError("lookfrom and lookat must be different points")
        w = w / w_norm

        u = np.cross(up, w)
        u_norm = np.linalg.norm(u)
        if u_norm < _DEGENERATE_BASIS:
            raise ValueError("vup must not be parallel to the view direction")
        u = u / u_norm

        v = np.cross(w, u)

        self.origin = Vector.of(eye)
        self.u = Vector.of(u)
        self.v = Vector.of(v)
        self.w = Vector.of(w)

        # Viewport spans, and its upper-left corner one unit in front of the eye
        self._horizontal = self.u * viewport_width
        self._vertical = self.v * viewport_height
        self._upper_left = self.origin - self.w - self._horizontal / 2.0 + self._vertical / 2.0

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    def ray(self, x: int, y: int) -> Ray:
        """Generate the primary ray through the center of pixel (x, y).

        Args:
            x: Pixel column, 0 = left.
            y: Pixel row, 0 = top.

        Returns:
            A Ray from the camera origin through the pixel center.
        """
        s = (x + 0.5) / self._width
        t = (y + 0.5) / self._height
        target = self._upper_left + self._horizontal * s - self._vertical * t
        return Ray(self.origin, target - self.origin)

    def __repr__(self) -> str:
        return (
            f"PinholeCamera(width={self._width}, height={self._height}, "
            f"origin={self.origin!r}, vfov={self.vfov!r})"
        )
