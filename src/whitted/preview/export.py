"""Image export utilities for rendered frames.

This module converts the floating-point frame buffer to 8-bit RGB and
writes it to disk through Pillow.

Supported formats:
    - PPM (binary P6), the renderer's native output
    - PNG (8-bit, optional gamma correction)

Each channel is quantized as ``round(clamp(value, 0, 1) * 255)``. A P6
file is the ASCII header ``"P6\\n<width> <height>\\n255\\n"`` followed by
``width * height * 3`` bytes in row-major RGB order.

Example:
    >>> from whitted.preview.export import save_ppm
    >>> scene.render()
    >>> save_ppm(scene.frame, "output.ppm")
"""

from __future__ import annotations

import logging
from os import PathLike

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)

StrPath = str | PathLike[str]


def frame_to_uint8(
    frame: npt.NDArray[np.floating],
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Quantize a linear frame to 8 bits per channel.

    Args:
        frame: Image array of shape (H, W, 3).
        gamma: Gamma correction value. Default 1.0 (linear, no correction).

    Returns:
        Array of shape (H, W, 3) with dtype uint8.

    Raises:
        ValueError: If the frame is not an (H, W, 3) array or gamma is not
            positive.
    """
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) frame, got shape {frame.shape}")
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")

    image = np.clip(frame, 0.0, 1.0)
    if gamma != 1.0:
        image = np.power(image, 1.0 / gamma)
    return np.rint(image * 255.0).astype(np.uint8)


def to_pil_image(frame: npt.NDArray[np.floating], gamma: float = 1.0) -> PILImage.Image:
    """Convert a linear frame to an RGB Pillow image."""
    return PILImage.fromarray(frame_to_uint8(frame, gamma=gamma))


def save_ppm(frame: npt.NDArray[np.floating], filepath: StrPath) -> None:
    """Save a frame as a binary PPM (P6) file.

    Args:
        frame: Linear image array of shape (H, W, 3).
        filepath: Output file path.

    Raises:
        OSError: If the file cannot be written.
    """
    to_pil_image(frame).save(filepath, format="PPM")
    logger.debug("saved %dx%d PPM to %s", frame.shape[1], frame.shape[0], filepath)


def save_png(
    frame: npt.NDArray[np.floating],
    filepath: StrPath,
    *,
    gamma: float = 1.0,
) -> None:
    """Save a frame as an 8-bit PNG file.

    Args:
        frame: Linear image array of shape (H, W, 3).
        filepath: Output file path.
        gamma: Gamma correction value (2.2 for sRGB display).

    Raises:
        OSError: If the file cannot be written.
    """
    to_pil_image(frame, gamma=gamma).save(filepath, format="PNG")
    logger.debug("saved %dx%d PNG to %s", frame.shape[1], frame.shape[0], filepath)


def ppm_header(width: int, height: int) -> bytes:
    """The exact header a P6 file of the given size starts with."""
    return b"P6\n%d %d\n255\n" % (width, height)
