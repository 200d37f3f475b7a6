"""Preview module for output of rendered frames.

Components:
    export: Frame quantization and PPM / PNG writers (Pillow)
"""

from .export import frame_to_uint8, ppm_header, save_png, save_ppm, to_pil_image

__all__ = [
    "frame_to_uint8",
    "to_pil_image",
    "save_ppm",
    "save_png",
    "ppm_header",
]
