"""Scene container coordinating camera, entities, configuration and frame.

The Scene is the entry point callers use to assemble and render an image:

- add lights and surfaces (borrowed; the scene never copies or mutates them)
- tune the RenderConfig before rendering
- render() the frame with the parallel scheduler
- save() the result as a binary PPM

The frame buffer is allocated when the scene is built and is owned by the
scene. Each render overwrites every pixel exactly once.

Example:
    >>> from whitted.camera import PinholeCamera
    >>> from whitted.core.ray import WHITE
    >>> from whitted.geometry import Plane
    >>> from whitted.lights import DistantLight
    >>> from whitted.materials import diffuse
    >>> from whitted.scene.manager import Scene
    >>> camera = PinholeCamera(64, 48, lookfrom=(0, 2, 5), lookat=(0, 0, 0))
    >>> scene = Scene(camera)
    >>> scene.add(Plane((0, 0, 0), (0, 1, 0), diffuse()))
    >>> scene.add(DistantLight(WHITE, 1.0, (0, -1, 0)))
    >>> scene.config.thread_worker_count = 2
    >>> scene.render()
    >>> scene.save("plane.ppm")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from whitted.core.integrator import RenderConfig, trace
from whitted.core.ray import Color, Ray
from whitted.core.scheduler import Camera, ProgressCallback, render_frame
from whitted.geometry.surface import Surface
from whitted.lights.light import Light
from whitted.preview.export import StrPath, frame_to_uint8, save_png, save_ppm

logger = logging.getLogger(__name__)


class Scene:
    """A renderable scene bound to a camera.

    Attributes:
        camera: The camera producing primary rays.
        config: Render settings, editable until render() is called.
        lights: Registered lights, in insertion order.
        surfaces: Registered surfaces, in insertion order.
    """

    def __init__(self, camera: Camera, config: RenderConfig | None = None) -> None:
        """Initialize an empty scene and allocate its frame buffer.

        Args:
            camera: Camera exposing width, height and ray(x, y).
            config: Render settings. Defaults to RenderConfig().
        """
        self.camera = camera
        self.config = config if config is not None else RenderConfig()
        self.lights: list[Light] = []
        self.surfaces: list[Surface] = []
        self._frame = np.zeros((camera.height, camera.width, 3), dtype=np.float64)
        self._rendered = False

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.camera.width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.camera.height

    @property
    def frame(self) -> npt.NDArray[np.float64]:
        """The linear color buffer of shape (height, width, 3)."""
        return self._frame

    @property
    def rendered(self) -> bool:
        """Whether render() has completed at least once."""
        return self._rendered

    # =========================================================================
    # Scene assembly
    # =========================================================================

    def add(self, entity: Light | Surface) -> None:
        """Register a light or a surface.

        Args:
            entity: A Light or Surface instance. The scene keeps a reference
                but never takes ownership.

        Raises:
            TypeError: If the entity is neither a Light nor a Surface.
        """
        if isinstance(entity, Light):
            self.lights.append(entity)
        elif isinstance(entity, Surface):
            self.surfaces.append(entity)
        else:
            raise TypeError(
                f"Expected a Light or Surface, got {type(entity).__name__}"
            )

    def add_all(self, entities: Iterable[Light | Surface]) -> None:
        """Register several lights and surfaces at once."""
        for entity in entities:
            self.add(entity)

    # =========================================================================
    # Rendering
    # =========================================================================

    def trace(self, ray: Ray) -> Color:
        """Trace a single primary ray with the scene's entities and settings."""
        return trace(ray, self.lights, self.surfaces, self.config)

    def render(self, callback: ProgressCallback | None = None) -> None:
        """Render every pixel into the frame buffer.

        Blocks until the whole frame is traced. Progress goes to the
        ``whitted.core.scheduler`` logger unless a callback is given.

        Args:
            callback: Optional progress callback receiving
                (pixels_done, pixels_total, elapsed_seconds).

        Raises:
            ValueError: If the configuration is invalid.
            RenderError: If tracing a pixel raised.
        """
        self.config.validate()
        logger.debug(
            "rendering %d surfaces and %d lights, depth %d",
            len(self.surfaces),
            len(self.lights),
            self.config.trace_depth,
        )
        self._rendered = False
        render_frame(
            self.camera,
            self.trace,
            self._frame,
            worker_count=self.config.thread_worker_count,
            progress_interval=self.config.progress_interval,
            callback=callback,
        )
        self._rendered = True

    # =========================================================================
    # Output
    # =========================================================================

    def _check_rendered(self) -> None:
        if not self._rendered:
            raise RuntimeError("Scene has not been rendered. Call render() first.")

    def image(self) -> npt.NDArray[np.uint8]:
        """Get the rendered frame as an 8-bit (height, width, 3) array.

        Raises:
            RuntimeError: If the scene has not been rendered.
        """
        self._check_rendered()
        return frame_to_uint8(self._frame)

    def save(self, filepath: StrPath) -> None:
        """Save the rendered frame as a binary PPM (P6) file.

        Raises:
            RuntimeError: If the scene has not been rendered.
            OSError: If the file cannot be written.
        """
        self._check_rendered()
        save_ppm(self._frame, filepath)

    def save_png(self, filepath: StrPath, gamma: float = 1.0) -> None:
        """Save the rendered frame as a PNG file.

        Raises:
            RuntimeError: If the scene has not been rendered.
            OSError: If the file cannot be written.
        """
        self._check_rendered()
        save_png(self._frame, filepath, gamma=gamma)

    def __repr__(self) -> str:
        return (
            f"Scene(width={self.width}, height={self.height}, "
            f"lights={len(self.lights)}, surfaces={len(self.surfaces)})"
        )
