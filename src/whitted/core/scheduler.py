"""Parallel pixel scheduler driving the tracer across a worker pool.

Every pixel coordinate is queued up front. A fixed pool of worker threads
drains the queue, each pixel being handed to exactly one worker, and
writes the traced color into its own slot of the frame buffer. Since the
slots are disjoint no locking is needed on the frame; only the completion
counter is shared.

The calling thread acts as coordinator: it sleeps for a fixed interval,
reports progress through a callback, and joins the workers once every
pixel is done. The call is synchronous and cannot be cancelled.

Example:
    >>> import numpy as np
    >>> from whitted.core.scheduler import render_frame
    >>> frame = np.zeros((camera.height, camera.width, 3))
    >>> render_frame(camera, shade, frame, worker_count=4)
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable
from typing import Protocol

import numpy as np
import numpy.typing as npt

from whitted.core.ray import Color, Ray

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (pixels_done, pixels_total, elapsed_seconds)
ProgressCallback = Callable[[int, int, float], None]

# Default seconds between two progress reports
PROGRESS_INTERVAL = 0.05


class Camera(Protocol):
    """What the scheduler needs from a camera."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def ray(self, x: int, y: int) -> Ray: ...


class RenderError(RuntimeError):
    """Raised when a worker fails while tracing a pixel."""


class _Counter:
    """Thread-safe completion counter."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def log_progress(done: int, total: int, elapsed: float) -> None:
    """Default progress callback: report through the module logger."""
    logger.info("rendered %d/%d pixels in %.2f seconds", done, total, elapsed)


def render_frame(
    camera: Camera,
    shade: Callable[[Ray], Color],
    frame: npt.NDArray[np.float64],
    worker_count: int,
    progress_interval: float = PROGRESS_INTERVAL,
    callback: ProgressCallback | None = None,
) -> None:
    """Trace every pixel of ``camera`` into ``frame`` using worker threads.

    Args:
        camera: Supplies the frame size and the primary ray per pixel.
        shade: Maps a primary ray to its color; must be safe to call from
            several threads at once.
        frame: Output buffer of shape (height, width, 3). Pixel (x, y) is
            written to ``frame[y, x]`` exactly once.
        worker_count: Number of worker threads, at least 1.
        progress_interval: Seconds the coordinator sleeps between reports.
        callback: Receives (pixels_done, pixels_total, elapsed_seconds)
            periodically and once more when the frame is complete.
            Defaults to logging the progress.

    Raises:
        ValueError: If ``worker_count`` is below 1 or ``frame`` has the
            wrong shape.
        RenderError: If any worker raised while tracing. The original
            exception is chained.

    If ``callback`` raises, the workers are stopped and joined before the
    exception propagates.
    """
    width, height = camera.width, camera.height
    if worker_count < 1:
        raise ValueError(f"worker_count must be at least 1, got {worker_count}")
    if frame.shape != (height, width, 3):
        raise ValueError(
            f"Frame shape {frame.shape} does not match camera ({height}, {width}, 3)"
        )
    if callback is None:
        callback = log_progress

    total = width * height
    pixels: queue.SimpleQueue[tuple[int, int]] = queue.SimpleQueue()
    for y in range(height):
        for x in range(width):
            pixels.put((x, y))

    counter = _Counter()
    failures: list[BaseException] = []
    failed = threading.Event()

    def work() -> None:
        while not failed.is_set():
            try:
                x, y = pixels.get_nowait()
            except queue.Empty:
                return
            try:
                frame[y, x] = tuple(shade(camera.ray(x, y)))
            except Exception as e:
                failures.append(e)
                failed.set()
                return
            counter.increment()

    start = time.perf_counter()
    logger.info(
        "start rendering %dx%d with %d thread workers", width, height, worker_count
    )

    workers = [
        threading.Thread(target=work, name=f"whitted-worker-{i}", daemon=True)
        for i in range(worker_count)
    ]
    for worker in workers:
        worker.start()

    try:
        done = counter.value
        while done < total and not failed.is_set():
            callback(done, total, time.perf_counter() - start)
            time.sleep(progress_interval)
            done = counter.value
    except BaseException:
        # Workers must not outlive the call and keep writing into the frame.
        failed.set()
        raise
    finally:
        for worker in workers:
            worker.join()

    if failures:
        raise RenderError(f"Rendering failed after {counter.value}/{total} pixels") from failures[0]

    elapsed = time.perf_counter() - start
    callback(counter.value, total, elapsed)
    logger.info("done in %.2f seconds", elapsed)
