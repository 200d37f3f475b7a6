"""Tests for the parallel pixel scheduler.

This module tests:
- Every pixel is traced exactly once and lands in frame[y, x]
- Progress callbacks and the default progress logging
- Argument validation
- Worker failures surfacing as RenderError
"""

import logging
import threading
from collections import Counter

import numpy as np
import pytest

from whitted.core.ray import Color, Ray, Vector
from whitted.core.scheduler import RenderError, log_progress, render_frame


class CoordinateCamera:
    """Camera encoding the pixel coordinates in each ray's source."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def ray(self, x, y):
        return Ray(Vector(float(x), float(y), 0.0), Vector(0.0, 0.0, -1.0))


def coordinate_shade(ray):
    """Color each pixel with its own (x, y) coordinates."""
    return Color(ray.source.x, ray.source.y, 1.0)


def blank_frame(camera):
    return np.zeros((camera.height, camera.width, 3), dtype=np.float64)


class TestPixelCoverage:
    """Tests that the whole frame is rendered exactly once."""

    @pytest.mark.parametrize("worker_count", [1, 2, 4, 7])
    def test_every_pixel_written_to_its_slot(self, worker_count):
        """Test frame[y, x] holds the color traced for pixel (x, y)."""
        camera = CoordinateCamera(9, 5)
        frame = blank_frame(camera)

        render_frame(camera, coordinate_shade, frame, worker_count, progress_interval=0.001)

        ys, xs = np.mgrid[0:5, 0:9]
        np.testing.assert_array_equal(frame[..., 0], xs)
        np.testing.assert_array_equal(frame[..., 1], ys)
        np.testing.assert_array_equal(frame[..., 2], np.ones((5, 9)))

    def test_each_pixel_traced_once(self):
        """Test no pixel is handed to two workers."""
        camera = CoordinateCamera(6, 4)
        seen = Counter()
        lock = threading.Lock()

        def shade(ray):
            with lock:
                seen[(ray.source.x, ray.source.y)] += 1
            return Color(0.0, 0.0, 0.0)

        render_frame(camera, shade, blank_frame(camera), 3, progress_interval=0.001)

        assert len(seen) == 24
        assert set(seen.values()) == {1}

    def test_more_workers_than_pixels(self):
        """Test idle workers exit cleanly on a tiny frame."""
        camera = CoordinateCamera(1, 1)
        frame = blank_frame(camera)
        render_frame(camera, coordinate_shade, frame, 8, progress_interval=0.001)
        assert frame[0, 0].tolist() == [0.0, 0.0, 1.0]

    def test_uses_worker_threads(self):
        """Test pixels are traced off the calling thread."""
        camera = CoordinateCamera(4, 4)
        names = set()

        def shade(ray):
            names.add(threading.current_thread().name)
            return Color(0.0, 0.0, 0.0)

        render_frame(camera, shade, blank_frame(camera), 2, progress_interval=0.001)

        assert threading.current_thread().name not in names
        assert all(name.startswith("whitted-worker-") for name in names)


class TestProgress:
    """Tests for progress reporting."""

    def test_final_callback_reports_completion(self):
        """Test the last report is (total, total, elapsed)."""
        camera = CoordinateCamera(5, 3)
        reports = []

        render_frame(
            camera,
            coordinate_shade,
            blank_frame(camera),
            2,
            progress_interval=0.001,
            callback=lambda done, total, elapsed: reports.append((done, total, elapsed)),
        )

        done, total, elapsed = reports[-1]
        assert (done, total) == (15, 15)
        assert elapsed >= 0.0

    def test_reports_are_monotonic(self):
        """Test periodic reports never go backwards and never overshoot."""
        camera = CoordinateCamera(8, 8)
        reports = []

        def slow_shade(ray):
            threading.Event().wait(0.0005)
            return Color(0.0, 0.0, 0.0)

        render_frame(
            camera,
            slow_shade,
            blank_frame(camera),
            2,
            progress_interval=0.001,
            callback=lambda done, total, elapsed: reports.append((done, total, elapsed)),
        )

        done_values = [done for done, _, _ in reports]
        assert done_values == sorted(done_values)
        assert all(done <= total == 64 for done, total, _ in reports)
        elapsed_values = [elapsed for _, _, elapsed in reports]
        assert elapsed_values == sorted(elapsed_values)

    def test_default_callback_logs(self, caplog):
        """Test progress goes to the scheduler logger without a callback."""
        caplog.set_level(logging.INFO, logger="whitted.core.scheduler")
        camera = CoordinateCamera(3, 2)

        render_frame(camera, coordinate_shade, blank_frame(camera), 1, progress_interval=0.001)

        messages = [record.getMessage() for record in caplog.records]
        assert any("start rendering 3x2 with 1 thread workers" in m for m in messages)
        assert any("rendered 6/6 pixels" in m for m in messages)
        assert any(m.startswith("done in") for m in messages)

    def test_log_progress_format(self, caplog):
        """Test the default callback's message."""
        caplog.set_level(logging.INFO, logger="whitted.core.scheduler")
        log_progress(10, 40, 1.5)
        assert caplog.records[-1].getMessage() == "rendered 10/40 pixels in 1.50 seconds"


class TestValidation:
    """Tests for argument validation."""

    @pytest.mark.parametrize("worker_count", [0, -3])
    def test_worker_count_must_be_positive(self, worker_count):
        """Test fewer than one worker is rejected."""
        camera = CoordinateCamera(2, 2)
        with pytest.raises(ValueError, match="worker_count"):
            render_frame(camera, coordinate_shade, blank_frame(camera), worker_count)

    def test_frame_shape_must_match_camera(self):
        """Test a transposed frame buffer is rejected."""
        camera = CoordinateCamera(4, 2)
        with pytest.raises(ValueError, match="Frame shape"):
            render_frame(camera, coordinate_shade, np.zeros((4, 2, 3)), 1)


class TestFailures:
    """Tests for worker failures."""

    def test_worker_exception_raises_render_error(self):
        """Test an exception in shade() is re-raised after the workers stop."""
        camera = CoordinateCamera(6, 6)

        def shade(ray):
            if ray.source.x == 3.0 and ray.source.y == 2.0:
                raise ZeroDivisionError("bad pixel")
            return Color(0.0, 0.0, 0.0)

        with pytest.raises(RenderError) as excinfo:
            render_frame(camera, shade, blank_frame(camera), 3, progress_interval=0.001)

        assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
        assert "Rendering failed" in str(excinfo.value)

    def test_raising_callback_stops_workers(self):
        """Test no worker thread outlives a callback that raises."""
        camera = CoordinateCamera(40, 40)

        def callback(done, total, elapsed):
            raise RuntimeError("progress display closed")

        with pytest.raises(RuntimeError, match="progress display closed"):
            render_frame(
                camera,
                coordinate_shade,
                blank_frame(camera),
                4,
                progress_interval=0.001,
                callback=callback,
            )

        alive = [
            thread.name
            for thread in threading.enumerate()
            if thread.name.startswith("whitted-worker-")
        ]
        assert not alive

    def test_render_error_is_runtime_error(self):
        """Test callers catching RuntimeError also catch render failures."""
        assert issubclass(RenderError, RuntimeError)
