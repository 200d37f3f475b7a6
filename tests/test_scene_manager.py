"""Unit tests for the Scene container.

Tests cover:
- Entity registration and dispatch into lights / surfaces
- Rejection of unknown entity types
- Frame buffer allocation
- Rendering through the scheduler
- Output guards before the first render
"""

import logging

import numpy as np
import pytest

from whitted.camera.pinhole import PinholeCamera
from whitted.core.integrator import RenderConfig
from whitted.core.ray import Color, Ray, Vector
from whitted.geometry import Plane, Sphere
from whitted.lights import DistantLight, PointLight
from whitted.materials import diffuse
from whitted.scene.manager import Scene


@pytest.fixture
def fresh_scene(config):
    """Create an empty scene with a small camera."""
    return Scene(PinholeCamera(4, 3), config)


class TestEntityRegistration:
    """Tests for adding lights and surfaces."""

    def test_add_surface(self, fresh_scene):
        """Test surfaces land in the surface list."""
        sphere = Sphere((0.0, 0.0, -3.0), 1.0, diffuse())
        fresh_scene.add(sphere)
        assert fresh_scene.surfaces == [sphere]
        assert fresh_scene.lights == []

    def test_add_light(self, fresh_scene):
        """Test lights land in the light list."""
        light = DistantLight(Color(1.0, 1.0, 1.0), 1.0, (0.0, -1.0, 0.0))
        fresh_scene.add(light)
        assert fresh_scene.lights == [light]
        assert fresh_scene.surfaces == []

    def test_insertion_order_kept(self, fresh_scene):
        """Test entities keep the order they were added in."""
        first = Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), diffuse())
        second = Sphere((0.0, 1.0, -3.0), 1.0, diffuse())
        fresh_scene.add(first)
        fresh_scene.add(second)
        assert fresh_scene.surfaces == [first, second]

    def test_entities_are_borrowed(self, fresh_scene):
        """Test the scene stores the caller's objects, not copies."""
        sphere = Sphere((0.0, 0.0, -3.0), 1.0, diffuse())
        fresh_scene.add(sphere)
        assert fresh_scene.surfaces[0] is sphere

    def test_add_all(self, fresh_scene):
        """Test mixed entities are dispatched in one call."""
        light = PointLight(Color(1.0, 1.0, 1.0), 1.0, (0.0, 4.0, 0.0))
        plane = Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), diffuse())
        fresh_scene.add_all([plane, light])
        assert fresh_scene.lights == [light]
        assert fresh_scene.surfaces == [plane]

    @pytest.mark.parametrize("entity", [42, "sphere", None, diffuse()])
    def test_rejects_unknown_entities(self, fresh_scene, entity):
        """Test anything but a Light or Surface raises TypeError."""
        with pytest.raises(TypeError, match="Light or Surface"):
            fresh_scene.add(entity)


class TestSceneState:
    """Tests for scene properties."""

    def test_frame_allocated_from_camera(self, fresh_scene):
        """Test the frame buffer matches the camera size."""
        assert fresh_scene.frame.shape == (3, 4, 3)
        assert fresh_scene.frame.dtype == np.float64
        assert (fresh_scene.width, fresh_scene.height) == (4, 3)

    def test_default_config(self):
        """Test a scene without a config gets the defaults."""
        scene = Scene(PinholeCamera(2, 2))
        assert scene.config == RenderConfig(thread_worker_count=scene.config.thread_worker_count)

    def test_not_rendered_initially(self, fresh_scene):
        """Test a new scene reports it has not been rendered."""
        assert not fresh_scene.rendered

    def test_repr(self, fresh_scene):
        """Test the repr summarizes the scene."""
        fresh_scene.add(Plane((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), diffuse()))
        assert repr(fresh_scene) == "Scene(width=4, height=3, lights=0, surfaces=1)"


class TestRendering:
    """Tests for Scene.render and Scene.trace."""

    def test_trace_uses_scene_settings(self, fresh_scene):
        """Test trace() returns the configured environment color on a miss."""
        fresh_scene.config.environment_color = Color(0.2, 0.3, 0.4)
        ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))
        assert fresh_scene.trace(ray) == Color(0.2, 0.3, 0.4)

    def test_empty_scene_renders_environment(self, fresh_scene):
        """Test every pixel of an empty scene is the environment color."""
        fresh_scene.render()
        assert fresh_scene.rendered
        np.testing.assert_allclose(fresh_scene.frame, 0.5)

    def test_render_validates_config(self, fresh_scene):
        """Test an invalid configuration is rejected before rendering."""
        fresh_scene.config.trace_depth = -1
        with pytest.raises(ValueError, match="trace_depth"):
            fresh_scene.render()
        assert not fresh_scene.rendered

    def test_render_overwrites_frame(self, fresh_scene):
        """Test a second render replaces the previous pixels."""
        fresh_scene.render()
        fresh_scene.config.environment_color = Color(0.1, 0.1, 0.1)
        fresh_scene.render()
        np.testing.assert_allclose(fresh_scene.frame, 0.1)

    def test_render_callback(self, fresh_scene):
        """Test a custom progress callback is forwarded."""
        reports = []
        fresh_scene.render(callback=lambda done, total, elapsed: reports.append((done, total)))
        assert reports[-1] == (12, 12)

    def test_render_logs_scene_summary(self, fresh_scene, caplog):
        """Test the scene logs what it is about to render."""
        caplog.set_level(logging.DEBUG, logger="whitted.scene.manager")
        fresh_scene.render()
        assert any("0 surfaces and 0 lights" in r.getMessage() for r in caplog.records)


class TestOutput:
    """Tests for image output."""

    def test_save_before_render_raises(self, fresh_scene, tmp_path):
        """Test saving an unrendered scene raises RuntimeError."""
        with pytest.raises(RuntimeError, match="not been rendered"):
            fresh_scene.save(tmp_path / "out.ppm")
        assert not (tmp_path / "out.ppm").exists()

    def test_image_before_render_raises(self, fresh_scene):
        """Test reading the image before rendering raises RuntimeError."""
        with pytest.raises(RuntimeError, match="not been rendered"):
            fresh_scene.image()

    def test_save_png_before_render_raises(self, fresh_scene, tmp_path):
        """Test PNG export is guarded the same way."""
        with pytest.raises(RuntimeError, match="not been rendered"):
            fresh_scene.save_png(tmp_path / "out.png")

    def test_save_after_render(self, fresh_scene, tmp_path):
        """Test a rendered scene writes a PPM file."""
        fresh_scene.render()
        path = tmp_path / "out.ppm"
        fresh_scene.save(path)
        assert path.read_bytes().startswith(b"P6\n4 3\n255\n")

    def test_image_after_render(self, fresh_scene):
        """Test the 8-bit image of an all-gray frame."""
        fresh_scene.config.environment_color = Color(0.2, 0.2, 0.2)
        fresh_scene.render()
        image = fresh_scene.image()
        assert image.shape == (3, 4, 3)
        assert (image == 51).all()
