"""Tests for the pinhole camera and the per-pixel Renderer."""

import math

import numpy as np
import pytest

from balltracing.camera.camera import Camera
from balltracing.core.vector import Vector3
from balltracing.geometry import Scene, Sphere
from balltracing.renderer.raytracer import Renderer
from balltracing.scenes.random_balls import random_balls_scene


class TestCamera:

    def test_center_pixel_looks_forward(self):
        ray = Camera(3, 3).get_ray(1, 1)
        assert ray.origin == Vector3(0, 0, 0)
        assert ray.direction.x == pytest.approx(0.0)
        assert ray.direction.y == pytest.approx(0.0)
        assert ray.direction.z == pytest.approx(-1.0)

    def test_top_left_pixel_points_up_and_left(self):
        d = Camera(4, 2).get_ray(0, 0).direction
        assert d.x < 0
        assert d.y > 0
        assert d.z < 0

    def test_directions_are_unit_length(self):
        camera = Camera(5, 4, fov=90)
        for x, y in [(0, 0), (4, 3), (2, 1)]:
            assert camera.get_ray(x, y).direction.length() == pytest.approx(1.0)

    def test_field_of_view(self):
        camera = Camera(2, 2, fov=40)
        assert camera.angle == pytest.approx(math.tan(math.radians(20)))
        # Pixel centers of a 2x2 image sit at half the viewport extent
        d = camera.get_ray(1, 0).direction
        assert d.x / -d.z == pytest.approx(0.5 * camera.angle)
        assert d.y / -d.z == pytest.approx(0.5 * camera.angle)

    def test_aspect_ratio_widens_horizontal_extent(self):
        d = Camera(4, 2).get_ray(3, 0).direction
        assert d.x / d.y == pytest.approx(2 * (0.75 / 0.5))

    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            Camera(*size)


class TestRenderer:

    def test_empty_scene_renders_background(self):
        image = Renderer(4, 3).render(Scene())
        assert image.shape == (3, 4, 3)
        assert image.dtype == np.float32
        assert np.all(image == 1.0)

    def test_buffer_matches_render_pixel(self, lit_scene):
        renderer = Renderer(5, 5, fov=60)
        image = renderer.render(lit_scene)
        for x, y in [(0, 0), (2, 2), (4, 1)]:
            color = renderer.render_pixel(lit_scene, x, y)
            np.testing.assert_allclose(image[y, x], color.as_tuple(), rtol=1e-6)

    def test_sphere_covers_center(self, lit_scene):
        image = Renderer(5, 5).render(lit_scene)
        np.testing.assert_allclose(image[2, 2], (1.0, 0.4, 0.2), rtol=1e-5)
        # Corners miss the sphere at this field of view
        assert np.all(image[0, 0] == 1.0)

    def test_render_is_deterministic(self):
        scene = random_balls_scene(6, np.random.default_rng(7), with_light=True)
        renderer = Renderer(8, 6)
        first = renderer.render(scene)
        second = renderer.render(scene)
        assert np.array_equal(first, second)

    def test_max_depth_is_forwarded(self):
        mirror = Sphere(Vector3(0, 0, -5), 1.0, Vector3(0.5, 0.5, 0.5), reflection=1.0)
        scene = Scene([mirror])
        shallow = Renderer(3, 3, max_depth=0).render(scene)
        deep = Renderer(3, 3, max_depth=5).render(scene)
        assert np.all(shallow[1, 1] == 0.0)
        np.testing.assert_allclose(deep[1, 1], (0.05, 0.05, 0.05), rtol=1e-5)

    def test_debug_mode_prints_progress(self, capsys):
        Renderer(2, 2, debug_mode=True).render(Scene())
        out = capsys.readouterr().out
        assert "Rendering 2x2" in out
        assert "Row 2/2" in out
