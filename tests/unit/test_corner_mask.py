"""Unit tests for the rounded-corner mask."""
from __future__ import annotations

import warnings

import pytest

from capborders.renderers import PixelCanvas, compute_layout
from capborders.renderers.corner_mask import apply_corner_mask, max_corner_radius

OPAQUE = (200, 200, 200, 255)


def _filled(content_w, content_h, border):
    layout = compute_layout(content_w, content_h, border, 0)
    return PixelCanvas(layout.width, layout.height, fill=OPAQUE), layout


def _alpha_grid(canvas):
    return [[canvas.get(x, y)[3] for x in range(canvas.width)] for y in range(canvas.height)]


class TestCornerMask:
    def test_zero_radius_is_noop(self):
        canvas, layout = _filled(10, 10, 2)
        apply_corner_mask(canvas, layout, 10, 10, 2, 0)
        assert canvas.to_image().getextrema()[3] == (255, 255)

    def test_outer_corner_cleared_inner_kept(self):
        canvas, layout = _filled(20, 20, 4)
        apply_corner_mask(canvas, layout, 20, 20, 4, 6)
        assert canvas.get(0, 0) == (0, 0, 0, 0)
        assert canvas.get(5, 5) == OPAQUE
        # Outside the radius square nothing changes.
        assert canvas.get(6, 0) == OPAQUE
        assert canvas.get(0, 6) == OPAQUE

    def test_four_corners_are_mirror_images(self):
        canvas, layout = _filled(20, 20, 4)
        apply_corner_mask(canvas, layout, 20, 20, 4, 7)
        grid = _alpha_grid(canvas)
        size = canvas.width
        for y in range(size):
            for x in range(size):
                assert grid[y][x] == grid[y][size - 1 - x], (x, y)
                assert grid[y][x] == grid[size - 1 - y][x], (x, y)

    def test_cleared_count_matches_quarter_circle(self):
        canvas, layout = _filled(30, 30, 0)
        apply_corner_mask(canvas, layout, 30, 30, 0, 10)
        cleared = sum(row.count(0) for row in _alpha_grid(canvas))
        # Each corner loses roughly r^2 - pi*r^2/4 ~= 21.5 pixels.
        assert 4 * 15 <= cleared <= 4 * 28
        assert cleared % 4 == 0

    def test_oversized_radius_is_clamped(self):
        canvas, layout = _filled(4, 4, 1)
        assert max_corner_radius(1, 4, 4) == 3
        with pytest.warns(UserWarning, match="clamped to 3"):
            apply_corner_mask(canvas, layout, 4, 4, 1, 50)
        assert canvas.get(0, 0)[3] == 0

    def test_radius_within_limit_does_not_warn(self):
        canvas, layout = _filled(10, 10, 2)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            apply_corner_mask(canvas, layout, 10, 10, 2, 7)
