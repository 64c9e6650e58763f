"""Unit tests for the soft drop shadow."""
from __future__ import annotations

import pytest

from capborders.config import ShadowConfig
from capborders.renderers.shadow_renderer import render_shadow, shadow_alpha


class TestShadowAlpha:
    def test_no_blur_keeps_base_alpha(self):
        assert shadow_alpha(0.0, 140, 0) == 140
        assert shadow_alpha(3.0, 140, 0) == 140

    def test_core_is_full_strength(self):
        assert shadow_alpha(0.0, 200, 5) == 200

    def test_quadratic_falloff(self):
        # factor = 1 - 2/4 = 0.5 -> 200 * 0.25
        assert shadow_alpha(2.0, 200, 4) == 50

    def test_zero_beyond_radius(self):
        assert shadow_alpha(4.01, 255, 4) == 0

    def test_non_increasing_with_distance(self):
        values = [shadow_alpha(d / 4, 255, 6) for d in range(0, 25)]
        assert values == sorted(values, reverse=True)
        assert values[0] > values[-1]


class TestRenderShadow:
    def test_falloff_is_bounded_by_blur(self, blank_canvas):
        shadow = ShadowConfig(offset_x=0, offset_y=0, blur_radius=4, color=(0, 0, 0, 255))
        canvas, layout = blank_canvas(content_w=10, content_h=6, border=0, shadow=shadow)
        render_shadow(canvas, layout, 10, 6, shadow)

        # Walk left from the content edge along a row through the middle.
        y = layout.content_y + 3
        alphas = [canvas.get(layout.content_x - d, y)[3] for d in range(0, 5)]
        assert alphas[0] == 255
        assert all(a > b for a, b in zip(alphas, alphas[1:]))
        assert alphas[-1] == 0

        # Canvas corners lie farther than the blur radius from the rectangle.
        assert canvas.get(0, 0)[3] == 0

    def test_offset_moves_shadow(self, blank_canvas):
        shadow = ShadowConfig(offset_x=5, offset_y=3, blur_radius=0, color=(10, 20, 30, 255))
        canvas, layout = blank_canvas(content_w=4, content_h=4, border=0, shadow=shadow)
        render_shadow(canvas, layout, 4, 4, shadow)

        assert canvas.get(layout.content_x + 5, layout.content_y + 3) == (10, 20, 30, 255)
        # Left of the shifted rectangle stays untouched.
        assert canvas.get(layout.content_x + 4, layout.content_y + 3) == (0, 0, 0, 0)

    def test_shadow_composites_over_background(self, blank_canvas):
        from capborders.renderers import PixelCanvas

        shadow = ShadowConfig(blur_radius=0, color=(0, 0, 0, 128))
        _, layout = blank_canvas(content_w=2, content_h=2, border=1, shadow=shadow)
        canvas = PixelCanvas(layout.width, layout.height, fill=(255, 255, 255, 255))
        render_shadow(canvas, layout, 2, 2, shadow)
        assert canvas.get(layout.content_x, layout.content_y) == (127, 127, 127, 255)

    @pytest.mark.parametrize("offset", [(-50, 0), (0, 50), (40, -40)])
    def test_offscreen_pixels_are_skipped(self, blank_canvas, offset):
        shadow = ShadowConfig(offset_x=offset[0], offset_y=offset[1], blur_radius=2)
        canvas, layout = blank_canvas(content_w=3, content_h=3, border=0)
        # Layout deliberately ignores the shadow so most of it falls outside.
        render_shadow(canvas, layout, 3, 3, shadow)
        assert canvas.to_image().size == (layout.width, layout.height)
