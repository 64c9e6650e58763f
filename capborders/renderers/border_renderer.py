"""
Border frame rasterization.

Every style is built from one-pixel rectangular rings grown outward from the
content rectangle. Ring ``i`` runs from ``content_edge - (i + 1)`` to
``content_edge + content_size + i`` on each axis. Rows (top, bottom) are
painted before columns (left, right), so the columns own the corner pixels.
"""
from __future__ import annotations

from typing import Callable

from ..config import BorderStyle
from ._image_utils import RGBA, PixelCanvas
from .layout import CanvasLayout

_SHADE_STEP = 60

_DASH = (10, 5)  # on, off
_DOT = (2, 2)


def shade_colors(color: RGBA) -> tuple[RGBA, RGBA]:
    """Return ``(light, dark)`` variants of *color* for the 3-D styles."""
    r, g, b, a = color
    light = (min(r + _SHADE_STEP, 255), min(g + _SHADE_STEP, 255), min(b + _SHADE_STEP, 255), a)
    dark = (max(r - _SHADE_STEP, 0), max(g - _SHADE_STEP, 0), max(b - _SHADE_STEP, 0), a)
    return light, dark


def _ring_bounds(cx: int, cy: int, cw: int, ch: int, offset: int) -> tuple[int, int, int, int]:
    """Outline ``offset`` pixels outside the rectangle, clamped at the origin."""
    return (
        max(cx - offset, 0),
        max(cy - offset, 0),
        cx + cw + offset - 1,
        cy + ch + offset - 1,
    )


def _draw_ring(
    canvas: PixelCanvas,
    bounds: tuple[int, int, int, int],
    top_left: RGBA,
    bottom_right: RGBA,
    pattern: tuple[int, int] | None = None,
) -> None:
    """Draw one hollow rectangle; *pattern* is an optional ``(on, off)`` dash."""
    x1, y1, x2, y2 = bounds

    def _on(pos: int) -> bool:
        if pattern is None:
            return True
        on, off = pattern
        return pos % (on + off) < on

    for pos, x in enumerate(range(x1, x2 + 1)):
        if _on(pos):
            canvas.put(x, y1, top_left)
            canvas.put(x, y2, bottom_right)
    for pos, y in enumerate(range(y1, y2 + 1)):
        if _on(pos):
            canvas.put(x1, y, top_left)
            canvas.put(x2, y, bottom_right)


def _draw_band(
    canvas: PixelCanvas,
    cx: int, cy: int, cw: int, ch: int,
    start: int,
    width: int,
    top_left: RGBA,
    bottom_right: RGBA,
    pattern: tuple[int, int] | None = None,
) -> None:
    """Draw rings ``start`` to ``start + width - 1`` around the rectangle."""
    for i in range(start, start + width):
        _draw_ring(canvas, _ring_bounds(cx, cy, cw, ch, i + 1), top_left, bottom_right, pattern)


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

def _solid(canvas, cx, cy, cw, ch, size, color):
    _draw_band(canvas, cx, cy, cw, ch, 0, size, color, color)


def _dashed(canvas, cx, cy, cw, ch, size, color):
    _draw_band(canvas, cx, cy, cw, ch, 0, size, color, color, _DASH)


def _dotted(canvas, cx, cy, cw, ch, size, color):
    _draw_band(canvas, cx, cy, cw, ch, 0, size, color, color, _DOT)


def double_widths(size: int) -> tuple[int, int, int]:
    """Split *size* into ``(outer, inner, gap)``; the remainder goes to the gap."""
    outer = size // 3
    inner = size // 3
    return outer, inner, size - outer - inner


def _double(canvas, cx, cy, cw, ch, size, color):
    outer, inner, gap = double_widths(size)
    _draw_band(canvas, cx, cy, cw, ch, 0, inner, color, color)

    # The outer ring wraps the content rectangle grown by inner + gap.
    shift = inner + gap
    _draw_band(
        canvas,
        max(cx - shift, 0), max(cy - shift, 0), cw + shift * 2, ch + shift * 2,
        0, outer, color, color,
    )


def _carved(canvas, cx, cy, cw, ch, size, color, *, groove: bool):
    half = size // 2
    light, dark = shade_colors(color)
    if groove:
        outer_top, outer_bottom, inner_top, inner_bottom = dark, light, light, dark
    else:
        outer_top, outer_bottom, inner_top, inner_bottom = light, dark, dark, light

    _draw_band(canvas, cx, cy, cw, ch, half, half, outer_top, outer_bottom)
    _draw_band(canvas, cx, cy, cw, ch, 0, half, inner_top, inner_bottom)


def _groove(canvas, cx, cy, cw, ch, size, color):
    _carved(canvas, cx, cy, cw, ch, size, color, groove=True)


def _ridge(canvas, cx, cy, cw, ch, size, color):
    _carved(canvas, cx, cy, cw, ch, size, color, groove=False)


def _inset(canvas, cx, cy, cw, ch, size, color):
    light, dark = shade_colors(color)
    _draw_band(canvas, cx, cy, cw, ch, 0, size, dark, light)


def _outset(canvas, cx, cy, cw, ch, size, color):
    light, dark = shade_colors(color)
    _draw_band(canvas, cx, cy, cw, ch, 0, size, light, dark)


_StyleRenderer = Callable[[PixelCanvas, int, int, int, int, int, RGBA], None]

_STYLES: dict[BorderStyle, _StyleRenderer] = {
    BorderStyle.SOLID: _solid,
    BorderStyle.DOUBLE: _double,
    BorderStyle.DASHED: _dashed,
    BorderStyle.DOTTED: _dotted,
    BorderStyle.GROOVE: _groove,
    BorderStyle.RIDGE: _ridge,
    BorderStyle.INSET: _inset,
    BorderStyle.OUTSET: _outset,
}


def render_border(
    canvas: PixelCanvas,
    layout: CanvasLayout,
    content_w: int,
    content_h: int,
    size: int,
    style: BorderStyle | str,
    color: RGBA,
) -> None:
    """Draw a *size*-pixel border of the given *style* around the content area."""
    if size <= 0:
        return
    renderer = _STYLES[BorderStyle.parse(style)]
    renderer(canvas, layout.content_x, layout.content_y, content_w, content_h, size, tuple(color))
