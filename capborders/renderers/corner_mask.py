"""Rounded-corner cutout applied after the frame and content are painted."""
from __future__ import annotations

import math
import warnings

from ._image_utils import TRANSPARENT, PixelCanvas
from .layout import CanvasLayout


def max_corner_radius(border: int, content_w: int, content_h: int) -> int:
    """Largest radius whose corner squares stay within the framed rectangle."""
    return max(0, border) + min(content_w, content_h) // 2


def apply_corner_mask(
    canvas: PixelCanvas,
    layout: CanvasLayout,
    content_w: int,
    content_h: int,
    border: int,
    radius: int,
) -> None:
    """Clear pixels outside a quarter circle of *radius* at each frame corner.

    The frame's outer edge sits *border* pixels outside the content
    rectangle. Each corner is a ``radius`` x ``radius`` square whose arc
    centre lies ``radius`` pixels in from the outer corner on both axes;
    pixels whose centre is farther than ``radius`` from it become fully
    transparent. There is no anti-aliasing.
    """
    if radius <= 0:
        return

    limit = max_corner_radius(border, content_w, content_h)
    if radius > limit:
        warnings.warn(
            f"corner_radius {radius} exceeds the framed area; clamped to {limit}",
            stacklevel=2,
        )
        radius = limit
        if radius == 0:
            return

    cx, cy = layout.content_x, layout.content_y
    left = max(cx - border, 0)
    top = max(cy - border, 0)
    right = max(cx + content_w + border - radius, 0)
    bottom = max(cy + content_h + border - radius, 0)

    corners = (
        (left, top, False, False),
        (right, top, True, False),
        (left, bottom, False, True),
        (right, bottom, True, True),
    )

    for corner_x, corner_y, flip_x, flip_y in corners:
        for dy in range(radius):
            py = corner_y + radius - 1 - dy if flip_y else corner_y + dy
            for dx in range(radius):
                px = corner_x + radius - 1 - dx if flip_x else corner_x + dx
                # dx/dy count inward from the outer corner.
                if math.hypot(radius - dx - 0.5, radius - dy - 0.5) > radius:
                    canvas.put(px, py, TRANSPARENT)
