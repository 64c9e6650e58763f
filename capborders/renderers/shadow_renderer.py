"""
Soft rectangular drop shadow.

The shadow is the content rectangle shifted by the configured offset. Within
``blur_radius`` pixels of that rectangle the alpha falls off quadratically
with the Euclidean distance to it, which rounds the shadow's corners without
any separate masking step.
"""
from __future__ import annotations

import math

from ..config import ShadowConfig
from ._image_utils import PixelCanvas
from .layout import CanvasLayout


def _axis_distance(pos: int, size: int) -> int:
    """Pixels by which *pos* lies outside the span ``[0, size)``."""
    if pos < 0:
        return -pos
    if pos >= size:
        return pos - size + 1
    return 0


def shadow_alpha(distance: float, base_alpha: int, blur_radius: int) -> int:
    """Alpha of a shadow pixel *distance* pixels outside the rectangle.

    Returns 0 beyond *blur_radius*; with no blur the base alpha applies
    everywhere.
    """
    if blur_radius <= 0:
        return base_alpha
    if distance > blur_radius:
        return 0
    factor = 1.0 - distance / blur_radius
    return int(base_alpha * factor * factor)


def render_shadow(
    canvas: PixelCanvas,
    layout: CanvasLayout,
    content_w: int,
    content_h: int,
    shadow: ShadowConfig,
) -> None:
    """Composite the shadow of a *content_w* x *content_h* rectangle onto *canvas*."""
    anchor_x = layout.content_x + shadow.offset_x
    anchor_y = layout.content_y + shadow.offset_y
    blur = max(0, shadow.blur_radius)
    r, g, b, base_alpha = shadow.color

    for y in range(-blur, content_h + blur + 1):
        py = anchor_y + y
        if py < 0 or py >= canvas.height:
            continue
        dist_y = _axis_distance(y, content_h)

        for x in range(-blur, content_w + blur + 1):
            px = anchor_x + x
            if px < 0 or px >= canvas.width:
                continue
            dist_x = _axis_distance(x, content_w)

            dist = math.sqrt(dist_x * dist_x + dist_y * dist_y)
            if blur > 0 and dist > blur:
                continue

            canvas.blend(px, py, (r, g, b, shadow_alpha(dist, base_alpha, blur)))
