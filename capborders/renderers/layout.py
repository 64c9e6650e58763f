"""Canvas sizing: output dimensions and where the source image lands."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import ShadowConfig


@dataclass(frozen=True)
class CanvasLayout:
    width: int
    height: int
    content_x: int  # left edge of the source image inside the canvas
    content_y: int  # top edge of the source image inside the canvas


def shadow_extent(shadow: Optional[ShadowConfig]) -> tuple[int, int]:
    """Return the extra ``(x, y)`` margin needed to fit *shadow*."""
    if shadow is None:
        return 0, 0
    blur = max(0, shadow.blur_radius)
    return abs(shadow.offset_x) + blur * 2, abs(shadow.offset_y) + blur * 2


def compute_layout(
    src_width: int,
    src_height: int,
    border: int,
    padding: int,
    shadow: Optional[ShadowConfig] = None,
) -> CanvasLayout:
    """Size the output canvas around a *src_width* x *src_height* image.

    The larger half of an odd shadow extent is reserved before the content,
    the smaller half after it.
    """
    border = max(0, border)
    padding = max(0, padding)
    extent_x, extent_y = shadow_extent(shadow)
    frame = border + padding

    return CanvasLayout(
        width=max(0, src_width) + frame * 2 + extent_x,
        height=max(0, src_height) + frame * 2 + extent_y,
        content_x=frame + (extent_x - extent_x // 2),
        content_y=frame + (extent_y - extent_y // 2),
    )
