"""
Per-pixel renderers that make up the border compositing pipeline.
"""
from __future__ import annotations

from ._image_utils import PixelCanvas, blend_over
from .border_renderer import render_border, shade_colors
from .corner_mask import apply_corner_mask
from .layout import CanvasLayout, compute_layout, shadow_extent
from .shadow_renderer import render_shadow

__all__ = [
    "CanvasLayout",
    "PixelCanvas",
    "apply_corner_mask",
    "blend_over",
    "compute_layout",
    "render_border",
    "render_shadow",
    "shade_colors",
    "shadow_extent",
]
