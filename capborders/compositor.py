"""
Border compositing pipeline: takes a captured image and returns a framed copy.

Stages run strictly in order on one freshly allocated canvas
------------------------------------------------------------
1. Size the canvas from the border, padding and shadow extents.
2. Fill it with the background colour (transparent by default).
3. Composite the drop shadow, so it ends up beneath everything else.
4. Draw the border rings around the content area.
5. Copy the source pixels into the content area (opaque overwrite).
6. Cut the rounded corners.

The content offset computed in step 1 is the single source of truth for
steps 3-5.
"""
from __future__ import annotations

from PIL import Image

from .config import BorderConfig, BorderStyle
from .renderers._image_utils import TRANSPARENT, PixelCanvas
from .renderers.border_renderer import render_border
from .renderers.corner_mask import apply_corner_mask
from .renderers.layout import CanvasLayout, compute_layout
from .renderers.shadow_renderer import render_shadow


class Compositor:
    """Applies a :class:`BorderConfig` to images. Holds no per-image state."""

    def __init__(self, config: BorderConfig) -> None:
        self.config = config

    def layout_for(self, width: int, height: int) -> CanvasLayout:
        """Return the canvas layout a *width* x *height* source would get."""
        return compute_layout(
            width, height, self.config.size, self.config.padding, self.config.shadow
        )

    def compose(self, image: Image.Image) -> Image.Image:
        """Return a new RGBA image with border, shadow and corners applied.

        *image* is only read; the result never aliases it.
        """
        cfg = self.config
        source = image if image.mode == "RGBA" else image.convert("RGBA")
        src_w, src_h = source.size
        layout = self.layout_for(src_w, src_h)

        background = cfg.background_color or TRANSPARENT
        canvas = PixelCanvas(layout.width, layout.height, fill=tuple(background))

        if cfg.shadow is not None:
            render_shadow(canvas, layout, src_w, src_h, cfg.shadow)

        if cfg.size > 0:
            render_border(
                canvas, layout, src_w, src_h, cfg.size,
                BorderStyle.parse(cfg.style), tuple(cfg.color),
            )

        canvas.paste_opaque(source, layout.content_x, layout.content_y)

        if cfg.corner_radius > 0:
            apply_corner_mask(
                canvas, layout, src_w, src_h, cfg.size, cfg.corner_radius
            )

        return canvas.to_image()


def compose(image: Image.Image, config: BorderConfig) -> Image.Image:
    """Frame *image* according to *config*."""
    return Compositor(config).compose(image)
