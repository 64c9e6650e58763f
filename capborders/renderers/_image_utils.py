"""Shared pixel-buffer helpers used by every renderer."""
from __future__ import annotations

from PIL import Image

RGBA = tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)

# Absorbs float error so that exact results (e.g. 255.0 computed as
# 254.9999999) are not truncated one step low.
_QUANTIZE_EPS = 1e-6


def _quantize(value: float) -> int:
    """Truncate a float channel value to an 8-bit integer."""
    return max(0, min(255, int(value + _QUANTIZE_EPS)))


def blend_over(dst: RGBA, src: RGBA) -> RGBA:
    """Composite *src* over *dst* using the source-over rule.

    Channels are truncated, not rounded. A fully transparent result leaves
    *dst* unchanged.
    """
    src_a = src[3] / 255.0
    dst_a = dst[3] / 255.0

    out_a = src_a + dst_a * (1.0 - src_a)
    if out_a == 0.0:
        return dst

    def _channel(s: int, d: int) -> int:
        return _quantize((s * src_a + d * dst_a * (1.0 - src_a)) / out_a)

    return (
        _channel(src[0], dst[0]),
        _channel(src[1], dst[1]),
        _channel(src[2], dst[2]),
        _quantize(out_a * 255.0),
    )


class PixelCanvas:
    """Mutable RGBA8 pixel grid backed by a Pillow image.

    Writes outside the grid are dropped silently; reads outside it raise
    ``IndexError``.
    """

    def __init__(self, width: int, height: int, fill: RGBA = TRANSPARENT):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.image = Image.new("RGBA", (self.width, self.height), tuple(fill))
        self._px = self.image.load()

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> RGBA:
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._px[x, y]

    def put(self, x: int, y: int, color: RGBA) -> None:
        if self.contains(x, y):
            self._px[x, y] = color

    def blend(self, x: int, y: int, color: RGBA) -> None:
        """Alpha-composite *color* over the pixel at ``(x, y)``."""
        if self.contains(x, y):
            self._px[x, y] = blend_over(self._px[x, y], color)

    def paste_opaque(self, source: Image.Image, x: int, y: int) -> None:
        """Copy every pixel of *source* to ``(x, y)`` without blending.

        Pixels falling outside the canvas are clipped.
        """
        rgba = source if source.mode == "RGBA" else source.convert("RGBA")
        # Image.paste without a mask overwrites, alpha included, and clips.
        self.image.paste(rgba, (x, y))

    def to_image(self) -> Image.Image:
        """Hand the finished buffer over to the caller."""
        return self.image
