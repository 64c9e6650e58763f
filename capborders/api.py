"""Programmatic API for framing images from Python code."""
from __future__ import annotations

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from PIL import Image

from .compositor import Compositor
from .config import BorderConfig, BorderStyle, load_config, load_config_from_dict


def compose(
    image: Image.Image | str | Path | bytes,
    *,
    config: BorderConfig | Mapping[str, Any] | str | Path | None = None,
) -> Image.Image:
    """Return a framed copy of *image*.

    Args:
        image: Either:
            - a Pillow image (any mode; it is read, never modified),
            - path to an image file, or
            - raw encoded image bytes (PNG, JPEG, ...)
        config: Border config as one of:
            - ``None`` (use defaults)
            - ``BorderConfig`` instance
            - dict-like mapping using the same schema as ``borders.yaml``
            - path to a YAML config file

    Returns:
        A new ``RGBA`` image. The ``enabled`` flag and ``only_modes`` filter
        are not consulted here; those gate the capture host, not the engine.
    """
    resolved = _resolve_config(config)
    return Compositor(resolved).compose(_resolve_image(image))


def supported_styles() -> list[str]:
    """Return supported border style names."""
    return [style.value for style in BorderStyle]


def _resolve_config(
    config: BorderConfig | Mapping[str, Any] | str | Path | None,
) -> BorderConfig:
    if config is None:
        return BorderConfig()
    if isinstance(config, BorderConfig):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        path = Path(config)
        if not path.exists():
            raise FileNotFoundError(f"config file '{path}' not found.")
        return load_config(path)
    raise TypeError(
        "config must be None, BorderConfig, dict-like mapping, or a config file path."
    )


def _resolve_image(image: Image.Image | str | Path | bytes) -> Image.Image:
    if isinstance(image, Image.Image):
        return image
    if isinstance(image, (bytes, bytearray)):
        with Image.open(io.BytesIO(image)) as img:
            return img.convert("RGBA")
    if isinstance(image, (str, Path)):
        path = Path(image)
        if not path.exists():
            raise FileNotFoundError(f"'{path}' not found.")
        with Image.open(path) as img:
            return img.convert("RGBA")
    raise TypeError("image must be a PIL image, an image file path, or encoded image bytes.")
