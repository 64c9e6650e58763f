from __future__ import annotations

import os
import sys
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

RGBA = tuple[int, int, int, int]

# Capture modes a host may report; ``only_modes`` entries are matched against these.
CAPTURE_MODES: tuple[str, ...] = ("fullscreen", "window", "region", "gif")


class BorderStyle(str, Enum):
    """Ring pattern used to draw the border frame."""

    SOLID = "solid"
    DOUBLE = "double"
    DASHED = "dashed"
    DOTTED = "dotted"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"

    @classmethod
    def parse(cls, value: "BorderStyle | str") -> "BorderStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown border style: {value!r}. Supported: {supported}"
            ) from None


@dataclass
class ShadowConfig:
    """Drop shadow painted beneath the framed image."""

    offset_x: int = 0
    offset_y: int = 0
    blur_radius: int = 0  # 0 = hard-edged shadow
    color: RGBA = (0, 0, 0, 128)


@dataclass
class BorderConfig:
    """Top-level border plugin configuration."""

    enabled: bool = True
    style: BorderStyle = BorderStyle.SOLID
    size: int = 3  # border thickness in pixels
    color: RGBA = (60, 60, 60, 255)
    corner_radius: int = 0  # 0 = square corners
    shadow: Optional[ShadowConfig] = None
    padding: int = 0  # background margin in pixels around the border
    background_color: Optional[RGBA] = None  # None = fully transparent
    only_modes: Optional[list[str]] = field(default=None)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------

def parse_color(value: Any, *, name: str = "color") -> RGBA:
    """Coerce *value* into an RGBA tuple.

    Accepts a sequence of 3 or 4 integers in ``[0, 255]`` (3 values get an
    opaque alpha) or a ``#RRGGBB`` / ``#RRGGBBAA`` hex string.
    """
    if isinstance(value, str):
        raw = value.strip().lstrip("#")
        if len(raw) not in (6, 8):
            raise ValueError(f"{name} must be #RRGGBB or #RRGGBBAA, got {value!r}")
        try:
            channels = [int(raw[i:i + 2], 16) for i in range(0, len(raw), 2)]
        except ValueError:
            raise ValueError(f"{name} is not a valid hex color: {value!r}") from None
    elif isinstance(value, (list, tuple)):
        channels = list(value)
    else:
        raise ValueError(f"{name} must be a list of 3-4 integers or a hex string, got {value!r}")

    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"{name} must have 3 or 4 channels, got {len(channels)}")
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"{name} channels must be integers in [0, 255], got {value!r}")
    return tuple(channels)  # type: ignore[return-value]


def _unsigned(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _signed(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _known_fields(data: Mapping[str, Any], cls: type, section: str) -> dict[str, Any]:
    fields = {}
    for key, value in data.items():
        if key in cls.__dataclass_fields__:
            fields[key] = value
        else:
            warnings.warn(f"Ignoring unknown {section} option: {key!r}", stacklevel=3)
    return fields


def _shadow_from_dict(data: Any) -> Optional[ShadowConfig]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise TypeError("shadow must be a mapping or null.")

    fields = _known_fields(data, ShadowConfig, "shadow")
    if "offset_x" in fields:
        fields["offset_x"] = _signed(fields["offset_x"], "shadow.offset_x")
    if "offset_y" in fields:
        fields["offset_y"] = _signed(fields["offset_y"], "shadow.offset_y")
    if "blur_radius" in fields:
        fields["blur_radius"] = _unsigned(fields["blur_radius"], "shadow.blur_radius")
    if "color" in fields:
        fields["color"] = parse_color(fields["color"], name="shadow.color")
    return ShadowConfig(**fields)


def _modes_from_value(value: Any) -> Optional[list[str]]:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise TypeError("only_modes must be a list of capture mode names or null.")

    modes = [str(m) for m in value]
    unknown = [m for m in modes if m.lower() not in CAPTURE_MODES]
    if unknown:
        warnings.warn(
            f"only_modes contains unknown capture modes {unknown}; "
            f"supported: {list(CAPTURE_MODES)}",
            stacklevel=3,
        )
    return modes


# ---------------------------------------------------------------------------
# Loading / saving
# ---------------------------------------------------------------------------

def load_config_from_dict(data: Mapping[str, Any] | None) -> BorderConfig:
    """Build a :class:`BorderConfig` from a mapping using the YAML schema.

    Missing keys keep their defaults; unknown keys are ignored with a warning.
    """
    if data is None:
        return BorderConfig()
    if not isinstance(data, Mapping):
        raise TypeError("config must be a mapping at the top level.")

    fields = _known_fields(data, BorderConfig, "border")
    if "enabled" in fields and not isinstance(fields["enabled"], bool):
        raise ValueError(f"enabled must be true or false, got {fields['enabled']!r}")
    if "style" in fields:
        fields["style"] = BorderStyle.parse(fields["style"])
    for key in ("size", "corner_radius", "padding"):
        if key in fields:
            fields[key] = _unsigned(fields[key], key)
    if "color" in fields:
        fields["color"] = parse_color(fields["color"])
    if "background_color" in fields and fields["background_color"] is not None:
        fields["background_color"] = parse_color(
            fields["background_color"], name="background_color"
        )
    if "shadow" in fields:
        fields["shadow"] = _shadow_from_dict(fields["shadow"])
    if "only_modes" in fields:
        fields["only_modes"] = _modes_from_value(fields["only_modes"])

    return BorderConfig(**fields)


def load_config(path: Optional[Path]) -> BorderConfig:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return BorderConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return load_config_from_dict(data)


def config_to_dict(config: BorderConfig) -> dict[str, Any]:
    """Serialize *config* into plain YAML-friendly types."""
    shadow = config.shadow
    return {
        "enabled": config.enabled,
        "style": BorderStyle.parse(config.style).value,
        "size": config.size,
        "color": list(config.color),
        "corner_radius": config.corner_radius,
        "shadow": None if shadow is None else {
            "offset_x": shadow.offset_x,
            "offset_y": shadow.offset_y,
            "blur_radius": shadow.blur_radius,
            "color": list(shadow.color),
        },
        "padding": config.padding,
        "background_color": (
            None if config.background_color is None else list(config.background_color)
        ),
        "only_modes": None if config.only_modes is None else list(config.only_modes),
    }


def save_config(config: BorderConfig, path: Path) -> None:
    """Write *config* to *path* as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, sort_keys=False)


def default_config_path() -> Path:
    """Return the per-user location of ``borders.yaml``.

    ``%APPDATA%`` on Windows, ``~/Library/Application Support`` on macOS and
    ``$XDG_CONFIG_HOME`` (falling back to ``~/.config``) elsewhere.
    """
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
    return root / "capscr" / "plugins" / "borders.yaml"
