from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("capborders")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .api import compose, supported_styles
from .compositor import Compositor
from .config import BorderConfig, BorderStyle, ShadowConfig, load_config, save_config
from .plugin import BordersPlugin, CaptureMode

__all__ = [
    "__version__",
    "BorderConfig",
    "BorderStyle",
    "BordersPlugin",
    "CaptureMode",
    "Compositor",
    "ShadowConfig",
    "compose",
    "load_config",
    "save_config",
    "supported_styles",
]
