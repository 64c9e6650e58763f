"""
Capture-host integration: the border plugin and the event types it handles.

The host calls :meth:`Plugin.on_load` once, feeds capture lifecycle events
through :meth:`Plugin.on_event`, and calls :meth:`Plugin.on_unload` on
shutdown.
"""
from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from PIL import Image

from . import __version__
from .compositor import Compositor
from .config import BorderConfig, default_config_path, load_config, save_config


class CaptureMode(str, Enum):
    """How a capture was taken."""

    FULLSCREEN = "fullscreen"
    WINDOW = "window"
    REGION = "region"
    GIF = "gif"


# ---------------------------------------------------------------------------
# Events and responses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PreCapture:
    mode: CaptureMode


@dataclass(frozen=True)
class PostCapture:
    image: Image.Image
    mode: CaptureMode


@dataclass(frozen=True)
class PostSave:
    path: Path
    mode: CaptureMode


@dataclass(frozen=True)
class PostUpload:
    url: str
    mode: CaptureMode


PluginEvent = Union[PreCapture, PostCapture, PostSave, PostUpload]


@dataclass(frozen=True)
class Continue:
    """Let the host proceed with the image it already has."""


@dataclass(frozen=True)
class ModifiedImage:
    """Replace the captured image with *image*."""

    image: Image.Image


PluginResponse = Union[Continue, ModifiedImage]


class Plugin(ABC):
    """Contract every capture-host plugin implements."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def version(self) -> str:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def on_event(self, event: PluginEvent) -> PluginResponse:
        ...

    def on_load(self) -> None:
        """Called once after the host loads the plugin."""

    def on_unload(self) -> None:
        """Called once before the host unloads the plugin."""


# ---------------------------------------------------------------------------
# Border plugin
# ---------------------------------------------------------------------------

class BordersPlugin(Plugin):
    """Adds the configured border to every matching capture."""

    def __init__(
        self,
        config: Optional[BorderConfig] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        self.config_path = config_path or default_config_path()
        self.config = config if config is not None else self._read_config(self.config_path)

    @classmethod
    def with_config(cls, config: BorderConfig, config_path: Optional[Path] = None) -> "BordersPlugin":
        """Create a plugin using *config* instead of the persisted one."""
        return cls(config=config, config_path=config_path)

    @staticmethod
    def _read_config(path: Path) -> BorderConfig:
        try:
            return load_config(path)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as exc:
            warnings.warn(
                f"Could not read border config '{path}': {exc}. Using defaults.",
                stacklevel=3,
            )
            return BorderConfig()

    @property
    def name(self) -> str:
        return "Borders"

    @property
    def version(self) -> str:
        return __version__

    @property
    def description(self) -> str:
        return "Add customizable borders to captured images"

    def should_process(self, mode: CaptureMode | str) -> bool:
        """Whether a capture taken in *mode* gets a border."""
        if not self.config.enabled:
            return False
        if self.config.only_modes is None:
            return True
        mode_name = mode.value if isinstance(mode, CaptureMode) else str(mode).lower()
        return any(m.lower() == mode_name for m in self.config.only_modes)

    def on_event(self, event: PluginEvent) -> PluginResponse:
        if isinstance(event, PostCapture) and self.should_process(event.mode):
            bordered = Compositor(self.config).compose(event.image)
            return ModifiedImage(bordered)
        return Continue()

    def on_load(self) -> None:
        """Persist the current config if no file exists yet."""
        if not self.config_path.exists():
            self.save_config()

    def on_unload(self) -> None:
        self.save_config()

    def save_config(self) -> None:
        try:
            save_config(self.config, self.config_path)
        except OSError as exc:
            warnings.warn(f"Could not save border config '{self.config_path}': {exc}", stacklevel=2)
