"""
Shared pytest fixtures and configuration for capborders tests.

This module provides:
- Image fixtures (programmatically generated sources)
- Configuration fixtures (default, shadowed, per-style factory)
- Canvas fixtures for driving individual renderers
- Global pytest configuration
"""
from __future__ import annotations

import pytest
from PIL import Image


# ==============================================================================
# Global pytest configuration
# ==============================================================================

def pytest_configure(config):
    """Global pytest configuration - runs once at test session start."""
    import warnings
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=PendingDeprecationWarning)


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Point the per-user config directory at a temp dir for every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield


# ==============================================================================
# Image fixtures
# ==============================================================================

WHITE = (255, 255, 255, 255)
BORDER_GREY = (60, 60, 60, 255)


@pytest.fixture
def white_image():
    """Return the 100x100 opaque white capture used by the reference scenarios."""
    return Image.new("RGBA", (100, 100), WHITE)


@pytest.fixture
def gradient_image():
    """Return a small RGBA image whose every pixel is distinct."""
    img = Image.new("RGBA", (17, 11))
    px = img.load()
    for y in range(img.height):
        for x in range(img.width):
            px[x, y] = (x * 15, y * 23, (x + y) * 7, 200 + (x % 5))
    return img


@pytest.fixture
def image_file(tmp_path, gradient_image):
    """Write the gradient image to a PNG file and return its path."""
    path = tmp_path / "capture.png"
    gradient_image.save(path)
    return path


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    from capborders.config import BorderConfig
    return BorderConfig()


@pytest.fixture
def shadow_config():
    """Return a configuration with a soft offset shadow on a white background."""
    from capborders.config import BorderConfig, ShadowConfig
    return BorderConfig(
        size=2,
        padding=1,
        background_color=(255, 255, 255, 255),
        shadow=ShadowConfig(offset_x=3, offset_y=-2, blur_radius=4, color=(0, 0, 0, 160)),
    )


@pytest.fixture
def make_config():
    """Return a factory building a BorderConfig from keyword overrides."""
    from capborders.config import BorderConfig

    def _make(**overrides):
        return BorderConfig(**overrides)

    return _make


# ==============================================================================
# Canvas fixtures
# ==============================================================================

@pytest.fixture
def blank_canvas():
    """Return a factory for transparent canvases laid out around a content box."""
    from capborders.renderers import PixelCanvas, compute_layout

    def _make(content_w=20, content_h=10, border=6, padding=0, shadow=None):
        layout = compute_layout(content_w, content_h, border, padding, shadow)
        return PixelCanvas(layout.width, layout.height), layout

    return _make
