"""Pytest configuration and shared fixtures."""

import logging
import sys
import tomllib
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


BASE_TOML = r'''
[meta]
name = "Test"
version = "0.1.0"

[colors.light]
primary = "#111111"
secondary = "#222222"
text_primary = "#ffffff"

[colors.dark]
primary = "#000000"
secondary = "#111111"
text_primary = "#eeeeee"

[accents]
info = "#123456"
warning = "colors.light.primary"

[ansi.light.normal]
black   = "colors.light.primary"
red     = "#AA0000"
green   = "#00AA00"
yellow  = "#AAAA00"
blue    = "#0000AA"
magenta = "#AA00AA"
cyan    = "#00AAAA"
white   = "colors.light.text_primary"

[ansi.light.bright]
black   = "#333333"
red     = "#FF4444"
green   = "#44FF44"
yellow  = "#FFFF44"
blue    = "#4444FF"
magenta = "#FF44FF"
cyan    = "#44FFFF"
white   = "#FFFFFF"

[ansi.dark.normal]
black   = "colors.dark.primary"
red     = "#880000"
green   = "#008800"
yellow  = "#888800"
blue    = "#000088"
magenta = "#880088"
cyan    = "#008888"
white   = "colors.dark.text_primary"

[ansi.dark.bright]
black   = "#555555"
red     = "#FF6666"
green   = "#66FF66"
yellow  = "#FFFF66"
blue    = "#6666FF"
magenta = "#FF66FF"
cyan    = "#66FFFF"
white   = "#FFFFFF"
'''


@pytest.fixture
def base_toml():
    """Palette document as TOML text."""
    return BASE_TOML


@pytest.fixture
def palette_data():
    """Palette document as a freshly decoded dict."""
    return tomllib.loads(BASE_TOML)


@pytest.fixture
def write_palette(tmp_path):
    """Write palette text to a file and return its path."""
    def _write(text=BASE_TOML, name="veneer.toml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig calls made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no configuration in the environment."""
    monkeypatch.delenv("VENEER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
