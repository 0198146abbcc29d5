"""
conftest.py - Shared pytest fixtures for desk map tests

This module provides standardized test fixtures for use across all tests.
It includes fixtures for:
- Path setup and Python path configuration
- Configuration management
- Viewport geometry and controller construction
- GUI testing support
"""
import os
import sys
import json
import pathlib
import pytest

# Render Qt widgets without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

# Imports from deskmap modules (now that path is configured)
from config_manager import ConfigManager
from controllers import ViewportController
from custom_types import ContentSize, Viewport
from view_state import ViewportTuning


# Path and Environment Fixtures
# ----------------------------

@pytest.fixture
def deskmap_paths():
    """Provide standard paths to key project directories."""
    root_dir = pathlib.Path(__file__).parent.parent
    return {
        'root': root_dir,
        'src': root_dir / 'src',
        'python': root_dir / 'src' / 'python',
        'config': root_dir / 'config',
        'tests': root_dir / 'tests'
    }


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data():
    """Create minimal test configuration data."""
    return {
        "content": {
            "width": 463,
            "height": 1355
        },
        "viewport": {
            "minScale": 0.8,
            "maxScale": 10.0,
            "wheelZoomRate": 0.005,
            "pinchZoomRate": 0.004,
            "panSensitivity": 2.0,
            "borderMargin": 0
        },
        "ui": {
            "interactiveLabels": ["DESKS", "ROOMS"],
            "wheel": {
                "pixelsPerNotch": 100
            },
            "window": {
                "title": "Desk Map Test",
                "width": 463,
                "height": 700
            }
        },
        "logging": {
            "level": "DEBUG",
            "console": False
        }
    }


@pytest.fixture
def test_config_files(tmp_path, test_config_data):
    """Create a temporary config file."""
    config_file = tmp_path / "test_config.json"

    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)

    return {
        "config_path": config_file,
        "tmp_path": tmp_path
    }


@pytest.fixture
def test_config_manager(test_config_files):
    """Create a ConfigManager instance with test configuration."""
    return ConfigManager(
        cfg_path=test_config_files["config_path"],
        exit_on_error=False
    )


# Viewport Fixtures
# -----------------

@pytest.fixture
def content_size():
    """The floor map's content plane."""
    return ContentSize(463, 1355)


@pytest.fixture
def tuning():
    """Default pan/zoom tuning, independent of the on-disk config."""
    return ViewportTuning()


@pytest.fixture
def make_controller(content_size, tuning):
    """Factory for controllers with a mutable viewport and a record of published transforms.

    The returned controller has ``viewport`` (a one-element list holding the
    current Viewport) and ``published`` (list of transform strings) attached.
    """
    def _make(viewport=Viewport(0.0, 0.0, 463.0, 700.0), content=None, tuning_override=None):
        current = [viewport]
        published = []
        controller = ViewportController(
            content if content is not None else content_size,
            viewport_provider=lambda: current[0],
            tuning=tuning_override if tuning_override is not None else tuning,
            on_transform_changed=published.append,
        )
        controller.viewport = current
        controller.published = published
        return controller
    return _make


def assert_contained(controller, viewport, border_margin=0.0, tolerance=1e-9):
    """Assert the containment rule on both axes."""
    state = controller.state
    content = controller.content_size
    for translate, length, view_length in (
        (state.translate_x, content.width, viewport.width),
        (state.translate_y, content.height, viewport.height),
    ):
        scaled = length * state.scale
        if scaled > view_length:
            assert -(scaled - view_length) - tolerance <= translate <= border_margin + tolerance
        else:
            assert translate == pytest.approx(-(scaled - view_length) / 2, abs=tolerance)


# GUI Testing Fixtures
# ------------------

@pytest.fixture
def regions_file(deskmap_paths):
    """Sample region tree shipped with the project."""
    return deskmap_paths['config'] / 'regions.json'
