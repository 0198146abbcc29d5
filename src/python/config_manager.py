import json
import pathlib
import sys
import logging
from typing import Any

from custom_types import ContentSize, ViewportConfig

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages application configuration: content geometry, viewport tuning and UI settings"""

    content: dict[str, Any]
    viewport: dict[str, Any]
    ui: dict[str, Any]
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to standard location if None)
            exit_on_error: Whether to exit the program on configuration errors
        """
        self.content = {}
        self.viewport = {}
        self.ui = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        self.cfg_path = cfg_path if cfg_path is not None else self._default_config_path()

        self.load_config()

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        base = pathlib.Path(__file__).parent.parent.parent
        return base / "config" / "config.json"

    def load_config(self) -> None:
        """Load master configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r') as f:
                self._cfg = json.load(f)
        except Exception as e:
            error_msg = "Critical error loading configuration '%s': %s"
            logger.error(error_msg, self.cfg_path, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise RuntimeError(f"Critical error loading configuration '{self.cfg_path}': {e}")

        # Validate and assign sections
        try:
            self.content = self._cfg["content"]
            self.viewport = self._cfg["viewport"]
            self.ui = self._cfg["ui"]
        except KeyError as e:
            error_msg = "Configuration missing key: %s"
            logger.error(error_msg, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise KeyError(f"Configuration missing key: {e}")

        logger.debug("Loaded configuration from %s", self.cfg_path)

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a generic setting from the master config"""
        try:
            return self._cfg.get(section, {}).get(key, default)
        except Exception:
            return default

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'viewport', 'ui')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value

    def get_ui_setting(self, category: str, key: str, default: Any = None) -> Any:
        """Get a UI setting value by category and key"""
        if category in self.ui and isinstance(self.ui[category], dict) and key in self.ui[category]:
            return self.ui[category][key]
        return default

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        try:
            return self._cfg.get("logging", {}).get(key, default)
        except Exception:
            return default

    # ============================================================================
    # Viewport Configuration Accessors
    # ============================================================================

    def get_viewport_config(self) -> ViewportConfig:
        """Get pan/zoom tuning from the viewport section.

        Returns:
            dict: Viewport configuration with keys:
                - minScale / maxScale: Zoom bounds
                - wheelZoomRate: Exponential rate per wheel pixel
                - pinchZoomRate: Exponential rate per pixel of pinch travel
                - panSensitivity: Multiplier applied to wheel-pan deltas
                - borderMargin: Slack allowed past the content's near edge
        """
        return self._cfg.get("viewport", {})

    def get_content_size(self) -> ContentSize:
        """Get the size of the content plane.

        Returns:
            ContentSize: Width and height in content units (463 x 1355 if unset)
        """
        width = self.get_setting("content", "width", 463)
        height = self.get_setting("content", "height", 1355)
        return ContentSize(float(width), float(height))

    def get_interactive_labels(self) -> list[str]:
        """Get region labels that suppress panning when pressed."""
        return list(self.ui.get("interactiveLabels", ["DESKS", "ROOMS"]))

    def get_wheel_pixels_per_notch(self, default: float = 100.0) -> float:
        """Get the pixel distance reported for a single wheel notch."""
        return float(self.get_ui_setting("wheel", "pixelsPerNotch", default))

    def get_window_config(self) -> dict[str, Any]:
        """Get main window configuration.

        Returns:
            dict: Window configuration with keys:
                - title: Window title
                - width / height: Initial viewport size in pixels
        """
        if "window" in self.ui:
            return self.ui["window"]
        return {"title": "Desk Map", "width": 463, "height": 700}


# Create a singleton instance
config = ConfigManager()
