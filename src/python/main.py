"""Desk map viewer entry point.

Opens a window hosting the pan/zoom viewport for the configured floor map.
The current transform is shown in the window title.
"""

import json
import logging
import sys

from PyQt6.QtWidgets import QApplication

from config_manager import config
from custom_types import ContentSize
from error_handler import ErrorHandler
from logging_config import setup_logging
from region_classifier import LabelledRegionClassifier, Region, load_regions
from ui import MapViewportWidget

logger = logging.getLogger(__name__)


def read_regions(path: str | None) -> list[Region]:
    """Load the region tree, or an empty one if it can't be read."""
    if not path:
        return []
    try:
        return load_regions(path)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        ErrorHandler.show_warning(f"Could not load regions from {path}: {e}", title="Regions")
        return []


def create_viewer(content_size: ContentSize, regions: list[Region]) -> MapViewportWidget:
    """Build the viewport window; a QApplication must already exist."""
    window_config = config.get_window_config()
    title = window_config.get("title", "Desk Map")

    widget = MapViewportWidget(content_size, region_classifier=LabelledRegionClassifier(regions))
    widget.transform_changed.connect(lambda transform: widget.setWindowTitle(f"{title} - {transform}"))
    widget.transform_changed.connect(lambda transform: logger.debug("Transform: %s", transform))
    widget.resize(int(window_config.get("width", 463)), int(window_config.get("height", 700)))
    # Hidden widgets get their resize event on show; settle against the window size now
    widget.controller.on_viewport_resize(widget.viewport_rect())
    widget.setWindowTitle(f"{title} - {widget.transform}")
    return widget


def main(argv: list[str] | None = None) -> int:
    """Entry point for the desk map viewer."""
    import argparse

    content_default = config.get_content_size()

    parser = argparse.ArgumentParser(description='Desk Map - pan and zoom a floor map')
    parser.add_argument('--width', type=float, default=content_default.width,
                        help=f'Content width (default: {content_default.width:g})')
    parser.add_argument('--height', type=float, default=content_default.height,
                        help=f'Content height (default: {content_default.height:g})')
    parser.add_argument('--regions', '-r', default=None,
                        help='JSON file describing labelled desk and room regions')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    setup_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    regions = read_regions(args.regions)
    ErrorHandler.show_info(
        f"Viewing {args.width:g}x{args.height:g} content with {len(regions)} regions", title="Desk Map")

    app = QApplication(sys.argv[:1])
    widget = create_viewer(ContentSize(args.width, args.height), regions)
    widget.show()

    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
