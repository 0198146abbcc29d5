"""
Type definitions for the desk map viewport.

This module defines the geometry records, TypedDict structures, callback
aliases and host protocols shared across the deskmap codebase.
"""

from typing import Any, Callable, NamedTuple, Protocol, TypedDict


# Geometry records
class ScreenPoint(NamedTuple):
    """A position in screen (viewport host) coordinates."""
    x: float
    y: float


class ContentPoint(NamedTuple):
    """A position on the content plane, in content units."""
    x: float
    y: float


class ContentSize(NamedTuple):
    """Fixed size of the content plane."""
    width: float
    height: float


class Viewport(NamedTuple):
    """The visible rectangle, in screen coordinates.

    ``left``/``top`` locate the viewport's origin on screen; pointer positions
    are converted to viewport-relative coordinates by subtracting them.
    """
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def of_size(cls, width: float, height: float) -> "Viewport":
        """Viewport anchored at the screen origin."""
        return cls(0.0, 0.0, width, height)


# Configuration TypedDict definitions
class ViewportConfig(TypedDict, total=False):
    """Viewport tuning section of config.json."""
    minScale: float
    maxScale: float
    wheelZoomRate: float
    pinchZoomRate: float
    panSensitivity: float
    borderMargin: float


class TransformInfo(TypedDict):
    """Published transform components."""
    translate_x: float
    translate_y: float
    scale: float


# Callback type aliases
TransformChangedCallback = Callable[[str], None]
ViewportProvider = Callable[[], Viewport]


# Protocol definitions
class RegionClassifier(Protocol):
    """Decides whether a pointer target is an interactive region.

    The target identifier is whatever the host uses to name the thing under
    the pointer; the Qt host passes the content point under the cursor.
    """

    def is_interactive(self, target: Any) -> bool:
        """Return True if pressing on ``target`` must not start a pan."""
        ...
