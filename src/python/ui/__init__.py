"""UI components package for the desk map."""

from ui.map_viewport import MapViewportWidget

__all__ = [
    "MapViewportWidget",
]
