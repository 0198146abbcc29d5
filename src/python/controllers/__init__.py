"""Controllers package for the desk map.

Main Components:
    ViewportController: Pan/zoom state machine for a bounded content plane

Usage:
    from controllers import ViewportController
    from custom_types import ContentSize, ScreenPoint, Viewport

    controller = ViewportController(
        ContentSize(463, 1355),
        viewport_provider=lambda: Viewport.of_size(463, 700),
        on_transform_changed=print,
    )
    controller.on_wheel(0, -100, ScreenPoint(200, 300), True)
"""

from controllers.viewport_controller import ViewportController

__all__ = ['ViewportController']
