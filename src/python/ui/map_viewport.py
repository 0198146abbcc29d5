"""Qt host for the viewport controller.

This module provides the widget that binds PyQt6 input to ViewportController:
- Left-button press/move drive mouse panning
- Left-button releases are caught application-wide so a drag that ends
  outside the widget still finishes the pan
- Wheel pans, or zooms around the cursor with Ctrl held
- One-finger touch pans, two-finger touch pinches
- Resizes re-clamp the current view

The widget publishes the composed transform through ``transform_changed``.
"""

import logging
from typing import Any

from PyQt6.QtCore import QEvent, QObject, Qt, pyqtSignal
from PyQt6.QtGui import QEventPoint
from PyQt6.QtWidgets import QApplication, QWidget

from config_manager import config
from controllers import ViewportController
from custom_types import ContentSize, RegionClassifier, ScreenPoint, Viewport

logger = logging.getLogger(__name__)

# One wheel notch in Qt's angleDelta units
ANGLE_UNITS_PER_NOTCH = 120.0


class MapViewportWidget(QWidget):
    """Viewport onto the desk map.

    Signals:
        transform_changed: Emitted with ``translate(tx ty) scale(s)`` after every update
    """

    transform_changed = pyqtSignal(str)

    def __init__(
        self,
        content_size: ContentSize | None = None,
        region_classifier: RegionClassifier | None = None,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize the viewport widget.

        Args:
            content_size: Size of the content plane, defaults to the configured one
            region_classifier: Decides whether a press lands on a desk or room
            parent: Parent widget
        """
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.region_classifier = region_classifier
        self.pixels_per_notch = config.get_wheel_pixels_per_notch()

        self.controller = ViewportController(
            content_size if content_size is not None else config.get_content_size(),
            viewport_provider=self.viewport_rect,
            on_transform_changed=self.transform_changed.emit,
        )

        # Releases must end a pan even when they happen over another widget
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def viewport_rect(self) -> Viewport:
        """Current viewport in widget-local coordinates."""
        return Viewport.of_size(float(self.width()), float(self.height()))

    @property
    def transform(self) -> str:
        return self.controller.transform

    # --- MOUSE ---

    def mousePressEvent(self, event: Any) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        screen_pos = self._point(event.position())
        self.controller.on_pointer_down(screen_pos, self._is_interactive(screen_pos))
        if self.controller.state.pan_active:
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event: Any) -> None:
        self.controller.on_pointer_move(self._point(event.position()))
        event.accept()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if (event.type() == QEvent.Type.MouseButtonRelease
                and event.button() == Qt.MouseButton.LeftButton):
            was_panning = self.controller.state.pan_active
            self.controller.on_pointer_up()
            if was_panning:
                self.unsetCursor()
        return False

    # --- WHEEL ---

    def wheelEvent(self, event: Any) -> None:
        delta_x, delta_y = self._wheel_pixels(event)
        precise_zoom = bool(event.modifiers() & Qt.KeyboardModifier.ControlModifier)
        self.controller.on_wheel(
            delta_x, delta_y, self._point(event.position()), precise_zoom, self.viewport_rect())
        event.accept()

    def _wheel_pixels(self, event: Any) -> tuple[float, float]:
        """Wheel deltas in pixels, positive when scrolling down/right."""
        pixel_delta = event.pixelDelta()
        if not pixel_delta.isNull():
            return -float(pixel_delta.x()), -float(pixel_delta.y())
        angle_delta = event.angleDelta()
        per_unit = self.pixels_per_notch / ANGLE_UNITS_PER_NOTCH
        return -angle_delta.x() * per_unit, -angle_delta.y() * per_unit

    # --- TOUCH ---

    def event(self, event: QEvent) -> bool:
        event_type = event.type()
        if event_type == QEvent.Type.TouchBegin:
            self.controller.on_touch_start(self._active_contacts(event), self.viewport_rect())
        elif event_type == QEvent.Type.TouchUpdate:
            self._handle_touch_update(event)
        elif event_type == QEvent.Type.TouchEnd:
            self.controller.on_touch_end(self.viewport_rect())
        elif event_type == QEvent.Type.TouchCancel:
            self.controller.force_end(self.viewport_rect())
        else:
            return super().event(event)
        event.accept()
        return True

    def _handle_touch_update(self, event: Any) -> None:
        states = {point.state() for point in event.points()}
        if QEventPoint.State.Released in states:
            # A finger lifted: ends pan and pinch together
            self.controller.on_touch_end(self.viewport_rect())
        elif QEventPoint.State.Pressed in states:
            # A finger was added: restart with the new contact count
            self.controller.on_touch_start(self._active_contacts(event), self.viewport_rect())
        else:
            self.controller.on_touch_move(self._active_contacts(event), self.viewport_rect())

    def _active_contacts(self, event: Any) -> list[ScreenPoint]:
        return [
            self._point(point.position())
            for point in event.points()
            if point.state() != QEventPoint.State.Released
        ]

    # --- GEOMETRY ---

    def resizeEvent(self, event: Any) -> None:
        super().resizeEvent(event)
        self.controller.on_viewport_resize(self.viewport_rect())

    def hideEvent(self, event: Any) -> None:
        # A hidden viewport never sees the release that would end its gesture
        self.controller.force_end()
        self.unsetCursor()
        super().hideEvent(event)

    def _is_interactive(self, screen_pos: ScreenPoint) -> bool:
        if self.region_classifier is None:
            return False
        return self.region_classifier.is_interactive(self.controller.content_point_at(screen_pos))

    @staticmethod
    def _point(position: Any) -> ScreenPoint:
        return ScreenPoint(position.x(), position.y())
