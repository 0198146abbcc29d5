"""ViewportController - pan and zoom for a bounded content plane.

Routes raw pointer, wheel and touch input through three steps:

- gesture_classifier picks the gesture for the event and current state
- transform_updater computes the unclamped candidate scale/translation
- boundary_clamper corrects the translation so no empty space shows

The controller owns the only ViewState and publishes the composed transform
string after every change. It has no UI toolkit dependency; hosts feed it
events and read ``transform`` (or subscribe via ``on_transform_changed``).
"""

import dataclasses
import logging
import math
from typing import Sequence

from boundary_clamper import clamp_translation
from config_manager import config
from custom_types import (
    ContentPoint, ContentSize, ScreenPoint, TransformChangedCallback, TransformInfo,
    Viewport, ViewportProvider,
)
from enums import GestureKind, GestureState
from error_handler import ErrorHandler
from gesture_classifier import (
    classify_pointer_down, classify_pointer_move, classify_pointer_up, classify_touch_end,
    classify_touch_move, classify_touch_start, classify_wheel,
)
from transform_updater import (
    content_point_at, distance, midpoint, pan_by, wheel_pan, zoom_at_point, zoom_scale,
)
from view_state import ViewState, ViewportTuning

logger = logging.getLogger(__name__)


class ViewportController:
    """Maintains pan offset and zoom scale for one viewport.

    Every public operation runs to completion synchronously and leaves the
    state clamped against the viewport it was given (or the one returned by
    ``viewport_provider`` when none is passed).
    """

    def __init__(
        self,
        content_size: ContentSize,
        viewport_provider: ViewportProvider | None = None,
        tuning: ViewportTuning | None = None,
        on_transform_changed: TransformChangedCallback | None = None,
        initial_viewport: Viewport | None = None,
    ) -> None:
        """Initialize the controller and settle the initial state.

        Args:
            content_size: Fixed size of the content plane
            viewport_provider: Callable returning the current viewport; read
                before each clamp when an operation gets no explicit viewport
            tuning: Zoom/pan constants, defaults to the config's viewport section
            on_transform_changed: Called with the transform string after each update
            initial_viewport: Viewport for the settle step, defaults to the provider's
        """
        self.tuning = tuning if tuning is not None else ViewportTuning.from_config(
            config.get_viewport_config())
        self.on_transform_changed = on_transform_changed
        self._viewport_provider = viewport_provider
        self.content_size = content_size
        self.state = ViewState()

        if initial_viewport is None:
            initial_viewport = self._resolve_viewport(None)
        self.initialize(content_size, initial_viewport)

    # --- LIFECYCLE ---

    def initialize(self, content_size: ContentSize, initial_viewport: Viewport | None) -> ViewState:
        """Reset to scale 1 / translate (0, 0) and clamp against ``initial_viewport``."""
        if not all(math.isfinite(v) and v > 0 for v in content_size):
            raise ValueError(f"Content size must be positive, got {content_size!r}")

        self.content_size = ContentSize(float(content_size.width), float(content_size.height))
        self.state = ViewState()
        logger.debug("Initializing viewport for content %s", self.content_size)
        self._settle(initial_viewport)
        return self.state

    def on_viewport_resize(self, new_viewport: Viewport) -> None:
        """Re-clamp after a resize; scale and any active gesture are kept."""
        logger.debug("Viewport resized to %s", new_viewport)
        self._settle(new_viewport)

    def force_end(self, viewport: Viewport | None = None) -> None:
        """End any pan or pinch whose terminating event was lost, then re-clamp."""
        if self.state.gesture != GestureState.IDLE:
            logger.debug("Force-ending %s gesture", self.state.gesture)
        self.state.end_pan()
        self.state.end_pinch()
        self.state.interactive_hit = False
        self._settle(viewport)

    def set_border_margin(self, margin: float) -> None:
        """Change the near-edge border margin and re-clamp."""
        margin = float(margin)
        if not math.isfinite(margin) or margin < 0:
            raise ValueError(f"Border margin must be non-negative, got {margin}")
        self.tuning = dataclasses.replace(self.tuning, border_margin=margin)
        self._settle(None)

    # --- POINTER ---

    def on_pointer_down(self, screen_pos: ScreenPoint, is_over_interactive_region: bool) -> None:
        """Start a pan unless the press landed on an interactive region."""
        gesture = classify_pointer_down(is_over_interactive_region)
        if gesture is None:
            self.state.interactive_hit = True
            logger.debug("Pointer down on interactive region at %s; pan suppressed", screen_pos)
            return
        self.state.interactive_hit = False
        self._start_pan(screen_pos)

    def on_pointer_move(self, screen_pos: ScreenPoint, viewport: Viewport | None = None) -> None:
        if classify_pointer_move(self.state.gesture) is None:
            return
        self._pan_move(screen_pos, viewport)

    def on_pointer_up(self, viewport: Viewport | None = None) -> None:
        """End an active pan; hosts must route releases from anywhere, not just the viewport."""
        self.state.interactive_hit = False
        if classify_pointer_up(self.state.gesture) is None:
            return
        self.state.end_pan()
        logger.debug("Pan ended")
        self._settle(viewport)

    # --- WHEEL ---

    def on_wheel(self, delta_x: float, delta_y: float, screen_pos: ScreenPoint,
                 precise_zoom_modifier: bool, viewport: Viewport | None = None) -> None:
        """Zoom around the cursor with the modifier held, otherwise pan."""
        viewport = self._resolve_viewport(viewport)
        if classify_wheel(precise_zoom_modifier) == GestureKind.ZOOM_AT_POINT:
            self._zoom_at(screen_pos, -delta_y, self.tuning.wheel_zoom_rate, viewport)
            return

        translate_x, translate_y = wheel_pan(
            self.state.translate_x, self.state.translate_y, delta_x, delta_y,
            self.state.scale, self.tuning.pan_sensitivity)
        self._commit(self.state.scale, translate_x, translate_y, viewport)

    # --- TOUCH ---

    def on_touch_start(self, contacts: Sequence[ScreenPoint], viewport: Viewport | None = None) -> None:
        """One contact starts a pan, two start a pinch (cancelling any pan)."""
        gesture = classify_touch_start(len(contacts))
        if gesture == GestureKind.PAN_START:
            self._start_pan(contacts[0])
        elif gesture == GestureKind.PINCH_START:
            self._start_pinch(contacts[0], contacts[1], self._resolve_viewport(viewport))

    def on_touch_move(self, contacts: Sequence[ScreenPoint], viewport: Viewport | None = None) -> None:
        gesture = classify_touch_move(self.state.gesture, len(contacts))
        if gesture == GestureKind.PINCH_MOVE:
            self._pinch_move(contacts[0], contacts[1], self._resolve_viewport(viewport))
        elif gesture == GestureKind.PAN_MOVE:
            self._pan_move(contacts[0], viewport)

    def on_touch_end(self, viewport: Viewport | None = None) -> None:
        """End both pan and pinch, then re-clamp."""
        for gesture in classify_touch_end():
            if gesture == GestureKind.PAN_END:
                self.state.end_pan()
            elif gesture == GestureKind.PINCH_END:
                self.state.end_pinch()
        logger.debug("Touch gesture ended")
        self._settle(viewport)

    # --- QUERIES ---

    @property
    def transform(self) -> str:
        """Composed transform string ``translate(tx ty) scale(s)``."""
        return self.state.transform

    def current_transform(self) -> TransformInfo:
        return self.state.as_dict()

    def content_point_at(self, screen_pos: ScreenPoint, viewport: Viewport | None = None) -> ContentPoint:
        """Content-space point currently under ``screen_pos``."""
        viewport = self._resolve_viewport(viewport) or Viewport(0.0, 0.0, 0.0, 0.0)
        return content_point_at(screen_pos, viewport, self.state.scale,
                                self.state.translate_x, self.state.translate_y)

    # --- GESTURE STEPS ---

    def _start_pan(self, screen_pos: ScreenPoint) -> None:
        if self.state.gesture == GestureState.PINCHING:
            logger.debug("Pinch cancelled by pan start")
        self.state.begin_pan(ScreenPoint(*screen_pos))
        logger.debug("Pan started at %s", screen_pos)

    def _pan_move(self, screen_pos: ScreenPoint, viewport: Viewport | None) -> None:
        screen_pos = ScreenPoint(*screen_pos)
        translate_x, translate_y = pan_by(
            self.state.translate_x, self.state.translate_y, self.state.pan_anchor, screen_pos)
        if math.isfinite(screen_pos.x) and math.isfinite(screen_pos.y):
            self.state.pan_anchor = screen_pos
        self._commit(self.state.scale, translate_x, translate_y, viewport)

    def _start_pinch(self, first: ScreenPoint, second: ScreenPoint, viewport: Viewport | None) -> None:
        if viewport is None:
            ErrorHandler.show_warning("Pinch start without a viewport ignored", title="Viewport")
            return
        if self.state.gesture == GestureState.PANNING:
            logger.debug("Pan cancelled by pinch start")
        center = content_point_at(midpoint(first, second), viewport, self.state.scale,
                                  self.state.translate_x, self.state.translate_y)
        self.state.begin_pinch(distance(first, second), center)
        logger.debug("Pinch started: distance=%f, center=%s", self.state.pinch_last_distance, center)

    def _pinch_move(self, first: ScreenPoint, second: ScreenPoint, viewport: Viewport | None) -> None:
        current_distance = distance(first, second)
        change = current_distance - self.state.pinch_last_distance
        self._zoom_at(midpoint(first, second), change, self.tuning.pinch_zoom_rate, viewport)
        self.state.pinch_last_distance = current_distance

    def _zoom_at(self, screen_pos: ScreenPoint, signal: float, rate: float,
                 viewport: Viewport | None) -> bool:
        """Zoom by ``exp(rate * signal)`` keeping the content under ``screen_pos`` fixed."""
        if viewport is None:
            ErrorHandler.show_warning("Zoom without a viewport ignored", title="Viewport")
            return False

        old_scale = self.state.scale
        new_scale = zoom_scale(old_scale, signal, rate, self.tuning.min_scale, self.tuning.max_scale)
        if not math.isfinite(new_scale):
            ErrorHandler.show_warning(
                f"Rejected zoom with signal {signal!r}; keeping scale {old_scale}", title="Zoom")
            return False

        translate_x, translate_y = zoom_at_point(
            ScreenPoint(*screen_pos), viewport, old_scale, new_scale,
            self.state.translate_x, self.state.translate_y)
        return self._commit(new_scale, translate_x, translate_y, viewport)

    # --- COMMIT / CLAMP ---

    def _resolve_viewport(self, viewport: Viewport | None) -> Viewport | None:
        if viewport is not None:
            return viewport
        if self._viewport_provider is not None:
            return self._viewport_provider()
        return None

    def _commit(self, scale: float, translate_x: float, translate_y: float,
                viewport: Viewport | None) -> bool:
        """Apply a candidate state, clamp it and publish; non-finite candidates are rejected."""
        if not (math.isfinite(scale) and math.isfinite(translate_x) and math.isfinite(translate_y)):
            ErrorHandler.show_warning(
                f"Rejected non-finite update: scale={scale}, translate=({translate_x}, {translate_y})",
                title="Viewport",
            )
            return False
        self.state.scale = scale
        self.state.set_translation(translate_x, translate_y)
        self._settle(viewport)
        return True

    def _settle(self, viewport: Viewport | None) -> None:
        """Clamp the current translation against the viewport and publish."""
        viewport = self._resolve_viewport(viewport)
        translate_x, translate_y = clamp_translation(
            self.state.translate_x, self.state.translate_y, self.state.scale,
            self.content_size, viewport, self.tuning.border_margin)
        self.state.set_translation(translate_x, translate_y)
        self._publish()

    def _publish(self) -> None:
        if self.on_transform_changed is not None:
            self.on_transform_changed(self.state.transform)


__all__ = ["ViewportController"]
