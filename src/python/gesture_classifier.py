"""
Gesture classification for raw pointer, wheel and touch input.

Each ``classify_*`` function looks at one input event and the controller's
current gesture state and names the gesture to apply, or returns None when
the event must not change anything.
"""

import logging

from enums import GestureKind, GestureState

logger = logging.getLogger(__name__)


def classify_pointer_down(is_over_interactive_region: bool) -> GestureKind | None:
    """Pointer-down starts a pan unless it landed on an interactive region."""
    if is_over_interactive_region:
        return None
    return GestureKind.PAN_START


def classify_pointer_move(state: GestureState) -> GestureKind | None:
    """Pointer-move pans only while a pan is active."""
    if state == GestureState.PANNING:
        return GestureKind.PAN_MOVE
    return None


def classify_pointer_up(state: GestureState) -> GestureKind | None:
    """Pointer-up ends an active pan wherever the release happened."""
    if state == GestureState.PANNING:
        return GestureKind.PAN_END
    return None


def classify_wheel(precise_zoom_modifier: bool) -> GestureKind:
    """Wheel zooms with the precise-zoom modifier held and pans otherwise."""
    if precise_zoom_modifier:
        return GestureKind.ZOOM_AT_POINT
    return GestureKind.WHEEL_PAN


def classify_touch_start(contact_count: int) -> GestureKind | None:
    """One contact starts a pan, two start a pinch; other counts are ignored."""
    if contact_count == 1:
        return GestureKind.PAN_START
    if contact_count == 2:
        return GestureKind.PINCH_START
    logger.debug("Ignoring touch start with %d contacts", contact_count)
    return None


def classify_touch_move(state: GestureState, contact_count: int) -> GestureKind | None:
    """Continue the active touch gesture if the contact count still matches it."""
    if state == GestureState.PINCHING and contact_count == 2:
        return GestureKind.PINCH_MOVE
    if state == GestureState.PANNING and contact_count == 1:
        return GestureKind.PAN_MOVE
    return None


def classify_touch_end() -> tuple[GestureKind, GestureKind]:
    """Touch-end always ends both pan and pinch."""
    return GestureKind.PAN_END, GestureKind.PINCH_END
