"""
Enumerations for the desk map viewport using Python 3.11+ StrEnum.

This module defines string-based enumerations for the gesture state machine
and the gestures recognised from raw input.
"""

from enum import StrEnum


class GestureState(StrEnum):
    """Which continuous gesture, if any, the controller is tracking.

    Attributes:
        IDLE: No gesture in progress
        PANNING: A mouse or single-finger drag is in progress
        PINCHING: A two-finger pinch is in progress
    """
    IDLE = "idle"
    PANNING = "panning"
    PINCHING = "pinching"


class GestureKind(StrEnum):
    """Gestures produced by the classifier from raw input events.

    Attributes:
        PAN_START: Begin tracking a drag at the pointer/contact position
        PAN_MOVE: Translate by the delta since the last anchor
        PAN_END: Finish the drag and re-clamp
        WHEEL_PAN: Single-shot translation from wheel deltas
        ZOOM_AT_POINT: Wheel zoom keeping the cursor's content point fixed
        PINCH_START: Begin a two-finger pinch
        PINCH_MOVE: Zoom by the change in finger distance
        PINCH_END: Finish the pinch and re-clamp
    """
    PAN_START = "pan-start"
    PAN_MOVE = "pan-move"
    PAN_END = "pan-end"
    WHEEL_PAN = "wheel-pan"
    ZOOM_AT_POINT = "zoom-at-point"
    PINCH_START = "pinch-start"
    PINCH_MOVE = "pinch-move"
    PINCH_END = "pinch-end"
