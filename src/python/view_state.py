"""
ViewState: the pan/zoom record shared by the classifier, updater and clamper.
"""

import math
from dataclasses import dataclass

from custom_types import ContentPoint, ScreenPoint, TransformInfo, ViewportConfig
from enums import GestureState


@dataclass(frozen=True)
class ViewportTuning:
    """Constants governing zoom bounds, zoom rates and pan sensitivity."""
    min_scale: float = 0.8
    max_scale: float = 10.0
    wheel_zoom_rate: float = 0.005
    pinch_zoom_rate: float = 0.004
    pan_sensitivity: float = 2.0
    border_margin: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.max_scale) and 0 < self.min_scale <= self.max_scale):
            raise ValueError(f"Invalid scale bounds: [{self.min_scale}, {self.max_scale}]")
        for name in ("wheel_zoom_rate", "pinch_zoom_rate", "pan_sensitivity", "border_margin"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {value}")

    @classmethod
    def from_config(cls, section: ViewportConfig) -> "ViewportTuning":
        """Build tuning from the ``viewport`` section of config.json."""
        defaults = cls()
        return cls(
            min_scale=float(section.get("minScale", defaults.min_scale)),
            max_scale=float(section.get("maxScale", defaults.max_scale)),
            wheel_zoom_rate=float(section.get("wheelZoomRate", defaults.wheel_zoom_rate)),
            pinch_zoom_rate=float(section.get("pinchZoomRate", defaults.pinch_zoom_rate)),
            pan_sensitivity=float(section.get("panSensitivity", defaults.pan_sensitivity)),
            border_margin=float(section.get("borderMargin", defaults.border_margin)),
        )


def _format_number(value: float) -> str:
    # Integral values print without a trailing ".0", matching SVG attribute text
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class ViewState:
    """Manage scale, translation and gesture bookkeeping for one viewport."""

    def __init__(self, scale: float = 1.0, translate_x: float = 0.0, translate_y: float = 0.0):
        self.scale = float(scale)
        self.translate_x = float(translate_x)
        self.translate_y = float(translate_y)
        self.gesture = GestureState.IDLE
        self.pan_anchor: ScreenPoint | None = None
        self.pinch_last_distance: float = 0.0
        self.pinch_center: ContentPoint | None = None
        self.interactive_hit: bool = False

    @property
    def pan_active(self) -> bool:
        """True while a mouse or single-finger drag is tracked."""
        return self.gesture == GestureState.PANNING

    @property
    def pinch_active(self) -> bool:
        """True while a two-finger pinch is tracked."""
        return self.gesture == GestureState.PINCHING

    def begin_pan(self, anchor: ScreenPoint) -> None:
        """Enter PANNING; any pinch bookkeeping is dropped."""
        self.gesture = GestureState.PANNING
        self.pan_anchor = anchor
        self.pinch_last_distance = 0.0
        self.pinch_center = None

    def begin_pinch(self, distance: float, center: ContentPoint) -> None:
        """Enter PINCHING; any pan anchor is dropped."""
        self.gesture = GestureState.PINCHING
        self.pan_anchor = None
        self.pinch_last_distance = float(distance)
        self.pinch_center = center

    def end_pan(self) -> None:
        """Leave PANNING (no-op in any other state)."""
        if self.gesture == GestureState.PANNING:
            self.gesture = GestureState.IDLE
        self.pan_anchor = None

    def end_pinch(self) -> None:
        """Leave PINCHING (no-op in any other state)."""
        if self.gesture == GestureState.PINCHING:
            self.gesture = GestureState.IDLE
        self.pinch_last_distance = 0.0
        self.pinch_center = None

    def set_translation(self, translate_x: float, translate_y: float) -> None:
        self.translate_x = float(translate_x)
        self.translate_y = float(translate_y)

    def as_dict(self) -> TransformInfo:
        """Transform components as published to the host."""
        return TransformInfo(
            translate_x=self.translate_x,
            translate_y=self.translate_y,
            scale=self.scale,
        )

    @property
    def transform(self) -> str:
        """Composed transform string: ``translate(tx ty) scale(s)``."""
        return (
            f"translate({_format_number(self.translate_x)} {_format_number(self.translate_y)}) "
            f"scale({_format_number(self.scale)})"
        )

    def __repr__(self) -> str:
        return (
            f"ViewState(scale={self.scale!r}, translate_x={self.translate_x!r}, "
            f"translate_y={self.translate_y!r}, gesture={self.gesture.value!r})"
        )
