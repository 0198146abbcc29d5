"""
Transform math for pan and point-anchored zoom.

All functions are pure: they take the current scale/translation and return
the unclamped candidate values. Clamping is applied by the caller.
"""

import math

from custom_types import ContentPoint, ScreenPoint, Viewport


def pan_by(translate_x: float, translate_y: float,
           anchor: ScreenPoint, current: ScreenPoint) -> tuple[float, float]:
    """Translate by the screen delta between ``anchor`` and ``current``."""
    return (
        translate_x + (current.x - anchor.x),
        translate_y + (current.y - anchor.y),
    )


def wheel_pan(translate_x: float, translate_y: float, delta_x: float, delta_y: float,
              scale: float, sensitivity: float) -> tuple[float, float]:
    """Translate by wheel deltas converted to content units."""
    return (
        translate_x - delta_x * sensitivity / scale,
        translate_y - delta_y * sensitivity / scale,
    )


def zoom_scale(old_scale: float, signal: float, rate: float,
               min_scale: float, max_scale: float) -> float:
    """Exponentially scale ``old_scale`` by ``signal`` and clamp to bounds.

    Returns NaN when the arithmetic leaves the finite range so the caller can
    reject the update.
    """
    if not math.isfinite(signal):
        return math.nan
    try:
        factor = math.exp(rate * signal)
    except OverflowError:
        return math.nan
    new_scale = old_scale * factor
    if not math.isfinite(new_scale):
        return math.nan
    return max(min_scale, min(new_scale, max_scale))


def content_point_at(screen: ScreenPoint, viewport: Viewport, scale: float,
                     translate_x: float, translate_y: float) -> ContentPoint:
    """Content-space point under a screen position."""
    return ContentPoint(
        (screen.x - viewport.left) / scale - translate_x,
        (screen.y - viewport.top) / scale - translate_y,
    )


def zoom_at_point(screen: ScreenPoint, viewport: Viewport, old_scale: float, new_scale: float,
                  translate_x: float, translate_y: float) -> tuple[float, float]:
    """Translation that keeps the content point under ``screen`` fixed.

    The content point is computed at ``old_scale`` and then mapped back under
    the same screen position at ``new_scale``.
    """
    anchor = content_point_at(screen, viewport, old_scale, translate_x, translate_y)
    return (
        (screen.x - viewport.left) / new_scale - anchor.x,
        (screen.y - viewport.top) / new_scale - anchor.y,
    )


def midpoint(a: ScreenPoint, b: ScreenPoint) -> ScreenPoint:
    return ScreenPoint((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance(a: ScreenPoint, b: ScreenPoint) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
