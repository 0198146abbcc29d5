"""
Boundary clamping for the desk map viewport.

Keeps the visible rectangle inside the content plane. Each axis is handled
independently: when the scaled content is larger than the viewport the
translation is limited so neither edge pulls away from the viewport (plus an
optional border margin on the near side); when it is smaller the content is
centred on that axis.
"""

import logging
import math

from custom_types import ContentSize, Viewport
from error_handler import ErrorHandler

logger = logging.getLogger(__name__)


def is_valid_viewport(viewport: Viewport | None) -> bool:
    """True if the viewport has a finite, strictly positive size."""
    if viewport is None:
        return False
    return (
        math.isfinite(viewport.width) and math.isfinite(viewport.height)
        and viewport.width > 0 and viewport.height > 0
    )


def axis_limits(content_length: float, scale: float, viewport_length: float,
                border_margin: float = 0.0) -> tuple[float, float]:
    """Allowed translation range ``(minimum, maximum)`` along one axis.

    ``minimum`` is the most negative translation (content's far edge flush
    with the viewport's far edge); ``maximum`` is the border margin.
    """
    overflow = content_length * scale - viewport_length
    return -overflow, border_margin


def clamp_axis(translate: float, content_length: float, scale: float,
               viewport_length: float, border_margin: float = 0.0) -> float:
    """Clamp a single axis translation."""
    minimum, maximum = axis_limits(content_length, scale, viewport_length, border_margin)
    if content_length * scale > viewport_length:
        return min(max(translate, minimum), maximum)
    # Content fits: centre it
    return minimum / 2


def clamp_translation(
    translate_x: float,
    translate_y: float,
    scale: float,
    content: ContentSize,
    viewport: Viewport | None,
    border_margin: float = 0.0,
) -> tuple[float, float]:
    """Correct a candidate translation so it satisfies containment.

    Args:
        translate_x: Candidate horizontal translation
        translate_y: Candidate vertical translation
        scale: Current zoom scale
        content: Size of the content plane
        viewport: Visible rectangle; only its width and height matter here
        border_margin: Non-negative slack past the content's near edge

    Returns:
        tuple: Corrected ``(translate_x, translate_y)``. For a missing or
        degenerate viewport the input translation is returned unchanged and a
        warning is logged.
    """
    if not is_valid_viewport(viewport):
        ErrorHandler.show_warning(
            f"Cannot clamp against viewport {viewport!r}; keeping translation "
            f"({translate_x}, {translate_y})",
            title="Viewport",
        )
        return translate_x, translate_y

    clamped_x = clamp_axis(translate_x, content.width, scale, viewport.width, border_margin)
    clamped_y = clamp_axis(translate_y, content.height, scale, viewport.height, border_margin)

    if (clamped_x, clamped_y) != (translate_x, translate_y):
        logger.debug("Clamped translation (%f, %f) -> (%f, %f) at scale %f",
                     translate_x, translate_y, clamped_x, clamped_y, scale)
    return clamped_x, clamped_y
