"""
Unit tests for boundary clamping.
"""
import logging
import math

import pytest

from boundary_clamper import axis_limits, clamp_axis, clamp_translation, is_valid_viewport
from custom_types import ContentSize, Viewport

CONTENT = ContentSize(463, 1355)


def test_axis_limits():
    assert axis_limits(1355, 1.0, 700) == (-655.0, 0.0)
    assert axis_limits(1355, 1.0, 700, border_margin=20) == (-655.0, 20.0)


@pytest.mark.parametrize("translate,expected", [
    (0.0, 0.0),
    (50.0, 0.0),          # near edge may not retreat past the viewport edge
    (-1000.0, -655.0),    # far edge may not recede past the viewport's far edge
    (-300.0, -300.0),     # inside the range is untouched
])
def test_clamp_axis_content_larger(translate, expected):
    assert clamp_axis(translate, 1355, 1.0, 700) == pytest.approx(expected)


def test_clamp_axis_border_margin():
    assert clamp_axis(50.0, 1355, 1.0, 700, border_margin=20) == pytest.approx(20.0)
    assert clamp_axis(10.0, 1355, 1.0, 700, border_margin=20) == pytest.approx(10.0)


@pytest.mark.parametrize("translate", [-500.0, 0.0, 500.0])
def test_clamp_axis_content_smaller_centres(translate):
    # 463 * 0.8 = 370.4 wide inside a 463 viewport
    assert clamp_axis(translate, 463, 0.8, 463) == pytest.approx((463 - 370.4) / 2)


def test_clamp_axis_equal_size_centres_at_zero():
    assert clamp_axis(25.0, 463, 1.0, 463) == 0


def test_initial_floor_map_scenario():
    tx, ty = clamp_translation(0.0, 0.0, 1.0, CONTENT, Viewport(0, 0, 463, 700))
    assert tx == 0
    assert -655 <= ty <= 0
    assert ty == 0


def test_clamp_is_idempotent():
    viewport = Viewport(10, 20, 300, 500)
    once = clamp_translation(-4000.0, 75.0, 2.5, CONTENT, viewport, border_margin=5)
    twice = clamp_translation(*once, 2.5, CONTENT, viewport, border_margin=5)
    assert twice == once


def test_viewport_origin_does_not_affect_clamp():
    a = clamp_translation(-100.0, -100.0, 2.0, CONTENT, Viewport(0, 0, 400, 400))
    b = clamp_translation(-100.0, -100.0, 2.0, CONTENT, Viewport(250, 90, 400, 400))
    assert a == b


@pytest.mark.parametrize("viewport", [
    None,
    Viewport(0, 0, 0, 700),
    Viewport(0, 0, 463, -1),
    Viewport(0, 0, math.inf, 700),
    Viewport(0, 0, 463, math.nan),
])
def test_invalid_viewport_is_noop_with_warning(viewport, caplog):
    with caplog.at_level(logging.WARNING):
        result = clamp_translation(-9999.0, 42.0, 1.0, CONTENT, viewport)
    assert result == (-9999.0, 42.0)
    assert any("Viewport" in record.getMessage() for record in caplog.records)


def test_is_valid_viewport():
    assert is_valid_viewport(Viewport(0, 0, 1, 1))
    assert not is_valid_viewport(Viewport(0, 0, 0, 1))
    assert not is_valid_viewport(None)
