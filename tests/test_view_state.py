"""
Unit tests for ViewState and ViewportTuning.
"""
import math

import pytest

from custom_types import ContentPoint, ScreenPoint
from enums import GestureState
from view_state import ViewState, ViewportTuning


def test_init_defaults():
    vs = ViewState()
    assert vs.scale == 1.0
    assert vs.translate_x == 0.0
    assert vs.translate_y == 0.0
    assert vs.gesture == GestureState.IDLE
    assert not vs.pan_active
    assert not vs.pinch_active
    assert vs.pan_anchor is None
    assert vs.pinch_last_distance == 0.0
    assert vs.interactive_hit is False


def test_pan_and_pinch_are_mutually_exclusive():
    vs = ViewState()
    vs.begin_pan(ScreenPoint(10, 20))
    assert vs.pan_active and not vs.pinch_active
    assert vs.pan_anchor == ScreenPoint(10, 20)

    vs.begin_pinch(50.0, ContentPoint(3, 4))
    assert vs.pinch_active and not vs.pan_active
    assert vs.pan_anchor is None
    assert vs.pinch_last_distance == 50.0
    assert vs.pinch_center == ContentPoint(3, 4)

    vs.begin_pan(ScreenPoint(1, 1))
    assert vs.pan_active and not vs.pinch_active
    assert vs.pinch_last_distance == 0.0
    assert vs.pinch_center is None


def test_end_pan_does_not_end_pinch():
    vs = ViewState()
    vs.begin_pinch(40.0, ContentPoint(0, 0))
    vs.end_pan()
    assert vs.pinch_active
    vs.end_pinch()
    assert vs.gesture == GestureState.IDLE
    assert vs.pinch_last_distance == 0.0
    # Idempotent
    vs.end_pinch()
    vs.end_pan()
    assert vs.gesture == GestureState.IDLE


@pytest.mark.parametrize("tx,ty,scale,expected", [
    (0.0, -655.0, 1.0, "translate(0 -655) scale(1)"),
    (-0.0, 0.0, 1.0, "translate(0 0) scale(1)"),
    (12.5, -3.25, 2.0, "translate(12.5 -3.25) scale(2)"),
    (0.0, 0.0, math.exp(0.5), f"translate(0 0) scale({math.exp(0.5)!r})"),
])
def test_transform_string(tx, ty, scale, expected):
    vs = ViewState(scale=scale, translate_x=tx, translate_y=ty)
    assert vs.transform == expected


def test_as_dict():
    vs = ViewState(scale=2.0, translate_x=-10, translate_y=5)
    assert vs.as_dict() == {"translate_x": -10.0, "translate_y": 5.0, "scale": 2.0}


def test_tuning_from_config_partial():
    tuning = ViewportTuning.from_config({"maxScale": 4, "borderMargin": 16})
    assert tuning.max_scale == 4.0
    assert tuning.border_margin == 16.0
    assert tuning.min_scale == 0.8
    assert tuning.wheel_zoom_rate == 0.005
    assert tuning.pinch_zoom_rate == 0.004
    assert tuning.pan_sensitivity == 2.0


@pytest.mark.parametrize("kwargs", [
    {"min_scale": 2.0, "max_scale": 1.0},
    {"min_scale": 0.0},
    {"border_margin": -1.0},
    {"border_margin": math.nan},
    {"border_margin": math.inf},
    {"max_scale": math.inf},
    {"wheel_zoom_rate": -0.005},
    {"wheel_zoom_rate": math.nan},
    {"pinch_zoom_rate": math.inf},
    {"pan_sensitivity": math.nan},
])
def test_tuning_rejects_invalid(kwargs):
    with pytest.raises(ValueError):
        ViewportTuning(**kwargs)
