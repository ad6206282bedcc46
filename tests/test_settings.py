"""Tests for gesture options validation."""

import dataclasses

import pytest

from touch_gestures import GestureListener, GestureOptions, TouchConfig
from touch_helpers import perform_touch


def test_defaults_match_config():
    options = GestureOptions()
    assert options.threshold == TouchConfig.DEFAULT_THRESHOLD == 50
    assert options.min_swipe_distance == TouchConfig.MIN_SWIPE_DISTANCE == 50
    assert options.registered_gestures() == []


@pytest.mark.parametrize("kwargs", [
    {'threshold': -1},
    {'min_swipe_distance': -0.5},
    {'threshold': 'wide'},
    {'min_swipe_distance': None},
    {'threshold': True},
])
def test_invalid_thresholds_raise(kwargs):
    with pytest.raises(ValueError):
        GestureOptions(**kwargs)


def test_non_callable_callback_raises():
    with pytest.raises(ValueError, match="on_tap"):
        GestureOptions(on_tap="reply")


def test_callback_lookup():
    def reply():
        pass

    options = GestureOptions(on_swipe_right=reply)
    assert options.callback_for('swipe_right') is reply
    assert options.callback_for('swipe_left') is None
    assert options.callback_for(None) is None
    assert options.callback_for('pinch') is None
    assert options.registered_gestures() == ['swipe_right']


def test_options_are_immutable():
    options = GestureOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.threshold = 10

    changed = options.replace(threshold=10)
    assert changed.threshold == 10
    assert options.threshold == 50


def test_replace_validates():
    with pytest.raises(ValueError):
        GestureOptions().replace(min_swipe_distance=-5)


@pytest.mark.parametrize("name, default", [
    ('threshold', TouchConfig.DEFAULT_THRESHOLD),
    ('min_swipe_distance', TouchConfig.MIN_SWIPE_DISTANCE),
])
def test_zero_threshold_takes_default(name, default):
    options = GestureOptions(**{name: 0})
    assert getattr(options, name) == default


def test_zero_threshold_still_recognises_taps(element, clock, calls):
    listener = GestureListener(GestureOptions(threshold=0, on_tap=calls.make('tap')), clock=clock)
    listener.attach(element)

    perform_touch(element, clock, (0, 0), (3, 4), 100)
    assert calls == ['tap']
