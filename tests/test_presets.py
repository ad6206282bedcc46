"""Tests for message, conversation and sidebar gesture bindings."""

from touch_gestures import (
    GestureListener,
    create_conversation_gestures,
    create_message_gestures,
    create_sidebar_gestures,
)
from touch_helpers import perform_touch

SWIPE_LEFT = ((0, 0), (-100, 0), 150)
SWIPE_RIGHT = ((0, 0), (100, 0), 150)
SWIPE_UP = ((0, 0), (0, -100), 150)
LONG_PRESS = ((0, 0), (0, 0), 700)
TAP = ((0, 0), (0, 0), 100)


def run(element, clock, *touches):
    for start, end, duration in touches:
        perform_touch(element, clock, start, end, duration)


def test_message_gestures(element, clock, calls):
    listener = create_message_gestures(
        'message-1',
        on_delete=calls.make('delete'),
        on_reply=calls.make('reply'),
        on_copy=calls.make('copy'),
        clock=clock
    )
    assert isinstance(listener, GestureListener)
    listener.attach(element)

    run(element, clock, SWIPE_LEFT, SWIPE_RIGHT, LONG_PRESS, TAP, SWIPE_UP)
    assert calls == ['delete', 'reply', 'copy']


def test_message_gestures_without_delete(element, clock, calls):
    listener = create_message_gestures('message-2', on_reply=calls.make('reply'),
                                       on_copy=calls.make('copy'), clock=clock)
    listener.attach(element)

    run(element, clock, SWIPE_LEFT, LONG_PRESS)
    assert calls == ['copy']


def test_conversation_gestures(element, clock, calls):
    listener = create_conversation_gestures('conv-9', on_delete=calls.make('delete'),
                                            on_pin=calls.make('pin'), clock=clock)
    listener.attach(element)

    run(element, clock, SWIPE_RIGHT, LONG_PRESS, SWIPE_LEFT)
    assert calls == ['pin', 'delete']


def test_sidebar_gestures(element, clock, calls):
    listener = create_sidebar_gestures(on_toggle=calls.make('toggle'), clock=clock)
    listener.attach(element)

    run(element, clock, SWIPE_LEFT, SWIPE_RIGHT, TAP)
    assert calls == ['toggle']


def test_presets_accept_thresholds(element, clock, calls):
    listener = create_sidebar_gestures(on_toggle=calls.make('toggle'), clock=clock,
                                       min_swipe_distance=150)
    listener.attach(element)

    run(element, clock, SWIPE_RIGHT, ((0, 0), (200, 0), 150))
    assert calls == ['toggle']


def test_presets_create_independent_listeners(clock, calls):
    first = create_sidebar_gestures(on_toggle=calls.make('toggle'), clock=clock)
    second = create_sidebar_gestures(on_toggle=calls.make('toggle'), clock=clock)
    assert first is not second
