"""Helpers for building synthetic touch sequences."""

from touch_gestures import TouchEvent, TouchPoint


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class CallRecorder(list):
    """Records callback invocations by name."""

    def make(self, name):
        return lambda: self.append(name)


def start_event(x, y):
    return TouchEvent('touchstart', touches=[TouchPoint(x, y)], changed_touches=[TouchPoint(x, y)])


def move_event(x, y):
    return TouchEvent('touchmove', touches=[TouchPoint(x, y)], changed_touches=[TouchPoint(x, y)])


def end_event(x, y):
    return TouchEvent('touchend', touches=[], changed_touches=[TouchPoint(x, y)])


def perform_touch(element, clock, start, end, duration):
    """Dispatch a full start/end sequence taking duration ms."""
    element.dispatch_event(start_event(*start))
    clock.advance(duration)
    element.dispatch_event(end_event(*end))
