"""
Configuration settings for the gesture listener.
"""

import dataclasses
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional


class TouchConfig:
    """Configuration constants for single-touch gesture recognition."""

    # Timing configurations (in milliseconds)
    TAP_MAX_DURATION = 300
    LONG_PRESS_MIN_DURATION = 500

    # Distance configurations (in pixels)
    DEFAULT_THRESHOLD = 50
    MIN_SWIPE_DISTANCE = 50
    SCROLL_LOCK_DISTANCE = 10

    # Display the touchscreen covers when none is given (width, height)
    DEFAULT_DISPLAY_SIZE = (1920, 1080)

    # Event types registered on attach
    TOUCH_START = 'touchstart'
    TOUCH_MOVE = 'touchmove'
    TOUCH_END = 'touchend'
    TOUCH_CANCEL = 'touchcancel'
    GESTURE_EVENTS = [TOUCH_START, TOUCH_MOVE, TOUCH_END, TOUCH_CANCEL]

    # Gesture names and the option field each one triggers
    GESTURE_CALLBACKS = {
        'tap': 'on_tap',
        'long_press': 'on_long_press',
        'swipe_left': 'on_swipe_left',
        'swipe_right': 'on_swipe_right',
        'swipe_up': 'on_swipe_up',
        'swipe_down': 'on_swipe_down',
    }


Callback = Optional[Callable[[], None]]


@dataclass(frozen=True)
class GestureOptions:
    """Thresholds and optional callbacks for one listener."""

    threshold: float = TouchConfig.DEFAULT_THRESHOLD
    min_swipe_distance: float = TouchConfig.MIN_SWIPE_DISTANCE
    on_tap: Callback = None
    on_long_press: Callback = None
    on_swipe_left: Callback = None
    on_swipe_right: Callback = None
    on_swipe_up: Callback = None
    on_swipe_down: Callback = None

    def __post_init__(self):
        defaults = {
            'threshold': TouchConfig.DEFAULT_THRESHOLD,
            'min_swipe_distance': TouchConfig.MIN_SWIPE_DISTANCE,
        }
        for name, default in defaults.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{name} must be numeric, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
            if value == 0:
                # Zero means "unset" and takes the default
                object.__setattr__(self, name, default)

        for field_name in TouchConfig.GESTURE_CALLBACKS.values():
            callback = getattr(self, field_name)
            if callback is not None and not callable(callback):
                raise ValueError(f"{field_name} must be callable")

    def callback_for(self, gesture_name: Optional[str]) -> Callback:
        """Return the callback registered for a gesture name, if any."""
        field_name = TouchConfig.GESTURE_CALLBACKS.get(gesture_name)
        if field_name is None:
            return None
        return getattr(self, field_name)

    def registered_gestures(self):
        """Names of the gestures that have a callback."""
        return [
            name for name, field_name in TouchConfig.GESTURE_CALLBACKS.items()
            if getattr(self, field_name) is not None
        ]

    def replace(self, **changes) -> 'GestureOptions':
        return dataclasses.replace(self, **changes)
