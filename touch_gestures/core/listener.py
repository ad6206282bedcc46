"""
Gesture listener that binds touch handlers to elements and dispatches
classified gestures to callbacks.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ..config.settings import GestureOptions, TouchConfig
from ..gestures.gesture_detector import GestureDetector
from ..utils.gesture_utils import Point
from ..utils.logger import TouchLogger
from .element import TouchElement, TouchEvent

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000


@dataclass
class GestureSample:
    """Tracking state for the touch currently in progress on one element."""
    start_position: Point = field(default_factory=lambda: Point(0, 0))
    start_time: float = 0.0
    is_tracking: bool = False

    def reset(self):
        self.is_tracking = False


@dataclass
class Attachment:
    """Everything bound to one element between attach and detach."""
    options: GestureOptions
    detector: GestureDetector
    sample: GestureSample = field(default_factory=GestureSample)
    handlers: Dict[str, Callable[[TouchEvent], None]] = field(default_factory=dict)


class GestureListener:
    """Turns single-touch sequences on attached elements into gestures."""

    def __init__(self, options: Optional[GestureOptions] = None,
                 clock: Optional[Callable[[], float]] = None,
                 touch_logger: Optional[TouchLogger] = None):
        self.options = options or GestureOptions()
        self.clock = clock or monotonic_ms
        self.touch_logger = touch_logger

        self._attachments: Dict[TouchElement, Attachment] = {}
        self._event_methods = {
            TouchConfig.TOUCH_START: self._handle_touch_start,
            TouchConfig.TOUCH_MOVE: self._handle_touch_move,
            TouchConfig.TOUCH_END: self._handle_touch_end,
            TouchConfig.TOUCH_CANCEL: self._handle_touch_cancel,
        }

    def attach(self, element: TouchElement, options: Optional[GestureOptions] = None):
        """
        Register touch handlers on an element.

        Args:
            element: Target to listen on
            options: Thresholds and callbacks for this element only;
                the listener's own options when omitted
        """
        if element in self._attachments:
            logger.warning(f"{element!r} is already attached; detach it before re-attaching")
            return

        options = options or self.options
        attachment = Attachment(options, GestureDetector(
            threshold=options.threshold,
            min_swipe_distance=options.min_swipe_distance
        ))
        # Handlers are stored so detach removes the same references
        for event_type in TouchConfig.GESTURE_EVENTS:
            handler = self._bind(self._event_methods[event_type], attachment)
            attachment.handlers[event_type] = handler
            element.add_event_listener(event_type, handler)

        self._attachments[element] = attachment
        logger.debug(f"Attached to {element!r}: {options.registered_gestures()}")

    @staticmethod
    def _bind(method, attachment: Attachment) -> Callable[[TouchEvent], None]:
        return lambda event: method(attachment, event)

    def detach(self, element: TouchElement):
        """Unregister the handlers attach added. Unknown elements are ignored."""
        attachment = self._attachments.pop(element, None)
        if attachment is None:
            return

        for event_type, handler in attachment.handlers.items():
            element.remove_event_listener(event_type, handler)
        logger.debug(f"Detached from {element!r}")

    def is_attached(self, element: TouchElement) -> bool:
        return element in self._attachments

    def sample_for(self, element: TouchElement) -> Optional[GestureSample]:
        attachment = self._attachments.get(element)
        return attachment.sample if attachment else None

    def _handle_touch_start(self, attachment: Attachment, event: TouchEvent):
        """Start tracking a single-finger touch."""
        if len(event.touches) != 1:
            return

        sample = attachment.sample
        touch = event.touches[0]
        sample.start_position = Point(touch.client_x, touch.client_y)
        sample.start_time = self.clock()
        sample.is_tracking = True

    def _handle_touch_move(self, attachment: Attachment, event: TouchEvent):
        """Suppress scrolling once the finger has clearly moved."""
        sample = attachment.sample
        if not sample.is_tracking or len(event.touches) != 1:
            return

        touch = event.touches[0]
        delta_x, delta_y = sample.start_position.delta_to(Point(touch.client_x, touch.client_y))
        if attachment.detector.should_lock_scroll(delta_x, delta_y):
            event.prevent_default()

    def _handle_touch_end(self, attachment: Attachment, event: TouchEvent) -> Optional[Dict[str, Any]]:
        """Classify the finished touch and invoke the matching callback."""
        sample = attachment.sample
        if not sample.is_tracking:
            return None

        sample.reset()
        points = event.changed_touches or event.touches
        if not points:
            return None

        touch = points[0]
        delta_x, delta_y = sample.start_position.delta_to(Point(touch.client_x, touch.client_y))
        delta_time = self.clock() - sample.start_time

        gesture = attachment.detector.classify(delta_x, delta_y, delta_time)
        self._dispatch(attachment, gesture)
        return gesture

    def _handle_touch_cancel(self, attachment: Attachment, event: TouchEvent):
        attachment.sample.reset()

    def _dispatch(self, attachment: Attachment, gesture: Dict[str, Any]):
        name = attachment.detector.gesture_name(gesture)
        if name is None:
            return

        logger.debug(f"Gesture: {name} ({gesture['distance']:.1f}px, {gesture['duration']:.0f}ms)")
        if self.touch_logger:
            self.touch_logger.log_gesture(gesture)

        callback = attachment.options.callback_for(name)
        if callback is not None:
            callback()
