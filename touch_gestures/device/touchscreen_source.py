"""
Bridge from evdev multitouch events to touch events on a TouchElement.
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from evdev import ecodes

from ..config.settings import TouchConfig
from ..core.element import TouchElement, TouchEvent, TouchPoint
from .device_manager import DeviceManager

logger = logging.getLogger(__name__)


class TouchscreenSource:
    """Reads a touchscreen and dispatches touchstart/move/end on an element."""

    def __init__(self, element: TouchElement, device_manager: Optional[DeviceManager] = None,
                 display_size: Optional[Tuple[int, int]] = None):
        """
        Args:
            element: Target that receives the touch events
            device_manager: Touchscreen lookup, a default DeviceManager if omitted
            display_size: (width, height) in pixels that the digitizer covers;
                defaults to the digitizer's own resolution
        """
        self.element = element
        self.device_manager = device_manager or DeviceManager()
        self.display_size = display_size

        # State management
        self.running = False
        self.current_slot = 0
        self.slots: Dict[int, Dict[str, float]] = {}  # slot -> {'id', 'x', 'y'} in pixels

        # Changes collected until the next SYN_REPORT
        self._started: List[int] = []
        self._ended: Dict[int, TouchPoint] = {}
        self._moved = False

        # axis -> (raw min, raw span, display pixels)
        self._axes: Dict[str, Tuple[float, float, float]] = {}
        self._configure_axes()

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def _configure_axes(self):
        """Derive raw-to-pixel scaling from the digitizer range."""
        info = self.device_manager.get_device_info()
        width, height = self.display_size or (info['screen_width'], info['screen_height'])

        for axis, (low, high), pixels in (('x', info['x_range'], width), ('y', info['y_range'], height)):
            self._axes[axis] = (low, high - low + 1, pixels)
        logger.debug(f"Mapping digitizer {info['x_range']} x {info['y_range']} to {width}x{height}px")

    def to_pixels(self, axis: str, value: int) -> float:
        """Map a raw digitizer coordinate to display pixels."""
        low, span, pixels = self._axes[axis]
        return (value - low) * pixels / span

    def start(self) -> bool:
        """Find the touchscreen and start the reader thread."""
        device = self.device_manager.find_device()
        if not device:
            return False

        self._configure_axes()
        self.running = True
        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the reader thread."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.device_manager.close()

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self.process_batch(event_batch)
                    event_batch = []
        except OSError as e:
            if self.running:
                logger.error(f"Error in event loop: {e}")

    def process_batch(self, event_batch) -> List[TouchEvent]:
        """Apply one SYN_REPORT frame and dispatch the resulting touch events."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
        return self._flush()

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position('x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position('y', ev.value)

    def _handle_tracking_id(self, value: int):
        slot = self.current_slot

        if value == -1:
            # Finger lifted
            data = self.slots.pop(slot, None)
            if data is None:
                return
            if slot in self._started:
                # Placed and lifted within one frame; never reported
                self._started.remove(slot)
                return
            self._ended[slot] = self._point(data)
        else:
            # Finger placed, position arrives in the same frame
            previous = self.slots.get(slot, {})
            self.slots[slot] = {'id': value, 'x': previous.get('x', 0), 'y': previous.get('y', 0)}
            if slot not in self._started:
                self._started.append(slot)

    def _handle_position(self, axis: str, value: int):
        slot = self.current_slot
        if slot not in self.slots:
            return
        self.slots[slot][axis] = self.to_pixels(axis, value)
        if slot not in self._started:
            self._moved = True

    @staticmethod
    def _point(data) -> TouchPoint:
        return TouchPoint(data['x'], data['y'], int(data['id']))

    def _touch_list(self, exclude=()) -> List[TouchPoint]:
        return [
            self._point(data)
            for slot, data in sorted(self.slots.items())
            if slot not in exclude
        ]

    def _flush(self) -> List[TouchEvent]:
        events = []

        # Fingers changing in the same frame share one event, as in the DOM
        if self._ended:
            events.append(TouchEvent(
                TouchConfig.TOUCH_END,
                touches=self._touch_list(exclude=self._started),
                changed_touches=[point for _, point in sorted(self._ended.items())]
            ))

        if self._started:
            events.append(TouchEvent(
                TouchConfig.TOUCH_START,
                touches=self._touch_list(),
                changed_touches=[
                    self._point(self.slots[slot])
                    for slot in self._started
                ]
            ))

        if self._moved and self.slots:
            events.append(TouchEvent(TouchConfig.TOUCH_MOVE, touches=self._touch_list()))

        self._started = []
        self._ended = {}
        self._moved = False

        for event in events:
            self.element.dispatch_event(event)
        return events
