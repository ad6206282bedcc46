"""
DOM-like touch event target.

Lets the gesture listener run against anything that can produce touch
points: tests, the evdev bridge, or a toolkit adapter.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass
class TouchPoint:
    """A single contact point in client (element) coordinates."""
    client_x: float
    client_y: float
    identifier: int = 0


@dataclass
class TouchEvent:
    """
    A touch event as delivered to listeners.

    touches holds the points still on the surface; changed_touches holds the
    points that changed in this event (the lifted point on touchend).
    """
    type: str
    touches: List[TouchPoint] = field(default_factory=list)
    changed_touches: List[TouchPoint] = field(default_factory=list)
    default_prevented: bool = False

    def prevent_default(self):
        """Suppress the platform's default scroll/selection behaviour."""
        self.default_prevented = True


Handler = Callable[[TouchEvent], None]


class TouchElement:
    """Minimal event target with add/remove/dispatch semantics."""

    def __init__(self, name: str = 'element'):
        self.name = name
        self._listeners: Dict[str, List[Handler]] = {}

    def __repr__(self):
        return f"TouchElement({self.name!r})"

    def add_event_listener(self, event_type: str, handler: Handler):
        # Duplicates are kept, as in the DOM for distinct registrations
        self._listeners.setdefault(event_type, []).append(handler)

    def remove_event_listener(self, event_type: str, handler: Handler):
        """Remove one registration of handler; unknown handlers are ignored."""
        handlers = self._listeners.get(event_type, [])
        for i, registered in enumerate(handlers):
            if registered == handler:
                del handlers[i]
                break
        if not handlers:
            self._listeners.pop(event_type, None)

    def dispatch_event(self, event: TouchEvent) -> TouchEvent:
        """Call every handler registered for event.type, in order."""
        for handler in list(self._listeners.get(event.type, [])):
            handler(event)
        return event

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(handlers) for handlers in self._listeners.values())
