"""
Touch Gestures Package
Single-touch tap, long-press and swipe recognition for chat UI elements.
"""

from .config.settings import GestureOptions, TouchConfig
from .core.element import TouchElement, TouchEvent, TouchPoint
from .core.listener import GestureListener
from .gestures.gesture_detector import GestureDetector
from .gestures.presets import (
    create_conversation_gestures,
    create_message_gestures,
    create_sidebar_gestures,
)

__version__ = "1.0.0"
__all__ = [
    "GestureListener",
    "GestureDetector",
    "GestureOptions",
    "TouchConfig",
    "TouchElement",
    "TouchEvent",
    "TouchPoint",
    "create_message_gestures",
    "create_conversation_gestures",
    "create_sidebar_gestures",
]
