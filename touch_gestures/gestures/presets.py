"""
Ready-made gesture bindings for chat UI elements.
"""

import logging
from typing import Callable, Optional

from ..config.settings import GestureOptions
from ..core.listener import GestureListener

logger = logging.getLogger(__name__)

Action = Optional[Callable[[], None]]

_THRESHOLD_KEYS = ('threshold', 'min_swipe_distance')


def _build_listener(name: str, callbacks: dict, **kwargs) -> GestureListener:
    """Create a listener from callbacks plus pass-through keyword arguments."""
    option_kwargs = {key: kwargs.pop(key) for key in _THRESHOLD_KEYS if key in kwargs}
    options = GestureOptions(**option_kwargs, **callbacks)
    logger.debug(f"Created {name} gestures: {options.registered_gestures()}")
    return GestureListener(options, **kwargs)


def create_message_gestures(message_id: str, on_delete: Action = None,
                            on_reply: Action = None, on_copy: Action = None,
                            **kwargs) -> GestureListener:
    """Swipe left to delete, swipe right to reply, long press to copy."""
    return _build_listener(f"message {message_id}", {
        'on_swipe_left': on_delete,
        'on_swipe_right': on_reply,
        'on_long_press': on_copy,
    }, **kwargs)


def create_conversation_gestures(conversation_id: str, on_delete: Action = None,
                                 on_pin: Action = None, **kwargs) -> GestureListener:
    """Swipe left to delete a conversation, swipe right to pin it."""
    return _build_listener(f"conversation {conversation_id}", {
        'on_swipe_left': on_delete,
        'on_swipe_right': on_pin,
    }, **kwargs)


def create_sidebar_gestures(on_toggle: Action = None, **kwargs) -> GestureListener:
    """Swipe right to toggle the sidebar."""
    return _build_listener("sidebar", {
        'on_swipe_right': on_toggle,
    }, **kwargs)
