"""
Gesture detection and classification system.
"""

import logging
from typing import Any, Dict, Optional

from ..config.settings import TouchConfig
from ..utils.gesture_utils import GeometryUtils

logger = logging.getLogger(__name__)


class GestureDetector:
    """Classifies a completed single-touch interaction."""

    def __init__(self, threshold: float = TouchConfig.DEFAULT_THRESHOLD,
                 min_swipe_distance: float = TouchConfig.MIN_SWIPE_DISTANCE):
        self.config = TouchConfig()
        self.threshold = threshold
        self.min_swipe_distance = min_swipe_distance

    def classify(self, delta_x: float, delta_y: float, delta_time: float) -> Dict[str, Any]:
        """
        Classify a touch from its total displacement and duration.

        Args:
            delta_x: Horizontal travel from touch-start to touch-end (px)
            delta_y: Vertical travel, positive downwards (px)
            delta_time: Time between touch-start and touch-end (ms)

        Returns:
            Gesture dict with 'type' one of 'tap', 'long_press', 'swipe' or
            'none'; swipes also carry 'direction'.
        """
        distance = GeometryUtils.magnitude(delta_x, delta_y)
        gesture = {
            'type': 'none',
            'direction': None,
            'distance': distance,
            'duration': delta_time,
            'delta': (delta_x, delta_y)
        }

        # Check for tap
        if distance < self.threshold and delta_time < self.config.TAP_MAX_DURATION:
            gesture['type'] = 'tap'
            return gesture

        # Check for long press; 300-500ms at short travel stays unclassified
        if distance < self.threshold and delta_time > self.config.LONG_PRESS_MIN_DURATION:
            gesture['type'] = 'long_press'
            return gesture

        # Check for swipe
        if distance > self.min_swipe_distance:
            gesture['type'] = 'swipe'
            gesture['direction'] = GeometryUtils.dominant_direction(delta_x, delta_y)
            return gesture

        logger.debug(f"Unclassified touch: {distance:.1f}px in {delta_time:.0f}ms")
        return gesture

    @staticmethod
    def gesture_name(gesture: Dict[str, Any]) -> Optional[str]:
        """Map a gesture dict to its callback name, e.g. 'swipe_left'."""
        gesture_type = gesture.get('type')
        if gesture_type == 'swipe':
            return f"swipe_{gesture['direction']}"
        if gesture_type in ('tap', 'long_press'):
            return gesture_type
        return None

    def should_lock_scroll(self, delta_x: float, delta_y: float) -> bool:
        """Whether a move is large enough to suppress default scrolling."""
        lock = self.config.SCROLL_LOCK_DISTANCE
        return abs(delta_x) > lock or abs(delta_y) > lock
