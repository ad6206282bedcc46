"""
Logging utilities for touch events and gestures.
"""

import datetime
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class TouchLogger:
    """Handles logging of classified gestures."""

    def __init__(self, debug_file: Optional[str] = None, label: str = ''):
        self.label = label
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file {debug_file}: {e}")
                self.debug_file = None

    def format_gesture(self, gesture: Dict[str, Any]) -> str:
        """Build the one-line summary for a gesture."""
        gesture_type = gesture.get('type', 'unknown')
        duration = gesture.get('duration', 0)
        distance = gesture.get('distance', 0)
        prefix = f"[{self.label}] " if self.label else ""

        if gesture_type == 'tap':
            return f"{prefix}👆 TAP [{int(distance)}px, {duration:.0f}ms]"
        if gesture_type == 'long_press':
            return f"{prefix}🤚 LONG PRESS [{int(distance)}px, {duration:.0f}ms]"
        if gesture_type == 'swipe':
            direction = gesture.get('direction', 'unknown')
            return f"{prefix}👋 SWIPE {direction} [{int(distance)}px, {duration:.0f}ms]"
        return f"{prefix}🤷 NO GESTURE [{int(distance)}px, {duration:.0f}ms]"

    def log_gesture(self, gesture: Dict[str, Any]):
        """Log a classified gesture."""
        logger.info(self.format_gesture(gesture))

        if self.debug_file:
            timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
            try:
                self.debug_file.write(f"[{timestamp}] {gesture}\n")
                self.debug_file.flush()
            except (OSError, ValueError) as e:
                logger.warning(f"Could not write gesture to debug file: {e}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
