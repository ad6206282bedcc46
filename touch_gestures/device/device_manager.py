"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging

logger = logging.getLogger(__name__)


class DeviceManager:
    """Finds the first multitouch touchscreen exposed through evdev."""

    def __init__(self, device_path=None):
        self.device_path = device_path
        self.device = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

        # Raw digitizer ranges, inclusive
        self.x_range = (0, self.screen_width - 1)
        self.y_range = (0, self.screen_height - 1)

    def find_device(self):
        """Find and configure the touchscreen device."""
        paths = [self.device_path] if self.device_path else evdev.list_devices()

        for path in paths:
            try:
                device = evdev.InputDevice(path)
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
                continue

            abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
            abs_info = {code: info for code, info in abs_caps}

            # Only multitouch (slot protocol B) devices are usable
            if ecodes.ABS_MT_SLOT not in abs_info:
                device.close()
                continue

            if ecodes.ABS_MT_POSITION_X in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_X]
                self.x_range = (info.min, info.max)
                self.screen_width = info.max - info.min + 1
            if ecodes.ABS_MT_POSITION_Y in abs_info:
                info = abs_info[ecodes.ABS_MT_POSITION_Y]
                self.y_range = (info.min, info.max)
                self.screen_height = info.max - info.min + 1

            self.device = device
            logger.info(f"Found touchscreen: {device.name}")
            logger.info(f"Digitizer range: {self.x_range} x {self.y_range}")
            return device

        logger.error("No touchscreen device found")
        return None

    def get_device_info(self):
        """Get device and digitizer information."""
        return {
            'device': self.device,
            'name': self.device.name if self.device else None,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
            'x_range': self.x_range,
            'y_range': self.y_range
        }

    def close(self):
        if self.device:
            self.device.close()
            self.device = None
