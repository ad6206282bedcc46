#!/usr/bin/env python3
"""
Touch Gestures - Main Entry Point
Logs taps, long presses and swipes made on the first touchscreen found.
"""

import argparse
import logging
import time

from touch_gestures import GestureListener, GestureOptions, TouchConfig, TouchElement
from touch_gestures.device.touchscreen_source import TouchscreenSource
from touch_gestures.utils.logger import TouchLogger


def parse_display(value):
    """Parse WIDTHxHEIGHT, e.g. 1920x1080."""
    try:
        width, height = (int(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    return width, height


def main(argv=None):
    """Main entry point for the gesture listener."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--display', type=parse_display, default=TouchConfig.DEFAULT_DISPLAY_SIZE,
                        help="display size the touchscreen covers, WIDTHxHEIGHT")
    parser.add_argument('--debug-file', help="also write raw gestures to this file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    element = TouchElement('touchscreen')
    touch_logger = TouchLogger(debug_file=args.debug_file)
    listener = GestureListener(GestureOptions(), touch_logger=touch_logger)
    listener.attach(element)

    source = TouchscreenSource(element, display_size=args.display)
    if not source.start():
        print("❌ No touchscreen found")
        return

    print(f"🎯 Ready on {args.display[0]}x{args.display[1]}! Try taps, long presses and swipes.")
    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        source.stop()
        listener.detach(element)
        touch_logger.close()


if __name__ == "__main__":
    main()
