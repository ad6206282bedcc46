"""Tests for gesture log formatting."""

import logging

from touch_gestures.utils.logger import TouchLogger


def test_format_lines():
    touch_logger = TouchLogger()
    assert touch_logger.format_gesture({'type': 'tap', 'distance': 3.2, 'duration': 90}) == "👆 TAP [3px, 90ms]"
    assert touch_logger.format_gesture(
        {'type': 'swipe', 'direction': 'left', 'distance': 120.7, 'duration': 150}
    ) == "👋 SWIPE left [120px, 150ms]"
    assert "LONG PRESS" in touch_logger.format_gesture({'type': 'long_press', 'distance': 0, 'duration': 800})


def test_label_prefix():
    touch_logger = TouchLogger(label='sidebar')
    assert touch_logger.format_gesture({'type': 'tap'}).startswith("[sidebar] ")


def test_debug_file_receives_gestures(tmp_path, caplog):
    path = tmp_path / "gestures.log"
    touch_logger = TouchLogger(debug_file=str(path))

    with caplog.at_level(logging.INFO, logger='touch_gestures.utils.logger'):
        touch_logger.log_gesture({'type': 'tap', 'distance': 0, 'duration': 50})
    touch_logger.close()

    contents = path.read_text()
    assert contents.startswith("Debug logging started")
    assert "'type': 'tap'" in contents
    assert "TAP" in caplog.text


def test_unwritable_debug_file_is_reported(tmp_path, caplog):
    missing = tmp_path / "missing" / "gestures.log"
    with caplog.at_level(logging.WARNING, logger='touch_gestures.utils.logger'):
        touch_logger = TouchLogger(debug_file=str(missing))

    assert touch_logger.debug_file is None
    assert "Could not open debug file" in caplog.text
    touch_logger.log_gesture({'type': 'tap'})
    touch_logger.close()
