"""
Gesture detection and classification system.

This module provides the single-touch classifier. Ready-made bindings for
message, conversation and sidebar elements live in gestures.presets.
"""

from .gesture_detector import GestureDetector

__all__ = [
    'GestureDetector'
]
