"""
Utilities package for gesture classification.

This package provides the geometry helpers and gesture logging shared by
the detector and the listener.
"""

from .gesture_utils import (
    Point,
    GeometryUtils
)
from .logger import TouchLogger

__all__ = [
    'Point',
    'GeometryUtils',
    'TouchLogger'
]
