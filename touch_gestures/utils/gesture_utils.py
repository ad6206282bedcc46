"""
Shared geometry helpers for gesture classification.
"""

import math
from typing import Tuple


class Point:
    """Represents a 2D screen position in pixels."""

    def __init__(self, x: float, y: float):
        try:
            self.x = float(x)
            self.y = float(y)
        except (TypeError, ValueError):
            raise ValueError(f"Point coordinates must be numeric, got ({x!r}, {y!r})")

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def delta_to(self, other: 'Point') -> Tuple[float, float]:
        """Displacement from this point to another."""
        return other.x - self.x, other.y - self.y


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def magnitude(dx: float, dy: float) -> float:
        return math.sqrt(dx * dx + dy * dy)

    @staticmethod
    def dominant_direction(dx: float, dy: float) -> str:
        """
        Direction of a displacement along its dominant axis.

        Screen coordinates grow downwards, so a positive dy is 'down'.
        Equal magnitudes resolve to the vertical axis.
        """
        if abs(dx) > abs(dy):
            return "right" if dx > 0 else "left"
        return "down" if dy > 0 else "up"
