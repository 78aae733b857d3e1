"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def sign(v: float) -> float:
    """Return -1.0, 0.0 or 1.0."""
    if v > 0:
        return 1.0
    if v < 0:
        return -1.0
    return 0.0


def round_half_up(v: float) -> int:
    """Round to nearest integer with halves rounding up.

    Python's round() uses banker's rounding, which would make 2.5 settle on 2.
    """
    return int(math.floor(v + 0.5))


def rotate_point(x: float, y: float, angle: float) -> tuple[float, float]:
    """Rotate (x, y) counter-clockwise by angle radians around the origin."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (x * c - y * s, x * s + y * c)


def point_in_rect(px: float, py: float, x: float, y: float, w: float, h: float) -> bool:
    """Check if point lies inside the axis-aligned rectangle (edges inclusive)."""
    return x <= px <= x + w and y <= py <= y + h


def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance between two points (avoids sqrt for comparisons)."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy
