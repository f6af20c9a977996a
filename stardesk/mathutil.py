"""Angle conversions and small numeric helpers."""

import math

PI = math.pi
TWO_PI = PI * 2.0
HALF_PI = PI * 0.5
DEGREE2RADIANS = PI / 180.0
HOURS2RADIANS = PI / 12.0


def to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEGREE2RADIANS


def to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad / DEGREE2RADIANS


def to_radian_hours(hours: float) -> float:
    """Convert an hour angle (0..24) to radians."""
    return hours * HOURS2RADIANS


def to_hours_radian(rad: float) -> float:
    """Convert radians to an hour angle (0..24)."""
    return rad / HOURS2RADIANS


def mix(x: float, y: float, a: float, limit: bool = True) -> float:
    """Interpolate between x (a == 0) and y (a == 1).

    With ``limit`` the result is clamped to the range spanned by x and y,
    even if ``a`` lies outside 0..1.
    """
    r = x * (1 - a) + y * a
    if limit:
        r = max(r, min(x, y))
        r = min(r, max(x, y))
    return r