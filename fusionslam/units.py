"""Angle unit conversions."""

import math

__all__ = ["degree_to_radian", "radian_to_degree"]


def degree_to_radian(deg):
    """Convert an angle in degrees to radians."""
    return deg * math.pi / 180.0


def radian_to_degree(rad):
    """Convert an angle in radians to degrees."""
    return rad * 180.0 / math.pi