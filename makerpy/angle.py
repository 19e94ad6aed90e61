"""
Angle conversions used by the point operations.

Angles in degrees are counterclockwise from the positive x axis.
"""

import math

from .constants import DEGREES_PER_REVOLUTION


def to_radians(angle_in_degrees: float) -> float:
    """Convert an angle from degrees to radians"""
    return angle_in_degrees * math.pi / 180.0


def to_degrees(angle_in_radians: float) -> float:
    """Convert an angle from radians to degrees"""
    return angle_in_radians * 180.0 / math.pi


def no_revolutions(angle_in_degrees: float) -> float:
    """Reduce an angle to the range [0, 360)."""
    revolutions = math.floor(angle_in_degrees / DEGREES_PER_REVOLUTION)
    return angle_in_degrees - DEGREES_PER_REVOLUTION * revolutions


def from_point_to_radians(point, origin=None) -> float:
    """
    Angle of the ray from ``origin`` to ``point``, in radians.

    Both arguments may be point-like; a missing origin means 0,0.
    The result lies in (-pi, pi]. A point on the origin yields 0.
    """
    from .point import ensure

    p = ensure(point)
    o = ensure(origin)
    return math.atan2(p.y - o.y, p.x - o.x)
