import numpy as np

from .constants import POINT_EQUALITY_TOLERANCE


def point_distance(a, b) -> float:
    """Euclidean distance between two point-like values."""
    from .point import ensure

    p1 = ensure(a)
    p2 = ensure(b)
    return float(np.hypot(p2.x - p1.x, p2.y - p1.y))


def is_point_equal(a, b, tolerance: float = POINT_EQUALITY_TOLERANCE) -> bool:
    from .point import ensure

    p1 = ensure(a)
    p2 = ensure(b)
    return abs(p1.x - p2.x) <= tolerance and abs(p1.y - p2.y) <= tolerance
