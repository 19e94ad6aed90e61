"""
2D path entities.

Paths are plain data holders; the point operations read them and never
modify them. Point fields accept any point-like value and are coerced with
:func:`makerpy.point.ensure` on construction.
"""

from .cad_types import Point, PointLike
from .constants import PATH_TYPE_ARC, PATH_TYPE_CIRCLE, PATH_TYPE_LINE
from .point import ensure


class Line:
    """A straight segment from origin to end."""

    path_type = PATH_TYPE_LINE

    def __init__(self, origin: PointLike, end: PointLike):
        self.origin: Point = ensure(origin)
        self.end: Point = ensure(end)


class Circle:
    """A full circle around origin."""

    path_type = PATH_TYPE_CIRCLE

    def __init__(self, origin: PointLike, radius: float):
        self.origin: Point = ensure(origin)
        self.radius = radius


class Arc:
    """A circular arc around origin, with angles in degrees."""

    path_type = PATH_TYPE_ARC

    def __init__(
        self,
        origin: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
    ):
        self.origin: Point = ensure(origin)
        self.radius = radius
        self.start_angle = start_angle  # degrees
        self.end_angle = end_angle  # degrees
