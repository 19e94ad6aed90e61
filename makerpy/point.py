"""
Point module - Stateless operations on 2D points.

Every function here returns a new Point and leaves its inputs untouched, with
one exception: ``ensure`` returns a Point it was given by reference. Callers
that need to mutate a value obtained through ``ensure`` and do not own it
must ``clone`` it first.

Point-like inputs are accepted wherever a function coerces through ``ensure``:
a Point (or anything with real ``x``/``y`` attributes), a mapping with real
``"x"``/``"y"`` keys such as ``Point.to_json()`` output, or a sequence/array of
at least two numbers.
"""

import logging
import math
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, List

import numpy as np

from . import angle, measure
from .cad_types import Point, PointLike, is_point, is_real

if TYPE_CHECKING:
    from .primitives import Arc

logger = logging.getLogger(__name__)


def zero() -> Point:
    """A point at 0,0 coordinates."""
    return Point(0.0, 0.0)


def _is_empty(item: Any) -> bool:
    if item is None:
        return True
    if isinstance(item, np.ndarray):
        return item.size == 0
    return not item


def _is_coordinate_mapping(item: Any) -> bool:
    return (
        isinstance(item, Mapping)
        and is_real(item.get("x"))
        and is_real(item.get("y"))
    )


def _is_coordinate_sequence(item: Any) -> bool:
    if isinstance(item, (str, bytes)):
        return False
    if isinstance(item, np.ndarray):
        if item.ndim < 1:
            return False
    elif not isinstance(item, Sequence):
        return False
    return len(item) > 1 and is_real(item[0]) and is_real(item[1])


def ensure(item: PointLike = None, *args) -> Point:
    """
    Coerce a point-like value into a Point.

    Args:
        item: A Point, a ``{"x": ..., "y": ...}`` mapping, a sequence of at
            least two numbers, or anything else. A 0-d numpy array counts
            as the scalar it holds.
        *args: Only their presence matters; when given, a numeric ``item``
            is broadcast to both coordinates.

    Returns:
        - ``zero()`` when ``item`` is missing or falsy
        - ``item`` itself when it already has real ``x`` and ``y``
        - a new Point from the ``"x"``/``"y"`` keys of a mapping
        - a new Point from the first two elements of a sequence
        - a new Point ``(item, item)`` when extra arguments were supplied
        - ``zero()`` otherwise
    """
    if isinstance(item, np.ndarray) and item.ndim == 0:
        item = item.item()

    if _is_empty(item):
        return zero()

    if is_point(item):
        return item

    if _is_coordinate_mapping(item):
        return Point(item["x"], item["y"])

    if _is_coordinate_sequence(item):
        return Point(item[0], item[1])

    if args and is_real(item):
        return Point(item, item)

    logger.debug(f"Could not coerce {item!r} into a point, using origin")
    return zero()


def clone(point: Point) -> Point:
    """Copy a point into a new point. The input is not coerced."""
    return Point(point.x, point.y)


def add(a: PointLike, b: PointLike, subtract: bool = False) -> Point:
    """
    Add two points together and return the result as a new point.

    Args:
        a: First point, either as a Point or as a sequence of numbers.
        b: Second point, either as a Point or as a sequence of numbers.
        subtract: Subtract ``b`` from ``a`` instead of adding.
    """
    p1 = clone(ensure(a))
    p2 = ensure(b)
    if subtract:
        p1.x -= p2.x
        p1.y -= p2.y
    else:
        p1.x += p2.x
        p1.y += p2.y
    return p1


def subtract(a: PointLike, b: PointLike) -> Point:
    """Shortcut for ``add(a, b, subtract=True)``."""
    return add(a, b, True)


def scale(point: PointLike, factor: float) -> Point:
    p = clone(ensure(point))
    p.x *= factor
    p.y *= factor
    return p


def mirror(point: PointLike, mirror_x: bool, mirror_y: bool) -> Point:
    """
    Copy a point, mirrored on either or both axes.

    Args:
        point: The point to mirror.
        mirror_x: Negate the x coordinate.
        mirror_y: Negate the y coordinate.
    """
    p = clone(ensure(point))

    if mirror_x:
        p.x = -p.x

    if mirror_y:
        p.y = -p.y

    return p


def rotate(
    point: PointLike, angle_in_degrees: float, rotation_origin: PointLike
) -> Point:
    """
    Rotate a point around an origin.

    Args:
        point: The point to rotate.
        angle_in_degrees: Amount of rotation, counterclockwise.
        rotation_origin: Center of rotation.

    Returns:
        A new point at the same distance from ``rotation_origin``.
    """
    point_angle_in_radians = angle.from_point_to_radians(point, rotation_origin)
    d = measure.point_distance(rotation_origin, point)
    rotated_point = from_polar(
        point_angle_in_radians + angle.to_radians(angle_in_degrees), d
    )

    return add(rotation_origin, rotated_point)


def from_polar(angle_in_radians: float, radius: float) -> Point:
    return Point(
        radius * math.cos(angle_in_radians),
        radius * math.sin(angle_in_radians),
    )


def from_arc(arc: "Arc") -> List[Point]:
    """
    Get the two end points of an arc.

    Returns:
        ``[start, end]``: the points at ``arc.start_angle`` and
        ``arc.end_angle`` (degrees), in that order.
    """

    def point_from_angle(angle_in_degrees):
        return add(
            arc.origin, from_polar(angle.to_radians(angle_in_degrees), arc.radius)
        )

    return [point_from_angle(arc.start_angle), point_from_angle(arc.end_angle)]
