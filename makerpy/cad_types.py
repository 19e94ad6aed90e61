import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

import numpy as np

from .constants import POINT_EQUALITY_TOLERANCE


def is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(eq=False)
class Point:
    """
    A 2D coordinate pair.

    Points are plain mutable values owned by whoever holds the reference.
    Every operation in :mod:`makerpy.point` returns a fresh Point, except
    ``ensure`` which hands back a Point it was given unchanged.
    """

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other):
        if not is_point(other):
            return NotImplemented
        return math.isclose(
            self.x, other.x, abs_tol=POINT_EQUALITY_TOLERANCE
        ) and math.isclose(self.y, other.y, abs_tol=POINT_EQUALITY_TOLERANCE)

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"Point(x={self.x}, y={self.y})"

    def to_numpy(self):
        return np.array((self.x, self.y), dtype=float)

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
        }

    @staticmethod
    def from_json(json_data):
        return Point(json_data["x"], json_data["y"])


PointLike = Union[Point, Mapping[str, float], Sequence[float], np.ndarray, float, None]


def is_point(item: Any) -> bool:
    """True when ``item`` has real-valued ``x`` and ``y`` attributes."""
    return is_real(getattr(item, "x", None)) and is_real(getattr(item, "y", None))
