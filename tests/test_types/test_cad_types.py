"""
Tests for the Point value type and the path entities.
"""

from types import SimpleNamespace

import numpy as np
import numpy.testing as npt
import pytest

from makerpy import Arc, Circle, Line, Point, is_point
from makerpy.cad_types import is_real


class TestPoint:
    def test_defaults_to_origin(self):
        p = Point()
        assert p.x == 0.0
        assert p.y == 0.0

    def test_equality_uses_tolerance(self):
        assert Point(1, 2) == Point(1 + 1e-12, 2 - 1e-12)
        assert Point(1, 2) != Point(1.001, 2)

    def test_not_equal_to_tuple(self):
        assert Point(1, 2) != (1, 2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Point(1, 2))

    def test_unpacking(self):
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)

    def test_str(self):
        assert str(Point(1.5, 2)) == "Point(x=1.5, y=2)"

    def test_to_numpy(self):
        npt.assert_array_equal(Point(1, 2).to_numpy(), [1.0, 2.0])

    def test_json_round_trip(self):
        p = Point(0.25, -8)
        data = p.to_json()
        assert data == {"x": 0.25, "y": -8.0}
        assert Point.from_json(data) == p


class TestIsPoint:
    def test_point(self):
        assert is_point(Point(1, 2))

    def test_duck_typed_point(self):
        assert is_point(SimpleNamespace(x=1, y=2.5))

    @pytest.mark.parametrize(
        "item",
        [None, [1, 2], (1, 2), 5, SimpleNamespace(x=1), SimpleNamespace(x=True, y=1)],
    )
    def test_not_points(self, item):
        assert not is_point(item)


class TestPaths:
    def test_line_coerces_points(self):
        line = Line([0, 0], [3, 4])
        assert line.path_type == "line"
        assert line.origin == Point(0, 0)
        assert line.end == Point(3, 4)

    def test_line_keeps_point_references(self):
        start = Point(1, 1)
        line = Line(start, Point(2, 2))
        assert line.origin is start

    def test_circle(self):
        circle = Circle([1, 2], 3)
        assert circle.path_type == "circle"
        assert circle.origin == Point(1, 2)
        assert circle.radius == 3

    def test_arc(self):
        arc = Arc(None, 5, 0, 90)
        assert arc.path_type == "arc"
        assert arc.origin == Point(0, 0)
        assert arc.radius == 5
        assert arc.start_angle == 0
        assert arc.end_angle == 90


@pytest.mark.parametrize("value", [0, 1.5, -3, np.float64(2.0), np.int32(7)])
def test_is_real_accepts_numbers(value):
    assert is_real(value)


@pytest.mark.parametrize("value", [True, None, "1", [1], np.array([1.0])])
def test_is_real_rejects_non_numbers(value):
    assert not is_real(value)
