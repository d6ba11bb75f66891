"""Unit tests for the heuristic tier (jotter.core.heuristics)."""

import pytest

from jotter.core.heuristics import HeuristicClassifier
from jotter.core.shapes import Arrow, Circle, Line, Point, Rectangle, make_stroke


@pytest.fixture
def heuristic():
    return HeuristicClassifier()


class TestIsLine:

    def test_two_point_stroke(self, heuristic):
        assert heuristic.is_line(make_stroke([(0, 0), (100, 100)]))

    def test_slight_wobble_still_a_line(self, heuristic):
        stroke = make_stroke([(0, 0), (25, 2), (50, -1), (75, 1), (100, 0)])
        assert heuristic.is_line(stroke)

    def test_zero_length_path_is_not_a_line(self, heuristic):
        assert not heuristic.is_line(make_stroke([(5, 5), (5, 5), (5, 5)]))

    def test_single_point_is_not_a_line(self, heuristic):
        assert not heuristic.is_line(make_stroke([(5, 5)]))

    def test_closed_loop_is_not_a_line(self, heuristic, rectangle_stroke):
        assert not heuristic.is_line(rectangle_stroke)

    def test_threshold_is_configurable(self):
        stroke = make_stroke([(0, 0), (50, 20), (100, 0)])   # ratio ~0.93
        assert HeuristicClassifier().is_line(stroke)
        assert not HeuristicClassifier(straightness=0.95).is_line(stroke)


class TestIsRectangle:

    def test_near_closed_rectangle(self, heuristic, rectangle_stroke):
        assert heuristic.is_rectangle(rectangle_stroke)

    def test_open_stroke_rejected(self, heuristic):
        stroke = make_stroke([(0, 0), (50, 0), (50, 50), (0, 50)])
        assert not heuristic.is_rectangle(stroke)

    def test_zero_width_box_rejected(self, heuristic):
        """Back-and-forth vertical scribble: no width, no division by zero."""
        stroke = make_stroke([(0, 0), (0, 25), (0, 50), (0, 25), (0, 1)])
        assert not heuristic.is_rectangle(stroke)

    def test_extreme_aspect_rejected(self, heuristic):
        stroke = make_stroke([(0, 0), (100, 0), (100, 10), (0, 10), (0, 3)])
        assert not heuristic.is_rectangle(stroke)

    def test_rectangle_shape_uses_bounding_box(self, heuristic, rectangle_stroke):
        shape = heuristic.rectangle_shape(rectangle_stroke)
        assert isinstance(shape, Rectangle)
        assert shape.vertices == (Point(0, 0), Point(50, 0), Point(50, 50), Point(0, 50))
        assert shape.square
        assert shape.type == "square"

    def test_wide_rectangle_not_square(self, heuristic):
        stroke = make_stroke([(0, 0), (90, 0), (90, 40), (0, 40), (0, 4)])
        shape = heuristic.rectangle_shape(stroke)
        assert shape.type == "rectangle"
        box = shape.bounding_box()
        assert (box.width, box.height) == (90, 40)


class TestIsCircle:

    def test_sampled_circle(self, heuristic, circle_stroke):
        assert heuristic.is_circle(circle_stroke)

    def test_circle_shape_radius(self, heuristic, circle_stroke):
        shape = heuristic.circle_shape(circle_stroke)
        assert isinstance(shape, Circle)
        assert abs(shape.radius - 50) / 50 < 0.15
        assert shape.center.x == pytest.approx(200, abs=1.5)
        assert shape.center.y == pytest.approx(200, abs=1.5)

    def test_circle_has_no_corners(self, heuristic, circle_stroke):
        assert not heuristic.is_rectangle(circle_stroke)

    def test_too_few_points(self, heuristic, rectangle_stroke):
        assert not heuristic.is_circle(rectangle_stroke)

    def test_all_points_identical(self, heuristic):
        """Zero average radius is not a circle."""
        assert not heuristic.is_circle(make_stroke([(3, 3)] * 8))


class TestIsArrow:

    def test_shaft_and_head(self, heuristic, arrow_stroke):
        assert heuristic.is_arrow(arrow_stroke)

    def test_head_needs_corners(self, heuristic):
        stroke = make_stroke([(x, 0) for x in range(0, 200, 10)])
        assert not heuristic.is_arrow(stroke)

    def test_too_short(self, heuristic):
        assert not heuristic.is_arrow(make_stroke([(0, 0), (10, 0), (20, 0), (15, 5), (20, 0)]))

    def test_arrow_shape(self, heuristic, arrow_stroke):
        shape = heuristic.arrow_shape(arrow_stroke)
        assert isinstance(shape, Arrow)
        assert shape.shaft_start == Point(0, 0)
        assert shape.shaft_end.y == 0
        assert shape.head_vertices[-1] == Point(150, 0)

    def test_is_triangle_counts_corners(self, heuristic):
        head = make_stroke([(0, 0), (10, 0), (0, -10), (10, 0), (0, 10)])
        assert heuristic.is_triangle(head)
        assert not heuristic.is_triangle(make_stroke([(0, 0), (10, 0), (20, 0)]))


class TestClassify:

    def test_line_first(self, heuristic):
        shape = heuristic.classify(make_stroke([(0, 0), (100, 100)]))
        assert shape == Line(a=Point(0, 0), b=Point(100, 100))

    def test_circle(self, heuristic, circle_stroke):
        assert isinstance(heuristic.classify(circle_stroke), Circle)

    def test_rectangle(self, heuristic, rectangle_stroke):
        assert isinstance(heuristic.classify(rectangle_stroke), Rectangle)

    def test_arrow(self, heuristic, arrow_stroke):
        assert isinstance(heuristic.classify(arrow_stroke), Arrow)

    def test_nothing_matches(self, heuristic, zigzag_stroke):
        assert heuristic.classify(zigzag_stroke) is None

    def test_custom_order(self, heuristic, rectangle_stroke):
        assert heuristic.classify(rectangle_stroke, order=("circle",)) is None
