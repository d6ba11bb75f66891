"""Shared pytest fixtures for the jotter test suite.

Fixtures:
    recording_surface: render surface that logs every draw call
    make_circle: factory for closed circle samples
    heuristic_only: StrokeClassifier whose contour tier is never loaded
    rectangle_stroke: near-closed 50x50 rectangle
    circle_stroke: closed circle of radius 50 around (200, 200)
    arrow_stroke: straight shaft followed by a zigzag head
    zigzag_stroke: open zigzag that matches nothing
"""

import math

import pytest

from jotter.core.classifier import StrokeClassifier
from jotter.core.contour import ContourClassifier
from jotter.core.shapes import make_stroke


class RecordingSurface:
    """Stands in for GridCanvas and records calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_grid(self):
        self.calls.append(("draw_grid",))

    def stroke_segment(self, p1, p2, style):
        self.calls.append(("stroke_segment", p1, p2, style))

    def stroke_polyline(self, points, style):
        self.calls.append(("stroke_polyline", tuple(points), style))

    def stroke_polygon(self, points, style):
        self.calls.append(("stroke_polygon", tuple(points), style))

    def stroke_circle(self, center, radius, style):
        self.calls.append(("stroke_circle", center, radius, style))

    def names(self):
        return [c[0] for c in self.calls]


def circle_points(cx, cy, r, n=64):
    """n samples around a circle plus the first sample again to close it."""
    return [(cx + r * math.cos(2 * math.pi * i / n), cy + r * math.sin(2 * math.pi * i / n))
            for i in range(n + 1)]


@pytest.fixture
def make_circle():
    return circle_points


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def heuristic_only():
    return StrokeClassifier(contour=ContourClassifier(load=False))


@pytest.fixture
def rectangle_stroke():
    return make_stroke([(0, 0), (50, 0), (50, 50), (0, 50), (0, 2)])


@pytest.fixture
def circle_stroke():
    return make_stroke(circle_points(200, 200, 50))


@pytest.fixture
def arrow_stroke():
    shaft = [(x, 0) for x in range(0, 140, 10)]
    head = [(140, 0), (150, 0), (140, -10), (150, 0), (140, 10), (150, 0)]
    return make_stroke(shaft + head)


@pytest.fixture
def zigzag_stroke():
    return make_stroke([(0, 0), (10, 30), (20, 0), (30, 30), (40, 0), (50, 30), (60, 0)])
