"""Value types passed between the classifiers, the ledger and the canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Immutable 2D sample."""
    x: float
    y: float

    def to_int_tuple(self) -> Tuple[int, int]:
        """Convert to integer tuple for pixel operations."""
        return (int(round(self.x)), int(round(self.y)))

    @classmethod
    def from_tuple(cls, t) -> Point:
        return cls(float(t[0]), float(t[1]))


# A finished stroke is a tuple of Points in the order they were captured.
Stroke = Tuple[Point, ...]


def make_stroke(points) -> Stroke:
    """Freeze (x, y) pairs or Points into a Stroke."""
    return tuple(p if isinstance(p, Point) else Point.from_tuple(p) for p in points)


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def aspect_ratio(self):
        """width / height, or None when the box has no height."""
        if self.height == 0:
            return None
        return self.width / self.height


# ---------- shape variants ----------
# Each variant carries everything needed to redraw it exactly.

@dataclass(frozen=True)
class Shape:
    """Base of the shape variants; each one names itself through `type`."""

    @property
    def recognized(self) -> bool:
        return True


@dataclass(frozen=True)
class Line(Shape):
    a: Point
    b: Point

    @property
    def type(self):
        return "line"


@dataclass(frozen=True)
class Rectangle(Shape):
    vertices: Tuple[Point, ...]   # 4 vertices in traced order, may be rotated
    square: bool = False

    @property
    def type(self):
        return "square" if self.square else "rectangle"

    def bounding_box(self) -> BoundingBox:
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        return BoundingBox(min(xs), max(xs), min(ys), max(ys))


@dataclass(frozen=True)
class Triangle(Shape):
    vertices: Tuple[Point, ...]

    @property
    def type(self):
        return "triangle"


@dataclass(frozen=True)
class Circle(Shape):
    center: Point
    radius: float

    @property
    def type(self):
        return "circle"


@dataclass(frozen=True)
class Arrow(Shape):
    shaft_start: Point
    shaft_end: Point
    head_vertices: Tuple[Point, ...]   # raw head samples, drawn from shaft_end

    @property
    def type(self):
        return "arrow"


@dataclass(frozen=True)
class Freehand(Shape):
    stroke: Stroke

    @property
    def type(self):
        return "freehand"

    @property
    def recognized(self) -> bool:
        return False
