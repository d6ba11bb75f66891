import logging

from jotter import config
from jotter.core import geometry
from jotter.core.shapes import Arrow, Circle, Line, Point, Rectangle

logger = logging.getLogger(__name__)


class HeuristicClassifier:
    """
    Classifies a stroke from its samples alone:
      - line      : chord almost as long as the path
      - rectangle : closed, a couple of corners, sane aspect ratio
      - circle    : closed, samples roughly equidistant from the centroid
      - arrow     : straight shaft followed by a cornered head
    Always available, works on open strokes too.
    """

    name = "heuristic"
    available = True

    # line -> circle -> rectangle -> arrow. Line goes first because a
    # degenerate straight stroke can pass the lenient closed-shape checks.
    DEFAULT_ORDER = ("line", "circle", "rectangle", "arrow")

    def __init__(self,
                 close_threshold=config.CLOSE_THRESHOLD,
                 straightness=config.STRAIGHTNESS_THRESHOLD,
                 corner_angle=config.CORNER_ANGLE,
                 rect_min_corners=config.RECT_MIN_CORNERS,
                 rect_aspect_range=config.RECT_ASPECT_RANGE,
                 circle_aspect_range=config.CIRCLE_ASPECT_RANGE,
                 circle_variance_ratio=config.CIRCLE_VARIANCE_RATIO,
                 triangle_min_corners=config.TRIANGLE_MIN_CORNERS,
                 arrow_split=config.ARROW_SPLIT,
                 square_aspect_range=config.SQUARE_ASPECT_RANGE):
        self.close_threshold = close_threshold
        self.straightness = straightness
        self.corner_angle = corner_angle

        # rectangle is deliberately loose: the corner detector under-counts
        # on shaky input, so we accept 2+ corners instead of 4
        self.rect_min_corners = rect_min_corners
        self.rect_min_points = config.RECT_MIN_POINTS
        self.rect_aspect_range = rect_aspect_range

        self.circle_aspect_range = circle_aspect_range
        self.circle_variance_ratio = circle_variance_ratio
        self.circle_min_points = config.CIRCLE_MIN_POINTS

        self.triangle_min_corners = triangle_min_corners
        self.arrow_split = arrow_split
        self.arrow_min_points = config.ARROW_MIN_POINTS
        self.square_aspect_range = square_aspect_range

    # ---------- helpers ----------
    def _is_closed(self, stroke):
        return geometry.distance(stroke[0], stroke[-1]) < self.close_threshold

    @staticmethod
    def _in_range(value, bounds):
        lo, hi = bounds
        return value is not None and lo < value < hi

    def corner_count(self, stroke):
        return len(geometry.find_corners(stroke, self.corner_angle))

    def straightness_ratio(self, stroke):
        """distance(first, last) / path length, or None for a zero-length path."""
        total = geometry.path_length(stroke)
        if total == 0:
            return None
        return geometry.distance(stroke[0], stroke[-1]) / total

    # ---------- predicates ----------
    def is_line(self, stroke):
        if len(stroke) < 2:
            return False
        ratio = self.straightness_ratio(stroke)
        return ratio is not None and ratio > self.straightness

    def is_rectangle(self, stroke):
        if len(stroke) < self.rect_min_points or not self._is_closed(stroke):
            return False
        aspect = geometry.bounding_box(stroke).aspect_ratio
        if not self._in_range(aspect, self.rect_aspect_range):
            return False
        return self.corner_count(stroke) >= self.rect_min_corners

    def is_circle(self, stroke):
        if len(stroke) < self.circle_min_points or not self._is_closed(stroke):
            return False
        aspect = geometry.bounding_box(stroke).aspect_ratio
        if not self._in_range(aspect, self.circle_aspect_range):
            return False
        distances = geometry.radii(stroke)
        average_radius = geometry.mean(distances)
        if average_radius == 0:
            return False
        circularity = geometry.variance(distances) / average_radius
        return circularity < self.circle_variance_ratio

    def is_triangle(self, stroke):
        if len(stroke) < 3:
            return False
        return self.corner_count(stroke) >= self.triangle_min_corners

    def split_arrow(self, stroke):
        """(shaft, head) split at `arrow_split` of the sample count."""
        split = int(len(stroke) * self.arrow_split)
        return stroke[:split], stroke[split:]

    def is_arrow(self, stroke):
        if len(stroke) < self.arrow_min_points:
            return False
        shaft, head = self.split_arrow(stroke)
        return self.is_line(shaft) and self.is_triangle(head)

    # ---------- shape builders ----------
    def line_shape(self, stroke):
        return Line(a=stroke[0], b=stroke[-1])

    def rectangle_shape(self, stroke):
        box = geometry.bounding_box(stroke)
        vertices = (
            Point(box.min_x, box.min_y),
            Point(box.max_x, box.min_y),
            Point(box.max_x, box.max_y),
            Point(box.min_x, box.max_y),
        )
        lo, hi = self.square_aspect_range
        aspect = box.aspect_ratio
        return Rectangle(vertices=vertices, square=aspect is not None and lo <= aspect <= hi)

    def circle_shape(self, stroke):
        center = geometry.centroid(stroke)
        return Circle(center=center, radius=geometry.mean(geometry.radii(stroke, center)))

    def arrow_shape(self, stroke):
        shaft, head = self.split_arrow(stroke)
        return Arrow(shaft_start=shaft[0], shaft_end=shaft[-1], head_vertices=tuple(head))

    # ---------- main ----------
    def classify(self, stroke, order=DEFAULT_ORDER):
        """First shape in `order` whose predicate matches, else None."""
        if len(stroke) < 2:
            return None
        for kind in order:
            if getattr(self, "is_" + kind)(stroke):
                shape = getattr(self, kind + "_shape")(stroke)
                logger.debug("Heuristic detected: %s", shape.type)
                return shape
        return None
