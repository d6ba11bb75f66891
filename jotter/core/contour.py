import logging
import math

import cv2
import numpy as np

from jotter import config
from jotter.core import geometry
from jotter.core.shapes import Circle, Point, Rectangle, Triangle

logger = logging.getLogger(__name__)


class OpenCVTracer:
    """Thin wrapper around the OpenCV calls the contour pipeline needs."""

    def rasterize(self, stroke, stroke_width=config.RASTER_STROKE_WIDTH,
                  margin=config.RASTER_MARGIN):
        """
        Paint a single stroke black on a fresh white image.
        Returns (image, origin); origin is the canvas position of pixel (0, 0).
        The image is cropped to the stroke's bounding box plus `margin`.
        """
        box = geometry.bounding_box(stroke)
        ox = math.floor(box.min_x) - margin
        oy = math.floor(box.min_y) - margin
        w = math.ceil(box.max_x) - ox + margin + 1
        h = math.ceil(box.max_y) - oy + margin + 1

        image = np.full((h, w, 3), 255, dtype=np.uint8)
        pts = np.round(geometry.as_array(stroke) - (ox, oy)).astype(np.int32)
        # no anti-aliasing: crisp ink keeps the traced outline stable
        cv2.polylines(image, [pts.reshape(-1, 1, 2)], False, (0, 0, 0),
                      stroke_width, cv2.LINE_8)
        return image, Point(float(ox), float(oy))

    def to_grayscale(self, image):
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

    def threshold(self, gray):
        # Otsu picks the level; inverted so the ink is foreground
        _, binary = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY_INV + cv2.THRESH_OTSU)
        return binary

    def trace_external_contours(self, binary):
        contours, _ = cv2.findContours(binary, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours)

    def polygon_approximate(self, contour, epsilon):
        return cv2.approxPolyDP(contour, epsilon, True)

    def arc_length(self, contour):
        return cv2.arcLength(contour, True)

    def contour_area(self, contour):
        return cv2.contourArea(contour)

    def min_enclosing_circle(self, contour):
        return cv2.minEnclosingCircle(contour)



class ContourClassifier:
    """
    Rasterize -> grayscale -> Otsu binarize -> trace outlines -> approximate
    polygon -> classify by vertex count, then by circularity.

    Gives exact vertices / center / radius for redrawing, but depends on a
    tracing capability that may not be loaded yet or may fail at runtime.
    Every failure becomes "no result".
    """

    name = "contour"

    def __init__(self, tracer=None, load=True,
                 epsilon=config.APPROX_EPSILON,
                 circularity_threshold=config.CIRCULARITY_THRESHOLD,
                 square_aspect_range=config.SQUARE_ASPECT_RANGE,
                 stroke_width=config.RASTER_STROKE_WIDTH,
                 margin=config.RASTER_MARGIN,
                 min_area=config.MIN_CONTOUR_AREA):
        self.tracer = tracer
        self.enabled = True
        self.epsilon = epsilon
        self.circularity_threshold = circularity_threshold
        self.square_aspect_range = square_aspect_range
        self.stroke_width = stroke_width
        self.margin = margin
        self.min_area = min_area   # ignore specks, e.g. a stroke that never moved
        if tracer is None and load:
            self.load()

    @property
    def available(self):
        return self.enabled and self.tracer is not None

    def load(self):
        """Create the OpenCV tracer and check it can run. Safe to call from a thread."""
        try:
            tracer = OpenCVTracer()
            blank = np.zeros((8, 8), dtype=np.uint8)
            tracer.trace_external_contours(blank)
        except Exception as e:
            logger.warning("Contour tracing unavailable: %s", e)
            return False
        self.tracer = tracer
        logger.info("Contour tracing loaded")
        return True

    # ---------- pipeline ----------
    def classify(self, stroke):
        """Shape for the first recognizable outline of `stroke`, or None."""
        if not self.available:
            return None
        try:
            return self._detect(stroke)
        except Exception as e:
            logger.warning("Contour detection failed, falling back to heuristics: %s", e)
            return None

    def _detect(self, stroke):
        tracer = self.tracer
        image, origin = tracer.rasterize(stroke, self.stroke_width, self.margin)
        gray = tracer.to_grayscale(image)
        binary = tracer.threshold(gray)
        del image, gray   # scratch raster is per-stroke only

        contours = tracer.trace_external_contours(binary)
        logger.debug("Contours found: %d", len(contours))
        for c in contours:
            shape = self.classify_contour(c, origin, stroke)
            if shape is not None:
                logger.debug("Contour detected: %s", shape.type)
                return shape
        return None

    def classify_contour(self, contour, origin=Point(0.0, 0.0), stroke=None):
        """
        Triangle / Rectangle / Circle for one contour, or None if unknown.

        With `stroke`, the contour is taken to be the outer edge of that
        stroke's ink: vertices are pulled back onto the stroke's path and
        the circle radius loses half the ink width.
        """
        tracer = self.tracer
        perimeter = tracer.arc_length(contour)
        area = tracer.contour_area(contour)
        if perimeter <= 0 or area < self.min_area:
            return None

        approx = tracer.polygon_approximate(contour, self.epsilon * perimeter)
        vertices = len(approx)

        if vertices == 3:
            return Triangle(vertices=self._vertices(approx, origin, stroke))
        if vertices == 4:
            rect = Rectangle(vertices=self._vertices(approx, origin, stroke))
            aspect = rect.bounding_box().aspect_ratio
            lo, hi = self.square_aspect_range
            if aspect is not None and lo <= aspect <= hi:
                rect = Rectangle(vertices=rect.vertices, square=True)
            return rect

        # 1.0 for a perfect circle
        circularity = (4 * math.pi * area) / (perimeter * perimeter)
        logger.debug("vertices=%d circularity=%.3f", vertices, circularity)
        if circularity > self.circularity_threshold:
            (cx, cy), radius = tracer.min_enclosing_circle(contour)
            if stroke is not None:
                radius = max(radius - self.stroke_width / 2.0, 0.0)
            return Circle(center=Point(float(cx) + origin.x, float(cy) + origin.y),
                          radius=float(radius))
        return None

    @staticmethod
    def _vertices(approx, origin, stroke=None):
        pts = np.asarray(approx).reshape(-1, 2)
        vertices = [Point(float(x) + origin.x, float(y) + origin.y) for x, y in pts]
        if stroke is not None:
            # outline corners sit half an ink width outside the drawn path
            vertices = [geometry.nearest_on_path(v, stroke) for v in vertices]
        return tuple(vertices)
