import logging

from jotter.core.contour import ContourClassifier
from jotter.core.heuristics import HeuristicClassifier
from jotter.core.shapes import Freehand

logger = logging.getLogger(__name__)


class StrokeClassifier:
    """
    Decides what a finished stroke is:
      1. fewer than 2 samples  -> None (nothing to add)
      2. heuristic line        -> Line, before any rasterizing
      3. contour pipeline      -> exact Triangle / Rectangle / Circle
      4. heuristic fallback    -> rectangle, circle, arrow in that order
      5. otherwise             -> Freehand
    The contour tier is consulted only if it reports itself available when
    the stroke arrives.
    """

    FALLBACK_ORDER = ("rectangle", "circle", "arrow")

    def __init__(self, heuristic=None, contour=None):
        self.heuristic = heuristic if heuristic is not None else HeuristicClassifier()
        self.contour = contour if contour is not None else ContourClassifier()

    def classify(self, stroke):
        if len(stroke) < 2:
            return None

        if self.heuristic.is_line(stroke):
            logger.debug("Heuristic detected: line")
            return self.heuristic.line_shape(stroke)

        if self.contour.available:
            shape = self.contour.classify(stroke)
            if shape is not None:
                return shape
        else:
            logger.debug("Contour tracing not available, using heuristics")

        shape = self.heuristic.classify(stroke, order=self.FALLBACK_ORDER)
        if shape is not None:
            return shape

        logger.debug("No shape matched: freehand")
        return Freehand(stroke=tuple(stroke))
