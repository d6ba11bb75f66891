import logging

from jotter import config
from jotter.core.classifier import StrokeClassifier
from jotter.core.ledger import Reconciler
from jotter.core.shapes import Point

logger = logging.getLogger(__name__)


class StrokeSession:
    """
    Glue between pointer input and the recognizer. Owns the in-progress
    stroke buffer, paints raw ink while the pointer moves, and on release
    hands a frozen stroke to the classifier and the result to the reconciler.
    """

    def __init__(self, surface, classifier=None, reconciler=None,
                 ink_style=config.INK_STYLE):
        self.surface = surface
        self.classifier = classifier if classifier is not None else StrokeClassifier()
        self.reconciler = reconciler if reconciler is not None else Reconciler(surface)
        self.ink_style = ink_style
        self._buffer = None

    @property
    def drawing(self):
        return self._buffer is not None

    @property
    def ledger(self):
        return self.reconciler.ledger

    def on_stroke_start(self, point):
        self._buffer = [self._point(point)]

    def on_stroke_point(self, point):
        if self._buffer is None:
            return
        point = self._point(point)
        self.surface.stroke_segment(self._buffer[-1], point, self.ink_style)
        self._buffer.append(point)

    def on_stroke_end(self):
        """Classify the finished stroke. Returns the Shape, or None if it was too short."""
        if self._buffer is None:
            return None
        stroke, self._buffer = tuple(self._buffer), None
        if len(stroke) < 2:
            return None

        shape = self.classifier.classify(stroke)
        logger.info("Stroke of %d points -> %s", len(stroke), shape.type)
        self.reconciler.on_recognized(shape)
        return shape

    def on_stroke_abandoned(self):
        """Pointer left the surface mid-stroke: drop it without classifying."""
        self._buffer = None

    def reset(self):
        self._buffer = None
        self.reconciler.reset()

    @staticmethod
    def _point(p):
        return p if isinstance(p, Point) else Point.from_tuple(p)
