import logging

from jotter import config
from jotter.core.shapes import Arrow, Circle, Freehand, Line, Rectangle, Triangle

logger = logging.getLogger(__name__)


class ShapeLedger:
    """Append-only list of recognized shapes, in recognition order."""

    def __init__(self):
        self._shapes = []

    def append(self, shape):
        if isinstance(shape, Freehand):
            raise ValueError("freehand strokes are not tracked in the ledger")
        self._shapes.append(shape)

    def clear(self):
        self._shapes = []

    def __iter__(self):
        return iter(list(self._shapes))

    def __len__(self):
        return len(self._shapes)

    def __getitem__(self, index):
        return self._shapes[index]


class Reconciler:
    """
    Keeps the surface in sync with the ledger. Each new shape triggers a full
    repaint (clear, grid, every ledger entry) so rough ink never survives
    under a cleaned-up shape.
    """

    def __init__(self, surface, style=config.RECOGNIZED_STYLE, ledger=None):
        self.surface = surface
        self.style = style
        self.ledger = ledger if ledger is not None else ShapeLedger()

    def on_recognized(self, shape):
        """Record and repaint. Returns False for freehand, which is left as drawn."""
        if shape is None or isinstance(shape, Freehand):
            return False
        self.ledger.append(shape)
        logger.debug("Ledger now holds %d shapes", len(self.ledger))
        self.redraw()
        return True

    def redraw(self):
        self.surface.clear()
        self.surface.draw_grid()
        for shape in self.ledger:
            self.draw_shape(shape)

    def reset(self):
        """Forget every shape and show an empty grid."""
        self.ledger.clear()
        self.redraw()

    def draw_shape(self, shape):
        """Draw one shape from its exact geometry."""
        surface, style = self.surface, self.style
        if isinstance(shape, Line):
            surface.stroke_segment(shape.a, shape.b, style)
        elif isinstance(shape, (Rectangle, Triangle)):
            # traced vertices, so rotated rectangles stay rotated
            surface.stroke_polygon(list(shape.vertices), style)
        elif isinstance(shape, Circle):
            surface.stroke_circle(shape.center, shape.radius, style)
        elif isinstance(shape, Arrow):
            surface.stroke_segment(shape.shaft_start, shape.shaft_end, style)
            surface.stroke_polyline([shape.shaft_end] + list(shape.head_vertices), style)
        else:
            raise TypeError("cannot draw %r" % (shape,))
