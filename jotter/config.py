"""Tuning constants and drawing styles.

The classifier thresholds below are empirical. Every classifier accepts them
as keyword arguments, so they can be recalibrated without touching the
detection code.
"""

import math
from collections import namedtuple

# ---------- canvas ----------
CANVAS_WIDTH = 1280
CANVAS_HEIGHT = 720
GRID_SIZE = 40

# Colors are BGR for OpenCV
BACKGROUND_COLOR = (255, 255, 255)
GRID_COLOR = (240, 240, 240)
GRID_THICKNESS = 1

Style = namedtuple("Style", ["color", "thickness"])

INK_STYLE = Style(color=(0, 0, 0), thickness=2)          # Raw freehand ink
RECOGNIZED_STYLE = Style(color=(0, 0, 255), thickness=3)  # Red, like a marker

# ---------- heuristic tier ----------
CLOSE_THRESHOLD = 10.0            # start/end gap (px) that still counts as closed
STRAIGHTNESS_THRESHOLD = 0.9      # chord / path length above this is a line
CORNER_ANGLE = math.pi / 6        # 30 degree turn marks a corner
RECT_MIN_CORNERS = 2              # lenient: noisy input under-counts corners
RECT_ASPECT_RANGE = (0.2, 5.0)
RECT_MIN_POINTS = 4
CIRCLE_ASPECT_RANGE = (0.5, 2.0)
CIRCLE_VARIANCE_RATIO = 0.5       # variance(radii) / mean(radii)
CIRCLE_MIN_POINTS = 6
TRIANGLE_MIN_CORNERS = 3
ARROW_SPLIT = 0.7                 # shaft is the first 70% of the samples
ARROW_MIN_POINTS = 6

# ---------- contour tier ----------
APPROX_EPSILON = 0.02             # fraction of the perimeter
CIRCULARITY_THRESHOLD = 0.85
SQUARE_ASPECT_RANGE = (0.8, 1.2)
RASTER_STROKE_WIDTH = 2
RASTER_MARGIN = 10                # blank border around the stroke bbox
MIN_CONTOUR_AREA = 100            # px^2; smaller outlines are specks

# ---------- HUD ----------
HUD_DURATION = 2.0
