"""Pure geometric measurements over strokes.

None of these functions keep state. They expect a non-empty stroke; passing
an empty one is a caller bug and raises ValueError.
"""

import math

import numpy as np

from jotter.config import CORNER_ANGLE
from jotter.core.shapes import BoundingBox, Point


def _require_points(stroke):
    if len(stroke) == 0:
        raise ValueError("stroke has no points")


def as_array(stroke):
    """Stroke -> float64 array of shape (N, 2)."""
    _require_points(stroke)
    return np.array([(p.x, p.y) for p in stroke], dtype=np.float64)


def distance(p1, p2):
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def path_length(stroke):
    """Sum of consecutive segment lengths (0 for a single point)."""
    pts = as_array(stroke)
    if len(pts) < 2:
        return 0.0
    return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))


def bounding_box(stroke):
    pts = as_array(stroke)
    (min_x, min_y), (max_x, max_y) = pts.min(axis=0), pts.max(axis=0)
    return BoundingBox(float(min_x), float(max_x), float(min_y), float(max_y))


def centroid(stroke):
    """Arithmetic mean of all samples."""
    cx, cy = as_array(stroke).mean(axis=0)
    return Point(float(cx), float(cy))


def mean(values):
    if len(values) == 0:
        raise ValueError("no values")
    return float(np.mean(values))


def variance(values):
    """Population variance."""
    if len(values) == 0:
        raise ValueError("no values")
    return float(np.var(values))


def turning_angle(prev, point, nxt):
    """Signed change of heading at `point`, wrapped into [-pi, pi]."""
    incoming = math.atan2(point.y - prev.y, point.x - prev.x)
    outgoing = math.atan2(nxt.y - point.y, nxt.x - point.x)
    delta = outgoing - incoming
    # wrap so a heading crossing +/-180 degrees is not a full turn
    return (delta + math.pi) % (2 * math.pi) - math.pi


def find_corners(stroke, angle_threshold=CORNER_ANGLE):
    """
    Interior samples where the stroke turns sharper than `angle_threshold`.
    Returned in stroke order; neighbouring corners are not merged.
    """
    _require_points(stroke)
    corners = []
    for i in range(1, len(stroke) - 1):
        # repeated samples have no heading
        if stroke[i] == stroke[i - 1] or stroke[i] == stroke[i + 1]:
            continue
        angle = turning_angle(stroke[i - 1], stroke[i], stroke[i + 1])
        if abs(angle) > angle_threshold:
            corners.append(stroke[i])
    return corners


def radii(stroke, center=None):
    """Distance from `center` (default: centroid) to every sample."""
    if center is None:
        center = centroid(stroke)
    return [distance(center, p) for p in stroke]


def nearest_on_path(point, stroke):
    """Closest point to `point` on the polyline through the stroke's samples."""
    pts = as_array(stroke)
    if len(pts) == 1:
        return Point(float(pts[0, 0]), float(pts[0, 1]))
    starts, ends = pts[:-1], pts[1:]
    d = ends - starts
    lengths_sq = np.einsum("ij,ij->i", d, d)
    p = np.array([point.x, point.y], dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.where(lengths_sq > 0, np.einsum("ij,ij->i", p - starts, d) / lengths_sq, 0.0)
    t = np.clip(t, 0.0, 1.0)
    candidates = starts + t[:, None] * d
    best = int(np.argmin(np.sum((candidates - p) ** 2, axis=1)))
    return Point(float(candidates[best, 0]), float(candidates[best, 1]))
