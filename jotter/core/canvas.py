import os

import cv2
import numpy as np

from jotter import config


class GridCanvas:
    """Drawing surface backed by a BGR numpy image with a light grid background."""

    def __init__(self, width=config.CANVAS_WIDTH, height=config.CANVAS_HEIGHT,
                 grid_size=config.GRID_SIZE):
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.image = np.full((height, width, 3), config.BACKGROUND_COLOR, dtype=np.uint8)

    def clear(self):
        self.image = np.full_like(self.image, config.BACKGROUND_COLOR)

    def draw_grid(self):
        # Vertical lines
        for x in range(0, self.width + 1, self.grid_size):
            cv2.line(self.image, (x, 0), (x, self.height), config.GRID_COLOR,
                     config.GRID_THICKNESS)
        # Horizontal lines
        for y in range(0, self.height + 1, self.grid_size):
            cv2.line(self.image, (0, y), (self.width, y), config.GRID_COLOR,
                     config.GRID_THICKNESS)

    def stroke_segment(self, p1, p2, style):
        cv2.line(self.image, p1.to_int_tuple(), p2.to_int_tuple(), style.color,
                 style.thickness, cv2.LINE_AA)

    def stroke_polyline(self, points, style):
        self._polylines(points, False, style)

    def stroke_polygon(self, points, style):
        self._polylines(points, True, style)

    def stroke_circle(self, center, radius, style):
        cv2.circle(self.image, center.to_int_tuple(), int(round(radius)), style.color,
                   style.thickness, cv2.LINE_AA)

    def _polylines(self, points, closed, style):
        if len(points) < 2:
            return
        pts = np.array([p.to_int_tuple() for p in points], np.int32)
        cv2.polylines(self.image, [pts.reshape(-1, 1, 2)], closed, style.color,
                      style.thickness, cv2.LINE_AA)

    def save(self, filename="drawing.png"):
        """Save canvas to file"""
        full_path = os.path.abspath(filename)
        cv2.imwrite(full_path, self.image)
        return full_path
