"""Jotter: freehand sketching canvas that snaps strokes to clean shapes."""

__version__ = "0.3.0"
