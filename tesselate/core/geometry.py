"""
Plane geometry helpers for edge legality checks.

Points are anything indexable as ``p[0], p[1]``: tuples, lists or rows of an
``(n, 2)`` NumPy array.
"""

import math

import numpy as np


def orientation(a, b, c) -> float:
    """
    Cross product of (b - a) and (c - a), with the sign flipped.

    Positive and negative values place ``c`` on opposite sides of the line
    through ``a`` and ``b``; zero means the three points are collinear.
    """
    return (c[0] - a[0]) * (b[1] - a[1]) - (b[0] - a[0]) * (c[1] - a[1])


def segment_length(a, b) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def distance_point_to_segment(point, seg_start, seg_end) -> float:
    """
    Shortest distance from ``point`` to the closed segment.

    A degenerate segment (start == end) is treated as a single point.
    """
    x0, y0 = point[0], point[1]
    x1, y1 = seg_start[0], seg_start[1]
    dx = seg_end[0] - x1
    dy = seg_end[1] - y1

    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(x0 - x1, y0 - y1)

    # Projection parameter clamped to the segment
    t = ((x0 - x1) * dx + (y0 - y1) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(x0 - (x1 + t * dx), y0 - (y1 + t * dy))


def distances_to_segment(points: np.ndarray, seg_start, seg_end) -> np.ndarray:
    """
    Vectorised ``distance_point_to_segment`` over an ``(n, 2)`` array.

    Args:
        points: Array of [x, y] coordinates
        seg_start: Segment start point
        seg_end: Segment end point

    Returns:
        Array of ``n`` distances
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    start = np.asarray(seg_start, dtype=np.float64)
    direction = np.asarray(seg_end, dtype=np.float64) - start

    length_sq = float(direction @ direction)
    if length_sq == 0:
        return np.linalg.norm(points - start, axis=1)

    t = np.clip(((points - start) @ direction) / length_sq, 0.0, 1.0)
    closest = start + t[:, np.newaxis] * direction
    return np.linalg.norm(points - closest, axis=1)


def segments_properly_intersect(p1, p2, p3, p4) -> bool:
    """
    True if segment p1-p2 crosses segment p3-p4 at a single interior point.

    Each segment's endpoints must lie strictly on opposite sides of the other
    segment's line. Touching, collinear overlap and shared endpoints all
    return False; callers skip edges that share a vertex before asking.
    """
    d1 = orientation(p3, p4, p1)
    d2 = orientation(p3, p4, p2)
    d3 = orientation(p1, p2, p3)
    d4 = orientation(p1, p2, p4)

    return ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4))
