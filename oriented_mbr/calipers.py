"""
Minimum-area enclosing rectangle of a convex hull.

The minimum-area rectangle around a convex polygon has one side flush with
an edge of the polygon, so only the hull's edge directions are tried. For
each direction the hull is projected onto the direction and its
perpendicular; the projection extents give the rectangle.
"""

import logging
from math import atan2, hypot
from typing import Iterator, List, Optional, Tuple

from oriented_mbr.config import MBRConfig, get_config
from oriented_mbr.types import CandidateRectangle
from oriented_mbr.vector import Point2, dot, normalize, perpendicular

logger = logging.getLogger(__name__)


def unique_edge_directions(
    hull: List[Point2], config: Optional[MBRConfig] = None
) -> List[Point2]:
    """
    Unit direction of every hull edge (including the closing edge), in hull
    order. A direction whose dot product with an already kept one exceeds
    ``1 - config.direction_tolerance`` is merged into it. Zero-length edges
    have no direction and are skipped.
    """
    config = config or get_config()
    threshold = 1.0 - config.direction_tolerance
    directions: List[Point2] = []
    n = len(hull)
    for i in range(n):
        p1 = hull[i]
        p2 = hull[(i + 1) % n]
        edge = normalize((p2[0] - p1[0], p2[1] - p1[1]))
        if edge == (0.0, 0.0):
            continue
        if any(dot(edge, kept) > threshold for kept in directions):
            continue
        directions.append(edge)
    return directions


def extreme_projections(
    points: List[Point2], axis: Point2
) -> Tuple[float, float]:
    """Minimum and maximum of ``point . axis`` over ``points``."""
    projections = [dot(p, axis) for p in points]
    return min(projections), max(projections)


def candidate_for_direction(
    hull: List[Point2], direction: Point2
) -> CandidateRectangle:
    """
    Bounding rectangle of ``hull`` whose width axis is the unit vector
    ``direction``.
    """
    normal = perpendicular(direction)
    left, right = extreme_projections(hull, direction)
    bottom, top = extreme_projections(hull, normal)

    mid_d = (left + right) / 2.0
    mid_p = (bottom + top) / 2.0
    center = (
        mid_d * direction[0] + mid_p * normal[0],
        mid_d * direction[1] + mid_p * normal[1],
    )
    return CandidateRectangle(
        center=center,
        width=right - left,
        height=top - bottom,
        angle=atan2(direction[1], direction[0]),
    )


def segment_rectangle(p1: Point2, p2: Point2) -> CandidateRectangle:
    """Zero-height rectangle covering the segment from ``p1`` to ``p2``."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    return CandidateRectangle(
        center=((p1[0] + p2[0]) / 2.0, (p1[1] + p2[1]) / 2.0),
        width=hypot(dx, dy),
        height=0.0,
        angle=atan2(dy, dx),
    )


def iter_candidates(
    hull: List[Point2], config: Optional[MBRConfig] = None
) -> Iterator[CandidateRectangle]:
    """Yields the candidate rectangle for each unique edge direction."""
    for direction in unique_edge_directions(hull, config):
        yield candidate_for_direction(hull, direction)


def min_area_rectangle(
    hull: List[Point2], config: Optional[MBRConfig] = None
) -> CandidateRectangle:
    """
    Compute the minimum-area rectangle enclosing a convex hull.

    Only a strictly smaller area replaces the current best, so on ties the
    first direction in hull order wins.

    A 2-vertex hull (collinear points) gives a zero-height rectangle
    spanning the segment. Fewer vertices give a zero rectangle centered on
    the origin.
    """
    if len(hull) == 2:
        return segment_rectangle(hull[0], hull[1])
    if len(hull) < 3:
        return CandidateRectangle()

    best: Optional[CandidateRectangle] = None
    min_area = float("inf")
    for candidate in iter_candidates(hull, config):
        if candidate.area < min_area:
            min_area = candidate.area
            best = candidate

    if best is None:
        return CandidateRectangle()
    logger.debug(
        "Minimum-area rectangle: %.6g x %.6g at angle %.6g rad",
        best.width,
        best.height,
        best.angle,
    )
    return best
