"""
Public entry points for the oriented MBR pipeline.

Point sets flow through preprocess -> hull -> calipers -> box. Collinear
points give a box of zero depth along their line. Point sets with fewer
than 3 distinct finite points are logged and answered with an empty result
rather than an exception.
"""

import logging
from typing import List, Optional, Sequence

from oriented_mbr.box import reconstruct_box
from oriented_mbr.calipers import min_area_rectangle
from oriented_mbr.config import MBRConfig, get_config
from oriented_mbr.errors import MBRError
from oriented_mbr.hull import graham_scan
from oriented_mbr.preprocess import PreparedPoints, prepare_points
from oriented_mbr.types import CandidateRectangle, MBRResult, OrientedBox
from oriented_mbr.vector import Point2

logger = logging.getLogger(__name__)


def _centered_hull(
    prepared: PreparedPoints, config: MBRConfig
) -> List[Point2]:
    hull = graham_scan(prepared.points, config)
    if len(hull) < 3:
        # Collinear points: the hull is the segment between the extremes.
        logger.warning(
            "Points are collinear: hull has %d vertices", len(hull)
        )
    return hull


def _to_world(points: List[Point2], centroid: Point2) -> List[Point2]:
    return [(x + centroid[0], z + centroid[1]) for x, z in points]


def compute_mbr(
    points: Sequence[float], config: Optional[MBRConfig] = None
) -> MBRResult:
    """
    Runs the full pipeline and returns the oriented box together with the
    convex hull and the winning rectangle, both in world (x, z) coordinates.

    Args:
        points: Flat sequence ``[x0, y0, z0, x1, y1, z1, ...]``.
        config: Tolerances to use. Defaults to ``get_config()``.

    Returns:
        MBRResult. Collinear points give a box of zero depth along their
        line. When fewer than 3 distinct points exist the result holds an
        empty box, an empty hull and no rectangle.

    Raises:
        ValueError: If the sequence length is not a multiple of 3.
    """
    config = config or get_config()
    try:
        prepared = prepare_points(points, config)
        hull = _centered_hull(prepared, config)
    except MBRError as e:
        logger.warning("Skipping MBR calculation: %s", e)
        return MBRResult()

    rectangle = min_area_rectangle(hull, config)
    box = reconstruct_box(
        rectangle, prepared.centroid, prepared.min_y, prepared.max_y
    )
    cx, cz = rectangle.center
    world_rectangle = CandidateRectangle(
        center=(cx + prepared.centroid[0], cz + prepared.centroid[1]),
        width=rectangle.width,
        height=rectangle.height,
        angle=rectangle.angle,
    )
    return MBRResult(
        box=box,
        hull=_to_world(hull, prepared.centroid),
        rectangle=world_rectangle,
    )


def compute_oriented_box(
    points: Sequence[float], config: Optional[MBRConfig] = None
) -> OrientedBox:
    """
    Minimum bounding rectangle of the points' (x, z) projection, extruded
    over their y extent. Returns ``OrientedBox.empty()`` when fewer than 3
    distinct points exist.
    """
    return compute_mbr(points, config).box


def compute_hull(
    points: Sequence[float], config: Optional[MBRConfig] = None
) -> List[Point2]:
    """
    Counter-clockwise convex hull of the points' (x, z) projection, in world
    coordinates. Collinear points give the 2 endpoints of their segment;
    fewer than 3 distinct points give an empty list.
    """
    config = config or get_config()
    try:
        prepared = prepare_points(points, config)
        hull = _centered_hull(prepared, config)
    except MBRError as e:
        logger.warning("Skipping hull calculation: %s", e)
        return []
    return _to_world(hull, prepared.centroid)
