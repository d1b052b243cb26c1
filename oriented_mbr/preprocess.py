import logging
from math import isfinite
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from oriented_mbr.config import MBRConfig, get_config
from oriented_mbr.errors import DegenerateInputError, InsufficientPointsError
from oriented_mbr.vector import Point2, Point3

logger = logging.getLogger(__name__)


class PreparedPoints(NamedTuple):
    """Deduplicated horizontal points centered on the raw centroid."""

    points: List[Point2]
    centroid: Point2
    min_y: float
    max_y: float


def iter_points3(points: Sequence[float]) -> Iterator[Point3]:
    """
    Yields (x, y, z) tuples from a flat coordinate sequence.

    Raises:
        ValueError: If the sequence length is not a multiple of 3.
    """
    if len(points) % 3 != 0:
        raise ValueError(
            f"Flat point sequence length must be a multiple of 3, got {len(points)}"
        )
    for i in range(0, len(points), 3):
        yield (
            float(points[i]),
            float(points[i + 1]),
            float(points[i + 2]),
        )


def flatten_points(points: Iterable[Point3]) -> List[float]:
    """Flattens (x, y, z) tuples into ``[x0, y0, z0, x1, ...]``."""
    flat: List[float] = []
    for x, y, z in points:
        flat.extend((x, y, z))
    return flat


def dedup_key(rx: float, rz: float, tolerance: float) -> Tuple[int, int]:
    """Quantizes a centered point onto the tolerance grid."""
    return (round(rx / tolerance), round(rz / tolerance))


def prepare_points(
    points: Sequence[float], config: Optional[MBRConfig] = None
) -> PreparedPoints:
    """
    Projects a flat 3-D point sequence onto the (x, z) plane, centers it on
    the raw centroid, and drops points that share a tolerance-grid cell.

    The centroid and the vertical extent are taken over every raw point,
    duplicates included. The first point to land in a grid cell is kept,
    so the output order follows the input order.

    Args:
        points: Flat sequence ``[x0, y0, z0, x1, y1, z1, ...]``.
        config: Tolerances to use. Defaults to ``get_config()``.

    Returns:
        PreparedPoints with the centered unique points, the centroid that
        was subtracted, and the minimum and maximum y.

    Raises:
        ValueError: If the sequence length is not a multiple of 3.
        InsufficientPointsError: If fewer than 3 points are supplied.
        DegenerateInputError: If a coordinate is NaN or infinite, or fewer
            than 3 unique points remain.
    """
    config = config or get_config()
    raw = list(iter_points3(points))
    if len(raw) < 3:
        raise InsufficientPointsError(len(raw))
    if not all(isfinite(c) for p in raw for c in p):
        raise DegenerateInputError("Point coordinates must be finite")

    n = len(raw)
    centroid_x = sum(p[0] for p in raw) / n
    centroid_z = sum(p[2] for p in raw) / n
    if not (isfinite(centroid_x) and isfinite(centroid_z)):
        raise DegenerateInputError("Point coordinates overflow the centroid")
    min_y = min(p[1] for p in raw)
    max_y = max(p[1] for p in raw)

    unique: Dict[Tuple[int, int], Point2] = {}
    for x, _, z in raw:
        rx = x - centroid_x
        rz = z - centroid_z
        key = dedup_key(rx, rz, config.dedup_tolerance)
        if key not in unique:
            unique[key] = (rx, rz)

    if len(unique) < 3:
        raise DegenerateInputError(
            f"Not enough unique points for MBR calculation: {len(unique)} "
            f"of {n} remain after deduplication"
        )

    logger.debug(
        "Prepared %d unique points out of %d (centroid=%s, y=[%s, %s])",
        len(unique),
        n,
        (centroid_x, centroid_z),
        min_y,
        max_y,
    )
    return PreparedPoints(
        points=list(unique.values()),
        centroid=(centroid_x, centroid_z),
        min_y=min_y,
        max_y=max_y,
    )
