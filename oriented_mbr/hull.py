from functools import cmp_to_key
from math import atan2, hypot
from typing import List, Optional

from oriented_mbr.config import MBRConfig, get_config
from oriented_mbr.vector import Point2


def cross(o: Point2, a: Point2, b: Point2) -> float:
    """
    Z-component of (a - o) x (b - o). Positive for a counter-clockwise
    (left) turn o -> a -> b, zero when the three points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def find_pivot(points: List[Point2]) -> int:
    """Index of the point with the lowest y, ties broken by the lowest x."""
    pivot_index = 0
    for i in range(1, len(points)):
        x, y = points[i]
        px, py = points[pivot_index]
        if y < py or (y == py and x < px):
            pivot_index = i
    return pivot_index


def graham_scan(
    points: List[Point2], config: Optional[MBRConfig] = None
) -> List[Point2]:
    """
    Compute the convex hull of a set of 2D points (in CCW order) using a
    Graham scan.

    The remaining points are sorted by polar angle around the pivot. Angles
    within ``config.angle_tolerance`` of each other are ordered by distance
    to the pivot, closest first, so interior points sharing a ray are
    popped by the scan. Collinear hull points are dropped, so the result is
    strictly convex.

    Fewer than 3 points are returned unchanged.
    """
    if len(points) < 3:
        return list(points)
    config = config or get_config()
    tolerance = config.angle_tolerance

    pivot_index = find_pivot(points)
    pivot = points[pivot_index]
    px, py = pivot

    def compare(a: Point2, b: Point2) -> int:
        angle_a = atan2(a[1] - py, a[0] - px)
        angle_b = atan2(b[1] - py, b[0] - px)
        if abs(angle_a - angle_b) < tolerance:
            return _sign(
                hypot(a[0] - px, a[1] - py) - hypot(b[0] - px, b[1] - py)
            )
        return _sign(angle_a - angle_b)

    rest = [p for i, p in enumerate(points) if i != pivot_index]
    ordered = [pivot] + sorted(rest, key=cmp_to_key(compare))

    stack: List[Point2] = [ordered[0], ordered[1]]
    for p in ordered[2:]:
        while len(stack) >= 2 and cross(stack[-2], stack[-1], p) <= 0:
            stack.pop()
        stack.append(p)
    return stack


def is_strictly_convex(hull: List[Point2]) -> bool:
    """True when every cyclic vertex triple makes a left turn."""
    n = len(hull)
    if n < 3:
        return False
    return all(
        cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0
        for i in range(n)
    )


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0
