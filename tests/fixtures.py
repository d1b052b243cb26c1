"""Shared sample data and helpers for oriented_mbr tests."""

from math import atan2, cos, pi, sin
from random import Random
from typing import List, Tuple

from oriented_mbr.preprocess import flatten_points
from oriented_mbr.vector import Point2, Point3, rotate_about_y

# Irregular pentagon in (x, z) with an interior point; y varies per vertex.
IRREGULAR_POINTS: List[Point3] = [
    (0.0, 0.0, 0.0),
    (6.0, 1.0, 0.5),
    (7.0, -0.5, 2.0),
    (1.0, 2.0, 1.8),
    (-0.5, 0.3, 1.0),
    (2.0, 0.7, 1.0),
]


def rotated_rectangle_points(
    width: float,
    depth: float,
    rotation_y: float,
    center: Point3 = (0.0, 0.0, 0.0),
    jitter: float = 0.0,
) -> List[float]:
    """
    Corners and edge midpoints of a width x depth rectangle rotated about
    +Y, with y alternating between 0 and ``jitter``.
    """
    hw = width / 2.0
    hd = depth / 2.0
    local = [
        (-hw, -hd),
        (0.0, -hd),
        (hw, -hd),
        (hw, 0.0),
        (hw, hd),
        (0.0, hd),
        (-hw, hd),
        (-hw, 0.0),
    ]
    points = []
    for i, (x, z) in enumerate(local):
        y = jitter if i % 2 else 0.0
        rx, ry, rz = rotate_about_y((x, y, z), rotation_y)
        points.append((rx + center[0], ry + center[1], rz + center[2]))
    return flatten_points(points)


def random_points(
    count: int, seed: int = 42, spread: float = 10.0
) -> List[Point3]:
    rng = Random(seed)
    return [
        (
            rng.uniform(-spread, spread),
            rng.uniform(-1.0, 1.0),
            rng.uniform(-spread / 3.0, spread / 3.0),
        )
        for _ in range(count)
    ]


def angle_difference(a: float, b: float, period: float = pi / 2.0) -> float:
    """Smallest distance between two angles modulo ``period``."""
    delta = (a - b) % period
    return min(delta, period - delta)


def brute_force_min_area(hull: List[Point2]) -> float:
    """Minimum edge-aligned bounding area, trying every hull edge."""
    n = len(hull)
    best = float("inf")
    for i in range(n):
        p1 = hull[i]
        p2 = hull[(i + 1) % n]
        theta = -atan2(p2[1] - p1[1], p2[0] - p1[0])
        cos_t = cos(theta)
        sin_t = sin(theta)
        xs = [cos_t * px - sin_t * py for (px, py) in hull]
        ys = [sin_t * px + cos_t * py for (px, py) in hull]
        area = (max(xs) - min(xs)) * (max(ys) - min(ys))
        best = min(best, area)
    return best


def swept_areas(
    points: List[Point2], steps: int = 720
) -> List[Tuple[float, float]]:
    """Bounding area of ``points`` at evenly spaced angles over [0, pi)."""
    results = []
    for k in range(steps):
        angle = pi * k / steps
        d = (cos(angle), sin(angle))
        p = (-d[1], d[0])
        along = [x * d[0] + z * d[1] for x, z in points]
        across = [x * p[0] + z * p[1] for x, z in points]
        area = (max(along) - min(along)) * (max(across) - min(across))
        results.append((angle, area))
    return results
