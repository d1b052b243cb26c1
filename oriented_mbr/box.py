from typing import List

from oriented_mbr.types import CandidateRectangle, OrientedBox
from oriented_mbr.vector import Point2, Point3


def reconstruct_box(
    rectangle: CandidateRectangle,
    centroid: Point2,
    min_y: float,
    max_y: float,
) -> OrientedBox:
    """
    Extrudes a rectangle found in centroid-relative (x, z) coordinates over
    [min_y, max_y] and moves it back to world coordinates.

    The rectangle's width runs along the box's local x-axis and its height
    along the local z-axis. ``rotation_y`` is the negated rectangle angle:
    a rotation of -angle about +Y carries local +x onto
    (cos(angle), sin(angle)) in the (x, z) plane.
    """
    cx, cz = rectangle.center
    return OrientedBox(
        center=(cx + centroid[0], (min_y + max_y) * 0.5, cz + centroid[1]),
        half_sizes=(
            rectangle.width * 0.5,
            (max_y - min_y) * 0.5,
            rectangle.height * 0.5,
        ),
        rotation_y=-rectangle.angle,
    )


def box_corners(
    center: Point3, half_sizes: Point3, rotation_y: float
) -> List[Point3]:
    """
    Given a box defined by center, half sizes, and rotation about +Y (in
    radians), compute its 8 world-space corners.
    """
    return OrientedBox(
        center=center, half_sizes=half_sizes, rotation_y=rotation_y
    ).corners()
