from math import cos, hypot, sin
from typing import List, Tuple

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]


def dot(a: Point2, b: Point2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def normalize(v: Point2) -> Point2:
    """Returns the unit vector of ``v``, or ``(0.0, 0.0)`` for a zero vector."""
    length = hypot(v[0], v[1])
    if length == 0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)


def perpendicular(v: Point2) -> Point2:
    """Rotates ``v`` by 90 degrees counter-clockwise."""
    return (-v[1], v[0])


def rotation_matrix_y(angle: float) -> List[List[float]]:
    """
    Returns the 3x3 matrix rotating by ``angle`` radians about the +Y axis:

        [ cos  0  sin]
        [  0   1   0 ]
        [-sin  0  cos]
    """
    c = cos(angle)
    s = sin(angle)
    return [
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ]


def rotate_about_y(point: Point3, angle: float) -> Point3:
    x, y, z = point
    c = cos(angle)
    s = sin(angle)
    return (c * x + s * z, y, -s * x + c * z)


def unit_vector(angle: float) -> Point2:
    """Unit direction at ``angle`` radians from the +x axis."""
    return (cos(angle), sin(angle))
