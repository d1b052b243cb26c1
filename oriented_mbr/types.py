"""
Typed models for the results of the MBR pipeline.

Points travel through the pipeline as plain tuples; the models here wrap the
values handed back to callers and validate that sizes are never negative.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from oriented_mbr.vector import (
    Point2,
    Point3,
    perpendicular,
    rotate_about_y,
    rotation_matrix_y,
    unit_vector,
)

# Sign pattern of the eight local-frame corners, -z face first.
_CORNER_SIGNS: Tuple[Point3, ...] = (
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
)


class CandidateRectangle(BaseModel):
    """Oriented rectangle in the horizontal (x, z) plane.

    ``angle`` is the rotation of the rectangle's width axis relative to the
    global x-axis, in radians.
    """

    model_config = ConfigDict(frozen=True)

    center: Point2 = (0.0, 0.0)
    width: float = 0.0
    height: float = 0.0
    angle: float = 0.0

    @field_validator("width", "height")
    @classmethod
    def validate_extent(cls, v: float) -> float:
        """Validate that the rectangle extent is not negative.

        Args:
            v: Width or height to validate

        Returns:
            Validated extent

        Raises:
            ValueError: If the extent is below zero
        """
        if v < 0:
            raise ValueError(f"rectangle extent must be >= 0: {v}")
        return v

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> List[Point2]:
        """
        Returns the 4 corners, counter-clockwise, starting from the corner
        at (-width/2, -height/2) in the rectangle's local frame.
        """
        d = unit_vector(self.angle)
        p = perpendicular(d)
        hw = self.width / 2.0
        hh = self.height / 2.0
        cx, cz = self.center
        corners_local = [(-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)]
        return [
            (cx + lx * d[0] + lz * p[0], cz + lx * d[1] + lz * p[1])
            for lx, lz in corners_local
        ]


class AxisAlignedBox(BaseModel):
    """Axis-aligned box given by its minimum and maximum corners."""

    model_config = ConfigDict(frozen=True)

    minimum: Point3
    maximum: Point3

    @property
    def size(self) -> Point3:
        return (
            self.maximum[0] - self.minimum[0],
            self.maximum[1] - self.minimum[1],
            self.maximum[2] - self.minimum[2],
        )


class OrientedBox(BaseModel):
    """Box rotated about the vertical axis.

    Applying ``rotation_y`` to the local box spanned by ``half_sizes`` and
    translating by ``center`` yields the world-space box.
    """

    model_config = ConfigDict(frozen=True)

    center: Point3 = (0.0, 0.0, 0.0)
    half_sizes: Point3 = (0.0, 0.0, 0.0)
    rotation_y: float = 0.0

    @field_validator("half_sizes")
    @classmethod
    def validate_half_sizes(cls, v: Point3) -> Point3:
        """Validate that every half-size component is non-negative.

        Args:
            v: Half-size triple to validate

        Returns:
            Validated half-size triple

        Raises:
            ValueError: If any component is below zero
        """
        if any(component < 0 for component in v):
            raise ValueError(f"half sizes must be >= 0: {v}")
        return v

    @classmethod
    def empty(cls) -> OrientedBox:
        """Zero-valued box returned when no meaningful box exists."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """True when the horizontal footprint has zero area."""
        return self.half_sizes[0] == 0 or self.half_sizes[2] == 0

    @property
    def size(self) -> Point3:
        hx, hy, hz = self.half_sizes
        return (2.0 * hx, 2.0 * hy, 2.0 * hz)

    def rotation_matrix(self) -> List[List[float]]:
        return rotation_matrix_y(self.rotation_y)

    def to_local(self, point: Point3) -> Point3:
        """Maps a world-space point into the box's local frame."""
        offset = (
            point[0] - self.center[0],
            point[1] - self.center[1],
            point[2] - self.center[2],
        )
        return rotate_about_y(offset, -self.rotation_y)

    def corners(self) -> List[Point3]:
        """Returns the 8 world-space corners of the box."""
        hx, hy, hz = self.half_sizes
        cx, cy, cz = self.center
        corners = []
        for sx, sy, sz in _CORNER_SIGNS:
            x, y, z = rotate_about_y((sx * hx, sy * hy, sz * hz), self.rotation_y)
            corners.append((x + cx, y + cy, z + cz))
        return corners

    def to_axis_aligned(self) -> AxisAlignedBox:
        """Axis-aligned box enclosing the 8 rotated corners."""
        corners = self.corners()
        return AxisAlignedBox(
            minimum=(
                min(c[0] for c in corners),
                min(c[1] for c in corners),
                min(c[2] for c in corners),
            ),
            maximum=(
                max(c[0] for c in corners),
                max(c[1] for c in corners),
                max(c[2] for c in corners),
            ),
        )

    def contains(self, point: Point3, tolerance: float = 1e-9) -> bool:
        """
        Checks whether ``point`` lies inside or on the box.

        ``tolerance`` is relative: it is scaled by the magnitude of the box
        coordinates (at least 1), so boundary points of boxes far from the
        origin are not rejected for rounding error.
        """
        scale = max(
            1.0,
            max(abs(c) for c in self.center),
            max(self.half_sizes),
            max(abs(c) for c in point),
        )
        slack = tolerance * scale
        local = self.to_local(point)
        return all(
            abs(coordinate) <= half + slack
            for coordinate, half in zip(local, self.half_sizes)
        )


class MBRResult(BaseModel):
    """Box plus the intermediate hull and rectangle, in world coordinates."""

    model_config = ConfigDict(frozen=True)

    box: OrientedBox = Field(default_factory=OrientedBox)
    hull: List[Point2] = Field(default_factory=list)
    rectangle: Optional[CandidateRectangle] = None
