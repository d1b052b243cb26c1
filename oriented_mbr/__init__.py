"""
Oriented MBR - minimum bounding rectangle of a 3-D point set.

The points are projected onto the horizontal (x, z) plane, their convex
hull is built with a Graham scan, and rotating calipers find the
minimum-area rectangle. The rectangle is extruded over the points' y extent
into a box rotated about the vertical axis.

Example:
    ```python
    from oriented_mbr import compute_oriented_box

    box = compute_oriented_box([0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1])
    box.half_sizes  # (0.5, 0.0, 0.5)
    ```
"""

from oriented_mbr.box import box_corners, reconstruct_box
from oriented_mbr.calipers import (
    candidate_for_direction,
    iter_candidates,
    min_area_rectangle,
    segment_rectangle,
    unique_edge_directions,
)
from oriented_mbr.config import MBRConfig, get_config
from oriented_mbr.errors import (
    DegenerateInputError,
    InsufficientPointsError,
    MBRError,
)
from oriented_mbr.hull import cross, graham_scan, is_strictly_convex
from oriented_mbr.kernel import compute_hull, compute_mbr, compute_oriented_box
from oriented_mbr.preprocess import (
    PreparedPoints,
    flatten_points,
    iter_points3,
    prepare_points,
)
from oriented_mbr.types import (
    AxisAlignedBox,
    CandidateRectangle,
    MBRResult,
    OrientedBox,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "compute_oriented_box",
    "compute_hull",
    "compute_mbr",
    "MBRConfig",
    "get_config",
    # Pipeline stages
    "prepare_points",
    "PreparedPoints",
    "iter_points3",
    "flatten_points",
    "graham_scan",
    "cross",
    "is_strictly_convex",
    "unique_edge_directions",
    "candidate_for_direction",
    "iter_candidates",
    "min_area_rectangle",
    "segment_rectangle",
    "reconstruct_box",
    "box_corners",
    # Typed models
    "CandidateRectangle",
    "OrientedBox",
    "AxisAlignedBox",
    "MBRResult",
    # Errors
    "MBRError",
    "InsufficientPointsError",
    "DegenerateInputError",
]
