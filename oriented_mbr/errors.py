"""
Errors raised by the MBR pipeline stages.

Stages raise these when the input cannot produce a meaningful box. The
public entry points in ``oriented_mbr.kernel`` catch them, log a warning,
and return a zero-valued result instead.
"""


class MBRError(ValueError):
    """Base error for point sets that cannot produce a bounding box."""

    pass


class InsufficientPointsError(MBRError):
    """Raised when fewer than three raw points are supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Not enough points for MBR calculation: got {count}, need 3"
        )


class DegenerateInputError(MBRError):
    """Raised when the unique points do not span a 2-D area."""

    pass
