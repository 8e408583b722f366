# domain/geometry/point_comparer.py
from typing import Tuple
import math
from domain.geometry.constants import HASH_GRID_FACTOR
from domain.geometry.point import Point
from domain.geometry.tolerance import ToleranceLike, resolve_tolerance


class PointComparer:
    """
    Equality and hashing for points compared within a tolerance.

    Points that are equal must produce the same hash key. The key snaps each
    coordinate to a grid ten times coarser than the equality tolerance, so
    near-coincident points land in the same bucket and are then checked with
    equals(). Points straddling a grid line can still end up in different
    buckets; this approximation is accepted.
    """

    def __init__(self, tolerance: ToleranceLike = None):
        self.tolerance = resolve_tolerance(tolerance)
        self.step = self.tolerance.equal_point * HASH_GRID_FACTOR

    def equals(self, a: Point, b: Point) -> bool:
        """Evaluate if two points are equal within the tolerance."""
        return a.is_equal_to(b, self.tolerance)

    def snap(self, value: float) -> float:
        """Round a coordinate half-up to the nearest multiple of the grid step."""
        # zero step means exact comparison; non-finite values cannot be floored
        if self.step == 0.0 or not math.isfinite(value):
            return value
        # grid wider than any float: every finite coordinate shares one cell
        if not math.isfinite(self.step):
            return 0.0
        quotient = value / self.step
        if not math.isfinite(quotient):
            return value
        return math.floor(quotient + 0.5) * self.step

    def hash_key(self, point: Point) -> Tuple[float, float]:
        """Get the bucket key of a point."""
        return self.snap(point.x), self.snap(point.y)
