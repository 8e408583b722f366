# domain/geometry/point_collection.py
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from pydantic import Field, field_validator
from domain.geometry.errors import InvalidArgumentError
from domain.geometry.point import Point, PointLike, as_point
from domain.geometry.point_comparer import PointComparer
from domain.geometry.tolerance import ToleranceLike, resolve_tolerance
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def remove_duplicates(points: Optional[Iterable[PointLike]],
                      tolerance: ToleranceLike = None) -> List[Point]:
    """
    Remove duplicated points using the specified tolerance.

    The first occurrence of each point is kept and the relative order of the
    kept points is preserved.

    Args:
        points: The points to filter, as Points or (x, y) pairs
        tolerance: Tolerance used in equality comparison. If None, uses the
                   global tolerance.

    Returns:
        A list of distinct points

    Raises:
        InvalidArgumentError: If points is None
    """
    if points is None:
        raise InvalidArgumentError("points")

    comparer = PointComparer(tolerance)
    buckets: Dict[Tuple[float, float], List[Point]] = {}
    distinct: List[Point] = []
    count = 0

    for item in points:
        count += 1
        point = as_point(item)
        bucket = buckets.setdefault(comparer.hash_key(point), [])
        if any(comparer.equals(point, kept) for kept in bucket):
            continue
        bucket.append(point)
        distinct.append(point)

    logger.debug(f"Removed {count - len(distinct)} duplicate points out of {count} "
                 f"(equal_point={comparer.tolerance.equal_point})")
    return distinct


def contains(points: Optional[Iterable[PointLike]], point: PointLike,
             tolerance: ToleranceLike = None) -> bool:
    """
    Evaluate if the collection contains a point using the specified tolerance.

    Args:
        points: The points to search
        point: Point to search for
        tolerance: Tolerance used in equality comparison. If None, uses the
                   global tolerance.

    Returns:
        True if a point equal to ``point`` is found

    Raises:
        InvalidArgumentError: If points is None
    """
    if points is None:
        raise InvalidArgumentError("points")

    tol = resolve_tolerance(tolerance)
    target = as_point(point)
    for item in points:
        if target.is_equal_to(as_point(item), tol):
            return True
    return False


class PointCollection(ImmutableModel):
    """
    An ordered, immutable collection of 2D points.

    Provides tolerance-aware deduplication and membership on top of a plain
    list of points. Membership via ``in`` uses the global tolerance.
    """
    points: List[Point] = Field(default_factory=list, description="Points in insertion order")

    @field_validator("points", mode="before")
    @classmethod
    def coerce_points(cls, value):
        """Accept (x, y) pairs as well as Point objects."""
        if value is None:
            raise ValueError("points cannot be None")
        return [as_point(item) for item in value]

    def remove_duplicates(self, tolerance: ToleranceLike = None) -> "PointCollection":
        """Return a new collection without duplicated points."""
        return PointCollection(points=remove_duplicates(self.points, tolerance))

    def contains(self, point: PointLike, tolerance: ToleranceLike = None) -> bool:
        """Evaluate if the collection contains ``point`` within tolerance."""
        return contains(self.points, point, tolerance)

    def __contains__(self, point: PointLike) -> bool:
        return self.contains(point)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __str__(self) -> str:
        points_str = ", ".join(str(p) for p in self.points)
        return f"PointCollection([{points_str}])"
