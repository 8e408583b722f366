# domain/geometry/point.py
from typing import Sequence, Tuple, Union
from pydantic import Field
import math
from domain.geometry.tolerance import ToleranceLike, resolve_tolerance
from utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Coordinates are plain floats. Non-finite values are accepted; a point
    with a NaN coordinate never compares equal to anything, itself included.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @classmethod
    def from_tuple(cls, coords: Sequence[float]) -> "Point":
        """Create a point from an (x, y) pair."""
        if len(coords) != 2:
            raise ValueError(f"Expected an (x, y) pair, got {len(coords)} values")
        return cls(x=coords[0], y=coords[1])

    def as_tuple(self) -> Tuple[float, float]:
        """Return the coordinates as an (x, y) tuple."""
        return self.x, self.y

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def is_equal_to(self, other: "Point", tolerance: ToleranceLike = None) -> bool:
        """
        Check if this point equals another point within the specified tolerance.

        Args:
            other: The point to compare with
            tolerance: Tolerance (or bare equal_point value) to compare with.
                      If None, uses the global tolerance.

        Returns:
            True if both coordinate differences are within tolerance.equal_point
        """
        eps = resolve_tolerance(tolerance).equal_point
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()


PointLike = Union[Point, Sequence[float]]


def as_point(value: PointLike) -> Point:
    """Coerce an (x, y) pair to a Point; Points are returned unchanged."""
    if isinstance(value, Point):
        return value
    return Point.from_tuple(value)
