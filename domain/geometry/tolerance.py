# domain/geometry/tolerance.py
import logging
import math
from typing import Union

from pydantic import Field, field_validator

from domain.geometry.constants import EQUAL_POINT, EQUAL_VECTOR
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Tolerance(ImmutableModel):
    """
    Tolerance values used when comparing geometric entities.

    Points are considered equal when each coordinate differs by at most
    ``equal_point``.
    """
    equal_point: float = Field(default=EQUAL_POINT, description="Point equality tolerance")
    equal_vector: float = Field(default=EQUAL_VECTOR, description="Vector equality tolerance")

    @field_validator("equal_point", "equal_vector")
    @classmethod
    def validate_tolerance(cls, value: float) -> float:
        """Validate that tolerance values are finite and non-negative."""
        if not math.isfinite(value):
            raise ValueError(f"Tolerance must be a finite number, got {value}")
        if value < 0:
            raise ValueError(f"Tolerance cannot be negative, got {value}")
        return value

    @classmethod
    def global_tolerance(cls) -> "Tolerance":
        """Get the process-wide default tolerance."""
        return get_global_tolerance()

    def __str__(self) -> str:
        return f"Tolerance(equal_point={self.equal_point}, equal_vector={self.equal_vector})"


_global_tolerance = Tolerance()

ToleranceLike = Union[Tolerance, float, int, None]


def get_global_tolerance() -> Tolerance:
    """Return the process-wide default tolerance."""
    return _global_tolerance


def set_global_tolerance(tolerance: Tolerance) -> Tolerance:
    """
    Replace the process-wide default tolerance.

    Args:
        tolerance: The new default tolerance

    Returns:
        The previous default, so callers can restore it
    """
    global _global_tolerance
    if not isinstance(tolerance, Tolerance):
        raise TypeError(f"Expected Tolerance object, got {type(tolerance)}")

    previous = _global_tolerance
    _global_tolerance = tolerance
    logger.info(f"Global tolerance changed from {previous} to {tolerance}")
    return previous


def resolve_tolerance(tolerance: ToleranceLike) -> Tolerance:
    """
    Normalize a tolerance argument.

    None selects the global default, a bare number is read as ``equal_point``.
    """
    if tolerance is None:
        return get_global_tolerance()
    if isinstance(tolerance, Tolerance):
        return tolerance
    if isinstance(tolerance, bool):
        raise TypeError("Tolerance cannot be a boolean")
    if isinstance(tolerance, (int, float)):
        return Tolerance(equal_point=float(tolerance))
    raise TypeError(f"Expected Tolerance or number, got {type(tolerance)}")
