# domain/geometry/__init__.py
"""
Tolerance-based equality, deduplication and membership for 2D points.
"""
from domain.geometry.errors import GeometryError, InvalidArgumentError
from domain.geometry.tolerance import (
    Tolerance,
    get_global_tolerance,
    set_global_tolerance,
    resolve_tolerance,
)
from domain.geometry.point import Point, as_point
from domain.geometry.point_comparer import PointComparer
from domain.geometry.point_collection import PointCollection, remove_duplicates, contains

__all__ = [
    'GeometryError',
    'InvalidArgumentError',
    'Tolerance',
    'get_global_tolerance',
    'set_global_tolerance',
    'resolve_tolerance',
    'Point',
    'as_point',
    'PointComparer',
    'PointCollection',
    'remove_duplicates',
    'contains',
]
