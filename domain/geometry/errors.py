# domain/geometry/errors.py
"""Geometry module exceptions."""


class GeometryError(Exception):
    """Base exception for geometry operations."""

    pass


class InvalidArgumentError(GeometryError, ValueError):
    """A required argument was missing or unusable."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"{name} cannot be None")
