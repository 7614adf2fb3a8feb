"""Domain models for planegeom."""

from planegeom.domain.circle import Circle
from planegeom.domain.linear_path import LinearPath, SmoothingMode
from planegeom.domain.mixed_path import MixedPath, MixedPathPoint
from planegeom.domain.rectangle import Rectangle
from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.triangle import Triangle
from planegeom.domain.vector import Vector2

__all__ = [
    "Circle",
    "GeometricShape",
    "LineSegment",
    "LinearPath",
    "MixedPath",
    "MixedPathPoint",
    "Rectangle",
    "ShapeKind",
    "SmoothingMode",
    "Triangle",
    "Vector2",
]
