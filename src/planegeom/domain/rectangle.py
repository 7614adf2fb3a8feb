"""Axis-aligned rectangle."""

from dataclasses import dataclass
from typing import ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2


@dataclass
class Rectangle(GeometricShape):
    """Axis-aligned box.

    Width and height are never negative: construction and scaling shift the
    origin and take the absolute extent instead.

    Attributes:
        x: Left edge
        y: Top edge (smallest y)
        width: Horizontal extent
        height: Vertical extent
    """

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self._fix_values()

    @classmethod
    def from_points(cls, p1: Vector2, p2: Vector2) -> "Rectangle":
        """Rectangle spanned by two opposite corners."""
        return cls(p1.x, p1.y, p2.x - p1.x, p2.y - p1.y)

    def _fix_values(self) -> None:
        if self.width < 0:
            self.x += self.width
            self.width = -self.width
        if self.height < 0:
            self.y += self.height
            self.height = -self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_empty(self) -> bool:
        """A rectangle without area acts as the empty set."""
        return self.width == 0 or self.height == 0

    def corners(self) -> list[Vector2]:
        """Corners in drawing order starting at the origin corner."""
        return [
            Vector2(self.x, self.y),
            Vector2(self.right, self.y),
            Vector2(self.right, self.bottom),
            Vector2(self.x, self.bottom),
        ]

    def edges(self) -> list[LineSegment]:
        corners = self.corners()
        return [LineSegment(corners[i], corners[(i + 1) % 4]) for i in range(4)]

    def contains_point(self, point: Vector2) -> bool:
        """Inclusive containment test."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def union(self, other: "Rectangle") -> "Rectangle":
        """Smallest rectangle containing both; empty operands are ignored."""
        if self.is_empty():
            return other.clone()
        if other.is_empty():
            return self.clone()
        min_x = min(self.x, other.x)
        min_y = min(self.y, other.y)
        max_x = max(self.right, other.right)
        max_y = max(self.bottom, other.bottom)
        return Rectangle(min_x, min_y, max_x - min_x, max_y - min_y)

    def intersection(self, other: "Rectangle") -> "Rectangle":
        """Overlap of both rectangles.

        Returns a zero-area rectangle at the origin when either operand is
        empty or the rectangles do not overlap; check is_empty() rather than
        comparing against None.
        """
        if self.is_empty() or other.is_empty():
            return Rectangle()
        min_x = max(self.x, other.x)
        min_y = max(self.y, other.y)
        max_x = min(self.right, other.right)
        max_y = min(self.bottom, other.bottom)
        if max_x <= min_x or max_y <= min_y:
            return Rectangle()
        return Rectangle(min_x, min_y, max_x - min_x, max_y - min_y)

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "Rectangle":
        if center is None:
            center = self.center
        origin = (Vector2(self.x, self.y) - center).multiply_xy(factor_x, factor_y) + center
        self.x = origin.x
        self.y = origin.y
        self.width *= factor_x
        self.height *= factor_y
        self._fix_values()
        return self

    def clone(self, deep: bool = False) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width, self.height)

    def get_bounding_rect(self) -> "Rectangle":
        return self.clone()

    def draw(self, pen: AbstractPen) -> None:
        corners = self.corners()
        pen.moveTo(corners[0].to_tuple())
        for corner in corners[1:]:
            pen.lineTo(corner.to_tuple())
        pen.closePath()
