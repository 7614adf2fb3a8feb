"""Triangle shape."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.circle import Circle
from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2

if TYPE_CHECKING:
    from planegeom.domain.rectangle import Rectangle


@dataclass
class Triangle(GeometricShape):
    """A triangle given by its three corners.

    Attributes:
        p1: First corner
        p2: Second corner
        p3: Third corner
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    p1: Vector2
    p2: Vector2
    p3: Vector2

    @classmethod
    def from_coordinates(
        cls, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> "Triangle":
        return cls(Vector2(x1, y1), Vector2(x2, y2), Vector2(x3, y3))

    @classmethod
    def equilateral(cls, pa: Vector2, pb: Vector2, clockwise: bool = False) -> "Triangle":
        """Equilateral triangle erected on the edge pa-pb."""
        turn = -math.pi / 3 if clockwise else math.pi / 3
        pc = pa.add_polar(pa.angle_to(pb) + turn, pa.distance_to(pb))
        return cls(pa, pb, pc)

    def get_side(self, index: int) -> LineSegment:
        """Side 0 is p1-p2, side 1 is p1-p3, side 2 is p2-p3."""
        if index == 0:
            return LineSegment(self.p1, self.p2)
        if index == 1:
            return LineSegment(self.p1, self.p3)
        if index == 2:
            return LineSegment(self.p2, self.p3)
        raise IndexError(f"Triangle side index out of range: {index}")

    def get_side_length(self, index: int) -> float:
        return self.get_side(index).length

    def edges(self) -> list[LineSegment]:
        """Closed outline p1 -> p2 -> p3 -> p1."""
        return [
            LineSegment(self.p1, self.p2),
            LineSegment(self.p2, self.p3),
            LineSegment(self.p3, self.p1),
        ]

    @property
    def centroid(self) -> Vector2:
        return (self.p1 + self.p2 + self.p3) / 3

    @property
    def signed_area(self) -> float:
        return 0.5 * self.p3.is_left(self.p1, self.p2)

    def incircle_center(self) -> Vector2:
        a = self.p2.distance_to(self.p3)
        b = self.p1.distance_to(self.p3)
        c = self.p2.distance_to(self.p1)
        total = a + b + c
        if total == 0:
            return self.p1
        return Vector2(
            (a * self.p1.x + b * self.p2.x + c * self.p3.x) / total,
            (a * self.p1.y + b * self.p2.y + c * self.p3.y) / total,
        )

    def get_bounding_circle(self) -> Circle | None:
        """Circumscribed circle, or None for a degenerate triangle."""
        return Circle.from_3_points(self.p1, self.p2, self.p3)

    def get_touching_corner_circles(self) -> list[Circle]:
        """Three mutually tangent circles centered on the corners."""
        a = self.get_side_length(0)
        b = self.get_side_length(1)
        c = self.get_side_length(2)
        return [
            Circle(self.p1, 0.5 * (b - c + a)),
            Circle(self.p2, 0.5 * (c - b + a)),
            Circle(self.p3, 0.5 * (b - a + c)),
        ]

    def contains_point(self, point: Vector2) -> bool:
        d1 = point.is_left(self.p1, self.p2)
        d2 = point.is_left(self.p2, self.p3)
        d3 = point.is_left(self.p3, self.p1)
        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive)

    def translate(self, offset: Vector2) -> "Triangle":
        self.p1 = self.p1 + offset
        self.p2 = self.p2 + offset
        self.p3 = self.p3 + offset
        return self

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "Triangle":
        if center is None:
            center = self.incircle_center()
        self.p1 = (self.p1 - center).multiply_xy(factor_x, factor_y) + center
        self.p2 = (self.p2 - center).multiply_xy(factor_x, factor_y) + center
        self.p3 = (self.p3 - center).multiply_xy(factor_x, factor_y) + center
        return self

    def clone(self, deep: bool = False) -> "Triangle":
        return Triangle(self.p1, self.p2, self.p3)

    def get_bounding_rect(self) -> "Rectangle":
        from planegeom.domain.rectangle import Rectangle

        xs = (self.p1.x, self.p2.x, self.p3.x)
        ys = (self.p1.y, self.p2.y, self.p3.y)
        return Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, pen: AbstractPen) -> None:
        pen.moveTo(self.p1.to_tuple())
        pen.lineTo(self.p2.to_tuple())
        pen.lineTo(self.p3.to_tuple())
        pen.closePath()
