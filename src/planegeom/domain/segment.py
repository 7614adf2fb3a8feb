"""Line segment primitive."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2

if TYPE_CHECKING:
    from planegeom.domain.rectangle import Rectangle


@dataclass
class LineSegment(GeometricShape):
    """A straight segment between two endpoints.

    Zero-length segments are legal; algorithms that need a direction treat
    them as degenerate and return reduced or empty results.

    Attributes:
        p1: Start point
        p2: End point
    """

    kind: ClassVar[ShapeKind] = ShapeKind.LINE_SEGMENT

    p1: Vector2
    p2: Vector2

    @classmethod
    def from_coordinates(cls, x1: float, y1: float, x2: float, y2: float) -> "LineSegment":
        return cls(Vector2(x1, y1), Vector2(x2, y2))

    @classmethod
    def from_points(cls, p1: Vector2, p2: Vector2) -> "LineSegment":
        return cls(Vector2(p1.x, p1.y), Vector2(p2.x, p2.y))

    @classmethod
    def from_point_angle_length(
        cls, point: Vector2, angle: float, length: float, centered: bool = False
    ) -> "LineSegment":
        """Segment of the given length and direction.

        Args:
            point: Start point, or the midpoint when centered is True
            angle: Direction in radians
            length: Segment length
            centered: Whether point is the segment midpoint

        Returns:
            New LineSegment
        """
        if not centered:
            return cls(point, point.add_polar(angle, length))
        return cls(point.add_polar(angle, -length * 0.5), point.add_polar(angle, length * 0.5))

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    @property
    def angle(self) -> float:
        return self.p1.angle_to(self.p2)

    @property
    def midpoint(self) -> Vector2:
        return self.p1.lerp(self.p2, 0.5)

    def get_point(self, t: float) -> Vector2:
        """Point at parameter t, where 0 is p1 and 1 is p2."""
        return self.p1.lerp(self.p2, t)

    def get_normal(self) -> Vector2:
        return Vector2.between(self.p1, self.p2).normal()

    def is_left(self, point: Vector2) -> float:
        return point.is_left(self.p1, self.p2)

    def get_slope(self) -> float:
        """Slope dy/dx; infinite for vertical segments."""
        dx = self.p2.x - self.p1.x
        if dx == 0:
            return math.inf if self.p2.y >= self.p1.y else -math.inf
        return (self.p2.y - self.p1.y) / dx

    def get_intercept(self) -> float:
        return self.p1.y - self.get_slope() * self.p1.x

    def get_closest_point_on_line(self, point: Vector2) -> Vector2:
        """Projection of point onto the infinite line through the segment."""
        dx = self.p2.x - self.p1.x
        dy = self.p2.y - self.p1.y
        squared = dx * dx + dy * dy
        if squared == 0:
            return self.p1
        t = (point.x - self.p1.x) * dx + (point.y - self.p1.y) * dy
        return self.p1.lerp(self.p2, t / squared)

    def get_closest_point(self, point: Vector2) -> Vector2:
        """Closest point on the segment itself (clamped to the endpoints)."""
        dx = self.p2.x - self.p1.x
        dy = self.p2.y - self.p1.y
        t = (point.x - self.p1.x) * dx + (point.y - self.p1.y) * dy
        if t <= 0:
            return self.p1
        squared = dx * dx + dy * dy
        if t >= squared:
            return self.p2
        return self.p1.lerp(self.p2, t / squared)

    def squared_distance_to_point(self, point: Vector2) -> float:
        return point.squared_distance_to(self.get_closest_point(point))

    def get_mirror_point(self, point: Vector2) -> Vector2:
        """Reflection of point across the infinite line through the segment."""
        return point.mirror(self.get_closest_point_on_line(point))

    def get_parallel(self, distance: float) -> "LineSegment":
        """Segment offset sideways by distance along the normal."""
        offset = self.get_normal() * distance
        return LineSegment(self.p1 + offset, self.p2 + offset)

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "LineSegment":
        if center is None:
            center = self.midpoint
        self.p1 = (self.p1 - center).multiply_xy(factor_x, factor_y) + center
        self.p2 = (self.p2 - center).multiply_xy(factor_x, factor_y) + center
        return self

    def clone(self, deep: bool = False) -> "LineSegment":
        if deep:
            return LineSegment.from_points(self.p1, self.p2)
        return LineSegment(self.p1, self.p2)

    def get_bounding_rect(self) -> "Rectangle":
        from planegeom.domain.rectangle import Rectangle

        return Rectangle.from_points(self.p1, self.p2)

    def draw(self, pen: AbstractPen) -> None:
        pen.moveTo(self.p1.to_tuple())
        pen.lineTo(self.p2.to_tuple())
        pen.endPath()
