"""Circle shape."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2
from planegeom.exceptions import GeometryError
from planegeom.tolerances import EPSILON

if TYPE_CHECKING:
    from planegeom.domain.rectangle import Rectangle

# Control point distance for a cubic quarter-circle approximation.
KAPPA = 4 * (math.sqrt(2) - 1) / 3


@dataclass
class Circle(GeometricShape):
    """A circle given by center and radius.

    Attributes:
        center: Center point
        radius: Radius (non-negative for drawable circles)
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    center: Vector2
    radius: float = 0.0

    @classmethod
    def from_coordinates(cls, cx: float, cy: float, radius: float) -> "Circle":
        return cls(Vector2(cx, cy), radius)

    @classmethod
    def from_3_points(cls, p0: Vector2, p1: Vector2, p2: Vector2) -> "Circle | None":
        """Circumscribed circle through three points.

        Collinearity is tested on the sine of the angle at p0, so the result
        does not depend on the coordinate scale.

        Returns:
            The circle, or None for collinear or coincident points
        """
        ab = p1 - p0
        ac = p2 - p0
        cross = ab.cross(ac)
        lengths = ab.length * ac.length
        if lengths == 0 or abs(cross) / lengths < EPSILON:
            return None

        d = 2 * cross
        ab_sq = ab.squared_length
        ac_sq = ac.squared_length
        ux = (ac.y * ab_sq - ab.y * ac_sq) / d
        uy = (ab.x * ac_sq - ac.x * ab_sq) / d
        return cls(Vector2(p0.x + ux, p0.y + uy), math.hypot(ux, uy))

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def get_point(self, angle: float) -> Vector2:
        """Point on the circle at the given angle in radians."""
        return self.center.add_polar(angle, self.radius)

    def contains_point(self, point: Vector2) -> bool:
        return self.center.squared_distance_to(point) <= self.radius * self.radius

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "Circle":
        """Scale uniformly around center (the circle center by default).

        Raises:
            GeometryError: If the factors differ in magnitude, which would
                turn the circle into an ellipse
        """
        if abs(factor_x) != abs(factor_y):
            raise GeometryError(
                f"Cannot scale a circle non-uniformly ({factor_x} x {factor_y})"
            )
        if center is not None:
            self.center = (self.center - center).multiply_xy(factor_x, factor_y) + center
        self.radius *= abs(factor_x)
        return self

    def clone(self, deep: bool = False) -> "Circle":
        return Circle(self.center, self.radius)

    def get_bounding_rect(self) -> "Rectangle":
        from planegeom.domain.rectangle import Rectangle

        return Rectangle(
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.diameter,
            self.diameter,
        )

    def draw(self, pen: AbstractPen) -> None:
        """Draw as four cubic quarter arcs, counter-clockwise from angle 0."""
        if math.isnan(self.radius) or self.radius < 0:
            return
        cx, cy = self.center.x, self.center.y
        r = self.radius
        k = r * KAPPA
        pen.moveTo((cx + r, cy))
        pen.curveTo((cx + r, cy + k), (cx + k, cy + r), (cx, cy + r))
        pen.curveTo((cx - k, cy + r), (cx - r, cy + k), (cx - r, cy))
        pen.curveTo((cx - r, cy - k), (cx - k, cy - r), (cx, cy - r))
        pen.curveTo((cx + k, cy - r), (cx + r, cy - k), (cx + r, cy))
        pen.closePath()
