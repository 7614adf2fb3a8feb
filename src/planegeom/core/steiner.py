"""Steiner chain layout by circle inversion.

A ring of n equal circles, each tangent to its neighbors and to two
concentric circles, is built analytically for a unit parent. Inverting
three points of every circle in a circle centered off the common center
turns the symmetric ring into a general Steiner chain: inversion maps
circles to circles and keeps tangency. The result is scaled so that its
outer circle coincides with the parent circle.
"""

import logging
import math

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.circle import Circle
from planegeom.domain.vector import Vector2
from planegeom.exceptions import SteinerConfigurationError
from planegeom.tolerances import MIN_POSITIVE

logger = logging.getLogger(__name__)

MIN_CIRCLE_COUNT = 3


def max_ratio(circle_count: int) -> float:
    """Exclusive upper bound for |ratio| with the given number of circles.

    The inversion center must lie inside the inner circle of the unit
    ring, whose radius is 2 * (1 - s) / (1 + s) with s = sin(pi / n).
    """
    s = math.sin(math.pi / max(MIN_CIRCLE_COUNT, circle_count))
    return 2 * (1 - s) / (1 + s)


class SteinerCircles:
    """Steiner chain generator.

    After calculate(), circles holds the chain circles followed by the
    innermost circle, and outer_circle equals the parent circle. Calling
    calculate() again replaces every derived circle.
    """

    def __init__(self) -> None:
        self.parent_circle: Circle | None = None
        self.circle_count = 0
        self.ratio = 0.0
        self.inverter = Vector2()
        self.circles: list[Circle] = []
        self.outer_circle: Circle | None = None

    @property
    def chain(self) -> list[Circle]:
        """The chain circles without the innermost circle."""
        return self.circles[:-1]

    @property
    def inner_circle(self) -> Circle | None:
        return self.circles[-1] if self.circles else None

    def invert(self, point: Vector2) -> Vector2:
        """Invert point in the unit circle around the inversion center."""
        dx = point.x - self.inverter.x
        dy = point.y - self.inverter.y
        squared = dx * dx + dy * dy
        if squared == 0:
            squared = MIN_POSITIVE
        return Vector2(self.inverter.x + dx / squared, self.inverter.y + dy / squared)

    def calculate(
        self,
        parent_circle: Circle,
        circle_count: int,
        ratio: float,
        rotation: float = 0.0,
        start_angle: float = 0.0,
    ) -> "SteinerCircles":
        """Lay out the chain inside parent_circle.

        Args:
            parent_circle: Circle the chain is inscribed in
            circle_count: Number of chain circles (raised to 3 if smaller)
            ratio: Offset of the inversion center from the center of the
                unit ring, measured before rescaling; 0 gives a concentric
                chain
            rotation: Direction of the inversion center offset in radians
            start_angle: Angle of the first chain circle in radians

        Returns:
            self

        Raises:
            SteinerConfigurationError: If |ratio| >= max_ratio(circle_count)
                or an inverted point triple is degenerate
        """
        if circle_count < MIN_CIRCLE_COUNT:
            logger.debug("Raising Steiner circle count from %d to %d", circle_count, MIN_CIRCLE_COUNT)
            circle_count = MIN_CIRCLE_COUNT

        limit = max_ratio(circle_count)
        if not abs(ratio) < limit:
            raise SteinerConfigurationError(
                f"|ratio| must be below {limit:.6f} for {circle_count} circles, got {ratio}"
            )
        if parent_circle.radius <= 0:
            raise SteinerConfigurationError(
                f"parent radius must be positive, got {parent_circle.radius}"
            )

        self.parent_circle = parent_circle
        self.circle_count = circle_count
        self.ratio = ratio

        step = math.pi / circle_count
        s = math.sin(step)
        outer = 2.0
        inner = outer * (1 - s) / (1 + s)
        ring_distance = (outer + inner) / 2
        touch_distance = ring_distance * math.cos(step)

        self.inverter = Vector2.from_polar(rotation, ratio)

        circles = []
        inner_points = []
        outer_points = []
        for i in range(circle_count):
            angle = 2 * step * i - rotation + start_angle
            touch = self.invert(Vector2.from_polar(angle + step, touch_distance))
            on_outer = self.invert(Vector2.from_polar(angle, outer))
            on_inner = self.invert(Vector2.from_polar(angle, inner))

            # Inversion turns the ring inside out
            inner_points.append(on_outer)
            outer_points.append(on_inner)
            circles.append(self._circle_through(touch, on_outer, on_inner))

        circles.append(self._circle_through(*inner_points[:3]))
        outer_circle = self._circle_through(*outer_points[:3])

        scale = parent_circle.radius / outer_circle.radius
        self.circles = [
            Circle(
                (c.center - outer_circle.center) * scale + parent_circle.center,
                c.radius * scale,
            )
            for c in circles
        ]
        self.outer_circle = Circle(parent_circle.center, parent_circle.radius)

        logger.debug(
            "Steiner chain: %d circles, ratio %g, scale %g", circle_count, ratio, scale
        )
        return self

    @staticmethod
    def _circle_through(p0: Vector2, p1: Vector2, p2: Vector2) -> Circle:
        circle = Circle.from_3_points(p0, p1, p2)
        if circle is None:
            raise SteinerConfigurationError("inverted points are collinear")
        return circle

    def draw(self, pen: AbstractPen) -> None:
        for circle in self.circles:
            circle.draw(pen)

    def __str__(self) -> str:
        return "SteinerCircles"
