"""Intersection result type and pairwise shape dispatch.

intersect() looks up a routine in a table keyed by the ShapeKind pair of
its arguments. Pairs missing from the table raise UnsupportedShapePairError.
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from planegeom.core.intersection_utils import (
    circles_intersection,
    line_circle_intersection,
    line_intersect_line,
    segment_circle_intersection,
)
from planegeom.domain.circle import Circle
from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2
from planegeom.exceptions import UnsupportedShapePairError
from planegeom.tolerances import EPSILON, SQUARED_SNAP_DISTANCE

logger = logging.getLogger(__name__)


class IntersectionStatus(Enum):
    """How two shapes relate."""

    INTERSECTION = "INTERSECTION"
    NO_INTERSECTION = "NO INTERSECTION"
    COINCIDENT = "COINCIDENT"
    PARALLEL = "PARALLEL"
    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    TANGENT = "TANGENT"


@dataclass
class Intersection:
    """Result of intersecting two shapes.

    Attributes:
        status: Relation between the shapes
        points: Intersection points, without near-duplicates
    """

    status: IntersectionStatus = IntersectionStatus.NO_INTERSECTION
    points: list[Vector2] = field(default_factory=list)

    def append_point(self, point: Vector2) -> None:
        """Add a point unless one within SQUARED_SNAP_DISTANCE is already present."""
        for existing in self.points:
            if existing.squared_distance_to(point) < SQUARED_SNAP_DISTANCE:
                return
        self.points.append(point)

    def __bool__(self) -> bool:
        return bool(self.points)

    def __str__(self) -> str:
        return f"Intersection: {self.status.value}"


Handler = Callable[[GeometricShape, GeometricShape], Intersection]

# Shapes intersected edge by edge.
POLYGONAL_KINDS = (ShapeKind.TRIANGLE, ShapeKind.RECTANGLE, ShapeKind.LINEAR_PATH)


def _edges(shape: GeometricShape) -> list[LineSegment]:
    if isinstance(shape, LineSegment):
        return [shape]
    return shape.edges()  # type: ignore[attr-defined]


def circle_circle(c1: Circle, c2: Circle) -> Intersection:
    result = Intersection()
    distance = c1.center.distance_to(c2.center)
    r_min = abs(c1.radius - c2.radius)

    if distance < EPSILON and r_min < EPSILON:
        result.status = IntersectionStatus.COINCIDENT
        return result

    points = circles_intersection(c1, c2)
    if points is None:
        if distance > c1.radius + c2.radius:
            result.status = IntersectionStatus.OUTSIDE
        else:
            result.status = IntersectionStatus.INSIDE
        return result

    result.status = (
        IntersectionStatus.TANGENT if len(points) == 1 else IntersectionStatus.INTERSECTION
    )
    for point in points:
        result.append_point(point)
    return result


def circle_segment(circle: Circle, segment: LineSegment) -> Intersection:
    result = Intersection()
    points = segment_circle_intersection(segment.p1, segment.p2, circle)

    if points is None:
        squared_radius = circle.radius * circle.radius
        inside = (
            circle.center.squared_distance_to(segment.p1) < squared_radius
            and circle.center.squared_distance_to(segment.p2) < squared_radius
        )
        result.status = IntersectionStatus.INSIDE if inside else IntersectionStatus.OUTSIDE
        return result

    line_points = line_circle_intersection(segment.p1, segment.p2, circle)
    if len(points) == 1 and line_points is not None and len(line_points) == 1:
        result.status = IntersectionStatus.TANGENT
    else:
        result.status = IntersectionStatus.INTERSECTION
    for point in points:
        result.append_point(point)
    return result


def segment_segment(s1: LineSegment, s2: LineSegment) -> Intersection:
    result = Intersection()
    point = line_intersect_line(s1.p1, s1.p2, s2.p1, s2.p2)
    if point is not None:
        result.status = IntersectionStatus.INTERSECTION
        result.append_point(point)
        return result

    d1 = s1.p2 - s1.p1
    d2 = s2.p2 - s2.p1
    if abs(d1.cross(d2)) < EPSILON:
        if abs(s2.p1.is_left(s1.p1, s1.p2)) < EPSILON:
            result.status = IntersectionStatus.COINCIDENT
        else:
            result.status = IntersectionStatus.PARALLEL
    else:
        result.status = IntersectionStatus.NO_INTERSECTION
    return result


def edges_edges(shape1: GeometricShape, shape2: GeometricShape) -> Intersection:
    result = Intersection()
    for first in _edges(shape1):
        for second in _edges(shape2):
            point = line_intersect_line(first.p1, first.p2, second.p1, second.p2)
            if point is not None:
                result.append_point(point)
    if result.points:
        result.status = IntersectionStatus.INTERSECTION
    return result


def circle_edges(circle: Circle, shape: GeometricShape) -> Intersection:
    result = Intersection()
    for edge in _edges(shape):
        points = segment_circle_intersection(edge.p1, edge.p2, circle)
        for point in points or ():
            result.append_point(point)
    if result.points:
        result.status = IntersectionStatus.INTERSECTION
    return result


def _swapped(handler: Handler) -> Handler:
    def swapped(shape1: GeometricShape, shape2: GeometricShape) -> Intersection:
        return handler(shape2, shape1)

    return swapped


def _build_dispatch_table() -> dict[tuple[ShapeKind, ShapeKind], Handler]:
    table: dict[tuple[ShapeKind, ShapeKind], Handler] = {
        (ShapeKind.CIRCLE, ShapeKind.CIRCLE): circle_circle,
        (ShapeKind.CIRCLE, ShapeKind.LINE_SEGMENT): circle_segment,
        (ShapeKind.LINE_SEGMENT, ShapeKind.CIRCLE): _swapped(circle_segment),
        (ShapeKind.LINE_SEGMENT, ShapeKind.LINE_SEGMENT): segment_segment,
    }
    for kind in POLYGONAL_KINDS:
        table[(ShapeKind.LINE_SEGMENT, kind)] = edges_edges
        table[(kind, ShapeKind.LINE_SEGMENT)] = edges_edges
        table[(ShapeKind.CIRCLE, kind)] = circle_edges
        table[(kind, ShapeKind.CIRCLE)] = _swapped(circle_edges)
    for first, second in itertools.product(POLYGONAL_KINDS, repeat=2):
        table[(first, second)] = edges_edges
    return table


DISPATCH_TABLE = _build_dispatch_table()


def supported_pairs() -> list[tuple[ShapeKind, ShapeKind]]:
    """All kind pairs intersect() can handle."""
    return list(DISPATCH_TABLE)


def intersect(shape1: GeometricShape, shape2: GeometricShape) -> Intersection:
    """Intersect two shapes.

    Args:
        shape1: First shape
        shape2: Second shape

    Returns:
        Intersection describing the relation and the crossing points

    Raises:
        UnsupportedShapePairError: If no routine exists for the kind pair
    """
    handler = DISPATCH_TABLE.get((shape1.kind, shape2.kind))
    if handler is None:
        raise UnsupportedShapePairError(shape1.kind.value, shape2.kind.value)
    result = handler(shape1, shape2)
    logger.debug(
        "Intersected %s with %s: %s (%d points)",
        shape1.kind.value, shape2.kind.value, result.status.value, len(result.points),
    )
    return result
