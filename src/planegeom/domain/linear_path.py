"""Polyline with incremental length bookkeeping and corner smoothing."""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.mixed_path import MixedPath
from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2
from planegeom.exceptions import GeometryError
from planegeom.tolerances import EPSILON

if TYPE_CHECKING:
    from planegeom.domain.rectangle import Rectangle

logger = logging.getLogger(__name__)


class SmoothingMode(IntEnum):
    """How the corner cutback distance is derived from the smoothing factor.

    RELATIVE_EDGEWISE: factor * half of each edge
    ABSOLUTE_EDGEWISE: factor, capped at half of each edge
    RELATIVE_MINIMUM: factor * half of the shortest edge
    ABSOLUTE_MINIMUM: factor, capped at half of the shortest edge
    """

    RELATIVE_EDGEWISE = 0
    ABSOLUTE_EDGEWISE = 1
    RELATIVE_MINIMUM = 2
    ABSOLUTE_MINIMUM = 3


@dataclass
class LinearPath(GeometricShape):
    """Ordered polyline.

    No stored segment is shorter than EPSILON: add_point rejects points that
    would create one. The path itself is open; closed traversal is requested
    per call through a loop flag.

    Attributes:
        points: Vertices in order
        distances: Length of each segment (len(points) - 1 entries)
        total_length: Sum of distances
        dirty: True when the cached bounding rectangle is stale
    """

    kind: ClassVar[ShapeKind] = ShapeKind.LINEAR_PATH

    points: list[Vector2] = field(default_factory=list)
    distances: list[float] = field(default_factory=list)
    total_length: float = 0.0
    dirty: bool = True
    _cached_bounds: "Rectangle | None" = field(default=None, repr=False, init=False)

    @classmethod
    def from_points(cls, points: list[Vector2], clone_points: bool = False) -> "LinearPath":
        """Build a path, silently dropping points add_point rejects."""
        path = cls()
        for point in points:
            path.add_point(point, clone=clone_points)
        return path

    def __len__(self) -> int:
        return len(self.points)

    def add_point(self, point: Vector2, clone: bool = True) -> bool:
        """Append a vertex.

        Args:
            point: Vertex to append
            clone: Store a copy instead of the given instance

        Returns:
            True if the point was accepted, False if it equals the last point
            or would create a segment shorter than EPSILON
        """
        if clone:
            point = Vector2(point.x, point.y)

        if self.points:
            last = self.points[-1]
            if point == last:
                logger.debug("Rejected duplicate path point (%s, %s)", point.x, point.y)
                return False
            distance = last.distance_to(point)
            if distance < EPSILON:
                logger.debug("Rejected degenerate path segment of length %g", distance)
                return False
            self.distances.append(distance)
            self.total_length += distance

        self.points.append(point)
        self.dirty = True
        return True

    def remove_last_point(self) -> Vector2:
        """Remove and return the last vertex, keeping the length bookkeeping."""
        if not self.points:
            raise IndexError("remove_last_point on an empty path")
        point = self.points.pop()
        if self.distances:
            self.total_length -= self.distances.pop()
        self.dirty = True
        return point

    def get_segment(self, index: int) -> LineSegment:
        """Segment from points[index] to points[index + 1], indices wrapping.

        Index len(points) - 1 yields the closing segment back to the start.
        """
        if not self.points:
            raise IndexError("get_segment on an empty path")
        n = len(self.points)
        index %= n
        return LineSegment(self.points[index], self.points[(index + 1) % n])

    def edges(self, loop: bool = False) -> list[LineSegment]:
        """Segments of the path; loop adds the closing segment."""
        if len(self.points) < 2:
            return []
        count = len(self.points) if loop else len(self.points) - 1
        return [self.get_segment(i) for i in range(count)]

    def get_smooth_path(
        self, factor: float, mode: SmoothingMode | int = SmoothingMode.RELATIVE_EDGEWISE,
        loop: bool = False,
    ) -> MixedPath | None:
        """Replace corners with quadratic Bezier curves.

        Every edge keeps its straight middle portion between the cutback
        distance d from either end; the shared vertex becomes the control
        point between consecutive straight portions. d is clamped to
        [0, L/2] per edge. Open paths keep their first and last vertex.

        Args:
            factor: Smoothing amount, interpreted according to mode
            mode: Cutback rule
            loop: Treat the path as closed

        Returns:
            MixedPath marked closed iff loop, or None if the path has fewer
            than two points or no length

        Raises:
            ValueError: If mode is not a known SmoothingMode
        """
        mode = SmoothingMode(mode)
        if len(self.points) < 2 or self.total_length <= 0:
            return None

        segments = [s for s in self.edges(loop) if s.length > 0]
        shortest = min(s.length for s in segments)

        if mode is SmoothingMode.RELATIVE_MINIMUM:
            shared = shortest * 0.5 * factor
        elif mode is SmoothingMode.ABSOLUTE_MINIMUM:
            shared = min(shortest * 0.5, factor)
        else:
            shared = 0.0

        path = MixedPath(closed=loop)
        last_index = len(segments) - 1

        def add_anchor(point: Vector2) -> None:
            last = path.points[-1] if path.points else None
            if last is not None and not last.is_control_point and last.position == point:
                return
            path.add_point(point)

        for index, segment in enumerate(segments):
            length = segment.length
            if mode is SmoothingMode.RELATIVE_EDGEWISE:
                cutback = length * 0.5 * factor
            elif mode is SmoothingMode.ABSOLUTE_EDGEWISE:
                cutback = min(length * 0.5, factor)
            else:
                cutback = shared
            cutback = max(0.0, min(cutback, length * 0.5))

            start_cut = 0.0 if not loop and index == 0 else cutback
            end_cut = 0.0 if not loop and index == last_index else cutback

            add_anchor(segment.get_point(start_cut / length))
            add_anchor(segment.get_point(1 - end_cut / length))
            if end_cut > 0:
                path.add_control_point(segment.p2)

        if loop and len(path.points) > 1:
            first, last = path.points[0], path.points[-1]
            if not last.is_control_point and last == first:
                path.points.pop()
        return path

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "LinearPath":
        """Scale in place and rebuild the length bookkeeping.

        Raises:
            GeometryError: If a factor is zero, which would collapse
                neighboring vertices that the path then has to drop
        """
        if factor_x == 0 or factor_y == 0:
            raise GeometryError(f"Cannot scale a path by zero ({factor_x} x {factor_y})")
        if center is None:
            center = self.get_bounding_rect().center
        scaled = [(p - center).multiply_xy(factor_x, factor_y) + center for p in self.points]
        self.points = []
        self.distances = []
        self.total_length = 0.0
        for point in scaled:
            self.add_point(point, clone=False)
        self.dirty = True
        return self

    def clone(self, deep: bool = False) -> "LinearPath":
        return LinearPath(list(self.points), list(self.distances), self.total_length)

    def get_bounding_rect(self) -> "Rectangle":
        """Axis-aligned bounds; a zero rectangle at the origin when empty."""
        from planegeom.domain.rectangle import Rectangle

        if not self.dirty and self._cached_bounds is not None:
            return self._cached_bounds.clone()

        if not self.points:
            bounds = Rectangle()
        else:
            xs = [p.x for p in self.points]
            ys = [p.y for p in self.points]
            bounds = Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

        self._cached_bounds = bounds
        self.dirty = False
        return bounds.clone()

    def draw(self, pen: AbstractPen) -> None:
        if len(self.points) < 2:
            return
        pen.moveTo(self.points[0].to_tuple())
        for point in self.points[1:]:
            pen.lineTo(point.to_tuple())
        pen.endPath()
