"""Mixed straight/curved path.

A MixedPath is the output of corner smoothing: an ordered list of points
where each point is either an anchor (the outline passes through it) or a
Bezier control point. One control point between two anchors makes a
quadratic curve, two make a cubic curve.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.shape import GeometricShape, ShapeKind
from planegeom.domain.vector import Vector2

if TYPE_CHECKING:
    from planegeom.domain.linear_path import LinearPath
    from planegeom.domain.rectangle import Rectangle


@dataclass(frozen=True, slots=True)
class MixedPathPoint:
    """A path point with curve metadata.

    Attributes:
        x: X coordinate
        y: Y coordinate
        is_control_point: True for Bezier control points, False for anchors
    """

    x: float
    y: float
    is_control_point: bool = False

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "control": self.is_control_point}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MixedPathPoint":
        return cls(x=data["x"], y=data["y"], is_control_point=data.get("control", False))


@dataclass
class MixedPath(GeometricShape):
    """Sequence of anchors and control points.

    Attributes:
        points: Anchors and control points in drawing order
        closed: Whether the outline returns to its first anchor
    """

    kind: ClassVar[ShapeKind] = ShapeKind.MIXED_PATH

    points: list[MixedPathPoint] = field(default_factory=list)
    closed: bool = False

    def add_point(self, point: Vector2) -> None:
        """Append an anchor."""
        self.points.append(MixedPathPoint(point.x, point.y, False))

    def add_control_point(self, point: Vector2) -> None:
        """Append a Bezier control point."""
        self.points.append(MixedPathPoint(point.x, point.y, True))

    def anchors(self) -> list[Vector2]:
        return [p.position for p in self.points if not p.is_control_point]

    def control_points(self) -> list[Vector2]:
        return [p.position for p in self.points if p.is_control_point]

    def is_valid(self) -> bool:
        """A drawable path has an anchor, and an open one starts and ends on one."""
        if not self.points:
            return False
        if not any(not p.is_control_point for p in self.points):
            return False
        if self.closed:
            return True
        return not self.points[0].is_control_point and not self.points[-1].is_control_point

    def _rotated_to_anchor(self) -> list[MixedPathPoint]:
        # Closed paths may begin with control points; start drawing at an anchor.
        for index, point in enumerate(self.points):
            if not point.is_control_point:
                return self.points[index:] + self.points[:index]
        return list(self.points)

    def segments(self) -> list[list[Vector2]]:
        """Split into drawing segments.

        Each segment is [start, control..., end] with anchors at both ends;
        a closed path contributes a final segment back to its first anchor.
        """
        points = self._rotated_to_anchor() if self.closed else list(self.points)
        if not points or points[0].is_control_point:
            return []

        result: list[list[Vector2]] = []
        current = [points[0].position]
        for point in points[1:]:
            current.append(point.position)
            if not point.is_control_point:
                result.append(current)
                current = [point.position]

        if self.closed and (len(current) > 1 or current[0] != points[0].position):
            current.append(points[0].position)
            result.append(current)
        return result

    def draw(self, pen: AbstractPen) -> None:
        """Emit the path: lineTo for straight parts, qCurveTo/curveTo for corners."""
        if not self.is_valid():
            return
        segments = self.segments()
        if not segments:
            return

        start = segments[0][0]
        pen.moveTo(start.to_tuple())
        for index, segment in enumerate(segments):
            end = segment[-1].to_tuple()
            controls = [p.to_tuple() for p in segment[1:-1]]
            if not controls:
                # closePath draws the closing line itself
                if self.closed and index == len(segments) - 1 and segment[-1] == start:
                    continue
                pen.lineTo(end)
            elif len(controls) == 2:
                pen.curveTo(*controls, end)
            else:
                pen.qCurveTo(*controls, end)

        if self.closed:
            pen.closePath()
        else:
            pen.endPath()

    def to_linear_path(self, tolerance: float = 0.01) -> "LinearPath":
        """Flatten curves into a polyline.

        Args:
            tolerance: Maximum deviation from the true curve

        Returns:
            LinearPath through the flattened outline (closing vertex not repeated)
        """
        from planegeom.core._bezier import flatten_cubic, flatten_quadratic
        from planegeom.domain.linear_path import LinearPath

        path = LinearPath()
        for segment in self.segments():
            if len(segment) == 3:
                flattened = flatten_quadratic(segment, tolerance)
            elif len(segment) == 4:
                flattened = flatten_cubic(segment, tolerance)
            elif len(segment) > 4:
                # Implied on-curve points between consecutive quadratic controls
                flattened = [segment[0]]
                controls = segment[1:-1]
                start = segment[0]
                for i, control in enumerate(controls):
                    end = segment[-1] if i == len(controls) - 1 else control.lerp(controls[i + 1], 0.5)
                    flattened.extend(flatten_quadratic([start, control, end], tolerance)[1:])
                    start = end
            else:
                flattened = segment
            for point in flattened:
                path.add_point(point, clone=False)

        if self.closed and len(path.points) > 1 and path.points[-1] == path.points[0]:
            path.remove_last_point()
        return path

    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "MixedPath":
        if center is None:
            center = self.get_bounding_rect().center
        scaled = []
        for point in self.points:
            moved = (point.position - center).multiply_xy(factor_x, factor_y) + center
            scaled.append(MixedPathPoint(moved.x, moved.y, point.is_control_point))
        self.points = scaled
        return self

    def clone(self, deep: bool = False) -> "MixedPath":
        return MixedPath(list(self.points), self.closed)

    def get_bounding_rect(self) -> "Rectangle":
        """Bounding rectangle of all points, control points included."""
        from planegeom.domain.rectangle import Rectangle

        if not self.points:
            return Rectangle()
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Rectangle(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
