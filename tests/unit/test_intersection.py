"""Unit tests for intersection dispatch and result statuses."""

import pytest

from planegeom.core import Intersection, IntersectionStatus, intersect, supported_pairs
from planegeom.domain import (
    Circle,
    LinearPath,
    LineSegment,
    MixedPath,
    Rectangle,
    ShapeKind,
    Triangle,
    Vector2,
)
from planegeom.exceptions import GeometryError, UnsupportedShapePairError


class TestIntersectionResult:
    """Tests for the Intersection value."""

    def test_defaults(self) -> None:
        """Test a fresh result is an empty non-intersection."""
        result = Intersection()
        assert result.status == IntersectionStatus.NO_INTERSECTION
        assert result.points == []
        assert not result
        assert str(result) == "Intersection: NO INTERSECTION"

    def test_append_point_snaps_duplicates(self) -> None:
        """Test near-identical points are stored once."""
        result = Intersection()
        result.append_point(Vector2(1.0, 1.0))
        result.append_point(Vector2(1.0 + 1e-9, 1.0))
        assert len(result.points) == 1
        result.append_point(Vector2(1.001, 1.0))
        assert len(result.points) == 2
        assert result


class TestCircleCircle:
    """Tests for circle/circle statuses."""

    def test_coincident(self) -> None:
        """Test identical circles."""
        result = intersect(Circle.from_coordinates(1, 1, 2), Circle.from_coordinates(1, 1, 2))
        assert result.status == IntersectionStatus.COINCIDENT
        assert result.points == []

    def test_outside(self) -> None:
        """Test circles apart."""
        result = intersect(Circle.from_coordinates(0, 0, 1), Circle.from_coordinates(5, 0, 1))
        assert result.status == IntersectionStatus.OUTSIDE

    def test_inside(self) -> None:
        """Test nested circles."""
        result = intersect(Circle.from_coordinates(0, 0, 5), Circle.from_coordinates(1, 0, 1))
        assert result.status == IntersectionStatus.INSIDE

    def test_tangent(self) -> None:
        """Test touching circles report one point."""
        result = intersect(Circle.from_coordinates(0, 0, 2), Circle.from_coordinates(5, 0, 3))
        assert result.status == IntersectionStatus.TANGENT
        assert len(result.points) == 1

    def test_crossing(self) -> None:
        """Test overlapping circles report two points."""
        result = intersect(Circle.from_coordinates(0, 0, 5), Circle.from_coordinates(6, 0, 5))
        assert result.status == IntersectionStatus.INTERSECTION
        assert len(result.points) == 2


class TestCircleSegment:
    """Tests for circle/segment statuses."""

    def test_segment_inside(self) -> None:
        """Test a segment with both ends inside the circle."""
        result = intersect(Circle.from_coordinates(0, 0, 5), LineSegment.from_coordinates(-1, 0, 1, 0))
        assert result.status == IntersectionStatus.INSIDE

    def test_segment_outside(self) -> None:
        """Test a segment away from the circle."""
        result = intersect(Circle.from_coordinates(0, 0, 1), LineSegment.from_coordinates(3, 3, 5, 3))
        assert result.status == IntersectionStatus.OUTSIDE

    def test_segment_tangent(self) -> None:
        """Test a segment touching the circle."""
        result = intersect(Circle.from_coordinates(0, 0, 1), LineSegment.from_coordinates(-2, 1, 2, 1))
        assert result.status == IntersectionStatus.TANGENT
        assert len(result.points) == 1

    def test_segment_crossing(self) -> None:
        """Test a segment passing through the circle."""
        result = intersect(Circle.from_coordinates(0, 0, 1), LineSegment.from_coordinates(-2, 0, 2, 0))
        assert result.status == IntersectionStatus.INTERSECTION
        assert sorted(p.x for p in result.points) == [-1.0, 1.0]

    def test_segment_ending_inside(self) -> None:
        """Test a single crossing is not a tangency."""
        result = intersect(Circle.from_coordinates(0, 0, 1), LineSegment.from_coordinates(0, 0, 3, 0))
        assert result.status == IntersectionStatus.INTERSECTION
        assert len(result.points) == 1

    def test_argument_order_does_not_matter(self) -> None:
        """Test segment/circle dispatches to the same routine."""
        circle = Circle.from_coordinates(0, 0, 1)
        segment = LineSegment.from_coordinates(-2, 0, 2, 0)
        forward = intersect(circle, segment)
        backward = intersect(segment, circle)
        assert forward.status == backward.status
        assert forward.points == backward.points


class TestSegmentSegment:
    """Tests for segment/segment statuses."""

    def test_crossing(self) -> None:
        """Test crossing segments."""
        result = intersect(
            LineSegment.from_coordinates(0, 5, 10, 5), LineSegment.from_coordinates(5, 0, 5, 10)
        )
        assert result.status == IntersectionStatus.INTERSECTION
        assert result.points == [Vector2(5.0, 5.0)]

    def test_parallel(self) -> None:
        """Test parallel segments."""
        result = intersect(
            LineSegment.from_coordinates(0, 0, 10, 0), LineSegment.from_coordinates(0, 5, 10, 5)
        )
        assert result.status == IntersectionStatus.PARALLEL
        assert result.points == []

    def test_coincident(self) -> None:
        """Test collinear overlapping segments."""
        result = intersect(
            LineSegment.from_coordinates(0, 0, 10, 0), LineSegment.from_coordinates(2, 0, 8, 0)
        )
        assert result.status == IntersectionStatus.COINCIDENT

    def test_no_intersection(self) -> None:
        """Test non-parallel segments that do not reach each other."""
        result = intersect(
            LineSegment.from_coordinates(0, 0, 1, 1), LineSegment.from_coordinates(3, 0, 2, 1)
        )
        assert result.status == IntersectionStatus.NO_INTERSECTION


class TestEdgeBasedPairs:
    """Tests for pairs intersected edge by edge."""

    def test_rectangle_segment(self) -> None:
        """Test a segment crossing a rectangle."""
        result = intersect(Rectangle(0, 0, 4, 4), LineSegment.from_coordinates(-1, 2, 5, 2))
        assert result.status == IntersectionStatus.INTERSECTION
        assert sorted(p.x for p in result.points) == [0.0, 4.0]

    def test_rectangle_circle_both_orders(self) -> None:
        """Test rectangle/circle in both argument orders."""
        rect = Rectangle(0, 0, 2, 2)
        circle = Circle.from_coordinates(0, 0, 1)
        forward = intersect(circle, rect)
        backward = intersect(rect, circle)
        assert forward.status == IntersectionStatus.INTERSECTION
        assert len(forward.points) == 2
        assert len(backward.points) == 2

    def test_triangle_rectangle(self) -> None:
        """Test two polygons with a shared corner crossing."""
        triangle = Triangle.from_coordinates(0, 0, 4, 0, 0, 4)
        rect = Rectangle(1, -1, 1, 3)
        result = intersect(triangle, rect)
        assert result.status == IntersectionStatus.INTERSECTION
        assert len(result.points) == 3

    def test_linear_path_segment(self) -> None:
        """Test an open polyline against a segment."""
        path = LinearPath.from_points([Vector2(0, 0), Vector2(4, 4), Vector2(8, 0)])
        result = intersect(path, LineSegment.from_coordinates(0, 2, 8, 2))
        assert result.status == IntersectionStatus.INTERSECTION
        assert sorted(round(p.x, 9) for p in result.points) == [2.0, 6.0]

    def test_disjoint_polygons(self) -> None:
        """Test separated polygons report nothing."""
        result = intersect(Rectangle(0, 0, 1, 1), Rectangle(5, 5, 1, 1))
        assert result.status == IntersectionStatus.NO_INTERSECTION
        assert result.points == []


class TestDispatch:
    """Tests for the dispatch table."""

    def test_mixed_path_is_unsupported(self) -> None:
        """Test unsupported pairs raise a typed error."""
        path = MixedPath()
        path.add_point(Vector2(0, 0))
        path.add_point(Vector2(1, 1))
        with pytest.raises(UnsupportedShapePairError) as exc_info:
            intersect(path, Circle.from_coordinates(0, 0, 1))
        assert exc_info.value.first == "MixedPath"
        assert exc_info.value.second == "Circle"
        assert isinstance(exc_info.value, GeometryError)

    def test_supported_pairs(self) -> None:
        """Test the table covers the analytic and polygonal pairs."""
        pairs = supported_pairs()
        assert (ShapeKind.CIRCLE, ShapeKind.CIRCLE) in pairs
        assert (ShapeKind.LINE_SEGMENT, ShapeKind.CIRCLE) in pairs
        assert (ShapeKind.TRIANGLE, ShapeKind.LINEAR_PATH) in pairs
        assert all(ShapeKind.MIXED_PATH not in pair for pair in pairs)

    def test_shape_method_delegates(self) -> None:
        """Test GeometricShape.intersect goes through the dispatcher."""
        circle = Circle.from_coordinates(0, 0, 1)
        result = circle.intersect(LineSegment.from_coordinates(-2, 0, 2, 0))
        assert result.status == IntersectionStatus.INTERSECTION
        assert len(result.points) == 2
