"""Tests for domain models to verify they work correctly."""

import math

import pytest

from planegeom.domain import (
    Circle,
    LinearPath,
    LineSegment,
    MixedPath,
    MixedPathPoint,
    Rectangle,
    ShapeKind,
    Triangle,
    Vector2,
)
from planegeom.exceptions import GeometryError


class TestVector2:
    """Tests for Vector2 class."""

    def test_vector_creation(self) -> None:
        """Test basic vector creation."""
        v = Vector2(3.0, 4.0)
        assert v.x == 3.0
        assert v.y == 4.0
        assert Vector2() == Vector2(0.0, 0.0)

    def test_arithmetic(self) -> None:
        """Test operators return new vectors."""
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, 5.0)
        assert a + b == Vector2(4.0, 7.0)
        assert b - a == Vector2(2.0, 3.0)
        assert a * 2 == Vector2(2.0, 4.0)
        assert 2 * a == Vector2(2.0, 4.0)
        assert b / 2 == Vector2(1.5, 2.5)
        assert -a == Vector2(-1.0, -2.0)

    def test_length_and_distance(self) -> None:
        """Test length, squared length and distances."""
        v = Vector2(3.0, 4.0)
        assert v.length == 5.0
        assert v.squared_length == 25.0
        assert Vector2(1.0, 1.0).distance_to(Vector2(4.0, 5.0)) == 5.0

    def test_angle_and_polar(self) -> None:
        """Test polar construction round trip."""
        v = Vector2.from_polar(math.pi / 2, 2.0)
        assert abs(v.x) < 1e-12
        assert abs(v.y - 2.0) < 1e-12
        assert abs(v.angle - math.pi / 2) < 1e-12

    def test_lerp(self) -> None:
        """Test linear interpolation."""
        a = Vector2(0.0, 0.0)
        b = Vector2(10.0, 20.0)
        assert a.lerp(b, 0.25) == Vector2(2.5, 5.0)

    def test_normal_and_mirror(self) -> None:
        """Test unit normal and point reflection."""
        assert Vector2(2.0, 0.0).normal() == Vector2(-0.0, 1.0)
        assert Vector2(0.0, 0.0).normal() == Vector2()
        assert Vector2(1.0, 1.0).mirror(Vector2(2.0, 2.0)) == Vector2(3.0, 3.0)

    def test_is_left(self) -> None:
        """Test orientation test sign."""
        p0 = Vector2(0.0, 0.0)
        p1 = Vector2(10.0, 0.0)
        assert Vector2(5.0, 1.0).is_left(p0, p1) > 0
        assert Vector2(5.0, -1.0).is_left(p0, p1) < 0
        assert Vector2(5.0, 0.0).is_left(p0, p1) == 0

    def test_with_length(self) -> None:
        """Test rescaling keeps the direction."""
        v = Vector2(3.0, 4.0).with_length(10.0)
        assert v.x == pytest.approx(6.0)
        assert v.y == pytest.approx(8.0)
        assert Vector2().with_length(5.0) == Vector2()

    def test_rotate_around(self) -> None:
        """Test rotation about a pivot other than the origin."""
        v = Vector2(2.0, 1.0).rotate_around(math.pi / 2, Vector2(1.0, 1.0))
        assert v.x == pytest.approx(1.0)
        assert v.y == pytest.approx(2.0)

    def test_angle_between(self) -> None:
        """Test the unsigned angle between two directions."""
        assert Vector2(1.0, 0.0).angle_between(Vector2(0.0, 2.0)) == pytest.approx(math.pi / 2)
        assert Vector2(1.0, 0.0).angle_between(Vector2(-3.0, 0.0)) == pytest.approx(math.pi)
        assert Vector2().angle_between(Vector2(1.0, 1.0)) == 0.0

    def test_vector_serialization(self) -> None:
        """Test vector serialization and deserialization."""
        v1 = Vector2(1.5, -2.5)
        v2 = Vector2.from_dict(v1.to_dict())
        assert v2 == v1
        assert v1.to_tuple() == (1.5, -2.5)

    def test_vector_immutable(self) -> None:
        """Test that vector is immutable."""
        v = Vector2(1.0, 2.0)
        with pytest.raises(AttributeError):
            v.x = 3.0  # type: ignore


class TestLineSegment:
    """Tests for LineSegment class."""

    def test_named_constructors(self) -> None:
        """Test explicit constructors."""
        s = LineSegment.from_coordinates(0, 0, 3, 4)
        assert s.length == 5.0
        centered = LineSegment.from_point_angle_length(Vector2(0.0, 0.0), 0.0, 4.0, centered=True)
        assert centered.p1 == Vector2(-2.0, 0.0)
        assert centered.p2 == Vector2(2.0, 0.0)

    def test_closest_point(self) -> None:
        """Test clamped and unclamped projection."""
        s = LineSegment.from_coordinates(0, 0, 10, 0)
        assert s.get_closest_point(Vector2(5.0, 3.0)) == Vector2(5.0, 0.0)
        assert s.get_closest_point(Vector2(-5.0, 3.0)) == Vector2(0.0, 0.0)
        assert s.get_closest_point_on_line(Vector2(-5.0, 3.0)) == Vector2(-5.0, 0.0)

    def test_zero_length_segment_is_legal(self) -> None:
        """Test degenerate segment construction."""
        s = LineSegment.from_coordinates(1, 1, 1, 1)
        assert s.length == 0.0
        assert s.get_closest_point_on_line(Vector2(5.0, 5.0)) == Vector2(1.0, 1.0)

    def test_vertical_slope(self) -> None:
        """Test slope of vertical segments is infinite."""
        assert LineSegment.from_coordinates(0, 0, 0, 5).get_slope() == math.inf

    def test_scale_around_midpoint(self) -> None:
        """Test default scaling pivot."""
        s = LineSegment.from_coordinates(0, 0, 10, 0).scale(2.0, 2.0)
        assert s.p1 == Vector2(-5.0, 0.0)
        assert s.p2 == Vector2(15.0, 0.0)

    def test_mirror_point(self) -> None:
        """Test reflection across the line through the segment."""
        horizontal = LineSegment.from_coordinates(0, 0, 10, 0)
        assert horizontal.get_mirror_point(Vector2(3.0, 4.0)) == Vector2(3.0, -4.0)
        diagonal = LineSegment.from_coordinates(0, 0, 1, 1)
        assert diagonal.get_mirror_point(Vector2(2.0, 0.0)) == Vector2(0.0, 2.0)

    def test_parallel(self) -> None:
        """Test the offset copy moves along the left normal."""
        s = LineSegment.from_coordinates(0, 0, 10, 0).get_parallel(2.0)
        assert s.p1 == Vector2(0.0, 2.0)
        assert s.p2 == Vector2(10.0, 2.0)

    def test_intercept(self) -> None:
        """Test the y intercept of the supporting line."""
        assert LineSegment.from_coordinates(0, 1, 2, 5).get_intercept() == 1.0
        assert LineSegment.from_coordinates(2, 3, 4, 3).get_intercept() == 3.0

    def test_kind(self) -> None:
        """Test type tag."""
        assert LineSegment.from_coordinates(0, 0, 1, 1).kind is ShapeKind.LINE_SEGMENT


class TestRectangle:
    """Tests for Rectangle class."""

    def test_negative_extent_normalized(self) -> None:
        """Test normalize-on-construct invariant."""
        r = Rectangle(0, 0, -4, -6)
        assert (r.x, r.y, r.width, r.height) == (-4, -6, 4, 6)

    def test_scale_renormalizes(self) -> None:
        """Test negative scale keeps extents non-negative."""
        r = Rectangle(0, 0, 2, 2).scale(-1.0, 1.0)
        assert r.width == 2
        assert r.height == 2
        assert r.x == 0

    def test_union_with_empty_returns_clone(self) -> None:
        """Test empty rectangle is the union identity."""
        r = Rectangle(1, 2, 3, 4)
        result = r.union(Rectangle())
        assert result == r
        assert result is not r
        assert Rectangle(5, 5, 0, 0).union(r) == r

    def test_union(self) -> None:
        """Test union of overlapping rectangles."""
        result = Rectangle(0, 0, 2, 2).union(Rectangle(1, 1, 3, 3))
        assert result == Rectangle(0, 0, 4, 4)

    def test_intersection_disjoint(self) -> None:
        """Test disjoint rectangles give a zero-area rectangle."""
        result = Rectangle(0, 0, 1, 1).intersection(Rectangle(5, 5, 1, 1))
        assert result.is_empty()
        assert result == Rectangle()

    def test_intersection_touching_is_empty(self) -> None:
        """Test shared edges have no overlap."""
        result = Rectangle(0, 0, 1, 1).intersection(Rectangle(1, 0, 1, 1))
        assert result.is_empty()

    def test_intersection_overlap(self) -> None:
        """Test proper overlap."""
        result = Rectangle(0, 0, 2, 2).intersection(Rectangle(1, 1, 2, 2))
        assert result == Rectangle(1, 1, 1, 1)

    def test_center_and_contains(self) -> None:
        """Test center and inclusive containment."""
        r = Rectangle(0, 0, 4, 2)
        assert r.center == Vector2(2.0, 1.0)
        assert r.contains_point(Vector2(4.0, 2.0))
        assert not r.contains_point(Vector2(4.1, 2.0))


class TestCircle:
    """Tests for Circle class."""

    def test_from_3_points(self) -> None:
        """Test circumscribed circle."""
        c = Circle.from_3_points(Vector2(1.0, 0.0), Vector2(0.0, 1.0), Vector2(-1.0, 0.0))
        assert c is not None
        assert abs(c.center.x) < 1e-12
        assert abs(c.center.y) < 1e-12
        assert abs(c.radius - 1.0) < 1e-12

    def test_from_3_points_collinear(self) -> None:
        """Test collinear points give no circle."""
        assert Circle.from_3_points(Vector2(0, 0), Vector2(1, 1), Vector2(2, 2)) is None
        assert Circle.from_3_points(Vector2(0, 0), Vector2(0, 0), Vector2(2, 2)) is None

    def test_non_uniform_scale_rejected(self) -> None:
        """Test circles refuse to become ellipses."""
        with pytest.raises(GeometryError):
            Circle.from_coordinates(0, 0, 1).scale(2.0, 3.0)

    def test_scale_around_pivot(self) -> None:
        """Test uniform scaling around an external pivot."""
        c = Circle.from_coordinates(2, 0, 1).scale(2.0, 2.0, Vector2(0.0, 0.0))
        assert c.center == Vector2(4.0, 0.0)
        assert c.radius == 2.0

    def test_bounding_rect(self) -> None:
        """Test bounding rectangle."""
        assert Circle.from_coordinates(1, 1, 2).get_bounding_rect() == Rectangle(-1, -1, 4, 4)


class TestTriangle:
    """Tests for Triangle class."""

    def test_equilateral(self) -> None:
        """Test equilateral construction."""
        t = Triangle.equilateral(Vector2(0.0, 0.0), Vector2(1.0, 0.0))
        for index in range(3):
            assert abs(t.get_side_length(index) - 1.0) < 1e-12
        assert t.p3.y > 0

    def test_bounding_circle(self) -> None:
        """Test circumscribed circle passes through the corners."""
        t = Triangle.from_coordinates(0, 0, 4, 0, 0, 3)
        circle = t.get_bounding_circle()
        assert circle is not None
        assert abs(circle.radius - 2.5) < 1e-12

    def test_touching_corner_circles(self) -> None:
        """Test corner circles are mutually tangent."""
        t = Triangle.from_coordinates(0, 0, 4, 0, 0, 3)
        c1, c2, c3 = t.get_touching_corner_circles()
        assert abs(c1.center.distance_to(c2.center) - (c1.radius + c2.radius)) < 1e-12
        assert abs(c1.center.distance_to(c3.center) - (c1.radius + c3.radius)) < 1e-12
        assert abs(c2.center.distance_to(c3.center) - (c2.radius + c3.radius)) < 1e-12

    def test_contains_point(self) -> None:
        """Test containment for both windings."""
        t = Triangle.from_coordinates(0, 0, 4, 0, 0, 4)
        assert t.contains_point(Vector2(1.0, 1.0))
        assert not t.contains_point(Vector2(3.0, 3.0))
        reversed_t = Triangle(t.p3, t.p2, t.p1)
        assert reversed_t.contains_point(Vector2(1.0, 1.0))


class TestMixedPath:
    """Tests for MixedPath class."""

    def test_point_flags(self) -> None:
        """Test anchors and control points are kept apart."""
        path = MixedPath()
        path.add_point(Vector2(0.0, 0.0))
        path.add_control_point(Vector2(1.0, 1.0))
        path.add_point(Vector2(2.0, 0.0))
        assert path.anchors() == [Vector2(0.0, 0.0), Vector2(2.0, 0.0)]
        assert path.control_points() == [Vector2(1.0, 1.0)]
        assert path.is_valid()

    def test_open_path_must_end_on_anchor(self) -> None:
        """Test validity of open paths."""
        path = MixedPath([MixedPathPoint(0, 0), MixedPathPoint(1, 1, True)])
        assert not path.is_valid()
        path.closed = True
        assert path.is_valid()

    def test_point_serialization(self) -> None:
        """Test path point serialization."""
        point = MixedPathPoint(1.0, 2.0, True)
        assert MixedPathPoint.from_dict(point.to_dict()) == point

    def test_to_linear_path_keeps_endpoints(self) -> None:
        """Test curve flattening."""
        path = MixedPath()
        path.add_point(Vector2(0.0, 0.0))
        path.add_control_point(Vector2(5.0, 5.0))
        path.add_point(Vector2(10.0, 0.0))
        linear = path.to_linear_path(tolerance=0.01)
        assert linear.points[0] == Vector2(0.0, 0.0)
        assert linear.points[-1] == Vector2(10.0, 0.0)
        assert len(linear.points) > 3


class TestLinearPathBasics:
    """Tests for LinearPath value behavior."""

    def test_empty_bounding_rect(self) -> None:
        """Test empty path has a zero rectangle at the origin."""
        assert LinearPath().get_bounding_rect() == Rectangle()

    def test_bounding_rect_cache_invalidated(self) -> None:
        """Test add_point marks the cached bounds stale."""
        path = LinearPath.from_points([Vector2(0, 0), Vector2(2, 1)])
        assert path.get_bounding_rect() == Rectangle(0, 0, 2, 1)
        assert not path.dirty
        path.add_point(Vector2(5, 5))
        assert path.dirty
        assert path.get_bounding_rect() == Rectangle(0, 0, 5, 5)

    def test_kind(self) -> None:
        """Test type tag and string form."""
        assert LinearPath().kind is ShapeKind.LINEAR_PATH
        assert str(LinearPath()) == "LinearPath"
