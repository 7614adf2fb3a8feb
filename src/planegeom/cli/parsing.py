"""Textual shape descriptions for the command line.

Formats (comma separated numbers after a kind prefix):
- circle:cx,cy,r
- segment:x1,y1,x2,y2
- rect:x,y,width,height
- triangle:x1,y1,x2,y2,x3,y3
- path:x1,y1,x2,y2,...
"""

from planegeom.domain.circle import Circle
from planegeom.domain.linear_path import LinearPath
from planegeom.domain.rectangle import Rectangle
from planegeom.domain.segment import LineSegment
from planegeom.domain.shape import GeometricShape
from planegeom.domain.triangle import Triangle
from planegeom.domain.vector import Vector2
from planegeom.exceptions import ShapeParseError

# kind -> expected number count (None: any even count of at least 4)
SHAPE_ARITY: dict[str, int | None] = {
    "circle": 3,
    "segment": 4,
    "rect": 4,
    "triangle": 6,
    "path": None,
}


def parse_numbers(text: str, source: str) -> list[float]:
    """Parse a comma separated list of floats."""
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise ShapeParseError(source, f"invalid number ({e})") from e


def parse_points(text: str) -> list[Vector2]:
    """Parse x1,y1,x2,y2,... into points."""
    values = parse_numbers(text, text)
    if len(values) % 2:
        raise ShapeParseError(text, "expected an even number of coordinates")
    return [Vector2(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def parse_shape(text: str) -> GeometricShape:
    """Build a shape from its textual description.

    Raises:
        ShapeParseError: For an unknown kind or a wrong number of values
    """
    kind, sep, body = text.partition(":")
    kind = kind.strip().lower()
    if not sep or kind not in SHAPE_ARITY:
        raise ShapeParseError(text, f"expected one of {', '.join(SHAPE_ARITY)} followed by ':'")

    values = parse_numbers(body, text)
    arity = SHAPE_ARITY[kind]
    if arity is None:
        if len(values) < 4 or len(values) % 2:
            raise ShapeParseError(text, "a path needs at least two x,y pairs")
    elif len(values) != arity:
        raise ShapeParseError(text, f"{kind} takes {arity} numbers, got {len(values)}")

    if kind == "circle":
        return Circle.from_coordinates(*values)
    if kind == "segment":
        return LineSegment.from_coordinates(*values)
    if kind == "rect":
        return Rectangle(*values)
    if kind == "triangle":
        return Triangle.from_coordinates(*values)
    return LinearPath.from_points(
        [Vector2(values[i], values[i + 1]) for i in range(0, len(values), 2)]
    )
