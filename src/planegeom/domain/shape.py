"""Common surface of all geometric shapes.

Every concrete shape declares a ShapeKind and implements drawing, scaling,
cloning and bounding-box computation. Intersection is implemented once here
and routed through the pairwise dispatch table in planegeom.core.intersection.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from planegeom.domain.vector import Vector2

if TYPE_CHECKING:
    from planegeom.core.intersection import Intersection
    from planegeom.domain.rectangle import Rectangle


class ShapeKind(Enum):
    """Closed set of shape variants known to the intersection dispatcher."""

    LINE_SEGMENT = "LineSegment"
    LINEAR_PATH = "LinearPath"
    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"
    TRIANGLE = "Triangle"
    MIXED_PATH = "MixedPath"


class GeometricShape(ABC):
    """Abstract base for shapes.

    Drawing targets are fontTools pens: anything implementing moveTo, lineTo,
    qCurveTo, curveTo, closePath and endPath.
    """

    kind: ClassVar[ShapeKind]

    def intersect(self, other: "GeometricShape") -> "Intersection":
        """Intersect this shape with another one.

        Raises:
            UnsupportedShapePairError: If no routine exists for the two kinds
        """
        from planegeom.core.intersection import intersect

        return intersect(self, other)

    @abstractmethod
    def draw(self, pen: AbstractPen) -> None:
        """Emit the outline of this shape into a pen."""

    @abstractmethod
    def scale(
        self, factor_x: float, factor_y: float, center: Vector2 | None = None
    ) -> "GeometricShape":
        """Scale in place around center (a shape specific pivot if omitted)."""

    @abstractmethod
    def clone(self, deep: bool = False) -> "GeometricShape":
        """Return a copy; deep copies also duplicate contained point lists."""

    @abstractmethod
    def get_bounding_rect(self) -> "Rectangle":
        """Axis-aligned bounding rectangle."""

    def __str__(self) -> str:
        return self.kind.value
