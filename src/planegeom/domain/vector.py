"""Two-dimensional point/vector value type.

Vector2 is the foundation of every other geometric type. It is immutable:
every operation returns a new instance, so points can be shared freely
between shapes without aliasing surprises.
"""

import math
from dataclasses import dataclass
from typing import Any

from planegeom.tolerances import DEFAULT_SQUARED_SNAP


@dataclass(frozen=True, slots=True)
class Vector2:
    """A point or direction in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def between(cls, start: "Vector2", end: "Vector2") -> "Vector2":
        """Create the direction vector pointing from start to end."""
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def from_polar(cls, angle: float, length: float) -> "Vector2":
        """Create a vector from an angle (radians) and a length."""
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector2":
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def angle(self) -> float:
        """Angle of the vector in radians, measured from the positive x axis."""
        return math.atan2(self.y, self.x)

    def squared_distance_to(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_to(self, other: "Vector2") -> float:
        return math.sqrt(self.squared_distance_to(other))

    def angle_to(self, other: "Vector2") -> float:
        """Angle of the direction from this point towards other."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        """Linear interpolation; t=0 gives self, t=1 gives other."""
        return Vector2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def snaps(self, other: "Vector2", squared_snap_distance: float = DEFAULT_SQUARED_SNAP) -> bool:
        """Check whether other lies within the snap distance of this point."""
        return self.squared_distance_to(other) < squared_snap_distance

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        return self.x * other.y - self.y * other.x

    def angle_between(self, other: "Vector2") -> float:
        """Unsigned angle between this vector and other, in radians."""
        denominator = self.length * other.length
        if denominator == 0:
            return 0.0
        cosine = max(-1.0, min(1.0, self.dot(other) / denominator))
        return math.acos(cosine)

    def multiply_xy(self, fx: float, fy: float) -> "Vector2":
        """Scale each axis independently."""
        return Vector2(self.x * fx, self.y * fy)

    def add_polar(self, angle: float, length: float) -> "Vector2":
        """Offset this point by length along the given angle."""
        return Vector2(self.x + math.cos(angle) * length, self.y + math.sin(angle) * length)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length
        if length == 0:
            return Vector2()
        return Vector2(self.x / length, self.y / length)

    def with_length(self, length: float) -> "Vector2":
        """Vector in the same direction with the given length."""
        current = self.length
        if current == 0:
            return self
        return Vector2(self.x / current * length, self.y / current * length)

    def orth(self) -> "Vector2":
        """Rotate by 90 degrees counter-clockwise without normalizing."""
        return Vector2(-self.y, self.x)

    def normal(self) -> "Vector2":
        """Unit normal (90 degrees counter-clockwise); zero for the zero vector."""
        length = self.length
        if length == 0:
            return Vector2()
        return Vector2(-self.y / length, self.x / length)

    def mirror(self, center: "Vector2") -> "Vector2":
        """Point reflection of this point through center."""
        return Vector2(2 * center.x - self.x, 2 * center.y - self.y)

    def reflect(self, normal: "Vector2") -> "Vector2":
        """Reflect this direction on a surface with the given unit normal."""
        dp = 2 * self.dot(normal)
        return Vector2(self.x - normal.x * dp, self.y - normal.y * dp)

    def rotate_by(self, angle: float) -> "Vector2":
        """Rotate around the origin by angle radians."""
        ca = math.cos(angle)
        sa = math.sin(angle)
        return Vector2(self.x * ca - self.y * sa, self.x * sa + self.y * ca)

    def rotate_around(self, angle: float, pivot: "Vector2") -> "Vector2":
        return (self - pivot).rotate_by(angle) + pivot

    def project(self, a: "Vector2", b: "Vector2") -> "Vector2":
        """Orthogonal projection of this point onto the infinite line ab."""
        squared = a.squared_distance_to(b)
        if squared == 0:
            return a
        r = ((self.x - a.x) * (b.x - a.x) + (self.y - a.y) * (b.y - a.y)) / squared
        return a.lerp(b, r)

    def is_left(self, p0: "Vector2", p1: "Vector2") -> float:
        """Signed area test: positive if this point lies left of the line p0->p1."""
        return (p1.x - p0.x) * (self.y - p0.y) - (self.x - p0.x) * (p1.y - p0.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector2":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Vector2 instance
        """
        return cls(x=data["x"], y=data["y"])
