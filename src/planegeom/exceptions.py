"""Exception hierarchy for Planegeom."""


class PlaneGeomError(Exception):
    """Base exception for all Planegeom errors."""

    pass


class GeometryError(PlaneGeomError):
    """Errors in geometric calculations.

    Raised for invalid configurations only. Expected empty outcomes such as
    "no intersection" are returned as empty values, never raised.
    """

    pass


class UnsupportedShapePairError(GeometryError):
    """No intersection routine exists for the given pair of shape kinds."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Unsupported shape pair for intersection: {first} / {second}")


class EigenSolveError(GeometryError):
    """The characteristic polynomial did not yield two eigenvalues."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 2 eigenvalues but got {count}")


class SteinerConfigurationError(GeometryError):
    """Steiner chain parameters do not describe a valid nested configuration."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid Steiner chain configuration: {reason}")


class ShapeParseError(PlaneGeomError):
    """A textual shape description could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse shape '{text}': {reason}")


class ExportError(PlaneGeomError):
    """Error writing an exported drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export '{path}': {reason}")
