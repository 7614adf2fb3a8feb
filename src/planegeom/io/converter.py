"""Converters between fontTools pen recordings and domain paths.

Shapes draw into any fontTools pen. Recording that output with a
RecordingPen and converting it back gives MixedPath objects, one per
sub-path, which is the inverse of MixedPath.draw.
"""

from typing import Any

from fontTools.pens.recordingPen import RecordingPen

from planegeom.domain.mixed_path import MixedPath, MixedPathPoint


def shape_to_mixed_paths(shape: Any) -> list[MixedPath]:
    """Draw a shape into a RecordingPen and convert the recording.

    Args:
        shape: Anything with a draw(pen) method

    Returns:
        One MixedPath per sub-path
    """
    pen = RecordingPen()
    shape.draw(pen)
    return recording_to_mixed_paths(pen.value)


def recording_to_mixed_paths(recording: list[tuple[str, tuple[Any, ...]]]) -> list[MixedPath]:
    """Convert RecordingPen recording to list of MixedPath objects.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # last point None if all off-curve
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))
    - ('closePath', ()) or ('endPath', ())

    A closed sub-path whose last anchor repeats its first anchor stores
    that anchor once.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of MixedPath objects
    """
    paths: list[MixedPath] = []
    current: MixedPath | None = None

    def finish(closed: bool) -> None:
        nonlocal current
        if current is None or not current.points:
            current = None
            return
        current.closed = closed
        if closed and len(current.points) > 1:
            first, last = current.points[0], current.points[-1]
            if not first.is_control_point and last == first:
                current.points.pop()
        paths.append(current)
        current = None

    for command, args in recording:
        if command == "moveTo":
            finish(False)
            current = MixedPath()
            x, y = args[0]
            current.points.append(MixedPathPoint(x, y))

        elif command == "lineTo":
            if current is None:
                current = MixedPath()
            x, y = args[0]
            current.points.append(MixedPathPoint(x, y))

        elif command in ("qCurveTo", "curveTo"):
            if current is None:
                current = MixedPath()
            *controls, end = args
            for x, y in controls:
                current.points.append(MixedPathPoint(x, y, True))
            if end is not None:
                current.points.append(MixedPathPoint(end[0], end[1]))

        elif command == "closePath":
            finish(True)

        elif command == "endPath":
            finish(False)

    finish(False)
    return paths

