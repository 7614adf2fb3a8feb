"""SVG export of shapes.

Shapes are drawn through fontTools' SVGPathPen, one <path> element per
shape. The view box covers the bounding rectangles of all shapes plus a
margin.
"""

from pathlib import Path

from fontTools.pens.svgPathPen import SVGPathPen

from planegeom.config import RenderConfig
from planegeom.domain.rectangle import Rectangle
from planegeom.domain.shape import GeometricShape
from planegeom.exceptions import ExportError


def _format_number(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def shape_to_path_data(shape: GeometricShape) -> str:
    """SVG path data ("d" attribute) for a shape."""
    pen = SVGPathPen(None, ntos=_format_number)
    shape.draw(pen)
    return pen.getCommands()


class SvgWriter:
    """Collects shapes and writes them as an SVG document.

    Example:
        writer = SvgWriter(Path("chain.svg"))
        writer.add_all(steiner.circles)
        writer.save()
    """

    def __init__(self, output_path: Path, config: RenderConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the SVG will be saved
            config: Stroke, fill and size settings (defaults if None)
        """
        self._output_path = output_path
        self._config = config or RenderConfig()
        self._shapes: list[GeometricShape] = []

    @property
    def shapes(self) -> list[GeometricShape]:
        return list(self._shapes)

    def add(self, shape: GeometricShape) -> None:
        self._shapes.append(shape)

    def add_all(self, shapes: list[GeometricShape]) -> None:
        self._shapes.extend(shapes)

    def get_view_box(self) -> Rectangle:
        """Bounds of all shapes grown by the configured margin.

        Zero-width or zero-height bounds (a horizontal segment, say) still
        count, so the extremes are collected directly instead of through
        Rectangle.union, which ignores empty operands.
        """
        if not self._shapes:
            return Rectangle(0, 0, 1, 1)

        rects = [shape.get_bounding_rect() for shape in self._shapes]
        min_x = min(r.x for r in rects)
        min_y = min(r.y for r in rects)
        max_x = max(r.right for r in rects)
        max_y = max(r.bottom for r in rects)

        size = max(max_x - min_x, max_y - min_y)
        if size == 0:
            size = 1.0
        pad = size * self._config.margin
        return Rectangle(min_x - pad, min_y - pad, max_x - min_x + 2 * pad, max_y - min_y + 2 * pad)

    def render(self) -> str:
        """Render the collected shapes to an SVG document string."""
        box = self.get_view_box()
        cfg = self._config
        view_box = " ".join(_format_number(v) for v in (box.x, box.y, box.width, box.height))
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{cfg.pixel_size}" '
            f'height="{cfg.pixel_size}" viewBox="{view_box}">',
            f'  <g fill="{cfg.fill}" stroke="{cfg.stroke}" '
            f'stroke-width="{_format_number(cfg.stroke_width)}">',
        ]
        for shape in self._shapes:
            data = shape_to_path_data(shape)
            if data:
                lines.append(f'    <path class="{shape.kind.value}" d="{data}"/>')
        lines.append("  </g>")
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def save(self) -> Path:
        """Write the SVG file.

        Returns:
            The output path

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            self._output_path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise ExportError(str(self._output_path), str(e)) from e
        return self._output_path
