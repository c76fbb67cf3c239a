"""Surface drawing onto a reportlab PDF canvas."""

from __future__ import annotations

import logging
from typing import Optional

from reportlab.pdfgen import canvas as pdf_canvas

from ..engine.geometry import Bounds, Point
from ..styles.text_style import LineStyle, TextStyle
from .base import Surface

logger = logging.getLogger(__name__)


class ReportLabSurface(Surface):
    """
    Draws on a ``reportlab.pdfgen.canvas.Canvas``.

    ``bounds`` defaults to the whole page. reportlab draws strings on their
    baseline, so the top-left text point is shifted down by the font ascent.
    """

    def __init__(self, canvas: pdf_canvas.Canvas, bounds: Optional[Bounds] = None) -> None:
        self.canvas = canvas
        if bounds is None:
            width, height = canvas._pagesize
            bounds = Bounds.from_size(width, height)
        self._bounds = bounds

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def cropped(self, left: float = 0.0, bottom: float = 0.0, right: float = 0.0, top: float = 0.0) -> "ReportLabSurface":
        return ReportLabSurface(self.canvas, self._bounds.cropped(left, bottom, right, top))

    def fill_text(self, style: TextStyle, point: Point, text: str) -> None:
        font = style.font
        baseline = point.y - font.ascent
        self.canvas.saveState()
        try:
            self.canvas.setFillColor(style.color)
            self.canvas.setFont(font.name, font.size)
            self.canvas.drawString(point.x, baseline, text)
        finally:
            self.canvas.restoreState()

    def stroke_line(self, style: LineStyle, start: Point, end: Point) -> None:
        self.canvas.saveState()
        try:
            self.canvas.setStrokeColor(style.color)
            self.canvas.setLineWidth(style.width)
            self.canvas.line(start.x, start.y, end.x, end.y)
        finally:
            self.canvas.restoreState()

    def measure_width(self, style: TextStyle, text: str) -> float:
        return self.canvas.stringWidth(text, style.font.name, style.font.size)
