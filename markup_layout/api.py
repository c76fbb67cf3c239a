"""
High-level API for laying out markup.

Example:
    from markup_layout import render_to_pdf

    end = render_to_pdf("<h1>Title</h1><p>Body text</p>", "out.pdf", width=200, height=120)
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from reportlab.pdfgen import canvas as pdf_canvas

from .config import LayoutConfig
from .engine.geometry import Bounds, Point
from .engine.layout_engine import LayoutEngine
from .parser import parse_html, parse_markdown, parse_markup
from .surfaces.base import Surface
from .surfaces.reportlab_surface import ReportLabSurface

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, BytesIO]


def render_html(
    surface: Surface,
    html: Union[str, bytes],
    config: Optional[LayoutConfig] = None,
    origin: Optional[Point] = None,
) -> Point:
    """Parse ``html`` and lay it out on ``surface``; returns the final cursor position."""
    return LayoutEngine(config).layout(surface, parse_html(html), origin=origin)


def render_markdown(
    surface: Surface,
    text: str,
    config: Optional[LayoutConfig] = None,
    origin: Optional[Point] = None,
) -> Point:
    """Parse Markdown ``text`` and lay it out on ``surface``; returns the final cursor position."""
    return LayoutEngine(config).layout(surface, parse_markdown(text), origin=origin)


def render_to_pdf(
    markup: Union[str, bytes],
    output: OutputTarget,
    width: float,
    height: float,
    fmt: str = "html",
    config: Optional[LayoutConfig] = None,
    margin: float = 0.0,
) -> Point:
    """
    Lay out ``markup`` on a single PDF page of ``width`` x ``height`` points.

    Args:
        markup: HTML or Markdown source
        output: File path or binary stream the PDF is written to
        width: Page width in points
        height: Page height in points
        fmt: ``"html"`` or ``"markdown"``
        config: Layout configuration (defaults to ``LayoutConfig()``)
        margin: Uniform page margin in points

    Returns:
        Final cursor position in page coordinates

    Raises:
        MarkupLayoutError: If parsing or layout fails; nothing is written then
    """
    tree = parse_markup(markup, fmt)
    target = str(output) if isinstance(output, Path) else output
    canvas = pdf_canvas.Canvas(target, pagesize=(width, height))
    bounds = Bounds.from_size(width, height).cropped(margin, margin, -margin, -margin)
    surface = ReportLabSurface(canvas, bounds)

    end = LayoutEngine(config).layout(surface, tree)
    if end.y < bounds.min_y:
        logger.warning("Content overflows the page bottom by %.2f pt", bounds.min_y - end.y)

    canvas.showPage()
    canvas.save()
    logger.info("Wrote PDF page %.0fx%.0f pt", width, height)
    return end
