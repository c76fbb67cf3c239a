"""
markup_layout - minimal rich-text layout engine.

Lays out a small subset of HTML or Markdown (paragraphs, headings, bold,
italic, superscript, subscript and horizontal rules) as positioned draw
commands on a bounded surface, wrapping lines greedily at the right edge.

Quick Start:
    from markup_layout import LayoutEngine, RecordingSurface, parse_html

    surface = RecordingSurface.of_size(200, 100)
    end = LayoutEngine().layout(surface, parse_html("<p>Hello <b>world</b></p>"))
"""

from .version import __version__, __version_info__

from .exceptions import (
    ConfigError,
    FontResolutionError,
    LayoutError,
    MalformedInputError,
    MarkupLayoutError,
    ParsingError,
    UnsupportedElementError,
)
from .config import HeadingStyle, LayoutConfig
from .engine import Bounds, Font, FontResolver, LayoutContext, LayoutEngine, Point
from .models import Node, NodeKind, Tag
from .parser import parse_html, parse_markdown, parse_markup
from .surfaces import RecordingSurface, ReportLabSurface, Surface
from .api import render_html, render_markdown, render_to_pdf

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigError",
    "FontResolutionError",
    "LayoutError",
    "MalformedInputError",
    "MarkupLayoutError",
    "ParsingError",
    "UnsupportedElementError",
    "HeadingStyle",
    "LayoutConfig",
    "Bounds",
    "Font",
    "FontResolver",
    "LayoutContext",
    "LayoutEngine",
    "Point",
    "Node",
    "NodeKind",
    "Tag",
    "parse_html",
    "parse_markdown",
    "parse_markup",
    "RecordingSurface",
    "ReportLabSurface",
    "Surface",
    "render_html",
    "render_markdown",
    "render_to_pdf",
]
