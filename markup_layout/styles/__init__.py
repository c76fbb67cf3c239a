"""Text styles and color helpers."""

from .text_style import Font, LineStyle, TextStyle, XAlign, YAlign
from .color_utils import parse_color

__all__ = ["Font", "LineStyle", "TextStyle", "XAlign", "YAlign", "parse_color"]
