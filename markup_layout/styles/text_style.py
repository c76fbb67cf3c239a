"""Text and line styles used while laying out markup."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from reportlab.lib import colors
from reportlab.lib.colors import Color
from reportlab.pdfbase import pdfmetrics


class XAlign(Enum):
    LEFT = "left"


class YAlign(Enum):
    TOP = "top"


@dataclass(frozen=True, slots=True)
class Font:
    """A resolved font face at a point size.

    Instances are produced by ``FontResolver.resolve``; the face name is
    known to be registered with reportlab.
    """

    name: str
    size: float

    def width(self, text: str) -> float:
        if not text:
            return 0.0
        return pdfmetrics.stringWidth(text, self.name, self.size)

    @property
    def ascent(self) -> float:
        return pdfmetrics.getAscent(self.name, self.size)

    def scaled(self, factor: float) -> "Font":
        return replace(self, size=self.size * factor)


@dataclass(frozen=True, slots=True)
class TextStyle:
    font: Font
    color: Color = field(default_factory=lambda: colors.black)
    x_align: XAlign = XAlign.LEFT
    y_align: YAlign = YAlign.TOP

    @property
    def font_name(self) -> str:
        return self.font.name

    @property
    def font_size(self) -> float:
        return self.font.size

    def width(self, text: str) -> float:
        return self.font.width(text)

    def with_font(self, font: Font) -> "TextStyle":
        return replace(self, font=font)


@dataclass(frozen=True, slots=True)
class LineStyle:
    color: Color = field(default_factory=lambda: colors.black)
    width: float = 1.0
