"""
Per-pass layout state: the cursor and the current text style.

A ``LayoutContext`` is created at the start of each layout pass and thrown
away at its end. Scoped style and cursor overrides are context managers that
always restore the prior state, including when the body raises.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from ..config import LayoutConfig
from ..styles.text_style import LineStyle, TextStyle
from .font_resolver import FontResolver
from .geometry import Bounds, Point

if TYPE_CHECKING:
    from ..surfaces.base import Surface

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Cursor:
    x: float
    y: float
    line_height: float = 0.0

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


class LayoutContext:
    def __init__(
        self,
        surface: "Surface",
        config: LayoutConfig,
        resolver: FontResolver,
        style: TextStyle,
        origin: Optional[Point] = None,
    ) -> None:
        self.surface = surface
        self.config = config
        self.resolver = resolver
        self.bounds: Bounds = surface.bounds
        self.style = style
        start = origin if origin is not None else self.bounds.top_left
        self.cursor = Cursor(start.x, start.y, line_height=style.font_size)
        self.bold = False
        self.italic = False

    @property
    def position(self) -> Point:
        return self.cursor.position

    @property
    def base_size(self) -> float:
        return self.config.font_size

    @property
    def font_size(self) -> float:
        return self.style.font_size

    @property
    def at_left_margin(self) -> bool:
        return self.cursor.x == self.bounds.min_x

    @property
    def remaining_width(self) -> float:
        return self.bounds.max_x - self.cursor.x

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------
    def carriage_return(self) -> None:
        self.cursor.x = self.bounds.min_x

    def move_down(self, dy: float) -> None:
        self.cursor.y -= dy

    def advance(self, dx: float) -> None:
        self.cursor.x += dx

    def set_line_height(self, height: float) -> None:
        self.cursor.line_height = height

    def new_line(self) -> None:
        self.cursor.x = self.bounds.min_x
        self.cursor.y -= self.cursor.line_height

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def measure(self, text: str) -> float:
        return self.surface.measure_width(self.style, text)

    def fill_text(self, text: str) -> None:
        self.surface.fill_text(self.style, self.cursor.position, text)

    def stroke_rule(self, y: float, width: float) -> None:
        style = LineStyle(color=self.config.hr_color, width=width)
        self.surface.stroke_line(style, Point(self.bounds.min_x, y), Point(self.bounds.max_x, y))

    # ------------------------------------------------------------------
    # Scoped overrides
    # ------------------------------------------------------------------
    @contextmanager
    def scaled_font(self, scale: float) -> Iterator[TextStyle]:
        """Multiply the font size by ``scale`` for the duration of the block."""
        saved = self.style
        self.style = saved.with_font(saved.font.scaled(scale))
        try:
            yield self.style
        finally:
            self.style = saved

    @contextmanager
    def font_family(
        self,
        name: str,
        *,
        bold: Optional[bool] = None,
        italic: Optional[bool] = None,
    ) -> Iterator[TextStyle]:
        """
        Swap the font face, keeping size and color, for the duration of the block.

        The face is resolved before the block runs, so a
        ``FontResolutionError`` leaves the style untouched and skips the body.
        """
        font = self.resolver.resolve(name, self.style.font_size)
        saved_style, saved_bold, saved_italic = self.style, self.bold, self.italic
        self.style = saved_style.with_font(font)
        if bold is not None:
            self.bold = bold
        if italic is not None:
            self.italic = italic
        try:
            yield self.style
        finally:
            self.style = saved_style
            self.bold, self.italic = saved_bold, saved_italic

    @contextmanager
    def baseline_shift(self, dy: float) -> Iterator[None]:
        """
        Raise (positive ``dy``) or lower the cursor baseline for the block.

        When no line break happened inside the block the cursor returns to
        exactly its prior y; otherwise the shift is undone relative to the
        new line.
        """
        before = self.cursor.y
        self.cursor.y = before + dy
        shifted = self.cursor.y
        try:
            yield
        finally:
            if self.cursor.y == shifted:
                self.cursor.y = before
            else:
                self.cursor.y -= dy
