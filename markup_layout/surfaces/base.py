"""Base classes and interfaces for drawing surfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..engine.geometry import Bounds, Point
from ..styles.text_style import LineStyle, TextStyle


class Surface(ABC):
    """
    Bounded drawing target the layout engine issues draw calls against.

    Text points are the top-left corner of the run (``TextStyle`` is always
    left/top aligned). Coordinates are y-up.
    """

    @property
    @abstractmethod
    def bounds(self) -> Bounds:
        """Rectangle text is laid out in."""

    @abstractmethod
    def fill_text(self, style: TextStyle, point: Point, text: str) -> None:
        """Draw ``text`` with its top-left corner at ``point``."""

    @abstractmethod
    def stroke_line(self, style: LineStyle, start: Point, end: Point) -> None:
        """Stroke a straight line from ``start`` to ``end``."""

    def measure_width(self, style: TextStyle, text: str) -> float:
        return style.width(text)
