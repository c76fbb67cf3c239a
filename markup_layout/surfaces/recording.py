"""In-memory surface that records draw calls instead of rendering them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..engine.geometry import Bounds, Point
from ..styles.text_style import LineStyle, TextStyle
from .base import Surface


@dataclass(frozen=True, slots=True)
class FillTextCommand:
    style: TextStyle
    point: Point
    text: str

    @property
    def width(self) -> float:
        return self.style.width(self.text)


@dataclass(frozen=True, slots=True)
class StrokeLineCommand:
    style: LineStyle
    start: Point
    end: Point


DrawCommand = Union[FillTextCommand, StrokeLineCommand]


class RecordingSurface(Surface):
    def __init__(self, bounds: Bounds) -> None:
        self._bounds = bounds
        self.commands: List[DrawCommand] = []

    @classmethod
    def of_size(cls, width: float, height: float) -> "RecordingSurface":
        return cls(Bounds.from_size(width, height))

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def fill_text(self, style: TextStyle, point: Point, text: str) -> None:
        self.commands.append(FillTextCommand(style, point, text))

    def stroke_line(self, style: LineStyle, start: Point, end: Point) -> None:
        self.commands.append(StrokeLineCommand(style, start, end))

    @property
    def text_commands(self) -> List[FillTextCommand]:
        return [c for c in self.commands if isinstance(c, FillTextCommand)]

    @property
    def line_commands(self) -> List[StrokeLineCommand]:
        return [c for c in self.commands if isinstance(c, StrokeLineCommand)]

    @property
    def texts(self) -> List[str]:
        return [c.text for c in self.text_commands]
