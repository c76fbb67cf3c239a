"""Geometry primitives for layout calculations (y-up coordinates, points)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Bounds:
    """Rectangle given by its lower-left and upper-right corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_size(cls, width: float, height: float, x: float = 0.0, y: float = 0.0) -> "Bounds":
        return cls(float(x), float(y), float(x) + float(width), float(y) + float(height))

    @property
    def top_left(self) -> Point:
        return Point(self.min_x, self.max_y)

    def is_valid(self) -> bool:
        return self.min_x <= self.max_x and self.min_y <= self.max_y

    def cropped(self, left: float = 0.0, bottom: float = 0.0, right: float = 0.0, top: float = 0.0) -> "Bounds":
        """Shrink the rectangle.

        Positive ``left``/``bottom`` move those edges inwards, negative
        ``right``/``top`` move those edges inwards.
        """
        return Bounds(
            self.min_x + left,
            self.min_y + bottom,
            self.max_x + right,
            self.max_y + top,
        )
