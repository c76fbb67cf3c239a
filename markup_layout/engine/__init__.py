"""Layout engine: tree walk, line breaking and scoped style state."""

from .geometry import Bounds, Point
from .font_resolver import Font, FontResolver
from .layout_context import Cursor, LayoutContext
from .line_breaker import LineBreaker, normalize_whitespace
from .tree_walker import TreeWalker
from .layout_engine import LayoutEngine

__all__ = [
    "Bounds",
    "Point",
    "Font",
    "FontResolver",
    "Cursor",
    "LayoutContext",
    "LineBreaker",
    "normalize_whitespace",
    "TreeWalker",
    "LayoutEngine",
]
