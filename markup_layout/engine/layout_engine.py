"""
LayoutEngine - public entry point for laying out a node tree on a surface.

One engine holds a ``LayoutConfig`` and a ``FontResolver``. Each call to
``layout`` is an independent pass with its own ``LayoutContext``; calls on
the same engine are serialized by a lock.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from ..config import LayoutConfig
from ..exceptions import LayoutError, MalformedInputError
from ..models.node import Node
from ..styles.text_style import TextStyle, XAlign, YAlign
from .font_resolver import FontResolver
from .geometry import Point
from .layout_context import LayoutContext
from .tree_walker import TreeWalker

if TYPE_CHECKING:
    from ..surfaces.base import Surface

logger = logging.getLogger(__name__)


class LayoutEngine:
    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        resolver: Optional[FontResolver] = None,
    ) -> None:
        self.config = config or LayoutConfig()
        self.resolver = resolver or FontResolver(font_files=self.config.font_files)
        self._lock = threading.Lock()

    def layout(self, surface: "Surface", tree: Node, origin: Optional[Point] = None) -> Point:
        """
        Lay out ``tree`` on ``surface`` and return the final cursor position.

        The cursor starts at the top-left corner of the surface bounds, or at
        ``origin`` when given.

        Raises:
            LayoutError: On any failure. ``error.position`` is the cursor
                position when the pass stopped; draw calls already issued
                are not rolled back.
        """
        bounds = surface.bounds
        start = origin if origin is not None else bounds.top_left
        if not bounds.is_valid():
            raise MalformedInputError("surface bounds are inverted", repr(bounds), position=start)

        with self._lock:
            try:
                font = self.resolver.resolve(self.config.font, self.config.font_size)
            except LayoutError as exc:
                exc.position = start
                logger.warning("Layout aborted: %s", exc)
                raise

            style = TextStyle(font=font, color=self.config.color, x_align=XAlign.LEFT, y_align=YAlign.TOP)
            context = LayoutContext(surface, self.config, self.resolver, style, origin=origin)
            logger.debug("Layout pass started at (%.2f, %.2f)", context.cursor.x, context.cursor.y)

            try:
                TreeWalker(context).visit(tree)
            except LayoutError as exc:
                exc.position = context.position
                logger.warning("Layout aborted at (%.2f, %.2f): %s", exc.position.x, exc.position.y, exc)
                raise

            logger.debug("Layout pass finished at (%.2f, %.2f)", context.cursor.x, context.cursor.y)
            return context.position
