"""Recursive visitor turning a node tree into cursor moves and draw calls."""

from __future__ import annotations

import logging

from ..config import HeadingStyle, LayoutConfig
from ..exceptions import MalformedInputError, UnsupportedElementError
from ..models.node import Node, NodeKind, Tag
from .layout_context import LayoutContext
from .line_breaker import LineBreaker

logger = logging.getLogger(__name__)


class TreeWalker:
    """
    Dispatches each node to its handler.

    Errors propagate as exceptions and abort the walk at the failing node;
    the scoped style overrides unwind on the way out.
    """

    def __init__(self, context: LayoutContext) -> None:
        self.context = context
        self.line_breaker = LineBreaker(context)

    @property
    def config(self) -> LayoutConfig:
        return self.context.config

    def visit(self, node: Node) -> None:
        kind = node.kind
        if kind is NodeKind.TEXT:
            self.line_breaker.write_lines(node.text)
        elif kind is NodeKind.DOCUMENT:
            self.visit_children(node)
        elif kind is NodeKind.ELEMENT:
            self.element(node)
        elif kind is NodeKind.ERROR:
            raise MalformedInputError("node error", node.text or None)
        else:
            raise MalformedInputError(f"invalid node kind {kind!r}")

    def visit_children(self, node: Node) -> None:
        for child in node.children:
            self.visit(child)

    def element(self, node: Node) -> None:
        tag = node.tag
        if tag is Tag.PARAGRAPH:
            self.paragraph(node)
        elif tag is not None and tag.heading_level is not None:
            self.heading(node, tag.heading_level)
        elif tag is Tag.BOLD:
            self.bold(node)
        elif tag is Tag.ITALIC:
            self.italic(node)
        elif tag is Tag.SUPERSCRIPT:
            self.subsuperscript(node, self.config.superscript_position)
        elif tag is Tag.SUBSCRIPT:
            self.subsuperscript(node, self.config.subscript_position)
        elif tag is Tag.RULE:
            self.rule()
        elif tag is Tag.CONTAINER:
            self.visit_children(node)
        elif tag is Tag.UNSUPPORTED:
            raise UnsupportedElementError(node.name or "unknown")
        else:
            raise MalformedInputError("element node without a tag", node.name or None)

    def paragraph(self, node: Node) -> None:
        ctx = self.context
        ctx.carriage_return()
        ctx.move_down(ctx.base_size * self.config.paragraph_margin_top)
        ctx.set_line_height(ctx.font_size)
        self.visit_children(node)
        ctx.carriage_return()
        ctx.move_down(ctx.base_size * (1 + self.config.paragraph_margin_bottom))

    def heading(self, node: Node, level: int) -> None:
        heading = self.config.heading(level)
        if heading.bold:
            name = self.config.bold_italic_font if self.context.italic else self.config.bold_font
            with self.context.font_family(name, bold=True):
                self._heading_body(node, heading)
        else:
            self._heading_body(node, heading)

    def _heading_body(self, node: Node, heading: HeadingStyle) -> None:
        ctx = self.context
        ctx.carriage_return()
        ctx.move_down(ctx.base_size * heading.margin_top)
        with ctx.scaled_font(heading.scale):
            ctx.set_line_height(ctx.font_size)
            self.visit_children(node)
            ctx.move_down(ctx.font_size * heading.margin_bottom)
        ctx.carriage_return()
        ctx.move_down(ctx.base_size * heading.margin_bottom)

    def bold(self, node: Node) -> None:
        name = self.config.bold_italic_font if self.context.italic else self.config.bold_font
        with self.context.font_family(name, bold=True):
            self.visit_children(node)

    def italic(self, node: Node) -> None:
        name = self.config.bold_italic_font if self.context.bold else self.config.italic_font
        with self.context.font_family(name, italic=True):
            self.visit_children(node)

    def subsuperscript(self, node: Node, position: float) -> None:
        ctx = self.context
        with ctx.scaled_font(self.config.super_sub_scale):
            with ctx.baseline_shift(ctx.font_size * position):
                self.visit_children(node)

    def rule(self) -> None:
        ctx = self.context
        ctx.move_down(ctx.base_size * self.config.hr_margin_top)
        ctx.stroke_rule(ctx.cursor.y, ctx.base_size * self.config.hr_scale)
        ctx.move_down(ctx.base_size * self.config.hr_margin_bottom)
