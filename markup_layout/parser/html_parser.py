"""
HTML parser - builds a layout node tree from an HTML fragment or document.

Handles:
- p, h1-h6, b/strong, i/em, sup, sub and hr elements
- html/head/body wrappers as plain containers
- implicit closing of an open paragraph when a new block starts
- unclosed inline elements at the end of a block or of the input

Any other element is kept in the tree as an unsupported node so that the
layout pass fails loudly on it. Comments, doctypes and processing
instructions are dropped.
"""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import List, Union

from ..exceptions import ParsingError
from ..models.node import Node, NodeKind

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

# Starting one of these closes an open <p>.
BLOCK_ELEMENTS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "table", "ul", "ol", "div", "pre"})


class MarkupTreeBuilder(HTMLParser):
    """HTMLParser subclass collecting start/end tags and text into ``Node`` objects."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = Node.document()
        self.stack: List[Node] = [self.root]

    @property
    def current(self) -> Node:
        return self.stack[-1]

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag = tag.lower()
        if tag in BLOCK_ELEMENTS:
            self._close_open_paragraph()
        node = self.current.append(Node.element(tag))
        if tag not in VOID_ELEMENTS:
            self.stack.append(node)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        tag = tag.lower()
        if tag in BLOCK_ELEMENTS:
            self._close_open_paragraph()
        self.current.append(Node.element(tag))

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        if tag in VOID_ELEMENTS:
            return
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth].name == tag:
                # Closing an outer element also closes anything left open inside it.
                del self.stack[depth:]
                return
        logger.debug("Ignoring stray end tag </%s>", tag)

    def handle_data(self, data: str) -> None:
        if not data:
            return
        children = self.current.children
        if children and children[-1].kind is NodeKind.TEXT:
            children[-1].text += data
        else:
            self.current.append(Node.text_node(data))

    def _close_open_paragraph(self) -> None:
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth].name == "p":
                del self.stack[depth:]
                return


def parse_html(markup: Union[str, bytes], encoding: str = "utf-8") -> Node:
    """
    Parse HTML into a document node.

    Args:
        markup: HTML text or encoded bytes
        encoding: Encoding used when ``markup`` is bytes

    Returns:
        Document node whose children follow source order

    Raises:
        ParsingError: If bytes cannot be decoded
    """
    if isinstance(markup, bytes):
        try:
            markup = markup.decode(encoding)
        except UnicodeDecodeError as exc:
            raise ParsingError(f"cannot decode HTML as {encoding}", str(exc)) from exc

    builder = MarkupTreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.root
