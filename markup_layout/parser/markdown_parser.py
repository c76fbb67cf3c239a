"""Markdown parser - builds a layout node tree from CommonMark text via markdown-it-py."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..exceptions import ParsingError
from ..models.node import Node, NodeKind
from .html_parser import VOID_ELEMENTS, parse_html

logger = logging.getLogger(__name__)

_OPEN_TAG = re.compile(r"^<([a-zA-Z][a-zA-Z0-9]*)\b[^>]*?(/?)>$")
_CLOSE_TAG = re.compile(r"^</([a-zA-Z][a-zA-Z0-9]*)\s*>$")

_MARKDOWN_PARSER: Optional[MarkdownIt] = None


def _markdown_parser() -> MarkdownIt:
    global _MARKDOWN_PARSER
    if _MARKDOWN_PARSER is None:
        # Inline HTML stays enabled so <sup>/<sub> can be written in Markdown.
        _MARKDOWN_PARSER = MarkdownIt("commonmark", {"html": True, "typographer": False})
    return _MARKDOWN_PARSER


class _TokenTreeBuilder:
    def __init__(self) -> None:
        self.root = Node.document()
        self.stack: List[Node] = [self.root]

    @property
    def current(self) -> Node:
        return self.stack[-1]

    def build(self, tokens: Sequence[Token]) -> Node:
        self._consume(tokens)
        return self.root

    def _consume(self, tokens: Sequence[Token]) -> None:
        for token in tokens:
            if token.nesting == 1:
                self.stack.append(self.current.append(Node.element(token.tag or token.type)))
            elif token.nesting == -1:
                self._close(token.tag or token.type)
            else:
                self._leaf(token)

    def _leaf(self, token: Token) -> None:
        kind = token.type
        if kind == "inline":
            self._consume(token.children or [])
        elif kind == "text":
            self._text(token.content)
        elif kind in ("softbreak", "hardbreak"):
            self._text("\n")
        elif kind == "code_inline":
            self._text(token.content)
        elif kind == "hr":
            self.current.append(Node.element("hr"))
        elif kind == "html_inline":
            self._html_inline(token.content)
        elif kind == "html_block":
            for child in parse_html(token.content).children:
                self.current.append(child)
        else:
            # fence, code_block, image and friends have no layout handler.
            self.current.append(Node.element(token.tag or token.type))

    def _html_inline(self, content: str) -> None:
        content = content.strip()
        # Comments, declarations, CDATA and processing instructions draw nothing.
        if content.startswith(("<!", "<?")):
            return
        match = _CLOSE_TAG.match(content)
        if match:
            self._close(match.group(1).lower())
            return
        match = _OPEN_TAG.match(content)
        if not match:
            raise ParsingError("unrecognized inline HTML", content)
        name = match.group(1).lower()
        node = self.current.append(Node.element(name))
        if not match.group(2) and name not in VOID_ELEMENTS:
            self.stack.append(node)

    def _close(self, name: str) -> None:
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth].name == name:
                del self.stack[depth:]
                return
        logger.debug("Ignoring stray closing token for %s", name)

    def _text(self, text: str) -> None:
        if not text:
            return
        children = self.current.children
        if children and children[-1].kind is NodeKind.TEXT:
            children[-1].text += text
        else:
            self.current.append(Node.text_node(text))


def parse_markdown(text: str) -> Node:
    """
    Parse CommonMark text into a document node.

    Paragraphs, ATX/setext headings, thematic breaks, emphasis, strong
    emphasis and inline code map to layout nodes; inline ``<sup>``/``<sub>``
    HTML is honoured. Lists, block quotes, links, images and code blocks
    become unsupported nodes.
    """
    if not isinstance(text, str):
        raise ParsingError("markdown input must be text", type(text).__name__)
    tokens = _markdown_parser().parse(text)
    return _TokenTreeBuilder().build(tokens)
