"""Parsers turning markup text into layout node trees."""

from typing import Union

from ..exceptions import ParsingError
from ..models.node import Node
from .html_parser import MarkupTreeBuilder, parse_html
from .markdown_parser import parse_markdown

FORMATS = ("html", "markdown")


def parse_markup(markup: Union[str, bytes], fmt: str = "html") -> Node:
    """Parse ``markup`` in the given format (``"html"`` or ``"markdown"``)."""
    fmt = fmt.lower()
    if fmt == "html":
        return parse_html(markup)
    if fmt in ("markdown", "md"):
        if isinstance(markup, bytes):
            try:
                markup = markup.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParsingError("cannot decode markdown as utf-8", str(exc)) from exc
        return parse_markdown(markup)
    raise ParsingError(f"unsupported markup format '{fmt}'", ", ".join(FORMATS))


__all__ = ["FORMATS", "MarkupTreeBuilder", "parse_html", "parse_markdown", "parse_markup"]
