"""
Node tree consumed by the layout engine.

Parser adapters build these nodes; the engine only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(Enum):
    DOCUMENT = "document"
    TEXT = "text"
    ELEMENT = "element"
    ERROR = "error"


class Tag(Enum):
    """Closed set of element tags the engine knows how to lay out."""

    PARAGRAPH = "p"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    BOLD = "b"
    ITALIC = "i"
    SUPERSCRIPT = "sup"
    SUBSCRIPT = "sub"
    RULE = "hr"
    CONTAINER = "container"
    UNSUPPORTED = "unsupported"

    @property
    def heading_level(self) -> Optional[int]:
        return _HEADING_LEVELS.get(self)

    @classmethod
    def from_name(cls, name: str) -> "Tag":
        """Map an HTML tag name to a ``Tag``; unknown names map to UNSUPPORTED."""
        return _TAG_NAMES.get(name.lower(), cls.UNSUPPORTED)


_HEADING_LEVELS = {
    Tag.H1: 1,
    Tag.H2: 2,
    Tag.H3: 3,
    Tag.H4: 4,
    Tag.H5: 5,
    Tag.H6: 6,
}

_TAG_NAMES = {
    "p": Tag.PARAGRAPH,
    "h1": Tag.H1,
    "h2": Tag.H2,
    "h3": Tag.H3,
    "h4": Tag.H4,
    "h5": Tag.H5,
    "h6": Tag.H6,
    "b": Tag.BOLD,
    "strong": Tag.BOLD,
    "i": Tag.ITALIC,
    "em": Tag.ITALIC,
    "sup": Tag.SUPERSCRIPT,
    "sub": Tag.SUBSCRIPT,
    "hr": Tag.RULE,
    "html": Tag.CONTAINER,
    "head": Tag.CONTAINER,
    "body": Tag.CONTAINER,
}


@dataclass(slots=True)
class Node:
    kind: NodeKind
    tag: Optional[Tag] = None
    name: str = ""
    text: str = ""
    children: List["Node"] = field(default_factory=list)

    @classmethod
    def document(cls, *children: "Node") -> "Node":
        return cls(NodeKind.DOCUMENT, name="#document", children=list(children))

    @classmethod
    def text_node(cls, text: str) -> "Node":
        return cls(NodeKind.TEXT, name="#text", text=text)

    @classmethod
    def element(cls, name_or_tag, *children: "Node") -> "Node":
        """Build an element from a tag name (``"p"``, ``"strong"``...) or a ``Tag``."""
        if isinstance(name_or_tag, Tag):
            tag = name_or_tag
            name = tag.value
        else:
            name = str(name_or_tag).lower()
            tag = Tag.from_name(name)
        return cls(NodeKind.ELEMENT, tag=tag, name=name, children=list(children))

    @classmethod
    def error(cls, message: str) -> "Node":
        return cls(NodeKind.ERROR, name="#error", text=message)

    def append(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def iter(self) -> Iterator["Node"]:
        """Depth-first, document-order iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter()

    def text_content(self) -> str:
        return "".join(n.text for n in self.iter() if n.kind is NodeKind.TEXT)

    def __repr__(self) -> str:
        if self.kind is NodeKind.TEXT:
            return f"Node(text={self.text!r})"
        return f"Node({self.kind.value}, {self.name!r}, children={len(self.children)})"
