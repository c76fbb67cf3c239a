"""Node tree models."""

from .node import Node, NodeKind, Tag

__all__ = ["Node", "NodeKind", "Tag"]
